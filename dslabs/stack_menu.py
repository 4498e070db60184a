"""Interactive menus over stacks: integer stacks, character stacks, palindromes."""

from __future__ import annotations

import sys
from functools import partial
from typing import Callable, Optional

from dslabs.stacks import (
    BoundedStack,
    LinkedStack,
    StackOverflowError,
    StackUnderflowError,
    balanced_parentheses,
    infix_to_postfix,
    infix_to_prefix,
    is_palindrome,
)

Reader = Callable[[], str]
Writer = Callable[[str], object]


class _BadInput(Exception):
    """Raised when the user types something that is not a number."""


def _read_int(read: Reader) -> int:
    text = read().strip()
    try:
        return int(text)
    except ValueError:
        raise _BadInput(text) from None


def _read_word(read: Reader) -> str:
    """First whitespace-separated token, skipping blank lines."""
    while True:
        tokens = read().split()
        if tokens:
            return tokens[0]


def _read_char(read: Reader) -> str:
    return _read_word(read)[0]


def _yes_no(flag: bool) -> str:
    return "Sí" if flag else "No"


# -- integer stacks ----------------------------------------------------------

_INT_MENU = (
    "\n---------------------- MENÚ ----------------------------"
    "\n=========================================================="
    "\n1. Apilar en Pila 1"
    "\n2. Desapilar en Pila 1"
    "\n3. Mostrar Pila 1"
    "\n4. Contar elementos de Pila 1"
    "\n5. Buscar un elemento en Pila 1"
    "\n6. Comparar Pila 1 con Pila 2"
    "\n7. Apilar en Pila 2"
    "\n8. Desapilar en Pila 2"
    "\n9. Mostrar Pila 2"
    "\n10. Contar elementos de Pila 2"
    "\n11. Buscar un elementos en Pila 2"
    "\n12. Comparar Pila 2 con Pila 1"
    "\n13. Salir"
    "\n========================================================="
    "\n\n\t\t\tOpción: "
)

_INT_HEADER = (
    "\n----------------------------------------"
    "\n           ELEMENTOS DE LA PILA:        "
    "\n========================================\n\n"
)


def _int_push(which, stacks, read, out):
    out(f"Ingrese dato a apilar en Pila {which + 1}: ")
    stacks[which].push(_read_int(read))


def _int_pop(which, stacks, read, out):
    try:
        stacks[which].pop()
    except StackUnderflowError:
        out("Pila vacía, no se puede sacar elemento.\n")


def _int_show(which, stacks, read, out):
    stack = stacks[which]
    if not stack:
        out("Pila vacía.\n")
        return
    out(_INT_HEADER + "".join(f"{value} " for value in stack) + "\n")


def _int_count(which, stacks, read, out):
    out(f"Cantidad de elementos en Pila {which + 1}: {len(stacks[which])}\n")


def _int_search(which, stacks, read, out):
    out(f"Ingrese el elemento a buscar en Pila {which + 1}: ")
    value = _read_int(read)
    out(f"¿Está el {value}?: {_yes_no(value in stacks[which])}\n")


def _int_compare(which, stacks, read, out):
    if not stacks[which]:
        out("Pila vacia...\n")
    elif stacks[which] == stacks[1 - which]:
        out("Las pilas son iguales.\n")
    else:
        out("Las pilas son diferentes.\n")


_INT_ACTIONS = {
    base + offset: partial(action, which)
    for which, base in ((0, 1), (1, 7))
    for offset, action in enumerate(
        (_int_push, _int_pop, _int_show, _int_count, _int_search, _int_compare)
    )
}


def run_stack_menu(
    read: Reader = input, write: Optional[Writer] = None
) -> tuple[LinkedStack, LinkedStack]:
    """Menu over two integer stacks; runs until option 13 or end of input."""
    out = write if write is not None else sys.stdout.write
    stacks = (LinkedStack(), LinkedStack())
    while True:
        out(_INT_MENU)
        try:
            option = _read_int(read)
            if option == 13:
                out("Programa finalizado.\n")
                return stacks
            action = _INT_ACTIONS.get(option)
            if action is None:
                out("Opción inválida.\n")
                continue
            action(stacks, read, out)
        except _BadInput:
            out("Opción inválida.\n")
        except EOFError:
            return stacks


# -- character stacks and expressions ----------------------------------------

_CHAR_MENU = (
    "\n----------------------- MENÚ ----------------------------"
    "\n=========================================================="
    "\n1. Apilar en Pila 1                                      ="
    "\n2. Desapilar en Pila 1                                   ="
    "\n3. Mostrar Pila 1                                        ="
    "\n4. Contar elementos de Pila 1                            ="
    "\n5. Buscar un elemento en Pila 1                          ="
    "\n6. Comparar Pila 1 con Pila 2                            ="
    "\n7. Apilar en Pila 2                                      ="
    "\n8. Desapilar en Pila 2                                   ="
    "\n9. Mostrar Pila 2                                        ="
    "\n10. Contar elementos de Pila 2                           ="
    "\n11. Buscar un elemento en Pila 2                         ="
    "\n12. Comparar Pila 2 con Pila 1                           ="
    "\n13. Verificar Palíndromo                                 ="
    "\n14. Convertir a posfija                                  ="
    "\n15. Convertir a prefija                                  ="
    "\n16. Validar Paréntesis                                   ="
    "\n17. Salir                                                ="
    "\n----------------------------------------------------------"
    "\n\tOpción: "
)

_COUNT_LABELS = ("Cantidad de elementos en Pila 1:", "Cantidad de elementos en Pila 2: ")


def _char_push(which, stacks, read, out):
    out(f"Ingrese dato a apilar en Pila {which + 1}: ")
    try:
        stacks[which].push(_read_char(read))
    except StackOverflowError:
        out("Desbordamiento - Pila llena. No se puede agregar más elementos.\n")


def _char_pop(which, stacks, read, out):
    try:
        stacks[which].pop()
    except StackUnderflowError:
        out("Subdesbordamiento - Pila vacía. No se puede sacar elemento.\n")


def _char_show(which, stacks, read, out):
    stack = stacks[which]
    if stack.is_empty():
        out("Pila vacía.\n")
        return
    out("Elementos de la pila (de arriba hacia abajo):\n")
    out("".join(f"{value}\n" for value in stack) + "\n")


def _char_count(which, stacks, read, out):
    out(f"{_COUNT_LABELS[which]}{len(stacks[which])}\n")


def _char_search(which, stacks, read, out):
    out(f"Ingrese el elemento a buscar en Pila {which + 1}: ")
    value = _read_char(read)
    out(f"¿Está el {value}?: {_yes_no(value in stacks[which])}\n")


def _char_compare(which, stacks, read, out):
    out(f"Las pilas son iguales?: {_yes_no(stacks[which] == stacks[1 - which])}\n")


def _palindrome(stacks, read, out):
    out("ingrese una palabra: ")
    if is_palindrome(_read_word(read)):
        out("es palindromo\n")
    else:
        out("no es palindromo\n")


def _postfix(stacks, read, out):
    out("ingrese una expresión: ")
    out(infix_to_postfix(_read_word(read)) + "\n")


def _prefix(stacks, read, out):
    out("ingrese una expresión: ")
    out(infix_to_prefix(_read_word(read)) + "\n")


def _parentheses(stacks, read, out):
    out("Ingrese la operación matemática: ")
    expression = _read_word(read)
    verdict = "CORRECTA" if balanced_parentheses(expression) else "INCORRECTA"
    out(f"La expresión matemática {expression} es {verdict}.\n")


_CHAR_ACTIONS = {
    base + offset: partial(action, which)
    for which, base in ((0, 1), (1, 7))
    for offset, action in enumerate(
        (_char_push, _char_pop, _char_show, _char_count, _char_search, _char_compare)
    )
}
_CHAR_ACTIONS.update({13: _palindrome, 14: _postfix, 15: _prefix, 16: _parentheses})


def run_expression_menu(
    read: Reader = input, write: Optional[Writer] = None
) -> tuple[BoundedStack, BoundedStack]:
    """Menu over two character stacks and expression tools; until option 17."""
    out = write if write is not None else sys.stdout.write
    stacks = (BoundedStack(), BoundedStack())
    while True:
        out(_CHAR_MENU)
        try:
            option = _read_int(read)
            if option == 17:
                out("Programa finalizado.\n")
                return stacks
            action = _CHAR_ACTIONS.get(option)
            if action is None:
                out("Opción inválida.\n")
                continue
            action(stacks, read, out)
        except _BadInput:
            out("Opción inválida.\n")
        except EOFError:
            return stacks


# -- palindrome loop ---------------------------------------------------------


def run_palindrome_menu(
    read: Reader = input, write: Optional[Writer] = None
) -> list[tuple[str, bool]]:
    """Ask for words until the user declines; return each word with its verdict."""
    out = write if write is not None else sys.stdout.write
    results: list[tuple[str, bool]] = []
    try:
        while True:
            out("Ingrese una palabra: ")
            word = _read_word(read)
            verdict = is_palindrome(word)
            results.append((word, verdict))
            out("Es palindromo\n" if verdict else "No es palindromo\n")
            out("Desea ingresar otra palabra (S:N) ?: ")
            if _read_char(read) not in ("s", "S"):
                return results
    except EOFError:
        return results