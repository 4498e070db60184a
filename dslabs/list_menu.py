"""Interactive menu over a doubly linked list of integers."""

from __future__ import annotations

import sys
from typing import Callable, Optional

from dslabs.linkedlist import DoublyLinkedList

Reader = Callable[[], str]
Writer = Callable[[str], object]

_MENU = (
    "\n---------------------- MENÚ ----------------------------"
    "\n=========================================================="
    "\n1.  Insertar al inicio                                   ="
    "\n2.  Insertar al final                                    ="
    "\n3.  Insertar antes de un nodo con dato X                 ="
    "\n4.  Insertar después de un nodo con dato X               ="
    "\n5.  Mostrar lista de inicio a fin                        ="
    "\n6.  Mostrar lista de fin a inicio                        ="
    "\n7.  Contar ocurrencias de un dato                        ="
    "\n8.  Invertir lista                                       ="
    "\n9.  Eliminar el primer nodo                              ="
    "\n10. Eliminar el último nodo                              ="
    "\n11. Eliminar el nodo con información x                   ="
    "\n12. Eliminar el nodo anterior al nodo con información x  ="
    "\n13. Eliminar el nodo posterior al nodo con información x ="
    "\n14. Mover el menor elemento a la primera posición        ="
    "\n15. Mover el mayor elemento a la última posición         ="
    "\n16. Eliminar valores repetidos                           ="
    "\n17. Eliminar valores coincidentes                        ="
    "\n0. S a l i r                                             ="
    "\n========================================================="
    "\n\n\t\t\tOpción: "
)

_LIST_HEADER = (
    "\n----------------------------------------"
    "\n           LISTA DE DATOS:              "
    "\n========================================\n\n"
)
_FORWARD_HEADER = (
    "\n----------------------------------------"
    "\n        Recorrido de inicio a fin:      "
    "\n----------------------------------------\n\n"
)
_BACKWARD_HEADER = (
    "\n------------------------------------------"
    "\n        Recorrido de fin a inicio:        "
    "\n-----------------------------------------\n\n"
)


class _BadInput(Exception):
    """Raised when the user types something that is not a number."""


def _read_int(read: Reader) -> int:
    text = read().strip()
    try:
        return int(text)
    except ValueError:
        raise _BadInput(text) from None


def _wants_more(read: Reader, out: Writer) -> bool:
    out("\n\n\t\t\tMAS DATOS (S/N)?: ")
    return read().strip()[:1] in ("s", "S")


def _show(items: DoublyLinkedList, out: Writer) -> None:
    if not items:
        out("Lista vacia....\n")
        return
    out("Proceso completado con éxito....\n")
    out(_LIST_HEADER + items.render() + "\n")


def _insert_first(items, read, out):
    while True:
        out("dato a insertar al inicio: ")
        items.insert_first(_read_int(read))
        if not _wants_more(read, out):
            return


def _insert_last(items, read, out):
    while True:
        out("dato a insertar al final: ")
        items.insert_last(_read_int(read))
        if not _wants_more(read, out):
            return


def _insert_before(items, read, out):
    out("dato a insertar: ")
    value = _read_int(read)
    out("Antes del nodo con dato: ")
    target = _read_int(read)
    try:
        items.insert_before(value, target)
    except ValueError:
        out(f"No se encontró el dato {target} en la lista.\n")
    _show(items, out)


def _insert_after(items, read, out):
    out("dato a insertar: ")
    value = _read_int(read)
    out("Después del nodo con dato: ")
    target = _read_int(read)
    try:
        items.insert_after(value, target)
    except ValueError:
        out(f"No se encontró el dato {target} en la lista.\n")
    _show(items, out)


def _show_forward(items, read, out):
    if not items:
        out("Lista vacia....\n")
    else:
        out(_FORWARD_HEADER + items.render() + "\n")


def _show_backward(items, read, out):
    if not items:
        out("Lista vacia...\n")
    else:
        out(_BACKWARD_HEADER + items.render_backward() + "\n")


def _count(items, read, out):
    out("Dato a buscar: ")
    value = _read_int(read)
    out(f"El número {value} aparece {items.count(value)} veces.\n")


def _reverse(items, read, out):
    items.reverse()
    _show(items, out)


def _remove_first(items, read, out):
    try:
        items.remove_first()
    except IndexError:
        pass
    _show(items, out)


def _remove_last(items, read, out):
    try:
        items.remove_last()
    except IndexError:
        pass
    _show(items, out)


def _remove_value(items, read, out):
    out("Ingrese el valor a eliminar: ")
    value = _read_int(read)
    if not items:
        out("Lista vacia.....\n")
        return
    try:
        items.remove(value)
    except ValueError:
        out("El valor a eliminar no existe en la lista...\n")
        return
    _show(items, out)


def _remove_before(items, read, out):
    out("Ingrese el valor: ")
    target = _read_int(read)
    if not items:
        out("Lista vacia...\n")
        return
    try:
        items.remove_before(target)
    except ValueError:
        out(f"El valor {target} no se encuentra en lista... \n")
    except IndexError:
        out("no existe un nodo anterior..\n")
    else:
        _show(items, out)


def _remove_after(items, read, out):
    out("Ingrese el valor: ")
    target = _read_int(read)
    if not items:
        out("Lista vacia..\n")
        return
    try:
        items.remove_after(target)
    except ValueError:
        out(f"El valor {target} no se encuentra en lista... \n")
    except IndexError:
        out("No existe un nodo posterior..\n")
    else:
        _show(items, out)


def _move_min(items, read, out):
    if not items:
        out("Lista vacia...\n")
    elif items.move_min_to_front():
        _show(items, out)
    else:
        out("El menor valor se encuentra en la posición inicial..\n")


def _move_max(items, read, out):
    if not items:
        out("Lista vacia...\n")
    elif len(items) == 1:
        out("La lista tiene un solo elemento\n")
    elif items.move_max_to_back():
        _show(items, out)
    else:
        out("El mayor valor se encuentra en la posición final..\n")


def _remove_duplicates(items, read, out):
    if not items:
        out("Lista vacia...\n")
    elif len(items) == 1:
        out("La lista tiene un solo elemento\n")
    else:
        items.remove_adjacent_duplicates()
        _show(items, out)


def _remove_matching(items, read, out):
    out("Ingrese el valor a eliminar: ")
    value = _read_int(read)
    if not items:
        out("Lista vacia...\n")
        return
    items.remove_all(value)
    _show(items, out)


_ACTIONS = {
    1: _insert_first,
    2: _insert_last,
    3: _insert_before,
    4: _insert_after,
    5: _show_forward,
    6: _show_backward,
    7: _count,
    8: _reverse,
    9: _remove_first,
    10: _remove_last,
    11: _remove_value,
    12: _remove_before,
    13: _remove_after,
    14: _move_min,
    15: _move_max,
    16: _remove_duplicates,
    17: _remove_matching,
}


def run_list_menu(
    read: Reader = input, write: Optional[Writer] = None
) -> DoublyLinkedList:
    """Run the list menu until option 0 or end of input; return the list."""
    out = write if write is not None else sys.stdout.write
    items = DoublyLinkedList()
    while True:
        out(_MENU)
        try:
            option = _read_int(read)
            if option == 0:
                out("Programa finalizado.\n")
                return items
            action = _ACTIONS.get(option)
            if action is None:
                out("Opción inválida.\n")
                continue
            action(items, read, out)
        except _BadInput:
            out("Opción inválida.\n")
        except EOFError:
            return items