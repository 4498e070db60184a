"""Interactive menu over a binary tree built node by node."""

from __future__ import annotations

import sys
from typing import Callable, Optional

from dslabs.tree import BinaryTree, build_tree

Reader = Callable[[], str]
Writer = Callable[[str], object]

_MENU = (
    "\n===== MENÚ DE OPCIONES - ÁRBOL BINARIO =====\n"
    "1. Crear árbol\n"
    "2. Mostrar árbol (forma estructurada)\n"
    "3. Recorrido en Preorden\n"
    "4. Recorrido en Inorden\n"
    "5. Recorrido en Posorden\n"
    "6. Altura del árbol\n"
    "7. Contar todos los nodos\n"
    "8. Contar nodos hoja y mostrarlos\n"
    "9. verificar arbol \n"
    "10. Salir\n"
    "Seleccione una opción: "
)

_EMPTY = "El árbol está vacío.\n"

_SIDE_PROMPTS = {
    "left": "\n ¿Existe nodo por izquierda: 1 (Sí) - 0 (No)? ",
    "right": "\n ¿Existe nodo por derecha: 1 (Sí) - 0 (No)? ",
}


class _BadInput(Exception):
    """Raised when the user types something that is not a number."""


def _read_int(read: Reader) -> int:
    text = read().strip()
    try:
        return int(text)
    except ValueError:
        raise _BadInput(text) from None


def _create(tree, read, out):
    def ask_value():
        out("\nIngrese el valor del nodo: ")
        return _read_int(read)

    def ask_child(side):
        out(_SIDE_PROMPTS[side])
        return read().strip() == "1"

    tree.root = build_tree(ask_value, ask_child)


def _traversal(label, method):
    def action(tree, read, out):
        if tree.root is None:
            out(_EMPTY)
            return
        values = getattr(tree, method)()
        out(f"Recorrido {label} : " + "".join(f"{v} - " for v in values) + "\n")

    return action


def _show(tree, read, out):
    out(_EMPTY if tree.root is None else tree.render())


def _height(tree, read, out):
    out(_EMPTY if tree.root is None else f"Altura del árbol: {tree.height()}\n")


def _count(tree, read, out):
    out(_EMPTY if tree.root is None else f"Cantidad total de nodos: {len(tree)}\n")


def _leaves(tree, read, out):
    if tree.root is None:
        out(_EMPTY)
        return
    out("Nodos hoja encontrados:\n")
    for value in tree.leaves():
        out(f"Nodo hoja encontrado: {value}\n")
    out(f"Cantidad de nodos hoja: {tree.count_leaves()}\n")


def _complete(tree, read, out):
    out("arbol completo\n" if tree.is_complete() else "arbol incompleto\n")


_ACTIONS = {
    1: _create,
    2: _show,
    3: _traversal("Preorden", "preorder"),
    4: _traversal("Inorden", "inorder"),
    5: _traversal("Posorden", "postorder"),
    6: _height,
    7: _count,
    8: _leaves,
    9: _complete,
}


def run_tree_menu(
    read: Reader = input, write: Optional[Writer] = None
) -> BinaryTree:
    """Run the tree menu until option 10 or end of input; return the tree."""
    out = write if write is not None else sys.stdout.write
    tree = BinaryTree()
    while True:
        out(_MENU)
        try:
            option = _read_int(read)
            if option == 10:
                out("Saliendo del programa...\n")
                return tree
            action = _ACTIONS.get(option)
            if action is None:
                out("Opción inválida. Intente nuevamente.\n")
                continue
            action(tree, read, out)
        except _BadInput:
            out("Opción inválida. Intente nuevamente.\n")
        except EOFError:
            return tree