"""Interactive menu over a search tree of numbers, one of words and an AVL tree."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterable, Optional

from dslabs.avl import AVLTree
from dslabs.bst import BinarySearchTree, DuplicateKeyError

Reader = Callable[[], str]
Writer = Callable[[str], object]

_MENU = (
    "\n===== MENÚ DE OPCIONES - ÁRBOL BINARIO ====\n"
    "1. Insertar nodo (insertarNodo)\n"
    "2. Insertar nodo (insertarNodo2)\n"
    "3. Insertar nodo (insertarNodoIterativo)\n"
    "4. Mostrar árbol (forma estructurada)\n"
    "5. Recorrido en Preorden\n"
    "6. Recorrido en Inorden\n"
    "7. Recorrido en Posorden\n"
    "8. Buscar dato (busquedaABB)\n"
    "9. Buscar dato (busquedaABB2)\n"
    "10. Buscar dato (busquedaABBIterativa)\n"
    "11. Altura del árbol\n"
    "12. Contar todos los nodos\n"
    "13. Contar nodos hoja\n"
    "14. Encontrar valor máximo\n"
    "15. Encontrar valor mínimo\n"
    "16. Insertar nodo Zodiaco\n"
    "17. Mostrar árbol zodiaco\n"
    "18. eliminar Nodo \n"
    "19. podar arbol \n"
    "20. remover raiz \n"
    "21. eliminar2  nodo\n"
    "22. mostrar árbol vertical\n"
    "23. insertar balanceado\n"
    "24. mostrar árbol balanceado vertical\n"
    "25. Eliminar nodo (arbol balanceado)\n"
    "0. Salir\n"
    "Seleccione una opción: "
)

_EMPTY = "El árbol está vacío.\n"
_NOT_FOUND = "La información a eliminar no se encuentra en el árbol\n"
_INVALID = "Opción inválida. Intente nuevamente.\n"


class _BadInput(Exception):
    """Raised when the user types something that is not a number."""


class _Trees:
    def __init__(self) -> None:
        self.bst = BinarySearchTree()
        self.zodiac = BinarySearchTree()
        self.avl = AVLTree()


def _read_int(read: Reader) -> int:
    text = read().strip()
    try:
        return int(text)
    except ValueError:
        raise _BadInput(text) from None


def _read_word(read: Reader) -> str:
    while True:
        tokens = read().split()
        if tokens:
            return tokens[0]


def _draw(points: Iterable[tuple[int, int, Any]]) -> str:
    """Place each value at its (column, row) on a blank character grid."""
    rows: dict[int, list[str]] = {}
    for col, row, value in points:
        text = str(value)
        col = max(col, 0)
        line = rows.setdefault(row, [])
        if len(line) < col + len(text):
            line.extend(" " * (col + len(text) - len(line)))
        line[col : col + len(text)] = text
    if not rows:
        return ""
    return "\n".join("".join(rows.get(r, [])) for r in range(max(rows) + 1)) + "\n" * 8


def _insert_first(trees, read, out):
    out("Ingrese dato a insertar (insertarNodo): ")
    value = _read_int(read)
    try:
        trees.bst.insert(value)
    except DuplicateKeyError:
        out(f"El nodo {value} ya se encuentra en el árbol. \n")


def _insert_second(trees, read, out):
    out("Ingrese dato a insertar (insertarNodo2): ")
    try:
        trees.bst.insert(_read_int(read))
    except DuplicateKeyError:
        out("la información ya se encuentra en el árbol.\n")


def _insert_iterative(trees, read, out):
    out("Ingrese dato a insertar (insertarNodoIterativo): ")
    trees.bst.insert_iterative(_read_int(read))


def _show(trees, read, out):
    out(_EMPTY if trees.bst.root is None else trees.bst.render())


def _traversal(label, method):
    def action(trees, read, out):
        if trees.bst.root is None:
            out(_EMPTY)
            return
        values = getattr(trees.bst, method)()
        out(f"Recorrido {label} : " + "".join(f"{v} " for v in values) + "\n")

    return action


def _search(trees, read, out):
    out("Ingrese el dato a buscar: ")
    if _read_int(read) in trees.bst:
        out("Dato encontrado en el árbol.\n")
    else:
        out("Dato NO encontrado.\n")


def _summary(label, compute):
    def action(trees, read, out):
        if trees.bst.root is None:
            out(_EMPTY)
        else:
            out(f"{label}: {compute(trees.bst)}\n")

    return action


def _insert_zodiac(trees, read, out):
    out("Ingrese dato a insertar (insertarNodo): ")
    word = _read_word(read)
    try:
        trees.zodiac.insert(word)
    except DuplicateKeyError:
        out(f"El nodo {word} ya se encuentra en el árbol. \n")


def _show_zodiac(trees, read, out):
    out(_EMPTY if trees.zodiac.root is None else trees.zodiac.render())


def _remove(trees, read, out):
    if trees.bst.root is None:
        out("Árbol vacio...\n")
        return
    out("Ingrese dato a eliminar: ")
    try:
        trees.bst.remove(_read_int(read))
    except KeyError:
        out(_NOT_FOUND)


def _prune(trees, read, out):
    if trees.bst.root is None:
        out("Árbol vacio..\n")
        return
    trees.bst.clear()
    out("Árbol podado completamente\n")


def _remove_root(trees, read, out):
    if trees.bst.root is None:
        out("árbol vacio..\n")
    else:
        trees.bst.remove_root()


def _remove_spliced(trees, read, out):
    if trees.bst.root is None:
        out("árbol vacio\n")
        return
    out("ingrese dato: ")
    try:
        trees.bst.remove_with_root_splice(_read_int(read))
    except KeyError:
        out(_NOT_FOUND)


def _graph(trees, read, out):
    if trees.bst.root is None:
        out("árbol vacio\n")
    else:
        out(_draw(trees.bst.layout()))


def _insert_balanced(trees, read, out):
    out("Ingrese dato: ")
    try:
        trees.avl.insert(_read_int(read))
    except DuplicateKeyError:
        out("La información ya se encuentra en el árbol\n")


def _graph_balanced(trees, read, out):
    if trees.avl.root is None:
        out("árbol vacio\n")
    else:
        out(_draw(trees.avl.layout()))


def _remove_balanced(trees, read, out):
    if trees.avl.root is None:
        out("árbol vacio\n")
        return
    out("ingrese dato: ")
    try:
        trees.avl.remove(_read_int(read))
    except KeyError:
        out("La información no se encuentra en el árbol\n")


_ACTIONS = {
    1: _insert_first,
    2: _insert_second,
    3: _insert_iterative,
    4: _show,
    5: _traversal("Preorden", "preorder"),
    6: _traversal("Inorden", "inorder"),
    7: _traversal("Posorden", "postorder"),
    8: _search,
    9: _search,
    10: _search,
    11: _summary("Altura del árbol", lambda tree: tree.height()),
    12: _summary("Cantidad total de nodos", len),
    13: _summary("Cantidad de nodos hoja", lambda tree: tree.count_leaves()),
    14: _summary("Valor máximo", lambda tree: tree.maximum()),
    15: _summary("Valor mínimo", lambda tree: tree.minimum()),
    16: _insert_zodiac,
    17: _show_zodiac,
    18: _remove,
    19: _prune,
    20: _remove_root,
    21: _remove_spliced,
    22: _graph,
    23: _insert_balanced,
    24: _graph_balanced,
    25: _remove_balanced,
}


def run_search_tree_menu(
    read: Reader = input, write: Optional[Writer] = None
) -> tuple[BinarySearchTree, BinarySearchTree, AVLTree]:
    """Run the menu until option 0 or end of input.

    Returns the number tree, the word tree and the balanced tree.
    """
    out = write if write is not None else sys.stdout.write
    trees = _Trees()
    while True:
        out(_MENU)
        try:
            option = _read_int(read)
            if option == 0:
                out("Saliendo del programa...\n")
                break
            action = _ACTIONS.get(option)
            if action is None:
                out(_INVALID)
                continue
            action(trees, read, out)
        except _BadInput:
            out(_INVALID)
        except EOFError:
            break
    return trees.bst, trees.zodiac, trees.avl