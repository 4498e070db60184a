import pytest

from dslabs.search_tree_menu import run_search_tree_menu


def make_reader(lines):
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def run(lines):
    writes = []
    bst, zodiac, avl = run_search_tree_menu(make_reader(lines), writes.append)
    return bst, zodiac, avl, writes


def test_insert_and_inorder():
    bst, _, _, writes = run(["1", "50", "1", "30", "1", "70", "6", "0"])
    assert bst.inorder() == [30, 50, 70]
    assert "Recorrido Inorden : 30 50 70 \n" in writes
    assert writes[-1] == "Saliendo del programa...\n"


def test_duplicate_messages():
    _, _, _, writes = run(["1", "50", "1", "50", "2", "50", "0"])
    assert "El nodo 50 ya se encuentra en el árbol. \n" in writes
    assert "la información ya se encuentra en el árbol.\n" in writes


def test_iterative_insert_keeps_duplicates():
    bst, _, _, _ = run(["3", "5", "3", "5", "0"])
    assert len(bst) == 2
    assert bst.inorder() == [5, 5]


@pytest.mark.parametrize("option", ["8", "9", "10"])
def test_search_options(option):
    _, _, _, writes = run(["1", "50", option, "50", option, "7", "0"])
    assert writes.count("Dato encontrado en el árbol.\n") == 1
    assert writes.count("Dato NO encontrado.\n") == 1


def test_empty_tree_messages():
    _, _, _, writes = run(["4", "11", "14", "0"])
    assert writes.count("El árbol está vacío.\n") == 3


def test_max_and_min():
    _, _, _, writes = run(["1", "50", "1", "30", "1", "70", "14", "15", "0"])
    assert "Valor máximo: 70\n" in writes
    assert "Valor mínimo: 30\n" in writes


def test_remove_missing_and_present():
    bst, _, _, writes = run(["1", "50", "1", "30", "18", "99", "18", "30", "0"])
    assert "La información a eliminar no se encuentra en el árbol\n" in writes
    assert bst.inorder() == [50]


def test_prune():
    bst, _, _, writes = run(["1", "50", "1", "30", "19", "19", "0"])
    assert bst.root is None
    assert "Árbol podado completamente\n" in writes
    assert "Árbol vacio..\n" in writes


def test_remove_root_option():
    bst, _, _, _ = run(["1", "50", "1", "30", "1", "70", "20", "0"])
    assert 50 not in bst
    assert bst.inorder() == [30, 70]


def test_remove_with_splice_option():
    bst, _, _, _ = run(["1", "50", "1", "30", "1", "70", "21", "50", "0"])
    assert bst.inorder() == [30, 70]


def test_zodiac_tree():
    _, zodiac, _, writes = run(["16", "Leo", "16", "Aries", "16", "Leo", "17", "0"])
    assert zodiac.inorder() == ["Aries", "Leo"]
    assert "El nodo Leo ya se encuentra en el árbol. \n" in writes
    assert zodiac.render() in writes


def test_graph_places_values_at_layout_positions():
    bst, _, _, writes = run(["1", "50", "1", "30", "1", "70", "22", "0"])
    drawing = next(w for w in writes if w.endswith("\n" * 8))
    lines = drawing.split("\n")
    for col, row, value in bst.layout():
        text = str(value)
        assert lines[row][col : col + len(text)] == text


def test_balanced_insert_rotates_and_removes():
    _, _, avl, writes = run(["23", "1", "23", "2", "23", "3", "23", "3", "25", "1", "0"])
    assert "La información ya se encuentra en el árbol\n" in writes
    assert list(avl) == [2, 3]
    assert avl.root.value == 2


def test_balanced_graph_and_missing_removal():
    _, _, avl, writes = run(["24", "23", "10", "24", "25", "4", "0"])
    assert "árbol vacio\n" in writes
    assert "La información no se encuentra en el árbol\n" in writes
    drawing = next(w for w in writes if w.endswith("\n" * 8))
    col, row, value = avl.layout()[0]
    assert drawing.split("\n")[row][col:] == str(value)


def test_invalid_options_and_eof():
    bst, _, _, writes = run(["99", "abc"])
    assert writes.count("Opción inválida. Intente nuevamente.\n") == 2
    assert bst.root is None