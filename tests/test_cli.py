import io

import pytest

from dslabs.cli import main


def run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(argv)
    return code, capsys.readouterr().out


def test_default_is_search_tree(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, [], "1\n50\n6\n0\n")
    assert code == 0
    assert "Recorrido Inorden : 50 \n" in out
    assert out.endswith("Saliendo del programa...\n")


def test_queue_menu(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, ["queue"], "1\nhola\n4\n0\n")
    assert code == 0
    assert "Elementos en la cola: hola \n" in out
    assert "Programa finalizado.\n" in out


def test_tree_menu(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, ["tree"], "10\n")
    assert code == 0
    assert "Saliendo del programa...\n" in out


def test_stack_menu(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, ["stack"], "1\n4\n4\n13\n")
    assert code == 0
    assert "Cantidad de elementos en Pila 1: 1\n" in out


def test_expression_menu(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, ["expression"], "16\n(a+b)\n17\n")
    assert code == 0
    assert "La expresión matemática (a+b) es CORRECTA.\n" in out


def test_palindrome_menu(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, ["palindrome"], "oso\nn\n")
    assert code == 0
    assert "Es palindromo\n" in out


def test_list_menu_starts(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, ["list"], "")
    assert code == 0
    assert "Insertar al inicio" in out


def test_unknown_menu_rejected(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as info:
        main(["nothing"])
    assert info.value.code == 2