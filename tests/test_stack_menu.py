from dslabs.stack_menu import run_expression_menu, run_palindrome_menu, run_stack_menu
from dslabs.stacks import infix_to_postfix, infix_to_prefix


def _session(*lines):
    feed = iter(lines)

    def read():
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    written = []
    return read, written.append, written


def test_stack_menu_pushes_and_exits():
    read, write, written = _session("1", "1", "1", "2", "7", "9", "13")
    first, second = run_stack_menu(read, write)
    assert list(first) == [2, 1]
    assert list(second) == [9]
    assert "Programa finalizado." in "".join(written)


def test_stack_menu_pop_empty_reports():
    read, write, written = _session("2", "13")
    first, second = run_stack_menu(read, write)
    assert len(first) == 0
    assert len(second) == 0
    assert "Pila vacía, no se puede sacar elemento." in "".join(written)


def test_stack_menu_show_and_count():
    read, write, written = _session("1", "5", "1", "6", "3", "4", "13")
    first, second = run_stack_menu(read, write)
    text = "".join(written)
    assert list(first) == [6, 5]
    assert len(second) == 0
    assert "ELEMENTOS DE LA PILA:" in text
    assert "6 5 \n" in text
    assert "Cantidad de elementos en Pila 1: 2\n" in text


def test_stack_menu_search():
    read, write, written = _session("1", "4", "5", "4", "5", "8", "13")
    first, second = run_stack_menu(read, write)
    text = "".join(written)
    assert list(first) == [4]
    assert len(second) == 0
    assert "¿Está el 4?: Sí" in text
    assert "¿Está el 8?: No" in text


def test_stack_menu_compare():
    read, write, written = _session("6", "1", "7", "7", "7", "6", "7", "3", "12", "13")
    first, second = run_stack_menu(read, write)
    text = "".join(written)
    assert list(first) == [7]
    assert list(second) == [3, 7]
    assert "Pila vacia...\n" in text
    assert "Las pilas son iguales.\n" in text
    assert "Las pilas son diferentes.\n" in text


def test_stack_menu_invalid_option_and_eof():
    read, write, written = _session("99", "abc", "1", "3")
    first, second = run_stack_menu(read, write)
    assert "".join(written).count("Opción inválida.") == 2
    assert list(first) == [3]
    assert len(second) == 0


def test_expression_menu_char_stacks():
    read, write, written = _session("1", "a", "1", "b", "4", "3", "7", "b", "10", "17")
    first, second = run_expression_menu(read, write)
    text = "".join(written)
    assert list(first) == ["b", "a"]
    assert list(second) == ["b"]
    assert "Cantidad de elementos en Pila 1:2\n" in text
    assert "Cantidad de elementos en Pila 2: 1\n" in text
    assert "Elementos de la pila (de arriba hacia abajo):\nb\na\n" in text


def test_expression_menu_pop_empty_and_compare():
    read, write, written = _session("2", "6", "17")
    first, second = run_expression_menu(read, write)
    text = "".join(written)
    assert len(first) == 0
    assert len(second) == 0
    assert "Subdesbordamiento - Pila vacía. No se puede sacar elemento." in text
    assert "Las pilas son iguales?: Sí" in text


def test_expression_menu_search():
    read, write, written = _session("1", "z", "5", "z", "5", "q", "17")
    first, second = run_expression_menu(read, write)
    text = "".join(written)
    assert list(first) == ["z"]
    assert len(second) == 0
    assert "¿Está el z?: Sí" in text
    assert "¿Está el q?: No" in text


def test_expression_menu_conversions():
    read, write, written = _session("14", "A+B*C", "15", "(A+B)*C", "17")
    run_expression_menu(read, write)
    text = "".join(written)
    assert infix_to_postfix("A+B*C") + "\n" in text
    assert infix_to_prefix("(A+B)*C") + "\n" in text


def test_expression_menu_palindrome_and_parentheses():
    read, write, written = _session(
        "13", "radar", "13", "hola", "16", "(3+4)*(8+3**2)", "16", "(())(()", "17"
    )
    first, second = run_expression_menu(read, write)
    text = "".join(written)
    assert len(first) == 0
    assert len(second) == 0
    assert "es palindromo\n" in text
    assert "no es palindromo\n" in text
    assert "La expresión matemática (3+4)*(8+3**2) es CORRECTA." in text
    assert "La expresión matemática (())(() es INCORRECTA." in text


def test_palindrome_menu_loops_until_declined():
    read, write, written = _session("radar", "s", "hola", "n", "never-read")
    results = run_palindrome_menu(read, write)
    text = "".join(written)
    assert results == [("radar", True), ("hola", False)]
    assert "Es palindromo\n" in text
    assert "No es palindromo\n" in text


def test_palindrome_menu_stops_at_end_of_input():
    read, write, written = _session("reconocer")
    results = run_palindrome_menu(read, write)
    assert results == [("reconocer", True)]