import pytest

from dslabs.linkedlist import DoublyLinkedList


def assert_consistent(items):
    forward = list(items)
    assert list(reversed(items)) == forward[::-1]
    assert len(items) == len(forward)


def test_insert_first_and_last_order():
    items = DoublyLinkedList()
    items.insert_last(2)
    items.insert_first(1)
    items.insert_last(3)
    assert list(items) == [1, 2, 3]
    assert_consistent(items)


def test_constructor_keeps_order():
    values = [4, 8, 15, 16]
    items = DoublyLinkedList(values)
    assert list(items) == values
    assert len(items) == len(values)
    assert_consistent(items)


def test_render_format():
    assert DoublyLinkedList([1, 2]).render() == "1 -> 2 -> NULL"
    assert DoublyLinkedList().render() == "NULL"


def test_render_backward_format():
    assert DoublyLinkedList([1, 2]).render_backward() == "2 -> 1 -> NULL"
    assert DoublyLinkedList().render_backward() == "NULL"


def test_insert_before_head_becomes_new_head():
    items = DoublyLinkedList([5, 6])
    items.insert_before(4, 5)
    assert list(items) == [4, 5, 6]
    assert_consistent(items)


def test_insert_before_uses_first_occurrence():
    items = DoublyLinkedList([1, 3, 3])
    items.insert_before(2, 3)
    assert list(items) == [1, 2, 3, 3]
    assert_consistent(items)


def test_insert_after_tail_becomes_new_tail():
    items = DoublyLinkedList([1, 2])
    items.insert_after(9, 2)
    assert next(reversed(items)) == 9
    assert list(items) == [1, 2, 9]
    assert_consistent(items)


def test_insert_after_middle():
    items = DoublyLinkedList([1, 3])
    items.insert_after(2, 1)
    assert list(items) == [1, 2, 3]
    assert_consistent(items)


@pytest.mark.parametrize("method", ["insert_before", "insert_after"])
def test_insert_relative_to_missing_value(method):
    items = DoublyLinkedList([1, 2])
    with pytest.raises(ValueError):
        getattr(items, method)(7, 99)
    assert list(items) == [1, 2]


@pytest.mark.parametrize("method", ["insert_before", "insert_after"])
def test_insert_relative_on_empty_list(method):
    with pytest.raises(ValueError):
        getattr(DoublyLinkedList(), method)(7, 1)


def test_count():
    items = DoublyLinkedList([5, 1, 5, 5, 2])
    assert items.count(5) == 3
    assert items.count(42) == 0


def test_reverse_swaps_ends():
    values = [1, 2, 3, 4]
    items = DoublyLinkedList(values)
    items.reverse()
    assert list(items) == values[::-1]
    assert list(reversed(items)) == values
    items.insert_last(0)
    items.insert_first(10)
    assert list(items) == [10] + values[::-1] + [0]
    assert_consistent(items)


def test_reverse_empty_list():
    items = DoublyLinkedList()
    items.reverse()
    assert list(items) == []


def test_remove_first_and_last():
    items = DoublyLinkedList([1, 2, 3])
    assert items.remove_first() == 1
    assert items.remove_last() == 3
    assert list(items) == [2]
    assert items.remove_last() == 2
    assert len(items) == 0
    assert_consistent(items)


@pytest.mark.parametrize("method", ["remove_first", "remove_last"])
def test_remove_end_from_empty(method):
    with pytest.raises(IndexError):
        getattr(DoublyLinkedList(), method)()


def test_remove_first_occurrence_only():
    items = DoublyLinkedList([1, 2, 1])
    items.remove(1)
    assert list(items) == [2, 1]
    assert_consistent(items)


def test_remove_only_element_empties_list():
    items = DoublyLinkedList([7])
    items.remove(7)
    assert list(items) == []
    assert items.render() == "NULL"


def test_remove_missing_value():
    with pytest.raises(ValueError):
        DoublyLinkedList([1, 2]).remove(3)
    with pytest.raises(ValueError):
        DoublyLinkedList().remove(3)


def test_remove_before():
    items = DoublyLinkedList([1, 2, 3])
    assert items.remove_before(3) == 2
    assert list(items) == [1, 3]
    assert items.remove_before(3) == 1
    assert list(items) == [3]
    assert_consistent(items)


def test_remove_before_head_has_no_predecessor():
    items = DoublyLinkedList([1, 2])
    with pytest.raises(IndexError):
        items.remove_before(1)
    with pytest.raises(ValueError):
        items.remove_before(5)
    assert list(items) == [1, 2]


def test_remove_after():
    items = DoublyLinkedList([1, 2, 3])
    assert items.remove_after(1) == 2
    assert items.remove_after(1) == 3
    assert list(items) == [1]
    assert_consistent(items)


def test_remove_after_tail_has_no_successor():
    items = DoublyLinkedList([1, 2])
    with pytest.raises(IndexError):
        items.remove_after(2)
    with pytest.raises(ValueError):
        items.remove_after(5)


def test_move_min_to_front_picks_first_minimum():
    values = [3, 1, 2, 1]
    items = DoublyLinkedList(values)
    assert items.move_min_to_front() is True
    assert list(items) == [1, 3, 2, 1]
    assert sorted(items) == sorted(values)
    assert_consistent(items)


def test_move_min_already_in_front():
    items = DoublyLinkedList([1, 5, 3])
    assert items.move_min_to_front() is False
    assert list(items) == [1, 5, 3]


def test_move_min_from_tail():
    items = DoublyLinkedList([4, 5, 2])
    assert items.move_min_to_front() is True
    assert list(items) == [2, 4, 5]
    assert_consistent(items)


def test_move_max_to_back():
    values = [9, 1, 9, 3]
    items = DoublyLinkedList(values)
    assert items.move_max_to_back() is True
    assert list(items) == [1, 9, 3, 9]
    assert sorted(items) == sorted(values)
    assert_consistent(items)


def test_move_max_already_at_back_or_single():
    assert DoublyLinkedList([1, 2]).move_max_to_back() is False
    assert DoublyLinkedList([4]).move_max_to_back() is False


def test_move_on_empty_list_raises():
    with pytest.raises(ValueError):
        DoublyLinkedList().move_min_to_front()
    with pytest.raises(ValueError):
        DoublyLinkedList().move_max_to_back()


def test_remove_adjacent_duplicates():
    values = [1, 1, 2, 2, 2, 1]
    items = DoublyLinkedList(values)
    removed = items.remove_adjacent_duplicates()
    assert list(items) == [1, 2, 1]
    assert removed == len(values) - len(items)
    assert_consistent(items)


def test_remove_adjacent_duplicates_invariant():
    items = DoublyLinkedList([4, 4, 4, 5, 6, 6, 4])
    items.remove_adjacent_duplicates()
    result = list(items)
    assert all(a != b for a, b in zip(result, result[1:]))
    assert set(result) == {4, 5, 6}


def test_remove_all():
    items = DoublyLinkedList([2, 1, 2, 3, 2])
    assert items.remove_all(2) == 3
    assert 2 not in list(items)
    assert list(items) == [1, 3]
    assert_consistent(items)


def test_remove_all_can_empty_list():
    items = DoublyLinkedList([6, 6])
    assert items.remove_all(6) == 2
    assert len(items) == 0
    assert items.render() == "NULL"