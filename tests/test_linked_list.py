import io

import pytest

from structkit.linked_list import DoublyLinkedList, main


def _check_links(items):
    assert list(reversed(items)) == list(items)[::-1]
    assert len(items) == len(list(items))


def test_push_back_and_front():
    items = DoublyLinkedList()
    items.push_back(2)
    items.push_back(3)
    items.push_front(1)
    assert list(items) == [1, 2, 3]
    _check_links(items)


def test_construct_from_values():
    items = DoublyLinkedList([4, 5, 6])
    assert list(items) == [4, 5, 6]
    assert len(items) == 3


def test_reverse_keeps_links():
    items = DoublyLinkedList([1, 2, 3, 4])
    items.reverse()
    assert list(items) == [4, 3, 2, 1]
    _check_links(items)
    items.push_back(9)
    assert list(items) == [4, 3, 2, 1, 9]


def test_reverse_twice_is_identity():
    values = [7, 8, 9]
    items = DoublyLinkedList(values)
    items.reverse()
    items.reverse()
    assert list(items) == values


def test_insert_at_positions():
    items = DoublyLinkedList([10, 20, 30])
    items.insert_at(2, 15)
    assert list(items) == [10, 15, 20, 30]
    items.insert_at(1, 5)
    assert list(items)[0] == 5
    items.insert_at(len(items) + 1, 40)
    assert list(items)[-1] == 40
    _check_links(items)


@pytest.mark.parametrize("position", [0, 5])
def test_insert_at_out_of_range(position):
    items = DoublyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        items.insert_at(position, 9)
    assert list(items) == [1, 2, 3]


def test_insert_after():
    items = DoublyLinkedList([1, 2, 3])
    items.insert_after(1, 7)
    assert list(items) == [1, 7, 2, 3]
    items.insert_after(4, 8)
    assert list(items) == [1, 7, 2, 3, 8]
    _check_links(items)


def test_insert_after_out_of_range():
    items = DoublyLinkedList([1])
    with pytest.raises(IndexError):
        items.insert_after(2, 5)


def test_pop_front_and_back():
    items = DoublyLinkedList([1, 2, 3])
    assert items.pop_front() == 1
    assert items.pop_back() == 3
    assert list(items) == [2]
    assert items.pop_back() == 2
    assert len(items) == 0


def test_pop_empty_raises():
    items = DoublyLinkedList()
    with pytest.raises(IndexError):
        items.pop_front()
    with pytest.raises(IndexError):
        items.pop_back()


def test_delete_at():
    items = DoublyLinkedList([1, 2, 3, 4])
    assert items.delete_at(3) == 3
    assert list(items) == [1, 2, 4]
    _check_links(items)
    with pytest.raises(IndexError):
        items.delete_at(4)


def test_delete_after():
    items = DoublyLinkedList([1, 2, 3])
    assert items.delete_after(1) == 2
    assert list(items) == [1, 3]
    with pytest.raises(IndexError):
        items.delete_after(2)
    _check_links(items)


def test_remove_first_occurrence():
    items = DoublyLinkedList([5, 6, 5])
    items.remove(5)
    assert list(items) == [6, 5]
    _check_links(items)


def test_remove_missing_raises():
    items = DoublyLinkedList([1, 2])
    with pytest.raises(ValueError):
        items.remove(3)


def test_find():
    items = DoublyLinkedList([4, 8, 8])
    assert items.find(8) == 2
    assert items.find(4) == 1
    assert items.find(99) is None


def test_main_reverse(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1\n2\n3\n1\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Reverse list:" in out
    tail = out.split("Reverse list:")[1]
    assert tail.index("Element is 3") < tail.index("Element is 1")


def test_main_search_missing(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1\n2\n11\n9\n0\n"))
    assert main([]) == 0
    assert "Element is not found" in capsys.readouterr().out