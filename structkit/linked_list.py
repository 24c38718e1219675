"""Doubly linked list of integers with positional insertion and deletion."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Sequence

_MENU = """Choose the operation that you want to perform:
1. Reverse the list
2. Insert at front
3. Insert at node
4. Insert at end
5. Insert after node
6. Delete at front
7. Delete the node
8. Delete at end
9. Delete after node
10. Delete the number
11. Search"""


@dataclass(eq=False)
class _Node:
    value: int
    prev: Optional[_Node] = field(default=None, repr=False)
    next: Optional[_Node] = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list; positions are counted from 1."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def _node_at(self, position: int) -> _Node:
        if not 1 <= position <= self._size:
            raise IndexError(f"There are less than {position} elements")
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return node

    def _link_before(self, successor: _Node, value: int) -> None:
        node = _Node(value, prev=successor.prev, next=successor)
        if successor.prev is None:
            self._head = node
        else:
            successor.prev.next = node
        successor.prev = node
        self._size += 1

    def _unlink(self, node: _Node) -> int:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def reverse(self) -> None:
        """Reverse the list in place."""
        node = self._head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._head, self._tail = self._tail, self._head

    def push_front(self, value: int) -> None:
        """Insert a value at the front."""
        if self._head is None:
            self._head = self._tail = _Node(value)
            self._size = 1
        else:
            self._link_before(self._head, value)

    def push_back(self, value: int) -> None:
        """Append a value at the end."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, position: int, value: int) -> None:
        """Insert a value so that it becomes the node at ``position``."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"There are less than {position} elements")
        if position == self._size + 1:
            self.push_back(value)
        else:
            self._link_before(self._node_at(position), value)

    def insert_after(self, position: int, value: int) -> None:
        """Insert a value right after the node at ``position``."""
        node = self._node_at(position)
        if node.next is None:
            self.push_back(value)
        else:
            self._link_before(node.next, value)

    def pop_front(self) -> int:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("Empty list")
        return self._unlink(self._head)

    def pop_back(self) -> int:
        """Remove and return the last value."""
        if self._tail is None:
            raise IndexError("Empty list")
        return self._unlink(self._tail)

    def delete_at(self, position: int) -> int:
        """Remove and return the value at ``position``."""
        return self._unlink(self._node_at(position))

    def delete_after(self, position: int) -> int:
        """Remove and return the value following the node at ``position``."""
        node = self._node_at(position)
        if node.next is None:
            raise IndexError(f"There are less than {position + 1} elements")
        return self._unlink(node.next)

    def remove(self, value: int) -> None:
        """Remove the first node holding ``value``; raise ValueError if absent."""
        node = self._head
        while node is not None:
            if node.value == value:
                self._unlink(node)
                return
            node = node.next
        raise ValueError("number is not present in list")

    def find(self, value: int) -> Optional[int]:
        """Return the position of the first node holding ``value``, or None."""
        for position, item in enumerate(self, start=1):
            if item == value:
                return position
        return None


def _traverse(items: DoublyLinkedList) -> None:
    for value in items:
        print(f"Element is {value}")


def _read_int(prompt: str) -> int:
    return int(input(prompt).strip())


def _run_choice(items: DoublyLinkedList, choice: int) -> None:
    if choice == 1:
        print("Reverse list:")
        items.reverse()
    elif choice == 2:
        items.push_front(_read_int("Enter the number:\n"))
    elif choice == 3:
        number = _read_int("Enter the number:\n")
        items.insert_at(_read_int("Enter the node you want to insert:\n"), number)
    elif choice == 4:
        items.push_back(_read_int("Enter the number:\n"))
    elif choice == 5:
        number = _read_int("Enter the number:\n")
        items.insert_after(_read_int("Enter the node you want to insert:\n"), number)
    elif choice == 6:
        items.pop_front()
    elif choice == 7:
        items.delete_at(_read_int("Enter the node you want to delete:\n"))
    elif choice == 8:
        items.pop_back()
    elif choice == 9:
        items.delete_after(_read_int("Enter the node you want to delete:\n"))
    elif choice == 10:
        items.remove(_read_int("Enter the number:\n"))
    elif choice == 11:
        number = _read_int("Enter the number which you want to search:\n")
        position = items.find(number)
        if position is None:
            print("Element is not found")
        else:
            print(f"{number} is present at {position} node")
    else:
        print("You have not chosen the given operation")
        return
    if choice not in (1, 11):
        print("List after operation:")
    _traverse(items)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive linked list menu."""
    parser = argparse.ArgumentParser(
        prog="structkit-linked-list", description="Interactive doubly linked list."
    )
    parser.parse_args(argv)
    try:
        count = _read_int("Enter the number of elements:\n")
        if count > 0:
            print("Enter the number:")
        items = DoublyLinkedList(int(input()) for _ in range(count))
        if count <= 0:
            print("Empty list")
        print("list before operation:")
        _traverse(items)
        again = True
        while again:
            print(_MENU)
            try:
                _run_choice(items, _read_int("Enter your choice:\n"))
            except (IndexError, ValueError) as exc:
                print(exc)
            again = input("would you like to try again? (1/0)\n").strip() == "1"
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())