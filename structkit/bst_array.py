"""Binary search trees stored in arrays, and trees rebuilt from postorder."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence


@dataclass(eq=False)
class Node:
    """A linked binary tree node."""

    data: int
    left: Optional[Node] = None
    right: Optional[Node] = None


def _insert_linked(root: Optional[Node], value: int) -> Node:
    new = Node(value)
    if root is None:
        return new
    node = root
    while node.data != value:
        if value < node.data:
            if node.left is None:
                node.left = new
                break
            node = node.left
        else:
            if node.right is None:
                node.right = new
                break
            node = node.right
    return root


def _height(node: Optional[Node]) -> int:
    if node is None:
        return -1
    return 1 + max(_height(node.left), _height(node.right))


def tree_height(values: Iterable[int]) -> int:
    """Height of the BST built from the values, ignoring duplicates; -1 if empty."""
    root: Optional[Node] = None
    for value in values:
        root = _insert_linked(root, value)
    return _height(root)


def max_nodes(height: int) -> int:
    """Number of slots in a full binary tree of the given height."""
    return (1 << (height + 1)) - 1 if height >= 0 else 0


class ArrayBST:
    """A BST in a fixed array: children of slot i live at 2i+1 and 2i+2."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._slots: list[Optional[int]] = [None] * size

    @property
    def slots(self) -> tuple[Optional[int], ...]:
        """The array contents; empty slots are None."""
        return tuple(self._slots)

    def insert(self, value: int) -> bool:
        """Place a value; equal values go right. Return False if no slot is left."""
        index = 0
        while index < self.size:
            current = self._slots[index]
            if current is None:
                self._slots[index] = value
                return True
            index = 2 * index + 1 if current > value else 2 * index + 2
        return False

    def _filled(self, index: int) -> bool:
        return index < self.size and self._slots[index] is not None

    def _walk(self, index: int, order: str) -> Iterator[int]:
        if not self._filled(index):
            return
        value = self._slots[index]
        if order == "pre":
            yield value
        yield from self._walk(2 * index + 1, order)
        if order == "in":
            yield value
        yield from self._walk(2 * index + 2, order)
        if order == "post":
            yield value

    def preorder(self) -> list[int]:
        """Values in preorder."""
        return list(self._walk(0, "pre"))

    def inorder(self) -> list[int]:
        """Values in inorder."""
        return list(self._walk(0, "in"))

    def postorder(self) -> list[int]:
        """Values in postorder."""
        return list(self._walk(0, "post"))

    def is_complete(self) -> bool:
        """True when every slot of the array holds a value."""
        return all(slot is not None for slot in self._slots)


def from_values(values: Iterable[int]) -> ArrayBST:
    """Build an array BST sized to hold the tree the values form."""
    items = list(values)
    tree = ArrayBST(max_nodes(tree_height(items)))
    for value in items:
        tree.insert(value)
    return tree


def build_from_postorder(postorder: Sequence[int]) -> Optional[Node]:
    """Rebuild a BST from its postorder traversal."""
    if not postorder:
        return None
    root_value = postorder[-1]
    body = postorder[:-1]
    split = next(
        (i for i in range(len(body) - 1, -1, -1) if body[i] < root_value), -1
    )
    return Node(
        root_value,
        build_from_postorder(body[: split + 1]),
        build_from_postorder(body[split + 1 :]),
    )


def inorder_values(node: Optional[Node]) -> list[int]:
    """Values of a linked tree in inorder."""
    result: list[int] = []
    stack: list[Node] = []
    current = node
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = current.left
        top = stack.pop()
        result.append(top.data)
        current = top.right
    return result


def _dashed(values: Iterable[int]) -> str:
    return "".join(f"{value}-" for value in values)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build an array BST from input values, then rebuild a tree from postorder."""
    parser = argparse.ArgumentParser(
        prog="structkit-bst-array",
        description="Array-backed BST traversals and postorder reconstruction.",
    )
    parser.parse_args(argv)
    try:
        print("Part-I")
        count = int(input("Enter the number of elements to be inserted:"))
        values = [int(input()) for _ in range(count)]
        tree = from_values(values)
        print("Preorder Traversal:")
        print(_dashed(tree.preorder()))
        print("Postorder Traversal:")
        print(_dashed(tree.postorder()))
        print("Inorder Traversal:")
        print(_dashed(tree.inorder()))

        print("Part-II")
        count = int(input("Enter the number of elements in postorder traversal:"))
        print("Enter the numbers in postorder traversal:")
        postorder = [int(input("Enter the number:")) for _ in range(count)]
        root = build_from_postorder(postorder)
        print("Inorder Traversal:")
        print(_dashed(inorder_values(root)))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except EOFError:
        print("error: unexpected end of input", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())