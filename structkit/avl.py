"""Self-balancing AVL tree of names with parent links and balance factors."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, NamedTuple, Optional, Sequence

_MENU = """1. Initialize the tree
2. Add a new node to the tree
3. Remove a node from a tree
4. Inorder Traversal
5. Delete all the nodes from tree
6. Exit
Enter your choice"""


class Rotation(Enum):
    """The kind of imbalance found and the rotation that repaired it."""

    LL = "LL"
    LR = "LR"
    RR = "RR"
    RL = "RL"


@dataclass(eq=False)
class AVLNode:
    """A tree node; ``bf`` is left height minus right height."""

    name: str
    bf: int = 0
    height: int = 1
    left: Optional[AVLNode] = field(default=None, repr=False)
    right: Optional[AVLNode] = field(default=None, repr=False)
    parent: Optional[AVLNode] = field(default=None, repr=False)


class _Fix(NamedTuple):
    name: str
    bf: int
    rotation: Rotation


def _height(node: Optional[AVLNode]) -> int:
    return node.height if node is not None else 0


def _update(node: AVLNode) -> None:
    left, right = _height(node.left), _height(node.right)
    node.height = 1 + max(left, right)
    node.bf = left - right


class AVLTree:
    """An AVL tree ordered by string comparison; equal names go to the right."""

    def __init__(self) -> None:
        self.root: Optional[AVLNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, name: str) -> Optional[Rotation]:
        """Add a name; return the rotation performed, or None if none was needed."""
        fixes = self._insert(name)
        return fixes[0].rotation if fixes else None

    def _insert(self, name: str) -> list[_Fix]:
        node = AVLNode(name)
        self._size += 1
        if self.root is None:
            self.root = node
            return []
        parent = self.root
        while True:
            if name < parent.name:
                if parent.left is None:
                    parent.left = node
                    break
                parent = parent.left
            else:
                if parent.right is None:
                    parent.right = node
                    break
                parent = parent.right
        node.parent = parent
        return self._rebalance(parent)

    def _find(self, name: str) -> Optional[AVLNode]:
        node = self.root
        while node is not None and node.name != name:
            node = node.left if name < node.name else node.right
        return node

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._find(name) is not None

    def remove(self, name: str) -> list[Rotation]:
        """Remove a name and return the rotations performed.

        Raises KeyError if the name is not in the tree.
        """
        return [fix.rotation for fix in self._remove(name)]

    def _remove(self, name: str) -> list[_Fix]:
        node = self._find(name)
        if node is None:
            raise KeyError(name)
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.name = successor.name
            node = successor
        child = node.left if node.left is not None else node.right
        parent = node.parent
        self._replace(node, child)
        self._size -= 1
        return self._rebalance(parent)

    def _replace(self, old: AVLNode, new: Optional[AVLNode]) -> None:
        parent = old.parent
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new
        if new is not None:
            new.parent = parent

    def _rebalance(self, node: Optional[AVLNode]) -> list[_Fix]:
        fixes: list[_Fix] = []
        while node is not None:
            _update(node)
            if abs(node.bf) > 1:
                rotation = self._classify(node)
                fixes.append(_Fix(node.name, node.bf, rotation))
                node = self._rotate(node, rotation)
            node = node.parent
        return fixes

    @staticmethod
    def _classify(node: AVLNode) -> Rotation:
        if node.bf > 1:
            return Rotation.LL if node.left.bf >= 0 else Rotation.LR
        return Rotation.RR if node.right.bf <= 0 else Rotation.RL

    def _rotate(self, node: AVLNode, rotation: Rotation) -> AVLNode:
        if rotation is Rotation.LR:
            self._rotate_left(node.left)
        elif rotation is Rotation.RL:
            self._rotate_right(node.right)
        if rotation in (Rotation.LL, Rotation.LR):
            return self._rotate_right(node)
        return self._rotate_left(node)

    def _rotate_right(self, a: AVLNode) -> AVLNode:
        b = a.left
        a.left = b.right
        if a.left is not None:
            a.left.parent = a
        self._replace(a, b)
        b.right = a
        a.parent = b
        _update(a)
        _update(b)
        return b

    def _rotate_left(self, a: AVLNode) -> AVLNode:
        b = a.right
        a.right = b.left
        if a.right is not None:
            a.right.parent = a
        self._replace(a, b)
        b.left = a
        a.parent = b
        _update(a)
        _update(b)
        return b

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path; 0 when empty."""
        return _height(self.root)

    def inorder(self) -> Iterator[AVLNode]:
        """Yield the nodes in ascending order."""
        stack: list[AVLNode] = []
        current = self.root
        while current is not None or stack:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield node
            current = node.right

    def level(self, depth: int) -> list[AVLNode]:
        """Return the nodes at a depth, left to right; the root is depth 0."""
        if depth < 0:
            return []
        frontier = [self.root] if self.root is not None else []
        for _ in range(depth):
            frontier = [
                child
                for node in frontier
                for child in (node.left, node.right)
                if child is not None
            ]
        return frontier

    def clear(self) -> None:
        """Remove every node."""
        self.root = None
        self._size = 0


def _report(fixes: list[_Fix]) -> None:
    if not fixes:
        print("No imbalance\n")
        return
    for fix in fixes:
        print(f"Imbalance at {fix.name} -> {fix.bf}")
        print(f"{fix.rotation.value} Imbalance\n")


def _read_name() -> str:
    words = input("Enter the month name:\n").split()
    return words[0] if words else ""


def _run_choice(tree: AVLTree, choice: int) -> bool:
    if choice in (1, 5):
        tree.clear()
    elif choice == 2:
        _report(tree._insert(_read_name()))
    elif choice == 3:
        name = _read_name()
        try:
            _report(tree._remove(name))
        except KeyError:
            print(f"{name} is not in the tree\n")
    elif choice == 4:
        for node in tree.inorder():
            print(f"child node: {node.name} -> {node.bf}")
            if node.parent is not None:
                print(f"Parent node: {node.parent.name} -> {node.parent.bf}")
            else:
                print("Parent node: NULL")
            print()
    elif choice == 6:
        return False
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive AVL tree menu."""
    parser = argparse.ArgumentParser(
        prog="structkit-avl", description="Interactive AVL tree of month names."
    )
    parser.parse_args(argv)
    tree = AVLTree()
    running = True
    try:
        while running:
            print(_MENU)
            try:
                choice = int(input().strip())
            except ValueError:
                continue
            running = _run_choice(tree, choice)
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())