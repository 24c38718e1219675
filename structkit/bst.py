"""Binary search tree of student records keyed by MIS number."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

_MENU = """1. Initialize the tree
2. Add a new node to the tree
3. Remove a node from a tree
4. Search for a node
5. Postorder Traversal
6. Display all nodes of ith order
7. Delete all the nodes from tree
8. Inorder TraversaL
9. Exit
"""


@dataclass(eq=False)
class TreeNode:
    """A student record linked to its parent and children."""

    mis: int
    name: str
    parent: Optional[TreeNode] = field(default=None, repr=False)
    left: Optional[TreeNode] = field(default=None, repr=False)
    right: Optional[TreeNode] = field(default=None, repr=False)


class StudentTree:
    """A binary search tree ordered by MIS number; duplicate keys are ignored."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, mis: int, name: str) -> bool:
        """Add a record; return False if the MIS number is already present."""
        if self.root is None:
            self.root = TreeNode(mis, name)
            self._size = 1
            return True
        node = self.root
        while True:
            if mis == node.mis:
                return False
            if mis < node.mis:
                if node.left is None:
                    node.left = TreeNode(mis, name, parent=node)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(mis, name, parent=node)
                    break
                node = node.right
        self._size += 1
        return True

    def search(self, mis: int) -> Optional[TreeNode]:
        """Return the node holding the MIS number, or None."""
        node = self.root
        while node is not None and node.mis != mis:
            node = node.left if mis < node.mis else node.right
        return node

    def __contains__(self, mis: object) -> bool:
        return isinstance(mis, int) and self.search(mis) is not None

    def _replace(self, node: TreeNode, child: Optional[TreeNode]) -> None:
        parent = node.parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        if child is not None:
            child.parent = parent

    def remove(self, mis: int) -> bool:
        """Remove a record; return False if it was not present.

        A node with two children takes over its inorder successor's record.
        """
        node = self.search(mis)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.mis, node.name = successor.mis, successor.name
            node = successor
        self._replace(node, node.left if node.left is not None else node.right)
        self._size -= 1
        return True

    def postorder(self) -> Iterator[TreeNode]:
        """Yield the nodes in postorder."""
        stack: list[TreeNode] = []
        current = self.root
        previous: Optional[TreeNode] = None
        while current is not None or stack:
            if current is not None:
                stack.append(current)
                current = current.left
                continue
            top = stack[-1]
            if top.right is None or top.right is previous:
                yield stack.pop()
                previous = top
            else:
                current = top.right

    def inorder(self) -> Iterator[TreeNode]:
        """Yield the nodes in ascending MIS order."""
        stack: list[TreeNode] = []
        current = self.root
        while current is not None or stack:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield node
            current = node.right

    def level(self, depth: int) -> list[int]:
        """Return the MIS numbers at a depth, left to right; the root is depth 0."""
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
        return [node.mis for node in frontier]

    def clear(self) -> None:
        """Remove every record."""
        self.root = None
        self._size = 0


def _read_int(prompt: str) -> int:
    return int(input(prompt).strip())


def _run_choice(tree: StudentTree, choice: int) -> bool:
    if choice == 1:
        tree.clear()
    elif choice == 2:
        for _ in range(_read_int("Enter the number of elements:")):
            mis = _read_int("Enter the MIS No:")
            name = input("Enter the Name:")
            tree.insert(mis, name)
    elif choice == 3:
        tree.remove(_read_int("Enter the element to be removed:"))
    elif choice == 4:
        found = _read_int("Enter the element to be search:") in tree
        print(f"\nfound /not found {int(found)}")
    elif choice == 5:
        print("Postorder traversal:")
        for node in tree.postorder():
            print(f"Child node - {node.mis} : {node.name}")
            if node.parent is None:
                print("NULL")
            else:
                print(f"Parent node - {node.parent.mis} : {node.parent.name}")
    elif choice == 6:
        depth = _read_int("Enter the level:")
        print("".join(f" {mis} " for mis in tree.level(depth)))
    elif choice == 7:
        tree.clear()
        print("Tree is deleted\n")
    elif choice == 8:
        print(" ".join(str(node.mis) for node in tree.inorder()))
    elif choice == 9:
        return False
    else:
        print("Wrong choice")
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive student tree menu."""
    parser = argparse.ArgumentParser(
        prog="structkit-bst", description="Interactive binary search tree of students."
    )
    parser.parse_args(argv)
    tree = StudentTree()
    running = True
    try:
        while running:
            print(_MENU)
            try:
                running = _run_choice(tree, _read_int("Enter your choice : "))
            except ValueError:
                print("Wrong choice")
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())