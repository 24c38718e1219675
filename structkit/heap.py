"""Bounded binary heaps, heap sort, and a generator of random integer files."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, Union

RAND_MAX = 2**31 - 1


class HeapFullError(OverflowError):
    """Raised when pushing onto a heap that has reached its capacity."""


class BinaryHeap:
    """An array-backed binary heap with an optional capacity."""

    def __init__(
        self,
        capacity: Optional[int] = None,
        values: Iterable[int] = (),
        *,
        largest_first: bool = True,
    ) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.largest_first = largest_first
        self._items: list[int] = []
        for value in values:
            self.push(value)

    def _higher(self, a: int, b: int) -> bool:
        return a > b if self.largest_first else a < b

    def push(self, value: int) -> None:
        """Add a value, sifting it up; raise HeapFullError at capacity."""
        items = self._items
        if self.capacity is not None and len(items) >= self.capacity:
            raise HeapFullError(f"heap is full ({self.capacity} items)")
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if not self._higher(items[index], items[parent]):
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def pop(self) -> int:
        """Remove and return the top value; raise IndexError when empty."""
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")
        items[0], items[-1] = items[-1], items[0]
        top = items.pop()
        index = 0
        size = len(items)
        while True:
            left, right = 2 * index + 1, 2 * index + 2
            if left >= size:
                break
            child = left
            if right < size and not self._higher(items[left], items[right]):
                child = right
            if not self._higher(items[child], items[index]):
                break
            items[index], items[child] = items[child], items[index]
            index = child
        return top

    def peek(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate over the values in their array order."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class MaxHeap(BinaryHeap):
    """A heap whose top is its largest value."""

    def __init__(self, capacity: Optional[int] = None, values: Iterable[int] = ()) -> None:
        super().__init__(capacity, values, largest_first=True)


class MinHeap(BinaryHeap):
    """A heap whose top is its smallest value."""

    def __init__(self, capacity: Optional[int] = None, values: Iterable[int] = ()) -> None:
        super().__init__(capacity, values, largest_first=False)


def heap_sort(values: Iterable[int], descending: bool = False) -> list[int]:
    """Sort values by repeatedly removing the top of a heap."""
    items = list(values)
    heap: BinaryHeap = MinHeap(len(items), items) if descending else MaxHeap(len(items), items)
    popped = [heap.pop() for _ in range(len(items))]
    popped.reverse()
    return popped


def generate_integers(
    path: Union[str, Path], count: int = 50, seed: Optional[int] = None
) -> list[int]:
    """Write ``count`` random non-negative integers to a file and return them."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = random.Random(seed)
    values = [rng.randint(0, RAND_MAX) for _ in range(count)]
    Path(path).write_text("".join(f"{value} " for value in values))
    return values


def _read_integers(path: Union[str, Path], count: int) -> list[int]:
    tokens = Path(path).read_text().split()
    values = []
    for token in tokens[:count]:
        try:
            values.append(int(token))
        except ValueError:
            raise ValueError(f"{token!r} is not an integer") from None
    if len(values) < count:
        raise ValueError(f"expected {count} integers, found {len(values)}")
    return values


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load integers from a file into a heap and print the heap and sorted values."""
    parser = argparse.ArgumentParser(
        prog="structkit-heap", description="Heap sort integers read from a file."
    )
    parser.add_argument("path", help="file of whitespace-separated integers")
    parser.add_argument("count", type=int, help="number of integers to use")
    parser.add_argument("--min", action="store_true", help="use a min-heap")
    parser.add_argument(
        "--generate", action="store_true", help="first write random integers to the file"
    )
    args = parser.parse_args(argv)
    try:
        if args.generate:
            generate_integers(args.path, args.count)
        values = _read_integers(args.path, args.count)
    except OSError as exc:
        print(f"Unable to open the file: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    heap: BinaryHeap = MinHeap(args.count, values) if args.min else MaxHeap(args.count, values)
    print("Inserted heap:")
    print(" ".join(str(value) for value in heap))
    print()
    print("Sorted heap:")
    print(" ".join(str(value) for value in heap_sort(values)))
    return 0


if __name__ == "__main__":
    sys.exit(main())