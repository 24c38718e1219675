"""Weighted graphs held as adjacency lists, with traversals, MST and shortest paths."""

from __future__ import annotations

import argparse
import sys
from collections import Counter, deque
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union


@dataclass(frozen=True)
class Edge:
    """A weighted edge from ``start`` to ``dest``."""

    start: int
    dest: int
    weight: int


class Graph:
    """A directed weighted graph built from a square adjacency matrix.

    A zero entry means "no edge". Each vertex's neighbours are kept in
    descending vertex order, which fixes the order of the traversals.
    """

    def __init__(self, matrix: Sequence[Sequence[int]]) -> None:
        rows = [list(row) for row in matrix]
        size = len(rows)
        for index, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(
                    f"row {index} has {len(row)} values; expected {size}"
                )
        self.vertices = size
        self._adjacency: list[list[tuple[int, int]]] = [
            [(column, weight) for column, weight in reversed(list(enumerate(row))) if weight != 0]
            for row in rows
        ]

    def __len__(self) -> int:
        return self.vertices

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise IndexError(f"vertex {vertex} out of range")

    def neighbours(self, vertex: int) -> list[tuple[int, int]]:
        """Return ``(vertex, weight)`` pairs for the edges leaving a vertex."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def matrix(self) -> list[list[int]]:
        """Return the adjacency matrix, zero where there is no edge."""
        result = [[0] * self.vertices for _ in range(self.vertices)]
        for start, edges in enumerate(self._adjacency):
            for dest, weight in edges:
                result[start][dest] = weight
        return result

    def format_matrix(self) -> str:
        """Render the adjacency matrix one row per line."""
        return "\n".join(" ".join(str(value) for value in row) for row in self.matrix())

    def bfs(self, start: int) -> list[int]:
        """Return the vertices in breadth-first order from ``start``."""
        self._check(start)
        visited = [False] * self.vertices
        visited[start] = True
        order = [start]
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            for neighbour, _ in self._adjacency[vertex]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    order.append(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the vertices in the order a stack-driven search discovers them.

        All unvisited neighbours of a popped vertex are reported and pushed
        before the search moves on to the most recently pushed one.
        """
        self._check(start)
        visited = [False] * self.vertices
        visited[start] = True
        order = [start]
        stack = [start]
        while stack:
            vertex = stack.pop()
            for neighbour, _ in self._adjacency[vertex]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    order.append(neighbour)
                    stack.append(neighbour)
        return order

    def is_symmetric(self) -> bool:
        """True when every edge has a reverse edge, whatever its weight."""
        targets = [{dest for dest, _ in edges} for edges in self._adjacency]
        return all(
            start in targets[dest]
            for start, edges in enumerate(self._adjacency)
            for dest, _ in edges
        )

    def out_degrees(self) -> list[int]:
        """Number of edges leaving each vertex."""
        return [len(edges) for edges in self._adjacency]

    def in_degrees(self) -> list[int]:
        """Number of edges entering each vertex."""
        counts = Counter(dest for edges in self._adjacency for dest, _ in edges)
        return [counts[vertex] for vertex in range(self.vertices)]

    def prim(self, start: int) -> list[Edge]:
        """Return the edges of a minimum spanning tree grown from ``start``.

        Raises ValueError if some vertex cannot be reached.
        """
        self._check(start)
        visited = [False] * self.vertices
        visited[start] = True
        tree: list[Edge] = []
        for _ in range(self.vertices - 1):
            best: Optional[Edge] = None
            for vertex in range(self.vertices):
                if not visited[vertex]:
                    continue
                for dest, weight in self._adjacency[vertex]:
                    if not visited[dest] and (best is None or weight < best.weight):
                        best = Edge(vertex, dest, weight)
            if best is None:
                raise ValueError("graph is not connected")
            visited[best.dest] = True
            tree.append(best)
        return tree

    def dijkstra(self, source: int) -> list[Optional[int]]:
        """Return the shortest distance to every vertex; None where unreachable."""
        self._check(source)
        distance: list[Optional[int]] = [None] * self.vertices
        distance[source] = 0
        visited = [False] * self.vertices
        for _ in range(self.vertices):
            candidates = [
                vertex
                for vertex in range(self.vertices)
                if not visited[vertex] and distance[vertex] is not None
            ]
            if not candidates:
                break
            current = min(candidates, key=lambda vertex: distance[vertex])
            visited[current] = True
            base = distance[current]
            for dest, weight in self._adjacency[current]:
                if visited[dest]:
                    continue
                cost = base + weight
                if distance[dest] is None or cost < distance[dest]:
                    distance[dest] = cost
        return distance


def parse_graph(text: str) -> Graph:
    """Parse a vertex count followed by the adjacency matrix in row order."""
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError("graph data holds a value that is not an integer") from exc
    if not numbers:
        raise ValueError("graph data lacks its vertex count")
    size, *values = numbers
    if size < 0:
        raise ValueError("vertex count must not be negative")
    if len(values) < size * size:
        raise ValueError(f"expected {size * size} values, found {len(values)}")
    return Graph([values[row * size:(row + 1) * size] for row in range(size)])


def load_graph(path: Union[str, Path]) -> Graph:
    """Read a graph from a text file."""
    return parse_graph(Path(path).read_text())


def _print_degrees(graph: Graph, label: str, degrees: list[int]) -> None:
    print("Graph is undirected" if graph.is_symmetric() else "Graph is directed")
    for vertex, degree in enumerate(degrees):
        print(f"{label} of {vertex}: {degree}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load a graph file and print its matrix, traversals and degrees."""
    parser = argparse.ArgumentParser(
        prog="structkit-graph", description="Inspect a weighted graph."
    )
    parser.add_argument("path", help="file holding the vertex count and matrix")
    parser.add_argument("--start", type=int, default=0, help="start vertex")
    parser.add_argument("--prim", action="store_true", help="print a minimum spanning tree")
    parser.add_argument(
        "--dijkstra", action="store_true", help="print shortest distances from the start"
    )
    args = parser.parse_args(argv)
    try:
        graph = load_graph(args.path)
    except OSError as exc:
        print(f"Unable to open the file: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    try:
        print(graph.format_matrix())
        print(" ".join(str(vertex) for vertex in graph.bfs(args.start)))
        print(" ".join(str(vertex) for vertex in graph.dfs(args.start)))
        print(int(graph.is_symmetric()))
        _print_degrees(graph, "Outdegree", graph.out_degrees())
        _print_degrees(graph, "Indegree", graph.in_degrees())
        if args.prim:
            print(
                "".join(f"({e.start}, {e.dest}, {e.weight}), " for e in graph.prim(args.start))
            )
        if args.dijkstra:
            print("Vertex\tDistance")
            for vertex, distance in enumerate(graph.dijkstra(args.start)):
                print(f"{vertex}\t{'unreachable' if distance is None else distance}")
    except (IndexError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())