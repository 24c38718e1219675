"""Classic data structures and algorithms: expressions, polynomials, sparse
matrices, search trees, heaps, graphs, linked lists and student record files."""

__version__ = "0.1.0"