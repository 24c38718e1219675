# structkit

A collection of classic data structures and algorithms in plain Python,
with no runtime dependencies. Each module stands on its own and has a small
command-line front end.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module | What it offers |
| --- | --- |
| `structkit.expression` | Infix to postfix conversion (`infix_to_postfix`), postfix evaluation (`evaluate_postfix`), expression trees (`build_tree`, `ExprNode`), errors as `ExpressionError` |
| `structkit.polynomial` | Polynomials kept in descending exponent order (`Polynomial`, `Term`), parsing (`parse_polynomial`) and addition (`add_polynomials`, `+`) |
| `structkit.sparse` | Sparse integer matrices indexed by row and by column (`SparseMatrix`, `SparseEntry`, `parse_sparse`, `load_sparse`) |
| `structkit.bst` | A binary search tree of students keyed by MIS number (`StudentTree`, `TreeNode`) |
| `structkit.bst_array` | A binary search tree stored in an array (`ArrayBST`, `from_values`, `tree_height`, `max_nodes`) and rebuilding a tree from its postorder traversal (`build_from_postorder`, `inorder_values`, `Node`) |
| `structkit.avl` | A self-balancing AVL tree of names that reports the rotations it makes (`AVLTree`, `AVLNode`, `Rotation`) |
| `structkit.heap` | Max- and min-heaps with an optional capacity (`MaxHeap`, `MinHeap`, `BinaryHeap`, `HeapFullError`), heap sort (`heap_sort`) and a random integer file writer (`generate_integers`) |
| `structkit.graph` | Weighted directed graphs from an adjacency matrix: BFS, DFS, symmetry, degrees, Prim's and Dijkstra's algorithms (`Graph`, `Edge`, `parse_graph`, `load_graph`) |
| `structkit.linked_list` | A doubly linked list of integers with 1-based positions (`DoublyLinkedList`) |
| `structkit.records` | Fixed-size binary student records in a flat file (`Student`, `StudentFile`) |

## Examples

Expressions (operands are single digits; `/` truncates toward zero):

```python
from structkit.expression import infix_to_postfix, evaluate_postfix, build_tree

postfix = infix_to_postfix("2+3*4")     # "234*+"
evaluate_postfix(postfix)               # 14

tree = build_tree(postfix)
tree.inorder()                          # "2+3*4"
tree.evaluate()                         # 14
```

Polynomials (terms with equal exponents inside one polynomial are not merged):

```python
from structkit.polynomial import parse_polynomial, add_polynomials

total = add_polynomials(parse_polynomial("3x^2+2x^1"), parse_polynomial("4x^2+1x^0"))
print(total)                            # (7x^2)+(2x^1)+(1x^0)
```

Sparse matrices:

```python
from structkit.sparse import parse_sparse

matrix = parse_sparse("2 3\n0 5 0\n7 0 0")
matrix.row_entries(0)                   # [SparseEntry(row=0, column=1, value=5)]
print(matrix.format())                  # "(column, row, value)," lines, column by column
```

Search trees:

```python
from structkit.bst import StudentTree
from structkit.avl import AVLTree

students = StudentTree()
students.insert(42, "Asha")             # True; a repeated MIS number returns False
42 in students                          # True
[node.mis for node in students.inorder()]

months = AVLTree()
for name in ("Jan", "Feb", "Mar"):
    months.insert(name)                 # the Rotation performed, or None
months.remove("Feb")                    # list of rotations; KeyError if absent
```

Heaps:

```python
from structkit.heap import MaxHeap, heap_sort

heap = MaxHeap(10)                      # pushing past 10 items raises HeapFullError
for value in (5, 1, 9, 3):
    heap.push(value)
heap.pop()                              # 9

heap_sort([5, 1, 9, 3])                 # [1, 3, 5, 9]
heap_sort([5, 1, 9, 3], descending=True)   # [9, 5, 3, 1]
```

Graphs (zero in the matrix means no edge):

```python
from structkit.graph import parse_graph

graph = parse_graph("""
3
0 4 1
4 0 2
1 2 0
""")
graph.bfs(0)
graph.dfs(0)
graph.is_symmetric()                    # True
graph.prim(0)                           # list of Edge; ValueError if not connected
graph.dijkstra(0)                       # distances; None where unreachable
```

Linked lists:

```python
from structkit.linked_list import DoublyLinkedList

items = DoublyLinkedList([1, 2, 3])
items.reverse()
list(items)                             # [3, 2, 1]
items.insert_at(2, 9)                   # [3, 9, 2, 1]
items.find(2)                           # 3
```

Student records:

```python
from structkit.records import Student, StudentFile

records = StudentFile("students.dat")
records.add(Student(1, "Asha", "Computer", 8.5))
records.find_by_stream("Computer")
records.count_by_stream()               # counts for the seven known streams
records.delete(1)                       # number removed; KeyError if none
```

## Command-line tools

```
structkit-expression [EXPRESSION]            # show postfix form, subtree results and the value
structkit-polynomial [FIRST] [SECOND]        # print the sum of two polynomials
structkit-sparse FILE                        # list the non-zero entries of a matrix file
structkit-bst                                # interactive menu over a student search tree
structkit-bst-array                          # array BST traversals, then a tree from postorder
structkit-avl                                # interactive menu over an AVL tree of names
structkit-heap FILE COUNT [--min] [--generate]
structkit-graph FILE [--start N] [--prim] [--dijkstra]
structkit-list                               # interactive menu over a doubly linked list
structkit-records [FILE]                     # interactive menu over a record file
```

Missing arguments to `structkit-expression` and `structkit-polynomial` are
asked for on standard input. `structkit-heap` reads `COUNT` integers from
`FILE` (writing random ones there first with `--generate`), prints the heap
in array order (a min-heap with `--min`) and then the values sorted in
ascending order. `structkit-records` uses `Student_Record.dat` when no file
is given. Each command accepts `--help`.

## Limits

- The trees, heaps and lists live in memory only; the interactive menus do
  not save them between runs. Only `structkit.records` keeps data in a file.
- The record file layout uses the machine's native byte order, so files are
  not guaranteed to be portable between machines; names and streams must be
  under 40 bytes.
- Expressions accept only single-digit operands.