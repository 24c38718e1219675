import io

import pytest

from structkit.bst_array import (
    ArrayBST,
    Node,
    build_from_postorder,
    from_values,
    inorder_values,
    main,
    max_nodes,
    tree_height,
)

VALUES = [50, 30, 70, 20, 40, 60, 80, 10]


def test_tree_height_empty():
    assert tree_height([]) == -1


def test_tree_height_sorted_chain():
    assert tree_height(range(6)) == 5


def test_tree_height_ignores_duplicates():
    assert tree_height([5, 5, 5]) == 0


@pytest.mark.parametrize("height", [0, 1, 2, 5])
def test_max_nodes_doubles(height):
    assert max_nodes(height + 1) == 2 * max_nodes(height) + 1


def test_max_nodes_base_cases():
    assert max_nodes(-1) == 0
    assert max_nodes(0) == 1


def test_from_values_inorder_sorted():
    tree = from_values(VALUES)
    assert tree.inorder() == sorted(VALUES)
    assert tree.size == max_nodes(tree_height(VALUES))


def test_traversal_roots():
    tree = from_values(VALUES)
    assert tree.preorder()[0] == VALUES[0]
    assert tree.postorder()[-1] == VALUES[0]
    assert sorted(tree.preorder()) == sorted(tree.postorder()) == sorted(VALUES)


def test_slot_layout():
    tree = from_values([2, 1, 3])
    assert tree.slots == (2, 1, 3)
    assert tree.is_complete() is True


def test_incomplete_tree():
    tree = from_values([1, 2])
    assert tree.is_complete() is False
    assert tree.slots[0] == 1


def test_insert_without_room():
    tree = ArrayBST(1)
    assert tree.insert(4) is True
    assert tree.insert(9) is False
    assert tree.inorder() == [4]


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        ArrayBST(-1)


def test_postorder_round_trip():
    tree = from_values(VALUES)
    root = build_from_postorder(tree.postorder())
    assert inorder_values(root) == tree.inorder()
    assert root.data == VALUES[0]


def test_build_from_empty_postorder():
    assert build_from_postorder([]) is None
    assert inorder_values(None) == []


def test_inorder_values_linked():
    root = Node(2, Node(1), Node(3))
    assert inorder_values(root) == [1, 2, 3]


def test_main(monkeypatch, capsys):
    script = "3\n2\n1\n3\n3\n1\n3\n2\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Preorder Traversal:\n2-1-3-" in out
    assert out.rstrip().endswith("1-2-3-")


def test_main_bad_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n"))
    assert main([]) == 1