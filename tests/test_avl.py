import random

import pytest

from structkit.avl import AVLTree, Rotation, main

MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


def _check(node, parent=None):
    """Return the height of a subtree after verifying its stored fields."""
    if node is None:
        return 0
    assert node.parent is parent
    left = _check(node.left, node)
    right = _check(node.right, node)
    if node.left is not None:
        assert node.left.name < node.name
    if node.right is not None:
        assert node.right.name >= node.name
    assert node.bf == left - right
    assert abs(node.bf) <= 1
    assert node.height == 1 + max(left, right)
    return node.height


def _names(tree):
    return [node.name for node in tree.inorder()]


@pytest.mark.parametrize(
    "order, rotation, root",
    [
        (["c", "b", "a"], Rotation.LL, "b"),
        (["a", "b", "c"], Rotation.RR, "b"),
        (["c", "a", "b"], Rotation.LR, "b"),
        (["a", "c", "b"], Rotation.RL, "b"),
    ],
)
def test_single_rotations(order, rotation, root):
    tree = AVLTree()
    assert tree.insert(order[0]) is None
    assert tree.insert(order[1]) is None
    assert tree.insert(order[2]) is rotation
    assert tree.root.name == root
    assert _names(tree) == ["a", "b", "c"]
    _check(tree.root)


def test_months_stay_balanced_and_sorted():
    tree = AVLTree()
    for month in MONTHS:
        tree.insert(month)
        _check(tree.root)
    assert _names(tree) == sorted(MONTHS)
    assert len(tree) == len(MONTHS)
    assert tree.height() == _check(tree.root)


def test_contains():
    tree = AVLTree()
    for month in MONTHS[:6]:
        tree.insert(month)
    assert "March" in tree
    assert "December" not in tree
    assert 3 not in tree


def test_remove_missing_raises_key_error():
    tree = AVLTree()
    tree.insert("May")
    with pytest.raises(KeyError):
        tree.remove("June")
    assert _names(tree) == ["May"]


def test_remove_triggers_rotation():
    tree = AVLTree()
    for name in ["b", "a", "c", "d"]:
        tree.insert(name)
    assert tree.remove("a") == [Rotation.RR]
    assert tree.root.name == "c"
    assert _names(tree) == ["b", "c", "d"]
    _check(tree.root)


def test_remove_node_with_two_children():
    tree = AVLTree()
    for name in ["d", "b", "f", "a", "c", "e", "g"]:
        tree.insert(name)
    assert tree.remove("d") == []
    assert "d" not in tree
    assert _names(tree) == ["a", "b", "c", "e", "f", "g"]
    _check(tree.root)


def test_random_inserts_and_removals_keep_invariants():
    rng = random.Random(7)
    words = [f"w{n:03d}" for n in range(200)]
    rng.shuffle(words)
    tree = AVLTree()
    for word in words:
        tree.insert(word)
    _check(tree.root)
    removed = words[::3]
    for word in removed:
        tree.remove(word)
        _check(tree.root)
    assert _names(tree) == sorted(set(words) - set(removed))
    assert len(tree) == len(words) - len(removed)


def test_duplicates_are_kept():
    tree = AVLTree()
    for name in ["x", "x", "x"]:
        tree.insert(name)
    assert _names(tree) == ["x", "x", "x"]
    tree.remove("x")
    assert _names(tree) == ["x", "x"]


def test_level_and_clear():
    tree = AVLTree()
    for name in ["b", "a", "c"]:
        tree.insert(name)
    assert [node.name for node in tree.level(0)] == ["b"]
    assert [node.name for node in tree.level(1)] == ["a", "c"]
    assert tree.level(5) == []
    assert tree.level(-1) == []
    tree.clear()
    assert tree.height() == 0
    assert _names(tree) == []


def test_main_reports_rotation(monkeypatch, capsys):
    answers = iter(["2", "c", "2", "b", "2", "a", "4", "6"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Imbalance at c -> 2" in out
    assert "LL Imbalance" in out
    assert "child node: b -> 0" in out
    assert "Parent node: NULL" in out