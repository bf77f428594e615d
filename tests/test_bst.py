import io

import pytest

from algokit.bst import BinarySearchTree, load_tree, main
from algokit.records import Record

KEYS = [50, 30, 70, 20, 40, 60, 80, 35, 45, 65]


@pytest.fixture
def tree():
    return BinarySearchTree(Record(key, f"w{key}") for key in KEYS)


@pytest.fixture
def node_file(tmp_path):
    path = tmp_path / "node.txt"
    path.write_text("Nodes:\n5 e\n2 b\n8 h\nEdges:\n5 2\n", encoding="utf-8")
    return path


def _keys(tree):
    return [record.num for record in tree]


def test_iteration_is_sorted(tree):
    assert _keys(tree) == sorted(KEYS)
    assert len(tree) == len(KEYS)


def test_names_travel_with_keys(tree):
    assert all(record.string == f"w{record.num}" for record in tree)


def test_empty_tree():
    tree = BinarySearchTree()
    assert list(tree) == []
    assert len(tree) == 0
    assert tree.delete(1) is False


def test_duplicates_are_kept():
    tree = BinarySearchTree()
    tree.insert(5, "first")
    tree.insert(5, "second")
    tree.insert(3, "low")
    assert list(tree) == [Record(3, "low"), Record(5, "first"), Record(5, "second")]


@pytest.mark.parametrize("key", [20, 80, 60, 30, 70, 50, 40])
def test_delete_keeps_order(tree, key):
    assert tree.delete(key) is True
    expected = sorted(KEYS)
    expected.remove(key)
    assert _keys(tree) == expected
    assert len(tree) == len(KEYS) - 1
    assert all(record.string == f"w{record.num}" for record in tree)


def test_delete_missing_key(tree):
    assert tree.delete(999) is False
    assert _keys(tree) == sorted(KEYS)


def test_delete_everything(tree):
    for key in KEYS:
        assert tree.delete(key) is True
    assert list(tree) == []
    assert len(tree) == 0


def test_delete_one_duplicate():
    tree = BinarySearchTree([Record(4, "a"), Record(4, "b"), Record(4, "c")])
    assert tree.delete(4) is True
    assert _keys(tree) == [4, 4]


def test_load_tree(node_file):
    tree = load_tree(node_file)
    assert list(tree) == [Record(2, "b"), Record(5, "e"), Record(8, "h")]


def test_main_insert_and_delete(node_file, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n7\ng\n3\n5\n1\n0\n"))
    assert main([str(node_file)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Binary search tree (inorder traversal):\n2 b\n5 e\n8 h\n")
    assert "2 b\n7 g\n8 h\n" in out
    assert out.count("5 e") == 1


def test_main_exits_on_end_of_input(node_file, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([str(node_file)]) == 0
    assert "You can choose the following" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Error opening file!" in capsys.readouterr().out