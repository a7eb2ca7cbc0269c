import pytest

from algocol.avl_tree import AVLTree, AVLTreeNode, Side, subtree_height
from algocol.compare import int_compare

NUM_TEST_VALUES = 1000


def _check_subtree(node, parent):
    if node is None:
        return 0
    assert node.parent is parent
    left = _check_subtree(node.child(Side.LEFT), node)
    right = _check_subtree(node.child(Side.RIGHT), node)
    assert abs(left - right) <= 1
    height = max(left, right) + 1
    assert subtree_height(node) == height
    return height


def validate_tree(tree):
    _check_subtree(tree.root_node, None)
    keys = tree.to_list()
    assert keys == sorted(keys)
    assert len(keys) == len(tree)


def create_tree():
    tree = AVLTree(int_compare)
    for i in range(NUM_TEST_VALUES):
        tree.insert(i, i)
    return tree


def test_new_tree_is_empty():
    tree = AVLTree(int_compare)
    assert tree.root_node is None
    assert len(tree) == 0
    assert tree.to_list() == []


def test_subtree_height_of_none_is_zero():
    assert subtree_height(None) == 0


def test_insert_lookup_keeps_balance():
    tree = AVLTree(int_compare)
    for i in range(NUM_TEST_VALUES):
        node = tree.insert(i, i * 2)
        assert node.key == i
        assert len(tree) == i + 1
        validate_tree(tree)

    for i in range(NUM_TEST_VALUES):
        node = tree.lookup_node(i)
        assert node.key == i
        assert node.value == i * 2

    assert tree.lookup_node(-1) is None
    assert tree.lookup_node(NUM_TEST_VALUES + 100) is None


def test_child_access():
    tree = AVLTree(int_compare)
    for value in (1, 2, 3):
        tree.insert(value, value)

    root = tree.root_node
    assert root.value == 2
    assert root.child(Side.LEFT).value == 1
    assert root.child(Side.RIGHT).value == 3
    assert root.child(Side.LEFT).parent is root
    assert root.child(10000) is None
    assert root.child(2) is None


def test_lookup():
    tree = create_tree()
    for i in range(NUM_TEST_VALUES):
        assert tree.lookup(i) == i
    for missing in (-1, NUM_TEST_VALUES + 1, 8724897):
        with pytest.raises(KeyError):
            tree.lookup(missing)


def test_remove():
    tree = create_tree()
    assert tree.remove(NUM_TEST_VALUES + 100) is False
    assert tree.remove(-1) is False

    expected = NUM_TEST_VALUES
    for x in range(10):
        for y in range(10):
            for z in range(10):
                value = z * 100 + (9 - y) * 10 + x
                assert tree.remove(value) is True
                expected -= 1
                assert len(tree) == expected
                validate_tree(tree)

    assert tree.root_node is None
    assert tree.to_list() == []


def test_remove_node():
    tree = create_tree()
    node = tree.lookup_node(500)
    tree.remove_node(node)
    validate_tree(tree)
    assert len(tree) == NUM_TEST_VALUES - 1
    assert tree.lookup_node(500) is None
    assert 500 not in tree.to_list()


def test_remove_root_repeatedly():
    tree = create_tree()
    while tree.root_node is not None:
        key = tree.root_node.key
        tree.remove_node(tree.root_node)
        assert tree.lookup_node(key) is None
        validate_tree(tree)
    assert len(tree) == 0


def test_to_list_sorted():
    entries = [89, 23, 42, 4, 16, 15, 8, 99, 50, 30]
    tree = AVLTree(int_compare)
    for entry in entries:
        tree.insert(entry, None)
    assert len(tree) == len(entries)
    assert tree.to_list() == sorted(entries)
    assert list(tree) == sorted(entries)
    validate_tree(tree)


def test_duplicate_keys_are_kept():
    tree = AVLTree(int_compare)
    tree.insert(5, "a")
    tree.insert(5, "b")
    tree.insert(3, "c")
    assert len(tree) == 3
    assert tree.to_list() == [3, 5, 5]
    assert tree.remove(5) is True
    assert tree.to_list() == [3, 5]
    validate_tree(tree)


def test_string_keys_with_custom_compare():
    tree = AVLTree(lambda a, b: (a > b) - (a < b))
    words = ["pear", "apple", "fig", "kiwi", "banana"]
    for word in words:
        tree.insert(word, len(word))
    assert tree.to_list() == sorted(words)
    assert tree.lookup("kiwi") == len("kiwi")
    validate_tree(tree)


def test_node_repr_and_sides():
    node = AVLTreeNode(1, "one")
    assert node.left is None
    assert node.right is None
    assert node.child(Side.RIGHT) is None
    assert "one" in repr(node)
    assert subtree_height(node) == 1