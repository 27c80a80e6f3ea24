"""Tests for the random capture tree generator."""

import random

import pytest

from solochess.tree import GameTree, TreeNode, generate_game_tree


def assert_valid_tree(tree, max_depth):
    roots = [n for n in tree if n.parent_id is None]
    assert roots == [tree.root]
    assert tree.root.id == 0 and tree.root.level == 1
    for node in tree:
        assert node.level <= max_depth
        if node.parent_id is not None:
            assert node.parent_id < node.id
            assert node.level == tree[node.parent_id].level + 1
        assert node.num_of_children == sum(1 for n in tree if n.parent_id == node.id)


class TestGenerateGameTree:
    """Tests for tree shape invariants."""

    @pytest.mark.parametrize("size", [1, 2, 3, 8, 16, 40])
    @pytest.mark.parametrize("max_depth", [2, 3, 5])
    def test_tree_is_valid(self, size, max_depth):
        for seed in range(25):
            tree = generate_game_tree(size, max_depth, random.Random(seed))
            assert len(tree) == size
            assert_valid_tree(tree, max_depth)

    def test_single_node(self):
        tree = generate_game_tree(1, 3, random.Random(0))
        assert tree.leaves() == [tree.root]
        assert tree.depth() == 1

    def test_depth_two_is_a_star(self):
        tree = generate_game_tree(10, 2, random.Random(7))
        assert tree.root.num_of_children == 9
        assert all(n.parent_id == 0 for n in tree if n.id)

    def test_same_seed_same_tree(self):
        a = generate_game_tree(20, 3, random.Random(99))
        b = generate_game_tree(20, 3, random.Random(99))
        assert [(n.parent_id, n.level) for n in a] == [(n.parent_id, n.level) for n in b]

    def test_reaches_max_depth(self):
        depths = {generate_game_tree(16, 3, random.Random(s)).depth() for s in range(30)}
        assert 3 in depths
        assert max(depths) == 3

    @pytest.mark.parametrize("size,max_depth", [(0, 3), (-2, 3), (1, 0), (2, 1)])
    def test_rejects_bad_arguments(self, size, max_depth):
        with pytest.raises(ValueError):
            generate_game_tree(size, max_depth, random.Random(0))


class TestGameTree:
    """Tests for path and leaf queries on a hand-built tree."""

    @pytest.fixture
    def tree(self):
        #      0
        #    /   \
        #   1     2
        #  / \
        # 3   4
        return GameTree([
            TreeNode(id=0, parent_id=None, level=1, num_of_children=2),
            TreeNode(id=1, parent_id=0, level=2, num_of_children=2),
            TreeNode(id=2, parent_id=0, level=2),
            TreeNode(id=3, parent_id=1, level=3),
            TreeNode(id=4, parent_id=1, level=3),
        ])

    def test_path_to_root(self, tree):
        assert [n.id for n in tree.path_to_root(tree[4])] == [0, 1, 4]
        assert [n.id for n in tree.path_to_root(tree[2])] == [0, 2]
        assert [n.id for n in tree.path_to_root(tree.root)] == [0]

    def test_leaves(self, tree):
        assert [n.id for n in tree.leaves()] == [2, 3, 4]
        assert all(n.is_leaf for n in tree.leaves())

    def test_relations(self, tree):
        assert tree.parent_of(tree[3]) is tree[1]
        assert tree.parent_of(tree.root) is None
        assert [n.id for n in tree.children_of(tree[1])] == [3, 4]
        assert tree.root.is_root and not tree[1].is_root
        assert tree.depth() == 3
