# solochess/tree.py
# The capture tree. Every node is a piece that gets captured by (or captures
# into) its parent's square; the root is the piece left standing at the end
# and leaves are the first captures of each branch.

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Optional

from .board import Square
from .piece import PieceKind

tree_logger = logging.getLogger('tree')


@dataclass
class TreeNode:
    id: int
    parent_id: Optional[int]
    level: int
    num_of_children: int = 0
    piece: Optional[PieceKind] = None
    square: Optional[Square] = None

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def is_leaf(self) -> bool:
        return self.num_of_children == 0


class GameTree:
    """Arena of TreeNodes addressed by id. Children only know their parent's id."""

    def __init__(self, nodes: list[TreeNode]):
        self.nodes = nodes

    def __len__(self):
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes)

    def __getitem__(self, node_id: int) -> TreeNode:
        return self.nodes[node_id]

    @property
    def root(self) -> TreeNode:
        return self.nodes[0]

    def parent_of(self, node: TreeNode) -> Optional[TreeNode]:
        return None if node.parent_id is None else self.nodes[node.parent_id]

    def children_of(self, node: TreeNode) -> list[TreeNode]:
        return [n for n in self.nodes if n.parent_id == node.id]

    def leaves(self) -> list[TreeNode]:
        return [n for n in self.nodes if n.num_of_children == 0]

    def depth(self) -> int:
        return max(n.level for n in self.nodes)

    def path_to_root(self, node: TreeNode) -> list[TreeNode]:
        """Returns the nodes from the root down to `node`, both included."""
        path = [node]
        cur = node
        while cur.parent_id is not None:
            cur = self.nodes[cur.parent_id]
            path.append(cur)
        path.reverse()
        return path


def generate_game_tree(size: int, max_depth: int, rng: random.Random | None = None) -> GameTree:
    """
    Grows a random tree of `size` nodes one node at a time.

    Each new node picks an existing node uniformly at random and a coin flip
    decides whether it becomes that node's sibling or its child. Nodes already
    at `max_depth` can only take siblings, and the root has no siblings, so
    the tree never gets deeper than `max_depth`.
    """
    if size < 1:
        raise ValueError(f"Tree size must be at least 1, got {size}")
    if max_depth < 1 or (size > 1 and max_depth < 2):
        raise ValueError(f"Tree depth {max_depth} cannot hold {size} nodes")
    rng = rng or random

    nodes: list[TreeNode] = [TreeNode(id=0, parent_id=None, level=1)]
    for i in range(1, size):
        selected = rng.choice(nodes)
        treat_as_sibling = rng.randint(0, 1) == 1
        if selected.level == max_depth:
            treat_as_sibling = True

        if treat_as_sibling and selected.parent_id is not None:
            parent_id, level = selected.parent_id, selected.level
        else:
            parent_id, level = selected.id, selected.level + 1

        nodes[parent_id].num_of_children += 1
        nodes.append(TreeNode(id=i, parent_id=parent_id, level=level))

    tree = GameTree(nodes)
    tree_logger.debug(f"Generated tree: {size} nodes, depth {tree.depth()}, {len(tree.leaves())} leaves")
    return tree
