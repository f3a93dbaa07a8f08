"""Binary trees built from a pre-order listing, with the classic traversals."""

from collections import deque
from dataclasses import dataclass
from typing import Any, Optional

__all__ = [
    "TreeNode",
    "build_tree",
    "level_order",
    "in_order",
    "pre_order",
    "post_order",
]

EMPTY = -1


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    value: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _is_empty_marker(value):
    return value is None or value == EMPTY


def build_tree(values):
    """Build a tree from a pre-order listing where -1 (or None) marks a missing child.

    Each node is followed by its left subtree and then its right subtree.
    Values left over once the tree is complete are ignored. Raises
    ValueError if the listing ends before the tree is complete.
    """
    stream = iter(values)

    def build():
        try:
            value = next(stream)
        except StopIteration:
            raise ValueError("listing ended before the tree was complete") from None
        if _is_empty_marker(value):
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def level_order(root):
    """Yield the values of each level of the tree, top to bottom, as lists."""
    if root is None:
        return
    level = deque([root])
    while level:
        yield [node.value for node in level]
        level = deque(
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        )


def in_order(root):
    """Yield values left subtree first, then the node, then the right subtree."""
    if root is None:
        return
    yield from in_order(root.left)
    yield root.value
    yield from in_order(root.right)


def pre_order(root):
    """Yield values node first, then the left and right subtrees."""
    if root is None:
        return
    yield root.value
    yield from pre_order(root.left)
    yield from pre_order(root.right)


def post_order(root):
    """Yield values of both subtrees first, then the node."""
    if root is None:
        return
    yield from post_order(root.left)
    yield from post_order(root.right)
    yield root.value