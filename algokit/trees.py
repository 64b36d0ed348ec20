"""Binary tree nodes and binary search tree algorithms."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def tree_to_str(root: TreeNode | None) -> str:
    """Write a tree in preorder with parenthesised subtrees.

    An empty left subtree is written as ``()`` only when a right subtree follows.
    """
    if root is None:
        return ""
    parts = [str(root.val)]
    if root.left is not None:
        parts.append(f"({tree_to_str(root.left)})")
    elif root.right is not None:
        parts.append("()")
    if root.right is not None:
        parts.append(f"({tree_to_str(root.right)})")
    return "".join(parts)


def _inorder(root: TreeNode | None) -> Iterator[int]:
    pending: list[TreeNode] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        yield node.val
        node = node.right


def kth_smallest(root: TreeNode | None, k: int) -> int:
    """Return the ``k``-th smallest value (1-based) of a binary search tree."""
    if k >= 1:
        for position, value in enumerate(_inorder(root), start=1):
            if position == k:
                return value
    raise IndexError(f"the tree has no {k}-th smallest value")


def insert_into_bst(root: TreeNode | None, val: int) -> TreeNode:
    """Insert ``val`` into a binary search tree and return its root.

    A value already in the tree is left as it is.
    """
    if root is None:
        return TreeNode(val)
    node = root
    while True:
        if val < node.val:
            if node.left is None:
                node.left = TreeNode(val)
                break
            node = node.left
        elif val > node.val:
            if node.right is None:
                node.right = TreeNode(val)
                break
            node = node.right
        else:
            break
    return root


def preorder(root: TreeNode | None) -> Iterator[int]:
    """Yield the values of a tree in preorder: node, left subtree, right subtree."""
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        yield node.val
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)


SAMPLE_VALUES = (10, 2, 11, 5, 12)


def main(argv: list[str] | None = None) -> int:
    """Build the sample search tree and print its values in preorder."""
    parser = argparse.ArgumentParser(
        prog="algokit-tree", description="Print a sample binary search tree in preorder."
    )
    parser.parse_args(argv)
    root: TreeNode | None = None
    for value in SAMPLE_VALUES:
        root = insert_into_bst(root, value)
    print(" ".join(str(value) for value in preorder(root)))
    return 0