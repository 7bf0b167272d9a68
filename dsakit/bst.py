"""Binary search tree nodes and the operations on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class TreeNode:
    """A node of a binary search tree."""

    key: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def insert(root: Optional[TreeNode], key: int) -> TreeNode:
    """Insert ``key`` and return the root; duplicates are ignored."""
    if root is None:
        return TreeNode(key)
    node = root
    while True:
        if key < node.key:
            if node.left is None:
                node.left = TreeNode(key)
                return root
            node = node.left
        elif key > node.key:
            if node.right is None:
                node.right = TreeNode(key)
                return root
            node = node.right
        else:
            return root


def find_min(node: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return the node with the smallest key under ``node``, or None."""
    while node is not None and node.left is not None:
        node = node.left
    return node


def search(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Return the node holding ``key``, or None if it is absent."""
    node = root
    while node is not None and node.key != key:
        node = node.right if node.key < key else node.left
    return node


def delete(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Remove ``key`` if present and return the new root.

    A node with two children takes the key of its in-order successor.
    """
    parent: Optional[TreeNode] = None
    node = root
    while node is not None and node.key != key:
        parent = node
        node = node.left if key < node.key else node.right
    if node is None:
        return root

    if node.left is not None and node.right is not None:
        successor_parent = node
        successor = node.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left
        node.key = successor.key
        if successor_parent is node:
            successor_parent.right = successor.right
        else:
            successor_parent.left = successor.right
        return root

    child = node.left if node.left is not None else node.right
    if parent is None:
        return child
    if parent.left is node:
        parent.left = child
    else:
        parent.right = child
    return root


def inorder(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield keys in ascending (in-order) order."""
    pending: list[TreeNode] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        yield node.key
        node = node.right