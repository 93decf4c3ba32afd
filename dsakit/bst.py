"""Binary search trees and AVL trees: insertion, deletion, balance checks and ordered queries."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any

from dsakit.binary_tree import TreeNode, inorder


@dataclass(eq=False, repr=False)
class AVLNode(TreeNode):
    """A binary search tree node that records the height of its subtree."""

    height: int = 1

    def __repr__(self) -> str:
        return f"AVLNode({self.value!r}, height={self.height})"


def bst_insert(root: TreeNode | None, value: Any) -> TreeNode:
    """Insert ``value`` into a binary search tree and return its root; equal values go left."""
    fresh = TreeNode(value)
    if root is None:
        return fresh
    node = root
    while True:
        if value <= node.value:
            if node.left is None:
                node.left = fresh
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = fresh
                return root
            node = node.right


def level_groups(root: TreeNode | None) -> list[list[Any]]:
    """Values grouped level by level, each level from left to right."""
    groups: list[list[Any]] = []
    level = [root] if root is not None else []
    while level:
        groups.append([node.value for node in level])
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    return groups


def height(root: TreeNode | None) -> int:
    """Number of nodes on the longest path from ``root`` down to a leaf; 0 for an empty tree."""
    return len(level_groups(root))


def is_balanced_at_root(root: TreeNode | None) -> bool:
    """Tell whether the two subtrees of ``root`` differ in height by at most one."""
    if root is None:
        return True
    return abs(height(root.left) - height(root.right)) <= 1


def _height_of(node: AVLNode | None) -> int:
    return node.height if node is not None else 0


def _refresh(node: AVLNode) -> None:
    node.height = max(_height_of(node.left), _height_of(node.right)) + 1


def _balance(node: AVLNode | None) -> int:
    if node is None:
        return 0
    return _height_of(node.left) - _height_of(node.right)


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def avl_insert(root: AVLNode | None, value: Any) -> AVLNode:
    """Insert ``value`` into an AVL tree, rotating to keep it balanced; duplicates are ignored."""
    if root is None:
        return AVLNode(value)
    if value < root.value:
        root.left = avl_insert(root.left, value)
    elif value > root.value:
        root.right = avl_insert(root.right, value)
    else:
        return root

    _refresh(root)
    balance = _balance(root)
    if balance > 1 and value < root.left.value:
        return _rotate_right(root)
    if balance < -1 and value > root.right.value:
        return _rotate_left(root)
    if balance > 1 and value > root.left.value:
        root.left = _rotate_left(root.left)
        return _rotate_right(root)
    if balance < -1 and value < root.right.value:
        root.right = _rotate_right(root.right)
        return _rotate_left(root)
    return root


def _rebalance(node: AVLNode) -> AVLNode:
    _refresh(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def avl_delete(root: AVLNode | None, value: Any) -> AVLNode | None:
    """Remove ``value`` from an AVL tree, replacing an inner node by its in-order successor."""
    if root is None:
        return None
    if value < root.value:
        root.left = avl_delete(root.left, value)
    elif value > root.value:
        root.right = avl_delete(root.right, value)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = root.right
        while successor.left is not None:
            successor = successor.left
        root.value = successor.value
        root.right = avl_delete(root.right, successor.value)
    return _rebalance(root)


def find_ceil(root: TreeNode | None, value: Any) -> Any | None:
    """Smallest value in the search tree not below ``value``, or None if there is none."""
    ceil = None
    node = root
    while node is not None:
        if node.value == value:
            return value
        if node.value < value:
            node = node.right
        else:
            ceil = node.value
            node = node.left
    return ceil


def find_floor(root: TreeNode | None, value: Any) -> Any | None:
    """Largest value in the search tree not above ``value``, or None if there is none."""
    floor = None
    node = root
    while node is not None:
        if node.value == value:
            return value
        if node.value < value:
            floor = node.value
            node = node.right
        else:
            node = node.left
    return floor


def lowest_common_ancestor(root: TreeNode | None, first: Any, second: Any) -> TreeNode | None:
    """Deepest node of a search tree whose value lies between ``first`` and ``second``."""
    node = root
    while node is not None:
        if node.value > first and node.value > second:
            node = node.left
        elif node.value < first and node.value < second:
            node = node.right
        else:
            return node
    return None


def two_sum_bst(root: TreeNode | None, target: Any) -> bool:
    """Tell whether two distinct nodes of a search tree hold values summing to ``target``."""
    if root is None or (root.left is None and root.right is None):
        return False
    values = inorder(root)
    low, high = 0, len(values) - 1
    while low < high:
        total = values[low] + values[high]
        if total > target:
            high -= 1
        elif total < target:
            low += 1
        else:
            return True
    return False