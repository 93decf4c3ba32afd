"""Binary trees and n-ary trees: building, traversing and converting."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

MISSING_TOKEN = "N"
PLACEHOLDER = 0


@dataclass(eq=False, repr=False)
class TreeNode:
    """A binary tree node; as a list node, ``left`` is the previous and ``right`` the next."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None

    def __repr__(self) -> str:
        return f"TreeNode({self.value!r})"


@dataclass(eq=False, repr=False)
class NaryNode:
    """A tree node with any number of ordered children."""

    value: Any
    children: list[NaryNode] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"NaryNode({self.value!r}, children={len(self.children)})"


def from_level_order(values: Iterable[Any], missing: Any = None) -> TreeNode | None:
    """Build a tree from level-order values where ``missing`` marks an absent child."""
    items = iter(values)
    first = next(items, missing)
    if first == missing:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for is_left in (True, False):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value == missing:
                continue
            child = TreeNode(value)
            if is_left:
                node.left = child
            else:
                node.right = child
            pending.append(child)
    return root


def parse_level_order(text: str) -> TreeNode | None:
    """Build an integer tree from space-separated level-order tokens, ``N`` meaning no node."""
    tokens = text.split()
    if not tokens or tokens[0].startswith(MISSING_TOKEN):
        return None
    values = [None if token == MISSING_TOKEN else int(token) for token in tokens]
    return from_level_order(values, None)


def _insert_level(root: TreeNode | None, value: Any, is_placeholder) -> TreeNode:
    """Put ``value`` in the first free child slot in level order, not descending below placeholders."""
    if root is None:
        return TreeNode(value)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        if node.left is None:
            node.left = TreeNode(value)
            return root
        if not is_placeholder(node.left.value):
            pending.append(node.left)
        if node.right is None:
            node.right = TreeNode(value)
            return root
        if not is_placeholder(node.right.value):
            pending.append(node.right)
    return root


def insert_complete(root: TreeNode | None, value: Any) -> TreeNode:
    """Insert ``value`` at the first free position in level order and return the root."""
    return _insert_level(root, value, lambda _value: False)


def from_placeholder_array(values: Iterable[int]) -> TreeNode | None:
    """Build a tree by level-order insertion where ``0`` reserves a slot that stays empty."""
    root: TreeNode | None = None
    for value in values:
        root = _insert_level(root, value, lambda item: item == PLACEHOLDER)
    if root is None:
        return None
    pending = deque([root])
    while pending:
        node = pending.popleft()
        if node.left is not None:
            if node.left.value == PLACEHOLDER:
                node.left = None
            else:
                pending.append(node.left)
        if node.right is not None:
            if node.right.value == PLACEHOLDER:
                node.right = None
            else:
                pending.append(node.right)
    return root


def _inorder_nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def to_doubly_linked_list(root: TreeNode | None) -> TreeNode | None:
    """Relink the tree in place into an in-order doubly linked list and return its head."""
    nodes = list(_inorder_nodes(root))
    if not nodes:
        return None
    for previous, current in zip(nodes, nodes[1:]):
        previous.right = current
        current.left = previous
    nodes[0].left = None
    nodes[-1].right = None
    return nodes[0]


def iter_linked_list(head: TreeNode | None) -> Iterator[Any]:
    """Yield the values of a doubly linked list from ``head`` onwards."""
    node = head
    while node is not None:
        yield node.value
        node = node.right


def preorder(root: TreeNode | None) -> list[Any]:
    """Values in root, left, right order."""
    result: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder(root: TreeNode | None) -> list[Any]:
    """Values in left, root, right order."""
    return [node.value for node in _inorder_nodes(root)]


def postorder(root: TreeNode | None) -> list[Any]:
    """Values in left, right, root order."""
    result: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def level_order(root: TreeNode | None) -> list[Any]:
    """Values level by level, each level from left to right."""
    result: list[Any] = []
    pending = deque([root] if root is not None else [])
    while pending:
        node = pending.popleft()
        result.append(node.value)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return result


def is_same_tree(first: TreeNode | None, second: TreeNode | None) -> bool:
    """Tell whether two trees have the same shape and the same values."""
    stack = [(first, second)]
    while stack:
        a, b = stack.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.value != b.value:
            return False
        stack.append((a.right, b.right))
        stack.append((a.left, b.left))
    return True


def has_duplicates(root: TreeNode | None) -> bool:
    """Tell whether any value occurs more than once in the tree."""
    seen: set[Any] = set()
    for value in preorder(root):
        if value in seen:
            return True
        seen.add(value)
    return False


def max_path_sum(root: TreeNode | None) -> int:
    """Largest sum of values along any path between two nodes of a non-empty tree."""
    if root is None:
        raise ValueError("tree must not be empty")
    best = float("-inf")

    def gain(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, left + right + node.value)
        return max(left, right) + node.value

    gain(root)
    return int(best)


def _positions(order: Sequence[Any], inorder_values: Sequence[Any]) -> dict[Any, int]:
    if len(order) != len(inorder_values):
        raise ValueError("traversals must have the same length")
    positions = {value: index for index, value in enumerate(inorder_values)}
    if any(value not in positions for value in order):
        raise ValueError("traversals must hold the same values")
    return positions


def build_from_preorder_inorder(
    preorder_values: Sequence[Any], inorder_values: Sequence[Any]
) -> TreeNode | None:
    """Rebuild a tree with distinct values from its preorder and inorder traversals."""
    pre = list(preorder_values)
    ino = list(inorder_values)
    positions = _positions(pre, ino)

    def build(pre_start: int, pre_end: int, in_start: int, in_end: int) -> TreeNode | None:
        if pre_start > pre_end or in_start > in_end:
            return None
        node = TreeNode(pre[pre_start])
        split = positions[node.value]
        size = split - in_start
        node.left = build(pre_start + 1, pre_start + size, in_start, split - 1)
        node.right = build(pre_start + size + 1, pre_end, split + 1, in_end)
        return node

    return build(0, len(pre) - 1, 0, len(ino) - 1)


def build_from_postorder_inorder(
    postorder_values: Sequence[Any], inorder_values: Sequence[Any]
) -> TreeNode | None:
    """Rebuild a tree with distinct values from its postorder and inorder traversals."""
    post = list(postorder_values)
    ino = list(inorder_values)
    positions = _positions(post, ino)

    def build(post_start: int, post_end: int, in_start: int, in_end: int) -> TreeNode | None:
        if post_start > post_end or in_start > in_end:
            return None
        node = TreeNode(post[post_end])
        split = positions[node.value]
        size = split - in_start
        node.left = build(post_start, post_start + size - 1, in_start, split - 1)
        node.right = build(post_start + size, post_end - 1, split + 1, in_end)
        return node

    return build(0, len(post) - 1, 0, len(ino) - 1)


def parse_nary_level_order(text: str) -> NaryNode:
    """Build an n-ary tree from ``root (count child...)...`` tokens given level by level."""
    tokens = iter(text.split())

    def take() -> int:
        try:
            return int(next(tokens))
        except StopIteration:
            raise ValueError("tree description ends too early") from None

    root = NaryNode(take())
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for _ in range(take()):
            child = NaryNode(take())
            node.children.append(child)
            pending.append(child)
    return root


def max_data_node(root: NaryNode | None) -> NaryNode:
    """Return the node holding the largest value, the first met level by level on ties."""
    if root is None:
        raise ValueError("tree must not be empty")

    def walk() -> Iterator[NaryNode]:
        pending = deque([root])
        while pending:
            node = pending.popleft()
            yield node
            pending.extend(node.children)

    return max(walk(), key=lambda node: node.value)