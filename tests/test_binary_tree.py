import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.binary_tree import (
    NaryNode,
    TreeNode,
    build_from_postorder_inorder,
    build_from_preorder_inorder,
    from_level_order,
    from_placeholder_array,
    has_duplicates,
    inorder,
    insert_complete,
    is_same_tree,
    iter_linked_list,
    level_order,
    max_data_node,
    max_path_sum,
    parse_level_order,
    parse_nary_level_order,
    postorder,
    preorder,
    to_doubly_linked_list,
)

SOURCE_PREORDER = [10, 20, 40, 50, 30, 60]
SOURCE_INORDER = [40, 20, 50, 10, 60, 30]
SOURCE_POSTORDER = [40, 50, 20, 60, 30, 10]

unique_values = st.lists(st.integers(-100, 100), unique=True, max_size=30)


def _complete_tree(values):
    root = None
    for value in values:
        root = insert_complete(root, value)
    return root


def _walk_back(head):
    tail = head
    while tail is not None and tail.right is not None:
        tail = tail.right
    values = []
    while tail is not None:
        values.append(tail.value)
        tail = tail.left
    return values


@pytest.mark.parametrize("text", ["", "   ", "N", "N 1 2"])
def test_parse_empty_tree(text):
    assert parse_level_order(text) is None


def test_parse_level_order_keeps_level_order():
    root = parse_level_order("1 2 3 N 4")
    assert level_order(root) == [1, 2, 3, 4]
    assert root.left.left is None
    assert root.left.right.value == 4


def test_parse_rejects_bad_token():
    with pytest.raises(ValueError):
        parse_level_order("1 x 3")


def test_from_level_order_with_none_marker():
    root = from_level_order([1, None, 2])
    assert root.left is None
    assert preorder(root) == [1, 2]


def test_source_trees_are_not_same():
    first = from_level_order([100, 200, 0], -1)
    second = from_level_order([100, 200, 300], -1)
    assert is_same_tree(first, second) is False
    assert is_same_tree(first, from_level_order([100, 200, 0], -1)) is True


def test_is_same_tree_with_empty():
    assert is_same_tree(None, None) is True
    assert is_same_tree(TreeNode(1), None) is False


@given(unique_values)
def test_insert_complete_fills_level_order(values):
    assert level_order(_complete_tree(values)) == values


def test_placeholder_array_from_source():
    values = [1, 2, 3, 4, 5, 6, 7, 0, 8, 9, 0, 0, 0, 10, 11, 12, 13, 0, 14, 15, 0, 16, 17]
    root = from_placeholder_array(values)
    assert level_order(root) == [value for value in values if value != 0]
    assert 0 not in preorder(root)


def test_placeholder_array_empty():
    assert from_placeholder_array([]) is None


def test_rebuild_from_source_preorder_inorder():
    root = build_from_preorder_inorder(SOURCE_PREORDER, SOURCE_INORDER)
    assert postorder(root) == SOURCE_POSTORDER
    assert inorder(root) == SOURCE_INORDER


def test_rebuild_from_source_postorder_inorder():
    root = build_from_postorder_inorder(SOURCE_POSTORDER, SOURCE_INORDER)
    assert preorder(root) == SOURCE_PREORDER
    assert is_same_tree(root, build_from_preorder_inorder(SOURCE_PREORDER, SOURCE_INORDER))


def test_rebuild_rejects_mismatched_traversals():
    with pytest.raises(ValueError):
        build_from_preorder_inorder([1, 2], [1])
    with pytest.raises(ValueError):
        build_from_postorder_inorder([1, 2], [1, 3])


@given(unique_values)
def test_traversal_round_trips(values):
    root = _complete_tree(values)
    pre, ino, post = preorder(root), inorder(root), postorder(root)
    assert is_same_tree(build_from_preorder_inorder(pre, ino), root)
    assert is_same_tree(build_from_postorder_inorder(post, ino), root)


@given(unique_values.filter(bool))
def test_traversals_agree_on_root_and_contents(values):
    root = _complete_tree(values)
    assert preorder(root)[0] == values[0]
    assert postorder(root)[-1] == values[0]
    assert sorted(inorder(root)) == sorted(values)


@given(unique_values)
def test_doubly_linked_list_follows_inorder(values):
    root = _complete_tree(values)
    expected = inorder(root)
    head = to_doubly_linked_list(root)
    assert list(iter_linked_list(head)) == expected
    assert _walk_back(head) == expected[::-1]


def test_doubly_linked_list_of_empty_tree():
    assert to_doubly_linked_list(None) is None
    assert list(iter_linked_list(None)) == []


def test_doubly_linked_list_from_parsed_tree():
    root = parse_level_order("10 20 30 40 60")
    expected = inorder(root)
    head = to_doubly_linked_list(root)
    assert head.left is None
    assert list(iter_linked_list(head)) == expected


def test_has_duplicates_source_example():
    root = _complete_tree([5, 3, 7, 2, 4, 6, 8])
    assert has_duplicates(root) is False
    assert has_duplicates(insert_complete(root, 5)) is True


def test_has_duplicates_empty():
    assert has_duplicates(None) is False


def test_max_path_sum_source_example():
    root = from_level_order([-10, 9, 20, None, None, 15, 7])
    assert max_path_sum(root) == 42


def test_max_path_sum_single_negative_node():
    assert max_path_sum(TreeNode(-7)) == -7


def test_max_path_sum_empty_raises():
    with pytest.raises(ValueError):
        max_path_sum(None)


@given(st.lists(st.integers(0, 50), min_size=1, max_size=20))
def test_max_path_sum_of_non_negative_tree_is_at_least_largest(values):
    root = _complete_tree(values)
    assert max(values) <= max_path_sum(root) <= sum(values)


def test_parse_nary_and_max_node():
    root = parse_nary_level_order("1 3 2 3 4 0 0 0")
    assert [child.value for child in root.children] == [2, 3, 4]
    assert max_data_node(root).value == 4


def test_max_data_node_prefers_first_on_tie():
    root = parse_nary_level_order("5 2 5 1 0 0")
    assert max_data_node(root) is root


def test_parse_nary_truncated_raises():
    with pytest.raises(ValueError):
        parse_nary_level_order("1 2 3")
    with pytest.raises(ValueError):
        parse_nary_level_order("")


def test_max_data_node_empty_raises():
    with pytest.raises(ValueError):
        max_data_node(None)


def test_max_data_node_deep_child():
    leaf = NaryNode(99)
    root = NaryNode(1, [NaryNode(2, [leaf]), NaryNode(3)])
    assert max_data_node(root) is leaf