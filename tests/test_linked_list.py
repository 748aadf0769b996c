import pytest

from codekata.linked_list import ListNode, add_two_numbers, reverse_k_group


def _digits(number):
    return ListNode.from_values(int(d) for d in reversed(str(number)))


def _to_number(node):
    return int("".join(str(d) for d in reversed(node.to_list())))


@pytest.mark.parametrize("values", [[1], [1, 2, 3], [0, 0], [5, -3, 9, 9]])
def test_from_values_round_trip(values):
    assert ListNode.from_values(values).to_list() == values


def test_from_values_empty_gives_none():
    assert ListNode.from_values([]) is None


def test_iteration_yields_values():
    head = ListNode(4, ListNode(5))
    assert list(head) == [4, 5]
    assert head.next.to_list() == [5]


def test_add_two_numbers_source_example():
    result = add_two_numbers(
        ListNode.from_values([2, 4, 3]), ListNode.from_values([5, 6, 4])
    )
    assert result.to_list() == [7, 0, 8]


@pytest.mark.parametrize(
    "a, b", [(0, 0), (999, 1), (12345, 678), (5, 5), (9999999, 9999), (1, 0)]
)
def test_add_two_numbers_matches_integer_addition(a, b):
    result = add_two_numbers(_digits(a), _digits(b))
    assert _to_number(result) == a + b
    assert all(0 <= digit <= 9 for digit in result)


def test_add_two_numbers_with_one_empty():
    result = add_two_numbers(None, ListNode.from_values([3, 2]))
    assert result.to_list() == [3, 2]


def test_reverse_k_group_source_example():
    head = ListNode.from_values([1, 2, 3, 4, 5])
    assert reverse_k_group(head, 2).to_list() == [2, 1, 4, 3, 5]


def test_reverse_k_group_exact_multiple():
    head = ListNode.from_values([1, 2, 3, 4, 5, 6])
    assert reverse_k_group(head, 3).to_list() == [3, 2, 1, 6, 5, 4]


@pytest.mark.parametrize("values", [[1], [1, 2], [4, 8, 15, 16, 23]])
def test_reverse_k_group_whole_length_reverses(values):
    head = ListNode.from_values(values)
    assert reverse_k_group(head, len(values)).to_list() == values[::-1]


def test_reverse_k_group_longer_than_list_keeps_order():
    values = [1, 2, 3]
    assert reverse_k_group(ListNode.from_values(values), 5).to_list() == values


def test_reverse_k_group_one_returns_same_head():
    head = ListNode.from_values([1, 2, 3])
    assert reverse_k_group(head, 1) is head
    assert head.to_list() == [1, 2, 3]


def test_reverse_k_group_empty():
    assert reverse_k_group(None, 3) is None


def test_reverse_k_group_rejects_non_positive_k():
    with pytest.raises(ValueError):
        reverse_k_group(ListNode.from_values([1, 2]), 0)