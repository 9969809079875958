import pytest

from examdrills.linked_list import (
    ListNode,
    format_list,
    iter_list,
    list_get,
    list_ring_get,
    print_list,
)


def test_list_get_round_trip():
    values = [1, 2, 3, 4, 5, 6, 7]
    assert list(iter_list(list_get(values))) == values


def test_list_get_terminates_with_none():
    head = list_get([4, 5])
    assert head.value == 4
    assert head.next.value == 5
    assert head.next.next is None


def test_list_get_accepts_generators():
    assert list(iter_list(list_get(x for x in "abc"))) == ["a", "b", "c"]


@pytest.mark.parametrize("builder", [list_get, list_ring_get])
def test_empty_input_raises(builder):
    with pytest.raises(ValueError):
        builder([])


def test_ring_closes_back_to_head():
    values = [6, 3, 4, 6, 7, 2, 3, 5, 1]
    head, length = list_ring_get(values)
    assert length == len(values)
    node = head
    for _ in range(length - 1):
        node = node.next
    assert node.value == values[-1]
    assert node.next is head


def test_ring_iteration_makes_one_pass():
    values = [6, 3, 4, 6, 7, 2, 3, 5, 1]
    head, _ = list_ring_get(values)
    assert list(iter_list(head)) == values


def test_single_node_ring_points_to_itself():
    head, length = list_ring_get([9])
    assert length == 1
    assert head.next is head
    assert list(iter_list(head)) == [9]


def test_format_list_separates_with_spaces():
    assert format_list(list_get([1, 2, 3])) == "1 2 3"


def test_format_empty_list():
    assert format_list(None) == ""


def test_iter_list_on_hand_built_nodes():
    head = ListNode("x", ListNode("y"))
    assert list(iter_list(head)) == ["x", "y"]


def test_print_list_writes_formatted_text(capsys):
    head, _ = list_ring_get([3, 1, 2])
    print_list(head)
    assert capsys.readouterr().out == format_list(head)