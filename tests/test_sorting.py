import io

import pytest

from algokit.sorting import ListNode, create_list, list_values, print_list, sort_list


@pytest.mark.parametrize(
    "values",
    [[4, 2, 1, 3], [-1, 5, 3, 4, 0], [1], [3, 3, 1, 1, 2], list(range(20, 0, -1))],
)
def test_sort_matches_sorted(values):
    assert list_values(sort_list(create_list(values))) == sorted(values)


def test_sort_empty_list():
    assert sort_list(create_list([])) is None


def test_create_list_round_trip():
    values = [5, -2, 7, 0]
    assert list_values(create_list(values)) == values


def test_create_list_empty_is_none():
    assert create_list([]) is None


def test_sort_reuses_nodes():
    head = create_list([9, 4, 6, 1])
    original = set()
    node = head
    while node is not None:
        original.add(id(node))
        node = node.next
    result = sort_list(head)
    seen = set()
    while result is not None:
        seen.add(id(result))
        result = result.next
    assert seen == original


def test_node_iteration():
    head = ListNode(1, ListNode(2, ListNode(3)))
    assert list(head) == [1, 2, 3]


def test_print_list_format():
    buffer = io.StringIO()
    print_list(sort_list(create_list([4, 2, 1, 3])), file=buffer)
    assert buffer.getvalue() == "1 2 3 4 \n"


def test_print_empty_list_writes_newline():
    buffer = io.StringIO()
    print_list(None, file=buffer)
    assert buffer.getvalue() == "\n"


def test_print_list_defaults_to_stderr(capsys):
    print_list(create_list([7]))
    captured = capsys.readouterr()
    assert captured.err == "7 \n"
    assert captured.out == ""