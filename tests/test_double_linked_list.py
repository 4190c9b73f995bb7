import io

import pytest

from linkedstructs.double_linked_list import DoublyLinkedList, DoublyNode, main


def _backward(linked):
    values = []
    node = linked.tail
    while node is not None:
        values.append(node.value)
        node = node.prev
    return values


def test_add_node_order_and_len():
    linked = DoublyLinkedList()
    for value in range(10):
        linked.add_node(value)
    assert list(linked) == list(range(10))
    assert len(linked) == 10


def test_links_consistent_both_ways():
    linked = DoublyLinkedList(range(7))
    assert _backward(linked) == list(linked)[::-1]


def test_empty_list():
    linked = DoublyLinkedList()
    assert len(linked) == 0
    assert list(linked) == []
    assert linked.find_node(3) is None


@pytest.mark.parametrize("size", [1, 2, 9, 10])
def test_find_every_value(size):
    linked = DoublyLinkedList(range(size))
    for value in range(size):
        found = linked.find_node(value)
        assert isinstance(found, DoublyNode)
        assert found.value == value


def test_find_middle_of_odd_list():
    linked = DoublyLinkedList(range(9))
    assert linked.find_node(4).value == 4


def test_find_missing():
    assert DoublyLinkedList(range(10)).find_node(42) is None


def test_find_prefers_front():
    linked = DoublyLinkedList([1, 2, 1])
    assert linked.find_node(1) is linked.head


@pytest.mark.parametrize("target", [0, 5, 9])
def test_delete(target):
    linked = DoublyLinkedList(range(10))
    linked.delete_node(target)
    expected = [v for v in range(10) if v != target]
    assert list(linked) == expected
    assert _backward(linked) == expected[::-1]
    assert len(linked) == 9


def test_delete_only_element():
    linked = DoublyLinkedList([3])
    linked.delete_node(3)
    assert linked.head is None
    assert linked.tail is None
    assert len(linked) == 0


def test_delete_missing_raises():
    linked = DoublyLinkedList(range(3))
    with pytest.raises(ValueError):
        linked.delete_node(7)
    assert len(linked) == 3


@pytest.mark.parametrize("values", [[], [4], [1, 2], list(range(10))])
def test_reverse(values):
    linked = DoublyLinkedList(values)
    linked.reverse()
    assert list(linked) == values[::-1]
    assert _backward(linked) == values


def test_print_list_format():
    buffer = io.StringIO()
    DoublyLinkedList([1, 2]).print_list(buffer)
    assert buffer.getvalue() == (
        "current:1 next:2 prev: NULL\n"
        "current:2 next: NULL prev:1\n"
        "\n\n\n"
    )


def test_print_list_defaults_to_stdout(capsys):
    DoublyLinkedList([6]).print_list()
    captured = capsys.readouterr()
    assert captured.out.startswith("current:6 next: NULL prev: NULL\n")
    assert captured.err == ""


def test_main(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "print listo\n" in captured.out
    assert "current:0 next:1 prev: NULL" in captured.out
    assert "current:9 next:8 prev: NULL" in captured.out
    final_block = captured.out.split("\n\n\n")[-2]
    assert "current:8" not in final_block
    assert captured.err.splitlines() == ["Nodo encontrado", "Nodo borrado"]