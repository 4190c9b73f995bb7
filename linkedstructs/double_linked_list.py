"""Doubly linked list of integers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TextIO


@dataclass(eq=False)
class DoublyNode:
    """A node linked to both its neighbours."""

    value: int
    next: DoublyNode | None = field(default=None, repr=False)
    prev: DoublyNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list with head and tail references."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: DoublyNode | None = None
        self.tail: DoublyNode | None = None
        self._size = 0
        for value in values:
            self.add_node(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def add_node(self, value: int) -> DoublyNode:
        """Append a value at the tail and return its node."""
        new_node = DoublyNode(value)
        self._size += 1
        if self.tail is None:
            self.head = self.tail = new_node
            return new_node
        new_node.prev = self.tail
        self.tail.next = new_node
        self.tail = new_node
        return new_node

    def find_node(self, value: int) -> DoublyNode | None:
        """Search from both ends at once; return the node found or None."""
        left, right = self.head, self.tail
        while left is not None and right is not None:
            if left.value == value:
                return left
            if right.value == value:
                return right
            if left is right or left.next is right:
                break
            left, right = left.next, right.prev
        return None

    def delete_node(self, value: int) -> None:
        """Unlink a node holding ``value``; raise ValueError if there is none."""
        node = self.find_node(value)
        if node is None:
            raise ValueError(f"{value} is not in the list")
        left, right = node.prev, node.next
        if left is None:
            self.head = right
        else:
            left.next = right
        if right is None:
            self.tail = left
        else:
            right.prev = left
        node.next = node.prev = None
        self._size -= 1

    def reverse(self) -> None:
        """Reverse the list in place by swapping every node's links."""
        node = self.head
        while node is not None:
            node.next, node.prev = node.prev, node.next
            node = node.prev
        self.head, self.tail = self.tail, self.head

    def print_list(self, file: TextIO | None = None) -> None:
        """Write every node with its neighbours (to stdout by default)."""
        out = sys.stdout if file is None else file
        node = self.head
        while node is not None:
            nxt = f" next:{node.next.value}" if node.next is not None else " next: NULL"
            prv = f" prev:{node.prev.value}" if node.prev is not None else " prev: NULL"
            print(f"current:{node.value}{nxt}{prv}", file=out)
            node = node.next
        print("\n\n", file=out)


def main(argv: Sequence[str] | None = None) -> int:
    """Build a list of 0..9, reverse it, search it and delete from it."""
    parser = argparse.ArgumentParser(description="Doubly linked list demonstration.")
    parser.parse_args(argv)

    linked = DoublyLinkedList(range(10))
    linked.print_list()
    print("print listo")
    linked.reverse()
    linked.print_list()

    if linked.find_node(5) is None:
        print("Nodo no encontrado", file=sys.stderr)
    else:
        print("Nodo encontrado", file=sys.stderr)

    try:
        linked.delete_node(8)
    except ValueError:
        print("NO está el nodo al eliminar", file=sys.stderr)
    else:
        print("Nodo borrado", file=sys.stderr)

    linked.print_list()
    return 0


if __name__ == "__main__":
    sys.exit(main())