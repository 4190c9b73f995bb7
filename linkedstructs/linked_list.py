"""Singly linked list of integers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TextIO


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    value: int
    next: Node | None = field(default=None, repr=False)


class LinkedList:
    """A singly linked list that keeps values in insertion order."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.root
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def append(self, value: int) -> Node:
        """Add a value at the end of the list and return its node."""
        new_node = Node(value)
        if self.root is None:
            self.root = new_node
            return new_node
        *_, last = self._nodes()
        last.next = new_node
        return new_node

    def delete_node(self, value: int) -> None:
        """Remove the first node holding ``value``.

        Raises ValueError if no node holds it.
        """
        previous: Node | None = None
        for node in self._nodes():
            if node.value == value:
                if previous is None:
                    self.root = node.next
                else:
                    previous.next = node.next
                node.next = None
                return
            previous = node
        raise ValueError(f"{value} is not in the list")

    def find_node(self, value: int) -> Node | None:
        """Return the first node holding ``value``, or None."""
        return next((node for node in self._nodes() if node.value == value), None)

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: Node | None = None
        node = self.root
        while node is not None:
            node.next, previous, node = previous, node, node.next
        self.root = previous

    def print_list(self, file: TextIO | None = None) -> None:
        """Write every value on its own line (to stderr by default)."""
        out = sys.stderr if file is None else file
        for value in self:
            print(value, file=out)


def main(argv: Sequence[str] | None = None) -> int:
    """Build a list of 0..9, reverse it, search it and delete from it."""
    parser = argparse.ArgumentParser(description="Singly linked list demonstration.")
    parser.parse_args(argv)

    linked = LinkedList(range(10))
    linked.print_list()
    print("print listo")
    linked.reverse()
    print("reverse listo")
    linked.print_list()

    if linked.find_node(11) is None:
        print("Nodo no encontrado", file=sys.stderr)
    else:
        print("Nodo encontrado", file=sys.stderr)

    linked.delete_node(8)
    linked.print_list()
    return 0


if __name__ == "__main__":
    sys.exit(main())