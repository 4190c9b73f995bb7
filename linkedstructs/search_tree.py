"""Binary search tree of integers; equal values go to the left."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TextIO


@dataclass(eq=False)
class TreeNode:
    """A node of a binary search tree."""

    value: int
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)


class SearchBinaryTree:
    """An unbalanced binary search tree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: TreeNode | None = None
        for value in values:
            self.add_node(value)

    def add_node(self, value: int) -> TreeNode:
        """Insert a value by walking down the tree iteratively."""
        new_node = TreeNode(value)
        if self.root is None:
            self.root = new_node
            return new_node
        node = self.root
        while True:
            if value <= node.value:
                if node.left is None:
                    node.left = new_node
                    return new_node
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return new_node
                node = node.right

    def add_node_recursive(self, value: int) -> TreeNode:
        """Insert a value by descending the tree recursively."""
        return self._attach(TreeNode(value))

    def _attach(self, node: TreeNode) -> TreeNode:
        if self.root is None:
            self.root = node
        else:
            self._insert_below(self.root, node)
        return node

    def _insert_below(self, parent: TreeNode, node: TreeNode) -> None:
        if node.value <= parent.value:
            if parent.left is None:
                parent.left = node
            else:
                self._insert_below(parent.left, node)
        elif parent.right is None:
            parent.right = node
        else:
            self._insert_below(parent.right, node)

    def _locate(self, value: int) -> tuple[TreeNode | None, TreeNode | None]:
        parent: TreeNode | None = None
        node = self.root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value <= node.value else node.right
        return parent, node

    def search_node(self, value: int) -> TreeNode | None:
        """Return the node holding ``value``, or None."""
        return self._locate(value)[1]

    def delete_node(self, value: int) -> bool:
        """Remove a node holding ``value``, reattaching its subtrees.

        The left subtree is reattached first, then the right one. Returns
        whether a node was removed.
        """
        parent, node = self._locate(value)
        if node is None:
            return False
        if parent is None:
            self.root = None
        elif parent.left is node:
            parent.left = None
        else:
            parent.right = None
        left, right = node.left, node.right
        node.left = node.right = None
        if left is not None:
            self._attach(left)
        if right is not None:
            self._attach(right)
        return True

    def preorder(self) -> Iterator[int]:
        """Yield the values in pre-order."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def print_preorder(self, file: TextIO | None = None) -> None:
        """Write the pre-order values, each preceded by a space (stderr by default)."""
        out = sys.stderr if file is None else file
        print("".join(f" {value}" for value in self.preorder()), end="", file=out)


def main(argv: Sequence[str] | None = None) -> int:
    """Fill two trees with random values, then search and delete values read from stdin."""
    parser = argparse.ArgumentParser(description="Binary search tree demonstration.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    tree = SearchBinaryTree()
    tree1 = SearchBinaryTree()
    for _ in range(15):
        number = rng.randint(1, 100)
        tree.add_node(number)
        tree1.add_node_recursive(number)

    tree.print_preorder()
    print(file=sys.stderr)
    tree1.print_preorder()
    print(file=sys.stderr)

    try:
        to_search = int(input())
        found = tree1.search_node(to_search)
        if found is None:
            print("Nodo no encontrado", file=sys.stderr)
        else:
            print(found.value, file=sys.stderr)
        to_delete = int(input())
    except (EOFError, ValueError):
        print("expected an integer on standard input", file=sys.stderr)
        return 1

    tree1.delete_node(to_delete)
    tree1.print_preorder()
    print(file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())