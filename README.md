# linkedstructs

Three small, hand-built linked data structures holding integers:

- `linkedstructs.linked_list`: a singly linked list (`Node`, `LinkedList`)
- `linkedstructs.double_linked_list`: a doubly linked list (`DoublyNode`, `DoublyLinkedList`)
- `linkedstructs.search_tree`: a binary search tree (`TreeNode`, `SearchBinaryTree`)

They are meant for reading and experimenting. Every operation walks the
nodes explicitly, so you can follow how the links are rewired. No third-party
libraries are needed.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Using the structures

Each container can be built empty or from an iterable of integers.

### Singly linked list

```python
from linkedstructs.linked_list import LinkedList

items = LinkedList(range(10))
items.append(10)              # returns the new Node

items.reverse()
print(list(items))            # [10, 9, 8, ..., 0]

node = items.find_node(5)     # the first Node holding 5, or None
items.delete_node(8)          # ValueError if 8 is not in the list
items.print_list()            # one value per line, to stderr by default
```

### Doubly linked list

```python
from linkedstructs.double_linked_list import DoublyLinkedList

items = DoublyLinkedList()
for value in range(10):
    items.add_node(value)     # appends at the tail, returns the DoublyNode

print(len(items))             # 10
items.reverse()
node = items.find_node(5)     # searched from both ends at once; None if absent
items.delete_node(8)          # ValueError if 8 is not in the list
items.print_list()            # each node with its next and previous values, to stdout
```

`print_list` writes lines such as `current:9 next:8 prev: NULL`, followed by
blank lines.

### Binary search tree

Values equal to a node go to its left subtree. `add_node` inserts
iteratively, `add_node_recursive` recursively; both give the same shape and
both return the new `TreeNode`.

```python
from linkedstructs.search_tree import SearchBinaryTree

tree = SearchBinaryTree([50, 30, 70, 20, 40])

print(list(tree.preorder()))  # [50, 30, 20, 40, 70]
node = tree.search_node(40)   # the TreeNode holding 40, or None
tree.delete_node(30)          # True; False if no node holds the value
print(list(tree.preorder()))  # [50, 20, 40, 70]
tree.print_preorder()         # " 50 20 40 70" to stderr by default
```

Deleting a node unlinks it and then inserts its left subtree and its right
subtree again from the root, each as a whole. The tree is not rebalanced.

Every `print_*` method takes an optional `file` argument to write elsewhere.

## Demo commands

Each module has a small demonstration:

```
linked-list-demo
double-linked-list-demo
search-tree-demo [--seed N]
```

The first two build a list of 0 to 9, print it, reverse it, look up a value
and delete 8 before printing the list again. `search-tree-demo` fills two
trees with the same fifteen random numbers between 1 and 100 (one
iteratively, one recursively) and prints both in preorder. It then reads two
integers from standard input: the first is looked up, the second is deleted
before the tree is printed again. `--seed` makes the random numbers
repeatable. If the input is not an integer, the command exits with status 1.