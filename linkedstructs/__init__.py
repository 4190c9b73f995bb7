"""Singly and doubly linked lists and a binary search tree of integers."""

__version__ = "0.1.0"

__all__ = ["__version__"]