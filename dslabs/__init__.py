"""Linked lists, stacks, queues, binary, search and AVL trees with console menus."""

__version__ = "0.1.0"