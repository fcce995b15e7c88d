"""Stacks, queues, linked lists, binary search trees, postfix expressions and a menu-driven command."""

__version__ = "0.1.0"

__all__ = ["bst", "cli", "expressions", "linked_list", "queues", "recursion", "stack"]