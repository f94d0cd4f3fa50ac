"""Linked list, stack and queue on singly linked nodes, a shared character workspace, and an interactive menu."""

__version__ = "1.0.0"
__all__ = ["cli", "structures", "workspace"]