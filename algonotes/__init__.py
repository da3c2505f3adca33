"""Worked solutions to classic exercises on arrays, strings, numbers, linked lists and matrices."""

__version__ = "0.1.0"
__all__ = ["arrays", "linked_list", "matrices", "numbers", "queens", "strings"]