"""Classic algorithm solutions: grid searches, backtracking, stacks, linked lists and strings."""

__version__ = "0.1.0"