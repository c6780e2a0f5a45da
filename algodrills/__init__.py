"""Classic algorithm drills: linked lists, sorting, searching, stacks,
digit arithmetic, grid traversal and string exercises."""

__version__ = "0.1.0"