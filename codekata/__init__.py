"""Solutions to classic puzzles: numbers, strings, arrays, linked lists and sudoku."""

__version__ = "0.1.0"
__all__ = ["arrays", "linked_list", "numbers", "strings", "sudoku"]