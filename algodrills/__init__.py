"""Data-structure and algorithm exercises: containers, heaps, trees, sequences, sorting and puzzles."""

__version__ = "0.1.0"
__all__ = ["containers", "heaps", "binary_tree", "sequences", "sorting", "puzzles"]