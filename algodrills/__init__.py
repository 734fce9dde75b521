"""Classic algorithm and data-structure drills: sorting, dynamic programming, graphs, trees, hashing and linked lists."""

__version__ = "0.1.0"