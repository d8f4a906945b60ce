"""Classic data-structure and algorithm routines: lists, trees, graphs, a B+ tree, strings and arrays."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "bplus",
    "conversions",
    "graphs",
    "linked_lists",
    "strings",
    "trees",
]