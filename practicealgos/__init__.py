"""Classic algorithm exercises grouped by topic, in plain Python."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "dp",
    "graphs",
    "grids",
    "heaps",
    "intervals",
    "knapsack",
    "linked_lists",
    "strings",
    "trees",
]