"""Classic data structures and algorithms: arrays, sorting, graphs, stacks, queues, trees, linked lists and small puzzles."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "sorting",
    "graphs",
    "stacks",
    "queues",
    "bst",
    "linked_lists",
    "problems",
]