"""Classic data structures and algorithms: queues, stacks, lists, trees, heaps, hashing, sorting, graphs and scheduling."""

__version__ = "0.1.0"

__all__ = [
    "adapters",
    "bounded_queue",
    "bst",
    "dlist",
    "expressions",
    "graph",
    "hashtable",
    "heap",
    "scheduler",
    "slist",
    "sorting",
    "stack",
]