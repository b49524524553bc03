"""Classic data structures and algorithms: stacks, queues, lists, trees, heaps,
graphs, sorting, searching and hashing, plus an interactive word dictionary."""

__version__ = "0.1.0"