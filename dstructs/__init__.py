"""Classic data structures and algorithms: arrays, lists, polynomials, stacks, queues, trees, graphs, sorting and searching."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "basics",
    "graphs",
    "linked_list",
    "polynomial",
    "searching",
    "sorting",
    "stack_queue",
    "trees",
]