"""Classic algorithms and data structures: number helpers, sorting, binary search, linked lists, binary trees, bounded stacks and queues."""

__version__ = "0.1.0"
__all__ = [
    "answers",
    "binary_tree",
    "bounded_queue",
    "bounded_stack",
    "linked_lists",
    "numbers",
    "search",
    "sorting",
]