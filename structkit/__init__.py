"""Classic data structures: linked lists, stacks, queues and search trees."""

__version__ = "0.1.0"

__all__ = [
    "singly_linked_list",
    "doubly_linked_list",
    "stacks",
    "queues",
    "bst",
    "rbtree",
]