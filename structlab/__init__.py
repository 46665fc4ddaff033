"""Classic data structures as small libraries and interactive console programs."""

__version__ = "0.1.0"

__all__ = [
    "hashing",
    "booktree",
    "traversal",
    "optimal_bst",
    "avl",
    "triage",
    "students",
]