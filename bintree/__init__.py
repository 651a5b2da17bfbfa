"""Binary tree node type, metrics, traversals, boundary traversal and a command line."""

__version__ = "0.1.0"
__all__ = ["node", "metrics", "traversal", "boundary", "cli"]