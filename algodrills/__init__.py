"""Classic algorithms on linked lists, trees, arrays and numbers, with an LRU cache."""

__version__ = "0.1.0"
__all__ = ["__version__"]