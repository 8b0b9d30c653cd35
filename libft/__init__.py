"""C-style character, string, memory, linked-list and printf utilities."""

__version__ = "0.1.0"