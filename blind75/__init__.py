"""Solutions to classic interview problems, supporting data structures and a problem workspace."""

__version__ = "0.1.0"