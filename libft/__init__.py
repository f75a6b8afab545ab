"""Character, memory, string, output and linked-list utilities."""

__version__ = "1.0.0"
__all__ = ["charclass", "memory", "strings", "transform", "output", "linkedlist"]