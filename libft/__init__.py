"""C library style character, memory, string and output helpers."""

__version__ = "1.0.0"
__all__ = ["charclass", "memory", "cstring", "strutil", "output"]