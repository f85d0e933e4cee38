"""String helpers and a buffered line reader for a small shell."""

__version__ = "0.1.0"
__all__ = ["linereader", "strutil"]