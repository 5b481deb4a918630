"""Leveled process logger with stdout, file and FIFO outputs, configured from a plain-text file."""

__version__ = "0.1.0"
__all__ = ["levels", "config", "logger"]