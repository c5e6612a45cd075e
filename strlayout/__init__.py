"""Strings in fixed-length, length-prefixed and zero-ended binary layouts, in UTF-8 or UTF-16."""

__version__ = "0.2.0"

__all__ = ["codec", "errors", "layout", "string"]