"""Helpers for character classes, numbers, byte buffers, strings, linked lists, printf-style formatting and chunked line reading."""

__version__ = "0.1.0"