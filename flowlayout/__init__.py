"""Wrapping flow layout: arranges items in rows like words in a paragraph."""

__version__ = "1.0.0"
