"""Rewrite gcc -MD dependency files into kbuild make fragments."""

__version__ = "0.1.0"
