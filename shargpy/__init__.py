"""Typed command line parsing with validators and HTML help page building blocks."""

__version__ = "1.1.2rc1"

__all__ = ["__version__"]