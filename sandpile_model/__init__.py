"""Abelian sandpile on a growing grid, with a grain-file reader, BMP output and a command."""

__version__ = "0.1.0"
__all__ = ["__version__"]