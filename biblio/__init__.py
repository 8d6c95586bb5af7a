"""Read, search and extend a simple BibTeX-style bibliography file."""

__version__ = "0.1.0"
__all__ = ["catalogue", "cli", "entries"]