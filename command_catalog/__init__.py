"""Command catalog: build and query a catalog of AI command definitions."""

__version__ = "0.1.0"
