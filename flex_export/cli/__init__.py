"""Command line interface (``flex-export`` / ``python -m flex_export.cli``)."""

from .__main__ import main

__all__ = ["main"]
