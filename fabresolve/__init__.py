"""Fab library model and resolution of listing UIDs to download coordinates."""

__version__ = "0.1.0"
__all__ = ["library", "resolver"]