"""Bordered full-screen terminal UI with an inline menu bar."""

from ztui.__version__ import __version__

__all__ = ["__version__"]
