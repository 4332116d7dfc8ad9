"""fnkit CLI"""
from fnkit import __version__

__all__ = ["__version__"]
