"""
Command-line front end for confloader.

Inspect which files a path spec resolves to and print the merged tree.
"""

from confloader import __version__

__all__ = ["__version__"]
