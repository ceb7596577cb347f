"""
Version information for warmpath.

This file is the single source of truth for version numbers.
setup.py and the package root import from here.
"""

__version__ = "0.1.0"
__version_info__ = (0, 1, 0)
