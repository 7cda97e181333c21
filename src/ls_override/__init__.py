"""
ls-override: a recoloring, column-packing wrapper around ``ls``.
"""

__version__ = "0.1.0"
