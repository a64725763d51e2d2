"""Solutions to classic algorithm exercises, one problem per module."""

__version__ = "0.1.0"