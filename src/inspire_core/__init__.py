"""
Inspire Core - shared utilities for the Inspire content-management platform.

String, date, hashing, URI, locale and storage helpers, a command-line
parameter parser, and the filename GUID protocol used to tag content files.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
