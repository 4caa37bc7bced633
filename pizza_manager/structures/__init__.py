"""
Data structures used by the pizza manager.
"""

from .array_list import ArrayList, NOT_FOUND

__all__ = ["ArrayList", "NOT_FOUND"]
