"""
Input parsing module.

This package turns raw console input into commands and values.
"""

from .parser import Command, parse_command, parse_index, parse_fraction, parse_calories

__all__ = ["Command", "parse_command", "parse_index", "parse_fraction", "parse_calories"]
