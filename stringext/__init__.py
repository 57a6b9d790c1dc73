"""
stringext package.

Stateless string utilities: identifier parsing, justification, quoted
argument tokenizing, word wrapping and case conversion.
"""

__version__ = "1.0.0"

from .core import ArgumentError, ConfigurationError, FormatError, StringExtError
from .text import (
    Justification,
    WordWrapper,
    is_null_or_empty,
    is_null_or_whitespace,
    justify,
    parse_args,
    remove_left,
    remove_right,
    to_guid,
    to_snake_case,
    to_stream,
    word_wrap,
)

__all__ = [
    "ArgumentError",
    "ConfigurationError",
    "FormatError",
    "StringExtError",
    "Justification",
    "WordWrapper",
    "is_null_or_empty",
    "is_null_or_whitespace",
    "justify",
    "parse_args",
    "remove_left",
    "remove_right",
    "to_guid",
    "to_snake_case",
    "to_stream",
    "word_wrap",
]
