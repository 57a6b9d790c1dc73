"""
Text module providing the string utilities.

Contains identifier parsing, justification, argument tokenizing,
word wrapping and small string helpers. Depends only on the core module.
"""

from .models import Justification, ScanAction, ScanMode, ScanState
from .identifiers import to_guid
from .justify import justify
from .args_parser import next_state, parse_args
from .word_wrap import WordWrapper, word_wrap
from .string_utils import (
    is_null_or_whitespace,
    is_null_or_empty,
    remove_right,
    remove_left,
    to_stream,
    to_snake_case
)

__all__ = [
    "Justification",
    "ScanAction",
    "ScanMode",
    "ScanState",
    "to_guid",
    "justify",
    "next_state",
    "parse_args",
    "WordWrapper",
    "word_wrap",
    "is_null_or_whitespace",
    "is_null_or_empty",
    "remove_right",
    "remove_left",
    "to_stream",
    "to_snake_case"
]
