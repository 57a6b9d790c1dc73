"""
Value types shared by the text utilities.

Defines the justification modes and the states and actions of the
argument tokenizer's scanning state machine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Justification(Enum):
    """Alignment applied by justify()."""
    LEFT = "left"
    CENTRE = "centre"
    RIGHT = "right"


class ScanMode(Enum):
    """Position of the tokenizer relative to quotes and whitespace runs."""
    DEFAULT = "default"
    IN_WHITESPACE = "in_whitespace"
    IN_QUOTE = "in_quote"


class ScanAction(Enum):
    """What the scanning loop does with the current character."""
    OPEN_QUOTE = "open_quote"
    CLOSE_QUOTE = "close_quote"
    SPLIT = "split"
    START_TOKEN = "start_token"
    SKIP = "skip"
    APPEND = "append"


@dataclass(frozen=True)
class ScanState:
    """
    Immutable tokenizer state.

    Attributes:
        mode: Current scan mode.
        quote: Active quote character while mode is IN_QUOTE.
        resume: Mode restored when the active quote closes.
    """
    mode: ScanMode = ScanMode.DEFAULT
    quote: Optional[str] = None
    resume: ScanMode = ScanMode.DEFAULT

    @property
    def in_quote(self) -> bool:
        return self.mode is ScanMode.IN_QUOTE


INITIAL_STATE = ScanState()
