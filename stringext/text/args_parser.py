"""
Command-line style argument tokenizer.

Splits a string into arguments on whitespace, with single or double
quotes delimiting arguments that contain whitespace. Scanning is driven
by a small state machine (see next_state) so the transition table can be
exercised on its own.

Quote handling follows these rules:
- A closing quote ends the argument at once, whether or not whitespace
  follows it, and restores the whitespace-run mode that was active when
  the quote opened.
- An opening quote discards anything accumulated since the last argument.
- Unbalanced quotes are not reported; the trailing text is still returned.

Outside quotes, whitespace runs are collapsed: only the first whitespace
character ends an argument and the rest of the run is dropped, so blank
arguments never come from leading, trailing or repeated whitespace.
"""

from typing import List, Optional, Tuple

from ..core import get_logger
from .models import INITIAL_STATE, ScanAction, ScanMode, ScanState

logger = get_logger(__name__)

QUOTE_CHARS = frozenset("'\"")


def next_state(state: ScanState, char: str) -> Tuple[ScanState, ScanAction]:
    """
    Compute the transition for one character.

    Args:
        state: Current scan state.
        char: Next input character.

    Returns:
        Tuple of (new state, action for the scanning loop).
    """
    if not state.in_quote and char in QUOTE_CHARS:
        return ScanState(ScanMode.IN_QUOTE, quote=char, resume=state.mode), ScanAction.OPEN_QUOTE

    if state.in_quote:
        if char == state.quote:
            return ScanState(state.resume), ScanAction.CLOSE_QUOTE
        return state, ScanAction.APPEND

    if state.mode is ScanMode.DEFAULT and char.isspace():
        return ScanState(ScanMode.IN_WHITESPACE), ScanAction.SPLIT

    if state.mode is ScanMode.IN_WHITESPACE:
        if char.isspace():
            return state, ScanAction.SKIP
        return ScanState(ScanMode.DEFAULT), ScanAction.START_TOKEN

    return state, ScanAction.APPEND


def parse_args(value: Optional[str]) -> List[str]:
    """
    Tokenize a string into arguments.

    Args:
        value: Input text. None is treated as empty.

    Returns:
        Ordered list of argument strings.

    Example:
        >>> parse_args('copy "my file.txt" backup')
        ['copy', 'my file.txt', 'backup']
    """
    args: List[str] = []
    current: List[str] = []
    state = INITIAL_STATE

    for char in value or "":
        state, action = next_state(state, char)

        if action is ScanAction.OPEN_QUOTE:
            current = []
        elif action is ScanAction.CLOSE_QUOTE:
            # Quoted arguments are kept even when empty
            args.append("".join(current))
            current = []
        elif action is ScanAction.SPLIT:
            if current:
                args.append("".join(current))
            current = []
        elif action is ScanAction.START_TOKEN:
            current = [char]
        elif action is ScanAction.SKIP:
            continue
        else:
            current.append(char)

    if state.in_quote:
        logger.debug(f"Unterminated {state.quote} quote in argument string")

    if current:
        args.append("".join(current))

    logger.debug(f"Parsed {len(args)} arguments")
    return args


if __name__ == "__main__":
    samples = [
        "foo bar",
        'foo "bar baz" qux',
        "'it''s'",
        'unterminated "quote here',
    ]
    for sample in samples:
        print(f"{sample!r} -> {parse_args(sample)}")
