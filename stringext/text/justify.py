"""
Fixed-width justification of text.
"""

from ..core import ArgumentError
from .models import Justification


def justify(value: str, length: int, justification: Justification) -> str:
    """
    Pad or truncate text to exactly `length` characters.

    Text longer than `length` is silently truncated. Centred text puts
    the odd padding space on the trailing side.

    Args:
        value: Text to justify. None is treated as empty.
        length: Width of the result.
        justification: LEFT, CENTRE or RIGHT.

    Returns:
        String of exactly `length` characters.

    Raises:
        ArgumentError: If length is negative or justification is unknown.
    """
    if length < 0:
        raise ArgumentError(
            "Justification length cannot be negative",
            param_name="length",
            details={"length": length}
        )

    text = (value or "")[:length]
    padding = length - len(text)

    if justification is Justification.LEFT:
        return text + " " * padding
    if justification is Justification.RIGHT:
        return " " * padding + text
    if justification is Justification.CENTRE:
        leading = padding // 2
        return " " * leading + text + " " * (padding - leading)

    raise ArgumentError(
        f"Unknown justification: {justification!r}",
        param_name="justification"
    )


if __name__ == "__main__":
    for mode in Justification:
        print(f"[{justify('stringext', 15, mode)}] {mode.name}")
