"""
Identifier parsing.

Converts compact (time-low only) or full textual identifiers into UUIDs.
"""

import uuid

from ..core import get_logger, ArgumentError, FormatError

logger = get_logger(__name__)

COMPACT_ID_LENGTH = 8
COMPACT_ID_SUFFIX = "-0000-0000-0000-000000000000"


def to_guid(value: str) -> uuid.UUID:
    """
    Parse a compact or full identifier string.

    An 8-character string is taken as the high-order 32 bits and expanded
    with a zero suffix; anything else must be a full identifier.

    Args:
        value: Compact or canonical identifier text.

    Returns:
        The parsed UUID.

    Raises:
        ArgumentError: If value is None.
        FormatError: If value is not a valid identifier.
    """
    if value is None:
        raise ArgumentError("Identifier value is required", param_name="value")

    text = value
    if len(value) == COMPACT_ID_LENGTH:
        text = value + COMPACT_ID_SUFFIX
        logger.debug(f"Expanded compact identifier {value!r} to {text!r}")

    try:
        return uuid.UUID(text)
    except ValueError as e:
        raise FormatError(
            f"Unrecognised identifier format: {value!r}",
            value=value,
            details={"reason": str(e)}
        ) from e


if __name__ == "__main__":
    print(to_guid("12345678"))
    print(to_guid("0f8fad5b-d9cb-469f-a165-70867728950e"))
