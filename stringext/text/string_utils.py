"""
Small string helpers.

Emptiness checks, trimming a fixed number of characters, conversion to
an in-memory byte stream, and snake_case conversion.
"""

import io
from typing import Optional

from ..core import get_loaded_config, ArgumentError

DEFAULT_STREAM_ENCODING = "utf-8"


def is_null_or_whitespace(value: Optional[str]) -> bool:
    """Return True if value is None, empty, or only whitespace."""
    return not value or value.isspace()


def is_null_or_empty(value: Optional[str]) -> bool:
    """Return True if value is None or empty."""
    return not value


def _check_count(value: str, count: int) -> None:
    if value is None:
        raise ArgumentError("Input string is required", param_name="value")
    if count < 0 or count > len(value):
        raise ArgumentError(
            f"Cannot remove {count} characters from a string of length {len(value)}",
            param_name="count",
            details={"count": count, "length": len(value)}
        )


def remove_right(value: str, count: int) -> str:
    """
    Remove characters from the right end of a string.

    Args:
        value: The input string.
        count: Number of trailing characters to remove.

    Returns:
        The shortened string.

    Raises:
        ArgumentError: If count is negative or longer than the string.
    """
    _check_count(value, count)
    return value[:len(value) - count]


def remove_left(value: str, count: int) -> str:
    """
    Remove characters from the left end of a string.

    Args:
        value: The input string.
        count: Number of leading characters to remove.

    Returns:
        The shortened string.

    Raises:
        ArgumentError: If count is negative or longer than the string.
    """
    _check_count(value, count)
    return value[count:]


def to_stream(value: Optional[str], encoding: str = None) -> io.BytesIO:
    """
    Encode a string into a readable in-memory byte stream.

    Args:
        value: Text to encode. None produces an empty stream.
        encoding: Text encoding. Defaults to text.stream_encoding when a
            config has been loaded explicitly, otherwise UTF-8.

    Returns:
        BytesIO positioned at the start.
    """
    if encoding is None:
        config = get_loaded_config()
        encoding = config.text.stream_encoding if config else DEFAULT_STREAM_ENCODING

    stream = io.BytesIO()
    stream.write((value or "").encode(encoding))
    stream.seek(0)
    return stream


def to_snake_case(value: str) -> str:
    """
    Convert a PascalCase or camelCase string to snake_case.

    An underscore is inserted before every uppercase letter except the
    first character, then the whole result is lower-cased.
    """
    if value is None:
        raise ArgumentError("Input string is required", param_name="value")

    return "".join(
        "_" + char if i > 0 and char.isupper() else char
        for i, char in enumerate(value)
    ).lower()


if __name__ == "__main__":
    print(to_snake_case("TheCatSatOnTheMat"))
    print(remove_right("filename.txt", 4))
    print(remove_left("--verbose", 2))
    print(to_stream("héllo").read())
    print(is_null_or_whitespace(" \t"), is_null_or_empty(""))
