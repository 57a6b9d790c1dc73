"""
Word wrapping without breaking words.

Splits text into lines of at most a given length, breaking on whitespace
where possible and hard-cutting words longer than a line. Lines are
produced lazily by a WordWrapper iterator.
"""

from typing import Iterator

from ..core import get_logger, ArgumentError

logger = get_logger(__name__)


class WordWrapper:
    """
    Iterator over the wrapped lines of a string.

    Each instance keeps its own cursor; once exhausted it stays exhausted.

    Attributes:
        text: The text being wrapped.
        length: Maximum characters per line.
    """

    def __init__(self, text: str, length: int):
        """
        Initialize the wrapper.

        Args:
            text: Text to wrap.
            length: Maximum line length, must be positive.

        Raises:
            ArgumentError: If text is None or length is not positive.
        """
        if text is None:
            raise ArgumentError("Text to wrap is required", param_name="text")
        if length <= 0:
            raise ArgumentError(
                "Line length has to be positive",
                param_name="length",
                details={"length": length}
            )

        self.text = text
        self.length = length
        self._cursor = 0
        self._lines = 0

    def __iter__(self) -> "WordWrapper":
        return self

    def __next__(self) -> str:
        text = self.text
        end = len(text)
        i = self._cursor

        # Drop whitespace at the start of the line
        while i < end and text[i].isspace():
            i += 1

        if i >= end:
            self._cursor = end
            if self._lines:
                logger.debug(f"Wrapped text into {self._lines} lines of at most {self.length}")
                self._lines = 0
            raise StopIteration

        j = self._find_break(i)
        if i + j >= end:
            j = end - i

        self._cursor = i + j
        self._lines += 1
        return text[i:i + j]

    def _find_break(self, start: int) -> int:
        """
        Find the longest line starting at `start` that ends on a break.

        Offset `length` itself is inspected, so a word that ends exactly at
        the line limit is kept whole.

        Returns:
            Line length; falls back to `length` when no break exists.
        """
        text = self.text
        end = len(text)

        j = self.length
        while j >= 0:
            pos = start + j
            if pos == end or (pos < end and text[pos].isspace()):
                break
            j -= 1

        if j <= 0 or j > self.length:
            return self.length
        return j


def word_wrap(text: str, length: int) -> Iterator[str]:
    """
    Wrap text into lines of at most `length` characters.

    Whitespace at the start of each line is dropped. Iteration stops once
    only whitespace remains, so text ending in whitespace never yields a
    final empty line.

    Args:
        text: Text to wrap.
        length: Maximum line length.

    Returns:
        Lazy iterator over the lines.

    Raises:
        ArgumentError: If text is None or length is not positive.

    Example:
        >>> list(word_wrap("the quick brown fox", 10))
        ['the quick', 'brown fox']
    """
    return WordWrapper(text, length)


if __name__ == "__main__":
    sample = "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor."
    for line in word_wrap(sample, 20):
        print(f"|{line:<20}|")
