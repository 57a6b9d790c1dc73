"""
Custom exception hierarchy for stringext.

Provides specific exception types for the failure modes of the library:
configuration problems, malformed identifiers, and invalid arguments.
"""


class StringExtError(Exception):
    """Base exception for all stringext errors."""

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(StringExtError):
    """Raised when configuration is invalid or missing."""
    pass


class FormatError(StringExtError, ValueError):
    """Raised when a string cannot be parsed into the requested form."""

    def __init__(self, message: str, value: str = None, details: dict = None):
        """
        Initialize format error.

        Args:
            message: Error description.
            value: The string that failed to parse.
            details: Additional context.
        """
        super().__init__(message, details)
        self.value = value


class ArgumentError(StringExtError, ValueError):
    """Raised when an argument is missing or out of range."""

    def __init__(self, message: str, param_name: str = None, details: dict = None):
        """
        Initialize argument error.

        Args:
            message: Error description.
            param_name: Name of the offending parameter.
            details: Additional context.
        """
        super().__init__(message, details)
        self.param_name = param_name


if __name__ == "__main__":
    try:
        raise FormatError("Unrecognised identifier", value="xyz")
    except StringExtError as e:
        print(f"Caught: {e.__class__.__name__}: {e.message} ({e.value!r})")

    try:
        raise ArgumentError("Length must be positive", param_name="length", details={"length": 0})
    except ValueError as e:
        print(f"Invalid {e.param_name}: {e.details}")
