# exceptions/parsers.py
"""
Custom exceptions for feed parser components.
Provides specific error types for better error handling and debugging.
"""


class ParsingError(Exception):
    """
    Exception raised when feed parsing operations fail.

    Raised by parser internals when a payload cannot be turned into records.
    Public parser entry points catch it and degrade to an empty collection.
    """

    def __init__(self, message: str, original_error: Exception = None):
        """
        Initialize parsing error with message and optional original error.

        Args:
            message: Human-readable error message describing the parsing failure
            original_error: Original exception that caused this parsing error
        """
        super().__init__(message)
        self.original_error = original_error
        self.message = message

    def __str__(self) -> str:
        """
        Return string representation of the parsing error.

        Returns:
            Formatted error message with original error if available
        """
        if self.original_error:
            return f"{self.message} (Original: {self.original_error})"
        return self.message


class MalformedFeedError(ParsingError):
    """
    Exception raised when a feed payload lacks the expected structure.
    """

    def __init__(self, feed_type: str, detail: str = "", original_error: Exception = None):
        """
        Initialize malformed feed error.

        Args:
            feed_type: Feed that failed (e.g. "server", "player")
            detail: Short description of what was missing
            original_error: Underlying parser exception, if any
        """
        message = f"Malformed {feed_type} feed"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, original_error)
        self.feed_type = feed_type


class TableNotFoundError(MalformedFeedError):
    """
    Exception raised when the expected HTML table is not found.
    """

    def __init__(self, table_type: str = "table"):
        """
        Initialize table not found error.

        Args:
            table_type: Type of table that was not found (e.g. "player")
        """
        super().__init__(table_type, f"expected {table_type} table not found")
        self.table_type = table_type
