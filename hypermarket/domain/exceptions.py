"""Domain exceptions.

Catalog lookups report "not found" as return values, so the errors here
belong to the input boundary: text typed at the menu that cannot become a
valid argument for a catalog operation.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all hypermarket exceptions.

    All errors should inherit from this class to allow catching
    application-specific errors at the presentation layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Input Errors
# ============================================================================


class InputError(DomainError):
    """Base class for errors in user-supplied input."""

    pass


class InvalidPriceError(InputError):
    """Raised when a price cannot be parsed as a finite decimal number."""

    def __init__(self, raw: str, reason: str = "not a valid decimal number") -> None:
        """Initialize invalid price error.

        Args:
            raw: The text that failed to parse.
            reason: Why the text was rejected.
        """
        super().__init__(
            f"Invalid price {raw!r}: {reason}",
            details={"raw": raw, "reason": reason},
        )


class NegativePriceError(InvalidPriceError):
    """Raised when a parsed price is below zero."""

    def __init__(self, raw: str) -> None:
        """Initialize negative price error.

        Args:
            raw: The text holding the negative amount.
        """
        super().__init__(raw, reason="price cannot be negative")


class InvalidChoiceError(InputError):
    """Raised when a numbered selection is missing or out of range."""

    def __init__(self, raw: str, upper: int) -> None:
        """Initialize invalid choice error.

        Args:
            raw: The text entered by the user.
            upper: Highest valid option number.
        """
        super().__init__(
            f"Invalid choice {raw!r}: expected a number between 1 and {upper}",
            details={"raw": raw, "upper": upper},
        )
