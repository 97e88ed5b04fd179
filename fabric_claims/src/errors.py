from __future__ import annotations

"""Exception hierarchy shared by the claim parser, reader and sheet."""

__all__ = [
    "ClaimSheetError",
    "MalformedLineError",
    "NumericOverflowError",
    "ClaimInputError",
    "SheetTooSmallError",
    "SheetTooLargeError",
    "ConfigError",
]


class ClaimSheetError(Exception):
    """Base class for every error that aborts a run."""


class MalformedLineError(ClaimSheetError, ValueError):
    """Raised when a line does not match the claim grammar."""

    def __init__(self, line: str, column: int, expected: str):
        self.line = line
        self.column = column
        self.expected = expected
        super().__init__(
            f"Failed to parse line '{line}' at column {column}: expected {expected}"
        )


class NumericOverflowError(ClaimSheetError, ValueError):
    """Raised when a numeric field does not fit in an unsigned 64-bit integer."""

    def __init__(self, line: str, field: str, value: str):
        self.line = line
        self.field = field
        self.value = value
        super().__init__(
            f"Failed to parse {field} in line '{line}': {value} does not fit in 64 bits"
        )


class ClaimInputError(ClaimSheetError, OSError):
    """Raised when input cannot be read or decoded, or output cannot be written."""


class SheetTooSmallError(ClaimSheetError, AssertionError):
    """Raised when a claim reaches outside the allocated sheet."""


class SheetTooLargeError(ClaimSheetError, MemoryError):
    """Raised when the sheet needed by the claims cannot be allocated."""


class ConfigError(ClaimSheetError, ValueError):
    """Raised for unknown cell states or malformed configuration."""
