"""
Custom exception hierarchy for stringext.

Coercion and extraction never raise; these exceptions cover invalid
arguments and invalid configuration only.
"""


class StringExtException(Exception):
    """Base exception for all stringext errors."""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ConfigurationError(StringExtException):
    """Configuration validation errors (invalid settings, missing values)."""

    pass


class ValidationError(StringExtException):
    """Input validation errors (invalid arguments, out-of-range counts)."""

    pass
