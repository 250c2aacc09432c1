# model_compare/core/errors.py
from typing import Optional


class ComparisonError(Exception):
    """Base class for every failure that ends a comparison attempt."""


class ValidationError(ComparisonError):
    # Raised before any request is issued.
    def __init__(self, missing_fields):
        self.missing_fields = list(missing_fields)
        super().__init__(f"Please fill in all fields: {', '.join(self.missing_fields)}")


class TransportError(ComparisonError):
    """
    Non-success HTTP status, or a network-level failure when no status exists.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, reason: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason
        super().__init__(message)

    @classmethod
    def from_status(cls, status_code: int, reason: str) -> "TransportError":
        return cls(f"HTTP {status_code}: {reason}", status_code=status_code, reason=reason)


class FormatError(ComparisonError):
    def __init__(self, message: str = "Unexpected response format"):
        super().__init__(message)
