"""Exceptions raised by the inventory pipeline.

Every exception here is fatal to a run: the caller gets no partial result.
"""

from __future__ import annotations


class InventoryError(Exception):
    """Base exception for inventory failures."""


class MetricsClientError(InventoryError):
    """Raised when the metrics client cannot be constructed."""


class MetricsConnectionError(InventoryError):
    """Raised when the metrics backend is unreachable."""


class MetricsTimeoutError(InventoryError):
    """Raised when the query does not complete within the timeout."""


class MetricsQueryError(InventoryError):
    """Raised when the backend rejects the query or answers garbage."""

    def __init__(self, message: str, error_type: str | None = None) -> None:
        super().__init__(message)
        self.error_type = error_type


class UnexpectedResultTypeError(InventoryError):
    """Raised when the query returns anything other than an instant vector."""

    def __init__(self, result_type: str | None, query: str) -> None:
        super().__init__(
            f"Unexpected non-vector result type {result_type} received for query: {query}"
        )
        self.result_type = result_type
        self.query = query
