from __future__ import annotations


class CatalogMatchError(Exception):
    """Base class for errors raised by catalog_match."""


class ConfigurationError(CatalogMatchError):
    """Raised when embedding or matching configuration is invalid."""


class DimensionMismatch(CatalogMatchError, ValueError):
    """Raised when two vectors of different length are compared."""

    def __init__(self, left: int, right: int) -> None:
        super().__init__(f"Vectors must have the same length (got {left} and {right})")
        self.left = left
        self.right = right


class EmbeddingProviderError(CatalogMatchError):
    """Raised when the embedding provider fails or returns a malformed response.

    The underlying exception, if any, is kept on ``cause`` and chained as
    ``__cause__``.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
