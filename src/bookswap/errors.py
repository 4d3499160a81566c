"""Exceptions raised by bookswap."""


class BookSwapError(Exception):
    """Base exception for bookswap errors."""

    pass


class CatalogMissingError(BookSwapError, ValueError):
    """Raised when a required catalog argument is missing entirely.

    An empty catalog is valid input; ``None`` indicates a caller bug.
    """

    pass


class CatalogLoadError(BookSwapError):
    """Raised when a catalog data file cannot be read or parsed."""

    pass
