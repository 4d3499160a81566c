"""bookswap - book discovery and reader matching for a swapping community."""

__version__ = "0.1.0"
