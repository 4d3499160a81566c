"""Main entry point for the bookswap package."""

from bookswap.cli import app

if __name__ == "__main__":
    app()
