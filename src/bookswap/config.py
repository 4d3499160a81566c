"""Configuration management for bookswap.

Loads configuration from environment variables and provides defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .geo.cities import CITY_COORDINATES, DEFAULT_CITY

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Load .env file if present
load_dotenv()


@dataclass
class Config:
    """Application configuration."""

    # Catalog files for the CLI
    data_dir: Path

    # Geo
    default_city: str
    nearby_radius_km: float
    nearby_limit: int

    # Logging
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        data_dir = Path(os.environ.get("BOOKSWAP_DATA_DIR", "data")).expanduser()

        return cls(
            data_dir=data_dir,
            default_city=os.environ.get("BOOKSWAP_DEFAULT_CITY", DEFAULT_CITY),
            nearby_radius_km=float(os.environ.get("BOOKSWAP_NEARBY_RADIUS_KM", "50")),
            nearby_limit=int(os.environ.get("BOOKSWAP_NEARBY_LIMIT", "5")),
            log_level=os.environ.get("BOOKSWAP_LOG_LEVEL", "WARNING").upper(),
        )

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []

        if self.default_city not in CITY_COORDINATES:
            errors.append(f"Unknown default city: {self.default_city}")
        if self.nearby_radius_km <= 0:
            errors.append("Nearby radius must be positive")
        if self.nearby_limit <= 0:
            errors.append("Nearby limit must be positive")
        if self.log_level not in LOG_LEVELS:
            errors.append(f"Unknown log level: {self.log_level}")

        return errors


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Reset the global config instance. Used for testing."""
    global _config
    _config = None
