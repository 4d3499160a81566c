"""Pytest configuration and shared fixtures.

Provides sample owned books, users and taste profiles. The package itself
embeds no sample data; every test gets its data from here.
"""

import json
from datetime import datetime
from pathlib import Path

import pytest

from bookswap.catalog.schemas import (
    Coordinates,
    OwnedBookRecord,
    ReadingState,
    User,
    UserProfile,
)
from bookswap.config import reset_config
from bookswap.geo.cities import CITY_COORDINATES


@pytest.fixture(autouse=True)
def clean_config():
    """Reset the cached config around every test."""
    reset_config()
    yield
    reset_config()


# ============================================================================
# Location Fixtures
# ============================================================================


@pytest.fixture
def istanbul() -> Coordinates:
    return CITY_COORDINATES["İstanbul"]


@pytest.fixture
def ankara() -> Coordinates:
    return CITY_COORDINATES["Ankara"]


# ============================================================================
# User Fixtures
# ============================================================================


@pytest.fixture
def users() -> list[User]:
    """Community members in a few cities."""
    return [
        User(
            id="u1",
            display_name="Ayşe",
            profile=UserProfile(
                city="İstanbul",
                favorite_genres=["Felsefi", "Roman"],
                favorite_authors=["Franz Kafka", "Oğuz Atay"],
                interests=["Felsefe", "Sinema", "Yoga"],
                intellectual_bio="Felsefe ve edebiyat okuru.",
            ),
        ),
        User(
            id="u2",
            display_name="Mehmet",
            avatar="https://example.com/mehmet.png",
            profile=UserProfile(
                city="Ankara",
                favorite_genres=["Bilim Kurgu", "Roman"],
                favorite_authors=["Frank Herbert"],
                interests=["Bilim", "Spor"],
            ),
        ),
        User(
            id="u3",
            display_name="Zeynep",
            profile=UserProfile(
                city="İstanbul",
                favorite_genres=["Felsefi", "Şiir", "Roman"],
                favorite_authors=["Franz Kafka", "Sabahattin Ali"],
                interests=["Felsefe", "Sinema", "Müzik"],
                intellectual_bio="Şiir, felsefe ve sinema üzerine yazıyorum.",
            ),
        ),
        User(
            id="u4",
            display_name="Can",
            profile=UserProfile(city="Trabzon", favorite_genres=["Tarih"]),
        ),
        User(id="u5", display_name="Deniz"),
    ]


@pytest.fixture
def users_by_id(users) -> dict[str, User]:
    return {user.id: user for user in users}


# ============================================================================
# Book Fixtures
# ============================================================================


@pytest.fixture
def books() -> list[OwnedBookRecord]:
    """Owned books spread across members.

    ``b6`` belongs to a user missing from the user list.
    """
    return [
        OwnedBookRecord(
            id="b1",
            book_id="dune",
            user_id="u2",
            title="Dune",
            authors=["Frank Herbert"],
            status=ReadingState.READ,
            rating=5,
            added_at=datetime(2024, 1, 5),
        ),
        OwnedBookRecord(
            id="b2",
            book_id="calikusu",
            user_id="u3",
            title="Çalıkuşu",
            authors=["Reşat Nuri Güntekin"],
            status=ReadingState.WANT_TO_READ,
            added_at=datetime(2024, 3, 1),
        ),
        OwnedBookRecord(
            id="b3",
            book_id="kurk-mantolu-madonna",
            user_id="u3",
            title="Kürk Mantolu Madonna",
            authors=["Sabahattin Ali"],
            status=ReadingState.CURRENTLY_READING,
            added_at=datetime(2024, 2, 1),
        ),
        OwnedBookRecord(
            id="b4",
            book_id="dune-messiah",
            user_id="u1",
            title="Dune Messiah",
            authors=["Frank Herbert"],
            status=ReadingState.READ,
            rating=4,
            added_at=datetime(2024, 1, 10),
        ),
        OwnedBookRecord(
            id="b5",
            book_id="anna-karenina",
            user_id="u4",
            title="Anna Karenina",
            authors=["Lev Tolstoy"],
            status=ReadingState.READ,
            rating=3,
            added_at=datetime(2023, 12, 1),
        ),
        OwnedBookRecord(
            id="b6",
            book_id="beyaz-kale",
            user_id="ghost",
            title="Beyaz Kale",
            authors=["Orhan Pamuk"],
            status=ReadingState.READ,
            rating=4,
            added_at=datetime(2024, 4, 1),
        ),
    ]


# ============================================================================
# Catalog File Fixtures
# ============================================================================


@pytest.fixture
def data_dir(tmp_path: Path, books, users) -> Path:
    """Directory with books.json and users.json for the fixtures."""
    (tmp_path / "books.json").write_text(
        json.dumps([b.model_dump(mode="json") for b in books], ensure_ascii=False),
        encoding="utf-8",
    )
    (tmp_path / "users.json").write_text(
        json.dumps([u.model_dump(mode="json") for u in users], ensure_ascii=False),
        encoding="utf-8",
    )
    return tmp_path


# ============================================================================
# CLI Testing Fixtures
# ============================================================================


@pytest.fixture
def cli_runner():
    """Create a Typer CLI test runner."""
    from typer.testing import CliRunner
    return CliRunner()


@pytest.fixture
def cli_app():
    """Get the CLI app for testing."""
    from bookswap.cli import app
    return app
