"""Data access for the swap catalog.

The discovery and matching engines never embed data; they read owned books
and users through a ``CatalogRepository`` handed to them by the caller.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Optional, Protocol, Union

from pydantic import ValidationError

from ..errors import CatalogLoadError
from .schemas import OwnedBookRecord, User

logger = logging.getLogger(__name__)

BOOKS_FILE = "books.json"
USERS_FILE = "users.json"


class CatalogRepository(Protocol):
    """Read-only access to owned books and users."""

    def list_owned_books(self) -> list[OwnedBookRecord]:
        ...

    def list_users(self) -> list[User]:
        ...

    def get_user(self, user_id: str) -> Optional[User]:
        ...


class InMemoryCatalog:
    """Catalog backed by lists supplied at construction time."""

    def __init__(
        self,
        books: Iterable[OwnedBookRecord] = (),
        users: Iterable[User] = (),
    ):
        """Initialize the catalog.

        Args:
            books: Owned-book records
            users: Community users
        """
        self._books = list(books)
        self._users = list(users)

    def list_owned_books(self) -> list[OwnedBookRecord]:
        return list(self._books)

    def list_users(self) -> list[User]:
        return list(self._users)

    def get_user(self, user_id: str) -> Optional[User]:
        for user in self._users:
            if user.id == user_id:
                return user
        return None


class JsonCatalog(InMemoryCatalog):
    """Catalog loaded from ``books.json`` and ``users.json`` in a directory."""

    def __init__(self, data_dir: Union[str, Path]):
        """Load the catalog files.

        Args:
            data_dir: Directory containing the JSON files

        Raises:
            CatalogLoadError: If a file is missing or malformed
        """
        self.data_dir = Path(data_dir).expanduser()
        books = self._load(BOOKS_FILE, OwnedBookRecord)
        users = self._load(USERS_FILE, User)
        super().__init__(books=books, users=users)
        logger.debug(
            "Loaded %d books and %d users from %s", len(books), len(users), self.data_dir
        )

    def _load(self, filename: str, model) -> list:
        path = self.data_dir / filename
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise CatalogLoadError(f"Cannot read {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise CatalogLoadError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(data, list):
            raise CatalogLoadError(f"{path} must contain a JSON array")

        try:
            return [model.model_validate(item) for item in data]
        except ValidationError as e:
            raise CatalogLoadError(f"Invalid record in {path}: {e}") from e
