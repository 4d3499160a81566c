"""Weight tables for reader compatibility.

Each table is immutable and bundled in ``WeightTables`` so a different
locale or tuning can be swapped in without touching the scoring code.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class InterestCategory:
    """A bucket of related interests and its weight."""

    interests: frozenset[str]
    weight: float


GENRE_WEIGHTS: Mapping[str, float] = MappingProxyType({
    "Roman": 1.0,
    "Bilim Kurgu": 0.9,
    "Fantastik": 0.9,
    "Felsefi": 1.2,
    "Psikoloji": 1.1,
    "Sosyoloji": 1.1,
    "Tarih": 1.0,
    "Biyografi": 0.8,
    "Polisiye": 0.7,
    "Şiir": 1.3,
    "Deneme": 1.2,
    "Sanat": 1.0,
    "Kişisel Gelişim": 0.6,
    "Teknoloji": 0.8,
    "Seyahat": 0.5,
    "Çizgi Roman": 0.6,
})

INTELLECTUAL_GENRES: frozenset[str] = frozenset({
    "Felsefi",
    "Psikoloji",
    "Sosyoloji",
    "Şiir",
    "Deneme",
})

INTELLECTUAL_CATEGORY = "intellectual"

# Order matters: categories are accumulated in this order
INTEREST_CATEGORIES: Mapping[str, InterestCategory] = MappingProxyType({
    INTELLECTUAL_CATEGORY: InterestCategory(
        frozenset({"Yazma", "Felsefe", "Tarih", "Sanat", "Müzik", "Tiyatro", "Sinema"}),
        1.5,
    ),
    "creative": InterestCategory(
        frozenset({"Resim", "Fotoğrafçılık", "El Sanatları", "Müzik", "Dans"}),
        1.2,
    ),
    "social": InterestCategory(
        frozenset({"Gönüllülük", "Sosyal Aktiviteler", "Toplum Projesi"}),
        1.1,
    ),
    "wellness": InterestCategory(
        frozenset({"Yoga", "Meditasyon", "Spor", "Doğa"}),
        0.8,
    ),
    "learning": InterestCategory(
        frozenset({"Dil Öğrenme", "Araştırma", "Teknoloji", "Bilim"}),
        1.3,
    ),
    "lifestyle": InterestCategory(
        frozenset({"Seyahat", "Yemek", "Bahçıvanlık", "Koleksiyonculuk"}),
        0.7,
    ),
})

AUTHOR_INFLUENCE: Mapping[str, float] = MappingProxyType({
    "Orhan Pamuk": 1.5,
    "Sabahattin Ali": 1.4,
    "Nazım Hikmet": 1.4,
    "Yaşar Kemal": 1.3,
    "Ahmet Hamdi Tanpınar": 1.4,
    "Oğuz Atay": 1.5,
    "Franz Kafka": 1.6,
    "Milan Kundera": 1.5,
    "Gabriel García Márquez": 1.5,
    "Jorge Luis Borges": 1.6,
    "Fyodor Dostoevsky": 1.6,
    "Virginia Woolf": 1.5,
    "James Joyce": 1.7,
    "Italo Calvino": 1.5,
    "Albert Camus": 1.6,
    "Jean-Paul Sartre": 1.5,
})


@dataclass(frozen=True)
class WeightTables:
    """All lookup tables used by the compatibility scorer."""

    genre_weights: Mapping[str, float] = field(default_factory=lambda: GENRE_WEIGHTS)
    intellectual_genres: frozenset[str] = INTELLECTUAL_GENRES
    interest_categories: Mapping[str, InterestCategory] = field(
        default_factory=lambda: INTEREST_CATEGORIES
    )
    intellectual_category: str = INTELLECTUAL_CATEGORY
    author_influence: Mapping[str, float] = field(default_factory=lambda: AUTHOR_INFLUENCE)

    @property
    def intellectual_interests(self) -> frozenset[str]:
        """Interests of the intellectual category."""
        category = self.interest_categories.get(self.intellectual_category)
        return category.interests if category else frozenset()


DEFAULT_TABLES = WeightTables()
