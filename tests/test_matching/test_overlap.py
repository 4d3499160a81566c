"""Tests for weighted overlap primitives."""

import pytest

from bookswap.matching.overlap import (
    category_overlap,
    count_similarity,
    genre_overlap,
    influence_overlap,
    length_similarity,
    round_half_up,
    weighted_sum,
)
from bookswap.matching.weights import (
    AUTHOR_INFLUENCE,
    GENRE_WEIGHTS,
    INTEREST_CATEGORIES,
    InterestCategory,
)


class TestWeightedSum:
    """Tests for weighted_sum."""

    def test_listed_and_unlisted(self):
        assert weighted_sum({"Şiir", "Bilinmeyen"}, GENRE_WEIGHTS) == pytest.approx(2.3)

    def test_empty(self):
        assert weighted_sum(set(), GENRE_WEIGHTS) == 0


class TestGenreOverlap:
    """Tests for genre_overlap."""

    def test_one_common_genre(self):
        score, common = genre_overlap({"Felsefi", "Roman"}, {"Felsefi", "Tarih"}, GENRE_WEIGHTS)
        assert score == pytest.approx(0.6)
        assert common == {"Felsefi"}

    def test_no_common_genre(self):
        score, common = genre_overlap({"Roman"}, {"Tarih"}, GENRE_WEIGHTS)
        assert score == 0.0
        assert common == set()

    def test_heavy_genres_clamped(self):
        """Test weights above 1.0 cannot push the score past 1.0."""
        score, _ = genre_overlap({"Şiir", "Deneme"}, {"Şiir", "Deneme"}, GENRE_WEIGHTS)
        assert score == 1.0

    def test_light_genre(self):
        score, _ = genre_overlap({"Seyahat"}, {"Seyahat"}, GENRE_WEIGHTS)
        assert score == pytest.approx(0.5)


class TestCategoryOverlap:
    """Tests for category_overlap."""

    def test_weighted_by_category(self):
        score = category_overlap(
            {"Felsefe", "Yoga", "Müzik"},
            {"Felsefe", "Spor", "Müzik"},
            INTEREST_CATEGORIES,
        )
        # intellectual 2/2 * 1.5, creative 1/1 * 1.2, wellness 0/1 * 0.8
        assert score == pytest.approx(4.2 / 5.0)

    def test_uncategorized_interests_ignored(self):
        assert category_overlap({"Origami"}, {"Origami"}, INTEREST_CATEGORIES) == 0.0

    def test_empty(self):
        assert category_overlap(set(), set(), INTEREST_CATEGORIES) == 0.0

    def test_custom_categories(self):
        categories = {"games": InterestCategory(frozenset({"Satranç", "Go"}), 2.0)}
        assert category_overlap({"Satranç"}, {"Satranç", "Go"}, categories) == pytest.approx(0.5)


class TestInfluenceOverlap:
    """Tests for influence_overlap."""

    def test_boosted_ratio(self):
        score, common = influence_overlap(
            {"Franz Kafka", "Orhan Pamuk"},
            {"Franz Kafka", "Yeni Yazar"},
            AUTHOR_INFLUENCE,
        )
        assert score == pytest.approx(1.6 / 4.1 * 2)
        assert common == {"Franz Kafka"}

    def test_identical_lists_clamped(self):
        score, _ = influence_overlap({"James Joyce"}, {"James Joyce"}, AUTHOR_INFLUENCE)
        assert score == 1.0

    def test_no_common_author(self):
        score, common = influence_overlap({"A"}, {"B"}, AUTHOR_INFLUENCE)
        assert score == 0.0
        assert common == set()


class TestCountSimilarity:
    """Tests for count_similarity and length_similarity."""

    @pytest.mark.parametrize(
        "first,second,expected",
        [(0, 0, 1.0), (2, 2, 1.0), (1, 3, 1 / 3), (0, 4, 0.0)],
    )
    def test_counts(self, first, second, expected):
        assert count_similarity(first, second) == pytest.approx(expected)

    def test_length_similarity(self):
        assert length_similarity("abcd", "ab") == pytest.approx(0.5)

    def test_length_similarity_empty(self):
        assert length_similarity("", "abc") == 0.0
        assert length_similarity("", "") == 0.0


class TestRoundHalfUp:
    """Tests for round_half_up."""

    def test_half_goes_up(self):
        assert round_half_up(0.125) == 0.13

    def test_plain(self):
        assert round_half_up(0.27333) == 0.27
        assert round_half_up(0.0) == 0.0
