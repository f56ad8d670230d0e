"""Unit tests for fuzzy piece matching."""

from __future__ import annotations

import pytest

from scoreid.core.identity.matching import (
    COMPOSER_WEIGHT,
    TITLE_WEIGHT,
    composer_similarity,
    confidence_for,
    find_similar_pieces,
    string_similarity,
)


class TestStringSimilarity:
    def test_identical(self):
        assert string_similarity("sonata", "sonata") == 1.0
        assert string_similarity(None, None) == 1.0

    def test_exact_fraction(self):
        assert string_similarity("abcdefghij", "abcdefgxyz") == 0.7

    def test_levenshtein(self):
        assert string_similarity("kitten", "sitting") == pytest.approx(4 / 7)

    def test_case_insensitive(self):
        assert string_similarity("ABC", "abc") == 1.0

    def test_one_empty(self):
        assert string_similarity("", "abc") == 0.0
        assert string_similarity("abc", None) == 0.0


class TestComposerSimilarity:
    def test_both_missing_is_neutral(self):
        assert composer_similarity("", "") == 1.0

    def test_one_missing_is_penalized(self):
        assert composer_similarity("beethoven", "") == 0.3
        assert composer_similarity("", "beethoven") == 0.3

    def test_both_present(self):
        assert composer_similarity("beethoven", "beethoven") == 1.0


class TestConfidenceFor:
    @pytest.mark.parametrize(
        ("similarity", "expected"),
        [(1.0, "high"), (0.95, "high"), (0.9, "medium"), (0.85, "medium"), (0.84, "low"), (0.7, "low")],
    )
    def test_buckets(self, similarity, expected):
        assert confidence_for(similarity) == expected


class TestFindSimilarPieces:
    """Test find_similar_pieces() scoring, threshold and ordering."""

    def test_exact_match_is_high_confidence(self, make_item):
        matches = find_similar_pieces("Moonlight Sonata", "Beethoven", [make_item()])
        assert len(matches) == 1
        assert matches[0].similarity == pytest.approx(1.0)
        assert matches[0].confidence == "high"
        assert matches[0].score_id == "moonlight sonata-beethoven"

    def test_missing_candidate_composer_is_penalized(self, make_item):
        matches = find_similar_pieces("Moonlight Sonata", "Beethoven", [make_item(composer=None)])
        assert matches[0].similarity == pytest.approx(0.7 + 0.3 * 0.3)
        assert matches[0].confidence == "low"
        assert matches[0].composer == ""

    def test_both_composers_missing(self, make_item):
        matches = find_similar_pieces("Moonlight Sonata", None, [make_item(composer="")])
        assert matches[0].similarity == pytest.approx(1.0)

    def test_dissimilar_titles_excluded(self, make_item):
        assert find_similar_pieces("Für Elise", "Beethoven", [make_item()]) == []

    def test_normalizes_query(self, make_item):
        matches = find_similar_pieces("  MOONLIGHT   sonata ", "beethoven", [make_item()])
        assert matches[0].similarity == pytest.approx(1.0)

    def test_sorted_by_similarity_descending(self, make_item):
        candidates = [
            make_item("moonlite sonata-beethoven", title="Moonlite Sonata"),
            make_item("moonlight sonata-beethoven", title="Moonlight Sonata"),
            make_item("moonlight sonatas-beethoven", title="Moonlight Sonatas"),
        ]
        matches = find_similar_pieces("Moonlight Sonata", "Beethoven", candidates)
        assert [match.score_id for match in matches] == [
            "moonlight sonata-beethoven",
            "moonlight sonatas-beethoven",
            "moonlite sonata-beethoven",
        ]
        similarities = [match.similarity for match in matches]
        assert similarities == sorted(similarities, reverse=True)

    def test_threshold_is_inclusive(self, make_item):
        candidate = make_item("abcdefgxyz", title="abcdefgxyz", composer=None)
        overall = string_similarity("abcdefghij", "abcdefgxyz") * TITLE_WEIGHT + 1.0 * COMPOSER_WEIGHT

        included = find_similar_pieces("abcdefghij", None, [candidate], threshold=overall)
        excluded = find_similar_pieces("abcdefghij", None, [candidate], threshold=overall + 0.01)

        assert [match.score_id for match in included] == ["abcdefgxyz"]
        assert excluded == []

    def test_title_similarity_at_default_threshold(self, make_item):
        # title 0.7, composers identical: 0.7 * 0.7 + 0.3 = 0.79
        candidate = make_item("abcdefgxyz-bach", title="abcdefgxyz", composer="Bach")
        matches = find_similar_pieces("abcdefghij", "Bach", [candidate])
        assert matches[0].similarity == pytest.approx(0.79)

    def test_empty_candidates(self):
        assert find_similar_pieces("Moonlight Sonata", "Beethoven", []) == []
