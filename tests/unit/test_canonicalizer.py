"""Unit tests for composer canonicalization."""

from __future__ import annotations

import pytest

from scoreid.core.identity.canonicalizer import (
    CatalogInfo,
    extract_catalog_info,
    get_canonical_composer_name,
    get_display_composer_name,
    is_known_composer,
    is_same_composer,
    normalize_composer_for_matching,
    remove_catalog_numbers,
)


class TestRemoveCatalogNumbers:
    """Test remove_catalog_numbers() strips catalog identifiers."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Bach BWV 772 No. 1", "Bach"),
            ("Chopin Op.10", "Chopin"),
            ("Mozart K. 545", "Mozart"),
            ("Mozart KV 331", "Mozart"),
            ("Haydn Hob. XVI", "Haydn"),
            ("Schubert D. 899", "Schubert"),
            ("Beethoven WoO 59", "Beethoven"),
            ("Vivaldi, RV 269", "Vivaldi"),
            ("Beethoven Opus 27", "Beethoven"),
        ],
    )
    def test_strips_catalog_numbers(self, raw, expected):
        assert remove_catalog_numbers(raw) == expected

    def test_requires_word_boundary(self):
        assert remove_catalog_numbers("Dukas") == "Dukas"

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty(self, value):
        assert remove_catalog_numbers(value) == ""


class TestNormalizeComposerForMatching:
    def test_comma_spacing(self):
        assert normalize_composer_for_matching("Bach ,J.S.") == "bach, js"
        assert normalize_composer_for_matching("Bach,   Johann Sebastian") == "bach, johann sebastian"

    def test_strips_dangling_commas(self):
        assert normalize_composer_for_matching("Chopin,") == "chopin"


class TestGetCanonicalComposerName:
    """Test get_canonical_composer_name() resolution order."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("J.S. Bach", "Johann Sebastian Bach"),
            ("js bach", "Johann Sebastian Bach"),
            ("Bach, J.S.", "Johann Sebastian Bach"),
            ("beethoven", "Ludwig van Beethoven"),
            ("W.A. Mozart", "Wolfgang Amadeus Mozart"),
            ("Rachmaninov", "Sergei Rachmaninoff"),
        ],
    )
    def test_exact_variants(self, raw, expected):
        assert get_canonical_composer_name(raw) == expected

    def test_catalog_numbers_ignored(self):
        assert get_canonical_composer_name("Beethoven Op. 27") == "Ludwig van Beethoven"
        assert get_canonical_composer_name("Chopin Op. 10 No. 3") == "Frédéric Chopin"

    def test_last_name_match(self):
        assert get_canonical_composer_name("Herr Beethoven") == "Ludwig van Beethoven"
        assert get_canonical_composer_name("Franz Peter Schubert") == "Franz Schubert"

    def test_last_name_tail_of_table_key(self):
        assert get_canonical_composer_name("Mangoré") == "Agustín Barrios"

    def test_unknown_falls_back_to_formatter(self):
        assert get_canonical_composer_name("john smith") == "John Smith"
        assert get_canonical_composer_name("JANE DOE Op. 3") == "Jane Doe"

    @pytest.mark.parametrize("value", [None, "", "   ", "Op. 5"])
    def test_empty_results(self, value):
        assert get_canonical_composer_name(value) == ""

    def test_display_name_matches_canonical(self):
        assert get_display_composer_name("bach") == "Johann Sebastian Bach"


class TestIsSameComposer:
    def test_variants_match(self):
        assert is_same_composer("J.S. Bach", "Bach, Johann Sebastian")
        assert is_same_composer("Beethoven Op. 2", "ludwig van beethoven")

    def test_different_composers(self):
        assert not is_same_composer("Bach", "Mozart")

    def test_empty_never_matches(self):
        assert not is_same_composer("", "")
        assert not is_same_composer(None, "Bach")


class TestExtractCatalogInfo:
    def test_first_catalog_number_by_position(self):
        assert extract_catalog_info("Chopin Op. 10 No. 3") == CatalogInfo(
            composer="Frédéric Chopin", catalog_number="Op. 10"
        )

    def test_without_catalog_number(self):
        assert extract_catalog_info("Debussy") == CatalogInfo(composer="Claude Debussy")

    def test_empty(self):
        assert extract_catalog_info("  ") == CatalogInfo(composer="")


class TestIsKnownComposer:
    def test_known_variants(self):
        assert is_known_composer("beethoven")
        assert is_known_composer("J.S. Bach BWV 846")

    def test_unknown_names(self):
        assert not is_known_composer("moonlight sonata")
        assert not is_known_composer("")
        assert not is_known_composer(None)
