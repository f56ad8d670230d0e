"""Unit tests for stored score id migrations."""

from __future__ import annotations

import copy

from scoreid.core.migrations import (
    MigrationStats,
    extract_corrupted_canonical_id,
    normalize_logbook_records,
    normalize_score_ids_in_object,
    repair_canonical_score_ids,
)


def _legacy_records() -> list[dict]:
    return [
        {
            "id": "e1",
            "scoreId": "Beethoven - Moonlight Sonata",
            "pieces": [{"id": "old-id", "title": "Moonlight Sonata", "composer": "Beethoven"}],
        },
        {"id": "e2", "scoreTitle": "Für Elise", "scoreComposer": "Beethoven", "pieces": []},
        {"id": "e3", "pieces": [{"title": "Clair de lune", "composer": None}]},
    ]


class TestNormalizeLogbookRecords:
    """Test normalize_logbook_records() rewrites ids and counts changes."""

    def test_rewrites_piece_ids_and_score_ids(self):
        records, stats = normalize_logbook_records(_legacy_records())
        assert records[0]["pieces"][0]["id"] == "moonlight sonata-beethoven"
        assert records[0]["scoreId"] == "moonlight sonata-beethoven"
        assert records[1]["scoreId"] == "für elise-beethoven"
        assert records[2]["pieces"][0]["id"] == "clair de lune"
        assert stats == MigrationStats(entries_normalized=3, pieces_normalized=2, score_ids_normalized=2)

    def test_idempotent(self):
        once, _ = normalize_logbook_records(_legacy_records())
        twice, stats = normalize_logbook_records(once)
        assert twice == once
        assert stats == MigrationStats()

    def test_input_not_mutated(self):
        records = _legacy_records()
        snapshot = copy.deepcopy(records)
        normalize_logbook_records(records)
        assert records == snapshot

    def test_keeps_unknown_fields(self):
        records, _ = normalize_logbook_records([{"id": "e1", "mood": "good", "pieces": [{"title": "A", "x": 1}]}])
        assert records[0]["mood"] == "good"
        assert records[0]["pieces"][0] == {"title": "A", "x": 1, "id": "a"}

    def test_catalog_score_ids_untouched(self):
        records, stats = normalize_logbook_records([{"id": "e1", "scoreId": "score_abc123"}])
        assert records[0]["scoreId"] == "score_abc123"
        assert stats.score_ids_normalized == 0


class TestNormalizeScoreIdsInObject:
    def test_nested_structures(self):
        data = {
            "goals": [{"scoreId": "Moonlight Sonata||Beethoven", "target": 10}],
            "session": {"pieces": [{"title": "Für Elise", "composer": "Beethoven"}, "not-a-piece"]},
            "count": 3,
        }
        normalized = normalize_score_ids_in_object(data)
        assert normalized == {
            "goals": [{"scoreId": "moonlight sonata-beethoven", "target": 10}],
            "session": {
                "pieces": [{"title": "Für Elise", "composer": "Beethoven", "id": "für elise-beethoven"}, "not-a-piece"]
            },
            "count": 3,
        }

    def test_scalars_pass_through(self):
        assert normalize_score_ids_in_object(None) is None
        assert normalize_score_ids_in_object("scoreId") == "scoreId"


class TestRepairCanonicalScoreIds:
    """Test repair_canonical_score_ids() strips the -unknown corruption."""

    def test_extract(self):
        assert extract_corrupted_canonical_id("score_abc123-unknown") == "score_abc123"
        assert extract_corrupted_canonical_id("score_abc-123-unknown") == "score_abc-123"
        assert extract_corrupted_canonical_id("moonlight sonata-unknown") is None
        assert extract_corrupted_canonical_id("score_abc123") is None
        assert extract_corrupted_canonical_id(None) is None

    def test_repairs_all_id_fields(self):
        records = [
            {
                "id": "e1",
                "scoreId": "score_abc123-unknown",
                "pieces": [{"id": "score_def-unknown", "title": "X"}, {"id": "prelude-bach", "title": "Prelude"}],
            },
            {"score_id": "score_xyz-unknown", "title": "Y"},
        ]
        repaired, count = repair_canonical_score_ids(records)
        assert count == 3
        assert repaired[0]["scoreId"] == "score_abc123"
        assert [piece["id"] for piece in repaired[0]["pieces"]] == ["score_def", "prelude-bach"]
        assert repaired[1]["score_id"] == "score_xyz"
        assert records[0]["scoreId"] == "score_abc123-unknown"

    def test_idempotent(self):
        once, _ = repair_canonical_score_ids([{"scoreId": "score_abc-unknown"}])
        twice, count = repair_canonical_score_ids(once)
        assert twice == once
        assert count == 0
