"""Integration tests for CLI JSON and human output."""

from __future__ import annotations

from argparse import Namespace
import json
from pathlib import Path

from scoreid.commands.composer import run_composer
from scoreid.commands.dedupe import run_dedupe_logbook, run_dedupe_repertoire
from scoreid.commands.migrate import run_migrate
from scoreid.commands.same import run_same
from scoreid.commands.score_id import run_parse, run_score_id
from scoreid.commands.similar import run_similar
from scoreid.settings import Settings


def _capture_output() -> tuple[list[str], callable]:
    lines: list[str] = []

    def sink(value: str) -> None:
        lines.append(value)

    return lines, sink


def _entry(entry_id: str, **overrides) -> dict:
    data = {
        "id": entry_id,
        "timestamp": "2025-03-01T10:00:00.000Z",
        "duration": 1800,
        "pieces": [{"title": "Moonlight Sonata", "composer": "Beethoven"}],
        "type": "practice",
        "instrument": "piano",
        "createdAt": "2025-03-01T10:30:00.000Z",
        "updatedAt": "2025-03-01T10:30:00.000Z",
    }
    data.update(overrides)
    return data


def _item(score_id: str, title: str, composer: str | None, **overrides) -> dict:
    data = {"scoreId": score_id, "title": title, "composer": composer}
    data.update(overrides)
    return data


def test_score_id_json_envelope() -> None:
    lines, sink = _capture_output()
    args = Namespace(title="Sonatina Op. 36 No. 1 - Movement 1", composer="Clementi", json=True)
    assert run_score_id(args, output_sink=sink) == 0
    payload = json.loads(lines[0])
    assert payload["schema_version"] == "v1"
    assert payload["command"] == "score-id"
    assert payload["data"]["score_id"] == "sonatina op. 36 no. 1 - movement 1||clementi"


def test_score_id_output_is_deterministic() -> None:
    outputs = []
    for _ in range(2):
        lines, sink = _capture_output()
        run_score_id(Namespace(title="Für Elise", composer="Beethoven", json=True), output_sink=sink)
        outputs.append(lines[0])
    assert outputs[0] == outputs[1]


def test_parse_human_output() -> None:
    lines, sink = _capture_output()
    run_parse(Namespace(score_id="sonata op. 1-beethoven", json=False), output_sink=sink)
    assert lines == ["title: sonata op. 1", "composer: beethoven"]


def test_composer_reports_catalog_number() -> None:
    lines, sink = _capture_output()
    run_composer(Namespace(name="Chopin Op. 10 No. 3", json=True), output_sink=sink)
    data = json.loads(lines[0])["data"]
    assert data == {
        "input": "Chopin Op. 10 No. 3",
        "canonical": "Frédéric Chopin",
        "catalog_number": "Op. 10",
        "known": True,
    }


def test_similar_uses_settings_threshold(write_json) -> None:
    path = write_json(
        "repertoire.json",
        [
            _item("moonlight sonata-beethoven", "Moonlight Sonata", "Beethoven"),
            _item("für elise-beethoven", "Für Elise", "Beethoven"),
            _item("moonlight sonata", "Moonlight Sonata", None),
        ],
    )
    lines, sink = _capture_output()
    args = Namespace(title="Moonlight Sonata", composer="Beethoven", repertoire=path, threshold=None, json=True)
    run_similar(args, settings=Settings(similarity_threshold=0.8), output_sink=sink)
    data = json.loads(lines[0])["data"]
    assert data["threshold"] == 0.8
    assert [match["scoreId"] for match in data["matches"]] == ["moonlight sonata-beethoven"]


def test_same_uses_settings_fuzzy_threshold() -> None:
    args = Namespace(first="moonlight sonata-beethoven", second="moonlight sonatas-beethoven", threshold=None, json=True)

    lines, sink = _capture_output()
    run_same(args, settings=Settings(), output_sink=sink)
    data = json.loads(lines[0])["data"]
    assert data["threshold"] == 0.9
    assert data["same"] is False
    assert data["fuzzy_same"] is True

    lines, sink = _capture_output()
    run_same(args, settings=Settings(fuzzy_threshold=0.99), output_sink=sink)
    data = json.loads(lines[0])["data"]
    assert data["threshold"] == 0.99
    assert data["fuzzy_same"] is False


def test_same_threshold_flag_overrides_settings() -> None:
    lines, sink = _capture_output()
    args = Namespace(first="moonlight sonata-beethoven", second="moonlight sonatas-beethoven", threshold=0.5, json=True)
    run_same(args, settings=Settings(fuzzy_threshold=0.99), output_sink=sink)
    assert json.loads(lines[0])["data"]["fuzzy_same"] is True


def test_same_human_output() -> None:
    lines, sink = _capture_output()
    run_same(Namespace(first="piece||composer", second="piece-composer", threshold=None, json=False), output_sink=sink)
    assert lines == ["same piece"]

    lines, sink = _capture_output()
    args = Namespace(first="für elise-beethoven", second="moonlight sonata-beethoven", threshold=None, json=False)
    run_same(args, output_sink=sink)
    assert lines == ["different pieces"]


def test_dedupe_logbook_writes_output(write_json, tmp_path: Path) -> None:
    path = write_json(
        "logbook.json",
        [
            _entry("a"),
            _entry("b", notes="worked on voicing"),
            _entry("c", timestamp="2025-03-02T10:00:00.000Z"),
        ],
    )
    output = tmp_path / "clean.json"
    lines, sink = _capture_output()
    args = Namespace(file=path, output=output, json=True)
    assert run_dedupe_logbook(args, output_sink=sink) == 0

    data = json.loads(lines[0])["data"]
    assert data["duplicates_found"] == 1
    assert data["duplicates_removed"] == 1
    assert data["entries_preserved"] == 2
    assert data["duplicates"] == [
        {"entryId": "b", "duplicateOf": "a", "confidence": 0.95, "reason": "Identical content signature"}
    ]
    assert [record["id"] for record in json.loads(output.read_text())] == ["b", "c"]


def test_dedupe_logbook_human_summary(write_json) -> None:
    path = write_json("logbook.json", [_entry("a")])
    lines, sink = _capture_output()
    run_dedupe_logbook(Namespace(file=path, output=None, json=False), output_sink=sink)
    assert lines == ["dedupe-logbook: found=0 removed=0 preserved=1"]


def test_dedupe_repertoire_merges(write_json, tmp_path: Path) -> None:
    path = write_json(
        "repertoire.json",
        [
            _item("moonlight sonata-beethoven", "Moonlight Sonata", "Beethoven", practiceCount=3),
            _item("moonlight sonata||beethoven", "Moonlight Sonata", "Beethoven", practiceCount=5),
        ],
    )
    output = tmp_path / "clean.json"
    lines, sink = _capture_output()
    run_dedupe_repertoire(Namespace(file=path, output=output, json=False), output_sink=sink)
    assert lines == ["dedupe-repertoire: items=2 cleaned=1 merged=1"]
    saved = json.loads(output.read_text())
    assert len(saved) == 1
    assert saved[0]["practiceCount"] == 8
    assert saved[0]["scoreId"] == "moonlight sonata-beethoven"


def test_migrate_repairs_and_normalizes(write_json, tmp_path: Path) -> None:
    path = write_json(
        "logbook.json",
        [
            {"id": "e1", "scoreId": "score_abc-unknown", "pieces": []},
            {"id": "e2", "scoreId": "Beethoven - Für Elise", "pieces": [{"title": "Für Elise", "composer": "Beethoven"}]},
        ],
    )
    output = tmp_path / "migrated.json"
    lines, sink = _capture_output()
    run_migrate(Namespace(file=path, output=output, json=True), output_sink=sink)
    data = json.loads(lines[0])["data"]
    assert data["repaired"] == 1
    assert data["entries_normalized"] == 1
    saved = json.loads(output.read_text())
    assert saved[0]["scoreId"] == "score_abc"
    assert saved[1]["scoreId"] == "für elise-beethoven"
    assert saved[1]["pieces"][0]["id"] == "für elise-beethoven"
