from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from capturelive.cli.main import app
from capturelive.core.archive.segment_archive import SegmentArchive
from capturelive.core_types import TranscriptSegment

runner = CliRunner()


def _write_updates(path: Path, updates: list) -> Path:
    path.write_text(json.dumps(updates), encoding="utf-8")
    return path


def _triggers(output: str) -> list:
    return [json.loads(line) for line in output.splitlines() if line.startswith("{")]


def test_replay_prints_triggers(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("CAPTURELIVE_ARCHIVE_PATH", raising=False)
    src = _write_updates(
        tmp_path / "stream.json",
        [
            {"text": "First chunk without punctuation", "start_time": 0, "end_time": 20},
            {"text": "Second chunk closes sentence.", "start_time": 20, "end_time": 35, "confidence": 0.9},
            {"text": "leftover", "start_time": 35, "end_time": 36, "is_final": False},
        ],
    )

    result = runner.invoke(app, ["replay", str(src)])
    assert result.exit_code == 0, result.output

    triggers = _triggers(result.output)
    assert len(triggers) == 2
    assert triggers[0]["reason"] == "sentence"
    assert triggers[0]["segments"] == 2
    assert triggers[0]["end_time"] == 35
    assert triggers[1]["reason"] == "manual"
    assert triggers[1]["text"] == "leftover"
    assert triggers[1]["context_text"] == "First chunk without punctuation Second chunk closes sentence."


def test_replay_no_flush_and_archive(tmp_path: Path) -> None:
    src = _write_updates(
        tmp_path / "stream.json",
        [{"text": f"w{i}", "start_time": i, "end_time": i + 1} for i in range(5)],
    )
    archive = tmp_path / "archive.json"

    result = runner.invoke(
        app,
        ["replay", str(src), "--no-flush", "--archive", str(archive), "--max-in-memory", "4"],
    )
    assert result.exit_code == 0, result.output
    assert _triggers(result.output) == []
    assert [s.text for s in SegmentArchive(archive).load()] == ["w0", "w1"]


def test_replay_rejects_bad_input(tmp_path: Path) -> None:
    src = tmp_path / "bad.json"
    src.write_text("{\"not\": \"a list\"}", encoding="utf-8")
    result = runner.invoke(app, ["replay", str(src)])
    assert result.exit_code != 0


def test_replay_rejects_bad_configuration(tmp_path: Path) -> None:
    src = _write_updates(tmp_path / "stream.json", [])
    result = runner.invoke(app, ["replay", str(src), "--max-in-memory", "0"])
    assert result.exit_code != 0


def test_inspect_archive(tmp_path: Path) -> None:
    path = tmp_path / "archive.json"
    SegmentArchive(path).append(
        [
            TranscriptSegment(text="a", start_time=1.5, end_time=3),
            TranscriptSegment(text="b", start_time=3, end_time=9.25),
        ]
    )
    result = runner.invoke(app, ["inspect-archive", str(path)])
    assert result.exit_code == 0
    assert "segments=2 range=1.50-9.25" in result.output

    assert "segments=0" in runner.invoke(app, ["inspect-archive", str(tmp_path / "missing.json")]).output


def test_inspect_archive_corrupt(tmp_path: Path) -> None:
    path = tmp_path / "archive.json"
    path.write_text("nope", encoding="utf-8")
    result = runner.invoke(app, ["inspect-archive", str(path)])
    assert result.exit_code == 1
