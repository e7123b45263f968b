from __future__ import annotations

from pathlib import Path

from capturelive.config import load_settings


def test_settings_defaults(monkeypatch) -> None:
    for name in (
        "CAPTURELIVE_MIN_INTERVAL_SEC",
        "CAPTURELIVE_MAX_INTERVAL_SEC",
        "CAPTURELIVE_CONTEXT_SENTENCES",
        "CAPTURELIVE_MAX_IN_MEMORY_SEGMENTS",
        "CAPTURELIVE_ARCHIVE_PATH",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()
    cfg = settings.to_configuration()
    assert cfg.min_generation_interval_seconds == 30.0
    assert cfg.max_generation_interval_seconds == 60.0
    assert cfg.context_window_sentences == 3
    assert cfg.max_in_memory_segments == 100
    assert settings.archive_path_or_none() is None


def test_settings_from_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CAPTURELIVE_MIN_INTERVAL_SEC", "5")
    monkeypatch.setenv("CAPTURELIVE_MAX_INTERVAL_SEC", "12.5")
    monkeypatch.setenv("CAPTURELIVE_CONTEXT_SENTENCES", "7")
    monkeypatch.setenv("CAPTURELIVE_MAX_IN_MEMORY_SEGMENTS", "40")
    monkeypatch.setenv("CAPTURELIVE_ARCHIVE_PATH", str(tmp_path / "a.json"))

    settings = load_settings()
    cfg = settings.to_configuration()
    assert cfg.min_generation_interval_seconds == 5.0
    assert cfg.max_generation_interval_seconds == 12.5
    assert cfg.context_window_sentences == 7
    assert cfg.max_in_memory_segments == 40
    assert settings.archive_path_or_none() == tmp_path / "a.json"
