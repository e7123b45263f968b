from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import TypeAdapter, ValidationError

from capturelive.config import load_settings
from capturelive.core.archive.segment_archive import SegmentArchive
from capturelive.core.buffer import LiveTranscriptBuffer
from capturelive.core.contracts import BufferConfiguration
from capturelive.core_types import GenerationTrigger, TranscriptionUpdate
from capturelive.utils.io import read_json
from capturelive.utils.logger import configure_logging, parse_level

app = typer.Typer(help="Live transcript buffering: replay recorded streams, inspect archives")

_UPDATES = TypeAdapter(List[TranscriptionUpdate])


def _load_updates(path: Path) -> List[TranscriptionUpdate]:
    try:
        return _UPDATES.validate_python(read_json(path))
    except (json.JSONDecodeError, ValidationError) as exc:
        raise typer.BadParameter(f"{path} is not a JSON array of transcription updates: {exc}") from exc


def _emit(trigger: GenerationTrigger) -> None:
    payload = {
        "reason": trigger.reason,
        "text": trigger.text,
        "context_text": trigger.context_text,
        "segments": len(trigger.segments),
        "start_time": trigger.segments[0].start_time,
        "end_time": trigger.segments[-1].end_time,
    }
    typer.echo(json.dumps(payload, ensure_ascii=False))


@app.command()
def replay(
    input: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON array of transcription updates"),
    archive: Optional[Path] = typer.Option(None, help="Archive file for spilled segments (default: env)"),
    min_interval: Optional[float] = typer.Option(None, help="Minimum seconds between generations"),
    max_interval: Optional[float] = typer.Option(None, help="Maximum seconds before a forced generation"),
    context_sentences: Optional[int] = typer.Option(None, help="Sentences carried as context"),
    max_in_memory: Optional[int] = typer.Option(None, help="In-memory segment ceiling before spillover"),
    flush: bool = typer.Option(True, help="Force a final generation for leftover pending text"),
):
    """Feed a recorded stream through the buffer and print each trigger as a JSON line."""
    settings = load_settings()
    configure_logging(console_level=parse_level(settings.log_level), log_path=(settings.log_path or None))

    base = settings.to_configuration()
    try:
        cfg = BufferConfiguration(
            min_generation_interval_seconds=base.min_generation_interval_seconds if min_interval is None else min_interval,
            max_generation_interval_seconds=base.max_generation_interval_seconds if max_interval is None else max_interval,
            context_window_sentences=base.context_window_sentences if context_sentences is None else context_sentences,
            max_in_memory_segments=base.max_in_memory_segments if max_in_memory is None else max_in_memory,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    buffer = LiveTranscriptBuffer(cfg, archive_path=archive or settings.archive_path_or_none())

    for update in _load_updates(input):
        trigger = buffer.add_transcription(update)
        if trigger is not None:
            _emit(trigger)

    if flush:
        trigger = buffer.force_generation()
        if trigger is not None:
            _emit(trigger)


@app.command("inspect-archive")
def inspect_archive(
    path: Path = typer.Argument(..., help="Archive JSON file"),
):
    """Print how many segments an archive holds and the time range they cover."""
    try:
        segments = SegmentArchive(path).load()
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        typer.echo(f"cannot read archive {path}: {exc}", err=True)
        raise typer.Exit(code=1)

    if not segments:
        typer.echo("segments=0")
        return
    typer.echo(f"segments={len(segments)} range={segments[0].start_time:.2f}-{segments[-1].end_time:.2f}")


if __name__ == "__main__":
    app()
