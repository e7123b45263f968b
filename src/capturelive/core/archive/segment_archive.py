from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import TypeAdapter

from capturelive.core_types import TranscriptSegment
from capturelive.utils.io import atomic_write_json, read_json
from capturelive.utils.logger import get_logger

logger = get_logger("capturelive.archive")

_SEGMENTS = TypeAdapter(List[TranscriptSegment])


@dataclass(frozen=True)
class ArchiveResult:
    ok: bool
    appended: int
    total: int = 0
    error: Optional[str] = None


class SegmentArchive:
    """
    Append-only JSON archive of evicted segments.

    The file holds one JSON array. Each append is a full
    read -> decode -> append -> encode -> atomic replace cycle, so a reader
    always sees either the old or the new array.

    Single writer only: concurrent writers to the same path lose updates.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> List[TranscriptSegment]:
        """Read back every archived segment, oldest first. Errors propagate."""
        if not self.path.exists():
            return []
        return _SEGMENTS.validate_python(read_json(self.path))

    def append(self, segments: Sequence[TranscriptSegment]) -> List[TranscriptSegment]:
        archived = self.load()
        archived.extend(segments)
        atomic_write_json(self.path, _SEGMENTS.dump_python(archived, mode="json"))
        return archived

    def try_append(self, segments: Sequence[TranscriptSegment]) -> ArchiveResult:
        """
        Best-effort append for the live path: never raises.
        A corrupt archive or I/O failure leaves the file as it was.
        """
        try:
            archived = self.append(segments)
        except Exception as exc:
            logger.warning(
                "ARCHIVE_FAILED path=%s segments=%d err=%s: %s",
                self.path,
                len(segments),
                type(exc).__name__,
                exc,
            )
            return ArchiveResult(ok=False, appended=0, error=f"{type(exc).__name__}: {exc}")
        return ArchiveResult(ok=True, appended=len(segments), total=len(archived))
