from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from capturelive.core.archive.segment_archive import SegmentArchive
from capturelive.core.buffer.context_window import ContextWindow
from capturelive.core.buffer.policy import decide, elapsed_seconds
from capturelive.core.contracts import BufferConfiguration
from capturelive.core_types import GenerationTrigger, TranscriptionUpdate, TranscriptSegment, TriggerReason
from capturelive.utils.logger import get_logger

logger = get_logger("capturelive.buffer")

Clock = Callable[[], float]


@dataclass(frozen=True)
class BufferSnapshot:
    full_transcript: str
    segment_count: int
    pending_segment_count: int
    pending_text_length: int
    context_window: str
    last_fired_at: Optional[float]


class LiveTranscriptBuffer:
    """
    Accumulates transcript segments and decides when to hand a chunk to the
    generation step.

    Every public method runs under one lock, so concurrent callers are
    serialized and never observe a half-applied ingestion. Archive I/O is
    done inside that lock.

    Nothing here raises while buffering. Archive failures are logged and
    dropped; the evicted segments are gone from memory either way.
    """

    def __init__(
        self,
        configuration: Optional[BufferConfiguration] = None,
        archive_path: Optional[str | Path] = None,
        *,
        clock: Clock = time.time,
    ) -> None:
        self.configuration = configuration or BufferConfiguration()
        self.archive = SegmentArchive(archive_path) if archive_path else None
        self._clock = clock
        self._lock = threading.Lock()

        self._all: List[TranscriptSegment] = []
        self._pending: List[TranscriptSegment] = []
        self._pending_text = ""
        self._last_fired_at: Optional[float] = None
        self._context = ContextWindow(self.configuration.context_window_sentences)

        self.archived_segment_count = 0
        self.archive_failure_count = 0

    # -------------------------
    # Ingestion
    # -------------------------

    def add_segment(self, segment: TranscriptSegment) -> Optional[GenerationTrigger]:
        with self._lock:
            self._all.append(segment)
            self._pending.append(segment)
            self._pending_text = (self._pending_text + " " + segment.text).strip()

            trigger = self._check_trigger(self._clock())
            self._spill_if_needed()
            return trigger

    def add_transcription(self, update: TranscriptionUpdate) -> Optional[GenerationTrigger]:
        # Partial updates are not held back; they can fire like final text.
        if not update.is_final:
            logger.debug("BUFFER_PARTIAL_UPDATE start=%.2f end=%.2f", update.start_time, update.end_time)
        return self.add_segment(update.to_segment())

    def force_generation(self) -> Optional[GenerationTrigger]:
        with self._lock:
            if not self._pending:
                return None
            return self._fire(self._clock(), "manual")

    # -------------------------
    # Accessors
    # -------------------------

    @property
    def segments(self) -> List[TranscriptSegment]:
        with self._lock:
            return list(self._all)

    def recent_segments(self, count: int) -> List[TranscriptSegment]:
        if count <= 0:
            return []
        with self._lock:
            return self._all[-count:]

    @property
    def full_transcript(self) -> str:
        with self._lock:
            return " ".join(s.text for s in self._all)

    @property
    def segment_count(self) -> int:
        with self._lock:
            return len(self._all)

    @property
    def pending_segment_count(self) -> int:
        with self._lock:
            return len(self._pending)

    @property
    def pending_text_length(self) -> int:
        with self._lock:
            return len(self._pending_text)

    @property
    def context_window(self) -> str:
        with self._lock:
            return self._context.text

    @property
    def last_fired_at(self) -> Optional[float]:
        with self._lock:
            return self._last_fired_at

    def snapshot(self) -> BufferSnapshot:
        """All summary accessors read under a single lock acquisition."""
        with self._lock:
            return BufferSnapshot(
                full_transcript=" ".join(s.text for s in self._all),
                segment_count=len(self._all),
                pending_segment_count=len(self._pending),
                pending_text_length=len(self._pending_text),
                context_window=self._context.text,
                last_fired_at=self._last_fired_at,
            )

    def clear(self) -> None:
        """Reset all in-memory state. The archive file is left alone."""
        with self._lock:
            self._all.clear()
            self._pending.clear()
            self._pending_text = ""
            self._context.clear()
            self._last_fired_at = None

    # -------------------------
    # Internals (lock held)
    # -------------------------

    def _check_trigger(self, now: float) -> Optional[GenerationTrigger]:
        elapsed = elapsed_seconds(now=now, last_fired_at=self._last_fired_at, pending=self._pending)
        reason = decide(self.configuration, elapsed=elapsed, pending_text=self._pending_text)
        if reason is None:
            return None
        return self._fire(now, reason)

    def _fire(self, now: float, reason: TriggerReason) -> GenerationTrigger:
        trigger = GenerationTrigger(
            text=self._pending_text,
            segments=list(self._pending),
            context_text=self._context.text,
            reason=reason,
            fired_at=now,
        )
        self._context.absorb(self._pending_text)

        self._pending.clear()
        self._pending_text = ""
        self._last_fired_at = now

        logger.info(
            "BUFFER_TRIGGER reason=%s segments=%d chars=%d context_sentences=%d",
            reason,
            len(trigger.segments),
            len(trigger.text),
            len(self._context),
        )
        return trigger

    def _spill_if_needed(self) -> None:
        ceiling = self.configuration.max_in_memory_segments
        if len(self._all) <= ceiling or self.archive is None:
            return

        n = self.configuration.spill_count
        evicted = self._all[:n]
        del self._all[:n]

        result = self.archive.try_append(evicted)
        if result.ok:
            self.archived_segment_count += result.appended
            logger.info("BUFFER_SPILLOVER evicted=%d archived_total=%d", n, result.total)
        else:
            self.archive_failure_count += 1
            logger.warning("BUFFER_SPILLOVER evicted=%d lost=%d (archive write failed)", n, n)
