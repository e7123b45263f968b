from __future__ import annotations

from typing import Optional, Sequence

from capturelive.core.contracts import BufferConfiguration
from capturelive.core.text.sentences import ends_with_complete_sentence
from capturelive.core_types import TranscriptSegment, TriggerReason


def elapsed_seconds(
    *,
    now: float,
    last_fired_at: Optional[float],
    pending: Sequence[TranscriptSegment],
) -> float:
    """
    Two time bases on purpose:
    - after a firing: clock time since that firing
    - before the first firing: content time spanned by the pending segments

    So the first chunk of a session is gated by how much audio it covers,
    not by how long the caller has been streaming.
    """
    if last_fired_at is not None:
        return now - last_fired_at
    if pending:
        return pending[-1].end_time - pending[0].start_time
    return 0.0


def decide(
    cfg: BufferConfiguration,
    *,
    elapsed: float,
    pending_text: str,
) -> Optional[TriggerReason]:
    if elapsed >= cfg.max_generation_interval_seconds:
        return "force"
    if elapsed >= cfg.min_generation_interval_seconds and ends_with_complete_sentence(pending_text):
        return "sentence"
    return None
