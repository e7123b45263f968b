from __future__ import annotations

import uuid
from typing import List, Literal, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from capturelive.core.text.sentences import count_words, ends_with_complete_sentence, split_sentences

TriggerReason = Literal["force", "sentence", "manual"]

HIGH_CONFIDENCE = 0.8


def _new_id() -> str:
    return uuid.uuid4().hex


def _clock_str(seconds: float) -> str:
    whole = int(seconds)
    return f"{whole // 60}:{whole % 60:02d}"


class TranscriptSegment(BaseModel):
    """
    A timestamped chunk of transcribed text.

    Only generated_artifact_ids may change after construction: downstream
    generators attach the ids of what they produced from this segment.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    text: str
    start_time: float
    end_time: float
    confidence: float = 1.0
    generated_artifact_ids: List[str] = Field(default_factory=list)

    @field_validator("confidence")
    @classmethod
    def _clamp_confidence(cls, v: float) -> float:
        return max(0.0, min(1.0, float(v)))

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time

    @property
    def word_count(self) -> int:
        return count_words(self.text)

    @property
    def is_high_confidence(self) -> bool:
        return self.confidence >= HIGH_CONFIDENCE

    @property
    def time_range_string(self) -> str:
        return f"{_clock_str(self.start_time)} - {_clock_str(self.end_time)}"

    @property
    def sentences(self) -> List[str]:
        # Unlike the context window scan, the trailing fragment is kept here.
        return split_sentences(self.text, keep_fragment=True)

    @property
    def ends_with_complete_sentence(self) -> bool:
        return ends_with_complete_sentence(self.text)

    def __hash__(self) -> int:
        # generated_artifact_ids is a mutable list; the id alone identifies a segment
        return hash(self.id)

    def attach_artifact(self, artifact_id: str) -> None:
        self.generated_artifact_ids.append(artifact_id)

    @classmethod
    def from_transcription(
        cls,
        text: str,
        start_time: float,
        end_time: float,
        confidence: float = 1.0,
    ) -> "TranscriptSegment":
        return cls(text=text.strip(), start_time=start_time, end_time=end_time, confidence=confidence)

    @classmethod
    def merge(cls, segments: Sequence["TranscriptSegment"]) -> Optional["TranscriptSegment"]:
        if not segments:
            return None
        first, last = segments[0], segments[-1]
        return cls(
            text=" ".join(s.text for s in segments),
            start_time=first.start_time,
            end_time=last.end_time,
            confidence=sum(s.confidence for s in segments) / len(segments),
            generated_artifact_ids=[a for s in segments for a in s.generated_artifact_ids],
        )


class TranscriptionUpdate(BaseModel):
    """A streaming update from the recognizer; is_final=False means partial."""

    text: str
    start_time: float
    end_time: float
    confidence: float = 1.0
    is_final: bool = True

    def to_segment(self) -> TranscriptSegment:
        return TranscriptSegment(
            text=self.text,
            start_time=self.start_time,
            end_time=self.end_time,
            confidence=self.confidence,
        )


class GenerationTrigger(BaseModel):
    """Snapshot handed to the generation consumer when the buffer fires."""

    model_config = ConfigDict(frozen=True)

    text: str
    segments: List[TranscriptSegment]
    context_text: str
    reason: TriggerReason
    fired_at: float


__all__ = [
    "TranscriptSegment",
    "TranscriptionUpdate",
    "GenerationTrigger",
    "TriggerReason",
    "HIGH_CONFIDENCE",
]
