from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from capturelive.core_types import GenerationTrigger


class AddSegmentRequest(BaseModel):
    id: Optional[str] = Field(None, description="Opaque segment id; generated when omitted")
    text: str = Field(..., description="Transcribed text (may be empty)")
    start_time: float = Field(..., description="Segment start, seconds")
    end_time: float = Field(..., description="Segment end, seconds")
    confidence: float = Field(1.0, description="Recognizer confidence; clamped to [0, 1]")


class TriggerResponse(BaseModel):
    triggered: bool
    trigger: Optional[GenerationTrigger] = None

    @classmethod
    def from_trigger(cls, trigger: Optional[GenerationTrigger]) -> "TriggerResponse":
        return cls(triggered=trigger is not None, trigger=trigger)


class TranscriptResponse(BaseModel):
    full_transcript: str
    segment_count: int
    pending_segment_count: int
    pending_text_length: int
    context_window: str
    last_fired_at: Optional[float] = None
