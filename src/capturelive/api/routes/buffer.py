from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query, Request

from capturelive.api.errors import BufferUnavailableError
from capturelive.api.schemas.buffer import AddSegmentRequest, TranscriptResponse, TriggerResponse
from capturelive.core.buffer import LiveTranscriptBuffer
from capturelive.core_types import TranscriptionUpdate, TranscriptSegment

router = APIRouter(prefix="/v1", tags=["buffer"])


def get_buffer(request: Request) -> LiveTranscriptBuffer:
    buffer = getattr(request.app.state, "buffer", None)
    if buffer is None:
        raise BufferUnavailableError()
    return buffer


# Sync handlers: FastAPI runs them in its threadpool and the buffer lock
# serializes them.


@router.post("/segments", response_model=TriggerResponse)
def add_segment(req: AddSegmentRequest, buffer: LiveTranscriptBuffer = Depends(get_buffer)) -> TriggerResponse:
    fields = req.model_dump(exclude_none=True)
    segment = TranscriptSegment(**fields)
    return TriggerResponse.from_trigger(buffer.add_segment(segment))


@router.post("/transcriptions", response_model=TriggerResponse)
def add_transcription(
    update: TranscriptionUpdate, buffer: LiveTranscriptBuffer = Depends(get_buffer)
) -> TriggerResponse:
    return TriggerResponse.from_trigger(buffer.add_transcription(update))


@router.post("/generate", response_model=TriggerResponse)
def force_generation(buffer: LiveTranscriptBuffer = Depends(get_buffer)) -> TriggerResponse:
    return TriggerResponse.from_trigger(buffer.force_generation())


@router.get("/transcript", response_model=TranscriptResponse)
def transcript(buffer: LiveTranscriptBuffer = Depends(get_buffer)) -> TranscriptResponse:
    snap = buffer.snapshot()
    return TranscriptResponse(
        full_transcript=snap.full_transcript,
        segment_count=snap.segment_count,
        pending_segment_count=snap.pending_segment_count,
        pending_text_length=snap.pending_text_length,
        context_window=snap.context_window,
        last_fired_at=snap.last_fired_at,
    )


@router.get("/segments/recent", response_model=List[TranscriptSegment])
def recent_segments(
    count: int = Query(10, ge=0, description="How many of the newest in-memory segments to return"),
    buffer: LiveTranscriptBuffer = Depends(get_buffer),
) -> List[TranscriptSegment]:
    return buffer.recent_segments(count)


@router.delete("/buffer")
def clear_buffer(buffer: LiveTranscriptBuffer = Depends(get_buffer)) -> dict:
    buffer.clear()
    return {"ok": True}
