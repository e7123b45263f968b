from capturelive.core.buffer.context_window import ContextWindow
from capturelive.core.buffer.live_buffer import BufferSnapshot, LiveTranscriptBuffer
from capturelive.core.buffer.policy import decide, elapsed_seconds

__all__ = [
    "BufferSnapshot",
    "ContextWindow",
    "LiveTranscriptBuffer",
    "decide",
    "elapsed_seconds",
]
