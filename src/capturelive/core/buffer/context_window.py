from __future__ import annotations

from collections import deque
from typing import Deque, List

from capturelive.core.text.sentences import split_sentences


class ContextWindow:
    """Most recent complete sentences, bounded to max_sentences."""

    def __init__(self, max_sentences: int) -> None:
        self.max_sentences = max_sentences
        self._sentences: Deque[str] = deque(maxlen=max_sentences)

    def absorb(self, text: str) -> List[str]:
        """Append the complete sentences of text; returns what was detected."""
        found = split_sentences(text)
        self._sentences.extend(found)
        return found

    @property
    def sentences(self) -> List[str]:
        return list(self._sentences)

    @property
    def text(self) -> str:
        return " ".join(self._sentences)

    def clear(self) -> None:
        self._sentences.clear()

    def __len__(self) -> int:
        return len(self._sentences)
