from __future__ import annotations

import re
from typing import List

SENTENCE_ENDERS = frozenset(".!?")

# \w also matches "_", which is not a letter or digit
_WORD_RE = re.compile(r"[^\W_]+")


def ends_with_complete_sentence(text: str) -> bool:
    trimmed = (text or "").strip()
    if not trimmed:
        return False
    return trimmed[-1] in SENTENCE_ENDERS


def split_sentences(text: str, *, keep_fragment: bool = False) -> List[str]:
    """
    Scan text left to right and cut after every '.', '!' or '?'.

    Each cut piece is stripped and kept when non-empty. Whatever follows the
    last terminator is an incomplete fragment: dropped unless keep_fragment.

    Examples:
        "One. Two" -> ["One."]
        "One. Two" (keep_fragment) -> ["One.", "Two"]
        "Wait... what?" -> ["Wait.", ".", ".", "what?"]
    """
    out: List[str] = []
    current: List[str] = []
    for ch in text or "":
        current.append(ch)
        if ch in SENTENCE_ENDERS:
            sentence = "".join(current).strip()
            if sentence:
                out.append(sentence)
            current = []

    if keep_fragment:
        rest = "".join(current).strip()
        if rest:
            out.append(rest)
    return out


def count_words(text: str) -> int:
    return len(_WORD_RE.findall(text or ""))
