# src/essaysync/sentences.py
from __future__ import annotations

import re
from functools import lru_cache
from typing import List, Optional

from . import config as CFG
from .models import Sentence

# a run of terminal punctuation is one boundary ("Really?!", "Wait...")
_BOUNDARY = re.compile(r"[.!?]+")

# (name, resting background, active background)
PALETTE: tuple[tuple[str, str, str], ...] = (
    ("blue",   "#bfdbfe", "#3b82f6"),
    ("green",  "#bbf7d0", "#22c55e"),
    ("yellow", "#fef08a", "#eab308"),
    ("purple", "#e9d5ff", "#a855f7"),
    ("pink",   "#fbcfe8", "#ec4899"),
    ("indigo", "#c7d2fe", "#6366f1"),
    ("orange", "#fed7aa", "#f97316"),
    ("teal",   "#99f6e4", "#14b8a6"),
)


def _make(text: str, index: int) -> Sentence:
    return Sentence(id=f"sentence-{index}", text=text, index=index)


@lru_cache(maxsize=CFG.SPLIT_CACHE_SIZE)
def _split(text: str) -> tuple[Sentence, ...]:
    out: List[Sentence] = []
    last = 0
    for m in _BOUNDARY.finditer(text):
        chunk = text[last:m.end()].strip()
        if chunk:
            out.append(_make(chunk, len(out)))
        last = m.end()

    tail = text[last:].strip()
    if tail:
        out.append(_make(tail, len(out)))

    if not out and text.strip():
        out.append(_make(text.strip(), 0))
    return tuple(out)


def split_sentences(text: Optional[str]) -> List[Sentence]:
    """
    Split free text into ordered sentences.

    Each boundary is the end of a run of ``.``, ``!`` or ``?``; the sentence is
    the trimmed span since the previous boundary, punctuation included. A
    trailing fragment without punctuation becomes the last sentence. Blank
    spans are skipped and do not consume an index. ``None``, empty and
    whitespace-only input give ``[]``.
    """
    if not text or not isinstance(text, str):
        return []
    return list(_split(text))


def palette_name(index: int) -> str:
    return PALETTE[index % CFG.SENTENCE_PALETTE_SIZE][0]


def sentence_color(index: int) -> str:
    return PALETTE[index % CFG.SENTENCE_PALETTE_SIZE][1]


def active_sentence_color(index: int) -> str:
    return PALETTE[index % CFG.SENTENCE_PALETTE_SIZE][2]
