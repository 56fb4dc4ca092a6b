# src/essaysync/models.py
"""
Data models for side-by-side essay comparison.

- Sentence: one sentence of a paragraph, identified by its position.
- Role: which structural slot a paragraph fills (intro, body N, conclusion).
- Handle: (side, role, sentence index), the unit that gets highlighted.
- Paragraph / ParagraphPair: paragraph text with its role attached up front.
- Draft: an unsent essay kept in draft storage.

The classes hold no business logic beyond naming their own identifiers, so the
splitter, the aligner and the renderers agree on one id scheme.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from . import config as CFG


@dataclass(frozen=True, slots=True)
class Sentence:
    """
    One sentence inside a paragraph.

    Attributes
    ----------
    id : str
        ``"sentence-<index>"``. Derived from ``index`` only, so two renders of
        the same text produce the same ids.
    text : str
        Trimmed sentence text, including its terminal punctuation run.
    index : int
        Zero-based, contiguous position within the paragraph.
    """
    id: str
    text: str
    index: int


@dataclass(frozen=True, slots=True)
class Role:
    kind: str                       # "intro" | "body" | "conclusion" | "unknown"
    number: Optional[int] = None    # body paragraphs only, 1-based

    def __str__(self) -> str:
        if self.kind == "body" and self.number is not None:
            return f"body{self.number}"
        return self.kind

    @property
    def known(self) -> bool:
        return self.kind != "unknown"

    @property
    def slug(self) -> str:
        """Form used inside container ids: ``intro``, ``body-2``, ``conclusion``."""
        if self.kind == "body" and self.number is not None:
            return f"body-{self.number}"
        return self.kind


INTRO = Role("intro")
CONCLUSION = Role("conclusion")
UNKNOWN = Role("unknown")


def body(number: Optional[int]) -> Role:
    return Role("body", number)


@dataclass(frozen=True, slots=True)
class Handle:
    """A sentence position on one panel: side + paragraph role + sentence index."""
    side: str
    role: Role
    index: int

    @property
    def container_id(self) -> str:
        return f"{self.side}-{self.role.slug}"

    @property
    def element_id(self) -> str:
        return f"{self.container_id}-sentence-{self.index}"

    def opposite(self) -> "Handle":
        side = CFG.IMPROVED if self.side == CFG.ORIGINAL else CFG.ORIGINAL
        return Handle(side=side, role=self.role, index=self.index)


@dataclass(frozen=True, slots=True)
class Paragraph:
    side: str
    role: Role
    text: str

    @property
    def container_id(self) -> str:
        return f"{self.side}-{self.role.slug}"

    @property
    def sentences(self) -> List[Sentence]:
        from .sentences import split_sentences
        return split_sentences(self.text)

    def handle(self, index: int) -> Handle:
        return Handle(side=self.side, role=self.role, index=index)

    def handles(self) -> List[Handle]:
        return [self.handle(s.index) for s in self.sentences]


@dataclass(frozen=True, slots=True)
class ParagraphPair:
    id: str                 # "paragraph-<i>"
    role: Role
    original: str
    improved: str
    color: int              # palette slot, i % PARAGRAPH_PALETTE_SIZE

    def paragraphs(self) -> tuple[Paragraph, Paragraph]:
        return (
            Paragraph(CFG.ORIGINAL, self.role, self.original),
            Paragraph(CFG.IMPROVED, self.role, self.improved),
        )


@dataclass(frozen=True, slots=True)
class Draft:
    """An essay the user has not submitted yet. ``timestamp`` is epoch seconds."""
    essay: str
    topic_source: str       # "generated" | "custom"
    custom_topic: str
    topic: str
    selected_topic_id: str
    timestamp: float
