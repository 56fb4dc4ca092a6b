# src/essaysync/engine.py
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Union

from . import config as CFG
from .align import align_paragraphs, parse_handle
from .criteria import criteria_rows
from .highlight import HighlightChannel
from .models import Handle, Paragraph, ParagraphPair
from .sentences import active_sentence_color, palette_name, sentence_color
from .submission import ImprovedVersion, Submission, format_improved_text

log = logging.getLogger(__name__)


def _formatted(version: ImprovedVersion) -> ImprovedVersion:
    return ImprovedVersion(
        band=version.band,
        introduction=format_improved_text(version.introduction),
        body=[format_improved_text(p) for p in version.body],
        conclusion=format_improved_text(version.conclusion),
    )


class Comparison:
    """
    Side-by-side view of one submission against one improved band version.

    Owns the panel pair's HighlightChannel; renderers (web page, desktop
    viewer, CLI) read paragraphs and highlight state from here and report
    pointer/focus events through hover() and leave().

    Public API:
      * select_band(band):   switch the improved panel, clears the highlight
      * hover(handle | id):  make a sentence active (last writer wins)
      * leave():             clear the active sentence
      * is_highlighted(h):   active sentence or its counterpart
      * to_dict():           JSON-ready snapshot of both panels
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        submission: Submission,
        *,
        band: Optional[int] = None,
        channel: Optional[HighlightChannel] = None,
    ) -> None:
        self.submission = submission
        self.channel = channel or HighlightChannel()
        self.band: Optional[int] = None
        self.pairs: List[ParagraphPair] = []
        self.select_band(band if band is not None else self._default_band())

    @classmethod
    def from_json(cls, text: str, **kwargs: Any) -> "Comparison":
        return cls(Submission.from_dict(json.loads(text)), **kwargs)

    @property
    def bands(self) -> List[int]:
        return sorted(self.submission.improved_versions)

    def _default_band(self) -> Optional[int]:
        if CFG.DEFAULT_BAND in self.submission.improved_versions:
            return CFG.DEFAULT_BAND
        return max(self.bands) if self.bands else None

    # /* ~~~ Rebuild the paragraph pairs for another improved version ~~~ */
    def select_band(self, band: Optional[int]) -> None:
        if band is None:
            version = ImprovedVersion(band=0, introduction="", body=[], conclusion="")
            log.info("Submission %s has no improved versions yet", self.submission.id or "?")
        elif band in self.submission.improved_versions:
            version = _formatted(self.submission.improved_versions[band])
        else:
            raise ValueError(f"band {band} not available; choose one of {self.bands}")

        self.band = band
        self.pairs = align_paragraphs(self.submission.body, version)
        self.channel.clear()
        log.info("Comparison ready: band=%s paragraphs=%d", band, len(self.pairs))

    # ------------- highlight -------------

    def hover(self, target: Union[Handle, str, None]) -> Optional[Handle]:
        handle = parse_handle(target) if isinstance(target, str) else target
        self.channel.publish(handle)
        return handle

    def leave(self) -> None:
        self.channel.clear()

    def is_highlighted(self, handle: Handle) -> bool:
        return self.channel.is_highlighted(handle)

    def paragraphs(self) -> List[Paragraph]:
        out: List[Paragraph] = []
        for pair in self.pairs:
            out.extend(pair.paragraphs())
        return out

    # ------------- rendering -------------

    def _panel(self, paragraph: Paragraph) -> Dict[str, Any]:
        rows = []
        for s in paragraph.sentences:
            handle = paragraph.handle(s.index)
            rows.append({
                "id": s.id,
                "element_id": handle.element_id,
                "counterpart_id": handle.opposite().element_id,
                "text": s.text,
                "index": s.index,
                "palette": palette_name(s.index),
                "color": sentence_color(s.index),
                "active_color": active_sentence_color(s.index),
                "active": self.is_highlighted(handle),
            })
        return {"container_id": paragraph.container_id, "text": paragraph.text, "sentences": rows}

    def to_dict(self) -> Dict[str, Any]:
        sub = self.submission
        criteria = []
        if self.band in CFG.BANDS:
            criteria = [row.__dict__ for row in criteria_rows(self.band, sub.criteria_scores)]
        paragraphs = []
        for pair in self.pairs:
            original, improved = pair.paragraphs()
            paragraphs.append({
                "id": pair.id,
                "role": str(pair.role),
                "color": pair.color,
                "original": self._panel(original),
                "improved": self._panel(improved),
            })
        return {
            "submission_id": sub.id,
            "status": sub.status,
            "score": sub.score,
            "band": self.band,
            "bands": self.bands,
            "active": self.channel.active.element_id if self.channel.active else None,
            "criteria": criteria,
            "paragraphs": paragraphs,
        }
