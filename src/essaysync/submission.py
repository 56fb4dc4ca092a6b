# src/essaysync/submission.py
"""
Parsing of scoring-backend submissions.

The backend is treated as an opaque service: this module only turns its JSON
into typed objects and smooths over the two body layouts it has shipped
(``body`` as a list, or the older ``body_one`` / ``body_two`` fields).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from . import config as CFG

log = logging.getLogger(__name__)

# submission statuses
IDLE = "IDLE"
IN_PROGRESS = "IN_PROGRESS"
ANALYZED = "ANALYZED"
FAILED_TO_CHECK = "FAILED_TO_CHECK"
STATUSES = (IDLE, IN_PROGRESS, ANALYZED, FAILED_TO_CHECK)

TARGET_SCORES: Dict[str, int] = {
    "BAND_SEVEN": 7,
    "BAND_EIGHT": 8,
    "BAND_NINE": 9,
}

PLACEHOLDER_TEXT = "Content will be generated here..."

# canned paragraphs the backend emits before real content is ready
_GENERIC_RESPONSES = frozenset({
    "This introduction demonstrates exceptional clarity and sophistication in presenting the argument.",
    "This paragraph showcases advanced critical thinking and sophisticated argumentation with excellent examples.",
    "This paragraph demonstrates mastery of complex ideas with flawless expression and coherence.",
    "This conclusion provides exceptional synthesis and leaves a lasting impression.",
})

CRITERIA_KEYS = ("taskResponse", "coherence", "lexical", "grammar")


class SubmissionError(ValueError):
    """Raised when a backend payload cannot be read as a submission."""


def band_for_target_score(target: str) -> int:
    try:
        return TARGET_SCORES[target]
    except KeyError:
        raise SubmissionError(f"unknown target score: {target!r}") from None


def split_into_paragraphs(text: Optional[str]) -> List[str]:
    if not text:
        return []
    return [p for p in text.split("\n") if p.strip()]


def format_improved_text(text: Optional[str]) -> str:
    if not text:
        return ""
    if text.strip() in _GENERIC_RESPONSES:
        return PLACEHOLDER_TEXT
    return text


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


@dataclass(frozen=True)
class ImprovedVersion:
    band: int
    introduction: str
    body: List[str]
    conclusion: str

    @classmethod
    def from_dict(cls, band: int, data: Mapping[str, Any]) -> "ImprovedVersion":
        raw_body = data.get("body")
        if isinstance(raw_body, list):
            paragraphs = [_str(p) for p in raw_body]
        else:
            paragraphs = [_str(data.get("body_one")), _str(data.get("body_two"))]
        return cls(
            band=band,
            introduction=_str(data.get("introduction")),
            body=[p for p in paragraphs if p.strip()],
            conclusion=_str(data.get("conclusion")),
        )

    def paragraphs(self) -> List[str]:
        """Introduction, body paragraphs and conclusion, blanks dropped."""
        return [p for p in (self.introduction, *self.body, self.conclusion) if p.strip()]


@dataclass(frozen=True)
class Submission:
    id: str
    body: str
    status: str = IDLE
    target_score: str = "BAND_NINE"
    score: float = 0.0
    mistakes: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    improved_versions: Dict[int, ImprovedVersion] = field(default_factory=dict)
    criteria_scores: Dict[str, float] = field(default_factory=dict)
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, payload: Any) -> "Submission":
        if not isinstance(payload, Mapping):
            raise SubmissionError("submission payload must be a JSON object")
        body = payload.get("body")
        if not isinstance(body, str):
            raise SubmissionError("submission payload has no text 'body'")

        status = payload.get("status", IDLE)
        if status not in STATUSES:
            log.warning("Unknown submission status %r; treating as %s", status, IDLE)
            status = IDLE

        feedback = _mapping(payload.get("aiFeedback"))
        improved = _mapping(feedback.get("improvedVersions"))
        versions: Dict[int, ImprovedVersion] = {}
        for band in CFG.BANDS:
            data = improved.get(f"band{band}")
            if isinstance(data, Mapping):
                versions[band] = ImprovedVersion.from_dict(band, data)

        criteria = _mapping(payload.get("criteriaScores"))
        scores: Dict[str, float] = {}
        for key in CRITERIA_KEYS:
            value = criteria.get(key)
            if isinstance(value, (int, float)):
                scores[key] = float(value)

        score = payload.get("score")
        return cls(
            id=_str(payload.get("_id")),
            body=body,
            status=status,
            target_score=_str(payload.get("targetScore")) or "BAND_NINE",
            score=float(score) if isinstance(score, (int, float)) else 0.0,
            mistakes=[_str(m) for m in _list(feedback.get("mistakes"))],
            suggestions=[_str(s) for s in _list(feedback.get("suggestions"))],
            improved_versions=versions,
            criteria_scores=scores,
            created_at=_str(payload.get("createdAt")),
            updated_at=_str(payload.get("updatedAt")),
        )

    @property
    def is_processing(self) -> bool:
        return self.status == IN_PROGRESS

    @property
    def is_failed(self) -> bool:
        return self.status == FAILED_TO_CHECK

    @property
    def is_analyzed(self) -> bool:
        return self.status == ANALYZED

    @property
    def target_band(self) -> int:
        return band_for_target_score(self.target_score)

    def band_versions(self) -> List[ImprovedVersion]:
        return [self.improved_versions[b] for b in sorted(self.improved_versions)]
