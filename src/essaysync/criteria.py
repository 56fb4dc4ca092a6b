# src/essaysync/criteria.py
"""IELTS Writing band descriptors shown next to an improved version."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

# (descriptor key, label, submission criteriaScores key)
CRITERIA = (
    ("taskAchievement", "Task Achievement", "taskResponse"),
    ("coherenceCohesion", "Coherence & Cohesion", "coherence"),
    ("lexicalResource", "Lexical Resource", "lexical"),
    ("grammaticalRange", "Grammar & Accuracy", "grammar"),
)

DESCRIPTORS: Dict[int, Dict[str, str]] = {
    7: {
        "taskAchievement":
            "Addresses all parts of the task with clear positions and relevant examples. "
            "Ideas are developed and supported, though some may lack full development.",
        "coherenceCohesion":
            "Logically organizes information with clear progression. Uses cohesive devices "
            "effectively, though sometimes mechanically. Has clear central topic within most paragraphs.",
        "lexicalResource":
            "Uses sufficient range of vocabulary with some natural use of less common items. "
            "Shows awareness of style and collocation with occasional inappropriacies. "
            "Makes some errors in word choice but meaning remains clear.",
        "grammaticalRange":
            "Uses variety of complex structures with good control and flexibility. "
            "Produces frequent error-free sentences with only occasional errors or inappropriacies.",
    },
    8: {
        "taskAchievement":
            "Sufficiently addresses all parts of the task with well-developed response. "
            "Presents well-developed position with relevant, extended and supported ideas.",
        "coherenceCohesion":
            "Sequences information logically with wide range of cohesive devices used naturally "
            "and appropriately. Uses paragraphing sufficiently and appropriately.",
        "lexicalResource":
            "Uses wide range of vocabulary naturally and flexibly to convey precise meanings. "
            "Uses less common lexical items with awareness of style. "
            "Produces rare errors in word choice and collocation.",
        "grammaticalRange":
            "Uses wide range of structures with natural flexibility and accuracy. "
            "Majority of sentences are error-free with only very occasional inappropriacies.",
    },
    9: {
        "taskAchievement":
            "Fully addresses all parts of the task with fully developed position. "
            "Presents relevant, fully extended and well-supported ideas throughout.",
        "coherenceCohesion":
            "Uses cohesion in such a way that it attracts no attention. "
            "Skillfully manages paragraphing with seamless progression throughout.",
        "lexicalResource":
            "Uses wide range of vocabulary with very natural and sophisticated control. "
            "Uses precise and rare lexical items with complete naturalness and accuracy.",
        "grammaticalRange":
            "Uses wide range of structures with full flexibility and accuracy. "
            "Rare minor errors occur only as 'slips' in otherwise perfect language.",
    },
}


@dataclass(frozen=True)
class CriterionRow:
    key: str
    label: str
    descriptor: str
    score: Optional[float]


def criteria_for_band(band: int) -> Dict[str, str]:
    try:
        return DESCRIPTORS[band]
    except KeyError:
        raise KeyError(f"no IELTS descriptors for band {band}") from None


def criteria_rows(band: int, scores: Optional[Mapping[str, float]] = None) -> List[CriterionRow]:
    """Descriptors for ``band`` paired with the submission's per-criterion scores."""
    descriptors = criteria_for_band(band)
    scores = scores or {}
    return [
        CriterionRow(key, label, descriptors[key], scores.get(score_key))
        for key, label, score_key in CRITERIA
    ]
