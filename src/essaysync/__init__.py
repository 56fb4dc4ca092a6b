"""
Essay Comparison Module

This module lines up an IELTS essay with the improved versions returned by a
scoring backend and keeps sentence highlighting in sync between the two panels.
Sentences are matched by position only: same paragraph role, same sentence
index, opposite panel.

The module is split by concern:
- Sentence splitting and colour palette
- Paragraph roles, handles and cross-panel correspondence
- Highlight channel shared by one panel pair
- Submission parsing, band descriptors and draft storage

Main Functions:
    split_sentences(text): Split a paragraph into positioned sentences
    resolve_corresponding_handle(handle, container_id, is_original): Counterpart handle

Example Usage:
    from essaysync import split_sentences, resolve_corresponding_handle

    for s in split_sentences("Really?! Yes. Fine"):
        print(s.index, s.text)

    other = resolve_corresponding_handle(
        "original-body-2-sentence-1", "improved-body-2", True
    )
    print(other.element_id)   # improved-body-2-sentence-1

Version: 1.0.0
"""

# src/essaysync/__init__.py
from .sentences import split_sentences  # re-export
from .align import resolve_corresponding_handle, role_from_container_id, parse_handle
from .highlight import HighlightChannel
from .engine import Comparison
from .models import Sentence, Handle, Role
from .submission import Submission, SubmissionError

__version__ = "1.0.0"
__all__ = [
    "split_sentences",
    "resolve_corresponding_handle",
    "role_from_container_id",
    "parse_handle",
    "HighlightChannel",
    "Comparison",
    "Sentence",
    "Handle",
    "Role",
    "Submission",
    "SubmissionError",
]
