# src/essaysync/align.py
"""
Positional alignment between an original essay and an improved version.

Correspondence is structural only: a sentence maps to the sentence with the
same index, in the paragraph with the same role, on the other panel. No text
similarity is involved, so when the two paragraphs have different sentence
counts the trailing sentences of the longer one simply have no partner.
"""
from __future__ import annotations

import re
from typing import Dict, List, Optional, Union

from . import config as CFG
from .models import (
    CONCLUSION,
    INTRO,
    UNKNOWN,
    Handle,
    ParagraphPair,
    Role,
    body,
)
from .submission import ImprovedVersion, split_into_paragraphs

_BODY_NUMBER = re.compile(r"body-(\d+)")
_SENTENCE_INDEX = re.compile(r"sentence-(\d+)")
_ELEMENT_ID = re.compile(r"^(original|improved)-(.+)-sentence-(\d+)$")


def role_from_container_id(container_id: Optional[str]) -> Role:
    """
    Infer a paragraph role from a container id such as ``original-body-2``.

    Checked in order: ``intro``, ``conclusion``, ``body`` (numbered through
    ``body-<n>``). Anything else is ``unknown``.
    """
    if not isinstance(container_id, str):
        return UNKNOWN
    if "intro" in container_id:
        return INTRO
    if "conclusion" in container_id:
        return CONCLUSION
    if "body" in container_id:
        m = _BODY_NUMBER.search(container_id)
        return body(int(m.group(1)) if m else None)
    return UNKNOWN


def parse_handle(element_id: Optional[str]) -> Optional[Handle]:
    """Read back a ``Handle.element_id``; ``None`` if it is not one."""
    if not isinstance(element_id, str):
        return None
    m = _ELEMENT_ID.match(element_id)
    if not m:
        return None
    role = role_from_container_id(m.group(2))
    if not role.known:
        return None
    return Handle(side=m.group(1), role=role, index=int(m.group(3)))


def _active_parts(active: Union[Handle, str, None]) -> tuple[Optional[int], Optional[Role]]:
    if isinstance(active, Handle):
        if isinstance(active.index, int) and active.index >= 0:
            return active.index, active.role
        return None, None
    if isinstance(active, str):
        parsed = parse_handle(active)
        if parsed is not None:
            return parsed.index, parsed.role
        m = _SENTENCE_INDEX.search(active)
        return (int(m.group(1)), None) if m else (None, None)
    return None, None


def resolve_corresponding_handle(
    active_handle: Union[Handle, str, None],
    current_container_id: Union[str, Role, None],
    is_active_on_original_side: bool,
) -> Optional[Handle]:
    """
    Handle on the opposite panel that sits at the active handle's position.

    The role is taken from the paragraph being rendered (a container id, or a
    ``Role`` when the caller already has one). Returns ``None`` when the index
    cannot be read, when the role is unknown, or when the active handle names
    a different role than the paragraph being rendered. Whether the target
    paragraph actually has a sentence at that index is not checked here.

    Rejecting a mismatched active role is stricter than plain positional
    lookup, which would match any paragraph at the same index.
    """
    index, active_role = _active_parts(active_handle)
    if index is None:
        return None

    if isinstance(current_container_id, Role):
        role = current_container_id
    else:
        role = role_from_container_id(current_container_id)
    if not role.known:
        return None
    if active_role is not None and active_role.known and active_role != role:
        return None

    side = CFG.IMPROVED if is_active_on_original_side else CFG.ORIGINAL
    return Handle(side=side, role=role, index=index)


def paragraph_roles(count: int) -> List[Role]:
    """First paragraph is the intro, last the conclusion, the rest numbered bodies."""
    if count <= 0:
        return []
    if count == 1:
        return [INTRO]
    return [INTRO, *(body(n) for n in range(1, count - 1)), CONCLUSION]


def align_paragraphs(original_text: str, version: ImprovedVersion) -> List[ParagraphPair]:
    original = [p.strip() for p in split_into_paragraphs(original_text)]
    improved = [p.strip() for p in version.paragraphs()]
    count = max(len(original), len(improved))

    pairs: List[ParagraphPair] = []
    for i, role in enumerate(paragraph_roles(count)):
        pairs.append(ParagraphPair(
            id=f"paragraph-{i}",
            role=role,
            original=original[i] if i < len(original) else "",
            improved=improved[i] if i < len(improved) else "",
            color=i % CFG.PARAGRAPH_PALETTE_SIZE,
        ))
    return pairs


def create_sentence_mapping(pair: ParagraphPair) -> Dict[str, str]:
    """Bidirectional element-id map for sentence positions present on both sides."""
    left, right = pair.paragraphs()
    mapping: Dict[str, str] = {}
    for a, b in zip(left.handles(), right.handles()):
        mapping[a.element_id] = b.element_id
        mapping[b.element_id] = a.element_id
    return mapping
