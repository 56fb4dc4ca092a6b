# src/essaysync/drafts.py
"""
Essay drafts kept between sessions.

One draft per store, under ``config.DRAFT_KEY``. A draft older than
``config.DRAFT_MAX_AGE_SECONDS`` is treated as abandoned: reading it clears it.
"""
from __future__ import annotations

import logging
import sqlite3
import time
from typing import Optional

from . import config as CFG
from .DB.api import DraftStore
from .models import Draft

log = logging.getLogger(__name__)

TOPIC_SOURCES = ("generated", "custom")


def save_draft(
    store: DraftStore,
    *,
    essay: str,
    topic_source: str = "generated",
    custom_topic: str = "",
    topic: str = "",
    selected_topic_id: str = "",
    now: Optional[float] = None,
) -> Draft:
    if topic_source not in TOPIC_SOURCES:
        raise ValueError(f"topic_source must be one of {TOPIC_SOURCES}, got {topic_source!r}")
    draft = Draft(
        essay=essay,
        topic_source=topic_source,
        custom_topic=custom_topic,
        topic=topic,
        selected_topic_id=selected_topic_id,
        timestamp=time.time() if now is None else now,
    )
    store.put(CFG.DRAFT_KEY, draft)
    log.info("Saved draft (%d chars)", len(essay))
    return draft


def clear_draft(store: DraftStore) -> None:
    try:
        store.delete(CFG.DRAFT_KEY)
    except sqlite3.Error as exc:
        log.error("Failed to clear draft: %s", exc)


def get_draft(
    store: DraftStore,
    *,
    now: Optional[float] = None,
    max_age: float = CFG.DRAFT_MAX_AGE_SECONDS,
) -> Optional[Draft]:
    try:
        draft = store.get(CFG.DRAFT_KEY)
    except sqlite3.Error as exc:
        log.error("Failed to read draft: %s", exc)
        return None
    if draft is None:
        return None

    now = time.time() if now is None else now
    if now - draft.timestamp > max_age:
        log.info("Draft expired (saved %.0fs ago); clearing", now - draft.timestamp)
        clear_draft(store)
        return None
    return draft


def has_draft(store: DraftStore, *, now: Optional[float] = None) -> bool:
    return get_draft(store, now=now) is not None
