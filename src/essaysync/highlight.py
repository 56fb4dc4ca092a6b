# src/essaysync/highlight.py
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from . import config as CFG
from .align import resolve_corresponding_handle
from .models import Handle

log = logging.getLogger(__name__)

Listener = Callable[[Optional[Handle]], None]


class HighlightChannel:
    """
    Single-slot publish/subscribe for the sentence under the pointer.

    One instance is owned by a panel pair and handed to every sentence view
    that renders inside it. ``publish`` overwrites the slot (last writer wins)
    and notifies listeners in subscription order when the value changes.
    """

    def __init__(self) -> None:
        self._active: Optional[Handle] = None
        self._listeners: List[Listener] = []

    @property
    def active(self) -> Optional[Handle]:
        return self._active

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, handle: Optional[Handle]) -> None:
        if handle == self._active:
            return
        self._active = handle
        log.debug("active sentence -> %s", handle.element_id if handle else None)
        for listener in list(self._listeners):
            listener(handle)

    def clear(self) -> None:
        self.publish(None)

    def counterpart(self, container_id: str) -> Optional[Handle]:
        """Counterpart of the active handle inside the given paragraph container."""
        if self._active is None:
            return None
        return resolve_corresponding_handle(
            self._active, container_id, self._active.side == CFG.ORIGINAL
        )

    def is_highlighted(self, handle: Handle) -> bool:
        if self._active is None:
            return False
        return handle == self._active or handle == self.counterpart(handle.container_id)
