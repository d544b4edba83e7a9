from __future__ import annotations

import threading
import time
from datetime import timedelta
from typing import Callable

from ..core.constants import DEFAULT_SESSION_DAYS
from .editor import AttendanceEditor


class EditorRegistry:
    """Keeps one live ``AttendanceEditor`` per browser session.

    Editors hold unsaved edits and the cached baseline, so they live in process memory
    rather than in the (cookie) session. Sessions can expire without a logout; editors
    left unused for ``max_idle`` are dropped on the next lookup.
    """

    def __init__(
        self,
        *,
        max_idle: timedelta = timedelta(days=DEFAULT_SESSION_DAYS),
        clock: Callable[[], float] = time.monotonic,
    ):
        self._editors: dict[str, tuple[AttendanceEditor, float]] = {}
        self._lock = threading.Lock()
        self._max_idle = max_idle.total_seconds()
        self._clock = clock

    def get_or_create(self, key: str, factory: Callable[[], AttendanceEditor]) -> AttendanceEditor:
        with self._lock:
            now = self._clock()
            self._prune(now)
            entry = self._editors.get(key)
            editor = entry[0] if entry else factory()
            self._editors[key] = (editor, now)
            return editor

    def discard(self, key: str) -> None:
        with self._lock:
            self._editors.pop(key, None)

    def _prune(self, now: float) -> None:
        stale = [k for k, (_, last_used) in self._editors.items() if now - last_used > self._max_idle]
        for k in stale:
            del self._editors[k]

    def __len__(self) -> int:
        with self._lock:
            return len(self._editors)
