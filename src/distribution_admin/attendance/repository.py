from __future__ import annotations

from datetime import date
from typing import Protocol

from .model import AttendanceBaseline, AttendanceBatch


class AttendanceRepository(Protocol):
    """Gateway to persisted attendance.

    Note (DIP): the editor depends on this interface, not on the HTTP backend directly.
    """

    def fetch_week(self, *, start: date, end: date) -> AttendanceBaseline:
        raise NotImplementedError

    def submit_batch(self, batch: AttendanceBatch) -> str:
        """Persist ``batch`` and return the backend's confirmation message."""

        raise NotImplementedError
