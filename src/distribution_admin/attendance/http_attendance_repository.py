from __future__ import annotations

import logging
from datetime import date

from ..api.client import ApiClient
from ..common.datetime_utils import format_iso_date
from .model import AttendanceBaseline, AttendanceBatch, EmployeeAttendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

DEFAULT_SAVED_MESSAGE = "Absensi berhasil disimpan"


class HttpAttendanceRepository(AttendanceRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def fetch_week(self, *, start: date, end: date) -> AttendanceBaseline:
        body = self._client.get(
            "attendance",
            params={"startDate": format_iso_date(start), "endDate": format_iso_date(end)},
        )
        employees = tuple(EmployeeAttendance.from_api(raw) for raw in (body.get("data") or []))
        return AttendanceBaseline(start=start, end=end, employees=employees)

    def submit_batch(self, batch: AttendanceBatch) -> str:
        body = self._client.post("attendance/batch", json=batch.to_payload())
        logger.info("Submitted attendance batch with %d operation(s)", len(batch.operations))
        message = body.get("message")
        return message if isinstance(message, str) and message else DEFAULT_SAVED_MESSAGE
