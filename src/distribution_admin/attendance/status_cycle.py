from __future__ import annotations

from typing import Optional

from ..core.enums import AttendanceStatus

# None (no record) -> PRESENT -> LEAVE -> SICK -> ABSENT -> None
STATUS_CYCLE: tuple[Optional[AttendanceStatus], ...] = (
    None,
    AttendanceStatus.PRESENT,
    AttendanceStatus.LEAVE,
    AttendanceStatus.SICK,
    AttendanceStatus.ABSENT,
)


def next_status(current: Optional[AttendanceStatus]) -> Optional[AttendanceStatus]:
    idx = STATUS_CYCLE.index(current)
    return STATUS_CYCLE[(idx + 1) % len(STATUS_CYCLE)]
