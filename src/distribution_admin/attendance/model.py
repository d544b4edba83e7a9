from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..core.enums import AttendanceStatus, BatchAction

STATUS_LABELS = {
    AttendanceStatus.PRESENT: "Hadir",
    AttendanceStatus.LEAVE: "Izin",
    AttendanceStatus.SICK: "Sakit",
    AttendanceStatus.ABSENT: "Tidak Hadir",
}

# Indexed by date.weekday() (Monday=0)
DAY_NAMES = ("Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu")


@dataclass(frozen=True)
class EmployeeRef:
    """Employee as seen by the attendance editor: id and display name only."""

    id: int
    name: str


@dataclass(frozen=True)
class AttendanceEntry:
    date: date
    status: AttendanceStatus


@dataclass(frozen=True)
class EmployeeAttendance:
    employee: EmployeeRef
    records: tuple[AttendanceEntry, ...] = ()

    @classmethod
    def from_api(cls, raw: dict) -> "EmployeeAttendance":
        records = tuple(
            AttendanceEntry(date=parse_iso_date(r["date"]), status=AttendanceStatus(r["status"]))
            for r in (raw.get("attendanceRecords") or [])
        )
        return cls(employee=EmployeeRef(id=int(raw["id"]), name=str(raw.get("name", ""))), records=records)


@dataclass(frozen=True)
class AttendanceBaseline:
    """Server-confirmed attendance for one week window. Read-only for the editor."""

    start: date
    end: date
    employees: tuple[EmployeeAttendance, ...] = ()

    @property
    def roster(self) -> tuple[EmployeeRef, ...]:
        return tuple(e.employee for e in self.employees)

    def status_for(self, employee_id: int, day: date) -> Optional[AttendanceStatus]:
        for e in self.employees:
            if e.employee.id != employee_id:
                continue
            for r in e.records:
                if r.date == day:
                    return r.status
        return None

    def has_data(self, day: date) -> bool:
        return any(r.date == day for e in self.employees for r in e.records)


@dataclass(frozen=True)
class BatchEmployee:
    id: int
    status: AttendanceStatus


@dataclass(frozen=True)
class BatchOperation:
    date: date
    action: BatchAction
    employees: tuple[BatchEmployee, ...] = ()

    def to_payload(self) -> dict:
        return {
            "date": format_iso_date(self.date),
            "action": self.action.value,
            "employees": [{"id": e.id, "status": e.status.value} for e in self.employees],
        }


@dataclass(frozen=True)
class AttendanceBatch:
    operations: tuple[BatchOperation, ...]

    def to_payload(self) -> dict:
        return {"attendances": [op.to_payload() for op in self.operations]}
