from __future__ import annotations

from datetime import date

import pytest

from distribution_admin.attendance.model import (
    AttendanceBaseline,
    AttendanceEntry,
    EmployeeAttendance,
    EmployeeRef,
)
from distribution_admin.core.enums import AttendanceStatus
from tests.fakes import FakeAttendanceRepo, FakeSession


@pytest.fixture()
def roster():
    return (EmployeeRef(id=1, name="Andi"), EmployeeRef(id=2, name="Budi"))


@pytest.fixture()
def baseline_employees(roster):
    andi, budi = roster
    return (
        EmployeeAttendance(
            employee=andi,
            records=(
                AttendanceEntry(date=date(2025, 6, 16), status=AttendanceStatus.PRESENT),
                AttendanceEntry(date=date(2025, 6, 17), status=AttendanceStatus.SICK),
            ),
        ),
        EmployeeAttendance(
            employee=budi,
            records=(
                AttendanceEntry(date=date(2025, 6, 16), status=AttendanceStatus.PRESENT),
                AttendanceEntry(date=date(2025, 6, 17), status=AttendanceStatus.PRESENT),
            ),
        ),
    )


@pytest.fixture()
def baseline(baseline_employees):
    return AttendanceBaseline(start=date(2025, 6, 15), end=date(2025, 6, 21), employees=baseline_employees)


@pytest.fixture()
def attendance_repo(baseline_employees):
    return FakeAttendanceRepo(baseline_employees)


@pytest.fixture()
def fake_session():
    return FakeSession()
