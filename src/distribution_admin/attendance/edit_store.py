"""Sparse edit store for the weekly attendance editor.

The store only holds the dates the operator touched (or that carried baseline data when
editing started). All reducers are pure: they return a new ``EditStore`` and never
mutate their input.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from ..common.datetime_utils import format_iso_date
from ..core.enums import AttendanceStatus
from .model import AttendanceBaseline, EmployeeRef
from .status_cycle import next_status
from .week import WeekWindow


@dataclass(frozen=True)
class EmployeeStatus:
    id: int
    name: str
    status: Optional[AttendanceStatus] = None


@dataclass(frozen=True)
class DateEntry:
    is_active: bool
    employees: tuple[EmployeeStatus, ...]

    def all_unset(self) -> bool:
        return all(e.status is None for e in self.employees)

    def status_of(self, employee_id: int) -> Optional[AttendanceStatus]:
        for e in self.employees:
            if e.id == employee_id:
                return e.status
        return None

    def with_all(self, status: Optional[AttendanceStatus]) -> "DateEntry":
        return replace(self, employees=tuple(replace(e, status=status) for e in self.employees))


@dataclass(frozen=True)
class EditStore:
    roster: tuple[EmployeeRef, ...]
    entries: Mapping[date, DateEntry] = field(default_factory=dict)

    def __post_init__(self):
        # Keep entries in ascending date order and read-only.
        ordered = {d: self.entries[d] for d in sorted(self.entries)}
        object.__setattr__(self, "entries", MappingProxyType(ordered))

    def __contains__(self, day: date) -> bool:
        return day in self.entries

    def __iter__(self) -> Iterator[date]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, day: date) -> Optional[DateEntry]:
        return self.entries.get(day)

    def with_entry(self, day: date, entry: DateEntry) -> "EditStore":
        entries = dict(self.entries)
        entries[day] = entry
        return EditStore(roster=self.roster, entries=entries)

    def without(self, day: date) -> "EditStore":
        entries = {d: e for d, e in self.entries.items() if d != day}
        return EditStore(roster=self.roster, entries=entries)

    def to_dict(self) -> dict:
        return {
            "roster": [{"id": r.id, "name": r.name} for r in self.roster],
            "dates": {
                format_iso_date(d): {
                    "isActive": e.is_active,
                    "employees": [
                        {"id": emp.id, "name": emp.name, "status": emp.status.value if emp.status else None}
                        for emp in e.employees
                    ],
                }
                for d, e in self.entries.items()
            },
        }


def _entry_for_roster(roster: tuple[EmployeeRef, ...], status: Optional[AttendanceStatus]) -> DateEntry:
    return DateEntry(
        is_active=True,
        employees=tuple(EmployeeStatus(id=r.id, name=r.name, status=status) for r in roster),
    )


def empty_store(roster: tuple[EmployeeRef, ...]) -> EditStore:
    return EditStore(roster=tuple(roster))


def activate(store: EditStore, day: date) -> EditStore:
    """Add ``day`` with every employee marked present.

    New columns default to PRESENT so the operator only fixes the exceptions. A date
    that was cleared for deletion is filled again the same way.
    """
    entry = store.get(day)
    if entry is not None and entry.is_active and not entry.all_unset():
        return store
    return store.with_entry(day, _entry_for_roster(store.roster, AttendanceStatus.PRESENT))


def deactivate(store: EditStore, day: date, baseline: AttendanceBaseline) -> EditStore:
    """Remove ``day`` from the session.

    Dates with persisted data stay in the store with every status cleared, which the
    batch builder turns into a delete. Dates without persisted data are simply dropped.
    """
    entry = store.get(day)
    if baseline.has_data(day):
        if entry is None:
            entry = _entry_for_roster(store.roster, None)
        return store.with_entry(day, replace(entry.with_all(None), is_active=True))
    if entry is None:
        return store
    return store.without(day)


def toggle(store: EditStore, day: date, employee_id: int) -> EditStore:
    entry = store.get(day)
    if entry is None:
        return store

    employees = tuple(
        replace(e, status=next_status(e.status)) if e.id == employee_id else e for e in entry.employees
    )
    return store.with_entry(day, replace(entry, employees=employees))


def reset(baseline: AttendanceBaseline, window: WeekWindow) -> EditStore:
    roster = baseline.roster
    entries = {}
    for day in window.visible_dates:
        if not baseline.has_data(day):
            continue
        entries[day] = DateEntry(
            is_active=True,
            employees=tuple(
                EmployeeStatus(id=r.id, name=r.name, status=baseline.status_for(r.id, day)) for r in roster
            ),
        )
    return EditStore(roster=roster, entries=entries)
