from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, Protocol

from ..common.datetime_utils import format_iso_date, today_local
from ..core.enums import AttendanceStatus, EditorMode
from ..core.exceptions import ApiError, ValidationError
from . import edit_store
from .batch import build_batch
from .edit_store import EditStore
from .model import DAY_NAMES, AttendanceBaseline, EmployeeRef
from .repository import AttendanceRepository
from .week import WeekWindow, can_go_next, compute_week, shift_anchor

logger = logging.getLogger(__name__)


class Confirmation(Protocol):
    """Asks the operator to confirm a destructive action."""

    def confirm(self, message: str) -> bool:
        raise NotImplementedError


class AlwaysConfirm:
    def confirm(self, message: str) -> bool:
        return True


@dataclass(frozen=True)
class GridColumn:
    date: date
    day_name: str
    in_store: bool
    has_baseline: bool
    # "activate" or "deactivate" while editing, None in view mode
    action: Optional[str]


@dataclass(frozen=True)
class GridCell:
    date: date
    status: Optional[AttendanceStatus]


@dataclass(frozen=True)
class GridRow:
    employee: EmployeeRef
    cells: tuple[GridCell, ...]


@dataclass(frozen=True)
class AttendanceGrid:
    mode: EditorMode
    window: WeekWindow
    can_go_previous: bool
    can_go_next: bool
    saving: bool
    columns: tuple[GridColumn, ...]
    rows: tuple[GridRow, ...]


class AttendanceEditor:
    """Weekly attendance editor.

    VIEW shows the baseline read-only. EDIT works on a sparse ``EditStore`` that is
    only sent to the backend on ``save``. Week navigation is locked while editing.

    Requests of one browser session may arrive on several server threads, so every
    read-modify-write of the editor state runs under ``_lock``. ``_save_lock`` only
    marks a submit in flight and is never waited on.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        anchor: Optional[date] = None,
        today_provider: Callable[[], date] = today_local,
        confirmation: Optional[Confirmation] = None,
    ):
        self._attendance = attendance
        self._today = today_provider
        self._confirmation = confirmation or AlwaysConfirm()
        self._anchor = anchor or today_provider()
        self._window = compute_week(self._anchor)
        self._mode = EditorMode.VIEW
        self._baseline: Optional[AttendanceBaseline] = None
        self._store: Optional[EditStore] = None
        self._lock = threading.RLock()
        self._save_lock = threading.Lock()

    @property
    def mode(self) -> EditorMode:
        return self._mode

    @property
    def anchor(self) -> date:
        return self._anchor

    @property
    def window(self) -> WeekWindow:
        return self._window

    @property
    def store(self) -> Optional[EditStore]:
        return self._store

    @property
    def saving(self) -> bool:
        return self._save_lock.locked()

    @property
    def can_go_previous(self) -> bool:
        return self._mode == EditorMode.VIEW

    @property
    def can_go_next(self) -> bool:
        return self._mode == EditorMode.VIEW and can_go_next(self._window, self._today())

    # --- baseline -----------------------------------------------------------

    def load(self, *, refresh: bool = False) -> AttendanceBaseline:
        with self._lock:
            if self._baseline is None or refresh:
                self._baseline = self._attendance.fetch_week(start=self._window.start, end=self._window.end)
            return self._baseline

    def invalidate(self) -> None:
        with self._lock:
            self._baseline = None

    # --- navigation ---------------------------------------------------------

    def go_to(self, anchor: date) -> None:
        with self._lock:
            if compute_week(anchor).start == self._window.start:
                self._anchor = anchor
                return
            if self._mode == EditorMode.EDIT:
                raise ValidationError("Selesaikan atau batalkan perubahan sebelum pindah minggu")
            if compute_week(anchor).start > self._today():
                raise ValidationError("Minggu tersebut belum dimulai")

            self._anchor = anchor
            self._window = compute_week(anchor)
            self._baseline = None

    def previous_week(self) -> None:
        with self._lock:
            self.go_to(shift_anchor(self._anchor, -1))

    def next_week(self) -> None:
        with self._lock:
            if not self.can_go_next:
                raise ValidationError("Tidak dapat pindah ke minggu berikutnya")
            self.go_to(shift_anchor(self._anchor, 1))

    # --- mode transitions ---------------------------------------------------

    def begin_edit(self) -> None:
        with self._lock:
            if self._mode == EditorMode.EDIT:
                return
            self._store = edit_store.reset(self.load(), self._window)
            self._mode = EditorMode.EDIT

    def cancel(self) -> None:
        with self._lock:
            self._require_edit()
            if self.saving:
                raise ValidationError("Penyimpanan sedang diproses")
            self._store = None
            self._mode = EditorMode.VIEW

    def save(self) -> str:
        """Validate and submit the store; returns the backend's message.

        The baseline is only invalidated here. It is refetched by the next ``load`` or
        ``grid`` call, so a failing refetch cannot turn a stored batch into an error.
        """
        if not self._save_lock.acquire(blocking=False):
            raise ValidationError("Penyimpanan sedang diproses")
        try:
            with self._lock:
                self._require_edit()
                batch = build_batch(self._store, len(self._store.roster))
                try:
                    message = self._attendance.submit_batch(batch)
                except ApiError as e:
                    logger.warning("Attendance batch for %s rejected: %s", self._window.label, e.message)
                    raise

                logger.info("Saved %d attendance date(s) for %s", len(batch.operations), self._window.label)
                self._store = None
                self._mode = EditorMode.VIEW
                self._baseline = None
                return message
        finally:
            self._save_lock.release()

    # --- store edits ----------------------------------------------------------

    def activate(self, day: date) -> None:
        with self._lock:
            self._require_editable(day)
            self._store = edit_store.activate(self._store, day)

    def deactivate(self, day: date, *, confirmation: Optional[Confirmation] = None) -> bool:
        """Clear ``day``; returns False when the operator declined the confirmation."""
        with self._lock:
            self._require_editable(day)
            baseline = self.load()
            if baseline.has_data(day):
                confirm = confirmation or self._confirmation
                if not confirm.confirm(f"Hapus semua data absensi tanggal {format_iso_date(day)}?"):
                    return False
            self._store = edit_store.deactivate(self._store, day, baseline)
            return True

    def toggle(self, day: date, employee_id: int) -> None:
        with self._lock:
            self._require_editable(day)
            self._store = edit_store.toggle(self._store, day, int(employee_id))

    # --- read model -----------------------------------------------------------

    def grid(self) -> AttendanceGrid:
        with self._lock:
            return self._build_grid()

    def _build_grid(self) -> AttendanceGrid:
        baseline = self.load()
        editing = self._mode == EditorMode.EDIT and self._store is not None

        columns = []
        for day in self._window.visible_dates:
            entry = self._store.get(day) if editing else None
            action = None
            if editing:
                # A cleared date can be filled again, so it offers "activate" too.
                if entry is None or entry.all_unset():
                    action = "activate"
                else:
                    action = "deactivate"
            columns.append(
                GridColumn(
                    date=day,
                    day_name=DAY_NAMES[day.weekday()],
                    in_store=entry is not None,
                    has_baseline=baseline.has_data(day),
                    action=action,
                )
            )

        rows = []
        for employee in baseline.roster:
            cells = []
            for column in columns:
                if column.in_store:
                    status = self._store.get(column.date).status_of(employee.id)
                else:
                    status = baseline.status_for(employee.id, column.date)
                cells.append(GridCell(date=column.date, status=status))
            rows.append(GridRow(employee=employee, cells=tuple(cells)))

        return AttendanceGrid(
            mode=self._mode,
            window=self._window,
            can_go_previous=self.can_go_previous,
            can_go_next=self.can_go_next,
            saving=self.saving,
            columns=tuple(columns),
            rows=tuple(rows),
        )

    def _require_edit(self) -> None:
        if self._mode != EditorMode.EDIT or self._store is None:
            raise ValidationError("Mode ubah absensi belum aktif")

    def _require_editable(self, day: date) -> None:
        self._require_edit()
        if self.saving:
            raise ValidationError("Penyimpanan sedang diproses")
        if not self._window.contains(day):
            raise ValidationError(f"Tanggal {format_iso_date(day)} tidak ada di minggu ini")
