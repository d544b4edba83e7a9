from __future__ import annotations

from ..common.datetime_utils import format_iso_date
from ..core.enums import BatchAction
from ..core.exceptions import ValidationError
from .edit_store import EditStore
from .model import AttendanceBatch, BatchEmployee, BatchOperation


def build_batch(store: EditStore, total_employees: int) -> AttendanceBatch:
    """Turn the active entries of ``store`` into update/delete operations.

    A date whose statuses are all cleared becomes a delete. Any other active date must
    carry a status for every one of ``total_employees`` employees.
    """
    operations: list[BatchOperation] = []

    for day, entry in store.entries.items():
        if not entry.is_active:
            continue

        if entry.all_unset():
            operations.append(BatchOperation(date=day, action=BatchAction.DELETE))
            continue

        marked = tuple(BatchEmployee(id=e.id, status=e.status) for e in entry.employees if e.status is not None)
        if len(marked) != total_employees:
            raise ValidationError(f"Tanggal {format_iso_date(day)}: semua karyawan harus memiliki status")

        operations.append(BatchOperation(date=day, action=BatchAction.UPDATE, employees=marked))

    if not operations:
        raise ValidationError("Minimal harus ada satu tanggal")

    return AttendanceBatch(operations=tuple(operations))
