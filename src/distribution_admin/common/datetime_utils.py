from __future__ import annotations

from datetime import date, datetime

from ..core.constants import ISO_DATE_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date.

    Timestamps such as ``2025-06-18T00:00:00Z`` are accepted; only the date part is read.
    """
    try:
        return datetime.strptime(str(value)[:10], ISO_DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(f"Tanggal tidak valid: {value}")


def format_iso_date(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/inject a fixed day.
    """
    return datetime.now().date()
