from __future__ import annotations

from typing import Optional, Sequence

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str, *, max_len: Optional[int] = None) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} wajib diisi")
    value = str(value).strip()
    if max_len is not None and len(value) > max_len:
        raise ValidationError(f"{field_name} maksimal {max_len} karakter")
    return value


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} minimal {min_len} karakter")
    return value


def require_positive_id(value, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} tidak valid")
    if number <= 0:
        raise ValidationError(f"{field_name} tidak valid")
    return number


def require_numeric(value: Optional[str], field_name: str, *, max_len: int) -> str:
    value = require_non_empty(value, field_name, max_len=max_len)
    if not value.isdigit():
        raise ValidationError(f"{field_name} harus berupa angka")
    return value


def require_choice(value, enum_cls, field_name: str):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} harus salah satu dari: {allowed}")


def require_ids(values: Optional[Sequence], field_name: str) -> list[int]:
    if not values:
        raise ValidationError(f"{field_name} wajib diisi")
    return [require_positive_id(v, field_name) for v in values]
