from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import UserRole


@dataclass(frozen=True)
class User:
    """Dashboard account as returned by the backend.

    Note: plain data object; the password never leaves the backend.
    """

    id: str
    name: str
    username: str
    phone: str
    role: UserRole
    created_at: Optional[str] = None

    @classmethod
    def from_api(cls, raw: dict) -> "User":
        return cls(
            id=str(raw["id"]),
            name=str(raw.get("name", "")),
            username=str(raw.get("username", "")),
            phone=str(raw.get("phone", "")),
            role=UserRole(raw["role"]),
            created_at=raw.get("createdAt"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "username": self.username,
            "phone": self.phone,
            "role": self.role.value,
            "createdAt": self.created_at,
        }


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    token: str
    user: User
