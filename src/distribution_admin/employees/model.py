from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import EmployeeRole


@dataclass(frozen=True)
class Employee:
    id: int
    name: str
    salary: float
    role: EmployeeRole
    supervisor_id: Optional[int] = None

    @classmethod
    def from_api(cls, raw: dict) -> "Employee":
        supervisor = raw.get("supervisorId")
        return cls(
            id=int(raw["id"]),
            name=str(raw.get("name", "")),
            salary=float(raw.get("salary") or 0),
            role=EmployeeRole(raw["role"]),
            supervisor_id=int(supervisor) if supervisor else None,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "salary": self.salary,
            "role": self.role.value,
            "supervisorId": self.supervisor_id,
        }
