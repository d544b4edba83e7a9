from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import VehicleType


@dataclass(frozen=True)
class Vehicle:
    id: int
    plate: str
    type: VehicleType

    @classmethod
    def from_api(cls, raw: dict) -> "Vehicle":
        return cls(id=int(raw["id"]), plate=str(raw.get("plate", "")), type=VehicleType(raw["type"]))

    def to_dict(self) -> dict:
        return {"id": self.id, "plate": self.plate, "type": self.type.value}


@dataclass(frozen=True)
class Factory:
    """Delivery destination."""

    id: int
    name: str
    phone: str
    due_date: int
    description: Optional[str] = None

    @classmethod
    def from_api(cls, raw: dict) -> "Factory":
        return cls(
            id=int(raw["id"]),
            name=str(raw.get("name", "")),
            phone=str(raw.get("phone", "")),
            due_date=int(raw.get("dueDate") or 0),
            description=raw.get("description"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "phone": self.phone,
            "dueDate": self.due_date,
            "description": self.description,
        }


@dataclass(frozen=True)
class Route:
    id: int
    name: str
    description: str = ""

    @classmethod
    def from_api(cls, raw: dict) -> "Route":
        return cls(id=int(raw["id"]), name=str(raw.get("name", "")), description=str(raw.get("description") or ""))

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "description": self.description}


@dataclass(frozen=True)
class Sales:
    id: int
    name: str
    phone: str
    routes: tuple[Route, ...] = ()

    @classmethod
    def from_api(cls, raw: dict) -> "Sales":
        return cls(
            id=int(raw["id"]),
            name=str(raw.get("name", "")),
            phone=str(raw.get("phone", "")),
            routes=tuple(Route.from_api(r) for r in (raw.get("Routes") or [])),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "phone": self.phone,
            "routes": [r.to_dict() for r in self.routes],
        }
