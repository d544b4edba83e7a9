"""Services for the simple master-data screens (vehicles, factories, routes, sales).

Each service validates the form before it reaches the backend so the operator gets
the same messages the backend would return, without a round trip.
"""

from __future__ import annotations

from typing import Any, Generic, Optional, Sequence, TypeVar

from ..api.paging import Page
from ..api.resource import ResourceRepository
from ..common.validators import (
    require_choice,
    require_ids,
    require_non_empty,
    require_numeric,
    require_positive_id,
)
from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.enums import VehicleType
from ..core.exceptions import ValidationError
from .model import Factory, Route, Sales, Vehicle

T = TypeVar("T")


def normalize_plate(value: str) -> str:
    """'b 1234  xy' -> 'B1234XY'"""
    return "".join((value or "").split()).upper()


class CatalogService(Generic[T]):
    label = "Data"

    def __init__(self, repo: ResourceRepository[T]):
        self._repo = repo

    def _search_params(self, search: str) -> dict[str, Any]:
        return {"search": search.strip()}

    def find_all(self, *, page: int = 1, per_page: int = DEFAULT_PAGE_SIZE, search: str = "", **filters) -> Page[T]:
        params = {"page": page, "perPage": per_page}
        params.update(self._search_params(search))
        params.update(self._filter_params(**filters))
        return self._repo.find_all(params=params)

    def _filter_params(self, **filters) -> dict[str, Any]:
        return {}

    def create(self, data: dict) -> Optional[T]:
        return self._repo.create(self.validate(data))

    def update(self, resource_id: int, data: dict) -> Optional[T]:
        resource_id = require_positive_id(resource_id, self.label)
        payload = self.validate(data)
        payload["id"] = resource_id
        return self._repo.update(resource_id, payload)

    def delete(self, resource_id: int) -> None:
        self._repo.delete(require_positive_id(resource_id, self.label))

    def validate(self, data: dict) -> dict:
        raise NotImplementedError


class VehicleService(CatalogService[Vehicle]):
    label = "Kendaraan"

    def _search_params(self, search: str) -> dict[str, Any]:
        return {"search": normalize_plate(search)}

    def _filter_params(self, *, types: Sequence[str] = (), **_) -> dict[str, Any]:
        return {"types[]": [require_choice(t, VehicleType, "Tipe").value for t in types]}

    def validate(self, data: dict) -> dict:
        plate = normalize_plate(require_non_empty(data.get("plate"), "Plat nomor"))
        if len(plate) > 20:
            raise ValidationError("Plat nomor maksimal 20 karakter")
        return {"plate": plate, "type": require_choice(data.get("type"), VehicleType, "Tipe").value}


class FactoryService(CatalogService[Factory]):
    label = "Pabrik"

    def validate(self, data: dict) -> dict:
        try:
            due_date = int(data.get("dueDate"))
        except (TypeError, ValueError):
            raise ValidationError("Jatuh tempo wajib diisi")
        if due_date <= 0:
            raise ValidationError("Jatuh tempo wajib diisi")

        description = (data.get("description") or "").strip() or None
        return {
            "name": require_non_empty(data.get("name"), "Nama", max_len=100),
            "phone": require_non_empty(data.get("phone"), "Nomor telepon", max_len=20),
            "dueDate": due_date,
            "description": description,
        }


class RouteService(CatalogService[Route]):
    label = "Rute"

    def validate(self, data: dict) -> dict:
        return {
            "name": require_non_empty(data.get("name"), "Nama", max_len=100),
            "description": (data.get("description") or "").strip(),
        }


class SalesService(CatalogService[Sales]):
    label = "Sales"

    def _filter_params(self, *, route_ids: Sequence[int] = (), **_) -> dict[str, Any]:
        return {"routeIds": [require_positive_id(r, "Rute") for r in route_ids]}

    def validate(self, data: dict) -> dict:
        return {
            "name": require_non_empty(data.get("name"), "Nama", max_len=100),
            "phone": require_numeric(data.get("phone"), "Nomor telepon", max_len=15),
            "routeIds": require_ids(data.get("routeIds"), "Rute"),
        }
