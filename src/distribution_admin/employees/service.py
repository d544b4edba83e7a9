from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..api.paging import Page
from ..api.resource import ResourceRepository
from ..common.validators import (
    require_choice,
    require_ids,
    require_non_empty,
    require_positive_id,
)
from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.enums import EmployeeRole
from ..core.exceptions import ValidationError
from .model import Employee

logger = logging.getLogger(__name__)

# Field crews report to a supervisor; sales staff need a phone and their routes.
SUPERVISED_ROLES = {EmployeeRole.DRIVER, EmployeeRole.HELPER}


@dataclass(frozen=True)
class EmployeeForm:
    name: str
    salary: float
    role: str
    supervisor_id: Optional[int] = None
    phone: str = ""
    route_ids: Sequence[int] = ()


class EmployeeService:
    def __init__(self, employees: ResourceRepository[Employee]):
        self._employees = employees

    def list_employees(
        self,
        *,
        page: int = 1,
        per_page: int = DEFAULT_PAGE_SIZE,
        name: str = "",
        roles: Sequence[str] = (),
    ) -> Page[Employee]:
        role_values = [require_choice(r, EmployeeRole, "Jabatan").value for r in roles]
        return self._employees.find_all(
            params={"page": page, "perPage": per_page, "name": name.strip(), "roles": role_values}
        )

    def get(self, employee_id: int) -> Optional[Employee]:
        return self._employees.find_by_id(require_positive_id(employee_id, "Karyawan"))

    def create(self, form: EmployeeForm) -> Optional[Employee]:
        return self._employees.create(self._to_payload(form))

    def update(self, employee_id: int, form: EmployeeForm) -> Optional[Employee]:
        employee_id = require_positive_id(employee_id, "Karyawan")
        payload = self._to_payload(form)
        payload["id"] = employee_id
        return self._employees.update(employee_id, payload)

    def delete(self, employee_id: int) -> None:
        employee_id = require_positive_id(employee_id, "Karyawan")
        self._employees.delete(employee_id)
        logger.info("Employee %s deleted", employee_id)

    @staticmethod
    def _to_payload(form: EmployeeForm) -> dict:
        name = require_non_empty(form.name, "Nama", max_len=100)
        role = require_choice(form.role, EmployeeRole, "Jabatan")

        try:
            salary = float(form.salary)
        except (TypeError, ValueError):
            raise ValidationError("Gaji tidak valid")
        if salary <= 0:
            raise ValidationError("Gaji wajib diisi")

        payload: dict = {"name": name, "salary": salary, "role": role.value}

        if role in SUPERVISED_ROLES:
            payload["supervisorId"] = require_positive_id(form.supervisor_id, "Supervisor")
        elif form.supervisor_id:
            payload["supervisorId"] = require_positive_id(form.supervisor_id, "Supervisor")

        if role == EmployeeRole.SALES:
            payload["phone"] = require_non_empty(form.phone, "Nomor telepon", max_len=15)
            payload["routeIds"] = require_ids(form.route_ids, "Rute")

        return payload
