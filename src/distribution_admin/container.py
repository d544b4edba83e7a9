from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

import requests

from .api.client import ApiClient, TokenProvider
from .api.resource import HttpResourceRepository
from .attendance.editor import AttendanceEditor
from .attendance.http_attendance_repository import HttpAttendanceRepository
from .attendance.registry import EditorRegistry
from .catalog.model import Factory, Route, Sales, Vehicle
from .catalog.service import FactoryService, RouteService, SalesService, VehicleService
from .common.datetime_utils import today_local
from .core.constants import DEFAULT_API_TIMEOUT
from .employees.model import Employee
from .employees.service import EmployeeService
from .users.model import User
from .users.repository import HttpAuthRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    api_client: ApiClient

    attendance_repo: HttpAttendanceRepository
    auth_repo: HttpAuthRepository
    users_repo: HttpResourceRepository[User]
    employees_repo: HttpResourceRepository[Employee]
    vehicles_repo: HttpResourceRepository[Vehicle]
    factories_repo: HttpResourceRepository[Factory]
    routes_repo: HttpResourceRepository[Route]
    sales_repo: HttpResourceRepository[Sales]

    auth_service: AuthService
    user_service: UserService
    employee_service: EmployeeService
    vehicle_service: VehicleService
    factory_service: FactoryService
    route_service: RouteService
    sales_service: SalesService

    editors: EditorRegistry
    today_provider: Callable[[], date]

    def new_attendance_editor(self) -> AttendanceEditor:
        return AttendanceEditor(self.attendance_repo, today_provider=self.today_provider)


def build_container(
    *,
    api_config: dict,
    token_provider: Optional[TokenProvider] = None,
    session: Optional[requests.Session] = None,
    today_provider: Callable[[], date] = today_local,
) -> Container:
    client = ApiClient(
        str(api_config["base_url"]),
        timeout=int(api_config.get("timeout", DEFAULT_API_TIMEOUT)),
        token_provider=token_provider,
        session=session,
    )

    attendance_repo = HttpAttendanceRepository(client)
    auth_repo = HttpAuthRepository(client)
    users_repo = HttpResourceRepository(client, "users", User.from_api)
    employees_repo = HttpResourceRepository(client, "employees", Employee.from_api)
    vehicles_repo = HttpResourceRepository(client, "vehicles", Vehicle.from_api)
    factories_repo = HttpResourceRepository(client, "factories", Factory.from_api)
    routes_repo = HttpResourceRepository(client, "routes", Route.from_api)
    sales_repo = HttpResourceRepository(client, "sales", Sales.from_api)

    return Container(
        api_client=client,
        attendance_repo=attendance_repo,
        auth_repo=auth_repo,
        users_repo=users_repo,
        employees_repo=employees_repo,
        vehicles_repo=vehicles_repo,
        factories_repo=factories_repo,
        routes_repo=routes_repo,
        sales_repo=sales_repo,
        auth_service=AuthService(auth_repo),
        user_service=UserService(users_repo),
        employee_service=EmployeeService(employees_repo),
        vehicle_service=VehicleService(vehicles_repo),
        factory_service=FactoryService(factories_repo),
        route_service=RouteService(routes_repo),
        sales_service=SalesService(sales_repo),
        editors=EditorRegistry(),
        today_provider=today_provider,
    )
