from __future__ import annotations

import pytest

from distribution_admin.core.enums import EmployeeRole
from distribution_admin.core.exceptions import ValidationError
from distribution_admin.employees.model import Employee
from distribution_admin.employees.service import EmployeeForm, EmployeeService
from tests.fakes import FakeResourceRepo


@pytest.fixture()
def repo():
    return FakeResourceRepo([Employee(id=7, name="Gani", salary=4000000, role=EmployeeRole.WAREHOUSE_HEAD)])


@pytest.fixture()
def service(repo):
    return EmployeeService(repo)


def test_create_staff(service, repo):
    service.create(EmployeeForm(name="  Hana ", salary="3000000", role="STAFF"))

    assert repo.created == [{"name": "Hana", "salary": 3000000.0, "role": "STAFF"}]


def test_driver_requires_supervisor(service):
    with pytest.raises(ValidationError, match="Supervisor"):
        service.create(EmployeeForm(name="Iwan", salary=2500000, role="DRIVER"))


def test_driver_with_supervisor(service, repo):
    service.create(EmployeeForm(name="Iwan", salary=2500000, role="DRIVER", supervisor_id="7"))

    assert repo.created[0]["supervisorId"] == 7


def test_sales_needs_phone_and_routes(service, repo):
    with pytest.raises(ValidationError, match="Rute"):
        service.create(EmployeeForm(name="Joko", salary=2000000, role="SALES", phone="0813"))

    service.create(EmployeeForm(name="Joko", salary=2000000, role="SALES", phone="0813", route_ids=[1, 2]))
    assert repo.created[0]["phone"] == "0813"
    assert repo.created[0]["routeIds"] == [1, 2]


@pytest.mark.parametrize("salary", [None, "", "abc", 0, -5])
def test_salary_is_required(service, salary):
    with pytest.raises(ValidationError):
        service.create(EmployeeForm(name="Kiki", salary=salary, role="STAFF"))


def test_name_length_limit(service):
    with pytest.raises(ValidationError, match="maksimal 100"):
        service.create(EmployeeForm(name="x" * 101, salary=1, role="STAFF"))


def test_unknown_role(service):
    with pytest.raises(ValidationError, match="Jabatan"):
        service.create(EmployeeForm(name="Lia", salary=1, role="PILOT"))


def test_update_sends_id(service, repo):
    service.update(7, EmployeeForm(name="Gani", salary=4500000, role="WAREHOUSE_HEAD"))

    assert repo.updated == [(7, {"name": "Gani", "salary": 4500000.0, "role": "WAREHOUSE_HEAD", "id": 7})]


def test_list_builds_query(service, repo):
    page = service.list_employees(page=2, per_page=20, name=" gan ", roles=["DRIVER", "HELPER"])

    assert [e.name for e in page.items] == ["Gani"]
    assert repo.queries == [{"page": 2, "perPage": 20, "name": "gan", "roles": ["DRIVER", "HELPER"]}]


def test_get_and_delete(service, repo):
    assert service.get(7).name == "Gani"

    service.delete(7)
    assert repo.deleted == [7]

    with pytest.raises(ValidationError):
        service.delete(0)
