from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import json_body, login_required, page_args, page_response
from ..container import Container
from .service import EmployeeForm


def _form(body: dict) -> EmployeeForm:
    return EmployeeForm(
        name=body.get("name", ""),
        salary=body.get("salary"),
        role=body.get("role", ""),
        supervisor_id=body.get("supervisorId"),
        phone=body.get("phone", ""),
        route_ids=body.get("routeIds") or (),
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @login_required
    def list_employees():
        page, per_page = page_args()
        result = container.employee_service.list_employees(
            page=page,
            per_page=per_page,
            name=request.args.get("name", ""),
            roles=request.args.getlist("roles"),
        )
        return jsonify(page_response(result))

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    @login_required
    def get_employee(employee_id: int):
        employee = container.employee_service.get(employee_id)
        if employee is None:
            return jsonify({"message": "Karyawan tidak ditemukan"}), 404
        return jsonify({"data": employee.to_dict()})

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    @login_required
    def add_employee():
        container.employee_service.create(_form(json_body()))
        return jsonify({"message": "Karyawan berhasil ditambahkan"}), 201

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="edit_employee")
    @login_required
    def edit_employee(employee_id: int):
        container.employee_service.update(employee_id, _form(json_body()))
        return jsonify({"message": "Karyawan berhasil diperbarui"})

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @login_required
    def delete_employee(employee_id: int):
        container.employee_service.delete(employee_id)
        return jsonify({"message": "Karyawan berhasil dihapus"})
