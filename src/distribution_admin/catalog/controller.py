from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import json_body, login_required, page_args, page_response
from ..container import Container
from .service import CatalogService


def _filters(resource: str) -> dict:
    if resource == "vehicles":
        return {"types": request.args.getlist("types[]") or request.args.getlist("types")}
    if resource == "sales":
        return {"route_ids": request.args.getlist("routeIds", type=int)}
    return {}


def register(app: Flask, container: Container) -> None:
    services: dict[str, CatalogService] = {
        "vehicles": container.vehicle_service,
        "factories": container.factory_service,
        "routes": container.route_service,
        "sales": container.sales_service,
    }

    def service_for(resource: str) -> CatalogService:
        return services[resource]

    for resource in services:
        base = f"/api/{resource}"

        @app.route(base, methods=["GET"], endpoint=f"list_{resource}")
        @login_required
        def list_items(resource=resource):
            page, per_page = page_args()
            result = service_for(resource).find_all(
                page=page,
                per_page=per_page,
                search=request.args.get("search", ""),
                **_filters(resource),
            )
            return jsonify(page_response(result))

        @app.route(base, methods=["POST"], endpoint=f"add_{resource}")
        @login_required
        def add_item(resource=resource):
            svc = service_for(resource)
            svc.create(json_body())
            return jsonify({"message": f"{svc.label} berhasil ditambahkan"}), 201

        @app.route(f"{base}/<int:item_id>", methods=["PUT"], endpoint=f"edit_{resource}")
        @login_required
        def edit_item(item_id: int, resource=resource):
            svc = service_for(resource)
            svc.update(item_id, json_body())
            return jsonify({"message": f"{svc.label} berhasil diperbarui"})

        @app.route(f"{base}/<int:item_id>", methods=["DELETE"], endpoint=f"delete_{resource}")
        @login_required
        def delete_item(item_id: int, resource=resource):
            svc = service_for(resource)
            svc.delete(item_id)
            return jsonify({"message": f"{svc.label} berhasil dihapus"})
