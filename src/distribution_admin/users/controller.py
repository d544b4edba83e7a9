from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.web import end_session, json_body, login_required, page_args, page_response
from ..container import Container
from .model import User


def register(app: Flask, container: Container) -> None:
    def session_user() -> User:
        return User.from_api(session["user"])

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        body = json_body()
        s_user = container.auth_service.authenticate(body.get("username", ""), body.get("password", ""))

        end_session(container.editors.discard)
        session.permanent = bool(body.get("remember"))
        session["token"] = s_user.token
        session["user"] = s_user.user.to_dict()

        return jsonify({"message": "Login berhasil", "data": s_user.user.to_dict()})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        end_session(container.editors.discard)
        return jsonify({"message": "Berhasil keluar"})

    @app.route("/api/current", methods=["GET"], endpoint="current_user")
    @login_required
    def current_user():
        user = container.auth_service.current()
        session["user"] = user.to_dict()
        return jsonify({"data": user.to_dict()})

    @app.route("/api/users", methods=["GET"], endpoint="list_users")
    @login_required
    def list_users():
        page, per_page = page_args()
        result = container.user_service.list_users(
            page=page,
            per_page=per_page,
            name=request.args.get("name", ""),
            username=request.args.get("username", ""),
            phone=request.args.get("phone", ""),
            roles=request.args.getlist("roles"),
        )
        return jsonify(page_response(result))

    @app.route("/api/users", methods=["POST"], endpoint="add_user")
    @login_required
    def add_user():
        body = json_body()
        container.user_service.register(
            name=body.get("name", ""),
            username=body.get("username", ""),
            password=body.get("password", ""),
            phone=body.get("phone", ""),
            role=body.get("role", ""),
        )
        return jsonify({"message": "User berhasil ditambahkan"}), 201

    @app.route("/api/users/<user_id>", methods=["PUT"], endpoint="edit_user")
    @login_required
    def edit_user(user_id: str):
        body = json_body()
        container.user_service.update(
            user_id=user_id,
            name=body.get("name"),
            username=body.get("username"),
            password=body.get("password"),
            phone=body.get("phone"),
            role=body.get("role"),
        )
        return jsonify({"message": "User berhasil diperbarui"})

    @app.route("/api/users/<user_id>", methods=["DELETE"], endpoint="delete_user")
    @login_required
    def delete_user(user_id: str):
        container.user_service.delete(current=session_user(), user_id=user_id)
        return jsonify({"message": "User berhasil dihapus"})
