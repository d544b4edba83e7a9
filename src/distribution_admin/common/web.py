from __future__ import annotations

from functools import wraps
from typing import Callable, Optional

from flask import Flask, jsonify, request, session

from ..core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from ..core.exceptions import ApiError, AuthenticationError, AuthorizationError, ValidationError


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not session.get("token"):
            raise AuthenticationError("Silakan login terlebih dahulu")
        return view(*args, **kwargs)

    return wrapper


def end_session(discard_editor: Optional[Callable[[str], None]] = None) -> None:
    """Clear the Flask session and drop the attendance editor it owned."""
    editor_id = session.get("editor_id")
    if editor_id and discard_editor is not None:
        discard_editor(editor_id)
    session.clear()


def json_body() -> dict:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def page_args() -> tuple[int, int]:
    """Read ``page``/``perPage`` query args, clamped to what the backend accepts."""
    page = request.args.get("page", 1, type=int) or 1
    per_page = request.args.get("perPage", DEFAULT_PAGE_SIZE, type=int) or DEFAULT_PAGE_SIZE
    return max(page, 1), min(max(per_page, 1), MAX_PAGE_SIZE)


def page_response(page) -> dict:
    out = {"data": [item.to_dict() for item in page.items]}
    if page.paging:
        out["paging"] = page.paging.to_dict()
    return out


def register_error_handlers(app: Flask, *, discard_editor: Optional[Callable[[str], None]] = None) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        return jsonify({"message": str(e)}), 400

    @app.errorhandler(AuthenticationError)
    def handle_authentication(e: AuthenticationError):
        return jsonify({"message": str(e)}), 401

    @app.errorhandler(AuthorizationError)
    def handle_authorization(e: AuthorizationError):
        return jsonify({"message": str(e)}), 403

    @app.errorhandler(ApiError)
    def handle_api(e: ApiError):
        if e.status_code == 401:
            # Backend no longer accepts the token; force a new login.
            end_session(discard_editor)
        status = e.status_code if e.status_code and e.status_code >= 400 else 502
        return jsonify({"message": e.message}), status
