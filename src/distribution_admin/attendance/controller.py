from __future__ import annotations

import logging
import uuid

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..common.web import json_body, login_required
from ..container import Container
from ..core.exceptions import ApiError
from .editor import AttendanceEditor
from .model import STATUS_LABELS

logger = logging.getLogger(__name__)


class RequestConfirmation:
    """Confirmation taken from the request body (``{"confirm": true}``)."""

    def __init__(self, confirmed: bool):
        self.confirmed = bool(confirmed)
        self.message = None

    def confirm(self, message: str) -> bool:
        self.message = message
        return self.confirmed


def _status_json(status):
    if status is None:
        return {"value": None, "label": "-"}
    return {"value": status.value, "label": STATUS_LABELS[status]}


def _editor_json(editor: AttendanceEditor) -> dict:
    grid = editor.grid()
    return {
        "mode": grid.mode.value,
        "week": {
            "start": format_iso_date(grid.window.start),
            "end": format_iso_date(grid.window.end),
            "label": grid.window.label,
        },
        "canGoPrevious": grid.can_go_previous,
        "canGoNext": grid.can_go_next,
        "saving": grid.saving,
        "columns": [
            {
                "date": format_iso_date(c.date),
                "dayName": c.day_name,
                "inStore": c.in_store,
                "hasBaseline": c.has_baseline,
                "action": c.action,
            }
            for c in grid.columns
        ],
        "rows": [
            {
                "id": r.employee.id,
                "name": r.employee.name,
                "cells": [{"date": format_iso_date(c.date), **_status_json(c.status)} for c in r.cells],
            }
            for r in grid.rows
        ],
        "form": editor.store.to_dict() if editor.store is not None else None,
    }


def register(app: Flask, container: Container) -> None:
    def current_editor() -> AttendanceEditor:
        key = session.get("editor_id")
        if not key:
            key = uuid.uuid4().hex
            session["editor_id"] = key
        return container.editors.get_or_create(key, container.new_attendance_editor)

    @app.route("/api/attendance/editor", methods=["GET"], endpoint="attendance_editor")
    @login_required
    def attendance_editor():
        editor = current_editor()
        anchor = request.args.get("anchor")
        if anchor:
            editor.go_to(parse_iso_date(anchor))
        if request.args.get("refresh"):
            editor.load(refresh=True)
        return jsonify({"data": _editor_json(editor)})

    @app.route("/api/attendance/editor/edit", methods=["POST"], endpoint="attendance_edit")
    @login_required
    def attendance_edit():
        editor = current_editor()
        editor.begin_edit()
        return jsonify({"data": _editor_json(editor)})

    @app.route("/api/attendance/editor/cancel", methods=["POST"], endpoint="attendance_cancel")
    @login_required
    def attendance_cancel():
        editor = current_editor()
        editor.cancel()
        return jsonify({"data": _editor_json(editor)})

    @app.route("/api/attendance/editor/save", methods=["POST"], endpoint="attendance_save")
    @login_required
    def attendance_save():
        editor = current_editor()
        message = editor.save()
        try:
            data = _editor_json(editor)
        except ApiError as e:
            # The batch is stored; the client refetches the week on its next GET.
            logger.warning("Refetch after save failed: %s", e.message)
            data = None
        return jsonify({"message": message, "data": data})

    @app.route("/api/attendance/editor/previous", methods=["POST"], endpoint="attendance_previous")
    @login_required
    def attendance_previous():
        editor = current_editor()
        editor.previous_week()
        return jsonify({"data": _editor_json(editor)})

    @app.route("/api/attendance/editor/next", methods=["POST"], endpoint="attendance_next")
    @login_required
    def attendance_next():
        editor = current_editor()
        editor.next_week()
        return jsonify({"data": _editor_json(editor)})

    @app.route("/api/attendance/editor/dates/<day>/activate", methods=["POST"], endpoint="attendance_activate")
    @login_required
    def attendance_activate(day: str):
        editor = current_editor()
        editor.activate(parse_iso_date(day))
        return jsonify({"data": _editor_json(editor)})

    @app.route("/api/attendance/editor/dates/<day>/deactivate", methods=["POST"], endpoint="attendance_deactivate")
    @login_required
    def attendance_deactivate(day: str):
        editor = current_editor()
        confirmation = RequestConfirmation(json_body().get("confirm", False))
        if not editor.deactivate(parse_iso_date(day), confirmation=confirmation):
            return jsonify({"message": confirmation.message, "confirmRequired": True}), 409
        return jsonify({"data": _editor_json(editor)})

    @app.route(
        "/api/attendance/editor/dates/<day>/employees/<int:employee_id>/toggle",
        methods=["POST"],
        endpoint="attendance_toggle",
    )
    @login_required
    def attendance_toggle(day: str, employee_id: int):
        editor = current_editor()
        editor.toggle(parse_iso_date(day), employee_id)
        return jsonify({"data": _editor_json(editor)})
