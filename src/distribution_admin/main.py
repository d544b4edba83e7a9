from __future__ import annotations

import importlib
import logging
import os
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, session

from .common.web import register_error_handlers
from .config import get_settings_module
from .container import Container, build_container
from .core.constants import DEFAULT_SESSION_DAYS
from .attendance.controller import register as register_attendance
from .catalog.controller import register as register_catalog
from .employees.controller import register as register_employees
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if container is None:
        api_config = {
            "base_url": getattr(settings, "API_BASE_URL"),
            "timeout": getattr(settings, "API_TIMEOUT"),
        }
        container = build_container(api_config=api_config, token_provider=lambda: session.get("token"))
    logger.info("settings=%s api=%s", settings_module, container.api_client.base_url)

    register_error_handlers(app, discard_editor=container.editors.discard)
    register_users(app, container)
    register_attendance(app, container)
    register_employees(app, container)
    register_catalog(app, container)

    return app


def run() -> None:
    app = create_app()
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "5000")))
