from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.logging import configure_logging
from .leave.controller import register as register_leave

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    auto_seed_demo = bool(getattr(settings, "AUTO_SEED_DEMO", False))
    container = build_container(seed_demo=auto_seed_demo)
    app.extensions["leave_tracker"] = container

    register_leave(app, container)

    logger.info("app_ready", extra={"settings": settings_module})
    return app
