from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .auth.controller import register as register_auth
from .citations.controller import register as register_citations
from .common.flow import Latency
from .common.http import register_error_handlers
from .container import build_container
from .core.enums import RejectPolicy
from .personnel.controller import register as register_personnel
from .stats.controller import register as register_stats

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if getattr(settings, "SIMULATE_LATENCY", False):
        latency = Latency().scaled(float(getattr(settings, "LATENCY_SCALE", 1.0)))
    else:
        latency = Latency.none()

    container = build_container(
        seed_demo_data=bool(getattr(settings, "SEED_DEMO_DATA", False)),
        latency=latency,
        reject_policy=RejectPolicy(getattr(settings, "REJECT_ATTENDANCE_POLICY", RejectPolicy.NOOP.value)),
        new_personnel_window_days=int(getattr(settings, "NEW_PERSONNEL_WINDOW_DAYS", 30)),
    )
    app.extensions["brigade_roster"] = container

    logger.info(
        "brigade-roster settings=%s seed=%s personnel=%d citations=%d",
        settings_module,
        bool(getattr(settings, "SEED_DEMO_DATA", False)),
        len(container.personnel_store.list_all()),
        len(container.citation_store.list()),
    )

    register_error_handlers(app)
    register_auth(app, container)
    register_personnel(app, container)
    register_citations(app, container)
    register_stats(app, container)

    return app
