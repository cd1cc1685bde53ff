from __future__ import annotations

from flask import Flask

from ..common.http import login_required, resource_response, run_stream
from ..container import Container
from .model import stats_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/stats", methods=["GET"], endpoint="stats")
    @login_required
    def stats():
        return resource_response(run_stream(container.personnel_repo.get_stats()), stats_to_dict)
