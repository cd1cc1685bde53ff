from __future__ import annotations

import asyncio
import logging
from typing import Optional

from flask import Flask, request

from ..common.http import envelope, login_required, resource_response, run_stream
from ..common.resource import Error, Success
from ..container import Container
from ..core.constants import DEFAULT_PERSONNEL_FILTER
from ..core.exceptions import NotFoundError
from .form import FormField, PersonnelFormHolder, PersonnelFormState
from .model import personnel_to_dict
from .repository import NOT_FOUND

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    async def _submit(personnel_id: Optional[int], payload: dict) -> PersonnelFormState:
        form = PersonnelFormHolder(container.personnel_repo, personnel_id)
        task = form.start()
        if task is not None:
            await task
            if not isinstance(form.state.load_result, Success):
                return form.state

        for form_field in FormField:
            if form_field.value in payload:
                form.update_field(form_field, str(payload[form_field.value] or ""))
        if "photo_url" in payload:
            form.update_photo(payload["photo_url"] or None)

        task = form.submit()
        if task is not None:
            await task
        return form.state

    def _form_response(state: PersonnelFormState, *, success_status: int):
        if state.errors:
            errors = {f.value: message for f, message in state.errors.items()}
            return envelope(False, "Datos inválidos", errors=errors), 422

        for resource in (state.load_result, state.save_result):
            if isinstance(resource, Error):
                status = 404 if resource.message == NOT_FOUND else 400
                return envelope(False, resource.message), status

        if isinstance(state.save_result, Success):
            return envelope(True, "Bombero guardado", personnel_to_dict(state.save_result.data)), success_status
        return envelope(False, "Error inesperado"), 500

    @app.route("/api/personnel", methods=["GET"], endpoint="personnel_list")
    @login_required
    def personnel_list():
        search = request.args.get("search", "")
        status = request.args.get("status", DEFAULT_PERSONNEL_FILTER)
        resource = run_stream(container.personnel_repo.list_personnel(search=search, status=status))
        return resource_response(resource, lambda rows: [personnel_to_dict(p) for p in rows])

    @app.route("/api/personnel/<int:personnel_id>", methods=["GET"], endpoint="personnel_detail")
    @login_required
    def personnel_detail(personnel_id: int):
        resource = run_stream(container.personnel_repo.get_personnel(personnel_id))
        return resource_response(resource, personnel_to_dict, not_found=NOT_FOUND)

    @app.route("/api/personnel", methods=["POST"], endpoint="personnel_create")
    @login_required
    def personnel_create():
        payload = request.get_json(silent=True) or {}
        state = asyncio.run(_submit(None, payload))
        return _form_response(state, success_status=201)

    @app.route("/api/personnel/<int:personnel_id>", methods=["PUT"], endpoint="personnel_update")
    @login_required
    def personnel_update(personnel_id: int):
        if personnel_id <= 0:
            raise NotFoundError(NOT_FOUND)
        payload = request.get_json(silent=True) or {}
        state = asyncio.run(_submit(personnel_id, payload))
        return _form_response(state, success_status=200)

    @app.route("/api/personnel/<int:personnel_id>", methods=["DELETE"], endpoint="personnel_delete")
    @login_required
    def personnel_delete(personnel_id: int):
        resource = run_stream(container.personnel_repo.delete_personnel(personnel_id))
        return resource_response(resource, lambda ok: {"deleted": ok}, not_found=NOT_FOUND, error_status=400)
