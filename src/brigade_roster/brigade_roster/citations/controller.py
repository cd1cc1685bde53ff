from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, request

from ..common.http import login_required, resource_response, run_stream
from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from ..container import Container
from .model import CitationCreateRequest, CitationUpdateRequest, citation_to_dict
from .repository import NOT_FOUND

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("title", "description", "scheduled_at", "location", "activity_type", "required_attendees")


def _int_or_none(value) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Número inválido: {value!r}")


def _ids_or_none(value) -> Optional[list]:
    if value is None:
        return None
    if not isinstance(value, list):
        raise ValidationError("cited_personnel_ids debe ser una lista")
    return [_int_or_none(v) for v in value]


def create_request_from(payload: dict) -> CitationCreateRequest:
    missing = [name for name in _REQUIRED_FIELDS if payload.get(name) in (None, "")]
    if missing:
        raise ValidationError("Campos requeridos: " + ", ".join(missing))

    return CitationCreateRequest(
        title=require_non_empty(str(payload["title"]), "title"),
        description=require_non_empty(str(payload["description"]), "description"),
        scheduled_at=require_non_empty(str(payload["scheduled_at"]), "scheduled_at"),
        location=require_non_empty(str(payload["location"]), "location"),
        activity_type=str(payload["activity_type"]),
        required_attendees=_int_or_none(payload["required_attendees"]),
        cited_personnel_ids=_ids_or_none(payload.get("cited_personnel_ids")) or [],
        remarks=payload.get("remarks"),
    )


def update_request_from(payload: dict) -> CitationUpdateRequest:
    def text(name: str) -> Optional[str]:
        value = payload.get(name)
        return str(value) if value is not None else None

    return CitationUpdateRequest(
        title=text("title"),
        description=text("description"),
        scheduled_at=text("scheduled_at"),
        location=text("location"),
        activity_type=text("activity_type"),
        status=text("status"),
        required_attendees=_int_or_none(payload.get("required_attendees")),
        cited_personnel_ids=_ids_or_none(payload.get("cited_personnel_ids")),
        remarks=text("remarks"),
    )


def register(app: Flask, container: Container) -> None:
    repo = container.citation_repo

    @app.route("/api/citations", methods=["GET"], endpoint="citation_list")
    @login_required
    def citation_list():
        status = request.args.get("status") or None
        activity_type = request.args.get("activity_type") or None
        resource = run_stream(repo.list_citations(status=status, activity_type=activity_type))
        return resource_response(resource, lambda rows: [citation_to_dict(c) for c in rows], error_status=400)

    @app.route("/api/citations/<int:citation_id>", methods=["GET"], endpoint="citation_detail")
    @login_required
    def citation_detail(citation_id: int):
        return resource_response(run_stream(repo.get_citation(citation_id)), citation_to_dict, not_found=NOT_FOUND)

    @app.route("/api/citations", methods=["POST"], endpoint="citation_create")
    @login_required
    def citation_create():
        create = create_request_from(request.get_json(silent=True) or {})
        resource = run_stream(repo.create_citation(create))
        return resource_response(resource, citation_to_dict, error_status=400, success_status=201)

    @app.route("/api/citations/<int:citation_id>", methods=["PUT"], endpoint="citation_update")
    @login_required
    def citation_update(citation_id: int):
        update = update_request_from(request.get_json(silent=True) or {})
        resource = run_stream(repo.update_citation(citation_id, update))
        return resource_response(resource, citation_to_dict, not_found=NOT_FOUND, error_status=400)

    @app.route("/api/citations/<int:citation_id>", methods=["DELETE"], endpoint="citation_delete")
    @login_required
    def citation_delete(citation_id: int):
        resource = run_stream(repo.delete_citation(citation_id))
        return resource_response(resource, lambda ok: {"deleted": ok}, not_found=NOT_FOUND, error_status=400)

    @app.route("/api/citations/<int:citation_id>/confirm", methods=["POST"], endpoint="citation_confirm")
    @login_required
    def citation_confirm(citation_id: int):
        resource = run_stream(repo.confirm_attendance(citation_id))
        return resource_response(resource, citation_to_dict, not_found=NOT_FOUND)

    @app.route("/api/citations/<int:citation_id>/reject", methods=["POST"], endpoint="citation_reject")
    @login_required
    def citation_reject(citation_id: int):
        resource = run_stream(repo.reject_attendance(citation_id))
        return resource_response(resource, citation_to_dict, not_found=NOT_FOUND)
