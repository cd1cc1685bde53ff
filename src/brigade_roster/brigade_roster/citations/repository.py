from __future__ import annotations

from typing import AsyncIterator, List, Optional, Union

from ..common.flow import Latency, resource_flow
from ..common.resource import Resource
from ..core.enums import ActivityType, CitationStatus
from .model import Citation, CitationCreateRequest, CitationUpdateRequest
from .store import CitationStore

NOT_FOUND = "Citación no encontrada"


class CitationRepository:
    """Async facade over :class:`CitationStore`; see ``common.flow``."""

    def __init__(self, store: CitationStore, *, latency: Optional[Latency] = None):
        self._store = store
        self._latency = latency or Latency()

    def list_citations(
        self,
        *,
        status: Optional[Union[CitationStatus, str]] = None,
        activity_type: Optional[Union[ActivityType, str]] = None,
    ) -> AsyncIterator[Resource[List[Citation]]]:
        return resource_flow(
            lambda: list(self._store.list(status=status, activity_type=activity_type)),
            delay=self._latency.list,
            failure="Error al cargar citaciones",
        )

    def get_citation(self, citation_id: int) -> AsyncIterator[Resource[Citation]]:
        return resource_flow(
            lambda: self._store.get_by_id(int(citation_id)),
            delay=self._latency.get,
            failure="Error al cargar citación",
            not_found=NOT_FOUND,
        )

    def create_citation(self, request: CitationCreateRequest) -> AsyncIterator[Resource[Citation]]:
        return resource_flow(
            lambda: self._store.create(request),
            delay=self._latency.mutation,
            failure="Error al crear citación",
        )

    def update_citation(self, citation_id: int, request: CitationUpdateRequest) -> AsyncIterator[Resource[Citation]]:
        return resource_flow(
            lambda: self._store.update(int(citation_id), request),
            delay=self._latency.mutation,
            failure="Error al actualizar citación",
            not_found=NOT_FOUND,
        )

    def delete_citation(self, citation_id: int) -> AsyncIterator[Resource[bool]]:
        return resource_flow(
            lambda: True if self._store.delete(int(citation_id)) else None,
            delay=self._latency.mutation,
            failure="Error al eliminar citación",
            not_found=NOT_FOUND,
        )

    def confirm_attendance(self, citation_id: int) -> AsyncIterator[Resource[Citation]]:
        return resource_flow(
            lambda: self._store.confirm_attendance(int(citation_id)),
            delay=self._latency.attendance,
            failure="Error al confirmar asistencia",
            not_found=NOT_FOUND,
        )

    def reject_attendance(self, citation_id: int) -> AsyncIterator[Resource[Citation]]:
        return resource_flow(
            lambda: self._store.reject_attendance(int(citation_id)),
            delay=self._latency.attendance,
            failure="Error al rechazar asistencia",
            not_found=NOT_FOUND,
        )
