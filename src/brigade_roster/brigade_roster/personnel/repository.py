from __future__ import annotations

from typing import AsyncIterator, List

from ..common.flow import Latency, resource_flow
from ..common.resource import Resource
from ..core.constants import DEFAULT_PERSONNEL_FILTER
from ..stats.model import Stats
from ..stats.service import StatsService
from .model import Personnel, PersonnelDraft
from .store import PersonnelStore

NOT_FOUND = "Bombero no encontrado"


class PersonnelRepository:
    """Async facade over :class:`PersonnelStore`.

    Every method returns a one-shot stream: ``Loading()`` then ``Success`` or
    ``Error``.
    """

    def __init__(self, store: PersonnelStore, stats: StatsService, *, latency: Latency | None = None):
        self._store = store
        self._stats = stats
        self._latency = latency or Latency()

    def list_personnel(
        self,
        *,
        search: str = "",
        status: str = DEFAULT_PERSONNEL_FILTER,
    ) -> AsyncIterator[Resource[List[Personnel]]]:
        """A non-blank ``search`` takes precedence over the status filter."""

        def action() -> List[Personnel]:
            if search and search.strip():
                return list(self._store.search(search))
            return list(self._store.list_by_status(status))

        return resource_flow(action, delay=self._latency.list, failure="Error inesperado")

    def get_personnel(self, personnel_id: int) -> AsyncIterator[Resource[Personnel]]:
        return resource_flow(
            lambda: self._store.get_by_id(int(personnel_id)),
            delay=self._latency.get,
            failure="Error inesperado",
            not_found=NOT_FOUND,
        )

    def get_stats(self) -> AsyncIterator[Resource[Stats]]:
        return resource_flow(self._stats.current, delay=self._latency.list, failure="Error inesperado")

    def create_personnel(self, draft: PersonnelDraft) -> AsyncIterator[Resource[Personnel]]:
        return resource_flow(
            lambda: self._store.create(draft),
            delay=self._latency.mutation,
            failure="Error al crear bombero",
        )

    def update_personnel(self, record: Personnel) -> AsyncIterator[Resource[Personnel]]:
        return resource_flow(
            lambda: self._store.update(record),
            delay=self._latency.mutation,
            failure="Error al actualizar bombero",
            not_found=NOT_FOUND,
        )

    def delete_personnel(self, personnel_id: int) -> AsyncIterator[Resource[bool]]:
        return resource_flow(
            lambda: True if self._store.delete(int(personnel_id)) else None,
            delay=self._latency.mutation,
            failure="Error al eliminar bombero",
            not_found=NOT_FOUND,
        )
