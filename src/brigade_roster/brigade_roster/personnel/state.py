"""State holders for the personnel list and detail screens."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..common.resource import Error, Loading, Resource, Success
from ..common.state_holder import StateHolder
from ..common.validators import positive_id
from ..core.constants import DEFAULT_PERSONNEL_FILTER
from .model import Personnel
from .repository import PersonnelRepository

logger = logging.getLogger(__name__)

INVALID_ID = "ID de bombero inválido"


@dataclass(frozen=True)
class PersonnelListState:
    result: Optional[Resource[List[Personnel]]] = None
    personnel: List[Personnel] = field(default_factory=list)
    search_query: str = ""
    status_filter: str = DEFAULT_PERSONNEL_FILTER
    is_refreshing: bool = False

    @property
    def is_loading(self) -> bool:
        return isinstance(self.result, Loading)

    @property
    def error(self) -> Optional[str]:
        return self.result.message if isinstance(self.result, Error) else None

    @property
    def screen(self) -> str:
        """One of ``idle``, ``loading``, ``empty``, ``list`` or ``error``."""
        if self.result is None:
            return "idle"
        if isinstance(self.result, Loading):
            return "loading"
        if isinstance(self.result, Error):
            return "error"
        return "list" if self.result.data else "empty"


class PersonnelListHolder(StateHolder[PersonnelListState]):
    def __init__(self, repository: PersonnelRepository):
        super().__init__(PersonnelListState())
        self._repository = repository
        self._refresh_seq = 0

    def _stream(self):
        s = self.state
        return self._repository.list_personnel(search=s.search_query, status=s.status_filter)

    def load(self) -> asyncio.Task:
        return self._launch("load", self._stream(), self._on_result)

    retry = load

    def _on_result(self, resource: Resource[List[Personnel]]) -> None:
        if isinstance(resource, Success):
            self._update(result=resource, personnel=list(resource.data))
        else:
            self._update(result=resource)

    def on_search_query_change(self, query: str) -> asyncio.Task:
        self._update(search_query=query)
        return self.load()

    def on_status_filter_change(self, status: str) -> asyncio.Task:
        self._update(status_filter=status)
        return self.load()

    def refresh(self) -> asyncio.Task:
        """Pull-to-refresh: keeps the current result visible while loading."""
        self._refresh_seq += 1
        token = self._refresh_seq
        self._update(is_refreshing=True)

        def on_emit(resource: Resource[List[Personnel]]) -> None:
            if not isinstance(resource, Loading):
                self._on_result(resource)

        def on_finish() -> None:
            if self._refresh_seq == token:
                self._update(is_refreshing=False)

        return self._launch("load", self._stream(), on_emit, on_finish=on_finish)

    def clear_error(self) -> None:
        if isinstance(self.state.result, Error):
            self._update(result=None)


@dataclass(frozen=True)
class PersonnelDetailState:
    result: Optional[Resource[Personnel]] = None
    personnel: Optional[Personnel] = None
    deletion: Optional[Resource[bool]] = None

    @property
    def is_loading(self) -> bool:
        return isinstance(self.result, Loading) or isinstance(self.deletion, Loading)

    @property
    def error(self) -> Optional[str]:
        for resource in (self.deletion, self.result):
            if isinstance(resource, Error):
                return resource.message
        return None

    @property
    def deleted(self) -> bool:
        return isinstance(self.deletion, Success)


class PersonnelDetailHolder(StateHolder[PersonnelDetailState]):
    """Detail screen; ``personnel_id`` comes from navigation."""

    def __init__(self, repository: PersonnelRepository, personnel_id: Optional[int]):
        self._repository = repository
        self._personnel_id = positive_id(personnel_id)
        initial = PersonnelDetailState() if self._personnel_id else PersonnelDetailState(result=Error(INVALID_ID))
        super().__init__(initial)

    @property
    def personnel_id(self) -> Optional[int]:
        return self._personnel_id

    def start(self) -> Optional[asyncio.Task]:
        if self._personnel_id is None:
            logger.debug("personnel detail opened without a valid id")
            return None
        return self.load()

    def load(self) -> Optional[asyncio.Task]:
        if self._personnel_id is None:
            return None
        return self._launch("load", self._repository.get_personnel(self._personnel_id), self._on_result)

    reload = load

    def _on_result(self, resource: Resource[Personnel]) -> None:
        if isinstance(resource, Success):
            self._update(result=resource, personnel=resource.data)
        else:
            self._update(result=resource)

    def delete(self) -> Optional[asyncio.Task]:
        """Delete the loaded record; nothing happens before it is loaded."""
        loaded = self.state.personnel
        if loaded is None:
            return None
        return self._launch(
            "delete",
            self._repository.delete_personnel(loaded.personnel_id),
            lambda resource: self._update(deletion=resource),
        )
