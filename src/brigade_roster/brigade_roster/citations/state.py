"""State holders for the citation list and detail screens."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..common.resource import Error, Loading, Resource, Success
from ..common.state_holder import StateHolder
from ..common.validators import positive_id
from ..core.enums import ActivityType, CitationStatus
from .model import Citation
from .repository import CitationRepository

logger = logging.getLogger(__name__)

INVALID_ID = "ID de citación inválido"


class AttendanceAction(str, Enum):
    CONFIRM = "confirm"
    REJECT = "reject"


@dataclass(frozen=True)
class CitationListState:
    result: Optional[Resource[List[Citation]]] = None
    citations: List[Citation] = field(default_factory=list)
    status_filter: Optional[CitationStatus] = None
    activity_filter: Optional[ActivityType] = None
    is_refreshing: bool = False

    @property
    def is_loading(self) -> bool:
        return isinstance(self.result, Loading)

    @property
    def error(self) -> Optional[str]:
        return self.result.message if isinstance(self.result, Error) else None

    @property
    def screen(self) -> str:
        if self.result is None:
            return "idle"
        if isinstance(self.result, Loading):
            return "loading"
        if isinstance(self.result, Error):
            return "error"
        return "list" if self.result.data else "empty"


class CitationListHolder(StateHolder[CitationListState]):
    def __init__(self, repository: CitationRepository):
        super().__init__(CitationListState())
        self._repository = repository
        self._refresh_seq = 0

    def _stream(self):
        s = self.state
        return self._repository.list_citations(status=s.status_filter, activity_type=s.activity_filter)

    def load(self) -> asyncio.Task:
        return self._launch("load", self._stream(), self._on_result)

    retry = load

    def _on_result(self, resource: Resource[List[Citation]]) -> None:
        if isinstance(resource, Success):
            self._update(result=resource, citations=list(resource.data))
        else:
            self._update(result=resource)

    def set_status_filter(self, status: Optional[CitationStatus]) -> asyncio.Task:
        self._update(status_filter=status)
        return self.load()

    def set_activity_filter(self, activity_type: Optional[ActivityType]) -> asyncio.Task:
        self._update(activity_filter=activity_type)
        return self.load()

    def clear_filters(self) -> asyncio.Task:
        self._update(status_filter=None, activity_filter=None)
        return self.load()

    def refresh(self) -> asyncio.Task:
        self._refresh_seq += 1
        token = self._refresh_seq
        self._update(is_refreshing=True)

        def on_emit(resource: Resource[List[Citation]]) -> None:
            if not isinstance(resource, Loading):
                self._on_result(resource)

        def on_finish() -> None:
            if self._refresh_seq == token:
                self._update(is_refreshing=False)

        return self._launch("load", self._stream(), on_emit, on_finish=on_finish)

    def confirm_attendance(self, citation_id: int) -> asyncio.Task:
        return self._launch(
            f"attendance:{citation_id}",
            self._repository.confirm_attendance(citation_id),
            self._reload_on_success,
        )

    def reject_attendance(self, citation_id: int) -> asyncio.Task:
        return self._launch(
            f"attendance:{citation_id}",
            self._repository.reject_attendance(citation_id),
            self._reload_on_success,
        )

    def _reload_on_success(self, resource: Resource[Citation]) -> None:
        if isinstance(resource, Success):
            self.load()
        elif isinstance(resource, Error):
            logger.info("attendance change failed: %s", resource.message)


@dataclass(frozen=True)
class CitationDetailState:
    result: Optional[Resource[Citation]] = None
    citation: Optional[Citation] = None
    confirmation: Optional[Resource[Citation]] = None
    pending_action: Optional[AttendanceAction] = None

    @property
    def is_loading(self) -> bool:
        return isinstance(self.result, Loading)

    @property
    def is_submitting(self) -> bool:
        return isinstance(self.confirmation, Loading)

    @property
    def error(self) -> Optional[str]:
        return self.result.message if isinstance(self.result, Error) else None

    @property
    def show_dialog(self) -> bool:
        return self.pending_action is not None


class CitationDetailHolder(StateHolder[CitationDetailState]):
    """Detail screen with the confirm/reject attendance workflow.

    Confirm and reject first open a confirmation dialog (``pending_action``);
    only :meth:`accept_dialog` dispatches the repository call. A successful
    call reloads the citation from the repository.
    """

    def __init__(self, repository: CitationRepository, citation_id: Optional[int]):
        self._repository = repository
        self._citation_id = positive_id(citation_id)
        initial = CitationDetailState() if self._citation_id else CitationDetailState(result=Error(INVALID_ID))
        super().__init__(initial)

    @property
    def citation_id(self) -> Optional[int]:
        return self._citation_id

    def start(self) -> Optional[asyncio.Task]:
        return self.load()

    def load(self) -> Optional[asyncio.Task]:
        if self._citation_id is None:
            return None
        return self._launch("load", self._repository.get_citation(self._citation_id), self._on_result)

    retry = load

    def _on_result(self, resource: Resource[Citation]) -> None:
        if isinstance(resource, Success):
            self._update(result=resource, citation=resource.data)
        else:
            self._update(result=resource)

    def request_confirm(self) -> None:
        self._update(pending_action=AttendanceAction.CONFIRM)

    def request_reject(self) -> None:
        self._update(pending_action=AttendanceAction.REJECT)

    def dismiss_dialog(self) -> None:
        self._update(pending_action=None)

    def accept_dialog(self) -> Optional[asyncio.Task]:
        action = self.state.pending_action
        self._update(pending_action=None)
        if action is None or self._citation_id is None:
            return None

        if action == AttendanceAction.CONFIRM:
            stream = self._repository.confirm_attendance(self._citation_id)
        else:
            stream = self._repository.reject_attendance(self._citation_id)

        return self._launch("attendance", stream, self._on_attendance)

    def _on_attendance(self, resource: Resource[Citation]) -> None:
        self._update(confirmation=resource)
        if isinstance(resource, Success):
            self.load()

    def clear_confirmation(self) -> None:
        self._update(confirmation=None)
