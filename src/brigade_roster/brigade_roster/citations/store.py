from __future__ import annotations

import logging
import threading
from dataclasses import replace
from datetime import datetime
from enum import Enum
from typing import Callable, Iterable, List, Optional, Protocol, Sequence, Type, TypeVar, Union

from ..common.datetime_utils import now_local, parse_iso_datetime
from ..core.constants import CURRENT_USER_LABEL
from ..core.enums import ActivityType, CitationStatus, RejectPolicy
from .model import Citation, CitationCreateRequest, CitationUpdateRequest

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def lookup_enum(enum_cls: Type[E], value: Union[E, str]) -> E:
    """Resolve ``value`` by enum value, then by member name.

    Raises ``ValueError`` for unknown strings.
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        try:
            return enum_cls[str(value)]
        except KeyError:
            raise ValueError(f"{value!r} is not a valid {enum_cls.__name__}") from None


class CitationStore(Protocol):
    def list(
        self,
        *,
        status: Optional[Union[CitationStatus, str]] = None,
        activity_type: Optional[Union[ActivityType, str]] = None,
    ) -> Sequence[Citation]:
        raise NotImplementedError

    def get_by_id(self, citation_id: int) -> Optional[Citation]:
        raise NotImplementedError

    def create(self, request: CitationCreateRequest, *, created_by: str = CURRENT_USER_LABEL) -> Citation:
        raise NotImplementedError

    def update(self, citation_id: int, request: CitationUpdateRequest) -> Optional[Citation]:
        raise NotImplementedError

    def delete(self, citation_id: int) -> bool:
        raise NotImplementedError

    def confirm_attendance(self, citation_id: int) -> Optional[Citation]:
        raise NotImplementedError

    def reject_attendance(self, citation_id: int) -> Optional[Citation]:
        raise NotImplementedError


class InMemoryCitationStore:
    """Citations kept in memory with a seeded id counter.

    Ids come from a counter (``next_id``) rather than ``max + 1``, so a deleted
    id is never handed out again.
    """

    def __init__(
        self,
        citations: Iterable[Citation] = (),
        *,
        next_id: Optional[int] = None,
        reject_policy: RejectPolicy = RejectPolicy.NOOP,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._citations: List[Citation] = list(citations)
        default_next = max((c.citation_id for c in self._citations), default=0) + 1
        self._next_id = int(next_id) if next_id is not None else default_next
        self._reject_policy = RejectPolicy(reject_policy)
        self._clock = clock
        self._lock = threading.RLock()

    def _now(self) -> datetime:
        return self._clock() if self._clock else now_local()

    def _index_of(self, citation_id: int) -> int:
        for index, c in enumerate(self._citations):
            if c.citation_id == citation_id:
                return index
        return -1

    def list(
        self,
        *,
        status: Optional[Union[CitationStatus, str]] = None,
        activity_type: Optional[Union[ActivityType, str]] = None,
    ) -> List[Citation]:
        with self._lock:
            filtered = list(self._citations)

        if status is not None:
            wanted_status = lookup_enum(CitationStatus, status)
            filtered = [c for c in filtered if c.status == wanted_status]
        if activity_type is not None:
            wanted_type = lookup_enum(ActivityType, activity_type)
            filtered = [c for c in filtered if c.activity_type == wanted_type]

        return sorted(filtered, key=lambda c: c.scheduled_at, reverse=True)

    def get_by_id(self, citation_id: int) -> Optional[Citation]:
        with self._lock:
            index = self._index_of(citation_id)
            return self._citations[index] if index != -1 else None

    def create(self, request: CitationCreateRequest, *, created_by: str = CURRENT_USER_LABEL) -> Citation:
        scheduled_at = parse_iso_datetime(request.scheduled_at)
        activity_type = lookup_enum(ActivityType, request.activity_type)

        with self._lock:
            citation = Citation(
                citation_id=self._next_id,
                title=request.title,
                description=request.description,
                scheduled_at=scheduled_at,
                location=request.location,
                activity_type=activity_type,
                status=CitationStatus.PENDING,
                required_attendees=int(request.required_attendees),
                confirmed_attendees=0,
                created_by=created_by,
                created_at=self._now(),
                cited_personnel_ids=tuple(request.cited_personnel_ids),
                remarks=request.remarks,
            )
            self._next_id += 1
            self._citations.append(citation)

        logger.debug("created citation id=%s", citation.citation_id)
        return citation

    def update(self, citation_id: int, request: CitationUpdateRequest) -> Optional[Citation]:
        with self._lock:
            index = self._index_of(citation_id)
            if index == -1:
                return None

            current = self._citations[index]
            updated = replace(
                current,
                title=request.title if request.title is not None else current.title,
                description=request.description if request.description is not None else current.description,
                scheduled_at=(
                    parse_iso_datetime(request.scheduled_at)
                    if request.scheduled_at is not None
                    else current.scheduled_at
                ),
                location=request.location if request.location is not None else current.location,
                activity_type=(
                    lookup_enum(ActivityType, request.activity_type)
                    if request.activity_type is not None
                    else current.activity_type
                ),
                status=lookup_enum(CitationStatus, request.status) if request.status is not None else current.status,
                required_attendees=(
                    int(request.required_attendees)
                    if request.required_attendees is not None
                    else current.required_attendees
                ),
                cited_personnel_ids=(
                    tuple(request.cited_personnel_ids)
                    if request.cited_personnel_ids is not None
                    else current.cited_personnel_ids
                ),
                remarks=request.remarks if request.remarks is not None else current.remarks,
            )
            self._citations[index] = updated

        logger.debug("updated citation id=%s", citation_id)
        return updated

    def delete(self, citation_id: int) -> bool:
        with self._lock:
            index = self._index_of(citation_id)
            if index == -1:
                return False
            del self._citations[index]

        logger.debug("deleted citation id=%s", citation_id)
        return True

    def confirm_attendance(self, citation_id: int) -> Optional[Citation]:
        """Add one confirmed attendee.

        Not idempotent: there is no record of who confirmed, so every call
        counts, even past ``required_attendees``.
        """
        with self._lock:
            index = self._index_of(citation_id)
            if index == -1:
                return None
            current = self._citations[index]
            updated = replace(current, confirmed_attendees=current.confirmed_attendees + 1)
            self._citations[index] = updated
            return updated

    def reject_attendance(self, citation_id: int) -> Optional[Citation]:
        """Reject attendance according to the configured :class:`RejectPolicy`.

        With the default ``NOOP`` policy the citation is returned unchanged.
        """
        with self._lock:
            index = self._index_of(citation_id)
            if index == -1:
                return None
            current = self._citations[index]
            if self._reject_policy == RejectPolicy.DECREMENT:
                current = replace(current, confirmed_attendees=max(0, current.confirmed_attendees - 1))
                self._citations[index] = current
            return current
