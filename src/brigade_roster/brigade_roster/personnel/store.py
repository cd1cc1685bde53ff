from __future__ import annotations

import logging
import threading
from dataclasses import replace
from datetime import datetime
from typing import Callable, Iterable, List, Optional, Protocol, Sequence

from ..common.datetime_utils import now_local
from ..core.constants import ALL_STATUSES
from .model import Personnel, PersonnelDraft

logger = logging.getLogger(__name__)


class PersonnelStore(Protocol):
    """Interfaz del store de bomberos.

    Nota (DIP): repositories depend on this interface; "not found" is
    reported through ``None``/``False`` and never raised.
    """

    def list_all(self) -> Sequence[Personnel]:
        raise NotImplementedError

    def list_by_status(self, status: str) -> Sequence[Personnel]:
        raise NotImplementedError

    def search(self, query: str) -> Sequence[Personnel]:
        raise NotImplementedError

    def get_by_id(self, personnel_id: int) -> Optional[Personnel]:
        raise NotImplementedError

    def create(self, draft: PersonnelDraft) -> Personnel:
        raise NotImplementedError

    def update(self, record: Personnel) -> Optional[Personnel]:
        raise NotImplementedError

    def delete(self, personnel_id: int) -> bool:
        raise NotImplementedError


class InMemoryPersonnelStore:
    """Process-wide personnel collection kept in insertion order."""

    def __init__(self, records: Iterable[Personnel] = (), *, clock: Optional[Callable[[], datetime]] = None):
        self._records: List[Personnel] = list(records)
        self._clock = clock
        self._lock = threading.RLock()

    def _now(self) -> datetime:
        return self._clock() if self._clock else now_local()

    def list_all(self) -> List[Personnel]:
        with self._lock:
            return list(self._records)

    def list_by_status(self, status: str) -> List[Personnel]:
        if not status or not status.strip() or status == ALL_STATUSES:
            return self.list_all()
        with self._lock:
            return [p for p in self._records if p.status == status]

    def search(self, query: str) -> List[Personnel]:
        if not query or not query.strip():
            return self.list_all()

        needle = query.lower()
        with self._lock:
            return [
                p
                for p in self._records
                if needle in p.full_name.lower()
                or needle in p.rank.lower()
                or (p.specialty is not None and needle in p.specialty.lower())
            ]

    def get_by_id(self, personnel_id: int) -> Optional[Personnel]:
        with self._lock:
            for p in self._records:
                if p.personnel_id == personnel_id:
                    return p
        return None

    def create(self, draft: PersonnelDraft) -> Personnel:
        with self._lock:
            new_id = max((p.personnel_id for p in self._records), default=0) + 1
            record = Personnel.from_draft(draft, personnel_id=new_id, now=self._now())
            self._records.append(record)

        logger.debug("created personnel id=%s", new_id)
        return record

    def update(self, record: Personnel) -> Optional[Personnel]:
        with self._lock:
            for index, current in enumerate(self._records):
                if current.personnel_id == record.personnel_id:
                    updated = replace(record, created_at=current.created_at, updated_at=self._now())
                    self._records[index] = updated
                    logger.debug("updated personnel id=%s", record.personnel_id)
                    return updated
        return None

    def delete(self, personnel_id: int) -> bool:
        with self._lock:
            before = len(self._records)
            self._records = [p for p in self._records if p.personnel_id != personnel_id]
            removed = len(self._records) != before

        if removed:
            logger.debug("deleted personnel id=%s", personnel_id)
        return removed
