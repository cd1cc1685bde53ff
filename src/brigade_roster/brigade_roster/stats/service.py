from __future__ import annotations

from collections import Counter
from datetime import datetime, timedelta
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.constants import NEW_PERSONNEL_WINDOW_DAYS
from ..core.enums import PersonnelStatus
from ..personnel.model import Personnel
from ..personnel.store import PersonnelStore
from .model import RankCount, Stats


def compute_stats(records: Sequence[Personnel], *, now: datetime, window_days: int) -> Stats:
    by_status = Counter(p.status for p in records)
    active = by_status.get(PersonnelStatus.ACTIVE.value, 0)
    on_leave = by_status.get(PersonnelStatus.ON_LEAVE.value, 0)
    inactive = by_status.get(PersonnelStatus.INACTIVE.value, 0)

    # Counter keeps first-seen order, so ties stay in roster order after the stable sort.
    rank_counts = Counter(p.rank for p in records)
    by_rank = sorted(
        (RankCount(rank=rank, count=count) for rank, count in rank_counts.items()),
        key=lambda rc: rc.count,
        reverse=True,
    )

    since = now - timedelta(days=window_days)
    new_last_period = sum(1 for p in records if p.created_at > since)

    return Stats(
        total_active=active,
        total_inactive=inactive + on_leave,
        total=len(records),
        by_rank=by_rank,
        new_last_period=new_last_period,
        by_status=dict(by_status),
    )


class StatsService:
    """Use case: dashboard statistics derived from the personnel store."""

    def __init__(
        self,
        personnel: PersonnelStore,
        *,
        window_days: int = NEW_PERSONNEL_WINDOW_DAYS,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._personnel = personnel
        self._window_days = int(window_days)
        self._clock = clock

    def current(self) -> Stats:
        now = self._clock() if self._clock else now_local()
        return compute_stats(self._personnel.list_all(), now=now, window_days=self._window_days)
