from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class RankCount:
    rank: str
    count: int


@dataclass(frozen=True)
class Stats:
    """Read-model del dashboard; se recalcula en cada consulta."""

    total_active: int
    total_inactive: int
    total: int
    by_rank: List[RankCount] = field(default_factory=list)
    new_last_period: int = 0
    by_status: Dict[str, int] = field(default_factory=dict)


def stats_to_dict(stats: Stats) -> dict:
    return {
        "total_active": stats.total_active,
        "total_inactive": stats.total_inactive,
        "total": stats.total,
        "by_rank": [{"rank": rc.rank, "count": rc.count} for rc in stats.by_rank],
        "new_last_period": stats.new_last_period,
        "by_status": dict(stats.by_status),
    }
