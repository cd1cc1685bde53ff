"""Dashboard state holder: statistics plus the signed-in user."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional

from ..auth.model import User
from ..auth.repository import AuthRepository
from ..common.resource import Loading, Resource
from ..common.state_holder import StateHolder
from ..personnel.repository import PersonnelRepository
from .model import Stats


@dataclass(frozen=True)
class DashboardState:
    stats: Optional[Resource[Stats]] = None
    current_user: Optional[User] = None
    logged_out: bool = False

    @property
    def is_loading(self) -> bool:
        return isinstance(self.stats, Loading)


class DashboardHolder(StateHolder[DashboardState]):
    def __init__(self, personnel: PersonnelRepository, auth: AuthRepository):
        super().__init__(DashboardState(current_user=auth.current_user()))
        self._personnel = personnel
        self._auth = auth

    def load_stats(self) -> asyncio.Task:
        return self._launch("stats", self._personnel.get_stats(), lambda resource: self._update(stats=resource))

    start = load_stats
    refresh = load_stats

    def logout(self) -> None:
        self._auth.logout()
        self._update(current_user=None, logged_out=True)
