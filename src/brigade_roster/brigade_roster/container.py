from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .auth.directory import InMemoryCredentialDirectory, demo_directory
from .auth.repository import AuthRepository
from .auth.session import InMemorySessionStore
from .citations.repository import CitationRepository
from .citations.seed import demo_citations
from .citations.store import InMemoryCitationStore
from .common.datetime_utils import now_local
from .common.flow import Latency
from .core.constants import NEW_PERSONNEL_WINDOW_DAYS
from .core.enums import RejectPolicy
from .personnel.repository import PersonnelRepository
from .personnel.seed import demo_personnel
from .personnel.store import InMemoryPersonnelStore
from .stats.service import StatsService


@dataclass(frozen=True)
class Container:
    personnel_store: InMemoryPersonnelStore
    citation_store: InMemoryCitationStore
    session_store: InMemorySessionStore
    credentials: InMemoryCredentialDirectory

    stats_service: StatsService
    personnel_repo: PersonnelRepository
    citation_repo: CitationRepository
    auth_repo: AuthRepository


def build_container(
    *,
    seed_demo_data: bool = True,
    latency: Optional[Latency] = None,
    reject_policy: RejectPolicy = RejectPolicy.NOOP,
    new_personnel_window_days: int = NEW_PERSONNEL_WINDOW_DAYS,
) -> Container:
    latency = latency or Latency()

    if seed_demo_data:
        personnel_store = InMemoryPersonnelStore(demo_personnel())
        citation_store = InMemoryCitationStore(demo_citations(now_local()), reject_policy=reject_policy)
        credentials = demo_directory()
    else:
        personnel_store = InMemoryPersonnelStore()
        citation_store = InMemoryCitationStore(reject_policy=reject_policy)
        credentials = InMemoryCredentialDirectory()

    session_store = InMemorySessionStore()
    stats_service = StatsService(personnel_store, window_days=new_personnel_window_days)

    return Container(
        personnel_store=personnel_store,
        citation_store=citation_store,
        session_store=session_store,
        credentials=credentials,
        stats_service=stats_service,
        personnel_repo=PersonnelRepository(personnel_store, stats_service, latency=latency),
        citation_repo=CitationRepository(citation_store, latency=latency),
        auth_repo=AuthRepository(credentials, session_store, latency=latency),
    )
