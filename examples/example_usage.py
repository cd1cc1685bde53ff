"""Example: drive the state holders directly (no Flask).

Controllers are thin; the workflow lives in repositories and state holders.
"""

import asyncio

from src.brigade_roster.brigade_roster.citations.state import CitationDetailHolder
from src.brigade_roster.brigade_roster.common.flow import Latency
from src.brigade_roster.brigade_roster.container import build_container
from src.brigade_roster.brigade_roster.personnel.state import PersonnelListHolder


async def main():
    container = build_container(latency=Latency().scaled(0.1))

    roster = PersonnelListHolder(container.personnel_repo)
    await roster.on_search_query_change("bombero")
    print([p.full_name for p in roster.state.personnel])

    detail = CitationDetailHolder(container.citation_repo, 3)
    await detail.start()
    print("before:", detail.state.citation.confirmed_attendees)

    detail.request_confirm()
    detail.accept_dialog()
    await detail.wait_idle()
    print("after:", detail.state.citation.confirmed_attendees)


if __name__ == "__main__":
    asyncio.run(main())
