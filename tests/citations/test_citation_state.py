from datetime import datetime

import pytest

from src.brigade_roster.brigade_roster.citations.repository import CitationRepository
from src.brigade_roster.brigade_roster.citations.seed import demo_citations
from src.brigade_roster.brigade_roster.citations.state import (
    INVALID_ID,
    AttendanceAction,
    CitationDetailHolder,
    CitationListHolder,
)
from src.brigade_roster.brigade_roster.citations.store import InMemoryCitationStore
from src.brigade_roster.brigade_roster.common.flow import Latency
from src.brigade_roster.brigade_roster.common.resource import Error, Success
from src.brigade_roster.brigade_roster.core.enums import ActivityType, CitationStatus, RejectPolicy

NOW = datetime(2025, 10, 24, 10, 0)


class CountingRepo(CitationRepository):
    """Real repository that also records which operations were called."""

    def __init__(self, store):
        super().__init__(store, latency=Latency.none())
        self.calls = []

    def list_citations(self, **kwargs):
        self.calls.append(("list", kwargs))
        return super().list_citations(**kwargs)

    def get_citation(self, citation_id):
        self.calls.append(("get", citation_id))
        return super().get_citation(citation_id)

    def confirm_attendance(self, citation_id):
        self.calls.append(("confirm", citation_id))
        return super().confirm_attendance(citation_id)

    def reject_attendance(self, citation_id):
        self.calls.append(("reject", citation_id))
        return super().reject_attendance(citation_id)

    def names(self):
        return [name for name, _ in self.calls]


def _repo(**store_kwargs):
    return CountingRepo(InMemoryCitationStore(demo_citations(NOW), clock=lambda: NOW, **store_kwargs))


@pytest.mark.asyncio
async def test_list_filters_are_passed_together():
    repo = _repo()
    holder = CitationListHolder(repo)

    await holder.set_status_filter(CitationStatus.PENDING)
    await holder.set_activity_filter(ActivityType.MEETING)

    assert repo.calls[-1] == ("list", {"status": CitationStatus.PENDING, "activity_type": ActivityType.MEETING})
    assert [c.citation_id for c in holder.state.citations] == [3]

    await holder.clear_filters()
    assert holder.state.status_filter is None and holder.state.activity_filter is None
    assert len(holder.state.citations) == 5


@pytest.mark.asyncio
async def test_list_empty_screen_for_no_matches():
    holder = CitationListHolder(_repo())

    await holder.set_status_filter(CitationStatus.CANCELLED)

    assert holder.state.screen == "empty"


@pytest.mark.asyncio
async def test_list_confirm_reloads_list():
    repo = _repo()
    holder = CitationListHolder(repo)
    await holder.load()

    holder.confirm_attendance(3)
    await holder.wait_idle()

    assert repo.names() == ["list", "confirm", "list"]
    meeting = next(c for c in holder.state.citations if c.citation_id == 3)
    assert meeting.confirmed_attendees == 4


@pytest.mark.asyncio
async def test_list_failed_attendance_does_not_reload():
    repo = _repo()
    holder = CitationListHolder(repo)

    holder.reject_attendance(99)
    await holder.wait_idle()

    assert repo.names() == ["reject"]


@pytest.mark.asyncio
async def test_list_refresh_clears_flag():
    holder = CitationListHolder(_repo())

    await holder.refresh()

    assert holder.state.is_refreshing is False
    assert holder.state.screen == "list"


@pytest.mark.parametrize("bad_id", [0, -1, None, True])
def test_detail_invalid_id_is_immediate_error(bad_id):
    repo = _repo()
    holder = CitationDetailHolder(repo, bad_id)

    assert holder.state.error == INVALID_ID
    assert holder.start() is None
    assert repo.calls == []


@pytest.mark.asyncio
async def test_confirm_waits_for_dialog_acceptance():
    repo = _repo()
    holder = CitationDetailHolder(repo, 3)
    await holder.start()

    holder.request_confirm()
    assert holder.state.show_dialog
    assert holder.state.pending_action is AttendanceAction.CONFIRM
    assert "confirm" not in repo.names()

    holder.dismiss_dialog()
    assert not holder.state.show_dialog
    assert holder.accept_dialog() is None
    assert "confirm" not in repo.names()


@pytest.mark.asyncio
async def test_accepted_confirm_dispatches_and_reloads_detail():
    repo = _repo()
    holder = CitationDetailHolder(repo, 3)
    await holder.start()

    holder.request_confirm()
    holder.accept_dialog()
    await holder.wait_idle()

    assert repo.names() == ["get", "confirm", "get"]
    assert isinstance(holder.state.confirmation, Success)
    assert holder.state.citation.confirmed_attendees == 4
    assert not holder.state.show_dialog

    holder.clear_confirmation()
    assert holder.state.confirmation is None


@pytest.mark.asyncio
async def test_accepted_reject_reloads_even_when_nothing_changes():
    repo = _repo()
    holder = CitationDetailHolder(repo, 3)
    await holder.start()

    holder.request_reject()
    holder.accept_dialog()
    await holder.wait_idle()

    assert repo.names() == ["get", "reject", "get"]
    assert holder.state.citation.confirmed_attendees == 3


@pytest.mark.asyncio
async def test_reject_with_decrement_policy():
    holder = CitationDetailHolder(_repo(reject_policy=RejectPolicy.DECREMENT), 3)
    await holder.start()

    holder.request_reject()
    holder.accept_dialog()
    await holder.wait_idle()

    assert holder.state.citation.confirmed_attendees == 2


@pytest.mark.asyncio
async def test_attendance_on_deleted_citation_reports_error_without_reload():
    repo = _repo()
    holder = CitationDetailHolder(repo, 3)
    await holder.start()
    repo._store.delete(3)

    holder.request_confirm()
    holder.accept_dialog()
    await holder.wait_idle()

    assert repo.names() == ["get", "confirm"]
    assert holder.state.confirmation == Error("Citación no encontrada")
    assert holder.state.citation.citation_id == 3


@pytest.mark.asyncio
async def test_list_refresh_flag_clears_when_filter_change_supersedes_it():
    holder = CitationListHolder(_repo())
    await holder.load()

    holder.refresh()
    await holder.set_status_filter(CitationStatus.COMPLETED)
    await holder.wait_idle()

    assert holder.state.is_refreshing is False
    assert [c.citation_id for c in holder.state.citations] == [5]
