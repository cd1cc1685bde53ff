import asyncio
from datetime import datetime

import pytest

from src.brigade_roster.brigade_roster.common.resource import Error, Loading, Success
from src.brigade_roster.brigade_roster.personnel.model import Personnel
from src.brigade_roster.brigade_roster.personnel.repository import NOT_FOUND
from src.brigade_roster.brigade_roster.personnel.state import (
    INVALID_ID,
    PersonnelDetailHolder,
    PersonnelListHolder,
)

NOW = datetime(2025, 10, 24, 10, 0)


def _personnel(pid, given_names="Ana", status="Activo"):
    return Personnel(
        personnel_id=pid,
        given_names=given_names,
        surnames="Soto",
        rank="Bombero",
        status=status,
        created_at=NOW,
        updated_at=NOW,
    )


class FakePersonnelRepo:
    """Repository fake that records calls and replays scripted results."""

    def __init__(self, records=(), *, delays=None, fail_with=None):
        self.records = list(records)
        self.delays = delays or {}
        self.fail_with = fail_with
        self.list_calls = []
        self.get_calls = []
        self.delete_calls = []

    def list_personnel(self, *, search="", status="Activo"):
        self.list_calls.append((search, status))
        return self._list(search, status)

    async def _list(self, search, status):
        yield Loading()
        await asyncio.sleep(self.delays.get(search, 0))
        if self.fail_with:
            yield Error(self.fail_with)
            return
        if search:
            yield Success([p for p in self.records if search.lower() in p.full_name.lower()])
        else:
            yield Success([p for p in self.records if status in ("Todos", p.status)])

    def get_personnel(self, personnel_id):
        self.get_calls.append(personnel_id)
        return self._get(personnel_id)

    async def _get(self, personnel_id):
        yield Loading()
        found = next((p for p in self.records if p.personnel_id == personnel_id), None)
        yield Success(found) if found else Error(NOT_FOUND)

    def delete_personnel(self, personnel_id):
        self.delete_calls.append(personnel_id)
        return self._delete(personnel_id)

    async def _delete(self, personnel_id):
        yield Loading()
        self.records = [p for p in self.records if p.personnel_id != personnel_id]
        yield Success(True)


@pytest.mark.asyncio
async def test_list_starts_idle_with_active_filter():
    holder = PersonnelListHolder(FakePersonnelRepo())

    assert holder.state.result is None
    assert holder.state.status_filter == "Activo"
    assert holder.state.screen == "idle"


@pytest.mark.asyncio
async def test_list_load_goes_through_loading_to_list():
    repo = FakePersonnelRepo([_personnel(1), _personnel(2, status="Inactivo")])
    holder = PersonnelListHolder(repo)
    screens = []
    holder.subscribe(lambda state: screens.append(state.screen))

    await holder.load()

    assert screens == ["idle", "loading", "list"]
    assert [p.personnel_id for p in holder.state.personnel] == [1]
    assert repo.list_calls == [("", "Activo")]


@pytest.mark.asyncio
async def test_list_empty_and_error_screens():
    empty = PersonnelListHolder(FakePersonnelRepo())
    await empty.load()
    assert empty.state.screen == "empty"

    failing = PersonnelListHolder(FakePersonnelRepo(fail_with="Error inesperado: boom"))
    await failing.load()
    assert failing.state.screen == "error"
    assert failing.state.error == "Error inesperado: boom"

    failing.clear_error()
    assert failing.state.screen == "idle"


@pytest.mark.asyncio
async def test_query_and_filter_changes_refetch_with_full_parameters():
    repo = FakePersonnelRepo([_personnel(1, "Ana"), _personnel(2, "Luis", status="Licencia")])
    holder = PersonnelListHolder(repo)

    await holder.on_status_filter_change("Licencia")
    await holder.on_search_query_change("ana")

    assert repo.list_calls == [("", "Licencia"), ("ana", "Licencia")]
    assert holder.state.search_query == "ana"
    assert [p.personnel_id for p in holder.state.personnel] == [1]


@pytest.mark.asyncio
async def test_superseded_query_never_overwrites_newer_result():
    repo = FakePersonnelRepo([_personnel(1, "Ana"), _personnel(2, "Luis")], delays={"an": 0.05})
    holder = PersonnelListHolder(repo)

    slow = holder.on_search_query_change("an")
    await asyncio.sleep(0.01)
    fast = holder.on_search_query_change("luis")
    await fast
    await asyncio.sleep(0.1)

    assert slow.cancelled()
    assert [p.personnel_id for p in holder.state.personnel] == [2]
    assert holder.state.search_query == "luis"


@pytest.mark.asyncio
async def test_refresh_keeps_result_visible_and_clears_flag():
    repo = FakePersonnelRepo([_personnel(1)])
    holder = PersonnelListHolder(repo)
    await holder.load()
    seen = []
    holder.subscribe(lambda state: seen.append((state.is_refreshing, type(state.result).__name__)))

    await holder.refresh()

    assert all(name == "Success" for _, name in seen)
    assert seen[1] == (True, "Success")
    assert seen[-1] == (False, "Success")
    assert holder.state.is_refreshing is False


@pytest.mark.asyncio
async def test_refresh_flag_clears_on_error_too():
    holder = PersonnelListHolder(FakePersonnelRepo(fail_with="Error inesperado"))

    await holder.refresh()

    assert holder.state.is_refreshing is False
    assert holder.state.error == "Error inesperado"


@pytest.mark.parametrize("bad_id", [None, 0, -3, True])
def test_detail_invalid_id_is_immediate_error(bad_id):
    repo = FakePersonnelRepo([_personnel(1)])
    holder = PersonnelDetailHolder(repo, bad_id)

    assert holder.state.error == INVALID_ID
    assert holder.start() is None
    assert repo.get_calls == []


@pytest.mark.asyncio
async def test_detail_loads_record_and_reports_not_found():
    repo = FakePersonnelRepo([_personnel(1)])

    found = PersonnelDetailHolder(repo, 1)
    await found.start()
    assert found.state.personnel.personnel_id == 1

    missing = PersonnelDetailHolder(repo, 7)
    await missing.start()
    assert missing.state.error == NOT_FOUND
    assert missing.state.personnel is None


@pytest.mark.asyncio
async def test_detail_delete_requires_loaded_record():
    repo = FakePersonnelRepo([_personnel(1)])
    holder = PersonnelDetailHolder(repo, 1)

    assert holder.delete() is None

    await holder.start()
    await holder.delete()

    assert holder.state.deleted
    assert repo.delete_calls == [1]


@pytest.mark.asyncio
async def test_refresh_flag_clears_when_query_change_supersedes_it():
    repo = FakePersonnelRepo([_personnel(1, "Ana"), _personnel(2, "Luis")])
    holder = PersonnelListHolder(repo)
    await holder.load()

    holder.refresh()
    await holder.on_search_query_change("luis")
    await holder.wait_idle()

    assert holder.state.is_refreshing is False
    assert holder.state.search_query == "luis"
    assert [p.personnel_id for p in holder.state.personnel] == [2]
