from datetime import datetime

import pytest

from src.brigade_roster.brigade_roster.common.flow import Latency
from src.brigade_roster.brigade_roster.common.resource import Error, Loading, Success
from src.brigade_roster.brigade_roster.personnel.model import PersonnelDraft
from src.brigade_roster.brigade_roster.personnel.repository import NOT_FOUND, PersonnelRepository
from src.brigade_roster.brigade_roster.personnel.store import InMemoryPersonnelStore
from src.brigade_roster.brigade_roster.stats.service import StatsService

NOW = datetime(2025, 10, 24, 10, 0)


class ExplodingStore:
    """Store fake whose every call fails."""

    def __init__(self):
        self.calls = 0

    def _boom(self, *args, **kwargs):
        self.calls += 1
        raise RuntimeError("boom")

    list_all = list_by_status = search = get_by_id = create = update = delete = _boom


def _repo(store=None):
    store = store if store is not None else InMemoryPersonnelStore(clock=lambda: NOW)
    return PersonnelRepository(store, StatsService(store, clock=lambda: NOW), latency=Latency.none()), store


def _draft(given_names="Ana", status="Activo", rank="Bombero"):
    return PersonnelDraft(given_names=given_names, surnames="Soto", rank=rank, status=status)


async def _collect(stream):
    return [r async for r in stream]


@pytest.mark.asyncio
async def test_list_emits_loading_then_success():
    repo, store = _repo()
    store.create(_draft("Ana"))
    store.create(_draft("Luis", status="Inactivo"))

    emissions = await _collect(repo.list_personnel())

    assert isinstance(emissions[0], Loading)
    assert len(emissions) == 2
    assert isinstance(emissions[1], Success)
    assert [p.given_names for p in emissions[1].data] == ["Ana"]


@pytest.mark.asyncio
async def test_search_takes_precedence_over_status():
    repo, store = _repo()
    store.create(_draft("Ana"))
    store.create(_draft("Luis", status="Inactivo"))

    emissions = await _collect(repo.list_personnel(search="luis", status="Activo"))

    assert [p.given_names for p in emissions[-1].data] == ["Luis"]


@pytest.mark.asyncio
async def test_empty_list_is_success():
    repo, _ = _repo()

    emissions = await _collect(repo.list_personnel(status="Todos"))

    assert emissions[-1] == Success([])


@pytest.mark.asyncio
async def test_not_found_becomes_error_for_get_update_delete():
    repo, store = _repo()
    existing = store.create(_draft())
    store.delete(existing.personnel_id)

    get = await _collect(repo.get_personnel(existing.personnel_id))
    update = await _collect(repo.update_personnel(existing))
    delete = await _collect(repo.delete_personnel(existing.personnel_id))

    for emissions in (get, update, delete):
        assert isinstance(emissions[0], Loading)
        assert emissions[-1] == Error(NOT_FOUND)
        assert len(emissions) == 2


@pytest.mark.asyncio
async def test_create_update_delete_succeed():
    repo, store = _repo()

    created = (await _collect(repo.create_personnel(_draft())))[-1]
    assert isinstance(created, Success)
    assert created.data.personnel_id == 1

    updated = (await _collect(repo.update_personnel(created.data)))[-1]
    assert isinstance(updated, Success)

    deleted = (await _collect(repo.delete_personnel(1)))[-1]
    assert deleted == Success(True)
    assert store.list_all() == []


@pytest.mark.asyncio
async def test_store_failures_become_error_and_are_not_raised():
    store = ExplodingStore()
    repo, _ = _repo(store)

    listed = await _collect(repo.list_personnel())
    created = await _collect(repo.create_personnel(_draft()))

    assert listed[-1] == Error("Error inesperado: boom")
    assert created[-1] == Error("Error al crear bombero: boom")


@pytest.mark.asyncio
async def test_loading_is_emitted_before_the_store_is_touched():
    store = ExplodingStore()
    repo, _ = _repo(store)
    stream = repo.list_personnel()

    first = await stream.__anext__()

    assert isinstance(first, Loading)
    assert store.calls == 0
    await stream.aclose()


@pytest.mark.asyncio
async def test_stats_are_recomputed_on_every_request():
    repo, store = _repo()
    store.create(_draft())

    first = (await _collect(repo.get_stats()))[-1]
    store.create(_draft("Luis"))
    second = (await _collect(repo.get_stats()))[-1]

    assert first.data.total == 1
    assert second.data.total == 2
