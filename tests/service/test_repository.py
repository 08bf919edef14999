"""Repository behaviour against a real SQLite database."""

import asyncio

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from kepegawaian.exceptions import NotFound, StoreUnavailable, ValidationError
from kepegawaian.models import DataDiri
from kepegawaian.repository import ResourceRepository
from kepegawaian.resources import AGAMA, JENIS_KELAMIN, PEGAWAI, PENDIDIKAN


@pytest.fixture
def agama_repo(db_session) -> ResourceRepository:
    return ResourceRepository(AGAMA, db_session, timeout=5.0)


@pytest.mark.asyncio
async def test_create_then_get_returns_same_fields(agama_repo):
    created = await agama_repo.create({"nama_agama": "Islam"})

    assert created.id is not None
    assert created.created_at is not None

    fetched = await agama_repo.get(created.id)
    assert fetched.nama_agama == "Islam"


@pytest.mark.asyncio
async def test_ids_are_assigned_incrementally(agama_repo):
    first = await agama_repo.create({"nama_agama": "Islam"})
    second = await agama_repo.create({"nama_agama": "Buddha"})
    assert second.id > first.id


@pytest.mark.asyncio
async def test_get_missing_row_raises_not_found(agama_repo):
    with pytest.raises(NotFound, match="Agama not found"):
        await agama_repo.get(12345)


@pytest.mark.asyncio
async def test_create_requires_required_fields(agama_repo):
    with pytest.raises(ValidationError, match="nama_agama"):
        await agama_repo.create({})
    assert await agama_repo.list() == []


@pytest.mark.asyncio
async def test_list_filter_is_subset_of_unfiltered(agama_repo):
    for name in ("Islam", "Kristen Protestan", "Kristen Katolik", "Hindu"):
        await agama_repo.create({"nama_agama": name})

    everything = await agama_repo.list()
    filtered = await agama_repo.list("Kristen")

    assert {r.id for r in filtered} <= {r.id for r in everything}
    assert [r.nama_agama for r in filtered] == ["Kristen Protestan", "Kristen Katolik"]
    assert all("Kristen" in r.nama_agama for r in filtered)


@pytest.mark.asyncio
async def test_list_filter_treats_wildcards_literally(agama_repo):
    await agama_repo.create({"nama_agama": "100%"})
    await agama_repo.create({"nama_agama": "1000"})

    assert [r.nama_agama for r in await agama_repo.list("0%")] == ["100%"]
    assert [r.nama_agama for r in await agama_repo.list("_")] == []


@pytest.mark.asyncio
async def test_update_overwrites_fields_and_echoes_payload(agama_repo):
    created = await agama_repo.create({"nama_agama": "Islam"})

    data = await agama_repo.update(created.id, {"nama_agama": "Kristen", "bogus": "x"})

    assert data == {"id": created.id, "nama_agama": "Kristen"}
    assert (await agama_repo.get(created.id)).nama_agama == "Kristen"


@pytest.mark.asyncio
async def test_update_missing_row_leaves_store_unchanged(agama_repo):
    created = await agama_repo.create({"nama_agama": "Islam"})

    with pytest.raises(NotFound):
        await agama_repo.update(created.id + 100, {"nama_agama": "Kristen"})

    rows = await agama_repo.list()
    assert [(r.id, r.nama_agama) for r in rows] == [(created.id, "Islam")]


@pytest.mark.asyncio
async def test_delete_is_idempotent(agama_repo):
    created = await agama_repo.create({"nama_agama": "Islam"})

    await agama_repo.delete(created.id)
    await agama_repo.delete(created.id)
    await agama_repo.delete(999)

    assert await agama_repo.list() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("row_id", [0, -1, 10**20])
async def test_ids_outside_the_key_range_are_never_present(agama_repo, row_id):
    await agama_repo.create({"nama_agama": "Islam"})

    with pytest.raises(NotFound, match="Agama not found"):
        await agama_repo.get(row_id)
    with pytest.raises(NotFound):
        await agama_repo.update(row_id, {"nama_agama": "Kristen"})
    await agama_repo.delete(row_id)

    assert [r.nama_agama for r in await agama_repo.list()] == ["Islam"]


@pytest.mark.asyncio
async def test_absent_columns_persist_as_empty_strings(db_session):
    repo = ResourceRepository(JENIS_KELAMIN, db_session)
    created = await repo.create({"jenis_kelamin": "Perempuan"})

    row = await db_session.get(DataDiri, created.id)
    assert row.jenis_kelamin == "Perempuan"
    assert row.nama == ""
    assert row.pendidikan == ""


@pytest.mark.asyncio
async def test_shared_table_resources_only_touch_their_columns(db_session):
    pegawai = ResourceRepository(PEGAWAI, db_session)
    pendidikan = ResourceRepository(PENDIDIKAN, db_session)

    created = await pegawai.create({"nama": "Siti", "nik": "3201", "pendidikan": "S1"})
    await pendidikan.update(created.id, {"pendidikan": "S2"})
    db_session.expire_all()

    row = await pegawai.get(created.id)
    assert row.pendidikan == "S2"
    assert row.nama == "Siti"
    assert row.nik == "3201"


@pytest.mark.asyncio
async def test_store_failure_becomes_store_unavailable(agama_repo, monkeypatch):
    async def broken_execute(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection refused"))

    monkeypatch.setattr(AsyncSession, "execute", broken_execute)

    with pytest.raises(StoreUnavailable, match="Failed to Get All Agama"):
        await agama_repo.list()


@pytest.mark.asyncio
async def test_deadline_exceeded_becomes_store_unavailable(db_session, monkeypatch):
    async def slow_execute(*args, **kwargs):
        await asyncio.sleep(5)

    monkeypatch.setattr(AsyncSession, "execute", slow_execute)
    repo = ResourceRepository(AGAMA, db_session, timeout=0.01)

    with pytest.raises(StoreUnavailable, match="Failed to Delete Agama By ID"):
        await repo.delete(1)
