"""Unit tests for the JSON file document store."""

import json

import pytest

from portfolio.domain.entities import PortfolioDocument
from portfolio.infrastructure.storage import JsonFileDocumentStore


@pytest.fixture
def store(tmp_path) -> JsonFileDocumentStore:
    return JsonFileDocumentStore(tmp_path / "data" / "database.json")


@pytest.mark.asyncio
async def test_initialize_creates_directory_and_seed(store: JsonFileDocumentStore):
    created = await store.initialize()

    assert created is True
    assert store.path.exists()
    document = await store.read()
    assert [p["name"] for p in document.projects] == [
        "E-commerce Platform",
        "Healthcare App",
        "Corporate Website",
    ]
    assert len(document.clients) == 3
    assert document.contacts == []
    assert document.newsletter == []
    assert [a["time"] for a in document.activity] == ["2 hours ago", "1 day ago", "2 days ago"]


@pytest.mark.asyncio
async def test_initialize_never_overwrites(store: JsonFileDocumentStore):
    store.path.parent.mkdir(parents=True)
    store.path.write_text(json.dumps({"projects": [{"id": 9}]}), encoding="utf-8")

    created = await store.initialize()

    assert created is False
    document = await store.read()
    assert document.projects == [{"id": 9}]
    assert document.clients == []


@pytest.mark.asyncio
async def test_write_then_read_round_trips(store: JsonFileDocumentStore):
    await store.initialize()
    document = PortfolioDocument(
        projects=[{"id": 1, "name": "Ünïcode", "tags": ["a"], "meta": {"n": 1.5, "ok": True}}],
        contacts=[{"id": 1, "fullname": "X", "note": None}],
        extras={"version": 2},
    )

    await store.write(document)
    loaded = await store.read()

    assert loaded == document
    assert loaded.to_dict() == document.to_dict()


@pytest.mark.asyncio
async def test_written_file_is_indented_json(store: JsonFileDocumentStore):
    await store.initialize()
    text = store.path.read_text(encoding="utf-8")
    assert text.startswith('{\n  "projects": [')


@pytest.mark.asyncio
async def test_read_missing_file_raises(store: JsonFileDocumentStore):
    with pytest.raises(FileNotFoundError):
        await store.read()


@pytest.mark.asyncio
async def test_read_malformed_file_raises(store: JsonFileDocumentStore):
    store.path.parent.mkdir(parents=True)
    store.path.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        await store.read()


@pytest.mark.asyncio
async def test_transaction_writes_on_success(store: JsonFileDocumentStore):
    await store.initialize()
    async with store.transaction() as document:
        document.newsletter.append({"id": 1, "email": "a@x.com"})

    assert (await store.read()).newsletter == [{"id": 1, "email": "a@x.com"}]


@pytest.mark.asyncio
async def test_transaction_skips_write_on_error(store: JsonFileDocumentStore):
    await store.initialize()
    before = store.path.read_text(encoding="utf-8")

    with pytest.raises(RuntimeError):
        async with store.transaction() as document:
            document.projects.clear()
            raise RuntimeError("boom")

    assert store.path.read_text(encoding="utf-8") == before
