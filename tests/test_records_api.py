"""Tests for the records HTTP API."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from recstore.api import create_app, create_records_router
from recstore.config import StoreConfig
from recstore.store import ListFilter


def _mk_client(store, default_filter=ListFilter.INCOMPLETE):
    app = FastAPI()
    app.include_router(create_records_router(store, default_filter))
    return TestClient(app)


@pytest.fixture
def client(work_store):
    return _mk_client(work_store)


def test_list_defaults_to_incomplete(client):
    resp = client.get("/api/records")
    assert resp.status_code == 200
    assert [r["id"] for r in resp.json()] == [2, 3]


def test_list_all(client):
    resp = client.get("/api/records", params={"filter": "all"})
    body = resp.json()
    assert [r["id"] for r in body] == [1, 2, 3]
    assert body[0] == {"id": 1, "label": "Learn TS", "done": True}


def test_list_rejects_unknown_filter(client):
    assert client.get("/api/records", params={"filter": "completedOnly"}).status_code == 422


def test_router_default_filter_all(work_store):
    client = _mk_client(work_store, ListFilter.ALL)
    assert len(client.get("/api/records").json()) == 3


def test_get_record(client):
    resp = client.get("/api/records/2")
    assert resp.status_code == 200
    assert resp.json() == {"id": 2, "label": "Write spec", "done": False}


def test_get_missing_record_is_404(client):
    assert client.get("/api/records/999").status_code == 404


def test_counts_and_meta(client):
    assert client.get("/api/records/counts").json() == {"total": 3, "incomplete": 2}
    assert client.get("/api/records/meta").json() == {"name": "Work"}


def test_add_with_generated_id(client, work_store):
    resp = client.post("/api/records", json={"label": "Water plants"})
    assert resp.status_code == 201
    new_id = resp.json()["id"]
    assert new_id not in (1, 2, 3)
    assert work_store.get_by_id(new_id).label == "Water plants"


def test_add_with_explicit_id_overwrites(client, work_store):
    resp = client.post("/api/records", json={"label": "Learn Python", "id": 1})
    assert resp.json() == {"id": 1}
    assert work_store.get_by_id(1).label == "Learn Python"
    assert work_store.get_by_id(1).done is False
    assert work_store.count().total == 3


@pytest.mark.parametrize("label", ["", "   "])
def test_add_blank_label_is_422(client, work_store, label):
    resp = client.post("/api/records", json={"label": label, "id": 5})
    assert resp.status_code == 422
    assert work_store.get_by_id(5) is None


def test_complete(client, work_store):
    assert client.post("/api/records/3/complete").status_code == 204
    assert work_store.get_by_id(3).done is True


def test_complete_missing_is_noop(client, work_store):
    assert client.post("/api/records/999/complete").status_code == 204
    assert work_store.count().total == 3


def test_delete_record(client, work_store):
    assert client.delete("/api/records/2").status_code == 204
    assert 2 not in work_store
    assert client.delete("/api/records/2").status_code == 204


def test_purge_completed(client, work_store):
    assert client.delete("/api/records/completed").status_code == 204
    assert work_store.count().total == 2
    assert work_store.get_by_id(1) is None


def test_create_app_builds_store_from_config():
    app = create_app(config=StoreConfig(default_name="Catalog", default_filter="all"))
    client = TestClient(app)
    client.post("/api/records", json={"label": "Running Shoes"})
    client.post("/api/records", json={"label": "Hat"})
    assert client.get("/api/records/meta").json() == {"name": "Catalog"}
    assert [r["label"] for r in client.get("/api/records").json()] == ["Running Shoes", "Hat"]
    assert app.state.store.count().total == 2
