"""Storage failures surface as 500 with the raw message."""

import pytest
from fastapi.testclient import TestClient

from catalog_api.dependencies import get_storage
from catalog_api.errors import StorageError
from catalog_api.main import app


class BrokenStorage:
    """Storage double whose every call fails."""

    def insert(self, model, fields):
        raise StorageError("connection refused", "insert")

    def find_all(self, model):
        raise StorageError("connection refused", "select")

    def find_by_key(self, model, key):
        raise StorageError("connection refused", "select")

    def update_where(self, model, key, fields):
        raise StorageError("connection refused", "update")

    def delete_where(self, model, key):
        raise StorageError("connection refused", "delete")


@pytest.fixture
def broken_client():
    app.dependency_overrides[get_storage] = BrokenStorage
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.mark.parametrize(
    "method,path,body",
    [
        ("post", "/products", {"name": "x"}),
        ("get", "/products", None),
        ("get", "/attributes/1", None),
        ("put", "/categories/1", {"name": "x"}),
        ("delete", "/categories/1", None),
    ],
)
def test_storage_error_becomes_500(broken_client, method, path, body):
    kwargs = {"json": body} if body is not None else {}
    r = getattr(broken_client, method)(path, **kwargs)
    assert r.status_code == 500
    assert r.json() == {"error": "connection refused"}


def test_database_error_message_is_exposed(client, engine):
    with engine.begin() as connection:
        connection.exec_driver_sql("DROP TABLE products")

    r = client.get("/products")
    assert r.status_code == 500
    assert "no such table" in r.json()["error"]


TOO_LARGE_FOR_SQLITE = 99999999999999999999


@pytest.mark.parametrize("method", ["get", "delete"])
def test_out_of_range_path_id_becomes_json_500(client, method):
    r = getattr(client, method)(f"/products/{TOO_LARGE_FOR_SQLITE}")
    assert r.status_code == 500
    assert r.headers["content-type"].startswith("application/json")
    assert "error" in r.json()


def test_out_of_range_update_id_becomes_json_500(client):
    r = client.put(f"/attributes/{TOO_LARGE_FOR_SQLITE}", json={"attributeName": "x"})
    assert r.status_code == 500
    assert "error" in r.json()


def test_out_of_range_category_id_becomes_json_500(client):
    r = client.post("/products", json={"name": "x", "categoryId": TOO_LARGE_FOR_SQLITE})
    assert r.status_code == 500
    assert r.headers["content-type"].startswith("application/json")
    assert "error" in r.json()

    # The failed insert was rolled back and the next request still works
    assert client.post("/products", json={"name": "y"}).json()["id"] == 1


class ExplodingStorage(BrokenStorage):
    """Storage double raising something other than StorageError."""

    def find_all(self, model):
        raise RuntimeError("unexpected failure")


def test_unexpected_exception_becomes_json_500():
    app.dependency_overrides[get_storage] = ExplodingStorage
    try:
        r = TestClient(app, raise_server_exceptions=False).get("/categories")
    finally:
        app.dependency_overrides.clear()

    assert r.status_code == 500
    assert r.json() == {"error": "unexpected failure"}
