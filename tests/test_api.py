"""API tests for todo endpoints."""

import uuid
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from todo_api.repositories import DocumentTodoRepository


def create(client: TestClient, title: str = "Buy milk", **extra) -> dict:
    response = client.post("/api/todos", json={"title": title, **extra})
    assert response.status_code == 201
    return response.json()


class TestHelloEndpoints:
    def test_hello_text(self, client: TestClient) -> None:
        response = client.get("/api/text")
        assert response.status_code == 200
        assert response.text == "Hello World!"
        assert response.headers["content-type"] == "text/plain; charset=utf-8"

    def test_hello_json(self, client: TestClient) -> None:
        response = client.get("/api/hello")
        assert response.status_code == 200
        assert response.json() == {"hello": "World"}

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestTodoAPI:
    """Test suite for Todo API endpoints."""

    def test_get_todos_empty(self, client: TestClient) -> None:
        response = client.get("/api/todos")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_todo_returns_location(self, client: TestClient) -> None:
        """Location header resolves to the created todo."""
        response = client.post("/api/todos", json={"title": "Buy milk"})
        assert response.status_code == 201

        todo = response.json()
        assert set(todo) == {"id", "title", "isComplete"}
        assert todo["title"] == "Buy milk"
        assert todo["isComplete"] is False
        assert uuid.UUID(todo["id"])
        assert response.headers["location"] == f"/api/todos/{todo['id']}"

        fetched = client.get(response.headers["location"])
        assert fetched.status_code == 200
        assert fetched.json() == todo

    def test_create_todo_with_completion_state(self, client: TestClient) -> None:
        todo = create(client, "Done already", isComplete=True)
        assert todo["isComplete"] is True

    def test_create_todo_ignores_client_id(self, client: TestClient) -> None:
        todo = create(client, "Mine", id="not-used")
        assert todo["id"] != "not-used"

    @pytest.mark.parametrize("payload", [{"title": ""}, {"title": "   "}, {"title": None}, {"isComplete": True}])
    def test_create_todo_invalid_title(self, client: TestClient, payload: dict) -> None:
        """Blank or missing titles are rejected and nothing is stored."""
        response = client.post("/api/todos", json=payload)
        assert response.status_code == 400
        assert response.headers["content-type"].startswith("application/problem+json")

        problem = response.json()
        assert problem["title"] == "One or more validation errors occurred."
        assert problem["status"] == 400
        assert problem["errors"] == {"title": ["The title field is required."]}

        assert client.get("/api/todos").json() == []

    def test_create_todo_invalid_completion_flag(self, client: TestClient) -> None:
        response = client.post("/api/todos", json={"title": "x", "isComplete": "maybe"})
        assert response.status_code == 400
        assert list(response.json()["errors"]) == ["isComplete"]

    def test_create_todo_malformed_body(self, client: TestClient) -> None:
        response = client.post(
            "/api/todos",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert "body" in response.json()["errors"]

    def test_get_nonexistent_todo(self, client: TestClient) -> None:
        response = client.get(f"/api/todos/{uuid.uuid4()}")
        assert response.status_code == 404
        assert response.content == b""

    def test_get_unparsable_id(self, client: TestClient) -> None:
        response = client.get("/api/todos/12345")
        assert response.status_code == 404
        assert response.content == b""

    def test_replace_todo(self, client: TestClient) -> None:
        todo = create(client, "Original")

        response = client.put(f"/api/todos/{todo['id']}", json={"title": "Updated", "isComplete": True})
        assert response.status_code == 204
        assert response.content == b""

        assert client.get(f"/api/todos/{todo['id']}").json() == {
            "id": todo["id"],
            "title": "Updated",
            "isComplete": True,
        }

    def test_replace_missing_todo(self, client: TestClient) -> None:
        response = client.put(f"/api/todos/{uuid.uuid4()}", json={"title": "Ghost"})
        assert response.status_code == 404

    def test_replace_missing_todo_no_content_variant(self, make_client) -> None:
        client = make_client(put_missing_no_content=True)
        response = client.put(f"/api/todos/{uuid.uuid4()}", json={"title": "Ghost"})
        assert response.status_code == 204
        assert client.get("/api/todos").json() == []

    def test_replace_validates_before_lookup(self, client: TestClient, monkeypatch) -> None:
        todo = create(client, "Keep me")
        lookup = AsyncMock(side_effect=AssertionError("store must not be touched"))
        monkeypatch.setattr(DocumentTodoRepository, "get", lookup)

        response = client.put(f"/api/todos/{todo['id']}", json={"title": ""})
        assert response.status_code == 400
        assert "title" in response.json()["errors"]
        lookup.assert_not_awaited()

    def test_mark_complete_is_idempotent(self, client: TestClient) -> None:
        todo = create(client)
        for _ in range(2):
            response = client.put(f"/api/todos/{todo['id']}/mark-complete")
            assert response.status_code == 204
        assert client.get(f"/api/todos/{todo['id']}").json()["isComplete"] is True

    def test_mark_incomplete(self, client: TestClient) -> None:
        todo = create(client, isComplete=True)
        response = client.put(f"/api/todos/{todo['id']}/mark-incomplete")
        assert response.status_code == 204
        assert client.get(f"/api/todos/{todo['id']}").json()["isComplete"] is False

    @pytest.mark.parametrize("action", ["mark-complete", "mark-incomplete"])
    def test_mark_missing_todo(self, client: TestClient, action: str) -> None:
        response = client.put(f"/api/todos/{uuid.uuid4()}/{action}")
        assert response.status_code == 404

    def test_complete_and_incomplete_partition_all(self, client: TestClient) -> None:
        first = create(client, "One")
        second = create(client, "Two", isComplete=True)
        third = create(client, "Three")
        client.put(f"/api/todos/{third['id']}/mark-complete")

        all_ids = {todo["id"] for todo in client.get("/api/todos").json()}
        complete = client.get("/api/todos/complete").json()
        incomplete = client.get("/api/todos/incomplete").json()
        complete_ids = {todo["id"] for todo in complete}
        incomplete_ids = {todo["id"] for todo in incomplete}

        assert complete_ids == {second["id"], third["id"]}
        assert incomplete_ids == {first["id"]}
        assert complete_ids | incomplete_ids == all_ids
        assert not complete_ids & incomplete_ids
        assert all(todo["isComplete"] for todo in complete)

    def test_delete_todo(self, client: TestClient) -> None:
        todo = create(client, "To delete")

        response = client.delete(f"/api/todos/{todo['id']}")
        assert response.status_code == 204

        response = client.get(f"/api/todos/{todo['id']}")
        assert response.status_code == 404

    def test_delete_missing_todo(self, client: TestClient) -> None:
        response = client.delete(f"/api/todos/{uuid.uuid4()}")
        assert response.status_code == 404

    def test_delete_all(self, client: TestClient) -> None:
        create(client, "One")
        create(client, "Two")

        response = client.delete("/api/todos/delete-all")
        assert response.status_code == 204
        assert client.get("/api/todos").json() == []

    def test_delete_all_not_implemented_variant(self, make_client) -> None:
        client = make_client(delete_all_enabled=False)
        create(client, "Survivor")

        response = client.delete("/api/todos/delete-all")
        assert response.status_code == 500
        assert len(client.get("/api/todos").json()) == 1

    def test_store_errors_surface_as_server_error(self, client: TestClient, monkeypatch) -> None:
        monkeypatch.setattr(
            DocumentTodoRepository,
            "list_all",
            AsyncMock(side_effect=RuntimeError("store offline")),
        )
        response = client.get("/api/todos")
        assert response.status_code == 500

    def test_server_error_not_logged_by_request_middleware(self, client: TestClient, monkeypatch, caplog) -> None:
        monkeypatch.setattr(
            DocumentTodoRepository,
            "list_all",
            AsyncMock(side_effect=RuntimeError("store offline")),
        )
        with caplog.at_level("ERROR"):
            assert client.get("/api/todos").status_code == 500
        assert not [record for record in caplog.records if record.name == "todo_api.main"]

    def test_request_id_is_echoed(self, client: TestClient) -> None:
        response = client.get("/api/hello", headers={"X-Request-ID": "req-123"})
        assert response.headers["x-request-id"] == "req-123"

        generated = client.get("/api/hello").headers["x-request-id"]
        assert uuid.UUID(generated)

    def test_custom_prefix(self, make_client) -> None:
        client = make_client(api_prefix="/v1")
        response = client.post("/v1/todos", json={"title": "Prefixed"})
        assert response.status_code == 201
        assert response.headers["location"] == f"/v1/todos/{response.json()['id']}"
        assert client.get("/api/todos").status_code == 404

    def test_apps_do_not_share_documents(self, make_client) -> None:
        first = make_client()
        create(first, "Only here")
        assert make_client().get("/api/todos").json() == []


class TestPostgresStore:
    """Requests go through a pooled connection when the database is enabled."""

    def test_list_uses_one_connection_per_request(self, client: TestClient, install_pool) -> None:
        conn = AsyncMock()
        conn.fetch.return_value = [{"id": 1, "title": "Row", "is_complete": False}]
        pool = install_pool(conn)

        response = client.get("/api/todos")
        assert response.status_code == 200
        assert response.json() == [{"id": 1, "title": "Row", "isComplete": False}]
        assert pool.acquired == pool.released == 1

    def test_create_returns_integer_location(self, client: TestClient, install_pool) -> None:
        conn = AsyncMock()
        conn.fetchrow.return_value = {"id": 42, "title": "Buy milk", "is_complete": False}
        install_pool(conn)

        response = client.post("/api/todos", json={"title": "Buy milk"})
        assert response.status_code == 201
        assert response.headers["location"] == "/api/todos/42"
        assert response.json() == {"id": 42, "title": "Buy milk", "isComplete": False}

    def test_non_integer_id_is_not_found(self, client: TestClient, install_pool) -> None:
        conn = AsyncMock()
        pool = install_pool(conn)

        response = client.get(f"/api/todos/{uuid.uuid4()}")
        assert response.status_code == 404
        conn.fetchrow.assert_not_awaited()
        assert pool.released == pool.acquired

    def test_connection_released_on_error(self, client: TestClient, install_pool) -> None:
        conn = AsyncMock()
        conn.fetch.side_effect = RuntimeError("connection reset")
        pool = install_pool(conn)

        response = client.get("/api/todos/complete")
        assert response.status_code == 500
        assert pool.acquired == pool.released == 1
