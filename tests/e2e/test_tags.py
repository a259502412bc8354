"""End-to-end tests for tag endpoints."""

import asyncio
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from waresys.domain.error import DuplicateKeyError, StoreError
from waresys.domain.repository import ItemRepository
from waresys.interface.api.app import create_app
from waresys.persistence.repository.inmemory import InMemoryTagRepository
from waresys.util.di.container import setup_di
from tests.di import build_test_container
from tests.factories import make_item

MISSING_ID = "7f3c1a9e-52d4-4b8e-9a61-0c2f5e8d1b47"


@pytest.fixture
def test_container():
    """Container backed by in-memory repositories."""
    return build_test_container()


@pytest.fixture
def client(test_container):
    """Create test client with test container."""
    app_instance = create_app()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


@pytest.fixture
def item(test_container):
    """An item stored before any request is made."""

    async def _seed():
        item_repository = await test_container.get(ItemRepository)
        return await item_repository.save(make_item())

    return asyncio.run(_seed())


class TestTagLifecycle:
    """Provision, classify, list and delete a tag over HTTP."""

    def test_full_lifecycle(self, client, auth_headers, item):
        # First scan provisions the tag
        response = client.get("/tags/uid/04A224B2C35E80", headers=auth_headers)
        assert response.status_code == 201
        tag = response.json()
        assert tag["uid"] == "04A224B2C35E80"
        assert tag["type"] == "unknown"
        assert tag["item"] is None
        assert datetime.fromisoformat(tag["created_at"]).tzinfo is not None

        # Link it to an item
        response = client.put(
            f"/tags/{tag['id']}",
            json={"type": "item", "item": str(item.id)},
            headers=auth_headers,
        )
        assert response.status_code == 200
        updated = response.json()
        assert updated["type"] == "item"
        assert updated["item"]["id"] == str(item.id)
        assert updated["item"]["name"] == item.name

        # List shows the item as a bare id
        response = client.get("/tags", headers=auth_headers)
        assert response.status_code == 200
        listed = response.json()
        assert len(listed) == 1
        assert listed[0]["id"] == tag["id"]
        assert listed[0]["item"] == str(item.id)

        # Delete, then it's gone
        response = client.delete(f"/tags/{tag['id']}", headers=auth_headers)
        assert response.status_code == 204
        assert response.content == b""

        response = client.get(f"/tags/{tag['id']}", headers=auth_headers)
        assert response.status_code == 404

    def test_second_uid_lookup_returns_existing(self, client, auth_headers):
        first = client.get("/tags/uid/ABC123", headers=auth_headers)
        second = client.get("/tags/uid/ABC123", headers=auth_headers)

        assert first.status_code == 201
        assert second.status_code == 200
        assert second.json()["id"] == first.json()["id"]

    @pytest.mark.parametrize("key", ["id", "_id"])
    def test_update_accepts_expanded_item(self, client, auth_headers, item, key):
        tag = client.get("/tags/uid/ABC123", headers=auth_headers).json()

        response = client.put(
            f"/tags/{tag['id']}",
            json={"type": "item", "item": {key: str(item.id), "name": item.name}},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["item"]["id"] == str(item.id)

    def test_update_with_null_item_unlinks(self, client, auth_headers, item):
        tag = client.get("/tags/uid/ABC123", headers=auth_headers).json()
        client.put(
            f"/tags/{tag['id']}",
            json={"type": "item", "item": str(item.id)},
            headers=auth_headers,
        )

        response = client.put(
            f"/tags/{tag['id']}",
            json={"type": "mode", "item": None},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["type"] == "mode"
        assert response.json()["item"] is None


class TestListTags:
    """Query parameter handling for GET /tags."""

    def test_skip_limit_and_sort(self, client, auth_headers):
        for uid in ["C", "A", "B"]:
            client.get(f"/tags/uid/{uid}", headers=auth_headers)

        response = client.get(
            "/tags", params={"sort": "-uid", "skip": 1, "limit": 1}, headers=auth_headers
        )

        assert response.status_code == 200
        assert [t["uid"] for t in response.json()] == ["B"]

    def test_type_filter(self, client, auth_headers):
        tag = client.get("/tags/uid/A", headers=auth_headers).json()
        client.get("/tags/uid/B", headers=auth_headers)
        client.put(f"/tags/{tag['id']}", json={"type": "mode"}, headers=auth_headers)

        response = client.get("/tags", params={"type": "mode"}, headers=auth_headers)

        assert [t["uid"] for t in response.json()] == ["A"]

    @pytest.mark.parametrize(
        "params",
        [
            {"skip": "-1"},
            {"skip": "abc"},
            {"limit": "0"},
            {"limit": "101"},
            {"sort": "color"},
            {"type": "pallet"},
        ],
    )
    def test_invalid_params_are_bad_requests(self, client, auth_headers, params):
        response = client.get("/tags", params=params, headers=auth_headers)

        assert response.status_code == 400


class TestTagErrors:
    """Error responses for tag endpoints."""

    def test_requires_token(self, client):
        response = client.get("/tags")

        assert response.status_code == 401
        assert "Not authenticated" in response.json()["detail"]

    def test_rejects_invalid_token(self, client):
        response = client.get(
            "/tags", headers={"Authorization": "Bearer invalid-token"}
        )

        assert response.status_code == 401

    def test_malformed_id_is_bad_request(self, client, auth_headers):
        response = client.get("/tags/not-a-uuid", headers=auth_headers)

        assert response.status_code == 400

    def test_update_missing_tag(self, client, auth_headers):
        response = client.put(
            f"/tags/{MISSING_ID}", json={"type": "item"}, headers=auth_headers
        )

        assert response.status_code == 404

    def test_update_with_invalid_type(self, client, auth_headers):
        tag = client.get("/tags/uid/ABC123", headers=auth_headers).json()

        response = client.put(
            f"/tags/{tag['id']}", json={"type": "pallet"}, headers=auth_headers
        )

        assert response.status_code == 400

    def test_update_without_type(self, client, auth_headers):
        tag = client.get("/tags/uid/ABC123", headers=auth_headers).json()

        response = client.put(f"/tags/{tag['id']}", json={}, headers=auth_headers)

        assert response.status_code == 400

    def test_delete_missing_tag(self, client, auth_headers):
        response = client.delete(f"/tags/{MISSING_ID}", headers=auth_headers)

        assert response.status_code == 404

    def test_delete_store_failure(self, client, auth_headers, monkeypatch):
        tag = client.get("/tags/uid/ABC123", headers=auth_headers).json()

        async def failing_remove(self, tag):
            raise StoreError("connection lost")

        monkeypatch.setattr(InMemoryTagRepository, "remove", failing_remove)
        response = client.delete(f"/tags/{tag['id']}", headers=auth_headers)

        assert response.status_code == 500
        assert response.json()["detail"] == "Error removing tag"

    def test_uid_collision_is_conflict(self, client, auth_headers, monkeypatch):
        """Another request inserted the same uid between lookup and insert."""

        async def not_found(self, uid):
            return None

        async def duplicate_create(self, tag):
            raise DuplicateKeyError(f"Duplicate tag uid: {tag.uid.root}")

        monkeypatch.setattr(InMemoryTagRepository, "find_by_uid", not_found)
        monkeypatch.setattr(InMemoryTagRepository, "create", duplicate_create)
        response = client.get("/tags/uid/ABC123", headers=auth_headers)

        assert response.status_code == 409

    def test_list_store_failure(self, client, auth_headers, monkeypatch):
        async def failing_find_many(self, query):
            raise StoreError("connection lost")

        monkeypatch.setattr(InMemoryTagRepository, "find_many", failing_find_many)
        response = client.get("/tags", headers=auth_headers)

        assert response.status_code == 400

    def test_get_store_failure(self, client, auth_headers, monkeypatch):
        tag = client.get("/tags/uid/ABC123", headers=auth_headers).json()

        async def failing_find_by_id(self, tag_id):
            raise StoreError("connection lost")

        monkeypatch.setattr(InMemoryTagRepository, "find_by_id", failing_find_by_id)
        response = client.get(f"/tags/{tag['id']}", headers=auth_headers)

        assert response.status_code == 400

    def test_update_store_failure(self, client, auth_headers, monkeypatch):
        tag = client.get("/tags/uid/ABC123", headers=auth_headers).json()

        async def failing_save(self, tag):
            raise StoreError("connection lost")

        monkeypatch.setattr(InMemoryTagRepository, "save", failing_save)
        response = client.put(
            f"/tags/{tag['id']}", json={"type": "mode"}, headers=auth_headers
        )

        assert response.status_code == 400


class TestHealth:
    """Health endpoint."""

    def test_health_needs_no_token(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
