"""Application-level tests: meta endpoints, profiles and demo data."""
import inspect

import pytest
from fastapi.routing import APIRoute
from httpx import AsyncClient

from closet.domain.market.services import ListingService
from closet.infra.db.seed import DEMO_PASSWORD, seed_demo_data
from closet.infra.security.password import verify_password


@pytest.mark.asyncio
class TestMeta:
    """Test root, health and unknown routes."""

    async def test_root(self, client: AsyncClient):
        response = await client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "running"
        assert data["endpoints"]["dresses"] == "/api/dresses/*"

    async def test_health_reports_store_sizes(self, client: AsyncClient, signup, create_dress):
        _, headers = await signup("seller")
        await create_dress(headers)

        response = await client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["uptime"] >= 0
        assert data["database"] == {"users": 1, "dresses": 1, "transactions": 0}

    async def test_unknown_endpoint(self, client: AsyncClient):
        response = await client.get("/api/nope")
        assert response.status_code == 404
        assert response.json() == {"error": "Endpoint not found"}


@pytest.mark.asyncio
class TestProfiles:
    """Test public profiles and profile updates."""

    async def test_public_profile_counts_available_dresses(self, client: AsyncClient, signup, create_dress):
        seller, seller_headers = await signup("seller")
        _, buyer_headers = await signup("buyer")
        sold = await create_dress(seller_headers, buttonsPrice=10)
        await create_dress(seller_headers, buttonsPrice=10)
        await client.post("/api/transactions/purchase", json={"dressId": sold["id"]}, headers=buyer_headers)

        response = await client.get(f"/api/users/{seller['id']}")
        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "seller"
        assert data["dressCount"] == 1
        assert "email" not in data

        mine = await client.get("/api/users/me/dresses", headers=seller_headers)
        assert len(mine.json()["dresses"]) == 2

    async def test_missing_profile(self, client: AsyncClient):
        response = await client.get("/api/users/999")
        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}

    async def test_update_profile(self, client: AsyncClient, signup):
        _, headers = await signup("before")
        response = await client.put(
            "/api/users/profile", json={"username": "after", "bio": "Vintage only"}, headers=headers
        )
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Profile updated"
        assert data["user"]["username"] == "after"
        assert data["user"]["bio"] == "Vintage only"

    async def test_update_profile_username_taken(self, client: AsyncClient, signup):
        await signup("taken")
        _, headers = await signup("other")
        response = await client.put("/api/users/profile", json={"username": "taken"}, headers=headers)
        assert response.status_code == 409
        assert response.json() == {"error": "Username taken"}


class TestSeed:
    """Test the demo data loader."""

    def test_seed_creates_demo_seller_and_listings(self, db):
        seller = seed_demo_data(db)

        assert seller.username == "fashionista_sarah"
        assert seller.buttons == 250
        assert verify_password(DEMO_PASSWORD, seller.password_hash)
        assert db.sizes() == {"users": 1, "dresses": 4, "transactions": 0}

        trending = ListingService(db).trending()
        assert trending[0].listing.brand == "Zimmermann"


class TestRouteExecution:
    """Handlers that take the store lock must not run on the event loop."""

    LOCKING_GETS = {"/api/dresses/{dress_id}", "/api/messages/{user_id}"}

    def test_locking_handlers_are_sync(self, app):
        offenders = []
        for route in app.routes:
            if not isinstance(route, APIRoute) or not route.path.startswith("/api"):
                continue
            mutating = bool(route.methods & {"POST", "PUT", "DELETE"})
            if (mutating or route.path in self.LOCKING_GETS) and inspect.iscoroutinefunction(route.endpoint):
                offenders.append(f"{sorted(route.methods)} {route.path}")
        assert offenders == []
