"""Favorites and messaging tests."""
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient

from closet.domain.common.errors import BadRequestError, ConflictError, NotFoundError
from closet.domain.market.services import ListingService
from closet.domain.social.models import Message
from closet.domain.social.services import FavoriteService, MessageService


@pytest.mark.asyncio
class TestFavorites:
    """Test favoriting and the like counter."""

    async def test_add_twice_conflicts(self, client: AsyncClient, signup, create_dress):
        _, seller_headers = await signup("seller")
        _, fan_headers = await signup("fan")
        dress = await create_dress(seller_headers)

        first = await client.post(f"/api/favorites/{dress['id']}", headers=fan_headers)
        second = await client.post(f"/api/favorites/{dress['id']}", headers=fan_headers)
        assert first.status_code == 200
        assert first.json() == {"message": "Added to favorites"}
        assert second.status_code == 409
        assert second.json() == {"error": "Already in favorites"}

        detail = await client.get(f"/api/dresses/{dress['id']}")
        assert detail.json()["likes"] == 1

    async def test_remove_twice_is_not_found(self, client: AsyncClient, signup, create_dress):
        _, seller_headers = await signup("seller")
        _, fan_headers = await signup("fan")
        dress = await create_dress(seller_headers)
        await client.post(f"/api/favorites/{dress['id']}", headers=fan_headers)

        first = await client.delete(f"/api/favorites/{dress['id']}", headers=fan_headers)
        second = await client.delete(f"/api/favorites/{dress['id']}", headers=fan_headers)
        assert first.status_code == 200
        assert first.json() == {"message": "Removed from favorites"}
        assert second.status_code == 404

        detail = await client.get(f"/api/dresses/{dress['id']}")
        assert detail.json()["likes"] == 0

    async def test_likes_track_favorites(self, client: AsyncClient, signup, create_dress):
        _, seller_headers = await signup("seller")
        dress = await create_dress(seller_headers)
        fans = [await signup(f"fan{i}") for i in range(3)]
        for _, headers in fans:
            await client.post(f"/api/favorites/{dress['id']}", headers=headers)
        await client.delete(f"/api/favorites/{dress['id']}", headers=fans[0][1])

        detail = await client.get(f"/api/dresses/{dress['id']}")
        assert detail.json()["likes"] == 2

    async def test_favorite_missing_dress(self, client: AsyncClient, signup):
        _, headers = await signup("fan")
        response = await client.post("/api/favorites/999", headers=headers)
        assert response.status_code == 404
        assert response.json() == {"error": "Dress not found"}

    async def test_list_skips_deleted_dresses(self, client: AsyncClient, signup, create_dress):
        _, seller_headers = await signup("seller")
        _, fan_headers = await signup("fan")
        kept = await create_dress(seller_headers, title="Kept")
        gone = await create_dress(seller_headers, title="Gone")
        await client.post(f"/api/favorites/{kept['id']}", headers=fan_headers)
        await client.post(f"/api/favorites/{gone['id']}", headers=fan_headers)
        await client.delete(f"/api/dresses/{gone['id']}", headers=seller_headers)

        response = await client.get("/api/favorites", headers=fan_headers)
        assert response.status_code == 200
        favorites = response.json()["favorites"]
        assert [f["title"] for f in favorites] == ["Kept"]
        assert favorites[0]["seller"]["username"] == "seller"

    async def test_favorites_require_auth(self, client: AsyncClient):
        response = await client.get("/api/favorites")
        assert response.status_code == 401


@pytest.mark.asyncio
class TestMessagesApi:
    """Test sending and reading messages over HTTP."""

    async def test_unread_cleared_by_reading_thread(self, client: AsyncClient, signup):
        alice, alice_headers = await signup("alice")
        bob, bob_headers = await signup("bob")

        response = await client.post(
            "/api/messages",
            json={"recipientId": bob["id"], "content": "Is the dress still available?"},
            headers=alice_headers,
        )
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Message sent"
        assert body["data"]["read"] is False
        assert body["data"]["senderId"] == alice["id"]

        conversations = (await client.get("/api/messages/conversations", headers=bob_headers)).json()
        assert len(conversations["conversations"]) == 1
        summary = conversations["conversations"][0]
        assert summary["user"]["username"] == "alice"
        assert summary["unreadCount"] == 1

        thread = await client.get(f"/api/messages/{alice['id']}", headers=bob_headers)
        assert thread.status_code == 200
        assert [m["read"] for m in thread.json()["messages"]] == [True]

        conversations = (await client.get("/api/messages/conversations", headers=bob_headers)).json()
        assert conversations["conversations"][0]["unreadCount"] == 0

    async def test_sender_reading_does_not_mark_read(self, client: AsyncClient, signup):
        _, alice_headers = await signup("alice")
        bob, _ = await signup("bob")
        await client.post(
            "/api/messages", json={"recipientId": bob["id"], "content": "hi"}, headers=alice_headers
        )

        thread = await client.get(f"/api/messages/{bob['id']}", headers=alice_headers)
        assert [m["read"] for m in thread.json()["messages"]] == [False]

    async def test_send_validation(self, client: AsyncClient, signup):
        _, headers = await signup("alice")

        missing = await client.post("/api/messages", json={"content": "hi"}, headers=headers)
        assert missing.status_code == 400
        assert missing.json() == {"error": "Recipient and content required"}

        empty = await client.post("/api/messages", json={"recipientId": 1, "content": ""}, headers=headers)
        assert empty.status_code == 400

        nobody = await client.post("/api/messages", json={"recipientId": 999, "content": "hi"}, headers=headers)
        assert nobody.status_code == 404
        assert nobody.json() == {"error": "Recipient not found"}


class TestConversations:
    """Test conversation summaries against explicit timestamps."""

    def _send(self, db, sender, recipient, content, at, read=False):
        return db.messages.create(
            Message(sender_id=sender.id, recipient_id=recipient.id, content=content, read=read, created_at=at)
        )

    def test_summary_order_and_latest_message(self, db, user_service):
        me = user_service.register("me", "me@example.com", "pw")
        bob = user_service.register("bob", "bob@example.com", "pw")
        carol = user_service.register("carol", "carol@example.com", "pw")
        base = datetime(2025, 3, 1, tzinfo=timezone.utc)

        self._send(db, bob, me, "first from bob", base)
        self._send(db, me, carol, "hi carol", base + timedelta(minutes=1))
        self._send(db, me, bob, "reply to bob", base + timedelta(minutes=5))
        self._send(db, carol, me, "hey", base + timedelta(minutes=2))
        # Recorded later but stamped earlier: must not become the latest.
        self._send(db, bob, me, "late arrival", base + timedelta(minutes=3))

        conversations = MessageService(db).list_conversations(me.id)
        assert [c.user.username for c in conversations] == ["bob", "carol"]
        assert conversations[0].last_message.content == "reply to bob"
        assert conversations[0].unread_count == 2
        assert conversations[1].last_message.content == "hey"
        assert conversations[1].unread_count == 1

    def test_thread_is_oldest_first_and_marks_read(self, db, user_service):
        me = user_service.register("me", "me@example.com", "pw")
        bob = user_service.register("bob", "bob@example.com", "pw")
        carol = user_service.register("carol", "carol@example.com", "pw")
        base = datetime(2025, 3, 1, tzinfo=timezone.utc)

        self._send(db, bob, me, "second", base + timedelta(minutes=2))
        self._send(db, me, bob, "first", base)
        self._send(db, carol, me, "unrelated", base + timedelta(minutes=1))

        thread = MessageService(db).read_thread(me.id, bob.id)
        assert [m.content for m in thread] == ["first", "second"]

        remaining = MessageService(db).list_conversations(me.id)
        unread = {c.user.username: c.unread_count for c in remaining}
        assert unread == {"bob": 0, "carol": 1}

    def test_send_errors(self, db, user_service):
        me = user_service.register("me", "me@example.com", "pw")
        service = MessageService(db)
        with pytest.raises(BadRequestError):
            service.send_message(me.id, None, "hello")
        with pytest.raises(NotFoundError):
            service.send_message(me.id, 404, "hello")


class TestConcurrentFavorites:
    """Favorite adds and removes racing from many threads."""

    def test_same_pair_added_once(self, db, user_service):
        seller = user_service.register("seller", "seller@example.com", "pw")
        fan = user_service.register("fan", "fan@example.com", "pw")
        dress = ListingService(db).create_listing(seller.id, brand="B", title="T", buttons_price=10)
        service = FavoriteService(db)

        def attempt(_):
            try:
                service.add_favorite(fan.id, dress.id)
                return True
            except ConflictError:
                return False

        with ThreadPoolExecutor(max_workers=16) as pool:
            outcomes = list(pool.map(attempt, range(40)))

        assert outcomes.count(True) == 1
        assert db.listings.get_by_id(dress.id).likes == 1
        assert len(db.favorites.list_by_user(fan.id)) == 1

    def test_likes_follow_favorites_under_contention(self, db, user_service):
        seller = user_service.register("seller", "seller@example.com", "pw")
        fans = [user_service.register(f"fan{i}", f"fan{i}@example.com", "pw") for i in range(10)]
        dress = ListingService(db).create_listing(seller.id, brand="B", title="T", buttons_price=10)
        service = FavoriteService(db)

        with ThreadPoolExecutor(max_workers=10) as pool:
            list(pool.map(lambda u: service.add_favorite(u.id, dress.id), fans))
        with ThreadPoolExecutor(max_workers=10) as pool:
            list(pool.map(lambda u: service.remove_favorite(u.id, dress.id), fans[:4]))

        assert db.listings.get_by_id(dress.id).likes == 6
