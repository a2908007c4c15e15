"""End-to-end tests for the comments API.

The app runs against the mocked container; users and groups are seeded
straight into the in-memory repositories because they are owned by the
host platform.
"""

import asyncio
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from agora.config import Settings
from agora.domain.model import UserGroupMembership
from agora.domain.repository import UserGroupRepository, UserRepository
from agora.domain.service import JWTService, NotificationDelivery
from agora.interface.api.app import create_app
from tests.conftest import make_group, make_user, new_tenant
from tests.di import build_test_container


@pytest.fixture
def world():
    """Container, tenant and seeded users shared by one test."""
    container = build_test_container(fastapi=True)
    tenant_id = new_tenant()
    alice = make_user(tenant_id, name="Alice Owner")
    bob = make_user(tenant_id, name="Bob Voter", email="bob@example.org")
    group = make_group(tenant_id, name="Park Friends")

    async def seed():
        user_repo = await container.get(UserRepository)
        group_repo = await container.get(UserGroupRepository)
        for user in (alice, bob):
            await user_repo.save(user)
        await group_repo.save(group)
        await group_repo.add_membership(
            UserGroupMembership(user_id=bob.id, user_group_id=group.id)
        )
        return await container.get(NotificationDelivery)

    delivery = asyncio.run(seed())
    return {
        "container": container,
        "tenant_id": str(tenant_id),
        "alice": alice,
        "bob": bob,
        "group": group,
        "delivery": delivery,
    }


@pytest.fixture
def client(world):
    """Create test client."""
    return TestClient(create_app(world["container"]))


def session_cookie(user, tenant_id: str) -> dict[str, str]:
    """Session cookie as the host platform would issue it."""
    token = JWTService(Settings().auth).create_token(str(user.id), tenant_id)
    return {"auth_token": token}


def register(client, world, **overrides) -> dict:
    """Register a debate authored by Alice."""
    body = {
        "commentable_type": "debate",
        "title": "Should the park stay open at night?",
        "author_id": str(world["alice"].id),
        "allows_votes": True,
    }
    body.update(overrides)
    client.cookies = session_cookie(world["alice"], world["tenant_id"])
    response = client.post(f"/tenants/{world['tenant_id']}/commentables", json=body)
    assert response.status_code == 201
    return response.json()


def comments_url(world, commentable: dict) -> str:
    return (
        f"/tenants/{world['tenant_id']}/commentables/"
        f"{commentable['commentable_type']}/{commentable['commentable_id']}/comments"
    )


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200


class TestCommentsAPI:
    """End-to-end tests for commenting and voting."""

    def test_create_comment_requires_session(self, client, world):
        """Anonymous callers cannot comment."""
        # Arrange
        commentable = register(client, world)
        client.cookies.clear()

        # Act
        response = client.post(comments_url(world, commentable), json={"body": "Hi"})

        # Assert
        assert response.status_code == 401

    def test_session_of_other_tenant_is_forbidden(self, client, world):
        """A session only acts within its own tenant."""
        # Arrange
        commentable = register(client, world)
        client.cookies = session_cookie(world["bob"], str(new_tenant()))

        # Act
        response = client.post(comments_url(world, commentable), json={"body": "Hi"})

        # Assert
        assert response.status_code == 403

    def test_comment_reply_and_list(self, client, world):
        """Comments and replies come back as a thread."""
        # Arrange
        commentable = register(client, world)
        url = comments_url(world, commentable)
        client.cookies = session_cookie(world["bob"], world["tenant_id"])

        # Act
        top = client.post(url, json={"body": "Yes, with better lighting."})
        reply = client.post(
            url,
            json={
                "body": "Lighting is planned for next year.",
                "parent_id": top.json()["comment"]["comment_id"],
            },
        )
        listing = client.get(url)

        # Assert
        assert top.status_code == 201
        assert top.json()["notified"]  # Alice authored the debate
        assert top.json()["comment_count"] == 1
        assert reply.status_code == 201
        assert reply.json()["comment"]["depth"] == 1
        assert reply.json()["comment_count"] == 2
        data = listing.json()
        assert data["total"] == 2
        assert data["order"] == "recent"
        assert len(data["comments"]) == 1
        thread = data["comments"][0]
        assert thread["body"] == "Yes, with better lighting."
        assert [r["body"] for r in thread["replies"]] == [
            "Lighting is planned for next year."
        ]
        # Bob's top-level comment notified Alice; his reply to himself did not
        assert [e.recipient_id for e in world["delivery"].events] == [
            world["alice"].id
        ]

    def test_comment_as_group(self, client, world):
        """A verified member can comment on behalf of their group."""
        # Arrange
        commentable = register(client, world)
        client.cookies = session_cookie(world["bob"], world["tenant_id"])

        # Act
        response = client.post(
            comments_url(world, commentable),
            json={"body": "We support this.", "as_group_id": str(world["group"].id)},
        )

        # Assert
        assert response.status_code == 201
        author = response.json()["comment"]["author"]
        assert author["kind"] == "user_group"
        assert author["display_name"] == "Park Friends"

    def test_up_then_down_vote(self, client, world):
        """Switching from up to down leaves one down-vote."""
        # Arrange
        commentable = register(client, world)
        url = comments_url(world, commentable)
        client.cookies = session_cookie(world["alice"], world["tenant_id"])
        created = client.post(url, json={"body": "Open until midnight."}).json()
        comment_id = created["comment"]["comment_id"]
        votes_url = f"/tenants/{world['tenant_id']}/comments/{comment_id}/votes"
        client.cookies = session_cookie(world["bob"], world["tenant_id"])

        # Act
        up = client.post(votes_url, json={"weight": 1})
        down = client.post(votes_url, json={"weight": -1})
        listing = client.get(url, params={"order": "best"})

        # Assert
        assert up.status_code == 200
        assert (up.json()["up"], up.json()["down"]) == (1, 0)
        assert down.status_code == 200
        assert (down.json()["up"], down.json()["down"]) == (0, 1)
        listed = listing.json()["comments"][0]
        assert listed["score"] == -1
        assert listed["my_vote"] == -1

    def test_remove_vote(self, client, world):
        """A withdrawn vote no longer counts."""
        # Arrange
        commentable = register(client, world)
        client.cookies = session_cookie(world["bob"], world["tenant_id"])
        created = client.post(
            comments_url(world, commentable), json={"body": "Agreed."}
        ).json()
        votes_url = (
            f"/tenants/{world['tenant_id']}/comments/"
            f"{created['comment']['comment_id']}/votes"
        )
        client.post(votes_url, json={"weight": 1})

        # Act
        response = client.delete(votes_url)

        # Assert
        assert response.status_code == 200
        assert response.json()["success"]
        assert response.json()["score"] == 0

    def test_invalid_vote_weight(self, client, world):
        """Weights other than +1 and -1 are rejected."""
        # Arrange
        commentable = register(client, world)
        client.cookies = session_cookie(world["bob"], world["tenant_id"])
        created = client.post(
            comments_url(world, commentable), json={"body": "Agreed."}
        ).json()
        votes_url = (
            f"/tenants/{world['tenant_id']}/comments/"
            f"{created['comment']['comment_id']}/votes"
        )

        # Act
        response = client.post(votes_url, json={"weight": 5})

        # Assert
        assert response.status_code == 400

    def test_unknown_commentable(self, client, world):
        """Listing an unregistered commentable is a 404."""
        # Act
        response = client.get(
            comments_url(
                world, {"commentable_type": "debate", "commentable_id": str(uuid4())}
            )
        )

        # Assert
        assert response.status_code == 404

    def test_malformed_parent_id(self, client, world):
        """A parent ID that is not a UUID is a bad request."""
        # Arrange
        commentable = register(client, world)
        client.cookies = session_cookie(world["bob"], world["tenant_id"])

        # Act
        response = client.post(
            comments_url(world, commentable),
            json={"body": "Replying.", "parent_id": "not-a-uuid"},
        )

        # Assert
        assert response.status_code == 400

    @pytest.mark.parametrize(
        "commentable",
        [
            {"commentable_type": "Debate", "commentable_id": str(uuid4())},
            {"commentable_type": "debate", "commentable_id": "42"},
        ],
    )
    def test_malformed_commentable_path(self, client, world, commentable):
        """Listing with an invalid commentable type or ID is a bad request."""
        # Act
        response = client.get(comments_url(world, commentable))

        # Assert
        assert response.status_code == 400

    def test_vote_on_malformed_comment_id(self, client, world):
        """Voting on a comment ID that is not a UUID is a bad request."""
        # Arrange
        client.cookies = session_cookie(world["bob"], world["tenant_id"])

        # Act
        response = client.post(
            f"/tenants/{world['tenant_id']}/comments/abc/votes", json={"weight": 1}
        )

        # Assert
        assert response.status_code == 400

    def test_alignment_disabled(self, client, world):
        """Alignment on a commentable without the feature is forbidden."""
        # Arrange
        commentable = register(client, world)
        client.cookies = session_cookie(world["bob"], world["tenant_id"])

        # Act
        response = client.post(
            comments_url(world, commentable),
            json={"body": "Against.", "alignment": "against"},
        )

        # Assert
        assert response.status_code == 403

    def test_list_my_groups(self, client, world):
        """Members see the groups they can comment as."""
        # Arrange
        client.cookies = session_cookie(world["bob"], world["tenant_id"])

        # Act
        response = client.get(f"/tenants/{world['tenant_id']}/users/me/groups")

        # Assert
        assert response.status_code == 200
        assert [g["name"] for g in response.json()["groups"]] == ["Park Friends"]
