"""API tests for availability calendar subscriptions."""

from datetime import datetime

import pytest

from app.models.availability import AvailabilitySubscription, AvailabilityBlock


def add_subscription(db_session, user, feed_url="https://calendar.example.com/a.ics?token=x"):
    subscription = AvailabilitySubscription(user_id=user.id, name="Work", feed_url=feed_url)
    db_session.add(subscription)
    db_session.commit()
    db_session.refresh(subscription)
    return subscription


def add_block(db_session, user, source):
    block = AvailabilityBlock(
        user_id=user.id,
        start_at=datetime(2026, 10, 20, 9),
        end_at=datetime(2026, 10, 20, 17),
        source=source,
    )
    db_session.add(block)
    db_session.commit()
    return block


def test_delete_requires_session(client):
    response = client.delete("/api/availability/subscriptions/1")
    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_delete_removes_subscription_and_its_blocks(client, db_session, user, auth_headers):
    subscription = add_subscription(db_session, user)
    add_block(db_session, user, subscription.block_source)
    add_block(db_session, user, "manual")

    response = client.delete(
        f"/api/availability/subscriptions/{subscription.id}", headers=auth_headers(user)
    )

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert db_session.query(AvailabilitySubscription).count() == 0
    assert [b.source for b in db_session.query(AvailabilityBlock).all()] == ["manual"]


def test_delete_unknown_subscription_is_not_found(client, user, auth_headers):
    response = client.delete("/api/availability/subscriptions/999", headers=auth_headers(user))
    assert response.status_code == 404
    assert response.json() == {"error": "Subscription not found."}


def test_cannot_delete_another_users_subscription(client, db_session, make_user, auth_headers):
    owner = make_user(email="owner@example.com")
    intruder = make_user(email="intruder@example.com")
    subscription = add_subscription(db_session, owner)

    response = client.delete(
        f"/api/availability/subscriptions/{subscription.id}", headers=auth_headers(intruder)
    )

    assert response.status_code == 404
    assert db_session.query(AvailabilitySubscription).count() == 1


def test_list_masks_feed_urls(client, db_session, user, auth_headers):
    add_subscription(db_session, user)

    response = client.get("/api/availability/subscriptions", headers=auth_headers(user))

    assert response.status_code == 200
    [subscription] = response.json()["subscriptions"]
    assert subscription["feedUrlMasked"] == "https://calendar.example.com/a.ics"
    assert subscription["name"] == "Work"


def test_create_subscription(client, db_session, user, auth_headers):
    response = client.post(
        "/api/availability/subscriptions",
        json={"feedUrl": "webcal://calendar.example.com/b.ics?token=y", "name": "  Gym  "},
        headers=auth_headers(user),
    )

    assert response.status_code == 201
    created = response.json()["subscription"]
    assert created["name"] == "Gym"
    assert created["feedUrlMasked"] == "https://calendar.example.com/b.ics"

    stored = db_session.query(AvailabilitySubscription).one()
    assert stored.feed_url == "https://calendar.example.com/b.ics?token=y"
    assert stored.user_id == user.id


def test_create_rejects_bad_input(client, user, auth_headers):
    headers = auth_headers(user)

    missing = client.post("/api/availability/subscriptions", content=b"", headers=headers)
    assert missing.status_code == 400
    assert missing.json() == {"error": "Calendar feed URL is required."}

    garbled = client.post("/api/availability/subscriptions", content=b"{oops", headers=headers)
    assert garbled.status_code == 400

    long_name = client.post(
        "/api/availability/subscriptions",
        json={"feedUrl": "https://calendar.example.com/c.ics", "name": "x" * 81},
        headers=headers,
    )
    assert long_name.status_code == 400

    private = client.post(
        "/api/availability/subscriptions",
        json={"feedUrl": "http://127.0.0.1/c.ics"},
        headers=headers,
    )
    assert private.status_code == 400
    assert private.json() == {"error": "That calendar host is not allowed."}


@pytest.mark.parametrize("subscription_id", ["ckabc123", "-1", "1.5", "99999999999999999999999"])
def test_delete_with_non_numeric_id_is_not_found(client, db_session, user, auth_headers, subscription_id):
    add_subscription(db_session, user)

    response = client.delete(
        f"/api/availability/subscriptions/{subscription_id}", headers=auth_headers(user)
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Subscription not found."}
    assert db_session.query(AvailabilitySubscription).count() == 1


def test_create_with_deeply_nested_body_is_bad_request(client, user, auth_headers):
    response = client.post(
        "/api/availability/subscriptions",
        content=b"[" * 100_000,
        headers=auth_headers(user),
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Calendar feed URL is required."}
