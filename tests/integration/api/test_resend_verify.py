from datetime import timedelta

import pytest
from httpx import AsyncClient

from src.domain.base import utcnow
from tests.fixtures.factories import create_user, pending_otp_fields


@pytest.mark.asyncio
async def test_resend_replaces_code(client: AsyncClient, db_session, mailer):
    """Resend verification

    Given my last code was sent more than a minute ago
    When I ask for a new code
    Then a new code is mailed
    And the old code no longer verifies
    """
    await create_user(
        db_session, username="alice", verified=False, **pending_otp_fields("verification", code="111111")
    )

    response = await client.post("/api/auth/resend-verify", json={"email": "alice@example.com"})

    assert response.status_code == 200
    new_code = mailer.last_code("alice@example.com")
    assert new_code is not None

    if new_code != "111111":
        stale = await client.post("/api/auth/verify-otp", json={
            "email": "alice@example.com",
            "otp": "111111",
        })
        assert stale.status_code == 400
        assert stale.json()["error"]["code"] == "INCORRECT_OTP"

    fresh = await client.post("/api/auth/verify-otp", json={
        "email": "alice@example.com",
        "otp": new_code,
    })
    assert fresh.status_code == 200


@pytest.mark.asyncio
async def test_resend_within_cooldown(client: AsyncClient, mailer):
    await client.post("/api/auth/register", json={
        "username": "alice",
        "email": "alice@example.com",
        "password": "pw",
    })

    response = await client.post("/api/auth/resend-verify", json={"email": "alice@example.com"})

    assert response.status_code == 429
    assert response.json()["error"]["code"] == "COOLDOWN"
    retry_after = int(response.headers["Retry-After"])
    assert 0 < retry_after <= 60
    assert len(mailer.sent) == 1


@pytest.mark.asyncio
async def test_resend_quota_exhausted(client: AsyncClient, db_session):
    await create_user(
        db_session,
        username="alice",
        verified=False,
        **pending_otp_fields(
            "verification",
            verification_otp_sent_count=5,
            last_verification_otp_sent_at=utcnow() - timedelta(minutes=5),
        ),
    )

    response = await client.post("/api/auth/resend-verify", json={"email": "alice@example.com"})

    assert response.status_code == 429
    assert response.json()["error"]["code"] == "RATE_LIMITED"


@pytest.mark.asyncio
async def test_resend_for_verified_account(client: AsyncClient, db_session):
    await create_user(db_session, username="alice")

    response = await client.post("/api/auth/resend-verify", json={"email": "alice@example.com"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "ALREADY_VERIFIED"


@pytest.mark.asyncio
async def test_resend_unknown_email(client: AsyncClient):
    response = await client.post("/api/auth/resend-verify", json={"email": "ghost@example.com"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "USER_NOT_FOUND"
