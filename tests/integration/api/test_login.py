import pytest
from httpx import AsyncClient

from tests.fixtures.factories import DEFAULT_PASSWORD, create_user
from tests.utils.json_compare import exclude_keys


@pytest.mark.asyncio
async def test_login_with_username(client: AsyncClient, db_session):
    """Login by username

    Given a verified user alice
    When I log in with her username and password
    Then I get her public profile
    And no password material is returned
    """
    await create_user(db_session, username="alice")

    response = await client.post("/api/auth/login", json={
        "identifier": "alice",
        "password": DEFAULT_PASSWORD,
    })

    assert response.status_code == 200
    data = response.json()
    assert exclude_keys(data, {"createdAt"}) == {
        "message": "Login successful",
        "username": "alice",
        "email": "alice@example.com",
    }
    assert "createdAt" in data
    assert "password" not in data and "passwordHash" not in data


@pytest.mark.asyncio
async def test_login_with_email(client: AsyncClient, db_session):
    await create_user(db_session, username="alice")

    response = await client.post("/api/auth/login", json={
        "identifier": "alice@example.com",
        "password": DEFAULT_PASSWORD,
    })

    assert response.status_code == 200
    assert response.json()["username"] == "alice"


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient, db_session):
    await create_user(db_session, username="alice")

    response = await client.post("/api/auth/login", json={
        "identifier": "alice",
        "password": "WrongPassword!",
    })

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_unknown_user_same_error(client: AsyncClient):
    """Unknown identifiers are indistinguishable from a wrong password"""
    response = await client.post("/api/auth/login", json={
        "identifier": "nobody",
        "password": "whatever",
    })

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid username/email or password"


@pytest.mark.asyncio
async def test_login_unverified_checks_password_first(client: AsyncClient, db_session):
    await create_user(db_session, username="pending", verified=False)

    wrong = await client.post("/api/auth/login", json={"identifier": "pending", "password": "nope"})
    right = await client.post("/api/auth/login", json={
        "identifier": "pending",
        "password": DEFAULT_PASSWORD,
    })

    assert wrong.status_code == 401
    assert right.status_code == 403


@pytest.mark.asyncio
async def test_login_missing_password(client: AsyncClient):
    response = await client.post("/api/auth/login", json={"identifier": "alice"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "MISSING_FIELDS"
