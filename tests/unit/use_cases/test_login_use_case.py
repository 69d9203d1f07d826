"""
Unit tests for LoginUseCase
"""
import pytest

from src.app.use_cases.auth import LoginUseCase
from tests.fixtures.factories import DEFAULT_PASSWORD, make_user


@pytest.mark.asyncio
async def test_login_success(mock_uow):
    user = make_user("alice")
    mock_uow.users.get_by_identifier.return_value = user

    result = await LoginUseCase(mock_uow).execute("alice", DEFAULT_PASSWORD)

    assert result.is_ok()
    assert result.value.username == "alice"
    assert result.value.email == "alice@example.com"
    assert result.value.created_at == user.created_at
    mock_uow.users.get_by_identifier.assert_called_once_with("alice")


@pytest.mark.asyncio
async def test_login_wrong_password(mock_uow):
    mock_uow.users.get_by_identifier.return_value = make_user("alice")

    result = await LoginUseCase(mock_uow).execute("alice", "wrong")

    assert result.error.code == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_unknown_identifier(mock_uow):
    result = await LoginUseCase(mock_uow).execute("ghost", DEFAULT_PASSWORD)

    assert result.error.code == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_unverified(mock_uow):
    mock_uow.users.get_by_identifier.return_value = make_user("alice", verified=False)

    result = await LoginUseCase(mock_uow).execute("alice", DEFAULT_PASSWORD)

    assert result.error.code == "EMAIL_NOT_VERIFIED"


@pytest.mark.asyncio
async def test_login_unverified_with_wrong_password_reports_credentials(mock_uow):
    mock_uow.users.get_by_identifier.return_value = make_user("alice", verified=False)

    result = await LoginUseCase(mock_uow).execute("alice", "wrong")

    assert result.error.code == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_missing_fields(mock_uow):
    result = await LoginUseCase(mock_uow).execute("", DEFAULT_PASSWORD)

    assert result.error.code == "MISSING_FIELDS"
