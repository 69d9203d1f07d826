"""
Unit tests for RegisterUseCase
"""
import bcrypt
import pytest

from src.app.use_cases.auth import RegisterCommand, RegisterUseCase
from tests.fixtures.factories import make_user
from tests.fixtures.fake_mailer import RecordingMailer


@pytest.mark.asyncio
async def test_register_success(mock_uow, mailer):
    command = RegisterCommand(username="alice", email="alice@example.com", password="pw123")

    result = await RegisterUseCase(mock_uow, mailer).execute(command)

    assert result.is_ok()
    assert result.value.email == "alice@example.com"
    assert "verify" in result.value.message.lower()

    mock_uow.users.create.assert_called_once()
    user = mock_uow.users.create.call_args[0][0]
    assert user.username == "alice"
    assert user.verified is False
    assert user.password_hash != "pw123"
    assert bcrypt.checkpw(b"pw123", user.password_hash.encode())
    assert user.verification_otp is not None
    assert user.verification_otp_sent_count == 1
    mock_uow.commit.assert_called_once()

    # The emailed code is the stored code
    assert mailer.last_code("alice@example.com") == user.verification_otp


@pytest.mark.asyncio
async def test_register_duplicate_username(mock_uow, mailer):
    mock_uow.users.get_by_username.return_value = make_user("alice")
    command = RegisterCommand(username="alice", email="other@example.com", password="pw")

    result = await RegisterUseCase(mock_uow, mailer).execute(command)

    assert result.is_err()
    assert result.error.code == "USERNAME_TAKEN"
    mock_uow.users.create.assert_not_called()
    mock_uow.commit.assert_not_called()
    assert mailer.sent == []


@pytest.mark.asyncio
async def test_register_duplicate_email(mock_uow, mailer):
    mock_uow.users.get_by_email.return_value = make_user("bob", email="shared@example.com")
    command = RegisterCommand(username="alice", email="shared@example.com", password="pw")

    result = await RegisterUseCase(mock_uow, mailer).execute(command)

    assert result.error.code == "EMAIL_TAKEN"
    mock_uow.users.create.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "fields",
    [
        {"email": "a@example.com", "password": "pw"},
        {"username": "alice", "password": "pw"},
        {"username": "alice", "email": "a@example.com"},
        {"username": "", "email": "a@example.com", "password": "pw"},
    ],
)
async def test_register_missing_fields(mock_uow, mailer, fields):
    result = await RegisterUseCase(mock_uow, mailer).execute(RegisterCommand(**fields))

    assert result.error.code == "MISSING_FIELDS"
    mock_uow.users.get_by_username.assert_not_called()


@pytest.mark.asyncio
async def test_register_succeeds_when_mail_delivery_fails(mock_uow):
    command = RegisterCommand(username="alice", email="alice@example.com", password="pw")

    result = await RegisterUseCase(mock_uow, RecordingMailer(fail=True)).execute(command)

    assert result.is_ok()
    mock_uow.commit.assert_called_once()
