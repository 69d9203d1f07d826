"""
Unit tests for ConfirmPasswordResetUseCase
"""
from datetime import timedelta

import bcrypt
import pytest

from src.app.use_cases.auth import ConfirmPasswordResetUseCase
from tests.fixtures.factories import make_user, pending_otp_fields


@pytest.mark.asyncio
async def test_confirm_reset_sets_new_password(mock_uow):
    user = make_user(**pending_otp_fields("reset"))
    mock_uow.users.get_by_email.return_value = user

    result = await ConfirmPasswordResetUseCase(mock_uow).execute(user.email, "123456", "N3wPass")

    assert result.is_ok()
    assert bcrypt.checkpw(b"N3wPass", user.password_hash.encode())
    assert user.reset_otp is None
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_confirm_reset_incorrect_code(mock_uow):
    user = make_user(**pending_otp_fields("reset"))
    old_hash = user.password_hash
    mock_uow.users.get_by_email.return_value = user

    result = await ConfirmPasswordResetUseCase(mock_uow).execute(user.email, "000000", "N3wPass")

    assert result.error.code == "INCORRECT_OTP"
    assert user.password_hash == old_hash
    assert user.reset_otp_attempts == 1
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_confirm_reset_expired_code(mock_uow):
    user = make_user(**pending_otp_fields("reset", expires_in=timedelta(minutes=-1)))
    mock_uow.users.get_by_email.return_value = user

    result = await ConfirmPasswordResetUseCase(mock_uow).execute(user.email, "123456", "N3wPass")

    assert result.error.code == "OTP_EXPIRED"


@pytest.mark.asyncio
async def test_confirm_reset_without_request(mock_uow):
    mock_uow.users.get_by_email.return_value = make_user()

    result = await ConfirmPasswordResetUseCase(mock_uow).execute("alice@example.com", "123456", "x")

    assert result.error.code == "OTP_NOT_ISSUED"


@pytest.mark.asyncio
async def test_confirm_reset_unknown_email(mock_uow):
    result = await ConfirmPasswordResetUseCase(mock_uow).execute("ghost@example.com", "123456", "x")

    assert result.error.code == "INVALID_OTP"


@pytest.mark.asyncio
async def test_confirm_reset_missing_password(mock_uow):
    result = await ConfirmPasswordResetUseCase(mock_uow).execute("alice@example.com", "123456", "")

    assert result.error.code == "MISSING_FIELDS"
