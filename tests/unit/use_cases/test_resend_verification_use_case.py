"""
Unit tests for ResendVerificationUseCase

Tests all business logic with mocked dependencies.
"""
from datetime import timedelta

import pytest

from src.app.use_cases.auth import ResendVerificationUseCase
from src.domain.base import utcnow
from tests.fixtures.factories import make_user, pending_otp_fields


@pytest.mark.asyncio
async def test_successful_resend(mock_uow, mailer):
    user = make_user(verified=False, **pending_otp_fields("verification", verification_otp_attempts=4))
    mock_uow.users.get_by_email.return_value = user

    result = await ResendVerificationUseCase(mock_uow, mailer).execute(user.email)

    assert result.is_ok()
    mock_uow.users.update.assert_called_once_with(user)
    mock_uow.commit.assert_called_once()

    assert user.verification_otp_sent_count == 2
    assert user.verification_otp_attempts == 0
    assert mailer.last_code(user.email) == user.verification_otp


@pytest.mark.asyncio
async def test_resend_within_cooldown(mock_uow, mailer):
    user = make_user(
        verified=False,
        **pending_otp_fields("verification", last_verification_otp_sent_at=utcnow() - timedelta(seconds=10)),
    )
    mock_uow.users.get_by_email.return_value = user

    result = await ResendVerificationUseCase(mock_uow, mailer).execute(user.email)

    assert result.error.code == "COOLDOWN"
    mock_uow.commit.assert_not_called()
    assert mailer.sent == []


@pytest.mark.asyncio
async def test_resend_quota_exhausted(mock_uow, mailer):
    user = make_user(verified=False, **pending_otp_fields("verification", verification_otp_sent_count=5))
    mock_uow.users.get_by_email.return_value = user

    result = await ResendVerificationUseCase(mock_uow, mailer).execute(user.email)

    assert result.error.code == "RATE_LIMITED"


@pytest.mark.asyncio
async def test_resend_already_verified(mock_uow, mailer):
    mock_uow.users.get_by_email.return_value = make_user(verified=True)

    result = await ResendVerificationUseCase(mock_uow, mailer).execute("alice@example.com")

    assert result.error.code == "ALREADY_VERIFIED"
    mock_uow.users.update.assert_not_called()


@pytest.mark.asyncio
async def test_resend_unknown_email(mock_uow, mailer):
    result = await ResendVerificationUseCase(mock_uow, mailer).execute("ghost@example.com")

    assert result.error.code == "USER_NOT_FOUND"
    assert mailer.sent == []
