"""
One-time code lifecycle

Issues, rate-limits and verifies the six-digit codes used for signup
verification and password reset. State lives on the User entity, one set of
fields per purpose; these functions only mutate the entity, callers persist it.
"""

import logging
import secrets
from datetime import datetime, timedelta
from typing import NamedTuple, Optional

from libs.result import Error, Result, Return
from src.app.services.mailer import IMailer
from src.domain.base import utcnow
from src.domain.entities import OtpPurpose, User

logger = logging.getLogger(__name__)

OTP_TTL = timedelta(minutes=10)
RESEND_COOLDOWN = timedelta(seconds=60)
MAX_OTP_SENDS = 5
MAX_OTP_ATTEMPTS = 5


class _OtpFields(NamedTuple):
    code: str
    expires: str
    attempts: str
    sent_count: str
    last_sent_at: str


_FIELDS = {
    OtpPurpose.verification: _OtpFields(
        "verification_otp",
        "verification_otp_expires",
        "verification_otp_attempts",
        "verification_otp_sent_count",
        "last_verification_otp_sent_at",
    ),
    OtpPurpose.reset: _OtpFields(
        "reset_otp",
        "reset_otp_expires",
        "reset_otp_attempts",
        "reset_otp_sent_count",
        "last_reset_otp_sent_at",
    ),
}


def generate_otp() -> str:
    """Uniformly random code in 100000..999999"""
    return str(100000 + secrets.randbelow(900000))


def issue_otp(user: User, purpose: OtpPurpose, now: Optional[datetime] = None) -> Result[str]:
    """
    Issue a fresh code for purpose.

    Returns:
        Result with the new code, or Error

    Errors:
        - COOLDOWN: previous code was sent less than 60 seconds ago
        - RATE_LIMITED: 5 codes already sent for this purpose
    """
    now = now or utcnow()
    fields = _FIELDS[purpose]

    last_sent_at = getattr(user, fields.last_sent_at)
    if last_sent_at is not None and now - last_sent_at < RESEND_COOLDOWN:
        wait = int((RESEND_COOLDOWN - (now - last_sent_at)).total_seconds()) + 1
        return Return.err(
            Error(
                "COOLDOWN",
                f"Please wait {wait} seconds before requesting another code",
                details={"retry_after": wait},
            )
        )

    if (getattr(user, fields.sent_count) or 0) >= MAX_OTP_SENDS:
        return Return.err(
            Error("RATE_LIMITED", "Too many codes requested. Please try again later.")
        )

    code = generate_otp()
    setattr(user, fields.code, code)
    setattr(user, fields.expires, now + OTP_TTL)
    setattr(user, fields.attempts, 0)
    setattr(user, fields.sent_count, (getattr(user, fields.sent_count) or 0) + 1)
    setattr(user, fields.last_sent_at, now)
    return Return.ok(code)


def verify_otp(
    user: User, purpose: OtpPurpose, submitted: str, now: Optional[datetime] = None
) -> Result[None]:
    """
    Check a submitted code.

    A wrong code increments the attempt counter on the entity; the caller
    must persist the user on INCORRECT_OTP as well as on success.

    Errors:
        - OTP_NOT_ISSUED: no outstanding code for this purpose
        - OTP_EXPIRED: code is older than 10 minutes
        - TOO_MANY_ATTEMPTS: 5 wrong submissions against this code
        - INCORRECT_OTP: code does not match
    """
    now = now or utcnow()
    fields = _FIELDS[purpose]

    code = getattr(user, fields.code)
    expires = getattr(user, fields.expires)
    if not code or expires is None:
        return Return.err(Error("OTP_NOT_ISSUED", "No code to verify. Please request a new one."))

    if now > expires:
        return Return.err(Error("OTP_EXPIRED", "Code expired. Please request a new one."))

    attempts = getattr(user, fields.attempts) or 0
    if attempts >= MAX_OTP_ATTEMPTS:
        return Return.err(
            Error("TOO_MANY_ATTEMPTS", "Too many incorrect attempts. Please request a new code.")
        )

    if not secrets.compare_digest(code.encode(), str(submitted).strip().encode()):
        setattr(user, fields.attempts, attempts + 1)
        return Return.err(
            Error(
                "INCORRECT_OTP",
                "Incorrect code",
                details={"attempts_left": MAX_OTP_ATTEMPTS - attempts - 1},
            )
        )

    setattr(user, fields.code, None)
    setattr(user, fields.expires, None)
    setattr(user, fields.attempts, 0)
    setattr(user, fields.sent_count, 0)
    if purpose == OtpPurpose.verification:
        user.verified = True
    return Return.ok(None)


async def deliver_otp(mailer: IMailer, to: str, subject: str, code: str) -> bool:
    """
    Best-effort delivery. Failures are logged and swallowed: the code stays
    valid either way.
    """
    try:
        await mailer.send_otp(to, subject, code)
    except Exception as exc:
        logger.warning(f"OTP delivery to {to} failed ({exc!r}); code is {code}")
        return False
    logger.info(f"OTP sent to {to}")
    return True
