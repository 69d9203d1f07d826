from abc import ABC, abstractmethod


class MailerNotConfigured(RuntimeError):
    """Raised when no outbound mail transport is configured"""


class IMailer(ABC):
    """Outbound mail interface - application layer"""

    @abstractmethod
    async def send_otp(self, to: str, subject: str, code: str) -> None:
        """Deliver a one-time code. Raises on any delivery failure."""
        pass
