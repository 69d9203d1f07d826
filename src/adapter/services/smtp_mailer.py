from email.message import EmailMessage

import aiosmtplib

from src.app.services.mailer import IMailer, MailerNotConfigured


class SmtpMailer(IMailer):
    """IMailer over SMTP (aiosmtplib); STARTTLS is negotiated when offered"""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        sender: str,
        timeout: float = 20,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "SmtpMailer":
        return cls(
            host=config.SMTP_HOST,
            port=config.SMTP_PORT,
            username=config.SMTP_USER,
            password=config.SMTP_PASS,
            sender=config.SMTP_FROM,
            timeout=config.SMTP_TIMEOUT,
        )

    def build_message(self, to: str, subject: str, code: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = to
        message["Subject"] = subject
        message.set_content(f"Your verification code is: {code}")
        message.add_alternative(
            f"<p>Your verification code is: <b>{code}</b></p>", subtype="html"
        )
        return message

    async def send_otp(self, to: str, subject: str, code: str) -> None:
        if not self.host:
            raise MailerNotConfigured("SMTP_HOST is not set")

        await aiosmtplib.send(
            self.build_message(to, subject, code),
            hostname=self.host,
            port=self.port,
            username=self.username or None,
            password=self.password or None,
            timeout=self.timeout,
        )
