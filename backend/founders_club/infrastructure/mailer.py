"""SMTP Mailer — sends transactional HTML email with a plain-text alternative.

Invariants:
    - send() never raises: every failure comes back as MailResult(success=False)
    - The blocking smtplib session runs in a worker thread, off the event loop
    - With send_emails disabled the message is logged and reported as sent

Design Decisions:
    - One SMTP connection per message: invite volume is a handful per day
"""

import asyncio
import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr

from founders_club.config import Settings
from founders_club.core.repository_protocols import MailResult

logger = logging.getLogger(__name__)


class SmtpMailer:
    """MailSender backed by an SMTP relay."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        from_email: str,
        from_name: str,
        use_tls: bool = True,
        timeout_seconds: int = 30,
        enabled: bool = True,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_email = from_email
        self.from_name = from_name
        self.use_tls = use_tls
        self.timeout_seconds = timeout_seconds
        self.enabled = enabled

    @classmethod
    def from_settings(cls, settings: Settings) -> "SmtpMailer":
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_username,
            password=settings.smtp_password,
            from_email=settings.mail_from_email,
            from_name=settings.mail_from_name,
            use_tls=settings.smtp_use_tls,
            timeout_seconds=settings.smtp_timeout_seconds,
            enabled=settings.send_emails,
        )

    def build_message(
        self, to: str, subject: str, html: str, text: str | None = None,
    ) -> MIMEMultipart:
        message = MIMEMultipart("alternative")
        message["Subject"] = subject
        message["From"] = formataddr((self.from_name, self.from_email))
        message["To"] = to
        if text:
            message.attach(MIMEText(text, "plain", "utf-8"))
        message.attach(MIMEText(html, "html", "utf-8"))
        return message

    async def send(
        self, to: str, subject: str, html: str, text: str | None = None,
    ) -> MailResult:
        if not self.enabled:
            logger.info(f"Email sending disabled. Would send '{subject}' to {to}")
            return MailResult(success=True)

        try:
            message = self.build_message(to, subject, html, text)
            await asyncio.to_thread(self._deliver, to, message)
        except Exception as e:
            logger.error(f"Failed to send email to {to}: {e}")
            return MailResult(success=False, error=str(e))

        logger.info(f"Email sent successfully to {to}")
        return MailResult(success=True)

    def _deliver(self, to: str, message: MIMEMultipart) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout_seconds) as server:
            if self.use_tls:
                server.starttls(context=ssl.create_default_context())
            if self.username:
                server.login(self.username, self.password)
            server.sendmail(self.from_email, [to], message.as_string())
