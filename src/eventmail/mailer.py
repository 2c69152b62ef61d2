"""SMTP transport for reply emails."""

import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage

from eventmail.config import Settings
from eventmail.models import SendResult

logger = logging.getLogger(__name__)

SMTP_TIMEOUT = 10.0  # seconds


@dataclass(frozen=True)
class SmtpConfig:
    """Connection settings for the outbound SMTP server."""

    host: str | None
    port: int = 587
    secure: bool = False
    user: str | None = None
    password: str | None = None
    from_address: str = "SF Moms Events <events@example.com>"

    @classmethod
    def from_settings(cls, settings: Settings) -> "SmtpConfig":
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            secure=settings.smtp_secure,
            user=settings.smtp_user,
            password=settings.smtp_pass,
            from_address=settings.smtp_from,
        )

    @property
    def configured(self) -> bool:
        return bool(self.host)


def build_message(config: SmtpConfig, to_email: str, subject: str, html: str) -> EmailMessage:
    """Build a multipart message with a plain-text fallback and the HTML body."""
    msg = EmailMessage()
    msg["Subject"] = subject
    msg["From"] = config.from_address
    msg["To"] = to_email
    msg.set_content("This message contains HTML. Please view it in an HTML-capable mail client.")
    msg.add_alternative(html, subtype="html")
    return msg


def send_reply(config: SmtpConfig, to_email: str, subject: str, html: str) -> SendResult:
    """Send an HTML reply. Never raises; failures are reported in the result.

    Args:
        config: SMTP connection settings.
        to_email: Recipient address.
        subject: Message subject.
        html: Rendered HTML body.

    Returns:
        Whether the message was handed to the server, and why not if it wasn't.
    """
    if not config.configured:
        logger.info("Email not configured - would send to: %s", to_email)
        return SendResult(sent=False, reason="SMTP not configured")

    msg = build_message(config, to_email, subject, html)
    server: smtplib.SMTP
    try:
        if config.secure:
            server = smtplib.SMTP_SSL(config.host, config.port, timeout=SMTP_TIMEOUT)
        else:
            server = smtplib.SMTP(config.host, config.port, timeout=SMTP_TIMEOUT)
        with server:
            if not config.secure:
                server.ehlo()
                if server.has_extn("starttls"):
                    server.starttls()
                    server.ehlo()
            if config.user:
                server.login(config.user, config.password or "")
            server.send_message(msg)
    except (smtplib.SMTPException, OSError) as e:
        logger.warning("Email send to %s failed: %s", to_email, e)
        return SendResult(sent=False, reason=str(e) or e.__class__.__name__)

    logger.info("Reply sent to %s", to_email)
    return SendResult(sent=True)
