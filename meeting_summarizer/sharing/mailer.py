# mailer.py
import asyncio
import logging
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formataddr, make_msgid
from typing import List, Optional

from ..core import config
from .email_template import html_to_text
from .schema import DeliveryResult

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def tls_context() -> ssl.SSLContext:
    context = ssl.create_default_context()
    if not config.EMAIL_TLS_VERIFY:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return context


def open_transport() -> smtplib.SMTP:
    """
    Connect and authenticate against the relay. A new connection is opened
    for every message, settings are read from config on each call.
    """
    if not config.EMAIL_HOST:
        raise RuntimeError("EMAIL_HOST is not configured")

    if config.EMAIL_SECURE:
        server = smtplib.SMTP_SSL(
            config.EMAIL_HOST, config.EMAIL_PORT,
            timeout=config.EMAIL_TIMEOUT_SECONDS, context=tls_context(),
        )
    else:
        server = smtplib.SMTP(config.EMAIL_HOST, config.EMAIL_PORT, timeout=config.EMAIL_TIMEOUT_SECONDS)

    try:
        server.ehlo()
        if not config.EMAIL_SECURE and server.has_extn("starttls"):
            server.starttls(context=tls_context())
            server.ehlo()
        if config.EMAIL_USER and config.EMAIL_PASS:
            server.login(config.EMAIL_USER, config.EMAIL_PASS)
    except Exception:
        server.close()
        raise
    return server


def build_message(recipients: List[str], subject: str, html_body: str, text_body: Optional[str] = None) -> EmailMessage:
    sender = config.EMAIL_USER or ""
    message = EmailMessage()
    message["From"] = formataddr((config.EMAIL_SENDER_NAME, sender))
    message["To"] = ", ".join(recipients)
    message["Subject"] = subject
    message["Message-ID"] = make_msgid(domain=sender.rpartition("@")[2] or None)
    message.set_content(text_body if text_body is not None else html_to_text(html_body))
    message.add_alternative(html_body, subtype="html")
    return message


def _send_sync(recipients: List[str], subject: str, html_body: str, text_body: Optional[str]) -> DeliveryResult:
    try:
        server = open_transport()
    except Exception as e:
        logger.error("Email transport verification failed: %s", e)
        return DeliveryResult(success=False, error=str(e))

    try:
        message = build_message(recipients, subject, html_body, text_body)
        server.send_message(message, to_addrs=recipients)
        message_id = str(message["Message-ID"])
        logger.info("Email sent successfully: %s", message_id)
        return DeliveryResult(success=True, message_id=message_id)
    except Exception as e:
        logger.error("Email sending error: %s", e)
        return DeliveryResult(success=False, error=str(e))
    finally:
        try:
            server.quit()
        except Exception:
            server.close()


async def send_email(
    recipients: List[str],
    subject: str,
    html_body: str,
    text_body: Optional[str] = None,
) -> DeliveryResult:
    """One message, all recipients on a single envelope. Never raises."""
    return await asyncio.to_thread(_send_sync, recipients, subject, html_body, text_body)
