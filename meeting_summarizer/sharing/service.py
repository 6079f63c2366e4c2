# service.py
import logging
import re
from typing import List, Optional

from ..core.errors import (
    DeliveryError,
    EmptySummaryContentError,
    InvalidRecipientsError,
    InvalidSubjectError,
    MissingRecipientsError,
)
from . import mailer, schema
from .email_template import format_summary_email, html_to_text

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

# one bare address per entry; no display names or header separators
_ADDR_PART = r"[^\s@,;<>\"']+"
EMAIL_RE = re.compile(rf"^{_ADDR_PART}@{_ADDR_PART}\.{_ADDR_PART}$")


def invalid_addresses(recipients: List[str]) -> List[str]:
    return [r for r in recipients if not EMAIL_RE.match(r.strip())]


def validate_share_request(request: schema.ShareRequest) -> List[str]:
    """Return the cleaned recipient list or raise an InputValidationError."""
    if not request.recipients:
        raise MissingRecipientsError()
    if not request.summary or not request.summary.strip():
        raise EmptySummaryContentError()

    invalid = invalid_addresses(request.recipients)
    if invalid:
        raise InvalidRecipientsError(invalid)
    if request.subject and ("\r" in request.subject or "\n" in request.subject):
        raise InvalidSubjectError()
    return [r.strip() for r in request.recipients]


async def share_summary(request: schema.ShareRequest) -> schema.ShareResponse:
    recipients = validate_share_request(request)

    subject = request.subject or schema.DEFAULT_SUBJECT
    html_body = format_summary_email(
        request.original_text or schema.MISSING_ORIGINAL,
        request.summary,
        request.custom_prompt,
    )

    result = await mailer.send_email(recipients, subject, html_body, html_to_text(html_body))
    if not result.success:
        raise DeliveryError(details=result.error)

    logger.info("Summary shared with %d recipient(s)", len(recipients))
    return schema.ShareResponse(
        message=f"Summary sent successfully to {len(recipients)} recipient(s)",
        message_id=result.message_id,
        recipients=recipients,
    )
