# meeting_summarizer/client/api.py
import logging
from typing import List, Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .mock_summary import build_mock_summary

logger = logging.getLogger(__name__)


class SummaryPayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    summary: str
    original_length: int
    summary_length: int
    custom_prompt: str = ""
    is_mock: bool = False


class SharePayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    message_id: Optional[str] = None
    recipients: List[str]


class GatewayFailure(BaseModel):
    message: str
    status_code: Optional[int] = None

    @property
    def service_unavailable(self) -> bool:
        """True for transport errors and 5xx, False for request errors (4xx)."""
        return self.status_code is None or self.status_code >= 500


SummaryOutcome = Union[SummaryPayload, GatewayFailure]
ShareOutcome = Union[SharePayload, GatewayFailure]


def _failure_from_response(response: httpx.Response) -> GatewayFailure:
    try:
        message = response.json().get("error") or response.reason_phrase
    except ValueError:
        message = response.reason_phrase or f"HTTP {response.status_code}"
    return GatewayFailure(message=message, status_code=response.status_code)


async def request_summary(
    client: httpx.AsyncClient,
    transcript: str,
    custom_prompt: str = "",
    filename: Optional[str] = None,
) -> SummaryOutcome:
    """POST to /generate-summary. Never raises for HTTP or transport errors."""
    data = {"customPrompt": custom_prompt} if custom_prompt else {}
    try:
        if filename:
            files = {"transcript": (filename, transcript.encode("utf-8"), "text/plain")}
            response = await client.post("/generate-summary", data=data, files=files)
        else:
            response = await client.post("/generate-summary", data={**data, "transcript": transcript})
    except httpx.HTTPError as e:
        logger.warning("Summary service not reachable: %s", e)
        return GatewayFailure(message=str(e) or type(e).__name__)

    if response.status_code != 200:
        return _failure_from_response(response)
    return SummaryPayload.model_validate(response.json())


def resolve_summary(
    outcome: SummaryOutcome,
    transcript: str,
    custom_prompt: str = "",
    allow_mock: bool = False,
) -> SummaryOutcome:
    """
    Degraded-mode policy: substitute a labelled mock summary only when the
    service itself is unavailable and the caller opted in.
    """
    if isinstance(outcome, SummaryPayload):
        return outcome
    if not (allow_mock and outcome.service_unavailable):
        return outcome

    mock = build_mock_summary(transcript, custom_prompt)
    return SummaryPayload(
        summary=mock,
        original_length=len(transcript),
        summary_length=len(mock),
        custom_prompt=custom_prompt,
        is_mock=True,
    )


async def share_summary(
    client: httpx.AsyncClient,
    recipients: List[str],
    summary: str,
    original_text: str = "",
    subject: str = "",
    custom_prompt: str = "",
) -> ShareOutcome:
    payload = {
        "recipients": recipients,
        "subject": subject or "Meeting Summary - AI Generated",
        "summary": summary,
        "originalText": original_text,
        "customPrompt": custom_prompt,
    }
    try:
        response = await client.post("/share-summary", json=payload)
    except httpx.HTTPError as e:
        return GatewayFailure(message=str(e) or type(e).__name__)

    if response.status_code != 200:
        return _failure_from_response(response)
    return SharePayload.model_validate(response.json())
