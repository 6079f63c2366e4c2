# controller.py
import logging
from typing import Optional

from fastapi import APIRouter, Request
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException

from ..core import config
from ..core.errors import InputValidationError, SummarizerError, UpstreamProviderError
from . import schema, service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["summaries"])


def _text_field(value) -> Optional[str]:
    return value if isinstance(value, str) else None


@router.post("/generate-summary", response_model=schema.SummaryResponse)
async def generate_summary_endpoint(request: Request):
    """
    Accepts a multipart upload in the ``transcript`` field, or the transcript as
    a form/JSON field, plus an optional ``customPrompt``.
    """
    try:
        if request.headers.get("content-type", "").startswith("application/json"):
            try:
                payload = schema.SummaryRequest.model_validate(await request.json())
            except ValueError as e:
                raise InputValidationError("Invalid request body", details=str(e)) from e
            return await service.generate_summary(text=payload.transcript, custom_prompt=payload.custom_prompt)

        async with request.form(max_part_size=config.MAX_UPLOAD_BYTES) as form:
            transcript = form.get("transcript")
            custom_prompt = _text_field(form.get("customPrompt")) or ""
            if isinstance(transcript, UploadFile):
                return await service.generate_summary(upload=transcript, custom_prompt=custom_prompt)
            return await service.generate_summary(text=_text_field(transcript), custom_prompt=custom_prompt)
    except (SummarizerError, HTTPException):
        # HTTPException: upload library errors, rendered at the app level
        raise
    except Exception as e:
        logger.exception("Summary generation error")
        raise UpstreamProviderError(UpstreamProviderError.GENERIC, details=str(e)) from e
