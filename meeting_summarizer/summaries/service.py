# service.py
import logging
from typing import Optional

from fastapi import UploadFile

from ..core import groq_client
from . import schema
from .intake import acquire_transcript
from .prompts import build_prompts

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


async def summarize(transcript: str, custom_prompt: Optional[str] = None) -> schema.SummaryResponse:
    """Prompt -> completion -> response shape for an already resolved transcript."""
    custom_prompt = custom_prompt or ""
    system_prompt, user_prompt = build_prompts(transcript, custom_prompt)
    summary = await groq_client.create_summary(system_prompt, user_prompt)

    logger.info("Summary generated: %d -> %d chars", len(transcript), len(summary))
    return schema.SummaryResponse(
        summary=summary,
        original_length=len(transcript),
        summary_length=len(summary),
        custom_prompt=custom_prompt,
    )


async def generate_summary(
    upload: Optional[UploadFile] = None,
    text: Optional[str] = None,
    custom_prompt: Optional[str] = None,
) -> schema.SummaryResponse:
    """
    Main entrypoint: acquire the transcript, then summarize it.
    Any stage failure propagates as a SummarizerError.
    """
    transcript = await acquire_transcript(upload=upload, text=text)
    return await summarize(transcript, custom_prompt)
