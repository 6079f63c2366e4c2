# meeting_summarizer/core/groq_client.py
import asyncio
import logging
from typing import Any, Dict, List

import openai
from openai import OpenAI  # Groq-compatible OpenAI client

from . import config
from .errors import EmptySummaryError, UpstreamProviderError

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def get_client() -> OpenAI:
    """Build a client from the current settings. Nothing is shared between requests."""
    if not config.GROQ_API_KEY:
        raise UpstreamProviderError(UpstreamProviderError.AUTH, details="GROQ_API_KEY is not set")
    return OpenAI(
        api_key=config.GROQ_API_KEY,
        base_url=config.GROQ_BASE_URL,
        timeout=config.GROQ_TIMEOUT_SECONDS,
        max_retries=0,
    )


def classify_provider_error(exc: Exception) -> str:
    """Map a provider exception onto auth / quota / network / generic."""
    if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return UpstreamProviderError.AUTH
    if isinstance(exc, openai.RateLimitError):
        return UpstreamProviderError.QUOTA
    if isinstance(exc, openai.APIConnectionError):  # includes APITimeoutError
        return UpstreamProviderError.NETWORK

    message = str(exc).lower()
    if "api key" in message or "api_key" in message:
        return UpstreamProviderError.AUTH
    if "quota" in message or "limit" in message:
        return UpstreamProviderError.QUOTA
    if "network" in message or "timeout" in message:
        return UpstreamProviderError.NETWORK
    return UpstreamProviderError.GENERIC


async def call_model(messages: List[Dict[str, str]]) -> Any:
    """
    Call the completion API in a thread to avoid blocking the event loop.
    """
    client = get_client()

    def sync_call():
        return client.chat.completions.create(
            model=config.GROQ_MODEL,
            messages=messages,
            temperature=config.SUMMARY_TEMPERATURE,
            max_tokens=config.SUMMARY_MAX_TOKENS,
        )

    return await asyncio.to_thread(sync_call)


async def create_summary(system_prompt: str, user_prompt: str) -> str:
    messages = [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": user_prompt},
    ]
    logger.info("Requesting summary from %s (prompt chars=%d)", config.GROQ_MODEL, len(user_prompt))

    try:
        completion = await call_model(messages)
    except UpstreamProviderError:
        raise
    except Exception as e:
        category = classify_provider_error(e)
        logger.exception("Summary generation failed (%s)", category)
        raise UpstreamProviderError(category, details=str(e)) from e

    try:
        content = completion.choices[0].message.content
    except (AttributeError, IndexError, TypeError) as e:
        logger.error("Unexpected model response: %s", e)
        raise EmptySummaryError() from e

    if not content or not content.strip():
        logger.error("Model returned no summary content")
        raise EmptySummaryError()

    return content.strip()
