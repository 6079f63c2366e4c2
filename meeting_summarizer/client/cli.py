#!/usr/bin/env python3
"""
Terminal client for the meeting summarizer API.
Usage: python -m meeting_summarizer.client.cli <transcript.txt | -> [--prompt TEXT] [--share a@x.com,b@y.com]
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional

import httpx

from meeting_summarizer.core import config
from meeting_summarizer.client import api
from meeting_summarizer.client.state import (
    ViewState,
    can_generate,
    can_share,
    render_summary,
    request_failed,
    set_custom_prompt,
    set_transcript,
    share_sent,
    start_request,
    summary_received,
)

logger = logging.getLogger(__name__)


def parse_recipients(raw: str) -> List[str]:
    return [r.strip() for r in raw.split(",") if r.strip()]


def load_transcript(state: ViewState, source: str) -> ViewState:
    if source == "-":
        return set_transcript(state, sys.stdin.read(), method="paste")
    with open(source, "r", encoding="utf-8") as f:
        return set_transcript(state, f.read(), method="upload", source_name=os.path.basename(source))


async def run(args: argparse.Namespace, transport: Optional[httpx.AsyncBaseTransport] = None) -> ViewState:
    try:
        state = load_transcript(ViewState(), args.source)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Could not read transcript %s: %s", args.source, e)
        return request_failed(ViewState(), f"Error reading transcript: {e}")
    state = set_custom_prompt(state, (args.prompt or "").strip())

    if not can_generate(state):
        return request_failed(state, "Please provide a transcript first")

    async with httpx.AsyncClient(base_url=args.api_url, timeout=args.timeout, transport=transport) as client:
        state = start_request(state, "Generating...")
        outcome = await api.request_summary(
            client,
            state.transcript,
            state.custom_prompt,
            filename=state.source_name if state.input_method == "upload" else None,
        )
        outcome = api.resolve_summary(outcome, state.transcript, state.custom_prompt, allow_mock=args.allow_mock)
        if isinstance(outcome, api.GatewayFailure):
            return request_failed(state, f"Error generating summary: {outcome.message}")

        state = summary_received(
            state, outcome.summary, outcome.original_length, outcome.summary_length, is_mock=outcome.is_mock
        )
        print(render_summary(state))

        if not args.share:
            return state
        if not can_share(state):
            return request_failed(state, "Refusing to email a mock summary")

        recipients = parse_recipients(args.share)
        state = start_request(state, "Sending...")
        shared = await api.share_summary(
            client,
            recipients,
            state.summary,
            original_text=state.transcript,
            subject=args.subject,
            custom_prompt=state.custom_prompt,
        )
        if isinstance(shared, api.GatewayFailure):
            return request_failed(state, f"Email sharing failed: {shared.message}")
        return share_sent(state, len(shared.recipients))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Summarize a meeting transcript and optionally email it")
    parser.add_argument("source", help="Transcript file (.txt, .text, .md) or - for stdin")
    parser.add_argument("--prompt", default="", help="Custom instructions for the summary")
    parser.add_argument("--share", default="", help="Comma-separated recipient addresses")
    parser.add_argument("--subject", default="", help="Email subject")
    parser.add_argument("--api-url", default=config.SUMMARIZER_API_URL, help="Base URL of the API")
    parser.add_argument("--timeout", type=float, default=120.0)
    parser.add_argument(
        "--allow-mock",
        action="store_true",
        help="Show a clearly labelled mock summary if the service is unreachable",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    args = build_parser().parse_args(argv)
    state = asyncio.run(run(args))
    if state.status:
        print(state.status, file=sys.stderr if state.status_kind == "error" else sys.stdout)
    return 1 if state.status_kind == "error" else 0


if __name__ == "__main__":
    sys.exit(main())
