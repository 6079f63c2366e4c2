# meeting_summarizer/client/state.py
"""
Client view state.

The state is an immutable pydantic model; every change goes through one of the
reducer functions below, each returning a new ``ViewState``. Rendering helpers
only read state.
"""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

InputMethod = Literal["paste", "upload"]
StatusKind = Literal["info", "success", "warning", "error"]


class ViewState(BaseModel):
    model_config = ConfigDict(frozen=True)

    input_method: InputMethod = "paste"
    transcript: str = ""
    source_name: Optional[str] = None
    custom_prompt: str = ""
    summary: str = ""
    summary_is_mock: bool = False
    original_length: int = 0
    summary_length: int = 0
    busy: bool = False
    status: str = ""
    status_kind: StatusKind = "info"


# Reducers

def set_transcript(state: ViewState, text: str, method: InputMethod = "paste", source_name: Optional[str] = None) -> ViewState:
    return state.model_copy(update={"transcript": text, "input_method": method, "source_name": source_name})


def set_custom_prompt(state: ViewState, prompt: str) -> ViewState:
    return state.model_copy(update={"custom_prompt": prompt})


def start_request(state: ViewState, label: str) -> ViewState:
    return state.model_copy(update={"busy": True, "status": label, "status_kind": "info"})


def summary_received(
    state: ViewState,
    summary: str,
    original_length: int,
    summary_length: int,
    is_mock: bool = False,
) -> ViewState:
    status = "Mock summary generated (service unavailable)" if is_mock else "Summary generated successfully!"
    return state.model_copy(update={
        "summary": summary,
        "summary_is_mock": is_mock,
        "original_length": original_length,
        "summary_length": summary_length,
        "busy": False,
        "status": status,
        "status_kind": "warning" if is_mock else "success",
    })


def request_failed(state: ViewState, message: str) -> ViewState:
    return state.model_copy(update={"busy": False, "status": message, "status_kind": "error"})


def share_sent(state: ViewState, recipient_count: int) -> ViewState:
    return state.model_copy(update={
        "busy": False,
        "status": f"Summary sent to {recipient_count} recipient(s)!",
        "status_kind": "success",
    })


# Derived views

def can_generate(state: ViewState) -> bool:
    return bool(state.transcript.strip()) and not state.busy


def can_share(state: ViewState) -> bool:
    return bool(state.summary.strip()) and not state.summary_is_mock and not state.busy


def compression_ratio(state: ViewState) -> Optional[int]:
    """Percentage saved by the summary, None before a summary exists."""
    if not state.original_length:
        return None
    return round((1 - state.summary_length / state.original_length) * 100)


def render_summary(state: ViewState) -> str:
    if not state.summary:
        return ""
    ratio = compression_ratio(state)
    header = "MOCK SUMMARY (not generated by the AI service)" if state.summary_is_mock else "Summary"
    lines = [
        f"== {header} ==",
        state.summary,
        "",
        f"Original: {state.original_length:,} chars | Summary: {state.summary_length:,} chars"
        + (f" | Compression: {ratio}%" if ratio is not None else ""),
    ]
    return "\n".join(lines)
