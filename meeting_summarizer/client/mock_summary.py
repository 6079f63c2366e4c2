# meeting_summarizer/client/mock_summary.py
import math
from typing import Optional

MOCK_LABEL = "MOCK SUMMARY"


def build_mock_summary(transcript: str, custom_prompt: Optional[str] = None) -> str:
    """Locally synthesized placeholder. Always labelled as a mock."""
    word_count = len(transcript.split())

    parts = [f"{MOCK_LABEL} - Meeting Summary ({word_count} words processed)", ""]
    if custom_prompt:
        parts += [f"Custom Instructions: {custom_prompt}", ""]

    parts += [
        "Key Points:",
        f"• Discussion covered {math.ceil(word_count / 100)} main topics",
        "• Meeting involved multiple participants",
        "• Various action items and decisions were made",
        "",
        "Action Items:",
        "• Follow up on key decisions",
        "• Schedule next meeting",
        "• Review and implement discussed changes",
        "",
        "Note: This is a mock summary generated locally because the summarization "
        "service could not be reached. It does not reflect the transcript content.",
    ]
    return "\n".join(parts)
