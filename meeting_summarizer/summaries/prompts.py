# prompts.py
from typing import Optional, Tuple

SYSTEM_PROMPT = (
    "You are an AI assistant specialized in summarizing meeting transcripts and notes.\n"
    "Your task is to create clear, structured, and actionable summaries."
)

DEFAULT_OUTLINE = (
    "Please provide:\n"
    "1. A brief overview of the meeting\n"
    "2. Key discussion points\n"
    "3. Decisions made\n"
    "4. Action items (if any)\n"
    "5. Next steps or follow-ups"
)


def build_prompts(transcript: str, custom_directive: Optional[str] = None) -> Tuple[str, str]:
    """Return ``(system_prompt, user_prompt)``. The transcript is embedded verbatim."""
    user_prompt = f"Please summarize the following meeting transcript:\n\n{transcript}"

    directive = (custom_directive or "").strip()
    if directive:
        user_prompt += f"\n\nSpecific instructions: {directive}"
    else:
        user_prompt += f"\n\n{DEFAULT_OUTLINE}"

    return SYSTEM_PROMPT, user_prompt
