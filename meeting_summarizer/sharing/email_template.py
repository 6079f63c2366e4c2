# email_template.py
import html
import re
from datetime import datetime
from typing import Optional

PREVIEW_CHARS = 500
ELLIPSIS = "..."

_TAG_RE = re.compile(r"<[^>]*>")

STYLE = """
            body { font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 800px; margin: 0 auto; padding: 20px; }
            .header { background-color: #f4f4f4; padding: 20px; border-radius: 5px; margin-bottom: 20px; }
            .summary { background-color: #fff; border-left: 4px solid #007bff; padding: 20px; margin: 20px 0; }
            .prompt { background-color: #e9f7ef; padding: 15px; border-radius: 5px; margin: 10px 0; }
            .footer { margin-top: 30px; padding-top: 20px; border-top: 1px solid #eee; font-size: 12px; color: #666; }
            .original { background-color: #f8f9fa; padding: 15px; border-radius: 5px; margin: 20px 0; max-height: 200px; overflow-y: auto; }
"""


def _as_html(text: str) -> str:
    return html.escape(text).replace("\n", "<br>")


def preview(original_text: str, limit: int = PREVIEW_CHARS) -> str:
    """First ``limit`` characters, with an ellipsis only when something was cut."""
    if len(original_text) > limit:
        return original_text[:limit] + ELLIPSIS
    return original_text


def format_summary_email(
    original_text: str,
    summary: str,
    custom_directive: Optional[str] = None,
    generated_at: Optional[datetime] = None,
) -> str:
    generated_at = generated_at or datetime.now()

    prompt_block = ""
    if custom_directive:
        prompt_block = f"""
        <div class="prompt">
            <h3>📝 Custom Instructions Used:</h3>
            <p><em>"{html.escape(custom_directive)}"</em></p>
        </div>
        """

    return f"""
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="utf-8">
        <title>Meeting Summary</title>
        <style>{STYLE}        </style>
    </head>
    <body>
        <div class="header">
            <h1>🤖 AI Meeting Summary</h1>
            <p>Generated on: {generated_at.strftime("%Y-%m-%d %H:%M:%S")}</p>
        </div>
        {prompt_block}
        <div class="summary">
            <h2>📋 Summary</h2>
            <div>{_as_html(summary)}</div>
        </div>

        <div class="original">
            <h3>📄 Original Transcript (Preview)</h3>
            <div>{_as_html(preview(original_text))}</div>
        </div>

        <div class="footer">
            <p>This summary was generated using AI technology. Please review for accuracy.</p>
        </div>
    </body>
    </html>
    """


def html_to_text(document: str) -> str:
    """Plain-text companion body: tags stripped, entities decoded."""
    return html.unescape(_TAG_RE.sub("", document))
