"""POST /api/share-summary endpoint tests."""

from __future__ import annotations

import smtplib
from unittest.mock import AsyncMock, patch

import pytest

URL = "/api/share-summary"


async def test_share_summary_success(client, mock_smtp):
    response = await client.post(
        URL,
        json={
            "recipients": ["alice@example.com", " bob@example.org "],
            "subject": "Sprint review",
            "summary": "Decided to ship v2.",
            "originalText": "Team met. Decided to ship v2.",
            "customPrompt": "Be brief",
        },
    )

    assert response.status_code == 200, response.text
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Summary sent successfully to 2 recipient(s)"
    assert data["recipients"] == ["alice@example.com", "bob@example.org"]
    assert data["messageId"].startswith("<")

    message = mock_smtp.server.send_message.call_args.args[0]
    assert mock_smtp.server.send_message.call_args.kwargs["to_addrs"] == ["alice@example.com", "bob@example.org"]
    assert message["Subject"] == "Sprint review"
    assert message["To"] == "alice@example.com, bob@example.org"
    html = message.get_body(preferencelist=("html",)).get_content()
    assert "Decided to ship v2." in html
    assert "Be brief" in html


async def test_share_summary_defaults(client, mock_smtp):
    response = await client.post(URL, json={"recipients": ["alice@example.com"], "summary": "x"})

    assert response.status_code == 200
    message = mock_smtp.server.send_message.call_args.args[0]
    assert message["Subject"] == "Meeting Summary - AI Generated"
    html = message.get_body(preferencelist=("html",)).get_content()
    assert "Original transcript not available" in html
    assert "Custom Instructions Used" not in html


async def test_malformed_recipient_rejected(client, mock_smtp):
    response = await client.post(URL, json={"recipients": ["not-an-email"], "summary": "x"})

    assert response.status_code == 400
    assert "not-an-email" in response.json()["error"]
    mock_smtp.assert_not_called()


async def test_only_malformed_entries_listed(client, mock_smtp):
    response = await client.post(
        URL,
        json={
            "recipients": ["ok@example.com", "bad", "two words@example.com", "missing@tld"],
            "summary": "x",
        },
    )

    assert response.status_code == 400
    assert response.json() == {
        "error": "Invalid email addresses: bad, two words@example.com, missing@tld"
    }
    mock_smtp.assert_not_called()


@pytest.mark.parametrize("body", [{"summary": "x"}, {"recipients": [], "summary": "x"}, {"recipients": None, "summary": "x"}])
async def test_missing_recipients(client, mock_smtp, body):
    response = await client.post(URL, json=body)

    assert response.status_code == 400
    assert response.json()["error"] == "Please provide at least one recipient email address."


@pytest.mark.parametrize("summary", [None, "", "   \n"])
async def test_summary_required(client, mock_smtp, summary):
    response = await client.post(URL, json={"recipients": ["a@example.com"], "summary": summary})

    assert response.status_code == 400
    assert response.json()["error"] == "Summary content is required."
    mock_smtp.assert_not_called()


@pytest.mark.parametrize("recipients", ["a@example.com", {"to": "a@example.com"}, 42])
async def test_non_list_recipients_treated_as_missing(client, mock_smtp, recipients):
    response = await client.post(URL, json={"recipients": recipients, "summary": "x"})

    assert response.status_code == 400
    assert response.json()["error"] == "Please provide at least one recipient email address."
    mock_smtp.assert_not_called()


@pytest.mark.parametrize(
    "address", ["a,b@example.com", "Eve <eve@example.com>", "\"a\"@example.com", "a;b@example.com"]
)
async def test_address_lists_and_display_names_rejected(client, mock_smtp, address):
    response = await client.post(URL, json={"recipients": [address], "summary": "x"})

    assert response.status_code == 400
    assert response.json()["error"] == f"Invalid email addresses: {address}"
    mock_smtp.assert_not_called()


@pytest.mark.parametrize("subject", ["hi\r\nBcc: evil@example.com", "two\nlines"])
async def test_multiline_subject_rejected(client, mock_smtp, subject):
    response = await client.post(URL, json={"recipients": ["a@example.com"], "summary": "x", "subject": subject})

    assert response.status_code == 400
    assert response.json()["error"] == "Subject must be a single line."
    mock_smtp.assert_not_called()


async def test_delivery_failure_is_500_with_details(client, mock_smtp):
    mock_smtp.server.login.side_effect = smtplib.SMTPAuthenticationError(535, b"auth rejected")

    response = await client.post(URL, json={"recipients": ["a@example.com"], "summary": "x"})

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Failed to send email"
    assert "auth rejected" in body["details"]
    mock_smtp.server.send_message.assert_not_called()


async def test_unexpected_error_hides_details_in_production(client):
    with patch(
        "meeting_summarizer.sharing.service.mailer.send_email",
        new=AsyncMock(side_effect=RuntimeError("internal detail")),
    ):
        response = await client.post(URL, json={"recipients": ["a@example.com"], "summary": "x"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to share summary via email"}


async def test_unexpected_error_details_in_development(client, settings):
    settings.ENVIRONMENT = "development"
    with patch(
        "meeting_summarizer.sharing.service.mailer.send_email",
        new=AsyncMock(side_effect=RuntimeError("internal detail")),
    ):
        response = await client.post(URL, json={"recipients": ["a@example.com"], "summary": "x"})

    assert response.status_code == 500
    assert response.json()["details"] == "internal detail"
