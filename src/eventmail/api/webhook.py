"""Webhook endpoint for inbound emails forwarded by Zapier."""

import asyncio
import html
import logging
import re
from datetime import datetime
from typing import Annotated
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends

from eventmail.api.dependencies import get_history, get_settings, get_smtp_config
from eventmail.config import Settings
from eventmail.mailer import SmtpConfig, send_reply
from eventmail.models import EventResponse, SendResult, WebhookPayload, WebhookResponse
from eventmail.parsing import segment
from eventmail.render import render_reply, reply_subject
from eventmail.stores.history import RequestHistory

logger = logging.getLogger(__name__)

router = APIRouter(tags=["webhook"])

# Tags that end a line of text when an HTML body is flattened
LINE_BREAK_TAG_RE = re.compile(r"<br\s*/?>|</(?:p|div|li|tr|h[1-6])\s*>", re.IGNORECASE)
TAG_RE = re.compile(r"<[^>]*>")
HORIZONTAL_SPACE_RE = re.compile(r"[ \t\f\v\xa0]+")


def html_to_text(body_html: str) -> str:
    """Flatten an HTML email body to plain text, keeping line breaks."""
    text = LINE_BREAK_TAG_RE.sub("\n", body_html)
    text = html.unescape(TAG_RE.sub(" ", text))
    lines = (HORIZONTAL_SPACE_RE.sub(" ", line).strip() for line in text.splitlines())
    return "\n".join(lines).strip()


def extract_body(payload: WebhookPayload) -> str:
    """Pick the email text: plain body, else flattened HTML, else the raw body."""
    if payload.body_plain:
        return payload.body_plain
    if payload.body_html:
        text = html_to_text(payload.body_html)
        if text:
            return text
    return payload.raw_body or ""


@router.post("/webhook/zapier", response_model=WebhookResponse)
async def zapier_webhook(
    payload: WebhookPayload,
    settings: Annotated[Settings, Depends(get_settings)],
    history: Annotated[RequestHistory, Depends(get_history)],
    smtp_config: Annotated[SmtpConfig, Depends(get_smtp_config)],
) -> WebhookResponse:
    """Parse events from a forwarded email and reply to the sender with the results."""
    logger.info("Received webhook from %s: %r", payload.from_email or "unknown sender", payload.subject)

    body = extract_body(payload)
    errors: list[str] = []
    if not body:
        errors.append("No email body content found")

    events = segment(body)
    history.record(payload.from_email, payload.subject, events)
    logger.info("Parsed %d event(s) from webhook email", len(events))

    processed_at = datetime.now(ZoneInfo(settings.display_timezone))
    reply_html = render_reply(events, errors, processed_at=processed_at, form_url=settings.form_url)

    email_result = SendResult(sent=False, reason="Not attempted")
    if payload.from_email:
        # smtplib blocks; keep it off the event loop
        email_result = await asyncio.to_thread(
            send_reply,
            smtp_config,
            payload.from_email,
            reply_subject(len(events), payload.subject),
            reply_html,
        )

    return WebhookResponse(
        events_parsed=len(events),
        events=[EventResponse.from_record(e) for e in events],
        email_reply=email_result,
        message=(
            f"Successfully parsed {len(events)} event(s)" if events else "No events found in email body"
        ),
    )
