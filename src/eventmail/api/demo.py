"""Parser demo page: parses a built-in sample and shows the reply it would send."""

from datetime import datetime
from typing import Annotated
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from eventmail.api.dependencies import get_settings
from eventmail.config import Settings
from eventmail.parsing import segment
from eventmail.render import render_parser_demo, render_reply

router = APIRouter(tags=["demo"])

SAMPLE_TEXT = """\
Sun, Jan 11, 2026 at 10 AM
Science Fun
800 Foster City Blvd, Foster City
Hosted by JBN and Wornick Jewish Day School
https://www.wornickjds.org/forms-and-registrations/science-fun

Sun, Jan 25, 2026 at 10:30 AM
Peninsula Newborn Playgroup for Babies 0 - 9 Months
Jewish Family & Children's Services  · Palo Alto
Hosted by JBN
https://www.eventbrite.com/e/peninsula-newborn-playgroup"""


@router.get("/test", response_class=HTMLResponse)
async def parser_test(settings: Annotated[Settings, Depends(get_settings)]) -> HTMLResponse:
    """Show the sample input, the parsed events and the rendered reply."""
    events = segment(SAMPLE_TEXT)
    reply_html = render_reply(
        events,
        [],
        processed_at=datetime.now(ZoneInfo(settings.display_timezone)),
        form_url=settings.form_url,
    )
    return HTMLResponse(render_parser_demo(SAMPLE_TEXT, events, reply_html))
