"""Direct parse and history API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from eventmail.api.dependencies import get_history
from eventmail.models import EventResponse, HistoryResponse, ParseRequest, ParseResponse
from eventmail.parsing import segment
from eventmail.stores.history import RequestHistory

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["parse"])


@router.post("/parse", response_model=ParseResponse)
async def parse(request: ParseRequest) -> ParseResponse:
    """Parse event text posted directly, without replying by email."""
    if not request.text:
        raise HTTPException(status_code=400, detail='Missing "text" field in request body')

    events = segment(request.text)
    logger.info("Parsed %d event(s) from %d chars", len(events), len(request.text))
    return ParseResponse(
        events_parsed=len(events),
        events=[EventResponse.from_record(e) for e in events],
    )


@router.get("/events", response_model=HistoryResponse)
async def list_recent(
    history: Annotated[RequestHistory, Depends(get_history)],
    limit: int = Query(default=20, ge=1, le=100),
) -> HistoryResponse:
    """List recently processed webhook requests, newest first."""
    return HistoryResponse(total=len(history), events=history.recent(limit))
