"""Pydantic models for the eventmail API."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from eventmail.parsing import EventRecord


class EventResponse(BaseModel):
    """A parsed event, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    date: str = ""  # YYYY-MM-DD or ""
    start_time: str = ""  # HH:MM or ""
    end_time: str = ""  # HH:MM or ""
    venue: str = ""
    address: str = ""
    organizer: str = ""
    url: str = ""
    cost: str = ""
    description: str = ""

    @classmethod
    def from_record(cls, record: EventRecord) -> "EventResponse":
        return cls.model_validate(record.to_dict())


class ParseRequest(BaseModel):
    """Request body for the /api/parse endpoint."""

    text: str | None = None


class ParseResponse(BaseModel):
    """Response body for the /api/parse endpoint."""

    success: bool = True
    events_parsed: int
    events: list[EventResponse]


class WebhookPayload(BaseModel):
    """Inbound email as forwarded by the Zapier email webhook."""

    from_email: str | None = None
    from_name: str | None = None
    subject: str | None = None
    body_plain: str | None = None
    body_html: str | None = None
    raw_body: str | None = None


class SendResult(BaseModel):
    """Outcome of a reply email send attempt."""

    sent: bool
    reason: str = ""


class WebhookResponse(BaseModel):
    """Response body for the /webhook/zapier endpoint."""

    success: bool = True
    events_parsed: int
    events: list[EventResponse]
    email_reply: SendResult
    message: str


class HistoryEntry(BaseModel):
    """One processed request kept for debugging."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    timestamp: str  # ISO timestamp, UTC
    source: str
    subject: str
    event_count: int
    events: list[EventResponse]


class HistoryResponse(BaseModel):
    """Response body for the /api/events endpoint."""

    total: int
    events: list[HistoryEntry]
