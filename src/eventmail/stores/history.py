"""In-memory history of recently processed requests, for debugging."""

import threading
from collections import deque
from collections.abc import Iterable
from datetime import UTC, datetime

from eventmail.models import EventResponse, HistoryEntry
from eventmail.parsing import EventRecord


class RequestHistory:
    """Bounded, newest-first log of parse results.

    Holds at most ``capacity`` entries; recording beyond that evicts the oldest.
    Safe to share between request handlers.
    """

    def __init__(self, capacity: int = 100) -> None:
        """Initialize the history.

        Args:
            capacity: Maximum number of entries to retain.
        """
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: deque[HistoryEntry] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    def record(self, source: str | None, subject: str | None, events: Iterable[EventRecord]) -> HistoryEntry:
        """Record the outcome of one processed request.

        Args:
            source: Sender address or other origin of the text.
            subject: Email subject, if any.
            events: The parsed events.

        Returns:
            The stored entry.
        """
        responses = [EventResponse.from_record(e) for e in events]
        entry = HistoryEntry(
            timestamp=datetime.now(UTC).isoformat(),
            source=source or "",
            subject=subject or "",
            event_count=len(responses),
            events=responses,
        )
        with self._lock:
            # appendleft on a bounded deque drops from the right (oldest)
            self._entries.appendleft(entry)
        return entry

    def recent(self, limit: int = 20) -> list[HistoryEntry]:
        """Get the most recent entries, newest first."""
        with self._lock:
            return list(self._entries)[:limit]

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
