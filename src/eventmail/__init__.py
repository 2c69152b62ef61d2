"""eventmail: parse pasted event announcements into structured events."""

__version__ = "1.0.0"
