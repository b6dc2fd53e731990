"""Date helpers."""

from datetime import datetime


def current_date() -> str:
    """Return today's local date as YYYY-MM-DD."""
    return datetime.now().strftime("%Y-%m-%d")