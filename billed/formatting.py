from __future__ import annotations

from datetime import date, datetime
from typing import NamedTuple

from billed.constants import MONTHS_FR, STATUS_LABELS


class FormattedDate(NamedTuple):
    value: str
    fallback: bool = False
    error: str = ""


def parse_date(raw: str) -> date:
    """Parse an ISO date or datetime string. Raises ValueError/TypeError."""
    return datetime.fromisoformat(raw).date()


def format_date(raw: str) -> str:
    """'2004-04-04' -> '4 Avr. 04'"""
    parsed = parse_date(raw)
    return f"{parsed.day} {MONTHS_FR[parsed.month]}. {parsed.year % 100:02d}"


def safe_format_date(raw: str | None) -> FormattedDate:
    """Format ``raw`` or fall back to the raw value, tagged, without raising."""
    try:
        return FormattedDate(format_date(raw))
    except (ValueError, TypeError) as exc:
        return FormattedDate("" if raw is None else str(raw), fallback=True, error=str(exc))


def format_status(status: str | None) -> str | None:
    if status is None:
        return None
    return STATUS_LABELS.get(status, status)


def date_sort_key(raw: str | None) -> str:
    """Comparable key for a bill date; unparsable dates keep their raw text."""
    try:
        return datetime.fromisoformat(raw).replace(tzinfo=None).isoformat()
    except (ValueError, TypeError):
        return "" if raw is None else str(raw)
