from __future__ import annotations

from datetime import date

# strftime names use the process LC_TIME locale, which stays "C" unless the
# host application calls locale.setlocale().


def _to_date(value: date | str) -> date | None:
    if isinstance(value, date):
        return value
    try:
        # plain calendar date, no time or timezone component
        return date.fromisoformat(str(value).strip())
    except ValueError:
        return None


def format_short(value: date | str) -> str:
    """e.g. "Mon, Jan 1, 2024". Unparseable input is returned as-is."""
    d = _to_date(value)
    if d is None:
        return str(value)
    return f"{d.strftime('%a')}, {d.strftime('%b')} {d.day}, {d.year}"


def format_long(value: date | str) -> str:
    """e.g. "January 1, 2024". Unparseable input is returned as-is."""
    d = _to_date(value)
    if d is None:
        return str(value)
    return f"{d.strftime('%B')} {d.day}, {d.year}"


def month_name(month: int) -> str:
    return date(2020, month, 1).strftime("%B")
