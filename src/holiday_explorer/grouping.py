from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Union

from .errors import MSG_INVALID_MONTH, ValidationError
from .models import HolidayRecord, MonthGroup

ALL_MONTHS = "all"

MonthFilter = Union[int, str, None]


def parse_month_filter(value: MonthFilter) -> Optional[int]:
    """
    Normalise a month selector value: None for "all", else 1-12.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError("invalid month", MSG_INVALID_MONTH)

    s = str(value).strip().lower()
    if s in {"", ALL_MONTHS}:
        return None

    try:
        month = int(s)
    except ValueError:
        raise ValidationError("invalid month", MSG_INVALID_MONTH) from None

    if not 1 <= month <= 12:
        raise ValidationError("invalid month", MSG_INVALID_MONTH)
    return month


def filter_by_month(
    holidays: Iterable[HolidayRecord],
    month_filter: MonthFilter = ALL_MONTHS,
) -> List[HolidayRecord]:
    month = parse_month_filter(month_filter)
    if month is None:
        return list(holidays)
    return [h for h in holidays if h.month == month]


def group_by_month(holidays: Iterable[HolidayRecord]) -> List[MonthGroup]:
    """
    Bucket holidays by calendar month.

    Groups come out in ascending month order, and each group's holidays in
    ascending date order (ties keep their input order).
    """
    buckets: Dict[int, List[HolidayRecord]] = {}
    for h in holidays:
        buckets.setdefault(h.month, []).append(h)

    return [
        MonthGroup(month=m, holidays=tuple(sorted(buckets[m], key=lambda h: h.as_date)))
        for m in sorted(buckets)
    ]
