from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .date_format import format_long, format_short
from .models import HolidayRecord, MonthGroup

DEFAULT_TITLE = "Holiday"
NO_TYPES = "N/A"
NATIONWIDE = "Nationwide"
REGIONAL = "Regional"


@dataclass(frozen=True)
class HolidayCard:
    title: str
    date_line: str
    local_name_line: Optional[str]
    type_tag: str
    scope_tag: str
    regions: tuple[str, ...]
    since_tag: Optional[str]
    description: str


def _local_name_line(h: HolidayRecord) -> Optional[str]:
    if h.local_name and h.local_name != h.name:
        return h.local_name
    return None


def _scope_tag(h: HolidayRecord) -> str:
    if h.regions:
        return ", ".join(h.regions)
    return NATIONWIDE if h.is_global else REGIONAL


def _description(h: HolidayRecord, local_name: Optional[str]) -> str:
    text = f"Observed on {format_long(h.date)}. "
    if local_name:
        text += f"Locally known as {local_name}. "
    if h.launch_year is not None:
        text += f"First observed in {h.launch_year}. "
    text += "Observed nationwide." if h.is_global else "Observed regionally."
    return text


def build_card(h: HolidayRecord) -> HolidayCard:
    local_name = _local_name_line(h)
    return HolidayCard(
        title=h.name or DEFAULT_TITLE,
        date_line=format_short(h.date),
        local_name_line=local_name,
        type_tag=", ".join(h.types) if h.types else NO_TYPES,
        scope_tag=_scope_tag(h),
        regions=h.regions,
        since_tag=f"Since {h.launch_year}" if h.launch_year is not None else None,
        description=_description(h, local_name),
    )


def build_cards(group: MonthGroup) -> List[HolidayCard]:
    return [build_card(h) for h in group.holidays]
