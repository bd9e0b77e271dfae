from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from .date_format import month_name


def _as_tuple(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"Expected a list, got {type(value).__name__}: {value!r}")
    return tuple(str(v) for v in value)


def _as_int(value: Any) -> Optional[int]:
    if value is None or str(value).strip() == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class HolidayRecord:
    date: str
    name: Optional[str]
    local_name: Optional[str]
    country_code: str
    fixed: bool
    is_global: bool
    counties: Optional[tuple[str, ...]]
    launch_year: Optional[int]
    types: tuple[str, ...]

    @classmethod
    def from_api(cls, payload: Any) -> "HolidayRecord":
        """
        Build a record from one Nager.Date `PublicHolidays` JSON object.

        Raises ValueError when the object has no valid ISO calendar date.
        """
        if not isinstance(payload, dict):
            raise ValueError(f"Holiday entry is not an object: {payload!r}")

        raw_date = str(payload.get("date") or "").strip()
        # validates, e.g. rejects "2024-02-30"
        date.fromisoformat(raw_date)

        counties = payload.get("counties")

        return cls(
            date=raw_date,
            name=payload.get("name"),
            local_name=payload.get("localName"),
            country_code=str(payload.get("countryCode") or ""),
            fixed=bool(payload.get("fixed")),
            is_global=bool(payload.get("global")),
            counties=_as_tuple(counties) if counties is not None else None,
            launch_year=_as_int(payload.get("launchYear")),
            types=_as_tuple(payload.get("types")),
        )

    @property
    def as_date(self) -> date:
        return date.fromisoformat(self.date)

    @property
    def month(self) -> int:
        return self.as_date.month

    @property
    def is_nationwide(self) -> bool:
        return self.is_global

    @property
    def regions(self) -> tuple[str, ...]:
        return self.counties or ()


@dataclass(frozen=True)
class MonthGroup:
    month: int
    holidays: tuple[HolidayRecord, ...]

    @property
    def count(self) -> int:
        return len(self.holidays)

    @property
    def month_name(self) -> str:
        return month_name(self.month)

    @property
    def header(self) -> str:
        return f"{self.month_name} ({self.count})"


@dataclass(frozen=True)
class Country:
    country_code: str
    name: str

    @classmethod
    def from_api(cls, payload: Any) -> "Country":
        if not isinstance(payload, dict) or not payload.get("countryCode"):
            raise ValueError(f"Country entry has no countryCode: {payload!r}")
        code = str(payload["countryCode"]).strip()
        return cls(country_code=code, name=str(payload.get("name") or code))

    @property
    def label(self) -> str:
        return f"{self.name} ({self.country_code})"


@dataclass(frozen=True)
class CountryOption:
    value: str
    label: str
    disabled: bool = False
