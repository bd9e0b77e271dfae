from __future__ import annotations

from typing import Any, Dict, List

import pytest

from src.holiday_explorer.errors import FetchError
from src.holiday_explorer.models import Country, HolidayRecord

API_BASE = "https://date.nager.at/api/v3"


def holiday_payload(date: str, name: str, **overrides: Any) -> Dict[str, Any]:
    """One holiday object shaped like the Nager.Date PublicHolidays response."""
    payload = {
        "date": date,
        "localName": name,
        "name": name,
        "countryCode": "DE",
        "fixed": False,
        "global": True,
        "counties": None,
        "launchYear": None,
        "types": ["Public"],
    }
    payload.update(overrides)
    return payload


def make_record(date: str, name: str = "Holiday", **overrides: Any) -> HolidayRecord:
    return HolidayRecord.from_api(holiday_payload(date, name, **overrides))


class FakeClient:
    """Stands in for NagerDateClient and records every call."""

    def __init__(self, holidays=None, countries=None, error: Exception | None = None):
        self.holidays: List[HolidayRecord] = holidays or []
        self.countries: List[Country] = countries or []
        self.error = error
        self.calls: List[tuple] = []

    def get_public_holidays(self, year: int, country_code: str) -> List[HolidayRecord]:
        self.calls.append(("holidays", year, country_code))
        if self.error:
            raise self.error
        return list(self.holidays)

    def get_available_countries(self) -> List[Country]:
        self.calls.append(("countries",))
        if self.error:
            raise self.error
        return list(self.countries)


@pytest.fixture
def new_year_and_christmas() -> List[HolidayRecord]:
    return [
        make_record("2024-01-01", "New Year"),
        make_record("2024-12-25", "Christmas"),
    ]


@pytest.fixture
def german_holidays() -> List[HolidayRecord]:
    # deliberately out of date order
    return [
        make_record("2024-12-26", "St. Stephen's Day", localName="Zweiter Weihnachtstag"),
        make_record("2024-01-06", "Epiphany", localName="Heilige Drei Könige", **{"global": False, "counties": ["DE-BW", "DE-BY", "DE-ST"]}),
        make_record("2024-12-25", "Christmas Day", localName="Erster Weihnachtstag"),
        make_record("2024-01-01", "New Year's Day", localName="Neujahr", launchYear=1967),
        make_record("2024-10-03", "German Unity Day", localName="Tag der Deutschen Einheit", launchYear=1990),
    ]


@pytest.fixture
def failing_client() -> FakeClient:
    return FakeClient(error=FetchError("connection refused"))
