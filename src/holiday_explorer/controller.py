from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Callable, List, Optional, Tuple, Union

from .errors import (
    MSG_FETCH_FAILED,
    MSG_INVALID_YEAR,
    MSG_MISSING_COUNTRY,
    FetchError,
    ValidationError,
)
from .grouping import MonthFilter, filter_by_month, group_by_month, parse_month_filter
from .logging_config import get_logger
from .models import CountryOption, HolidayRecord, MonthGroup
from .nager_client import NagerDateClient

logger = get_logger(__name__)

# ----------------------------
# Query states
# ----------------------------
STATUS_IDLE = "IDLE"
STATUS_LOADING = "LOADING"
STATUS_SUCCESS = "SUCCESS"
STATUS_FAILURE = "FAILURE"

# ----------------------------
# Request outcomes
# ----------------------------
REQUEST_PENDING = "PENDING"
REQUEST_SUCCESS = "SUCCESS"
REQUEST_FAILURE = "FAILURE"

ERROR_VALIDATION = "validation"
ERROR_FETCH = "fetch"

CHOOSE_COUNTRY_LABEL = "Choose a country..."
COUNTRIES_UNAVAILABLE_LABEL = "Could not load countries"

YEAR_PATTERN = re.compile(r"^[0-9]{4}$")


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one holiday request: pending, success(payload) or failure(reason)."""

    status: str
    payload: Tuple[HolidayRecord, ...] = ()
    reason: Optional[str] = None

    @classmethod
    def pending(cls) -> "FetchResult":
        return cls(status=REQUEST_PENDING)

    @classmethod
    def success(cls, payload) -> "FetchResult":
        return cls(status=REQUEST_SUCCESS, payload=tuple(payload))

    @classmethod
    def failure(cls, reason: str) -> "FetchResult":
        return cls(status=REQUEST_FAILURE, reason=reason)

    @property
    def is_pending(self) -> bool:
        return self.status == REQUEST_PENDING


@dataclass(frozen=True)
class QueryState:
    status: str = STATUS_IDLE
    token: int = 0
    country_code: Optional[str] = None
    year: Optional[int] = None
    month: Optional[int] = None
    groups: Tuple[MonthGroup, ...] = field(default_factory=tuple)
    message: Optional[str] = None
    error_kind: Optional[str] = None

    @property
    def loading(self) -> bool:
        return self.status == STATUS_LOADING

    @property
    def empty(self) -> bool:
        """True for a successful search that matched no holidays."""
        return self.status == STATUS_SUCCESS and not self.groups

    @property
    def holiday_count(self) -> int:
        return sum(g.count for g in self.groups)


@dataclass(frozen=True)
class SearchQuery:
    country_code: str
    year: int
    month: Optional[int]


def validate_query(
    country_code: Optional[str],
    year: Union[int, str, None],
    month_filter: MonthFilter = "all",
    today: Optional[date] = None,
) -> SearchQuery:
    """
    Pre-flight checks; never touches the network.

    An empty year falls back to the current calendar year.
    """
    code = (country_code or "").strip()
    if not code:
        raise ValidationError("missing country", MSG_MISSING_COUNTRY)

    if year is None or str(year).strip() == "":
        year = (today or date.today()).year

    year_s = str(year).strip()
    if not YEAR_PATTERN.match(year_s):
        raise ValidationError("invalid year", MSG_INVALID_YEAR)

    return SearchQuery(
        country_code=code.upper(),
        year=int(year_s),
        month=parse_month_filter(month_filter),
    )


class HolidayQueryController:
    """
    Drives one search at a time: IDLE -> LOADING -> SUCCESS | FAILURE.

    Every search gets a new sequence token. A result is only applied when its
    token is still the latest one, so a slow older response can never
    overwrite a newer search.
    """

    def __init__(
        self,
        client: Optional[NagerDateClient] = None,
        today: Callable[[], date] = date.today,
    ):
        self.client = client or NagerDateClient()
        self._today = today
        self._state = QueryState()
        self._seq = 0

    @property
    def state(self) -> QueryState:
        return self._state

    def list_countries(self) -> List[CountryOption]:
        try:
            countries = self.client.get_available_countries()
        except FetchError as e:
            logger.warning("Country list unavailable: %s", e)
            return [CountryOption(value="", label=COUNTRIES_UNAVAILABLE_LABEL, disabled=True)]

        countries = sorted(countries, key=lambda c: c.name.casefold())
        return [CountryOption(value="", label=CHOOSE_COUNTRY_LABEL)] + [
            CountryOption(value=c.country_code, label=c.label) for c in countries
        ]

    def _next_token(self) -> int:
        self._seq += 1
        return self._seq

    def begin_search(
        self,
        country_code: Optional[str],
        year: Union[int, str, None],
        month_filter: MonthFilter = "all",
    ) -> int:
        """
        Validate and move to LOADING. Returns the token to resolve with.

        Raises ValidationError without changing state.
        """
        query = validate_query(country_code, year, month_filter, today=self._today())
        token = self._next_token()
        self._state = QueryState(
            status=STATUS_LOADING,
            token=token,
            country_code=query.country_code,
            year=query.year,
            month=query.month,
        )
        logger.info(
            "Searching holidays for %s/%s (month=%s, token=%d)",
            query.country_code, query.year, query.month or "all", token,
        )
        return token

    def resolve(self, token: int, result: FetchResult) -> bool:
        """
        Apply a finished request. Returns False when the result was ignored
        (still pending, or superseded by a newer search).
        """
        if result.is_pending:
            return False
        if token != self._seq or self._state.status != STATUS_LOADING:
            logger.info("Dropping stale response for token %d (latest %d)", token, self._seq)
            return False

        if result.status == REQUEST_FAILURE:
            logger.warning("Holiday fetch failed (token %d): %s", token, result.reason)
            self._state = replace(
                self._state,
                status=STATUS_FAILURE,
                message=MSG_FETCH_FAILED,
                error_kind=ERROR_FETCH,
            )
            return True

        filtered = filter_by_month(result.payload, self._state.month)
        groups = tuple(group_by_month(filtered))
        self._state = replace(self._state, status=STATUS_SUCCESS, groups=groups)
        logger.info(
            "Token %d: %d of %d holidays in %d month group(s)",
            token, len(filtered), len(result.payload), len(groups),
        )
        return True

    def fetch(self, country_code: str, year: int) -> FetchResult:
        try:
            return FetchResult.success(self.client.get_public_holidays(year, country_code))
        except FetchError as e:
            return FetchResult.failure(str(e))

    def search(
        self,
        country_code: Optional[str],
        year: Union[int, str, None],
        month_filter: MonthFilter = "all",
    ) -> QueryState:
        try:
            token = self.begin_search(country_code, year, month_filter)
        except ValidationError as e:
            # supersede anything still in flight
            self._state = QueryState(
                status=STATUS_FAILURE,
                token=self._next_token(),
                message=e.message,
                error_kind=ERROR_VALIDATION,
            )
            logger.info("Search rejected: %s", e.reason)
            return self._state

        state = self._state
        self.resolve(token, self.fetch(state.country_code, state.year))
        return self._state
