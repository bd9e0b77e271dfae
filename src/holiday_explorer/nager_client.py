from __future__ import annotations

from typing import Any, List, Optional

import requests

from .config import load_settings
from .errors import FetchError
from .logging_config import get_logger
from .models import Country, HolidayRecord

logger = get_logger(__name__)


class NagerDateClient:
    """
    Thin client for the public Nager.Date v3 API.

    Every failure (transport, HTTP status, body that is not the expected JSON
    list) surfaces as FetchError.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        settings = load_settings()
        self.base_url = (base_url or settings.api_base).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.timeout
        self.session = session or requests.Session()

    def _get_list(self, path: str) -> List[Any]:
        url = f"{self.base_url}/{path}"
        logger.debug("GET %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(f"Request to {url} failed: {e}") from e

        # Unknown country/year combos come back as 204 with no body
        if not resp.content or not resp.content.strip():
            return []

        try:
            data = resp.json()
        except ValueError as e:
            raise FetchError(f"Response from {url} is not valid JSON") from e

        if not isinstance(data, list):
            raise FetchError(f"Expected a JSON list from {url}, got {type(data).__name__}")
        return data

    def get_available_countries(self) -> List[Country]:
        data = self._get_list("AvailableCountries")
        try:
            return [Country.from_api(c) for c in data]
        except (TypeError, ValueError) as e:
            raise FetchError(f"Malformed country list: {e}") from e

    def get_public_holidays(self, year: int, country_code: str) -> List[HolidayRecord]:
        """
        Return all public holidays for the given country and year.
        """
        data = self._get_list(f"PublicHolidays/{year}/{country_code}")
        try:
            holidays = [HolidayRecord.from_api(h) for h in data]
        except (TypeError, ValueError) as e:
            raise FetchError(f"Malformed holiday entry: {e}") from e

        logger.debug("Fetched %d holidays for %s/%s", len(holidays), country_code, year)
        return holidays
