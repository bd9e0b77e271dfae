from __future__ import annotations

# User-facing messages
MSG_MISSING_COUNTRY = "Please select a country."
MSG_INVALID_YEAR = "Invalid year."
MSG_INVALID_MONTH = "Invalid month."
MSG_FETCH_FAILED = "Could not load holidays. Try again later."
MSG_NO_HOLIDAYS = "No holidays found."


class HolidayExplorerError(Exception):
    """Base class for errors raised by this package."""


class ValidationError(HolidayExplorerError):
    """
    Input rejected before any network call.

    `reason` is a short machine-readable cause ("missing country",
    "invalid year", "invalid month"); `message` is what the user sees.
    """

    def __init__(self, reason: str, message: str):
        super().__init__(reason)
        self.reason = reason
        self.message = message


class FetchError(HolidayExplorerError):
    """The holiday API could not be reached or returned something unusable."""
