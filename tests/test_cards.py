from src.holiday_explorer.cards import build_card, build_cards
from src.holiday_explorer.grouping import group_by_month

from conftest import make_record


def test_title_falls_back_when_name_missing():
    card = build_card(make_record("2024-05-01", name=None, localName="Tag der Arbeit"))
    assert card.title == "Holiday"


def test_date_line_uses_short_format():
    card = build_card(make_record("2024-01-01", "New Year"))
    assert card.date_line == "Mon, Jan 1, 2024"


def test_local_name_omitted_when_same_as_name():
    card = build_card(make_record("2024-01-01", "New Year", localName="New Year"))
    assert card.local_name_line is None
    assert "Locally known" not in card.description


def test_local_name_present_when_different():
    card = build_card(make_record("2024-01-01", "New Year's Day", localName="Neujahr"))
    assert card.local_name_line == "Neujahr"
    assert "Locally known as Neujahr. " in card.description


class TestTypeTag:
    def test_joined(self):
        card = build_card(make_record("2024-12-24", "Christmas Eve", types=["Bank", "Optional"]))
        assert card.type_tag == "Bank, Optional"

    def test_missing_types(self):
        card = build_card(make_record("2024-12-24", "Christmas Eve", types=[]))
        assert card.type_tag == "N/A"


class TestScopeTag:
    def test_nationwide(self):
        assert build_card(make_record("2024-01-01", "New Year")).scope_tag == "Nationwide"

    def test_regional_without_counties(self):
        card = build_card(make_record("2024-11-01", "All Saints' Day", **{"global": False}))
        assert card.scope_tag == "Regional"

    def test_region_list(self):
        card = build_card(
            make_record("2024-01-06", "Epiphany", **{"global": False, "counties": ["DE-BW", "DE-BY"]})
        )
        assert card.scope_tag == "DE-BW, DE-BY"
        assert card.regions == ("DE-BW", "DE-BY")

    def test_empty_region_list_counts_as_none(self):
        card = build_card(make_record("2024-01-01", "New Year", counties=[]))
        assert card.scope_tag == "Nationwide"


class TestSinceTag:
    def test_present_with_launch_year(self):
        card = build_card(make_record("2024-10-03", "German Unity Day", launchYear=1990))
        assert card.since_tag == "Since 1990"

    def test_absent_without_launch_year(self):
        assert build_card(make_record("2024-01-01", "New Year")).since_tag is None


class TestDescription:
    def test_minimal(self):
        card = build_card(make_record("2024-01-01", "New Year"))
        assert card.description == "Observed on January 1, 2024. Observed nationwide."

    def test_full(self):
        card = build_card(
            make_record(
                "2024-10-03",
                "German Unity Day",
                localName="Tag der Deutschen Einheit",
                launchYear=1990,
            )
        )
        assert card.description == (
            "Observed on October 3, 2024. "
            "Locally known as Tag der Deutschen Einheit. "
            "First observed in 1990. "
            "Observed nationwide."
        )

    def test_regional(self):
        card = build_card(make_record("2024-11-01", "All Saints' Day", **{"global": False}))
        assert card.description.endswith("Observed regionally.")


def test_build_cards_follows_group_order(german_holidays):
    december = group_by_month(german_holidays)[-1]
    assert [c.title for c in build_cards(december)] == ["Christmas Day", "St. Stephen's Day"]
