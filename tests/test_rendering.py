from src.holiday_explorer.cards import build_card
from src.holiday_explorer.grouping import group_by_month
from src.holiday_explorer.rendering import render_card_text, render_groups_text, tag_labels

from conftest import make_record


def test_empty_groups():
    assert render_groups_text([]) == "No holidays found."


def test_card_text_nationwide():
    card = build_card(make_record("2024-01-01", "New Year"))
    assert render_card_text(card) == (
        "New Year\n"
        "Date: Mon, Jan 1, 2024\n"
        "[Public] [Nationwide]\n"
        "Observed on January 1, 2024. Observed nationwide."
    )


def test_card_text_regional_with_local_name():
    card = build_card(
        make_record(
            "2024-01-06",
            "Epiphany",
            localName="Heilige Drei Könige",
            launchYear=1967,
            **{"global": False, "counties": ["DE-BW", "DE-BY"]},
        )
    )
    lines = render_card_text(card).splitlines()

    assert lines[2] == "Local name: Heilige Drei Könige"
    assert lines[3] == "[Public] [Applies to: DE-BW, DE-BY] [Since 1967]"


def test_tag_labels_regional_without_counties():
    card = build_card(make_record("2024-11-01", "All Saints' Day", **{"global": False}))
    assert tag_labels(card) == ["Public", "Regional"]


def test_groups_text_headers_in_order(new_year_and_christmas):
    text = render_groups_text(group_by_month(new_year_and_christmas))

    assert text.startswith("January (1)\n\nNew Year\n")
    assert text.index("January (1)") < text.index("December (1)")
    assert text.count("Date: ") == 2
