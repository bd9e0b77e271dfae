import dataclasses

import pytest

from src.holiday_explorer.models import Country, HolidayRecord, MonthGroup

from conftest import holiday_payload, make_record


class TestHolidayRecord:
    def test_from_api_defaults(self):
        record = HolidayRecord.from_api({"date": "2024-05-01"})

        assert record.name is None
        assert record.counties is None
        assert record.types == ()
        assert record.launch_year is None
        assert not record.is_global
        assert record.regions == ()

    def test_month(self):
        assert make_record("2024-09-30").month == 9

    @pytest.mark.parametrize("value", ["", "2024-02-30", "01/05/2024"])
    def test_invalid_date(self, value):
        with pytest.raises(ValueError):
            HolidayRecord.from_api(holiday_payload(value, "Broken"))

    @pytest.mark.parametrize("field", ["types", "counties"])
    def test_scalar_collection_rejected(self, field):
        with pytest.raises(ValueError):
            HolidayRecord.from_api(holiday_payload("2024-01-01", "New Year", **{field: 5}))

    def test_not_an_object(self):
        with pytest.raises(ValueError):
            HolidayRecord.from_api(["2024-01-01"])

    def test_frozen(self):
        record = make_record("2024-01-01", "New Year")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.name = "Changed"


def test_month_group_header():
    group = MonthGroup(month=3, holidays=(make_record("2024-03-08"), make_record("2024-03-29")))
    assert group.count == 2
    assert group.header == "March (2)"


def test_country_label():
    assert Country.from_api({"countryCode": "NZ", "name": "New Zealand"}).label == "New Zealand (NZ)"
