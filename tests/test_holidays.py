"""Tests for public holiday calendars."""

from datetime import date

import pytest

from payroll_core.calculators.holidays import (
    HolidayInstance,
    get_holiday_dates,
    get_holiday_instances,
    holidays_for_display,
    load_holiday_calendars,
)
from payroll_core.calculators.regulations import RegulationConfigError
from payroll_core.models import SupportedCountry


class TestHolidayInstances:
    def test_observed_date_adds_instance(self) -> None:
        instances = get_holiday_instances(SupportedCountry.SOUTH_AFRICA, [2024])
        youth_day = [i for i in instances if i.name == "Youth Day"]
        assert youth_day == [
            HolidayInstance(date(2024, 6, 16), "Youth Day", False, date(2024, 6, 16),
                            "Observed on Monday because 16 June falls on a Sunday."),
            HolidayInstance(date(2024, 6, 17), "Youth Day", True, date(2024, 6, 16),
                            "Observed on Monday because 16 June falls on a Sunday."),
        ]
        # 12 gazetted holidays, one of them moved
        assert len(instances) == 13

    def test_date_set(self) -> None:
        dates = get_holiday_dates(SupportedCountry.NAMIBIA, [2025])
        assert date(2025, 5, 4) in dates
        assert date(2025, 5, 5) in dates
        assert date(2025, 5, 6) not in dates

    def test_no_country(self) -> None:
        assert get_holiday_dates(None, [2024]) == set()

    def test_unknown_year(self) -> None:
        assert get_holiday_instances(SupportedCountry.NAMIBIA, [1999]) == []

    def test_label(self) -> None:
        instance = HolidayInstance(date(2025, 4, 28), "Freedom Day", True, date(2025, 4, 27))
        assert instance.label() == "2025-04-28 - Freedom Day (observed)"


class TestHolidaysForDisplay:
    def test_sorted_across_years(self) -> None:
        instances = holidays_for_display(SupportedCountry.NAMIBIA, 2024, 2025)
        assert len(instances) == 26
        assert instances[0].date == date(2024, 1, 1)
        assert instances[-1].date == date(2025, 12, 26)
        keys = [(i.date, i.is_observed) for i in instances]
        assert keys == sorted(keys)

    def test_single_year(self) -> None:
        instances = holidays_for_display(SupportedCountry.SOUTH_AFRICA, 2025, 2025)
        assert {i.date.year for i in instances} == {2025}


class TestLoadHolidayCalendars:
    def test_bad_date(self, tmp_path) -> None:
        path = tmp_path / "holidays.yaml"
        path.write_text("Namibia:\n  2024:\n    - {date: not-a-date, name: Broken}\n")
        with pytest.raises(RegulationConfigError, match="Invalid holiday date"):
            load_holiday_calendars(str(path))

    def test_unknown_country(self, tmp_path) -> None:
        path = tmp_path / "holidays.yaml"
        path.write_text("Atlantis:\n  2024: []\n")
        with pytest.raises(RegulationConfigError, match="Unsupported country"):
            load_holiday_calendars(str(path))

    def test_missing_name(self, tmp_path) -> None:
        path = tmp_path / "holidays.yaml"
        path.write_text("Namibia:\n  2024:\n    - {date: 2024-01-01}\n")
        with pytest.raises(RegulationConfigError, match="malformed"):
            load_holiday_calendars(str(path))
