"""Tests for the leave duration calculator."""

from datetime import date
from decimal import Decimal

import pytest

from payroll_core.calculators.leave_duration import calculate_leave_duration, calculate_working_days
from payroll_core.models import Company, Employee, LeaveDurationBreakdown


class TestWorkingDays:
    def test_full_week(self) -> None:
        """Mon 5 Aug 2024 to Sun 11 Aug 2024."""
        assert calculate_working_days("2024-08-05", "2024-08-11") == 5

    def test_single_day(self) -> None:
        assert calculate_working_days(date(2024, 8, 7), date(2024, 8, 7)) == 1

    def test_reversed_range(self) -> None:
        assert calculate_working_days("2024-08-11", "2024-08-05") == 0


class TestLeaveDuration:
    def test_weekend_only(self, make_employee, south_africa: Company) -> None:
        """Sat 10 and Sun 11 Aug 2024 cost nothing."""
        result = calculate_leave_duration("2024-08-10", "2024-08-11", make_employee(), south_africa)
        assert result.working_days == 0
        assert result.leave_days == 0
        assert result.holiday_count == 0

    def test_adjacent_holidays(self, make_employee, south_africa: Company) -> None:
        """24-26 Dec 2024: Christmas Day and Day of Goodwill leave one working day."""
        result = calculate_leave_duration("2024-12-24", "2024-12-26", make_employee(), south_africa)
        assert result.working_days == 1
        assert result.holiday_count == 2
        assert result.holiday_matches == [
            "2024-12-25 - Christmas Day",
            "2024-12-26 - Day of Goodwill",
        ]
        assert result.leave_hours == Decimal("8.00")
        assert result.leave_days == Decimal("1.00")

    def test_namibia_six_day_week(
        self, namibia_six_day_employee: Employee, namibia: Company
    ) -> None:
        """Mon 12 - Sat 17 Aug 2024 at 190 hours: 6 days x 9.5h = 57h = 7.13 standard days."""
        result = calculate_leave_duration(
            "2024-08-12", "2024-08-17", namibia_six_day_employee, namibia
        )
        assert result.working_days == 6
        assert result.leave_hours == Decimal("57.00")
        assert result.leave_days == Decimal("7.13")

    def test_south_africa_same_span_excludes_saturday(
        self, namibia_six_day_employee: Employee, south_africa: Company
    ) -> None:
        result = calculate_leave_duration(
            "2024-08-12", "2024-08-17", namibia_six_day_employee, south_africa
        )
        assert result.working_days == 5
        assert result.leave_hours == Decimal("40.00")
        assert result.leave_days == Decimal("5.00")

    def test_namibia_nine_hour_days(self, make_employee, namibia: Company) -> None:
        """185 hours: five-day week at 9h -> 45h = 5.63 standard days."""
        employee = make_employee(appointment_hours=Decimal("185"))
        result = calculate_leave_duration("2024-08-12", "2024-08-17", employee, namibia)
        assert result.working_days == 5
        assert result.leave_hours == Decimal("45.00")
        assert result.leave_days == Decimal("5.63")

    def test_namibia_standard_schedule(self, make_employee, namibia: Company) -> None:
        employee = make_employee(appointment_hours=Decimal("170"))
        result = calculate_leave_duration("2024-08-12", "2024-08-17", employee, namibia)
        assert result.working_days == 5
        assert result.leave_hours == Decimal("40.00")

    def test_observed_holiday_counted_with_original(self, make_employee, south_africa: Company) -> None:
        """Youth Day (Sun 16 Jun 2024) is observed Mon 17 Jun; both are skipped."""
        result = calculate_leave_duration("2024-06-14", "2024-06-18", make_employee(), south_africa)
        assert result.working_days == 2
        assert result.holiday_count == 2
        assert result.holiday_matches == [
            "2024-06-16 - Youth Day",
            "2024-06-17 - Youth Day (observed)",
        ]

    def test_holiday_on_worked_saturday(
        self, namibia_six_day_employee: Employee, namibia: Company
    ) -> None:
        """Cassinga Day (Sat 4 May 2024) is a holiday, not a working Saturday."""
        result = calculate_leave_duration(
            "2024-05-04", "2024-05-06", namibia_six_day_employee, namibia
        )
        assert result.working_days == 0
        assert result.holiday_count == 2
        assert result.holiday_matches[1] == "2024-05-06 - Cassinga Day (observed)"

    def test_range_spanning_years(self, make_employee, south_africa: Company) -> None:
        """Mon 30 Dec 2024 - Thu 2 Jan 2025 with New Year's Day off."""
        result = calculate_leave_duration("2024-12-30", "2025-01-02", make_employee(), south_africa)
        assert result.working_days == 3
        assert result.holiday_matches == ["2025-01-01 - New Year's Day"]

    def test_without_company_ignores_holidays(self) -> None:
        result = calculate_leave_duration("2024-12-24", "2024-12-26")
        assert result.working_days == 3
        assert result.holiday_count == 0
        assert result.leave_days == Decimal("3.00")

    def test_year_without_calendar(self, make_employee, south_africa: Company) -> None:
        """No calendar for 2027 yet: Fri 1 Jan 2027 is charged as a working day."""
        result = calculate_leave_duration("2027-01-01", "2027-01-01", make_employee(), south_africa)
        assert result.working_days == 1
        assert result.holiday_count == 0

    def test_datetime_strings(self, make_employee, south_africa: Company) -> None:
        result = calculate_leave_duration(
            "2024-08-12T00:00:00Z", "2024-08-16T00:00:00Z", make_employee(), south_africa
        )
        assert result.working_days == 5

    @pytest.mark.parametrize(
        ("start", "end"),
        [
            ("", "2024-08-16"),
            ("2024-08-12", None),
            ("2024-13-40", "2024-08-16"),
            ("2024-08-16", "2024-08-12"),
            ("2024-0", "2024-08-16"),
        ],
    )
    def test_invalid_range_is_zero(
        self, start, end, make_employee, south_africa: Company
    ) -> None:
        result = calculate_leave_duration(start, end, make_employee(), south_africa)
        assert result == LeaveDurationBreakdown()

    def test_idempotent(self, namibia_six_day_employee: Employee, namibia: Company) -> None:
        first = calculate_leave_duration("2024-05-01", "2024-05-31", namibia_six_day_employee, namibia)
        second = calculate_leave_duration("2024-05-01", "2024-05-31", namibia_six_day_employee, namibia)
        assert first == second
