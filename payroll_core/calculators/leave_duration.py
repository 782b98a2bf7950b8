"""Leave duration calculator: chargeable days and hours for a date range."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from payroll_core.calculators.holidays import HolidayInstance, get_holiday_instances
from payroll_core.calculators.jurisdictions import (
    SATURDAY,
    STANDARD_DAY_HOURS,
    SUNDAY,
    daily_leave_hours_for,
    weekend_days_for,
)
from payroll_core.dates import iter_days, parse_date
from payroll_core.models import Company, Employee, LeaveDurationBreakdown

CENT = Decimal("0.01")


def _resolve_range(start: date | str | None, end: date | str | None) -> tuple[date, date] | None:
    start_date = parse_date(start)
    end_date = parse_date(end)
    if start_date is None or end_date is None or end_date < start_date:
        return None
    return start_date, end_date


def calculate_working_days(start: date | str | None, end: date | str | None) -> int:
    """Count Monday-Friday days in the inclusive range, ignoring holidays."""
    resolved = _resolve_range(start, end)
    if resolved is None:
        return 0
    return sum(1 for day in iter_days(*resolved) if day.weekday() not in (SATURDAY, SUNDAY))


def calculate_leave_duration(
    start: date | str | None,
    end: date | str | None,
    employee: Employee | None = None,
    company: Company | None = None,
) -> LeaveDurationBreakdown:
    """Work out what a leave request over [start, end] costs.

    Weekends follow the employee's schedule in the company's country (a
    Namibian six-day week keeps Saturday as a working day). Public holidays,
    original and observed dates alike, are never charged and are reported
    once each in ``holiday_matches``, even when they fall on a working day.
    Each working day is charged at the country's daily-hour rate, and
    ``leave_days`` expresses the total in standard 8-hour days.

    Args:
        start: First day of leave (date or ISO string).
        end: Last day of leave, inclusive.
        employee: Supplies appointment hours for schedule rules.
        company: Supplies the country.

    Returns:
        The breakdown; all zeros for a missing, malformed or reversed range.
    """
    resolved = _resolve_range(start, end)
    if resolved is None:
        return LeaveDurationBreakdown()
    start_date, end_date = resolved

    weekend = weekend_days_for(employee, company)
    hours_per_day = daily_leave_hours_for(employee, company)

    holidays: dict[date, HolidayInstance] = {}
    if company is not None:
        years = range(start_date.year, end_date.year + 1)
        for instance in get_holiday_instances(company.country, years):
            holidays.setdefault(instance.date, instance)

    working_days = 0
    leave_hours = Decimal("0")
    holiday_matches: list[str] = []

    for day in iter_days(start_date, end_date):
        holiday = holidays.get(day)
        if holiday is not None:
            holiday_matches.append(holiday.label())
            continue
        if day.weekday() in weekend:
            continue
        working_days += 1
        leave_hours += hours_per_day

    return LeaveDurationBreakdown(
        working_days=working_days,
        leave_hours=leave_hours.quantize(CENT, rounding=ROUND_HALF_UP),
        leave_days=(leave_hours / STANDARD_DAY_HOURS).quantize(CENT, rounding=ROUND_HALF_UP),
        holiday_count=len(holiday_matches),
        holiday_matches=holiday_matches,
    )
