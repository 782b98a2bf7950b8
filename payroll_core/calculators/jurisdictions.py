"""Country strategy table.

Every country-specific decision the calculators make goes through a
CountryProfile looked up here, so supporting a new jurisdiction means adding
its tables, not new branches.
"""

from decimal import Decimal
from typing import NamedTuple

from payroll_core.calculators.regulations import REGULATIONS, Regulation
from payroll_core.models import Company, Employee, SupportedCountry

STANDARD_DAY_HOURS = Decimal("8")

# date.weekday() numbering
SATURDAY = 5
SUNDAY = 6


class CountryProfile(NamedTuple):
    """Regulation bundle plus working-time policy for one country."""

    country: SupportedCountry
    regulation: Regulation

    def weekend_days(self, appointment_hours: Decimal) -> frozenset[int]:
        """Weekdays that are not worked under this employee's schedule."""
        threshold = self.regulation.working_time.six_day_week_min_hours
        if threshold is not None and appointment_hours >= threshold:
            return frozenset({SUNDAY})
        return frozenset({SATURDAY, SUNDAY})

    def daily_leave_hours(self, appointment_hours: Decimal) -> Decimal:
        """Hours one day of leave is charged at."""
        for tier in self.regulation.working_time.daily_hours:
            if appointment_hours >= tier.min_appointment_hours:
                return tier.hours
        return STANDARD_DAY_HOURS


COUNTRY_PROFILES: dict[SupportedCountry, CountryProfile] = {
    country: CountryProfile(country, regulation) for country, regulation in REGULATIONS.items()
}


def get_profile(country: SupportedCountry) -> CountryProfile:
    return COUNTRY_PROFILES[country]


def weekend_days_for(employee: Employee | None, company: Company | None) -> frozenset[int]:
    """Weekend days for an employee, defaulting to Saturday and Sunday."""
    if company is None:
        return frozenset({SATURDAY, SUNDAY})
    hours = employee.appointment_hours if employee is not None else Decimal("0")
    return get_profile(company.country).weekend_days(hours)


def daily_leave_hours_for(employee: Employee | None, company: Company | None) -> Decimal:
    """Daily leave-hour rate for an employee, defaulting to the 8-hour day."""
    if company is None or employee is None:
        return STANDARD_DAY_HOURS
    return get_profile(company.country).daily_leave_hours(employee.appointment_hours)
