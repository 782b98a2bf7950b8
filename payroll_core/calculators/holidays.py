"""Public holiday calendars per country and year."""

import logging
from collections.abc import Iterable
from datetime import date
from typing import Any, NamedTuple

from config import load_yaml_config
from config.settings import settings
from payroll_core.calculators.regulations import RegulationConfigError
from payroll_core.dates import parse_date
from payroll_core.models import SupportedCountry

logger = logging.getLogger(__name__)


class PublicHoliday(NamedTuple):
    """A gazetted holiday, optionally moved to an observed weekday."""

    date: date
    name: str
    observed_date: date | None = None
    notes: str | None = None


class HolidayInstance(NamedTuple):
    """One concrete non-working date produced by a PublicHoliday."""

    date: date
    name: str
    is_observed: bool
    original_date: date
    notes: str | None = None

    def label(self) -> str:
        suffix = " (observed)" if self.is_observed else ""
        return f"{self.date.isoformat()} - {self.name}{suffix}"


def _required_date(value: Any, where: str) -> date:
    parsed = parse_date(value)
    if parsed is None:
        raise RegulationConfigError(f"Invalid holiday date in {where}: {value!r}")
    return parsed


def load_holiday_calendars(
    filename: str = settings.holidays_file,
) -> dict[SupportedCountry, dict[int, tuple[PublicHoliday, ...]]]:
    """Read the holiday table: country -> year -> holidays."""
    try:
        raw = load_yaml_config(filename)
    except OSError as e:
        raise RegulationConfigError(f"Cannot read holiday table {filename}: {e}") from e

    calendars: dict[SupportedCountry, dict[int, tuple[PublicHoliday, ...]]] = {}
    for name, years in raw.items():
        try:
            country = SupportedCountry(name)
        except ValueError as e:
            raise RegulationConfigError(f"Unsupported country in {filename}: {name!r}") from e

        by_year: dict[int, tuple[PublicHoliday, ...]] = {}
        for year, entries in (years or {}).items():
            where = f"{name} {year}"
            try:
                by_year[int(year)] = tuple(
                    PublicHoliday(
                        date=_required_date(h["date"], where),
                        name=h["name"],
                        observed_date=(
                            _required_date(h["observed_date"], where)
                            if h.get("observed_date")
                            else None
                        ),
                        notes=h.get("notes"),
                    )
                    for h in entries or []
                )
            except (KeyError, TypeError) as e:
                raise RegulationConfigError(f"{where}: malformed holiday entry ({e!r})") from e
        calendars[country] = by_year

    total = sum(len(h) for years in calendars.values() for h in years.values())
    logger.info("Loaded %d public holidays for %d countries from %s", total, len(calendars), filename)
    return calendars


HOLIDAY_CALENDARS: dict[SupportedCountry, dict[int, tuple[PublicHoliday, ...]]] = (
    load_holiday_calendars()
)


def get_holiday_instances(
    country: SupportedCountry | None,
    years: Iterable[int],
) -> list[HolidayInstance]:
    """Expand the holidays of the given years into concrete dates.

    Each holiday yields its original date and, when it was moved, a second
    instance on the observed date. Years without a calendar contribute
    nothing.
    """
    if country is None:
        return []

    calendar = HOLIDAY_CALENDARS.get(country, {})
    instances: list[HolidayInstance] = []
    for year in sorted(set(years)):
        holidays = calendar.get(year)
        if holidays is None:
            logger.debug("No %s holiday calendar for %d", country.value, year)
            continue
        for holiday in holidays:
            instances.append(
                HolidayInstance(holiday.date, holiday.name, False, holiday.date, holiday.notes)
            )
            if holiday.observed_date:
                instances.append(
                    HolidayInstance(
                        holiday.observed_date, holiday.name, True, holiday.date, holiday.notes
                    )
                )
    return instances


def get_holiday_dates(country: SupportedCountry | None, years: Iterable[int]) -> set[date]:
    """Return every non-working holiday date (original and observed)."""
    return {instance.date for instance in get_holiday_instances(country, years)}


def holidays_for_display(
    country: SupportedCountry,
    from_year: int,
    to_year: int,
) -> list[HolidayInstance]:
    """List holiday instances dated within [from_year, to_year], by date.

    On equal dates the original holiday sorts before an observed one.
    """
    instances = get_holiday_instances(country, range(from_year, to_year + 1))
    in_range = [i for i in instances if from_year <= i.date.year <= to_year]
    return sorted(in_range, key=lambda i: (i.date, i.is_observed))
