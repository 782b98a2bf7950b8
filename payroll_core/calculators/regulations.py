"""Statutory payroll rules per country: tax brackets, social security, working time.

Loaded once at import from ``config/regulations.yaml`` into immutable
NamedTuples. A new tax year is a data change to that file, not a code change.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, NamedTuple

from config import load_yaml_config
from config.settings import settings
from payroll_core.models import SupportedCountry

logger = logging.getLogger(__name__)


class RegulationConfigError(ValueError):
    """Raised when a regulation or holiday table cannot be loaded."""


class TaxBracket(NamedTuple):
    """A single income tax bracket."""

    lower: Decimal  # inclusive, whole currency units
    upper: Decimal | None  # inclusive; None = no cap
    rate: Decimal
    base: Decimal  # cumulative tax of all lower brackets


class TaxRule(NamedTuple):
    description: str
    brackets: tuple[TaxBracket, ...]
    annual_rebate: Decimal = Decimal("0")


class SocialSecurityRule(NamedTuple):
    description: str
    rate: Decimal
    max_deduction: Decimal | None = None


class DailyHoursTier(NamedTuple):
    """Leave hours charged per day from a monthly appointment-hours threshold."""

    min_appointment_hours: Decimal
    hours: Decimal


class WorkingTimeRule(NamedTuple):
    """Country working-time conventions used for leave charging."""

    six_day_week_min_hours: Decimal | None = None
    daily_hours: tuple[DailyHoursTier, ...] = ()


class Regulation(NamedTuple):
    """All payroll parameters for a single country."""

    tax: TaxRule
    social_security: SocialSecurityRule
    working_time: WorkingTimeRule = WorkingTimeRule()


def _decimal(value: Any, field: str) -> Decimal:
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise RegulationConfigError(f"Invalid number for {field}: {value!r}") from e


def _optional_decimal(value: Any, field: str) -> Decimal | None:
    return None if value is None else _decimal(value, field)


def _parse_regulation(country: str, raw: dict[str, Any]) -> Regulation:
    tax = raw["tax"]
    ss = raw["social_security"]

    brackets = tuple(
        TaxBracket(
            lower=_decimal(b["from"], f"{country} bracket from"),
            upper=_optional_decimal(b.get("to"), f"{country} bracket to"),
            rate=_decimal(b["rate"], f"{country} bracket rate"),
            base=_decimal(b.get("base", 0), f"{country} bracket base"),
        )
        for b in tax.get("brackets", [])
    )
    if not brackets:
        raise RegulationConfigError(f"{country}: tax table has no brackets")

    working_time = raw.get("working_time") or {}
    tiers = sorted(
        (
            DailyHoursTier(
                min_appointment_hours=_decimal(t["min_appointment_hours"], f"{country} daily hours"),
                hours=_decimal(t["hours"], f"{country} daily hours"),
            )
            for t in working_time.get("daily_hours", [])
        ),
        key=lambda t: t.min_appointment_hours,
        reverse=True,
    )

    return Regulation(
        tax=TaxRule(
            description=tax.get("description", "Income Tax"),
            brackets=brackets,
            annual_rebate=_decimal(tax.get("annual_rebate", 0), f"{country} annual rebate"),
        ),
        social_security=SocialSecurityRule(
            description=ss.get("description", "Social Security"),
            rate=_decimal(ss["rate"], f"{country} social security rate"),
            max_deduction=_optional_decimal(ss.get("max_deduction"), f"{country} max deduction"),
        ),
        working_time=WorkingTimeRule(
            six_day_week_min_hours=_optional_decimal(
                working_time.get("six_day_week_min_hours"), f"{country} six-day week"
            ),
            daily_hours=tuple(tiers),
        ),
    )


def load_regulations(filename: str = settings.regulations_file) -> dict[SupportedCountry, Regulation]:
    """Read and validate the regulation table for every supported country."""
    try:
        raw = load_yaml_config(filename)
    except OSError as e:
        raise RegulationConfigError(f"Cannot read regulation table {filename}: {e}") from e

    regulations: dict[SupportedCountry, Regulation] = {}
    for name, section in raw.items():
        try:
            country = SupportedCountry(name)
        except ValueError as e:
            raise RegulationConfigError(f"Unsupported country in {filename}: {name!r}") from e
        try:
            regulations[country] = _parse_regulation(name, section)
        except (KeyError, TypeError) as e:
            raise RegulationConfigError(f"{name}: malformed regulation entry ({e!r})") from e

    missing = set(SupportedCountry) - set(regulations)
    if missing:
        names = ", ".join(sorted(c.value for c in missing))
        raise RegulationConfigError(f"No regulation configured for: {names}")

    logger.info("Loaded regulations for %d countries from %s", len(regulations), filename)
    return regulations


REGULATIONS: dict[SupportedCountry, Regulation] = load_regulations()
