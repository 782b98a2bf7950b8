"""Consistency checks for the regulation and holiday tables.

Table correctness is a deployment concern: the calculators trust the tables
and never raise, so these checks run before a table change ships.
"""

from collections.abc import Sequence

from payroll_core.calculators.holidays import PublicHoliday
from payroll_core.calculators.regulations import Regulation, TaxBracket


def check_brackets(brackets: Sequence[TaxBracket]) -> list[str]:
    """Return problems with a bracket table; an empty list means it is sound."""
    problems: list[str] = []
    if not brackets:
        return ["table has no brackets"]

    if brackets[0].lower != 0:
        problems.append(f"first bracket starts at {brackets[0].lower}, not 0")

    open_ended = [i for i, b in enumerate(brackets) if b.upper is None]
    if open_ended != [len(brackets) - 1]:
        problems.append("exactly one open-ended bracket is required, and it must be last")

    expected_base = brackets[0].base
    for i, (current, following) in enumerate(zip(brackets, brackets[1:]), start=1):
        if current.upper is None:
            continue
        if current.upper < current.lower:
            problems.append(f"bracket {i} ends before it starts")
        if following.lower != current.upper + 1:
            problems.append(
                f"bracket {i + 1} starts at {following.lower}, expected {current.upper + 1}"
            )
        offset = current.lower - 1 if current.lower > 0 else 0
        expected_base += (current.upper - offset) * current.rate
        if following.base != expected_base:
            problems.append(
                f"bracket {i + 1} base is {following.base}, cumulative tax is {expected_base}"
            )

    for i, bracket in enumerate(brackets, start=1):
        if not 0 <= bracket.rate <= 1:
            problems.append(f"bracket {i} rate {bracket.rate} is outside [0, 1]")
    return problems


def check_regulation(regulation: Regulation) -> list[str]:
    problems = [f"tax: {p}" for p in check_brackets(regulation.tax.brackets)]
    if regulation.tax.annual_rebate < 0:
        problems.append("tax: annual rebate is negative")

    ss = regulation.social_security
    if not 0 <= ss.rate <= 1:
        problems.append(f"social security: rate {ss.rate} is outside [0, 1]")
    if ss.max_deduction is not None and ss.max_deduction < 0:
        problems.append("social security: maximum deduction is negative")
    return problems


def check_holidays(year: int, holidays: Sequence[PublicHoliday]) -> list[str]:
    problems: list[str] = []
    for holiday in holidays:
        if holiday.date.year != year:
            problems.append(f"{holiday.name} ({holiday.date}) is filed under {year}")
        if holiday.observed_date is not None and holiday.observed_date <= holiday.date:
            problems.append(f"{holiday.name} is observed on or before its own date")
    return problems
