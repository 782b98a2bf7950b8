"""Income tax calculator: cumulative-base bracket tables with an annual rebate."""

import logging
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from payroll_core.amounts import parse_decimal
from payroll_core.calculators.regulations import TaxBracket

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
ONE = Decimal("1")
CENT = Decimal("0.01")


def _find_bracket(annual_income: Decimal, brackets: Sequence[TaxBracket]) -> TaxBracket | None:
    for bracket in brackets:
        if annual_income < bracket.lower:
            continue
        # Bands are whole units: 237100.40 still belongs to the "to 237100" band.
        if bracket.upper is None or annual_income < bracket.upper + ONE:
            return bracket
    return None


def calculate_tax(
    annual_income: Decimal,
    brackets: Sequence[TaxBracket],
    annual_rebate: Decimal = ZERO,
) -> Decimal:
    """Calculate annual income tax payable.

    The tax is the applicable bracket's precomputed ``base`` plus the
    bracket rate applied to the income above the bracket's lower bound,
    less the annual rebate, floored at zero. A table made of one open-ended
    bracket starting at zero is a flat rate on the whole income.

    Never raises: a malformed table that leaves the income without a bracket
    is logged and yields zero.

    Args:
        annual_income: Annualised taxable income.
        brackets: Ordered bracket table covering [0, inf).
        annual_rebate: Flat amount subtracted from the bracket tax.

    Returns:
        Annual tax, unrounded.
    """
    annual_income = parse_decimal(annual_income)
    annual_rebate = parse_decimal(annual_rebate)

    if annual_income <= 0:
        return ZERO

    if len(brackets) == 1 and brackets[0].lower == 0 and brackets[0].upper is None:
        return max(ZERO, annual_income * brackets[0].rate - annual_rebate)

    bracket = _find_bracket(annual_income, brackets)
    if bracket is None:
        zero_rated = any(
            b.rate == 0 and (b.upper is None or annual_income <= b.upper) for b in brackets
        )
        if not zero_rated:
            logger.error("No applicable tax bracket found for income: %s", annual_income)
        return ZERO

    offset = bracket.lower - ONE if bracket.lower > 0 else ZERO
    tax_in_bracket = (annual_income - offset) * bracket.rate
    gross_annual_tax = bracket.base + tax_in_bracket

    return max(ZERO, gross_annual_tax - annual_rebate)


def calculate_period_tax(
    period_taxable_income: Decimal,
    brackets: Sequence[TaxBracket],
    annual_rebate: Decimal = ZERO,
    periods_per_year: int = 12,
) -> Decimal:
    """Annualise a period's taxable income, tax it and return one period's share.

    Rounded to cents, as it appears on a payslip.
    """
    if periods_per_year <= 0:
        return ZERO
    period_taxable_income = parse_decimal(period_taxable_income)
    annual_tax = calculate_tax(period_taxable_income * periods_per_year, brackets, annual_rebate)
    return (annual_tax / periods_per_year).quantize(CENT, rounding=ROUND_HALF_UP)
