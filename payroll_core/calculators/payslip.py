"""Payslip totals, overtime earnings and payslip composition."""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from config.settings import settings
from payroll_core.amounts import parse_decimal
from payroll_core.calculators.income_tax import calculate_period_tax
from payroll_core.calculators.jurisdictions import get_profile
from payroll_core.calculators.social_security import calculate_social_security
from payroll_core.models import (
    Company,
    Deduction,
    Earning,
    Employee,
    Payslip,
    PayslipTotals,
)

CENT = Decimal("0.01")

REGULAR_PAY = "Regular Pay"
NORMAL_OVERTIME = "Normal Overtime"
DOUBLE_OVERTIME = "Double Overtime"

NORMAL_OVERTIME_MULTIPLIER = Decimal("1.5")
DOUBLE_OVERTIME_MULTIPLIER = Decimal("2.0")


def aggregate_payslip(
    earnings: Sequence[Earning],
    deductions: Sequence[Deduction],
) -> PayslipTotals:
    """Total a payslip's line items.

    ``taxable_earnings`` is the base the income tax is computed on; the
    full ``gross_earnings`` is the social security base.
    """
    zero = Decimal("0")
    gross_earnings = sum((e.amount for e in earnings), zero)
    gross_deductions = sum((d.amount for d in deductions), zero)
    taxable_earnings = sum((e.amount for e in earnings if e.taxable), zero)

    return PayslipTotals(
        gross_earnings=gross_earnings,
        gross_deductions=gross_deductions,
        taxable_earnings=taxable_earnings,
        net_pay=gross_earnings - gross_deductions,
    )


def calculate_overtime_earnings(
    basic_salary: Decimal,
    appointment_hours: Decimal,
    normal_hours: Decimal = Decimal("0"),
    double_hours: Decimal = Decimal("0"),
) -> list[Earning]:
    """Taxable overtime lines at 1.5x and 2x the hourly rate.

    The hourly rate is the monthly salary over the monthly appointment
    hours. Lines are only produced for positive amounts.
    """
    basic_salary = parse_decimal(basic_salary)
    appointment_hours = parse_decimal(appointment_hours)
    if not basic_salary or not appointment_hours:
        return []

    hourly_rate = basic_salary / appointment_hours
    lines: list[Earning] = []
    for description, multiplier, hours in (
        (NORMAL_OVERTIME, NORMAL_OVERTIME_MULTIPLIER, normal_hours),
        (DOUBLE_OVERTIME, DOUBLE_OVERTIME_MULTIPLIER, double_hours),
    ):
        amount = (hourly_rate * multiplier * parse_decimal(hours)).quantize(
            CENT, rounding=ROUND_HALF_UP
        )
        if amount > 0:
            lines.append(Earning(description=description, amount=amount, taxable=True))
    return lines


def apply_overtime(
    earnings: Sequence[Earning],
    employee: Employee,
    normal_hours: Decimal = Decimal("0"),
    double_hours: Decimal = Decimal("0"),
) -> list[Earning]:
    """Replace any overtime lines in ``earnings`` with freshly computed ones."""
    kept = [e for e in earnings if e.description not in (NORMAL_OVERTIME, DOUBLE_OVERTIME)]
    return kept + calculate_overtime_earnings(
        employee.basic_salary, employee.appointment_hours, normal_hours, double_hours
    )


def _set_deduction(deductions: list[Deduction], description: str, amount: Decimal) -> None:
    for i, deduction in enumerate(deductions):
        if deduction.description == description:
            deductions[i] = Deduction(description=description, amount=amount)
            return
    deductions.append(Deduction(description=description, amount=amount))


def calculate_payslip(
    employee: Employee,
    company: Company,
    earnings: Sequence[Earning] | None = None,
    deductions: Sequence[Deduction] | None = None,
    normal_overtime_hours: Decimal = Decimal("0"),
    double_overtime_hours: Decimal = Decimal("0"),
    automate_tax: bool = True,
    automate_social_security: bool = True,
    periods_per_year: int = settings.pay_periods_per_year,
) -> Payslip:
    """Compose a payslip with statutory deductions filled in.

    Earnings default to a single taxable "Regular Pay" line of the basic
    salary. Overtime lines are recomputed from the given hours. Income tax
    is charged on the annualised taxable earnings and social security on the
    period's gross earnings; each is written into the deduction line named
    after the country rule. A deduction the preparer has overridden (its
    automation switched off) is left exactly as supplied.

    Args:
        employee: Supplies salary and appointment hours.
        company: Supplies the country whose rules apply.
        earnings: Earning lines; None for the default regular pay.
        deductions: Existing deduction lines, e.g. from a saved payslip.
        normal_overtime_hours: Hours paid at 1.5x.
        double_overtime_hours: Hours paid at 2x.
        automate_tax: Recompute the income tax line.
        automate_social_security: Recompute the social security line.
        periods_per_year: Pay periods used to annualise income.

    Returns:
        The payslip with line items, totals and both statutory amounts.
    """
    regulation = get_profile(company.country).regulation

    if earnings is None:
        earnings = [Earning(description=REGULAR_PAY, amount=employee.basic_salary, taxable=True)]
    lines = apply_overtime(earnings, employee, normal_overtime_hours, double_overtime_hours)
    deduction_lines = list(deductions or [])

    pre_totals = aggregate_payslip(lines, [])
    income_tax = calculate_period_tax(
        pre_totals.taxable_earnings,
        regulation.tax.brackets,
        regulation.tax.annual_rebate,
        periods_per_year,
    )
    social_security = calculate_social_security(
        pre_totals.gross_earnings, regulation.social_security
    ).quantize(CENT, rounding=ROUND_HALF_UP)

    if automate_tax:
        _set_deduction(deduction_lines, regulation.tax.description, income_tax)
    if automate_social_security:
        _set_deduction(deduction_lines, regulation.social_security.description, social_security)

    return Payslip(
        earnings=lines,
        deductions=deduction_lines,
        totals=aggregate_payslip(lines, deduction_lines),
        income_tax=income_tax,
        social_security=social_security,
        periods_per_year=periods_per_year,
    )
