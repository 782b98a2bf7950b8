"""Leave balance calculator: accrued, taken and available days per leave type."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from payroll_core.models import (
    Company,
    Employee,
    EmployeeStatus,
    Gender,
    LeaveBalance,
    LeaveType,
)

CENT = Decimal("0.01")
DAYS_PER_YEAR = 365  # leap years are deliberately not distinguished


def _round(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def leave_taken(employee: Employee, leave_type: LeaveType) -> Decimal:
    """Lifetime days recorded against a leave type."""
    return sum(
        (record.days for record in employee.leave_records if record.type == leave_type),
        Decimal("0"),
    )


def accrue_annual_leave(annual_days: Decimal, days_employed: int) -> Decimal:
    """Full entitlement per completed year plus a daily share of the current one."""
    if annual_days <= 0:
        return Decimal("0")
    full_years, remainder_days = divmod(max(0, days_employed), DAYS_PER_YEAR)
    return full_years * annual_days + annual_days / DAYS_PER_YEAR * remainder_days


def calculate_leave_balances(
    employee: Employee,
    company: Company,
    as_of: date | None = None,
) -> dict[LeaveType, LeaveBalance]:
    """Calculate the employee's balance for every leave type the company grants.

    Annual leave accrues with service; other types are statutory and
    available in full from the first day. Unpaid leave is never accrued and
    has no balance. Inactive employees, and employees without a usable start
    date, accrue nothing, so any recorded leave shows as a deficit.

    Args:
        employee: Employee snapshot including leave records.
        company: Company snapshot with annual entitlements per leave type.
        as_of: The date to compute balances at; defaults to today.

    Returns:
        Mapping of leave type to balance, amounts rounded to 2 decimals.
    """
    as_of = as_of or date.today()
    balances: dict[LeaveType, LeaveBalance] = {}

    accrues = employee.status != EmployeeStatus.INACTIVE and employee.start_date is not None
    days_employed = (as_of - employee.start_date).days if accrues else 0

    for leave_type, annual_days in company.leave_settings.items():
        if leave_type == LeaveType.UNPAID:
            continue

        taken = leave_taken(employee, leave_type)
        if not accrues:
            balances[leave_type] = LeaveBalance(
                accrued=Decimal("0.00"), taken=_round(taken), available=_round(Decimal("0") - taken)
            )
            continue

        annual_days = Decimal(str(annual_days or 0))
        if leave_type == LeaveType.ANNUAL:
            accrued = accrue_annual_leave(annual_days, days_employed)
        else:
            accrued = annual_days

        accrued = _round(accrued)
        balances[leave_type] = LeaveBalance(
            accrued=accrued,
            taken=_round(taken),
            available=_round(accrued - taken),
        )

    return balances


def available_leave_types(gender: Gender | None) -> list[LeaveType]:
    """Leave types an employee may request: no Maternity for men, no Paternity for women."""
    excluded = {Gender.MALE: LeaveType.MATERNITY, Gender.FEMALE: LeaveType.PATERNITY}.get(gender)
    return [t for t in LeaveType if t != excluded]
