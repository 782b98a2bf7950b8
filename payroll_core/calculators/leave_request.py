"""Leave request evaluation: what a drafted request costs the employee."""

from datetime import date

from payroll_core.calculators.leave_balance import available_leave_types, calculate_leave_balances
from payroll_core.calculators.leave_duration import calculate_leave_duration
from payroll_core.models import Company, Employee, LeaveRequestEvaluation, LeaveType


def evaluate_leave_request(
    employee: Employee,
    company: Company,
    leave_type: LeaveType,
    start: date | str | None,
    end: date | str | None,
    as_of: date | None = None,
) -> LeaveRequestEvaluation:
    """Evaluate a leave request draft without accepting or rejecting it.

    ``projected_available`` is the balance left after the request and may be
    negative; leave types without a balance (Unpaid, or not granted by the
    company) have neither a balance nor a projection.
    """
    breakdown = calculate_leave_duration(start, end, employee, company)
    balance = calculate_leave_balances(employee, company, as_of).get(leave_type)

    return LeaveRequestEvaluation(
        leave_type=leave_type,
        breakdown=breakdown,
        balance=balance,
        projected_available=(
            balance.available - breakdown.leave_days if balance is not None else None
        ),
        is_selectable=leave_type in available_leave_types(employee.gender),
        has_valid_range=breakdown.working_days > 0,
    )
