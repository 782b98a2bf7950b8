"""Social security contribution calculator (UIF, SSC)."""

from decimal import Decimal

from payroll_core.amounts import parse_decimal
from payroll_core.calculators.regulations import SocialSecurityRule


def calculate_social_security(gross_pay: Decimal, rule: SocialSecurityRule) -> Decimal:
    """Calculate one pay period's contribution.

    The contribution is a flat rate on gross pay, capped at the rule's
    maximum deduction when one is configured.

    Args:
        gross_pay: Gross earnings for the period.
        rule: Country social security rule.

    Returns:
        Period contribution, unrounded.
    """
    gross_pay = parse_decimal(gross_pay)
    if gross_pay <= 0:
        return Decimal("0")

    deduction = gross_pay * rule.rate
    if rule.max_deduction is not None and deduction > rule.max_deduction:
        return rule.max_deduction
    return deduction
