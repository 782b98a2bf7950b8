"""Pydantic models for employee/company snapshots and computed results."""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from payroll_core.amounts import parse_decimal
from payroll_core.dates import parse_date

# --- Enumerations ---


class SupportedCountry(str, Enum):
    """Jurisdictions the engine has regulation and holiday tables for."""

    SOUTH_AFRICA = "South Africa"
    NAMIBIA = "Namibia"


class LeaveType(str, Enum):
    ANNUAL = "Annual"
    SICK = "Sick"
    MATERNITY = "Maternity"
    PATERNITY = "Paternity"
    BEREAVEMENT = "Bereavement"
    UNPAID = "Unpaid"


class EmployeeStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


# --- Employee / company snapshots ---


class LeaveRecord(BaseModel):
    """A taken-leave entry. `days` is always in standard 8-hour-day units."""

    type: LeaveType
    start_date: date | None = None
    end_date: date | None = None
    days: Decimal = Field(default=Decimal("0"), ge=0)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _lenient_date(cls, value: Any) -> date | None:
        return parse_date(value)


class Employee(BaseModel):
    """The subset of an employee record the engine reads."""

    id: str = ""
    name: str = ""
    basic_salary: Decimal = Decimal("0")  # monthly
    appointment_hours: Decimal = Decimal("0")  # monthly contracted hours
    start_date: date | None = None
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    gender: Gender | None = None
    leave_records: list[LeaveRecord] = Field(default_factory=list)

    @field_validator("start_date", mode="before")
    @classmethod
    def _lenient_start_date(cls, value: Any) -> date | None:
        # Half-typed dates from an edit form must not reject the whole record.
        return parse_date(value)

    @field_validator("basic_salary", "appointment_hours", mode="before")
    @classmethod
    def _lenient_number(cls, value: Any) -> Decimal:
        return parse_decimal(value)


class Company(BaseModel):
    """The subset of a company record the engine reads."""

    name: str = ""
    country: SupportedCountry = SupportedCountry.SOUTH_AFRICA
    leave_settings: dict[LeaveType, Decimal] = Field(default_factory=dict)

    @field_validator("leave_settings", mode="before")
    @classmethod
    def _lenient_entitlements(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {key: parse_decimal(days) for key, days in value.items()}


# --- Payslip line items ---


class Earning(BaseModel):
    description: str
    amount: Decimal = Decimal("0")
    taxable: bool = True

    @field_validator("amount", mode="before")
    @classmethod
    def _lenient_amount(cls, value: Any) -> Decimal:
        return parse_decimal(value)


class Deduction(BaseModel):
    description: str
    amount: Decimal = Decimal("0")

    @field_validator("amount", mode="before")
    @classmethod
    def _lenient_amount(cls, value: Any) -> Decimal:
        return parse_decimal(value)


# --- Computed results ---


class LeaveDurationBreakdown(BaseModel):
    """Chargeable leave for a date range."""

    working_days: int = 0
    leave_hours: Decimal = Decimal("0")
    leave_days: Decimal = Decimal("0")
    holiday_count: int = 0
    holiday_matches: list[str] = Field(default_factory=list)


class LeaveBalance(BaseModel):
    """Balance of one leave type. `available` may go negative."""

    accrued: Decimal = Decimal("0")
    taken: Decimal = Decimal("0")
    available: Decimal = Decimal("0")


class PayslipTotals(BaseModel):
    gross_earnings: Decimal = Decimal("0")
    gross_deductions: Decimal = Decimal("0")
    taxable_earnings: Decimal = Decimal("0")
    net_pay: Decimal = Decimal("0")


class Payslip(BaseModel):
    """A composed payslip: line items, totals and the statutory amounts."""

    earnings: list[Earning]
    deductions: list[Deduction]
    totals: PayslipTotals
    income_tax: Decimal
    social_security: Decimal
    periods_per_year: int


class LeaveRequestEvaluation(BaseModel):
    """What a drafted leave request would cost the employee."""

    leave_type: LeaveType
    breakdown: LeaveDurationBreakdown
    balance: LeaveBalance | None = None
    projected_available: Decimal | None = None
    is_selectable: bool = True
    has_valid_range: bool = False
