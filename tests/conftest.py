"""Shared test fixtures."""

from collections.abc import Callable
from datetime import date
from decimal import Decimal
from typing import Any

import pytest

from payroll_core.models import Company, Employee, LeaveRecord, LeaveType, SupportedCountry

# --- Factories ---


def _make_employee(**overrides: Any) -> Employee:
    fields: dict[str, Any] = {
        "id": "emp-1",
        "name": "Test Employee",
        "basic_salary": Decimal("25000"),
        "appointment_hours": Decimal("173"),
        "start_date": date(2020, 1, 1),
        "status": "Active",
        "gender": "Female",
        "leave_records": [],
    }
    fields.update(overrides)
    return Employee(**fields)


def _make_company(country: SupportedCountry, **overrides: Any) -> Company:
    fields: dict[str, Any] = {
        "name": f"{country.value} Test Co",
        "country": country,
        "leave_settings": {
            LeaveType.ANNUAL: Decimal("21"),
            LeaveType.SICK: Decimal("10"),
            LeaveType.MATERNITY: Decimal("80"),
            LeaveType.UNPAID: Decimal("0"),
        },
    }
    fields.update(overrides)
    return Company(**fields)


def _make_record(leave_type: LeaveType, days: str) -> LeaveRecord:
    return LeaveRecord(
        type=leave_type, start_date="2025-01-06", end_date="2025-01-10", days=Decimal(days)
    )


@pytest.fixture
def make_employee() -> Callable[..., Employee]:
    """Factory for employees with sensible defaults."""
    return _make_employee


@pytest.fixture
def make_record() -> Callable[..., LeaveRecord]:
    """Factory for taken-leave records: make_record(LeaveType.ANNUAL, "2.5")."""
    return _make_record


@pytest.fixture
def as_of() -> date:
    """Fixed "today" for balance calculations."""
    return date(2025, 6, 30)


@pytest.fixture
def south_africa() -> Company:
    return _make_company(SupportedCountry.SOUTH_AFRICA)


@pytest.fixture
def namibia() -> Company:
    return _make_company(SupportedCountry.NAMIBIA)


@pytest.fixture
def namibia_six_day_employee() -> Employee:
    """Namibian schedule of 190 monthly hours: six-day week, 9.5-hour days."""
    return _make_employee(appointment_hours=Decimal("190"))
