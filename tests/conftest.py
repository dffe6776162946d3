"""Pytest fixtures for ngpayroll unit tests."""

from __future__ import annotations

from decimal import Decimal

import pytest

from ngpayroll.calculators.types import EmployeeCompensationProfile, SalaryComponents
from ngpayroll.data.sample_employees import SAMPLE_EMPLOYEES, sample_profile
from ngpayroll.models import Employee


def make_profile(
    gross: str | int = "6000000",
    basic: str = "0.5",
    housing: str = "0.3",
    transport: str = "0.2",
    rent: str | int = "1200000",
    nhf: bool = True,
    loan: str | int = "0",
) -> EmployeeCompensationProfile:
    """Build a profile from string/int amounts."""
    return EmployeeCompensationProfile(
        annual_gross_salary=Decimal(str(gross)),
        salary_components=SalaryComponents(
            basic=Decimal(basic), housing=Decimal(housing), transport=Decimal(transport)
        ),
        contributes_to_nhf=nhf,
        annual_rent=Decimal(str(rent)),
        loan_deduction=Decimal(str(loan)),
    )


@pytest.fixture
def scenario_a_profile() -> EmployeeCompensationProfile:
    """Senior engineer: 6M gross, 50/30/20, 1.2M rent, NHF, 25k loan."""
    return make_profile(loan="25000")


@pytest.fixture
def sample_profiles() -> list[EmployeeCompensationProfile]:
    return [sample_profile(record["employee_code"]) for record in SAMPLE_EMPLOYEES]


@pytest.fixture
def sample_employees() -> list[Employee]:
    """Transient (unsaved) Employee rows for the sample roster."""
    return [Employee(**record) for record in SAMPLE_EMPLOYEES]
