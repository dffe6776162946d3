"""Sample roster used for demos, previews and seeding an empty database."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any

from ngpayroll.calculators.types import EmployeeCompensationProfile, SalaryComponents

SAMPLE_EMPLOYEES: list[dict[str, Any]] = [
    {
        "employee_code": "EMP001",
        "first_name": "Adekunle",
        "last_name": "Adebayo",
        "job_title": "Senior Software Engineer",
        "department": "Technology",
        "employment_type": "Full-time",
        "date_of_hire": date(2020, 1, 20),
        "work_location": "Lagos Head Office",
        "email": "adekunle.a@example.com",
        "phone_number": "08012345678",
        "annual_gross_salary": Decimal("6000000"),
        "basic_share": Decimal("0.5"),
        "housing_share": Decimal("0.3"),
        "transport_share": Decimal("0.2"),
        "annual_rent": Decimal("1200000"),
        "contributes_to_nhf": True,
        "loan_deduction": Decimal("25000"),
        "tin": "12345678-0001",
        "pfa_name": "Stanbic IBTC Pension Managers",
        "rsa_pin": "PEN123456789012",
    },
    {
        "employee_code": "EMP002",
        "first_name": "Chiamaka",
        "last_name": "Okoro",
        "job_title": "Product Manager",
        "department": "Product",
        "employment_type": "Full-time",
        "date_of_hire": date(2021, 3, 15),
        "work_location": "Abuja Office",
        "email": "chiamaka.o@example.com",
        "phone_number": "08087654321",
        "annual_gross_salary": Decimal("4800000"),
        "basic_share": Decimal("0.5"),
        "housing_share": Decimal("0.3"),
        "transport_share": Decimal("0.2"),
        "annual_rent": Decimal("800000"),
        "contributes_to_nhf": True,
        "loan_deduction": Decimal("0"),
        "tin": "23456789-0001",
        "pfa_name": "ARM Pension Managers",
        "rsa_pin": "PEN234567890123",
    },
    {
        "employee_code": "EMP003",
        "first_name": "Emeka",
        "last_name": "Nwosu",
        "job_title": "Lead Designer",
        "department": "Design",
        "employment_type": "Full-time",
        "date_of_hire": date(2019, 6, 1),
        "work_location": "Remote",
        "email": "emeka.n@example.com",
        "phone_number": "08098765432",
        "annual_gross_salary": Decimal("7500000"),
        "basic_share": Decimal("0.4"),
        "housing_share": Decimal("0.35"),
        "transport_share": Decimal("0.25"),
        "annual_rent": Decimal("1500000"),
        "contributes_to_nhf": False,
        "loan_deduction": Decimal("50000"),
        "tin": "34567890-0001",
        "pfa_name": "Stanbic IBTC Pension Managers",
        "rsa_pin": "PEN345678901234",
    },
    {
        "employee_code": "EMP004",
        "first_name": "Fatima",
        "last_name": "Aliyu",
        "job_title": "HR Specialist",
        "department": "Human Resources",
        "employment_type": "Full-time",
        "date_of_hire": date(2022, 8, 1),
        "work_location": "Kano Office",
        "email": "fatima.a@example.com",
        "phone_number": "08011223344",
        "annual_gross_salary": Decimal("3600000"),
        "basic_share": Decimal("0.6"),
        "housing_share": Decimal("0.2"),
        "transport_share": Decimal("0.2"),
        "annual_rent": Decimal("600000"),
        "contributes_to_nhf": True,
        "loan_deduction": Decimal("10000"),
        "tin": "45678901-0001",
        "pfa_name": "Premium Pension Limited",
        "rsa_pin": "PEN456789012345",
    },
]

# Shown on the calculation preview before any employee is set up
SAMPLE_PREVIEW_PROFILE = EmployeeCompensationProfile(
    annual_gross_salary=Decimal("6000000"),
    salary_components=SalaryComponents(
        basic=Decimal("0.5"), housing=Decimal("0.3"), transport=Decimal("0.2")
    ),
    contributes_to_nhf=True,
    annual_rent=Decimal("1200000"),
    loan_deduction=Decimal("25000"),
)


def sample_profile(employee_code: str) -> EmployeeCompensationProfile:
    """Engine profile for one of the sample employees."""
    for record in SAMPLE_EMPLOYEES:
        if record["employee_code"] == employee_code:
            return EmployeeCompensationProfile(
                annual_gross_salary=record["annual_gross_salary"],
                salary_components=SalaryComponents(
                    basic=record["basic_share"],
                    housing=record["housing_share"],
                    transport=record["transport_share"],
                ),
                contributes_to_nhf=record["contributes_to_nhf"],
                annual_rent=record["annual_rent"],
                loan_deduction=record["loan_deduction"],
            )
    raise KeyError(employee_code)
