"""Pydantic schemas for API request/response models.

Request schemas are the validation boundary in front of the engine: shares
arrive as whole percentages, must sum to 100 and money must be non-negative.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ngpayroll.calculators.types import (
    EmployeeCompensationProfile,
    PayrollBreakdown,
    PayslipLine,
    SalaryComponents,
)


# ============================================================================
# Compensation input
# ============================================================================


class SalaryStructureInput(BaseModel):
    """Salary component shares as percentages (50 means 50%), at most two decimals.

    Two decimal places keep the stored fraction exact at four places.
    """

    basic: Decimal = Field(ge=0, le=100, decimal_places=2)
    housing: Decimal = Field(ge=0, le=100, decimal_places=2)
    transport: Decimal = Field(ge=0, le=100, decimal_places=2)

    @model_validator(mode="after")
    def check_total(self) -> "SalaryStructureInput":
        total = self.basic + self.housing + self.transport
        if total != 100:
            raise ValueError(f"Salary components must sum to 100%, got {total}%")
        return self

    def to_components(self) -> SalaryComponents:
        return SalaryComponents.from_percentages(self.basic, self.housing, self.transport)


class CompensationInput(BaseModel):
    """Payroll-relevant fields of an employee."""

    annual_gross_salary: Decimal = Field(ge=0, decimal_places=2)
    salary_components: SalaryStructureInput
    contributes_to_nhf: bool = False
    annual_rent: Decimal = Field(default=Decimal("0"), ge=0, decimal_places=2)
    loan_deduction: Decimal = Field(default=Decimal("0"), ge=0, decimal_places=2)

    def to_profile(self) -> EmployeeCompensationProfile:
        return EmployeeCompensationProfile(
            annual_gross_salary=self.annual_gross_salary,
            salary_components=self.salary_components.to_components(),
            contributes_to_nhf=self.contributes_to_nhf,
            annual_rent=self.annual_rent,
            loan_deduction=self.loan_deduction,
        )


# ============================================================================
# Breakdown output
# ============================================================================


class BandTaxResponse(BaseModel):
    band: int
    lower: Decimal
    limit: Decimal | None
    rate: Decimal
    taxable_amount: Decimal
    tax_amount: Decimal


class PayrollBreakdownResponse(BaseModel):
    """Full payroll breakdown, unrounded."""

    model_config = ConfigDict(from_attributes=True)

    annual_gross: Decimal
    annual_basic: Decimal
    annual_housing: Decimal
    annual_transport: Decimal
    annual_pension: Decimal
    annual_nhf: Decimal
    total_pre_tax_deductions: Decimal
    annual_rent_relief: Decimal
    annual_taxable_income: Decimal
    band_taxes: list[BandTaxResponse]
    total_annual_paye: Decimal

    monthly_gross: Decimal
    monthly_basic: Decimal
    monthly_housing: Decimal
    monthly_transport: Decimal
    monthly_pension: Decimal
    monthly_nhf: Decimal
    monthly_paye: Decimal
    monthly_loan: Decimal
    total_monthly_deductions: Decimal
    net_take_home_pay: Decimal

    @classmethod
    def from_breakdown(cls, breakdown: PayrollBreakdown) -> "PayrollBreakdownResponse":
        return cls.model_validate(breakdown.to_dict())


class PayslipLineResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    line_type: str
    code: str
    description: str
    amount: Decimal

    @classmethod
    def from_line(cls, line: PayslipLine) -> "PayslipLineResponse":
        return cls(
            line_type=line.line_type.value,
            code=line.code,
            description=line.description,
            amount=line.amount,
        )


class EmployeePayrollResponse(BaseModel):
    """Per-employee detail: breakdown plus payslip lines."""

    employee_code: str
    employee_name: str
    breakdown: PayrollBreakdownResponse
    lines: list[PayslipLineResponse]
    band_lines: list[PayslipLineResponse]


# ============================================================================
# Employee schemas
# ============================================================================


class EmployeeCreate(CompensationInput):
    """Schema for adding an employee to the roster."""

    employee_code: str = Field(min_length=1, max_length=32)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    middle_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    job_title: str | None = None
    department: str | None = None
    employment_type: str | None = None
    date_of_hire: date | None = None
    work_location: str | None = None
    tin: str | None = None
    pfa_name: str | None = None
    rsa_pin: str | None = None

    def to_fields(self) -> dict[str, Any]:
        """Column values for the Employee model, shares as fractions."""
        components = self.salary_components.to_components()
        fields = self.model_dump(exclude={"salary_components"})
        fields.update(
            basic_share=components.basic,
            housing_share=components.housing,
            transport_share=components.transport,
        )
        return fields


class EmployeeResponse(BaseModel):
    """Roster entry; shares as fractions of 1 and as percentages."""

    model_config = ConfigDict(from_attributes=True)

    employee_code: str
    first_name: str
    last_name: str
    full_name: str
    email: str | None = None
    job_title: str | None = None
    department: str | None = None
    employment_type: str | None = None
    date_of_hire: date | None = None
    annual_gross_salary: Decimal
    basic_share: Decimal
    housing_share: Decimal
    transport_share: Decimal
    salary_percentages: dict[str, Decimal]
    annual_rent: Decimal
    contributes_to_nhf: bool
    loan_deduction: Decimal
    tin: str | None = None
    pfa_name: str | None = None
    rsa_pin: str | None = None


class EmployeeListResponse(BaseModel):
    items: list[EmployeeResponse]
    total: int


# ============================================================================
# Report schemas
# ============================================================================


class RegisterRowResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    employee_code: str
    employee_name: str
    monthly_gross: Decimal
    total_deductions: Decimal
    net_pay: Decimal


class RegisterTotalsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    gross: Decimal
    deductions: Decimal
    net: Decimal


class PayrollRegisterResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    period_label: str
    employee_count: int
    rows: list[RegisterRowResponse]
    totals: RegisterTotalsResponse


class RemittanceRowResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    employee_code: str
    employee_name: str
    amount: Decimal
    details: dict[str, Any]


class RemittanceScheduleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    kind: str
    title: str
    rows: list[RemittanceRowResponse]
    total: Decimal


# ============================================================================
# Payroll run schemas
# ============================================================================


class ChecklistItem(BaseModel):
    id: int
    text: str
    completed: bool


class PayrollRunResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    period_label: str
    status: str
    checklist: list[ChecklistItem]
    checklist_complete: bool
    next_statuses: list[str] = Field(default_factory=list)
    employee_count: int | None = None
    total_gross: Decimal | None = None
    total_deductions: Decimal | None = None
    total_net: Decimal | None = None
    completed_at: datetime | None = None


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str
    code: str | None = None
