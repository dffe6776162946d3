"""Type definitions for the payroll calculation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_decimal(value: Any) -> Decimal:
    """Coerce int, str, float or Decimal to Decimal without binary float noise."""
    if isinstance(value, Decimal):
        return value
    if value is None:
        return ZERO
    return Decimal(str(value))


class LineType(str, Enum):
    """Payslip line item types."""

    EARNING = "EARNING"
    STATUTORY = "STATUTORY"
    TAX = "TAX"
    OTHER_DEDUCTION = "OTHER_DEDUCTION"


@dataclass(frozen=True)
class SalaryComponents:
    """Shares of annual gross, as fractions of 1 (0.5 means 50%).

    The three shares are expected to sum to 1 but nothing here enforces it;
    each component amount is computed independently as ``gross * share``.
    """

    basic: Decimal
    housing: Decimal
    transport: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "basic", to_decimal(self.basic))
        object.__setattr__(self, "housing", to_decimal(self.housing))
        object.__setattr__(self, "transport", to_decimal(self.transport))

    @classmethod
    def from_percentages(cls, basic: Any, housing: Any, transport: Any) -> SalaryComponents:
        """Build from whole percentages as entered in the salary structure form (50 -> 0.5)."""
        return cls(
            basic=to_decimal(basic) / HUNDRED,
            housing=to_decimal(housing) / HUNDRED,
            transport=to_decimal(transport) / HUNDRED,
        )

    def to_percentages(self) -> dict[str, Decimal]:
        return {
            "basic": self.basic * HUNDRED,
            "housing": self.housing * HUNDRED,
            "transport": self.transport * HUNDRED,
        }

    @property
    def total(self) -> Decimal:
        return self.basic + self.housing + self.transport


@dataclass(frozen=True)
class EmployeeCompensationProfile:
    """The slice of an employee record the payroll engine reads."""

    annual_gross_salary: Decimal
    salary_components: SalaryComponents
    contributes_to_nhf: bool
    annual_rent: Decimal
    loan_deduction: Decimal = ZERO  # Monthly, not annual

    def __post_init__(self) -> None:
        object.__setattr__(self, "annual_gross_salary", to_decimal(self.annual_gross_salary))
        object.__setattr__(self, "annual_rent", to_decimal(self.annual_rent))
        object.__setattr__(self, "loan_deduction", to_decimal(self.loan_deduction))


@dataclass(frozen=True)
class TaxBand:
    """One band of a progressive schedule.

    ``limit`` is cumulative: the band covers income from the previous band's
    limit up to this one. ``None`` marks the unbounded top band.
    """

    limit: Decimal | None
    rate: Decimal

    def __post_init__(self) -> None:
        if self.limit is not None:
            object.__setattr__(self, "limit", to_decimal(self.limit))
        object.__setattr__(self, "rate", to_decimal(self.rate))


@dataclass(frozen=True)
class StatutoryRates:
    """Flat statutory parameters applied around the progressive schedule."""

    pension_rate: Decimal
    nhf_rate: Decimal
    rent_relief_rate: Decimal
    rent_relief_cap: Decimal
    months_per_year: int = 12


@dataclass(frozen=True)
class BandTax:
    """Tax attributed to a single band of the schedule."""

    band: int  # 1-based position in the schedule
    lower: Decimal
    limit: Decimal | None
    rate: Decimal
    taxable_amount: Decimal
    tax_amount: Decimal


@dataclass(frozen=True)
class PayrollBreakdown:
    """Full payroll result for one employee for one monthly period."""

    # Annual layer
    annual_gross: Decimal
    annual_basic: Decimal
    annual_housing: Decimal
    annual_transport: Decimal
    annual_pension: Decimal
    annual_nhf: Decimal
    total_pre_tax_deductions: Decimal
    annual_rent_relief: Decimal
    annual_taxable_income: Decimal
    band_taxes: tuple[BandTax, ...]
    total_annual_paye: Decimal

    # Monthly layer
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

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dict; band taxes become a list of dicts."""
        data: dict[str, Any] = {}
        for name in self.__dataclass_fields__:
            value = getattr(self, name)
            if name == "band_taxes":
                value = [
                    {
                        "band": b.band,
                        "lower": b.lower,
                        "limit": b.limit,
                        "rate": b.rate,
                        "taxable_amount": b.taxable_amount,
                        "tax_amount": b.tax_amount,
                    }
                    for b in value
                ]
            data[name] = value
        return data


@dataclass(frozen=True)
class PayrollSummary:
    """Three-field projection used by the register and dashboard totals."""

    monthly_gross: Decimal
    total_deductions: Decimal
    net_pay: Decimal


@dataclass(frozen=True)
class PayslipLine:
    """A rounded, display-ready payslip line."""

    line_type: LineType
    code: str
    description: str
    amount: Decimal  # Signed: earnings positive, deductions negative
    metadata: dict[str, Any] = field(default_factory=dict)
