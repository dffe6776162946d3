"""Payroll calculation engine."""

from ngpayroll.calculators.engine import (
    compute_monthly_payroll,
    compute_payroll,
    compute_roster,
    compute_roster_breakdowns,
    summarize,
)
from ngpayroll.calculators.line_builder import PayslipLineBuilder, build_payslip_lines
from ngpayroll.calculators.tax_schedule import (
    NIGERIA_2026_SCHEDULE,
    NIGERIA_STATUTORY_RATES,
    InvalidTaxScheduleError,
    TaxSchedule,
)
from ngpayroll.calculators.types import (
    EmployeeCompensationProfile,
    PayrollBreakdown,
    PayrollSummary,
    SalaryComponents,
)

__all__ = [
    "compute_payroll",
    "compute_monthly_payroll",
    "compute_roster",
    "compute_roster_breakdowns",
    "summarize",
    "PayslipLineBuilder",
    "build_payslip_lines",
    "NIGERIA_2026_SCHEDULE",
    "NIGERIA_STATUTORY_RATES",
    "InvalidTaxScheduleError",
    "TaxSchedule",
    "EmployeeCompensationProfile",
    "PayrollBreakdown",
    "PayrollSummary",
    "SalaryComponents",
]
