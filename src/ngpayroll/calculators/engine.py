"""Payroll calculation engine.

Single canonical computation used by every consumer (sample preview, employee
detail, payslip, payroll register, payroll run). All functions here are pure:
no I/O, no shared mutable state, safe to call concurrently.

Calculation pipeline (stable order per employee):
1) Annual component amounts (gross * share)
2) Pension (flat share of gross)
3) NHF (share of basic, only when elected)
4) Pre-tax deductions = pension + NHF
5) Rent relief (share of rent, capped)
6) Taxable income = gross - pre-tax deductions - rent relief, floored at 0
7) Progressive PAYE over the band schedule
8) Monthly layer = annual / 12, loan taken as-is (already monthly)
9) Total monthly deductions = pension + NHF + PAYE + loan
10) Net take-home = monthly gross - total deductions (may be negative)
"""

from __future__ import annotations

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from decimal import getcontext, localcontext
from functools import partial

from ngpayroll.calculators.tax_schedule import (
    NIGERIA_2026_SCHEDULE,
    NIGERIA_STATUTORY_RATES,
    TaxSchedule,
)
from ngpayroll.calculators.types import (
    ZERO,
    EmployeeCompensationProfile,
    PayrollBreakdown,
    PayrollSummary,
    StatutoryRates,
)


def compute_payroll(
    profile: EmployeeCompensationProfile,
    schedule: TaxSchedule = NIGERIA_2026_SCHEDULE,
    rates: StatutoryRates = NIGERIA_STATUTORY_RATES,
) -> PayrollBreakdown:
    """Compute the full monthly payroll breakdown for one employee.

    Never raises for business-rule violations (shares not summing to 1,
    negative amounts): callers validate before reaching the engine.
    """
    components = profile.salary_components
    annual_gross = profile.annual_gross_salary

    # 1) Components
    annual_basic = annual_gross * components.basic
    annual_housing = annual_gross * components.housing
    annual_transport = annual_gross * components.transport

    # 2-4) Pre-tax statutory deductions
    annual_pension = annual_gross * rates.pension_rate
    annual_nhf = annual_basic * rates.nhf_rate if profile.contributes_to_nhf else ZERO
    total_pre_tax_deductions = annual_pension + annual_nhf

    # 5-6) Relief and taxable income
    annual_rent_relief = min(profile.annual_rent * rates.rent_relief_rate, rates.rent_relief_cap)
    annual_taxable_income = max(
        ZERO, annual_gross - total_pre_tax_deductions - annual_rent_relief
    )

    # 7) PAYE
    band_taxes, total_annual_paye = schedule.compute_band_taxes(annual_taxable_income)

    # 8) Monthly layer
    months = rates.months_per_year
    monthly_gross = annual_gross / months
    monthly_pension = annual_pension / months
    monthly_nhf = annual_nhf / months
    monthly_paye = total_annual_paye / months
    monthly_loan = profile.loan_deduction

    # 9-10) Totals
    total_monthly_deductions = monthly_pension + monthly_nhf + monthly_paye + monthly_loan
    net_take_home_pay = monthly_gross - total_monthly_deductions

    return PayrollBreakdown(
        annual_gross=annual_gross,
        annual_basic=annual_basic,
        annual_housing=annual_housing,
        annual_transport=annual_transport,
        annual_pension=annual_pension,
        annual_nhf=annual_nhf,
        total_pre_tax_deductions=total_pre_tax_deductions,
        annual_rent_relief=annual_rent_relief,
        annual_taxable_income=annual_taxable_income,
        band_taxes=band_taxes,
        total_annual_paye=total_annual_paye,
        monthly_gross=monthly_gross,
        monthly_basic=annual_basic / months,
        monthly_housing=annual_housing / months,
        monthly_transport=annual_transport / months,
        monthly_pension=monthly_pension,
        monthly_nhf=monthly_nhf,
        monthly_paye=monthly_paye,
        monthly_loan=monthly_loan,
        total_monthly_deductions=total_monthly_deductions,
        net_take_home_pay=net_take_home_pay,
    )


def summarize(breakdown: PayrollBreakdown) -> PayrollSummary:
    """Project a breakdown onto the register/dashboard fields."""
    return PayrollSummary(
        monthly_gross=breakdown.monthly_gross,
        total_deductions=breakdown.total_monthly_deductions,
        net_pay=breakdown.net_take_home_pay,
    )


def compute_monthly_payroll(
    profile: EmployeeCompensationProfile,
    schedule: TaxSchedule = NIGERIA_2026_SCHEDULE,
    rates: StatutoryRates = NIGERIA_STATUTORY_RATES,
) -> PayrollSummary:
    """Compute only gross, total deductions and net pay for one employee."""
    return summarize(compute_payroll(profile, schedule, rates))


def compute_roster_breakdowns(
    profiles: Iterable[EmployeeCompensationProfile],
    schedule: TaxSchedule = NIGERIA_2026_SCHEDULE,
    rates: StatutoryRates = NIGERIA_STATUTORY_RATES,
    max_workers: int | None = None,
) -> list[PayrollBreakdown]:
    """Compute breakdowns for a roster, preserving input order.

    Employees are independent, so with ``max_workers`` > 1 the map is fanned
    out over a thread pool. Workers run under a copy of the caller's decimal
    context, so precision and rounding match the sequential path.
    """
    compute = partial(compute_payroll, schedule=schedule, rates=rates)
    profiles = list(profiles)

    if max_workers is None or max_workers <= 1 or len(profiles) <= 1:
        return [compute(p) for p in profiles]

    context = getcontext().copy()

    def compute_in_context(profile: EmployeeCompensationProfile) -> PayrollBreakdown:
        with localcontext(context):
            return compute(profile)

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(compute_in_context, profiles))


def compute_roster(
    profiles: Iterable[EmployeeCompensationProfile],
    schedule: TaxSchedule = NIGERIA_2026_SCHEDULE,
    rates: StatutoryRates = NIGERIA_STATUTORY_RATES,
) -> list[PayrollSummary]:
    """Compute the three-field projection for each profile, in input order."""
    return [summarize(b) for b in compute_roster_breakdowns(profiles, schedule, rates)]
