"""Payroll register and statutory remittance schedules.

Every figure here comes from ``compute_payroll``; the register only projects
and sums. Amounts keep full precision until CSV export.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

from ngpayroll.calculators.engine import compute_roster_breakdowns, summarize
from ngpayroll.calculators.line_builder import round_to_kobo
from ngpayroll.calculators.types import ZERO, PayrollBreakdown

if TYPE_CHECKING:
    from ngpayroll.models import Employee


@dataclass(frozen=True)
class RegisterRow:
    employee_code: str
    employee_name: str
    monthly_gross: Decimal
    total_deductions: Decimal
    net_pay: Decimal


@dataclass(frozen=True)
class RegisterTotals:
    gross: Decimal = ZERO
    deductions: Decimal = ZERO
    net: Decimal = ZERO


@dataclass(frozen=True)
class PayrollRegister:
    """Monthly payroll register for one pay period."""

    period_label: str
    rows: list[RegisterRow]
    totals: RegisterTotals

    @property
    def employee_count(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class RemittanceRow:
    employee_code: str
    employee_name: str
    amount: Decimal
    details: dict[str, str | Decimal | None] = field(default_factory=dict)


@dataclass(frozen=True)
class RemittanceSchedule:
    """Per-employee amounts due to one statutory body for the month."""

    kind: str  # 'paye' | 'pension' | 'nhf'
    title: str
    rows: list[RemittanceRow]

    @property
    def total(self) -> Decimal:
        return sum((row.amount for row in self.rows), ZERO)


REMITTANCE_KINDS = ("paye", "pension", "nhf")


def _with_breakdowns(
    employees: Iterable[Employee],
) -> list[tuple[Employee, PayrollBreakdown]]:
    employees = list(employees)
    breakdowns = compute_roster_breakdowns(e.to_profile() for e in employees)
    return list(zip(employees, breakdowns))


def build_register(employees: Iterable[Employee], period_label: str) -> PayrollRegister:
    """Build the register rows and roster totals."""
    rows: list[RegisterRow] = []
    gross = deductions = net = ZERO

    for employee, breakdown in _with_breakdowns(employees):
        summary = summarize(breakdown)
        rows.append(
            RegisterRow(
                employee_code=employee.employee_code,
                employee_name=employee.full_name,
                monthly_gross=summary.monthly_gross,
                total_deductions=summary.total_deductions,
                net_pay=summary.net_pay,
            )
        )
        gross += summary.monthly_gross
        deductions += summary.total_deductions
        net += summary.net_pay

    return PayrollRegister(
        period_label=period_label,
        rows=rows,
        totals=RegisterTotals(gross=gross, deductions=deductions, net=net),
    )


def build_remittance_schedule(kind: str, employees: Iterable[Employee]) -> RemittanceSchedule:
    """Build the PAYE, pension or NHF remittance schedule."""
    pairs = _with_breakdowns(employees)

    if kind == "paye":
        rows = [
            RemittanceRow(
                employee_code=e.employee_code,
                employee_name=e.full_name,
                amount=b.monthly_paye,
                details={"tin": e.tin, "annual_taxable_income": b.annual_taxable_income},
            )
            for e, b in pairs
        ]
        return RemittanceSchedule(kind, "PAYE Tax Remittance Schedule", rows)

    if kind == "pension":
        rows = [
            RemittanceRow(
                employee_code=e.employee_code,
                employee_name=e.full_name,
                amount=b.monthly_pension,
                details={"rsa_pin": e.rsa_pin, "pfa": e.pfa_name},
            )
            for e, b in pairs
        ]
        return RemittanceSchedule(kind, "Pension Remittance Schedule", rows)

    if kind == "nhf":
        rows = [
            RemittanceRow(
                employee_code=e.employee_code,
                employee_name=e.full_name,
                amount=b.monthly_nhf,
            )
            for e, b in pairs
            if e.contributes_to_nhf
        ]
        return RemittanceSchedule(kind, "NHF Remittance Schedule", rows)

    raise ValueError(f"Unknown remittance schedule '{kind}'")


def register_to_csv(register: PayrollRegister) -> str:
    """Render the register as CSV, amounts rounded to kobo, with a TOTAL row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(["employee_code", "employee_name", "monthly_gross", "total_deductions", "net_pay"])
    for row in register.rows:
        writer.writerow(
            [
                row.employee_code,
                row.employee_name,
                round_to_kobo(row.monthly_gross),
                round_to_kobo(row.total_deductions),
                round_to_kobo(row.net_pay),
            ]
        )
    writer.writerow(
        [
            "TOTAL",
            "",
            round_to_kobo(register.totals.gross),
            round_to_kobo(register.totals.deductions),
            round_to_kobo(register.totals.net),
        ]
    )
    return buffer.getvalue()
