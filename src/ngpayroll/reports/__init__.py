"""Payroll reports."""

from ngpayroll.reports.register import (
    REMITTANCE_KINDS,
    PayrollRegister,
    RemittanceSchedule,
    build_register,
    build_remittance_schedule,
    register_to_csv,
)

__all__ = [
    "REMITTANCE_KINDS",
    "PayrollRegister",
    "RemittanceSchedule",
    "build_register",
    "build_remittance_schedule",
    "register_to_csv",
]
