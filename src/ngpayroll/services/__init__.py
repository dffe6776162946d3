"""Payroll services."""

from ngpayroll.services.payroll_run_service import ChecklistItemNotFoundError, PayrollRunService
from ngpayroll.services.roster_service import (
    DuplicateEmployeeError,
    EmployeeNotFoundError,
    RosterService,
)
from ngpayroll.services.state_machine import (
    InvalidTransitionError,
    PayrollRunStateMachine,
    PayrollRunStatus,
)

__all__ = [
    "ChecklistItemNotFoundError",
    "PayrollRunService",
    "DuplicateEmployeeError",
    "EmployeeNotFoundError",
    "RosterService",
    "InvalidTransitionError",
    "PayrollRunStateMachine",
    "PayrollRunStatus",
]
