"""Payroll run state machine with transition validation."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ngpayroll.models import PayrollRun


class PayrollRunStatus(str, Enum):
    """Payroll run status values."""

    NOT_STARTED = "not_started"
    PROCESSING = "processing"
    COMPLETED = "completed"


def _status_value(status: str) -> str:
    return status.value if isinstance(status, PayrollRunStatus) else status


class InvalidTransitionError(Exception):
    """Raised when an invalid state transition is attempted."""

    def __init__(self, from_status: str, to_status: str, reason: str | None = None):
        self.from_status = _status_value(from_status)
        self.to_status = _status_value(to_status)
        self.reason = reason
        msg = f"Invalid transition from '{self.from_status}' to '{self.to_status}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class PayrollRunStateMachine:
    """State machine for payroll run status transitions.

    Allowed transitions:
    - not_started → processing (pre-run checklist must be complete)
    - processing → completed
    - processing → not_started (abort)
    - completed → not_started (checklist changed after completion)
    """

    VALID_TRANSITIONS: dict[str, list[str]] = {
        PayrollRunStatus.NOT_STARTED: [PayrollRunStatus.PROCESSING],
        PayrollRunStatus.PROCESSING: [PayrollRunStatus.COMPLETED, PayrollRunStatus.NOT_STARTED],
        PayrollRunStatus.COMPLETED: [PayrollRunStatus.NOT_STARTED],
    }

    @classmethod
    def can_transition(cls, from_status: str, to_status: str) -> bool:
        """Check if a transition is valid."""
        allowed = cls.VALID_TRANSITIONS.get(from_status, [])
        return to_status in allowed

    @classmethod
    def validate_transition(cls, from_status: str, to_status: str) -> None:
        """Validate a transition, raising InvalidTransitionError if invalid."""
        if not cls.can_transition(from_status, to_status):
            raise InvalidTransitionError(from_status, to_status)

    @classmethod
    def get_next_statuses(cls, current_status: str) -> list[str]:
        """Get list of valid next statuses from current status."""
        return [_status_value(s) for s in cls.VALID_TRANSITIONS.get(current_status, [])]

    @classmethod
    def validate_run_for_transition(cls, run: PayrollRun, to_status: str) -> list[str]:
        """Validate a payroll run for a specific transition, returning any errors."""
        errors: list[str] = []
        from_status = run.status

        if not cls.can_transition(from_status, to_status):
            errors.append(
                f"Cannot transition from '{from_status}' to '{_status_value(to_status)}'"
            )
            return errors

        if to_status == PayrollRunStatus.PROCESSING:
            pending = [item["text"] for item in run.checklist if not item.get("completed")]
            if pending:
                errors.append(f"Checklist incomplete: {', '.join(pending)}")

        return errors

    @classmethod
    def transition(cls, run: PayrollRun, to_status: str) -> None:
        """Move a run to a new status or raise InvalidTransitionError."""
        cls.validate_transition(run.status, to_status)
        errors = cls.validate_run_for_transition(run, to_status)
        if errors:
            raise InvalidTransitionError(run.status, to_status, "; ".join(errors))
        run.status = PayrollRunStatus(to_status).value
