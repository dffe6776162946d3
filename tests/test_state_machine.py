"""Tests for payroll run state machine."""

import pytest

from ngpayroll.models import PayrollRun
from ngpayroll.models.payroll import default_checklist
from ngpayroll.services.state_machine import (
    InvalidTransitionError,
    PayrollRunStateMachine,
    PayrollRunStatus,
)


def make_run(status: str = "not_started", completed: bool = False) -> PayrollRun:
    checklist = default_checklist()
    for item in checklist:
        item["completed"] = completed
    return PayrollRun(period_label="October 2026", status=status, checklist=checklist)


class TestPayrollRunStateMachine:
    """Test state machine transitions."""

    def test_valid_transitions(self):
        assert PayrollRunStateMachine.can_transition("not_started", "processing") is True
        assert PayrollRunStateMachine.can_transition("processing", "completed") is True
        assert PayrollRunStateMachine.can_transition("processing", "not_started") is True
        assert PayrollRunStateMachine.can_transition("completed", "not_started") is True

    def test_invalid_transitions(self):
        # Can't skip processing
        assert PayrollRunStateMachine.can_transition("not_started", "completed") is False
        assert PayrollRunStateMachine.can_transition("completed", "processing") is False
        assert PayrollRunStateMachine.can_transition("unknown", "processing") is False

    def test_validate_transition_raises(self):
        with pytest.raises(InvalidTransitionError) as exc_info:
            PayrollRunStateMachine.validate_transition("not_started", "completed")

        assert exc_info.value.from_status == "not_started"
        assert exc_info.value.to_status == "completed"

    def test_enum_values_accepted(self):
        assert PayrollRunStateMachine.can_transition(
            PayrollRunStatus.NOT_STARTED, PayrollRunStatus.PROCESSING
        )

    def test_get_next_statuses(self):
        assert set(PayrollRunStateMachine.get_next_statuses("processing")) == {
            "completed",
            "not_started",
        }
        assert PayrollRunStateMachine.get_next_statuses("unknown") == []

    def test_next_statuses_are_plain_strings(self):
        statuses = PayrollRunStateMachine.get_next_statuses("not_started")
        assert statuses == ["processing"]
        assert type(statuses[0]) is str


class TestChecklistGate:
    """Processing needs the pre-run checklist done."""

    def test_incomplete_checklist_blocks_processing(self):
        run = make_run(completed=False)
        errors = PayrollRunStateMachine.validate_run_for_transition(run, "processing")

        assert len(errors) == 1
        assert "Confirm New Hires" in errors[0]

    def test_complete_checklist_allows_processing(self):
        run = make_run(completed=True)
        assert PayrollRunStateMachine.validate_run_for_transition(run, "processing") == []

    def test_transition_updates_status(self):
        run = make_run(completed=True)
        PayrollRunStateMachine.transition(run, PayrollRunStatus.PROCESSING)
        assert run.status == "processing"

    def test_transition_raises_with_reason(self):
        run = make_run(completed=False)
        with pytest.raises(InvalidTransitionError) as exc_info:
            PayrollRunStateMachine.transition(run, PayrollRunStatus.PROCESSING)

        assert exc_info.value.to_status == "processing"
        assert "Checklist incomplete" in exc_info.value.reason
        assert run.status == "not_started"

    def test_transition_rejects_skipping_processing(self):
        run = make_run(completed=True)
        with pytest.raises(InvalidTransitionError) as exc_info:
            PayrollRunStateMachine.transition(run, PayrollRunStatus.COMPLETED)

        assert exc_info.value.from_status == "not_started"
        assert exc_info.value.to_status == "completed"
        assert run.status == "not_started"

    def test_checklist_complete_property(self):
        assert make_run(completed=True).checklist_complete is True
        assert make_run(completed=False).checklist_complete is False
