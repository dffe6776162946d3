"""Payroll run flow: checklist gating, run, reset."""

from decimal import Decimal

import pytest

from ngpayroll.services.payroll_run_service import (
    ChecklistItemNotFoundError,
    PayrollRunService,
)
from ngpayroll.services.state_machine import InvalidTransitionError

pytestmark = pytest.mark.asyncio

PERIOD = "October 1 - October 31, 2026"


async def complete_checklist(service: PayrollRunService) -> None:
    run = await service.get_or_create_run(PERIOD)
    for item in list(run.checklist):
        await service.toggle_checklist_item(PERIOD, item["id"])


class TestPayrollRunFlow:
    async def test_new_run_not_started(self, session):
        run = await PayrollRunService(session).get_or_create_run(PERIOD)

        assert run.status == "not_started"
        assert len(run.checklist) == 4
        assert run.checklist_complete is False

    async def test_same_period_reuses_run(self, session):
        service = PayrollRunService(session)
        first = await service.get_or_create_run(PERIOD)
        second = await service.get_or_create_run(PERIOD)
        assert first.id == second.id

    async def test_run_blocked_until_checklist_done(self, session, seeded_db):
        service = PayrollRunService(session)

        with pytest.raises(InvalidTransitionError) as exc_info:
            await service.run_payroll(PERIOD)
        assert "Checklist incomplete" in str(exc_info.value)

    async def test_run_completes_with_totals(self, session, seeded_db):
        service = PayrollRunService(session)
        await complete_checklist(service)

        run, register = await service.run_payroll(PERIOD)

        assert run.status == "completed"
        assert run.employee_count == 4
        assert run.total_gross == Decimal("1825000.00")
        assert run.total_deductions == Decimal("547187.50")
        assert run.total_net == Decimal("1277812.50")
        assert run.completed_at is not None
        assert register.employee_count == 4

    async def test_checklist_change_resets_completed_run(self, session, seeded_db):
        service = PayrollRunService(session)
        await complete_checklist(service)
        await service.run_payroll(PERIOD)

        run = await service.toggle_checklist_item(PERIOD, 2)

        assert run.status == "not_started"
        assert run.completed_at is None
        assert run.checklist_complete is False

    async def test_cannot_run_twice_without_reset(self, session, seeded_db):
        service = PayrollRunService(session)
        await complete_checklist(service)
        await service.run_payroll(PERIOD)

        with pytest.raises(InvalidTransitionError):
            await service.run_payroll(PERIOD)

    async def test_unknown_checklist_item(self, session):
        with pytest.raises(ChecklistItemNotFoundError):
            await PayrollRunService(session).toggle_checklist_item(PERIOD, 99)
