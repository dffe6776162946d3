"""Payroll run orchestration."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ngpayroll.calculators.line_builder import round_to_kobo
from ngpayroll.models import PayrollRun
from ngpayroll.models.payroll import default_checklist
from ngpayroll.reports.register import PayrollRegister, build_register
from ngpayroll.services.roster_service import RosterService
from ngpayroll.services.state_machine import PayrollRunStateMachine, PayrollRunStatus

logger = logging.getLogger(__name__)


class ChecklistItemNotFoundError(Exception):
    """Raised when toggling a checklist item that does not exist."""

    def __init__(self, item_id: int):
        self.item_id = item_id
        super().__init__(f"Checklist item {item_id} not found")


class PayrollRunService:
    """Drives the monthly payroll run for one pay period."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.roster = RosterService(session)

    async def get_or_create_run(self, period_label: str) -> PayrollRun:
        result = await self.session.execute(
            select(PayrollRun).where(PayrollRun.period_label == period_label)
        )
        run = result.scalar_one_or_none()
        if run is None:
            run = PayrollRun(
                period_label=period_label,
                status=PayrollRunStatus.NOT_STARTED.value,
                checklist=default_checklist(),
            )
            self.session.add(run)
            await self.session.flush()
            logger.info("Created payroll run for %s", period_label)
        return run

    async def toggle_checklist_item(self, period_label: str, item_id: int) -> PayrollRun:
        """Flip one checklist item; a completed run goes back to not started."""
        run = await self.get_or_create_run(period_label)

        checklist = [dict(item) for item in run.checklist]
        for item in checklist:
            if item["id"] == item_id:
                item["completed"] = not item.get("completed", False)
                break
        else:
            raise ChecklistItemNotFoundError(item_id)
        # Reassign so the JSON column is marked dirty
        run.checklist = checklist

        if run.status == PayrollRunStatus.COMPLETED:
            PayrollRunStateMachine.transition(run, PayrollRunStatus.NOT_STARTED)
            run.completed_at = None
            logger.info("Checklist changed, payroll run %s reset", period_label)

        await self.session.flush()
        return run

    async def run_payroll(self, period_label: str) -> tuple[PayrollRun, PayrollRegister]:
        """Compute the register for the current roster and complete the run."""
        run = await self.get_or_create_run(period_label)
        PayrollRunStateMachine.transition(run, PayrollRunStatus.PROCESSING)

        employees = await self.roster.list_employees()
        register = build_register(employees, period_label)

        run.employee_count = register.employee_count
        run.total_gross = round_to_kobo(register.totals.gross)
        run.total_deductions = round_to_kobo(register.totals.deductions)
        run.total_net = round_to_kobo(register.totals.net)
        run.completed_at = datetime.now(timezone.utc)
        PayrollRunStateMachine.transition(run, PayrollRunStatus.COMPLETED)

        await self.session.flush()
        logger.info(
            "Payroll run %s completed for %d employees, net %s",
            period_label,
            register.employee_count,
            run.total_net,
        )
        return run, register
