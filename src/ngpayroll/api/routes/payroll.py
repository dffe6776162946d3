"""Payroll computation and payroll run endpoints."""

from fastapi import APIRouter, HTTPException, status

from ngpayroll.api.dependencies import AppSettings, DbSession
from ngpayroll.api.schemas import (
    CompensationInput,
    ErrorResponse,
    PayrollBreakdownResponse,
    PayrollRunResponse,
)
from ngpayroll.calculators.engine import compute_payroll
from ngpayroll.data.sample_employees import SAMPLE_PREVIEW_PROFILE
from ngpayroll.models import PayrollRun
from ngpayroll.services.payroll_run_service import ChecklistItemNotFoundError, PayrollRunService
from ngpayroll.services.state_machine import InvalidTransitionError, PayrollRunStateMachine

router = APIRouter(tags=["payroll"])


def _run_response(run: PayrollRun) -> PayrollRunResponse:
    response = PayrollRunResponse.model_validate(run)
    response.next_statuses = PayrollRunStateMachine.get_next_statuses(run.status)
    return response


# ============================================================================
# Computation
# ============================================================================


@router.post("/payroll/preview", response_model=PayrollBreakdownResponse)
async def preview_payroll(payload: CompensationInput) -> PayrollBreakdownResponse:
    """Compute a full breakdown for an ad-hoc compensation profile."""
    return PayrollBreakdownResponse.from_breakdown(compute_payroll(payload.to_profile()))


@router.get("/payroll/sample", response_model=PayrollBreakdownResponse)
async def sample_payroll() -> PayrollBreakdownResponse:
    """Breakdown for the sample employee shown before onboarding completes."""
    return PayrollBreakdownResponse.from_breakdown(compute_payroll(SAMPLE_PREVIEW_PROFILE))


# ============================================================================
# Payroll run
# ============================================================================


@router.get("/payroll-run", response_model=PayrollRunResponse)
async def get_payroll_run(db: DbSession, settings: AppSettings) -> PayrollRunResponse:
    """Current pay period's run status and checklist."""
    run = await PayrollRunService(db).get_or_create_run(settings.pay_period_label)
    return _run_response(run)


@router.post(
    "/payroll-run/checklist/{item_id}",
    response_model=PayrollRunResponse,
    responses={404: {"model": ErrorResponse}},
)
async def toggle_checklist_item(
    item_id: int, db: DbSession, settings: AppSettings
) -> PayrollRunResponse:
    """Toggle one pre-run checklist item."""
    try:
        run = await PayrollRunService(db).toggle_checklist_item(
            settings.pay_period_label, item_id
        )
    except ChecklistItemNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _run_response(run)


@router.post(
    "/payroll-run/run",
    response_model=PayrollRunResponse,
    responses={409: {"model": ErrorResponse}},
)
async def run_payroll(db: DbSession, settings: AppSettings) -> PayrollRunResponse:
    """Run payroll for the current period once the checklist is complete."""
    try:
        run, _ = await PayrollRunService(db).run_payroll(settings.pay_period_label)
    except InvalidTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return _run_response(run)
