"""Payroll register and remittance report endpoints."""

from dataclasses import asdict
from typing import Annotated, Literal

from fastapi import APIRouter, HTTPException, Query, Response, status

from ngpayroll.api.dependencies import AppSettings, DbSession
from ngpayroll.api.schemas import (
    ErrorResponse,
    PayrollRegisterResponse,
    RemittanceScheduleResponse,
)
from ngpayroll.reports.register import (
    REMITTANCE_KINDS,
    build_register,
    build_remittance_schedule,
    register_to_csv,
)
from ngpayroll.services.roster_service import RosterService

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get(
    "/payroll-register",
    response_model=PayrollRegisterResponse,
    responses={200: {"content": {"text/csv": {}}}},
)
async def payroll_register(
    db: DbSession,
    settings: AppSettings,
    output_format: Annotated[Literal["json", "csv"], Query(alias="format")] = "json",
):
    """Monthly payroll register for the configured pay period."""
    employees = await RosterService(db).list_employees()
    register = build_register(employees, settings.pay_period_label)

    if output_format == "csv":
        return Response(
            content=register_to_csv(register),
            media_type="text/csv",
            headers={"Content-Disposition": 'attachment; filename="payroll-register.csv"'},
        )

    return PayrollRegisterResponse.model_validate(
        {
            "period_label": register.period_label,
            "employee_count": register.employee_count,
            "rows": [asdict(row) for row in register.rows],
            "totals": asdict(register.totals),
        }
    )


@router.get(
    "/remittances/{kind}",
    response_model=RemittanceScheduleResponse,
    responses={404: {"model": ErrorResponse}},
)
async def remittance_schedule(kind: str, db: DbSession) -> RemittanceScheduleResponse:
    """PAYE, pension or NHF remittance schedule for the month."""
    if kind not in REMITTANCE_KINDS:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown remittance schedule '{kind}'",
        )
    employees = await RosterService(db).list_employees()
    schedule = build_remittance_schedule(kind, employees)
    return RemittanceScheduleResponse.model_validate(
        {
            "kind": schedule.kind,
            "title": schedule.title,
            "rows": [asdict(row) for row in schedule.rows],
            "total": schedule.total,
        }
    )
