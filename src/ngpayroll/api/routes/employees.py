"""Employee roster endpoints."""

from fastapi import APIRouter, HTTPException, Response, status

from ngpayroll.api.dependencies import DbSession
from ngpayroll.api.schemas import (
    EmployeeCreate,
    EmployeeListResponse,
    EmployeePayrollResponse,
    EmployeeResponse,
    ErrorResponse,
    PayrollBreakdownResponse,
    PayslipLineResponse,
)
from ngpayroll.calculators.engine import compute_payroll
from ngpayroll.calculators.line_builder import band_tax_lines, build_payslip_lines
from ngpayroll.services.roster_service import (
    DuplicateEmployeeError,
    EmployeeNotFoundError,
    RosterService,
)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=EmployeeListResponse)
async def list_employees(db: DbSession) -> EmployeeListResponse:
    """List the roster ordered by employee code."""
    employees = await RosterService(db).list_employees()
    return EmployeeListResponse(
        items=[EmployeeResponse.model_validate(e) for e in employees],
        total=len(employees),
    )


@router.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
async def create_employee(db: DbSession, payload: EmployeeCreate) -> EmployeeResponse:
    """Add an employee; salary components are whole percentages summing to 100."""
    try:
        employee = await RosterService(db).add_employee(**payload.to_fields())
    except DuplicateEmployeeError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return EmployeeResponse.model_validate(employee)


@router.get(
    "/{employee_code}",
    response_model=EmployeeResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_employee(employee_code: str, db: DbSession) -> EmployeeResponse:
    try:
        employee = await RosterService(db).get_employee(employee_code)
    except EmployeeNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return EmployeeResponse.model_validate(employee)


@router.delete(
    "/{employee_code}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_employee(employee_code: str, db: DbSession) -> Response:
    try:
        await RosterService(db).remove_employee(employee_code)
    except EmployeeNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{employee_code}/payroll",
    response_model=EmployeePayrollResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_employee_payroll(employee_code: str, db: DbSession) -> EmployeePayrollResponse:
    """Payroll detail and payslip lines for one employee."""
    try:
        employee = await RosterService(db).get_employee(employee_code)
    except EmployeeNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    breakdown = compute_payroll(employee.to_profile())
    return EmployeePayrollResponse(
        employee_code=employee.employee_code,
        employee_name=employee.full_name,
        breakdown=PayrollBreakdownResponse.from_breakdown(breakdown),
        lines=[PayslipLineResponse.from_line(line) for line in build_payslip_lines(breakdown)],
        band_lines=[PayslipLineResponse.from_line(line) for line in band_tax_lines(breakdown)],
    )
