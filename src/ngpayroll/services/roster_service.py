"""Employee roster service."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ngpayroll.calculators.types import SalaryComponents
from ngpayroll.data.sample_employees import SAMPLE_EMPLOYEES
from ngpayroll.models import Employee

logger = logging.getLogger(__name__)


class EmployeeNotFoundError(Exception):
    """Raised when no employee has the given code."""

    def __init__(self, employee_code: str):
        self.employee_code = employee_code
        super().__init__(f"Employee '{employee_code}' not found")


class DuplicateEmployeeError(Exception):
    """Raised when adding an employee whose code is already on the roster."""

    def __init__(self, employee_code: str):
        self.employee_code = employee_code
        super().__init__(f"Employee '{employee_code}' already exists")


class RosterService:
    """Reads and maintains the employee roster.

    Callers are expected to have validated compensation fields already; the
    service stores what it is given.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_employees(self) -> list[Employee]:
        result = await self.session.execute(select(Employee).order_by(Employee.employee_code))
        return list(result.scalars().all())

    async def find_employee(self, employee_code: str) -> Employee | None:
        result = await self.session.execute(
            select(Employee).where(Employee.employee_code == employee_code)
        )
        return result.scalar_one_or_none()

    async def get_employee(self, employee_code: str) -> Employee:
        employee = await self.find_employee(employee_code)
        if employee is None:
            raise EmployeeNotFoundError(employee_code)
        return employee

    async def add_employee(self, **fields: Any) -> Employee:
        """Add an employee to the roster and flush it."""
        code = fields["employee_code"]
        if await self.find_employee(code) is not None:
            raise DuplicateEmployeeError(code)

        employee = Employee(**fields)
        self.session.add(employee)
        await self.session.flush()
        await self.session.refresh(employee)
        logger.info("Added employee %s to roster", code)
        return employee

    async def update_compensation(
        self,
        employee_code: str,
        *,
        annual_gross_salary: Decimal | None = None,
        salary_components: SalaryComponents | None = None,
        annual_rent: Decimal | None = None,
        contributes_to_nhf: bool | None = None,
        loan_deduction: Decimal | None = None,
    ) -> Employee:
        """Change the payroll-relevant fields of an employee; None leaves a field as is."""
        employee = await self.get_employee(employee_code)

        if annual_gross_salary is not None:
            employee.annual_gross_salary = annual_gross_salary
        if salary_components is not None:
            employee.basic_share = salary_components.basic
            employee.housing_share = salary_components.housing
            employee.transport_share = salary_components.transport
        if annual_rent is not None:
            employee.annual_rent = annual_rent
        if contributes_to_nhf is not None:
            employee.contributes_to_nhf = contributes_to_nhf
        if loan_deduction is not None:
            employee.loan_deduction = loan_deduction

        await self.session.flush()
        logger.info("Updated compensation for employee %s", employee_code)
        return employee

    async def remove_employee(self, employee_code: str) -> None:
        employee = await self.get_employee(employee_code)
        await self.session.delete(employee)
        await self.session.flush()
        logger.info("Removed employee %s from roster", employee_code)

    async def seed_sample_roster(self) -> int:
        """Insert any sample employees missing from the roster.

        Returns the number of employees inserted.
        """
        inserted = 0
        for record in SAMPLE_EMPLOYEES:
            if await self.find_employee(record["employee_code"]) is None:
                self.session.add(Employee(**record))
                inserted += 1
        if inserted:
            await self.session.flush()
            logger.info("Seeded %d sample employees", inserted)
        return inserted
