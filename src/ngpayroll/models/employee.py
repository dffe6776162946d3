"""Employee roster model."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import Boolean, CheckConstraint, Date, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from ngpayroll.calculators.types import EmployeeCompensationProfile, SalaryComponents
from ngpayroll.models.base import Base, TimestampMixin

MONEY = Numeric(16, 2)
SHARE = Numeric(7, 4)


class Employee(Base, TimestampMixin):
    """Employee record with compensation and statutory details.

    Salary component shares are stored as fractions of 1.
    """

    __tablename__ = "employee"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    employee_code: Mapped[str] = mapped_column(String(32), unique=True, nullable=False)

    # Personal
    first_name: Mapped[str] = mapped_column(String, nullable=False)
    last_name: Mapped[str] = mapped_column(String, nullable=False)
    middle_name: Mapped[str | None] = mapped_column(String, nullable=True)
    email: Mapped[str | None] = mapped_column(String, nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String, nullable=True)

    # Job
    job_title: Mapped[str | None] = mapped_column(String, nullable=True)
    department: Mapped[str | None] = mapped_column(String, nullable=True)
    employment_type: Mapped[str | None] = mapped_column(String, nullable=True)
    date_of_hire: Mapped[date | None] = mapped_column(Date, nullable=True)
    work_location: Mapped[str | None] = mapped_column(String, nullable=True)

    # Compensation
    annual_gross_salary: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    basic_share: Mapped[Decimal] = mapped_column(SHARE, nullable=False)
    housing_share: Mapped[Decimal] = mapped_column(SHARE, nullable=False)
    transport_share: Mapped[Decimal] = mapped_column(SHARE, nullable=False)
    loan_deduction: Mapped[Decimal] = mapped_column(MONEY, nullable=False, default=Decimal("0"))

    # Statutory
    tin: Mapped[str | None] = mapped_column(String, nullable=True)
    annual_rent: Mapped[Decimal] = mapped_column(MONEY, nullable=False, default=Decimal("0"))
    pfa_name: Mapped[str | None] = mapped_column(String, nullable=True)
    rsa_pin: Mapped[str | None] = mapped_column(String, nullable=True)
    contributes_to_nhf: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    __table_args__ = (
        CheckConstraint("annual_gross_salary >= 0", name="employee_gross_non_negative"),
        CheckConstraint("annual_rent >= 0", name="employee_rent_non_negative"),
        CheckConstraint("loan_deduction >= 0", name="employee_loan_non_negative"),
    )

    @property
    def full_name(self) -> str:
        """Get full name."""
        return f"{self.first_name} {self.last_name}"

    @property
    def salary_components(self) -> SalaryComponents:
        return SalaryComponents(
            basic=self.basic_share,
            housing=self.housing_share,
            transport=self.transport_share,
        )

    @property
    def salary_percentages(self) -> dict[str, Decimal]:
        """Shares as percentages for display."""
        return self.salary_components.to_percentages()

    def to_profile(self) -> EmployeeCompensationProfile:
        """Build the engine input for this employee."""
        return EmployeeCompensationProfile(
            annual_gross_salary=self.annual_gross_salary,
            salary_components=self.salary_components,
            contributes_to_nhf=bool(self.contributes_to_nhf),
            annual_rent=self.annual_rent if self.annual_rent is not None else Decimal("0"),
            loan_deduction=self.loan_deduction if self.loan_deduction is not None else Decimal("0"),
        )
