"""ORM models."""

from ngpayroll.models.base import Base, TimestampMixin
from ngpayroll.models.employee import Employee
from ngpayroll.models.payroll import PayrollRun

__all__ = ["Base", "TimestampMixin", "Employee", "PayrollRun"]
