"""Payroll run model."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import JSON, DateTime, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from ngpayroll.models.base import Base, TimestampMixin

MONEY = Numeric(18, 2)

DEFAULT_CHECKLIST: list[dict[str, Any]] = [
    {"id": 1, "text": "Confirm New Hires", "completed": False},
    {"id": 2, "text": "Update Salary Changes", "completed": False},
    {"id": 3, "text": "Input Bonuses/Commissions", "completed": False},
    {"id": 4, "text": "Verify Absences", "completed": False},
]


def default_checklist() -> list[dict[str, Any]]:
    return [dict(item) for item in DEFAULT_CHECKLIST]


class PayrollRun(Base, TimestampMixin):
    """Monthly payroll run for one pay period.

    Totals are stored rounded to kobo once the run completes.
    """

    __tablename__ = "payroll_run"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    period_label: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    status: Mapped[str] = mapped_column(String, nullable=False, default="not_started")
    checklist: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON, nullable=False, default=default_checklist
    )

    employee_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    total_gross: Mapped[Decimal | None] = mapped_column(MONEY, nullable=True)
    total_deductions: Mapped[Decimal | None] = mapped_column(MONEY, nullable=True)
    total_net: Mapped[Decimal | None] = mapped_column(MONEY, nullable=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    @property
    def checklist_complete(self) -> bool:
        return all(item.get("completed") for item in self.checklist)
