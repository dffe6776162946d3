"""API routes."""

from ngpayroll.api.routes.employees import router as employees_router
from ngpayroll.api.routes.health import router as health_router
from ngpayroll.api.routes.payroll import router as payroll_router
from ngpayroll.api.routes.reports import router as reports_router

__all__ = ["employees_router", "health_router", "payroll_router", "reports_router"]
