"""Command line interface.

Usage:
    python -m ngpayroll.cli preview --gross 6000000 --basic 50 --housing 30 --transport 20 \
        --rent 1200000 --nhf --loan 25000
    python -m ngpayroll.cli register --format csv
    python -m ngpayroll.cli schedule
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from decimal import Decimal, InvalidOperation
from typing import Any

from ngpayroll.calculators.engine import compute_payroll
from ngpayroll.calculators.line_builder import build_payslip_lines
from ngpayroll.calculators.tax_schedule import NIGERIA_2026_SCHEDULE
from ngpayroll.calculators.types import EmployeeCompensationProfile, SalaryComponents
from ngpayroll.config import get_settings
from ngpayroll.data.sample_employees import SAMPLE_EMPLOYEES
from ngpayroll.models import Employee
from ngpayroll.reports.register import build_register, register_to_csv

logger = logging.getLogger(__name__)


def parse_amount(s: str) -> Decimal:
    """Parse a non-negative decimal amount."""
    try:
        value = Decimal(s)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid amount: {s!r}")
    if not value.is_finite() or value < 0:
        raise argparse.ArgumentTypeError(f"amount must be a non-negative number: {s!r}")
    return value


def _json_default(value: Any) -> str:
    if isinstance(value, Decimal):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class PayrollCli:
    """Payroll command line interface."""

    def __init__(self) -> None:
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="python -m ngpayroll.cli",
            description="Nigerian payroll computation tools",
        )
        parser.add_argument(
            "--log-level",
            type=str,
            default=None,
            help="Logging level (default: LOG_LEVEL setting)",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        # preview command
        preview = subparsers.add_parser(
            "preview",
            help="Compute payroll for one compensation profile",
        )
        preview.add_argument("--gross", type=parse_amount, required=True, help="Annual gross salary")
        preview.add_argument("--basic", type=parse_amount, required=True, help="Basic share in percent")
        preview.add_argument("--housing", type=parse_amount, required=True, help="Housing share in percent")
        preview.add_argument(
            "--transport", type=parse_amount, required=True, help="Transport share in percent"
        )
        preview.add_argument("--rent", type=parse_amount, default=Decimal("0"), help="Annual rent")
        preview.add_argument("--nhf", action="store_true", help="Employee contributes to NHF")
        preview.add_argument(
            "--loan", type=parse_amount, default=Decimal("0"), help="Monthly loan deduction"
        )

        # register command
        register = subparsers.add_parser(
            "register",
            help="Payroll register for the sample roster",
        )
        register.add_argument(
            "--format",
            type=str,
            choices=["json", "csv"],
            default="json",
            help="Output format",
        )

        # schedule command
        subparsers.add_parser(
            "schedule",
            help="Print the active PAYE band schedule",
        )

        return parser

    def run(self, argv: list[str] | None = None) -> int:
        """Run CLI with arguments."""
        args = self.parser.parse_args(argv)

        settings = get_settings()
        logging.basicConfig(level=args.log_level or settings.log_level)

        if args.command is None:
            self.parser.print_help()
            return 1

        handlers = {
            "preview": self._cmd_preview,
            "register": self._cmd_register,
            "schedule": self._cmd_schedule,
        }
        return handlers[args.command](args)

    def _cmd_preview(self, args: argparse.Namespace) -> int:
        total = args.basic + args.housing + args.transport
        if total != 100:
            print(f"Error: salary components must sum to 100%, got {total}%", file=sys.stderr)
            return 2

        profile = EmployeeCompensationProfile(
            annual_gross_salary=args.gross,
            salary_components=SalaryComponents.from_percentages(
                args.basic, args.housing, args.transport
            ),
            contributes_to_nhf=args.nhf,
            annual_rent=args.rent,
            loan_deduction=args.loan,
        )
        breakdown = compute_payroll(profile)
        output = {
            "breakdown": breakdown.to_dict(),
            "payslip": [
                {
                    "line_type": line.line_type.value,
                    "code": line.code,
                    "description": line.description,
                    "amount": line.amount,
                }
                for line in build_payslip_lines(breakdown)
            ],
        }
        print(json.dumps(output, indent=2, default=_json_default))
        return 0

    def _cmd_register(self, args: argparse.Namespace) -> int:
        settings = get_settings()
        employees = [Employee(**record) for record in SAMPLE_EMPLOYEES]
        register = build_register(employees, settings.pay_period_label)
        logger.debug("Built register for %d employees", register.employee_count)

        if args.format == "csv":
            sys.stdout.write(register_to_csv(register))
        else:
            output = {
                "period_label": register.period_label,
                "rows": [asdict(row) for row in register.rows],
                "totals": asdict(register.totals),
            }
            print(json.dumps(output, indent=2, default=_json_default))
        return 0

    def _cmd_schedule(self, args: argparse.Namespace) -> int:
        print(json.dumps(NIGERIA_2026_SCHEDULE.to_payload(), indent=2))
        return 0


def main() -> None:
    """CLI entry point."""
    cli = PayrollCli()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
