"""Payslip line builder."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ngpayroll.calculators.types import (
    HUNDRED,
    LineType,
    PayrollBreakdown,
    PayslipLine,
)

KOBO = Decimal("0.01")


def round_to_kobo(amount: Decimal) -> Decimal:
    """Round amount to 2 decimal places (kobo)."""
    return amount.quantize(KOBO, rounding=ROUND_HALF_UP)


def format_rate(rate: Decimal) -> str:
    """Render a fractional rate as a percentage label, e.g. 0.025 -> '2.5%'."""
    percent = (rate * HUNDRED).normalize()
    if percent == percent.to_integral_value():
        percent = percent.quantize(Decimal("1"))
    return f"{percent:f}%"


class PayslipLineBuilder:
    """Builds display-ready payslip lines from a breakdown.

    Sign conventions:
    - EARNING: positive
    - STATUTORY, TAX, OTHER_DEDUCTION: negative

    Rounding:
    - Engine amounts keep full precision
    - Lines are rounded half-up to kobo here and nowhere earlier
    """

    @staticmethod
    def earning(code: str, description: str, amount: Decimal) -> PayslipLine:
        return PayslipLine(
            line_type=LineType.EARNING,
            code=code,
            description=description,
            amount=round_to_kobo(abs(amount)),
        )

    @staticmethod
    def deduction(
        line_type: LineType, code: str, description: str, amount: Decimal
    ) -> PayslipLine:
        return PayslipLine(
            line_type=line_type,
            code=code,
            description=description,
            amount=-round_to_kobo(abs(amount)),
        )

    @classmethod
    def build(cls, breakdown: PayrollBreakdown) -> list[PayslipLine]:
        """Return payslip lines in display order.

        NHF and loan lines are omitted when zero; PAYE is always shown.
        """
        lines = [
            cls.earning("BASIC", "Basic Salary", breakdown.monthly_basic),
            cls.earning("HOUSING", "Housing Allowance", breakdown.monthly_housing),
            cls.earning("TRANSPORT", "Transport Allowance", breakdown.monthly_transport),
            cls.deduction(
                LineType.STATUTORY, "PENSION", "Pension (8% of Gross)", breakdown.monthly_pension
            ),
        ]
        if breakdown.monthly_nhf:
            lines.append(
                cls.deduction(
                    LineType.STATUTORY, "NHF", "NHF (2.5% of Basic)", breakdown.monthly_nhf
                )
            )
        lines.append(cls.deduction(LineType.TAX, "PAYE", "PAYE (Tax)", breakdown.monthly_paye))
        if breakdown.monthly_loan:
            lines.append(
                cls.deduction(
                    LineType.OTHER_DEDUCTION, "LOAN", "Loan Repayment", breakdown.monthly_loan
                )
            )
        return lines

    @staticmethod
    def band_tax_lines(breakdown: PayrollBreakdown) -> list[PayslipLine]:
        """Annual tax per band, only for bands that produced tax."""
        return [
            PayslipLine(
                line_type=LineType.TAX,
                code=f"PAYE_BAND_{band.band}",
                description=f"Tax @ {format_rate(band.rate)}",
                amount=round_to_kobo(band.tax_amount),
                metadata={"taxable_amount": round_to_kobo(band.taxable_amount)},
            )
            for band in breakdown.band_taxes
            if band.tax_amount > 0
        ]


def build_payslip_lines(breakdown: PayrollBreakdown) -> list[PayslipLine]:
    return PayslipLineBuilder.build(breakdown)


def band_tax_lines(breakdown: PayrollBreakdown) -> list[PayslipLine]:
    return PayslipLineBuilder.band_tax_lines(breakdown)
