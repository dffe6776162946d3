"""Unit tests for payslip line building."""

from decimal import Decimal

from ngpayroll.calculators.engine import compute_payroll
from ngpayroll.calculators.line_builder import (
    PayslipLineBuilder,
    band_tax_lines,
    build_payslip_lines,
    format_rate,
    round_to_kobo,
)
from ngpayroll.calculators.types import LineType
from ngpayroll.data.sample_employees import sample_profile
from tests.conftest import make_profile


class TestRounding:
    def test_round_half_up(self):
        assert round_to_kobo(Decimal("1.005")) == Decimal("1.01")
        assert round_to_kobo(Decimal("1.004")) == Decimal("1.00")

    def test_repeating_monthly_amount(self):
        assert round_to_kobo(Decimal("709000") / 12) == Decimal("59083.33")

    def test_format_rate(self):
        assert format_rate(Decimal("0.15")) == "15%"
        assert format_rate(Decimal("0.20")) == "20%"
        assert format_rate(Decimal("0.025")) == "2.5%"


class TestPayslipLines:
    """Payslip line order, signs and omissions."""

    def test_full_payslip(self, scenario_a_profile):
        lines = build_payslip_lines(compute_payroll(scenario_a_profile))

        assert [line.code for line in lines] == [
            "BASIC",
            "HOUSING",
            "TRANSPORT",
            "PENSION",
            "NHF",
            "PAYE",
            "LOAN",
        ]
        amounts = {line.code: line.amount for line in lines}
        assert amounts["BASIC"] == Decimal("250000.00")
        assert amounts["PENSION"] == Decimal("-40000.00")
        assert amounts["NHF"] == Decimal("-6250.00")
        assert amounts["PAYE"] == Decimal("-81812.50")
        assert amounts["LOAN"] == Decimal("-25000.00")

    def test_lines_sum_to_net(self, scenario_a_profile):
        breakdown = compute_payroll(scenario_a_profile)
        lines = build_payslip_lines(breakdown)
        assert sum(line.amount for line in lines) == round_to_kobo(breakdown.net_take_home_pay)

    def test_line_types(self, scenario_a_profile):
        lines = build_payslip_lines(compute_payroll(scenario_a_profile))
        types = {line.code: line.line_type for line in lines}

        assert types["BASIC"] == LineType.EARNING
        assert types["PENSION"] == LineType.STATUTORY
        assert types["NHF"] == LineType.STATUTORY
        assert types["PAYE"] == LineType.TAX
        assert types["LOAN"] == LineType.OTHER_DEDUCTION

    def test_nhf_and_loan_omitted_when_zero(self):
        lines = build_payslip_lines(compute_payroll(make_profile(nhf=False, loan="0")))
        codes = [line.code for line in lines]

        assert "NHF" not in codes
        assert "LOAN" not in codes
        assert "PAYE" in codes

    def test_paye_rounded_to_kobo(self):
        lines = build_payslip_lines(compute_payroll(sample_profile("EMP002")))
        paye = next(line for line in lines if line.code == "PAYE")
        assert paye.amount == Decimal("-59083.33")

    def test_earnings_positive_deductions_negative(self, scenario_a_profile):
        for line in PayslipLineBuilder.build(compute_payroll(scenario_a_profile)):
            if line.line_type == LineType.EARNING:
                assert line.amount > 0
            else:
                assert line.amount < 0


class TestBandTaxLines:
    def test_only_taxed_bands_listed(self, scenario_a_profile):
        lines = band_tax_lines(compute_payroll(scenario_a_profile))

        assert [line.description for line in lines] == ["Tax @ 15%", "Tax @ 25%", "Tax @ 35%"]
        assert [line.amount for line in lines] == [
            Decimal("210000.00"),
            Decimal("700000.00"),
            Decimal("71750.00"),
        ]
        assert lines[2].metadata["taxable_amount"] == Decimal("205000.00")

    def test_no_band_lines_below_threshold(self):
        lines = band_tax_lines(compute_payroll(make_profile(gross="900000")))
        assert lines == []
