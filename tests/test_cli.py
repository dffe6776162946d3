"""Tests for the command line interface."""

import json
from decimal import Decimal

from ngpayroll.cli import PayrollCli


class TestPayrollCli:
    def test_no_command_prints_help(self, capsys):
        assert PayrollCli().run([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_preview(self, capsys):
        code = PayrollCli().run(
            [
                "preview",
                "--gross", "6000000",
                "--basic", "50",
                "--housing", "30",
                "--transport", "20",
                "--rent", "1200000",
                "--nhf",
                "--loan", "25000",
            ]
        )
        assert code == 0

        output = json.loads(capsys.readouterr().out)
        assert Decimal(output["breakdown"]["total_annual_paye"]) == Decimal("981750")
        assert output["payslip"][-1]["code"] == "LOAN"

    def test_preview_rejects_bad_split(self, capsys):
        code = PayrollCli().run(
            ["preview", "--gross", "100", "--basic", "50", "--housing", "30", "--transport", "30"]
        )
        assert code == 2
        assert "must sum to 100%" in capsys.readouterr().err

    def test_register_csv(self, capsys):
        assert PayrollCli().run(["register", "--format", "csv"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[-1] == "TOTAL,,1825000.00,547187.50,1277812.50"

    def test_schedule(self, capsys):
        assert PayrollCli().run(["schedule"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["name"] == "NG-PAYE-2026"
        assert len(payload["bands"]) == 5
