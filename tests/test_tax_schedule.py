"""Unit tests for the PAYE band schedule."""

from decimal import Decimal

import pytest

from ngpayroll.calculators.tax_schedule import (
    NIGERIA_2026_SCHEDULE,
    NIGERIA_STATUTORY_RATES,
    InvalidTaxScheduleError,
    TaxSchedule,
)
from ngpayroll.calculators.types import TaxBand


class TestProgressiveTaxCalculation:
    """Band-by-band application of the 2026 schedule."""

    def test_within_first_band(self):
        bands, total = NIGERIA_2026_SCHEDULE.compute_band_taxes(Decimal("500000"))
        assert total == 0
        assert bands[0].taxable_amount == Decimal("500000")
        assert all(b.taxable_amount == 0 for b in bands[1:])

    def test_spanning_two_bands(self):
        bands, total = NIGERIA_2026_SCHEDULE.compute_band_taxes(Decimal("1000000"))
        # 200k @ 15%
        assert total == Decimal("30000")
        assert bands[1].taxable_amount == Decimal("200000")
        assert bands[1].tax_amount == Decimal("30000")

    def test_exactly_on_band_limit(self):
        bands, total = NIGERIA_2026_SCHEDULE.compute_band_taxes(Decimal("5000000"))
        assert total == Decimal("910000")
        assert bands[2].taxable_amount == Decimal("2800000")
        assert bands[3].taxable_amount == 0

    def test_all_bands(self):
        bands, total = NIGERIA_2026_SCHEDULE.compute_band_taxes(Decimal("20000000"))
        # 210k + 700k + 2.45M + 8M @ 45% (3.6M)
        assert total == Decimal("6960000")
        assert bands[4].taxable_amount == Decimal("8000000")

    def test_zero_income(self):
        bands, total = NIGERIA_2026_SCHEDULE.compute_band_taxes(Decimal("0"))
        assert total == 0
        assert len(bands) == 5

    def test_band_bounds_reported(self):
        bands, _ = NIGERIA_2026_SCHEDULE.compute_band_taxes(Decimal("1"))
        assert [(b.band, b.lower, b.limit) for b in bands] == [
            (1, Decimal("0"), Decimal("800000")),
            (2, Decimal("800000"), Decimal("2200000")),
            (3, Decimal("2200000"), Decimal("5000000")),
            (4, Decimal("5000000"), Decimal("12000000")),
            (5, Decimal("12000000"), None),
        ]

    def test_schedule_is_immutable(self):
        with pytest.raises(AttributeError):
            NIGERIA_2026_SCHEDULE.bands = ()  # type: ignore[misc]
        assert isinstance(NIGERIA_2026_SCHEDULE.bands, tuple)


class TestStatutoryRates:
    def test_default_rates(self):
        assert NIGERIA_STATUTORY_RATES.pension_rate == Decimal("0.08")
        assert NIGERIA_STATUTORY_RATES.nhf_rate == Decimal("0.025")
        assert NIGERIA_STATUTORY_RATES.rent_relief_rate == Decimal("0.20")
        assert NIGERIA_STATUTORY_RATES.rent_relief_cap == Decimal("500000")
        assert NIGERIA_STATUTORY_RATES.months_per_year == 12


class TestSchedulePayload:
    """Loading schedules from rule payloads."""

    def test_round_trip_of_default_schedule(self):
        payload = NIGERIA_2026_SCHEDULE.to_payload()
        assert payload["bands"][-1]["limit"] is None
        assert TaxSchedule.from_payload(payload) == NIGERIA_2026_SCHEDULE

    def test_numeric_payload_values(self):
        schedule = TaxSchedule.from_payload(
            {
                "name": "two-band",
                "bands": [
                    {"limit": 1000, "rate": 0},
                    {"limit": None, "rate": 0.1},
                ],
            }
        )
        assert schedule.name == "two-band"
        assert schedule.bands[1].rate == Decimal("0.1")
        _, total = schedule.compute_band_taxes(Decimal("3000"))
        assert total == Decimal("200")

    def test_empty_bands_rejected(self):
        with pytest.raises(InvalidTaxScheduleError):
            TaxSchedule.from_payload({"name": "empty", "bands": []})

    def test_missing_rate_rejected(self):
        with pytest.raises(InvalidTaxScheduleError):
            TaxSchedule.from_payload({"bands": [{"limit": None}]})

    def test_bounded_last_band_rejected(self):
        with pytest.raises(InvalidTaxScheduleError) as exc_info:
            TaxSchedule.from_payload({"bands": [{"limit": 1000, "rate": 0.1}]})
        assert "last band" in exc_info.value.reason

    def test_unbounded_middle_band_rejected(self):
        with pytest.raises(InvalidTaxScheduleError):
            TaxSchedule(
                name="bad",
                bands=(
                    TaxBand(limit=None, rate=Decimal("0.1")),
                    TaxBand(limit=None, rate=Decimal("0.2")),
                ),
            )

    def test_non_increasing_limits_rejected(self):
        with pytest.raises(InvalidTaxScheduleError):
            TaxSchedule.from_payload(
                {
                    "bands": [
                        {"limit": 2000, "rate": 0},
                        {"limit": 1000, "rate": 0.1},
                        {"limit": None, "rate": 0.2},
                    ]
                }
            )

    def test_error_is_value_error(self):
        assert issubclass(InvalidTaxScheduleError, ValueError)
