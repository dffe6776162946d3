"""Progressive PAYE schedule and statutory rate tables."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from ngpayroll.calculators.types import (
    ZERO,
    BandTax,
    StatutoryRates,
    TaxBand,
    to_decimal,
)


class InvalidTaxScheduleError(ValueError):
    """Raised when a schedule payload does not describe a usable band table."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid tax schedule: {reason}")


@dataclass(frozen=True)
class TaxSchedule:
    """Ordered, immutable progressive tax schedule.

    Payload format (as stored in rule JSON):
    {
        "name": "NG-PAYE-2026",
        "bands": [
            {"limit": 800000, "rate": 0.00},
            {"limit": 2200000, "rate": 0.15},
            ...
            {"limit": null, "rate": 0.45}
        ]
    }
    """

    name: str
    bands: tuple[TaxBand, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "bands", tuple(self.bands))
        _validate_bands(self.bands)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> TaxSchedule:
        """Parse a schedule from its JSON payload."""
        raw_bands = payload.get("bands") or []
        bands = []
        for b in raw_bands:
            if "rate" not in b:
                raise InvalidTaxScheduleError("every band needs a rate")
            limit = b.get("limit")
            bands.append(
                TaxBand(
                    limit=to_decimal(limit) if limit is not None else None,
                    rate=to_decimal(b["rate"]),
                )
            )
        return cls(name=str(payload.get("name", "custom")), bands=tuple(bands))

    def to_payload(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "bands": [
                {
                    "limit": str(b.limit) if b.limit is not None else None,
                    "rate": str(b.rate),
                }
                for b in self.bands
            ],
        }

    def compute_band_taxes(self, taxable_income: Decimal) -> tuple[tuple[BandTax, ...], Decimal]:
        """Apply the schedule to taxable income.

        Each band taxes only the slice of income inside its width. Iteration
        stops once the remaining income is exhausted; bands never reached are
        still reported, with zero amounts.

        Returns (per-band breakdown, total tax).
        """
        remaining = to_decimal(taxable_income)
        previous_limit = ZERO
        total_tax = ZERO
        band_taxes: list[BandTax] = []

        for index, band in enumerate(self.bands, start=1):
            taxable_in_band = ZERO
            tax_amount = ZERO

            if remaining > 0:
                if band.limit is None:
                    taxable_in_band = remaining
                else:
                    taxable_in_band = min(remaining, band.limit - previous_limit)
                tax_amount = taxable_in_band * band.rate
                total_tax += tax_amount
                remaining -= taxable_in_band

            band_taxes.append(
                BandTax(
                    band=index,
                    lower=previous_limit,
                    limit=band.limit,
                    rate=band.rate,
                    taxable_amount=taxable_in_band,
                    tax_amount=tax_amount,
                )
            )
            if band.limit is not None:
                previous_limit = band.limit

        return tuple(band_taxes), total_tax


def _validate_bands(bands: tuple[TaxBand, ...]) -> None:
    if not bands:
        raise InvalidTaxScheduleError("at least one band is required")

    previous = ZERO
    for position, band in enumerate(bands, start=1):
        is_last = position == len(bands)
        if band.limit is None:
            if not is_last:
                raise InvalidTaxScheduleError(f"band {position} is unbounded but is not the last band")
            continue
        if is_last:
            raise InvalidTaxScheduleError("the last band must be unbounded")
        if band.limit <= previous:
            raise InvalidTaxScheduleError(
                f"band {position} limit {band.limit} does not exceed previous limit {previous}"
            )
        previous = band.limit


# 2026 PAYE bands (annual, NGN)
NIGERIA_2026_SCHEDULE = TaxSchedule(
    name="NG-PAYE-2026",
    bands=(
        TaxBand(limit=Decimal("800000"), rate=Decimal("0.00")),
        TaxBand(limit=Decimal("2200000"), rate=Decimal("0.15")),
        TaxBand(limit=Decimal("5000000"), rate=Decimal("0.25")),
        TaxBand(limit=Decimal("12000000"), rate=Decimal("0.35")),
        TaxBand(limit=None, rate=Decimal("0.45")),
    ),
)

NIGERIA_STATUTORY_RATES = StatutoryRates(
    pension_rate=Decimal("0.08"),  # of gross
    nhf_rate=Decimal("0.025"),  # of basic
    rent_relief_rate=Decimal("0.20"),  # of annual rent
    rent_relief_cap=Decimal("500000"),
    months_per_year=12,
)
