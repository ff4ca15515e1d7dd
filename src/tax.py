"""Sales tax calculation for food truck orders."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SALES_TAX_RATE = 0.05


@dataclass
class TaxBreakdown:
    rate: float
    amount: float


class TaxService:
    def __init__(self, rate: float = DEFAULT_SALES_TAX_RATE) -> None:
        if rate < 0:
            raise ValueError("Sales tax rate cannot be negative")
        self.rate = rate

    def calculate(self, taxable_amount: float) -> TaxBreakdown:
        return TaxBreakdown(rate=self.rate, amount=taxable_amount * self.rate)
