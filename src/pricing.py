"""Pricing helpers for food truck orders."""
from __future__ import annotations

from dataclasses import dataclass

from catalog import MenuItem
from tax import TaxService


@dataclass
class OrderTotals:
    subtotal: float
    tax: float
    total: float


def format_currency(amount: float) -> str:
    return f"$ {amount:.2f}"


class PricingService:
    """Calculates line costs and order totals using the sales tax rules."""

    def __init__(self, tax: TaxService) -> None:
        self._tax = tax

    def line_cost(self, item: MenuItem, quantity: int) -> float:
        if quantity < 0:
            raise ValueError("Quantity cannot be negative")
        return quantity * item.price

    def totals(self, subtotal: float) -> OrderTotals:
        tax_breakdown = self._tax.calculate(subtotal)
        return OrderTotals(
            subtotal=subtotal,
            tax=tax_breakdown.amount,
            total=subtotal + tax_breakdown.amount,
        )
