"""Order processing logic for the food truck point of sale."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from audit import CHECKOUT, SALE, AuditLogger
from catalog import CHILI, CHILI_SELF_SERVING, CatalogService, MenuItem
from inventory import InventoryRepository
from pricing import OrderTotals, PricingService, format_currency

logger = logging.getLogger(__name__)

AWAITING_LINE_ITEM = "awaiting_line_item"
CLOSED = "closed"

INVALID_SELECTION = "invalid_selection"


@dataclass
class OrderLine:
    item: MenuItem
    quantity: int
    cost: float


@dataclass
class Order:
    lines: List[OrderLine] = field(default_factory=list)
    subtotal: float = 0.0
    status: str = AWAITING_LINE_ITEM
    totals: Optional[OrderTotals] = None

    @property
    def is_closed(self) -> bool:
        return self.status == CLOSED


@dataclass
class ItemAvailability:
    item: MenuItem
    max_quantity: int

    @property
    def offerable(self) -> bool:
        return self.max_quantity > 0


@dataclass
class SelectionResult:
    status: str
    item: Optional[MenuItem] = None
    max_quantity: int = 0
    reason: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.status == "selected"


@dataclass
class LineResult:
    status: str
    line: Optional[OrderLine] = None
    reason: Optional[str] = None


class OrderService:
    """Derives sellable quantities from stock and applies order lines against it."""

    def __init__(
        self,
        inventory: InventoryRepository,
        pricing: PricingService,
        catalog: Optional[CatalogService] = None,
        audit: Optional[AuditLogger] = None,
    ) -> None:
        self._inventory = inventory
        self._pricing = pricing
        self._catalog = catalog or CatalogService()
        self._audit = audit

    def open_order(self) -> Order:
        return Order()

    def max_sellable(self, item: MenuItem) -> int:
        """Return how many of ``item`` the current stock can cover.

        Chili is measured in whole servings already derived by the inventory
        rather than by dividing the raw ounces on hand.
        """
        limits = []
        for ingredient, units in item.recipe.items():
            if ingredient == CHILI:
                if units == CHILI_SELF_SERVING:
                    limits.append(self._inventory.chili_self_servings)
                else:
                    limits.append(self._inventory.chili_addon_servings)
            else:
                limits.append(self._inventory.availability(ingredient) // units)
        return min(limits) if limits else 0

    def max_quantities(self) -> List[ItemAvailability]:
        return [ItemAvailability(item=item, max_quantity=self.max_sellable(item)) for item in self._catalog.items()]

    def is_offerable(self, item: MenuItem) -> bool:
        return self.max_sellable(item) > 0

    def resolve_selection(self, index: int) -> SelectionResult:
        item = self._catalog.item_at(index)
        if item is None:
            return SelectionResult(status=INVALID_SELECTION, reason="unknown_item")
        max_quantity = self.max_sellable(item)
        if max_quantity <= 0:
            logger.info("Rejected selection of %s: none available", item.key)
            return SelectionResult(status=INVALID_SELECTION, item=item, reason="not_available")
        return SelectionResult(status="selected", item=item, max_quantity=max_quantity)

    def sell(self, order: Order, item: MenuItem, quantity: int) -> LineResult:
        if order.is_closed:
            raise ValueError("Cannot add items to a closed order")

        max_quantity = self.max_sellable(item)
        if max_quantity <= 0:
            logger.info("Rejected sale of %s: none available", item.key)
            return LineResult(status=INVALID_SELECTION, reason="not_available")
        if not 0 <= quantity <= max_quantity:
            logger.info("Rejected sale of %d %s: only %d available", quantity, item.plural, max_quantity)
            return LineResult(status=INVALID_SELECTION, reason="quantity_out_of_range")

        for ingredient, units in item.recipe.items():
            self._inventory.debit(ingredient, quantity * units)

        line = OrderLine(item=item, quantity=quantity, cost=self._pricing.line_cost(item, quantity))
        order.lines.append(line)
        order.subtotal += line.cost
        logger.info("Sold %d %s for %s", quantity, item.plural, format_currency(line.cost))
        if self._audit:
            self._audit.record(SALE, item.key, quantity=quantity, amount=line.cost)
        return LineResult(status="sold", line=line)

    def checkout(self, order: Order) -> OrderTotals:
        if order.is_closed:
            raise ValueError("Order has already been checked out")
        totals = self._pricing.totals(order.subtotal)
        order.totals = totals
        order.status = CLOSED
        logger.info(
            "Checked out %d line(s): subtotal=%.2f tax=%.2f total=%.2f",
            len(order.lines),
            totals.subtotal,
            totals.tax,
            totals.total,
        )
        if self._audit:
            self._audit.record(CHECKOUT, quantity=len(order.lines), amount=totals.total)
        return totals
