"""Ingredient inventory for the food truck."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from audit import LOW_STOCK, RESTOCK, AuditLogger
from catalog import (
    CHILI,
    CHILI_ADDON_SERVING,
    CHILI_SELF_SERVING,
    INGREDIENT_SINGULAR,
    CatalogService,
    Ingredient,
)

logger = logging.getLogger(__name__)

DEFAULT_LOW_INVENTORY_RATIO = 0.2


@dataclass
class StockLevel:
    ingredient: Ingredient
    current: int
    low_threshold: int


@dataclass(frozen=True)
class LowStockWarning:
    ingredient: str
    remaining: int
    threshold: int

    @property
    def message(self) -> str:
        name = INGREDIENT_SINGULAR[self.ingredient].capitalize()
        return f"Warning: {name} inventory low. Please restock soon."


WarningListener = Callable[[LowStockWarning], None]


class InventoryRepository:
    """In-memory ingredient store that the order service debits."""

    def __init__(
        self,
        catalog: Optional[CatalogService] = None,
        low_inventory_ratio: float = DEFAULT_LOW_INVENTORY_RATIO,
        starting_levels: Optional[Dict[str, int]] = None,
        audit: Optional[AuditLogger] = None,
    ) -> None:
        self._catalog = catalog or CatalogService()
        self._audit = audit
        self._listeners: List[WarningListener] = []
        self._levels: Dict[str, StockLevel] = {}
        for ingredient in self._catalog.ingredients():
            self._levels[ingredient.key] = StockLevel(
                ingredient=ingredient,
                current=ingredient.capacity,
                low_threshold=math.floor(ingredient.capacity * low_inventory_ratio),
            )
        self._chili_self_servings = 0
        self._chili_addon_servings = 0

        for key, level in (starting_levels or {}).items():
            self._validate_level(key, level)
            self._levels[key].current = level
        self._recompute_chili_servings()

    def subscribe(self, listener: WarningListener) -> None:
        self._listeners.append(listener)

    def set_inventory(self, ingredient: str, new_level: int) -> None:
        """Overwrite the stock on hand with a manual recount."""
        self._validate_level(ingredient, new_level)
        stock = self._levels[ingredient]
        previous = stock.current
        stock.current = new_level
        if ingredient == CHILI:
            self._recompute_chili_servings()
        logger.info("Inventory for %s set from %d to %d", ingredient, previous, new_level)
        if self._audit:
            self._audit.record(RESTOCK, ingredient, quantity=new_level)

    def debit(self, ingredient: str, amount: int) -> None:
        stock = self._stock(ingredient)
        if amount < 0:
            raise ValueError(f"Cannot debit a negative amount of {ingredient}")
        if amount > stock.current:
            raise ValueError(f"Not enough stock for {ingredient}")
        stock.current -= amount
        if ingredient == CHILI:
            self._recompute_chili_servings()
        if amount > 0 and stock.current <= stock.low_threshold:
            self._warn(stock)

    def availability(self, ingredient: str) -> int:
        return self._stock(ingredient).current

    def capacity(self, ingredient: str) -> int:
        return self._stock(ingredient).ingredient.capacity

    def low_threshold(self, ingredient: str) -> int:
        return self._stock(ingredient).low_threshold

    def is_low(self, ingredient: str) -> bool:
        stock = self._stock(ingredient)
        return stock.current <= stock.low_threshold

    @property
    def chili_self_servings(self) -> int:
        return self._chili_self_servings

    @property
    def chili_addon_servings(self) -> int:
        return self._chili_addon_servings

    def snapshot(self) -> List[Tuple[Ingredient, int]]:
        return [(stock.ingredient, stock.current) for stock in self._levels.values()]

    def _stock(self, ingredient: str) -> StockLevel:
        if ingredient not in self._levels:
            raise KeyError(f"Unknown ingredient: {ingredient}")
        return self._levels[ingredient]

    def _validate_level(self, ingredient: str, level: int) -> None:
        capacity = self._stock(ingredient).ingredient.capacity
        if not 0 <= level <= capacity:
            raise ValueError(f"Inventory for {ingredient} must be between 0 and {capacity}, got {level}")

    def _recompute_chili_servings(self) -> None:
        chili = self._levels[CHILI].current
        self._chili_self_servings = chili // CHILI_SELF_SERVING
        self._chili_addon_servings = chili // CHILI_ADDON_SERVING

    def _warn(self, stock: StockLevel) -> None:
        warning = LowStockWarning(
            ingredient=stock.ingredient.key,
            remaining=stock.current,
            threshold=stock.low_threshold,
        )
        logger.warning(
            "Low inventory for %s: %d left (threshold %d)",
            warning.ingredient,
            warning.remaining,
            warning.threshold,
        )
        if self._audit:
            self._audit.record(LOW_STOCK, warning.ingredient, quantity=warning.remaining)
        for listener in self._listeners:
            listener(warning)
