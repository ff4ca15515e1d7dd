"""Ingredient and menu catalog for the food truck."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

HAMBURGER_PATTY = "hamburger_patty"
HAMBURGER_BUN = "hamburger_bun"
HOTDOG = "hotdog"
HOTDOG_BUN = "hotdog_bun"
CHILI = "chili"

HAMBURGER_ITEM = "hamburger"
CHILIBURGER_ITEM = "chiliburger"
HOTDOG_ITEM = "hotdog"
CHILIDOG_ITEM = "chilidog"
CHILI_SELF_ITEM = "chili_self"

# Ounces of chili per serving type.
CHILI_SELF_SERVING = 12
CHILI_ADDON_SERVING = 4

CHILI_ADDON_PRICE = 2.00


@dataclass(frozen=True)
class Ingredient:
    key: str
    name: str
    capacity: int
    unit: str = ""

    def format_amount(self, amount: int) -> str:
        return f"{amount} {self.unit}" if self.unit else str(amount)


@dataclass(frozen=True)
class MenuItem:
    key: str
    name: str
    plural: str
    price: float
    # Units of each ingredient consumed per item sold.
    recipe: Dict[str, int] = field(default_factory=dict)

    @property
    def chili_serving(self) -> Optional[int]:
        return self.recipe.get(CHILI)


INGREDIENTS: List[Ingredient] = [
    Ingredient(key=HAMBURGER_PATTY, name="Hamburger Patties", capacity=200),
    Ingredient(key=HAMBURGER_BUN, name="Hamburger Buns", capacity=75),
    Ingredient(key=HOTDOG, name="Hotdogs", capacity=200),
    Ingredient(key=HOTDOG_BUN, name="Hotdog Buns", capacity=75),
    Ingredient(key=CHILI, name="Chili", capacity=500, unit="oz"),
]

HAMBURGER_PRICE = 5.00
HOTDOG_PRICE = 5.00
CHILI_SELF_PRICE = 4.00

MENU: List[MenuItem] = [
    MenuItem(
        key=HAMBURGER_ITEM,
        name="Hamburger",
        plural="hamburgers",
        price=HAMBURGER_PRICE,
        recipe={HAMBURGER_PATTY: 1, HAMBURGER_BUN: 1},
    ),
    MenuItem(
        key=CHILIBURGER_ITEM,
        name="Chiliburger",
        plural="chiliburgers",
        price=HAMBURGER_PRICE + CHILI_ADDON_PRICE,
        recipe={HAMBURGER_PATTY: 1, HAMBURGER_BUN: 1, CHILI: CHILI_ADDON_SERVING},
    ),
    MenuItem(
        key=HOTDOG_ITEM,
        name="Hotdog",
        plural="hotdogs",
        price=HOTDOG_PRICE,
        recipe={HOTDOG: 1, HOTDOG_BUN: 1},
    ),
    MenuItem(
        key=CHILIDOG_ITEM,
        name="Chilidog",
        plural="chilidogs",
        price=HOTDOG_PRICE + CHILI_ADDON_PRICE,
        recipe={HOTDOG: 1, HOTDOG_BUN: 1, CHILI: CHILI_ADDON_SERVING},
    ),
    MenuItem(
        key=CHILI_SELF_ITEM,
        name=f"Chili ({CHILI_SELF_SERVING} oz)",
        plural="chili",
        price=CHILI_SELF_PRICE,
        recipe={CHILI: CHILI_SELF_SERVING},
    ),
]

# Singular names used in warnings and capacity messages.
INGREDIENT_SINGULAR: Dict[str, str] = {
    HAMBURGER_PATTY: "hamburger patty",
    HAMBURGER_BUN: "hamburger bun",
    HOTDOG: "hotdog",
    HOTDOG_BUN: "hotdog bun",
    CHILI: "chili",
}


class CatalogService:
    """Fixed ingredient pools and menu items, in display order."""

    def __init__(self) -> None:
        self._ingredients: Dict[str, Ingredient] = {i.key: i for i in INGREDIENTS}
        self._items: List[MenuItem] = list(MENU)

    def ingredient(self, key: str) -> Ingredient:
        if key not in self._ingredients:
            raise KeyError(f"Unknown ingredient: {key}")
        return self._ingredients[key]

    def ingredients(self) -> List[Ingredient]:
        return list(self._ingredients.values())

    def items(self) -> List[MenuItem]:
        return list(self._items)

    def item_at(self, index: int) -> Optional[MenuItem]:
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def get(self, key: str) -> MenuItem:
        for item in self._items:
            if item.key == key:
                return item
        raise KeyError(f"Unknown menu item: {key}")
