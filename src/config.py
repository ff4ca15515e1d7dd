"""YAML settings for a truck session: name, tax rate and starting stock."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from catalog import CatalogService
from inventory import DEFAULT_LOW_INVENTORY_RATIO
from tax import DEFAULT_SALES_TAX_RATE

DEFAULT_TRUCK_NAME = "Rebel Food Truck"


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ValueError(f"{key} must be a mapping")
    return value


def _rate(data: Dict[str, Any], key: str, default: float) -> float:
    raw = data.get(key, default)
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a number")
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be a number") from None


@dataclass
class TruckConfig:
    name: str = DEFAULT_TRUCK_NAME
    sales_tax_rate: float = DEFAULT_SALES_TAX_RATE
    low_inventory_ratio: float = DEFAULT_LOW_INVENTORY_RATIO
    starting_inventory: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Any) -> "TruckConfig":
        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping")
        truck_data = _section(data, "truck")
        starting = _section(data, "starting_inventory")

        catalog = CatalogService()
        levels: Dict[str, int] = {}
        for key, level in starting.items():
            try:
                ingredient = catalog.ingredient(key)
            except KeyError:
                raise ValueError(f"Unknown ingredient in starting_inventory: {key}") from None
            if isinstance(level, bool) or not isinstance(level, int) or not 0 <= level <= ingredient.capacity:
                raise ValueError(f"starting_inventory.{key} must be an integer between 0 and {ingredient.capacity}")
            levels[key] = level

        tax_rate = _rate(data, "sales_tax_rate", DEFAULT_SALES_TAX_RATE)
        if tax_rate < 0:
            raise ValueError("sales_tax_rate cannot be negative")
        low_ratio = _rate(data, "low_inventory_ratio", DEFAULT_LOW_INVENTORY_RATIO)
        if not 0 <= low_ratio <= 1:
            raise ValueError("low_inventory_ratio must be between 0 and 1")

        name = truck_data.get("name", DEFAULT_TRUCK_NAME)
        if not isinstance(name, str):
            raise ValueError("truck.name must be a string")

        return cls(
            name=name,
            sales_tax_rate=tax_rate,
            low_inventory_ratio=low_ratio,
            starting_inventory=levels,
        )


def load_config(path: Path) -> TruckConfig:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    return TruckConfig.from_mapping(data or {})
