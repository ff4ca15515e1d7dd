"""Aligned table rendering for the food truck menus."""
from __future__ import annotations

from typing import List, Sequence

from rich import box
from rich.table import Table

from audit import SessionSummary
from catalog import CatalogService
from inventory import InventoryRepository
from order_service import ItemAvailability
from pricing import format_currency

MAIN_OPTIONS = ["Inventory", "Sell", "Quit"]


def build_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> Table:
    """Left-align the option number and right-align every other column."""
    table = Table(box=box.SIMPLE_HEAD, show_edge=False, pad_edge=False)
    for position, header in enumerate(headers):
        table.add_column(header, justify="left" if position == 0 else "right")
    for row in rows:
        table.add_row(*row)
    return table


def main_menu_table() -> Table:
    rows = [[str(index), option] for index, option in enumerate(MAIN_OPTIONS)]
    return build_table(["#", "Option"], rows)


def inventory_table(inventory: InventoryRepository) -> Table:
    rows: List[List[str]] = []
    for index, (ingredient, current) in enumerate(inventory.snapshot()):
        rows.append([str(index), ingredient.name, ingredient.format_amount(current)])
    rows.append([str(len(rows)), "Return", ""])
    return build_table(["#", "Item/Option", "Current Inventory"], rows)


def sell_table(availability: Sequence[ItemAvailability]) -> Table:
    rows: List[List[str]] = []
    for index, entry in enumerate(availability):
        rows.append(
            [str(index), entry.item.name, str(entry.max_quantity), format_currency(entry.item.price)]
        )
    rows.append([str(len(rows)), "Return", "", ""])
    return build_table(["#", "Item/Option", "Quantity Available", "Cost Per Item"], rows)


def session_summary_table(summary: SessionSummary, catalog: CatalogService) -> Table:
    rows: List[List[str]] = [
        ["Orders", str(summary.orders)],
        ["Revenue", format_currency(summary.revenue)],
        ["Restocks", str(summary.restocks)],
        ["Low Stock Warnings", str(summary.low_stock_warnings)],
    ]
    for key, quantity in summary.items_sold.items():
        rows.append([f"{catalog.get(key).name} Sold", str(quantity)])
    return build_table(["Session", "Total"], rows)
