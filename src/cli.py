"""Interactive menu for the food truck: inventory, sales and session summary."""
from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from audit import AuditLogger
from catalog import INGREDIENT_SINGULAR, CatalogService
from config import TruckConfig, load_config
from display import MAIN_OPTIONS, inventory_table, main_menu_table, sell_table, session_summary_table
from inventory import InventoryRepository
from notifications import ConsoleNotifier
from order_service import OrderService
from pricing import PricingService, format_currency
from prompts import inventory_context, quantity_context, request_integer
from tax import TaxService

app = typer.Typer(help="Food truck inventory and sales simulator")
console = Console()

INVENTORY_OPTION, SELL_OPTION, QUIT_OPTION = range(len(MAIN_OPTIONS))


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


NO_STOCK_MESSAGE = "Invalid input, please enter an item with quantity available or update inventory."


class FoodTruckApp:
    """Menu loop tying the inventory and order service to the console."""

    def __init__(self, config: TruckConfig, console: Console) -> None:
        self.config = config
        self.console = console
        self.catalog = CatalogService()
        self.audit = AuditLogger()
        self.inventory = InventoryRepository(
            catalog=self.catalog,
            low_inventory_ratio=config.low_inventory_ratio,
            starting_levels=config.starting_inventory,
            audit=self.audit,
        )
        self.inventory.subscribe(ConsoleNotifier(console))
        self.orders = OrderService(
            inventory=self.inventory,
            pricing=PricingService(TaxService(config.sales_tax_rate)),
            catalog=self.catalog,
            audit=self.audit,
        )

    def run(self) -> None:
        self.console.print(f"{self.config.name} Inventory Sales Program")
        while True:
            self.console.print()
            self.console.print(main_menu_table())
            selection = request_integer(self.console, "Enter option: ", 0, QUIT_OPTION)
            if selection == INVENTORY_OPTION:
                self.inventory_menu()
            elif selection == SELL_OPTION:
                self.sell_menu()
            else:
                self.print_summary()
                return

    def print_summary(self) -> None:
        self.console.print()
        self.console.print(session_summary_table(self.audit.summary(), self.catalog))

    def inventory_menu(self) -> None:
        ingredients = self.catalog.ingredients()
        return_option = len(ingredients)
        while True:
            self.console.print()
            self.console.print(inventory_table(self.inventory))
            selection = request_integer(self.console, "Enter option to update inventory: ", 0, return_option)
            if selection == return_option:
                return
            ingredient = ingredients[selection]
            singular = INGREDIENT_SINGULAR[ingredient.key]
            self.console.print()
            new_level = request_integer(
                self.console,
                f"Enter new {singular} inventory: ",
                0,
                ingredient.capacity,
                inventory_context(singular),
            )
            self.inventory.set_inventory(ingredient.key, new_level)

    def sell_menu(self) -> None:
        order = self.orders.open_order()
        while True:
            availability = self.orders.max_quantities()
            return_option = len(availability)
            self.console.print()
            self.console.print(sell_table(availability))
            selection = request_integer(self.console, "Enter option for customer order: ", 0, return_option)
            if selection == return_option:
                totals = self.orders.checkout(order)
                self.console.print()
                self.console.print(f"Order Total: {format_currency(totals.total)}")
                return

            result = self.orders.resolve_selection(selection)
            if not result.accepted:
                self.console.print()
                self.console.print(NO_STOCK_MESSAGE, soft_wrap=True)
                continue

            self.console.print()
            quantity = request_integer(
                self.console,
                f"Enter quantity (max {result.max_quantity}): ",
                0,
                result.max_quantity,
                quantity_context(result.item.plural),
            )
            self.orders.sell(order, result.item, quantity)


def configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def run(
    config: Optional[Path] = typer.Option(None, "--config", help="Path to a YAML truck config"),
    log_level: LogLevel = typer.Option(
        LogLevel.ERROR, "--log-level", case_sensitive=False, help="Logging level for engine diagnostics"
    ),
):
    """Start the interactive inventory and sales menu."""
    configure_logging(log_level)
    try:
        truck_config = load_config(config) if config else TruckConfig()
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]Config error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    try:
        FoodTruckApp(truck_config, console).run()
    except (EOFError, KeyboardInterrupt):
        console.print()


def main():
    app()


if __name__ == "__main__":
    main()
