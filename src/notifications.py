"""Console notifications for low-stock warnings."""
from __future__ import annotations

from rich.console import Console

from inventory import LowStockWarning

WARNING_STYLE = "bold yellow"


class ConsoleNotifier:
    """Prints each low-stock warning raised by the inventory."""

    def __init__(self, console: Console, style: str = WARNING_STYLE) -> None:
        self._console = console
        self._style = style

    def __call__(self, warning: LowStockWarning) -> None:
        self._console.print(warning.message, style=self._style, markup=False, soft_wrap=True)
