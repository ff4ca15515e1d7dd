"""Session history of restocks, sales and checkouts, summarised on quit."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

RESTOCK = "restock"
SALE = "sale"
LOW_STOCK = "low_stock"
CHECKOUT = "checkout"


@dataclass
class AuditEntry:
    event: str
    subject: Optional[str]
    quantity: int = 0
    amount: float = 0.0
    at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class SessionSummary:
    orders: int
    revenue: float
    restocks: int
    low_stock_warnings: int
    # Menu item key -> units sold, in order of first sale.
    items_sold: Dict[str, int]


class AuditLogger:
    def __init__(self) -> None:
        self._entries: List[AuditEntry] = []

    def record(self, event: str, subject: Optional[str] = None, quantity: int = 0, amount: float = 0.0) -> None:
        self._entries.append(AuditEntry(event=event, subject=subject, quantity=quantity, amount=amount))

    def entries(self, event: Optional[str] = None) -> List[AuditEntry]:
        if event is None:
            return list(self._entries)
        return [entry for entry in self._entries if entry.event == event]

    def summary(self) -> SessionSummary:
        items_sold: Dict[str, int] = {}
        for entry in self.entries(SALE):
            if entry.quantity:
                items_sold[entry.subject] = items_sold.get(entry.subject, 0) + entry.quantity
        checkouts = self.entries(CHECKOUT)
        return SessionSummary(
            orders=len(checkouts),
            revenue=sum(entry.amount for entry in checkouts),
            restocks=len(self.entries(RESTOCK)),
            low_stock_warnings=len(self.entries(LOW_STOCK)),
            items_sold=items_sold,
        )
