import pytest

from audit import CHECKOUT, RESTOCK, SALE, AuditLogger
from catalog import CHILIDOG_ITEM, HAMBURGER_BUN, HAMBURGER_ITEM, HOTDOG_BUN


def test_empty_session_summary():
    summary = AuditLogger().summary()
    assert summary.orders == 0
    assert summary.revenue == 0
    assert summary.items_sold == {}


def test_summary_totals_items_and_revenue():
    audit = AuditLogger()
    audit.record(RESTOCK, HAMBURGER_BUN, quantity=40)
    audit.record(SALE, HAMBURGER_ITEM, quantity=2, amount=10.0)
    audit.record(SALE, CHILIDOG_ITEM, quantity=0, amount=0.0)
    audit.record(CHECKOUT, quantity=2, amount=10.5)
    audit.record(SALE, HAMBURGER_ITEM, quantity=1, amount=5.0)
    audit.record(CHECKOUT, quantity=1, amount=5.25)

    summary = audit.summary()
    assert summary.orders == 2
    assert summary.revenue == pytest.approx(15.75)
    assert summary.restocks == 1
    assert summary.items_sold == {HAMBURGER_ITEM: 3}


def test_summary_from_a_session(orders, inventory, catalog, audit):
    inventory.set_inventory(HOTDOG_BUN, 16)
    order = orders.open_order()
    orders.sell(order, catalog.get(CHILIDOG_ITEM), 4)
    orders.checkout(order)

    summary = audit.summary()
    assert summary.orders == 1
    assert summary.revenue == pytest.approx(29.4)
    assert summary.low_stock_warnings == 1
    assert summary.items_sold == {CHILIDOG_ITEM: 4}
