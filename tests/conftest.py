from __future__ import annotations

import pytest

from audit import AuditLogger
from catalog import CatalogService
from inventory import InventoryRepository
from order_service import OrderService
from pricing import PricingService
from tax import TaxService


@pytest.fixture()
def catalog() -> CatalogService:
    return CatalogService()


@pytest.fixture()
def audit() -> AuditLogger:
    return AuditLogger()


@pytest.fixture()
def warnings():
    return []


@pytest.fixture()
def inventory(catalog, audit, warnings) -> InventoryRepository:
    repo = InventoryRepository(catalog=catalog, audit=audit)
    repo.subscribe(warnings.append)
    return repo


@pytest.fixture()
def orders(inventory, catalog, audit) -> OrderService:
    return OrderService(
        inventory=inventory,
        pricing=PricingService(TaxService()),
        catalog=catalog,
        audit=audit,
    )
