"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from estate_market.catalog import PropertyCatalog
from estate_market.config import CatalogConfig, OrderConfig
from estate_market.models import (
    ContactDetails,
    Coordinates,
    Location,
    PropertyCategory,
    PropertyDetails,
)
from estate_market.orders import OrderLedger
from estate_market.storage import InMemoryPort


class ManualClock:
    """Wall clock, monotonic timer and sleep that only move when told to."""

    def __init__(self, start: datetime = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)) -> None:
        self.now = start
        self.elapsed = 0.0

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)
        self.elapsed += seconds

    def timer(self) -> float:
        return self.elapsed

    def sleep(self, seconds: float) -> None:
        self.advance(seconds)


def make_listing(**overrides: Any) -> dict[str, Any]:
    """Field values for a new listing."""
    values: dict[str, Any] = {
        "title": "Lakeview Condo",
        "price": 25_000,
        "listing_type": "rent",
        "category": PropertyCategory.CONDO,
        "location": Location(
            state="Karnataka",
            city="Bengaluru",
            address="12 Lake Road, Bengaluru",
            coordinates=Coordinates(lat=12.97, lng=77.59),
        ),
        "details": PropertyDetails(bedrooms=2, bathrooms=1, area=900),
        "images": ["https://example.com/condo.jpg"],
        "description": "Condo by the lake.",
        "features": ["Lift"],
        "seller_id": "seller-9",
        "seller_contact": ContactDetails(name="Asha Rao", email="asha@example.com", phone="+91-90000-22222"),
    }
    values.update(overrides)
    return values


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def port() -> InMemoryPort:
    return InMemoryPort()


@pytest.fixture
def catalog_config(seed: int) -> CatalogConfig:
    return CatalogConfig(seed=seed)


@pytest.fixture
def catalog(port: InMemoryPort, catalog_config: CatalogConfig, clock: ManualClock) -> PropertyCatalog:
    """Seeded property catalog."""
    catalog = PropertyCatalog(port, catalog_config, clock=clock)
    catalog.load()
    return catalog


@pytest.fixture
def rental(catalog: PropertyCatalog):
    """A rent-type listing added to the catalog."""
    return catalog.add_property(make_listing())


@pytest.fixture
def ledger(port: InMemoryPort, catalog: PropertyCatalog, clock: ManualClock) -> OrderLedger:
    ledger = OrderLedger(
        port,
        catalog,
        OrderConfig(),
        clock=clock,
        timer=clock.timer,
        sleep=clock.sleep,
    )
    ledger.load()
    return ledger


@pytest.fixture
def customer() -> dict[str, str]:
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "phone": "+91-98000-00000",
        "address": "1 Residency Road, Bengaluru",
    }
