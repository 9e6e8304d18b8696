"""Property catalog: persisted listings plus search."""

from __future__ import annotations

import logging
from typing import Any

from estate_market.catalog.filters import PropertyFilters, matches_text
from estate_market.config import CatalogConfig
from estate_market.exceptions import ValidationError
from estate_market.generators.catalog import seed_properties
from estate_market.models import ListingType, Property, PropertyCategory, PropertyStatus
from estate_market.storage.ports import PersistencePort
from estate_market.store import DataclassCodec, PersistentStore
from estate_market.store.ids import Clock

logger = logging.getLogger(__name__)

_ENUM_FIELDS = {
    "listing_type": ListingType,
    "category": PropertyCategory,
    "status": PropertyStatus,
}


def _normalize(values: dict[str, Any]) -> dict[str, Any]:
    """Coerce enum fields given as strings and check the price."""
    values = dict(values)
    for name, enum_cls in _ENUM_FIELDS.items():
        if values.get(name) is not None:
            try:
                values[name] = enum_cls(values[name])
            except ValueError as e:
                raise ValidationError(f"Invalid {name}: {e}") from e
    if "price" in values:
        price = values["price"]
        if isinstance(price, bool) or not isinstance(price, (int, float)) or price <= 0:
            raise ValidationError(f"price must be a positive number, got {price!r}")
    return values


class PropertyCatalog:
    """Listings available on the storefront.

    Parameters
    ----------
    port : PersistencePort
        Storage for the ``properties`` collection.
    config : CatalogConfig | None
        Seed sizes and listing limits.
    key : str
        Storage key.
    clock : Clock | None
        Timestamp source for created/updated listings.
    pretty : bool
        Indent the persisted JSON.
    """

    def __init__(
        self,
        port: PersistencePort,
        config: CatalogConfig | None = None,
        key: str = "properties",
        clock: Clock | None = None,
        pretty: bool = False,
    ) -> None:
        self.config = config or CatalogConfig()
        self.store: PersistentStore[Property] = PersistentStore(
            port, key, DataclassCodec(Property), clock=clock, pretty=pretty
        )

    def load(self) -> list[Property]:
        """Load persisted listings, seeding the catalog on first use."""
        return self.store.load_or_seed(lambda: seed_properties(self.config))

    @property
    def properties(self) -> list[Property]:
        return self.store.all()

    def get(self, property_id: str) -> Property | None:
        return self.store.get(property_id)

    def add_property(self, values: dict[str, Any]) -> Property:
        """Create a listing. The store assigns its id and timestamps."""
        values = _normalize(values)
        values.setdefault("status", PropertyStatus.AVAILABLE)
        prop = self.store.create(values)
        logger.info("Listed property %s (%s) for seller %s", prop.id, prop.title, prop.seller_id)
        return prop

    def update_property(self, property_id: str, changes: dict[str, Any]) -> Property | None:
        return self.store.update(property_id, _normalize(changes))

    def delete_property(self, property_id: str) -> bool:
        deleted = self.store.delete(property_id)
        if deleted:
            logger.info("Deleted property %s", property_id)
        return deleted

    def user_properties(self, seller_id: str) -> list[Property]:
        """Listings whose seller is ``seller_id``, in catalog order."""
        return [p for p in self.store if p.seller_id == seller_id]

    def search(
        self,
        filters: PropertyFilters | None = None,
        text: str | None = None,
        most_recent: bool = False,
    ) -> list[Property]:
        """Filter the catalog.

        Parameters
        ----------
        filters : PropertyFilters | None
            Structured criteria, all of which must match.
        text : str | None
            Free-text term applied after ``filters``; matches title, city
            or state.
        most_recent : bool
            Order by descending creation time instead of catalog order.

        Returns
        -------
        list[Property]
            Matching listings.
        """
        filters = filters or PropertyFilters()
        results = [p for p in self.store if filters.matches(p)]
        if text:
            results = [p for p in results if matches_text(p, text)]
        if most_recent:
            results = sorted(results, key=lambda p: p.created_at, reverse=True)
        return results

    def list_recent(self, limit: int | None = None) -> list[Property]:
        """Most-recent-first listing, capped at ``limit`` (default: config ceiling)."""
        ceiling = self.config.list_limit if limit is None else min(limit, self.config.list_limit)
        return self.search(most_recent=True)[:ceiling]
