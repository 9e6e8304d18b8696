"""Marketplace facade wiring every collection to one storage port."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable

from estate_market.accounts import SubscriptionGate, WishlistSet
from estate_market.catalog import ApartmentCatalog, PropertyCatalog
from estate_market.config import MarketConfig, StorageConfig
from estate_market.exceptions import SubscriptionRequiredError, ValidationError
from estate_market.models import (
    ContactDetails,
    ListingType,
    OrderStatus,
    Property,
    PropertyStatus,
)
from estate_market.orders import OrderLedger
from estate_market.storage.ports import InMemoryPort, JsonFilePort, PersistencePort
from estate_market.store.ids import Clock

logger = logging.getLogger(__name__)

DEFAULT_LISTING_IMAGE = "https://images.unsplash.com/photo-1600585154161-8c14b9a9a2f2?w=800&h=600&fit=crop"
DEFAULT_LISTING_FEATURES = ["Balcony", "Parking", "Security"]


@dataclass
class Seller:
    """The signed-in user acting as a seller."""

    id: str
    name: str
    email: str
    phone: str = "+91-00000-00000"

    @property
    def contact(self) -> ContactDetails:
        return ContactDetails(name=self.name, email=self.email, phone=self.phone)


def build_port(storage: StorageConfig) -> PersistencePort:
    """Create the persistence port selected by ``storage.backend``."""
    if storage.backend == "memory":
        return InMemoryPort()
    return JsonFilePort(storage.data_dir, pretty=storage.pretty_json)


class Marketplace:
    """One session over the storefront's persisted state.

    Parameters
    ----------
    port : PersistencePort
        Shared storage for every collection.
    config : MarketConfig | None
        Storage keys, seed sizes and order settings.
    clock : Clock | None
        Timestamp source for all collections.
    timer, sleep : Callable
        Monotonic clock and sleep for delayed contract signing.
    """

    def __init__(
        self,
        port: PersistencePort,
        config: MarketConfig | None = None,
        clock: Clock | None = None,
        timer: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.port = port
        self.config = config or MarketConfig()
        storage = self.config.storage
        pretty = storage.pretty_json

        self.catalog = PropertyCatalog(
            port, self.config.catalog, key=storage.properties_key, clock=clock, pretty=pretty
        )
        self.apartments = ApartmentCatalog(
            port, self.config.catalog, key=storage.apartments_key, pretty=pretty
        )
        self.orders = OrderLedger(
            port,
            self.catalog,
            self.config.orders,
            key=storage.orders_key,
            contracts_prefix=storage.contracts_prefix,
            clock=clock,
            timer=timer,
            sleep=sleep,
            pretty=pretty,
        )
        self.subscriptions = SubscriptionGate(
            port, key=storage.subscriptions_key, clock=clock, pretty=pretty
        )
        self.wishlist = WishlistSet(port, key=storage.wishlist_key, pretty=pretty)

    @classmethod
    def open(cls, config: MarketConfig | None = None, **kwargs: Any) -> Marketplace:
        """Open (and seed if needed) the storage described by ``config``."""
        config = config or MarketConfig()
        market = cls(build_port(config.storage), config, **kwargs)
        market.load()
        return market

    @classmethod
    def in_memory(cls, config: MarketConfig | None = None, **kwargs: Any) -> Marketplace:
        """A seeded marketplace that keeps nothing on disk."""
        market = cls(InMemoryPort(), config, **kwargs)
        market.load()
        return market

    def load(self) -> None:
        self.catalog.load()
        self.apartments.load()
        self.orders.load()
        self.subscriptions.load()
        self.wishlist.load()
        logger.info("Marketplace loaded: %s", self.summary())

    def summary(self) -> dict[str, int]:
        """Return record counts per collection."""
        return {
            "properties": len(self.catalog.store),
            "apartments": len(self.apartments.store),
            "orders": len(self.orders.store),
            "subscriptions": len(self.subscriptions.store),
            "wishlist": len(self.wishlist),
        }

    def _require_seller(self, seller: Seller) -> None:
        if not self.subscriptions.has_sell_subscription(seller.id):
            raise SubscriptionRequiredError(f"User {seller.id} needs a sell subscription to list properties")

    def create_listing(self, seller: Seller, values: dict[str, Any]) -> Property:
        """List a new property for sale on behalf of a subscribed seller.

        Raises
        ------
        SubscriptionRequiredError
            If the seller has no active sell subscription.
        ValidationError
            If required listing fields are missing or invalid.
        """
        self._require_seller(seller)
        listing = {
            "listing_type": ListingType.BUY,
            "description": "User listed property",
            "features": list(DEFAULT_LISTING_FEATURES),
            "status": PropertyStatus.AVAILABLE,
            **values,
            "seller_id": seller.id,
            "seller_contact": seller.contact,
        }
        if not listing.get("images"):
            listing["images"] = [DEFAULT_LISTING_IMAGE]
        return self.catalog.add_property(listing)

    def owned_properties(self, user_id: str) -> list[Property]:
        """Listings behind the user's confirmed purchase orders."""
        owned = []
        for order in self.orders.get_user_orders(user_id):
            if order.order_type != ListingType.BUY or order.status != OrderStatus.CONFIRMED:
                continue
            prop = self.catalog.get(order.property_id)
            if prop is not None:
                owned.append(prop)
        return owned

    def relist_owned_property(self, seller: Seller, property_id: str, price: int) -> Property | None:
        """Put a property the seller bought back on sale at ``price``.

        Returns ``None`` if the listing no longer exists.

        Raises
        ------
        SubscriptionRequiredError
            If the seller has no active sell subscription.
        ValidationError
            If ``price`` is not positive or the seller does not own the property.
        """
        self._require_seller(seller)
        if property_id not in {p.id for p in self.owned_properties(seller.id)}:
            raise ValidationError(f"Property {property_id} is not owned by {seller.id}")
        return self.catalog.update_property(
            property_id,
            {
                "price": price,
                "listing_type": ListingType.BUY,
                "seller_id": seller.id,
                "seller_contact": seller.contact,
                "status": PropertyStatus.AVAILABLE,
            },
        )

    def add_to_wishlist(self, property_id: str) -> bool:
        """Add a listing to the shared wishlist. Returns ``False`` if already present."""
        return self.wishlist.add(property_id)

    def remove_from_wishlist(self, property_id: str) -> bool:
        return self.wishlist.remove(property_id)

    def wishlist_properties(self) -> list[Property]:
        """Wishlisted listings that still exist, in wishlist order."""
        found = (self.catalog.get(property_id) for property_id in self.wishlist.ids)
        return [prop for prop in found if prop is not None]
