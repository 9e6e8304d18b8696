"""Client-local data layer and order lifecycle for a property marketplace."""

from estate_market.accounts import SubscriptionGate, WishlistSet
from estate_market.catalog import ApartmentCatalog, PropertyCatalog, PropertyFilters
from estate_market.config import MarketConfig
from estate_market.market import Marketplace, Seller
from estate_market.orders import OrderLedger, compute_pricing
from estate_market.store import PersistentStore

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ApartmentCatalog",
    "MarketConfig",
    "Marketplace",
    "OrderLedger",
    "PersistentStore",
    "PropertyCatalog",
    "PropertyFilters",
    "Seller",
    "SubscriptionGate",
    "WishlistSet",
    "compute_pricing",
]
