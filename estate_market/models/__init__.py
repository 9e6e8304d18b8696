"""Domain models for the property marketplace."""

from estate_market.models.apartment import Apartment
from estate_market.models.base import (
    ContactDetails,
    Coordinates,
    CustomerDetails,
    Location,
    PlotSize,
)
from estate_market.models.enums import (
    ListingType,
    OrderStatus,
    PropertyCategory,
    PropertyStatus,
    SubscriptionKind,
)
from estate_market.models.order import Order
from estate_market.models.property import Property, PropertyDetails
from estate_market.models.subscription import SubscriptionRecord

__all__ = [
    "Apartment",
    "ContactDetails",
    "Coordinates",
    "CustomerDetails",
    "ListingType",
    "Location",
    "Order",
    "OrderStatus",
    "PlotSize",
    "Property",
    "PropertyCategory",
    "PropertyDetails",
    "PropertyStatus",
    "SubscriptionKind",
    "SubscriptionRecord",
]
