"""Enumeration types for marketplace entities."""

from enum import Enum


class ListingType(str, Enum):
    BUY = "buy"
    RENT = "rent"


class PropertyCategory(str, Enum):
    APARTMENT = "apartment"
    HOUSE = "house"
    VILLA = "villa"
    CONDO = "condo"


class PropertyStatus(str, Enum):
    AVAILABLE = "available"
    SOLD = "sold"
    PENDING = "pending"


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class SubscriptionKind(str, Enum):
    BUY = "buy"
    SELL = "sell"
