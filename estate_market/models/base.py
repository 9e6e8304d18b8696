"""Value objects shared across marketplace entities."""

from dataclasses import dataclass


@dataclass
class Coordinates:
    lat: float = 0.0
    lng: float = 0.0


@dataclass
class Location:
    """Where a listing is. ``state`` and ``city`` drive catalog search."""

    state: str
    city: str
    address: str
    coordinates: Coordinates


@dataclass
class PlotSize:
    length: float
    breadth: float


@dataclass
class ContactDetails:
    """Seller contact shown on a listing."""

    name: str
    email: str
    phone: str


@dataclass
class CustomerDetails:
    """Buyer details captured at checkout."""

    name: str
    email: str
    phone: str
    address: str | None = None
