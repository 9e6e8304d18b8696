"""Short-stay apartment model."""

from dataclasses import dataclass


@dataclass
class Apartment:
    id: str
    name: str
    description: str
    price_per_night: int
    capacity: int
    size: int  # Square metres
    images: list[str]
    location: str
    features: list[str]
