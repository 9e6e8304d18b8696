"""Property listing model."""

from dataclasses import dataclass, field
from datetime import datetime

from estate_market.models.base import ContactDetails, Location, PlotSize
from estate_market.models.enums import ListingType, PropertyCategory, PropertyStatus


@dataclass
class PropertyDetails:
    bedrooms: int
    bathrooms: int
    area: int  # Square feet
    plot_size: PlotSize | None = None
    plot_number: str | None = None
    distance_from_highway: float | None = None  # Kilometres


@dataclass
class Property:
    """Listing offered for purchase or rent.

    ``id`` is assigned once by the store and never changes.
    ``updated_at`` is always >= ``created_at``.
    """

    id: str
    title: str
    price: int
    listing_type: ListingType = field(metadata={"json": "type"})
    category: PropertyCategory
    location: Location
    details: PropertyDetails
    images: list[str]
    description: str
    features: list[str]
    seller_id: str
    seller_contact: ContactDetails
    status: PropertyStatus
    created_at: datetime
    updated_at: datetime
