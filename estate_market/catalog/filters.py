"""Search filters for the property catalog."""

from dataclasses import dataclass

from estate_market.exceptions import ValidationError
from estate_market.models import ListingType, Property, PropertyCategory


def _in_range(value: float, low: float | None, high: float | None) -> bool:
    if low is not None and value < low:
        return False
    if high is not None and value > high:
        return False
    return True


def _contains(haystack: str, needle: str) -> bool:
    return needle.casefold() in haystack.casefold()


@dataclass
class PropertyFilters:
    """Conjunctive listing filters. ``None`` (or an empty string) leaves a criterion unset.

    Range bounds are inclusive; ``state`` and ``city`` match case-insensitive
    substrings.
    """

    listing_type: ListingType | None = None
    category: PropertyCategory | None = None
    state: str | None = None
    city: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    min_bedrooms: int | None = None
    max_bedrooms: int | None = None
    min_area: float | None = None
    max_area: float | None = None

    def __post_init__(self) -> None:
        try:
            if self.listing_type is not None:
                self.listing_type = ListingType(self.listing_type)
            if self.category is not None:
                self.category = PropertyCategory(self.category)
        except ValueError as e:
            raise ValidationError(f"Invalid filter: {e}") from e

    def matches(self, prop: Property) -> bool:
        if self.listing_type is not None and prop.listing_type != self.listing_type:
            return False
        if self.category is not None and prop.category != self.category:
            return False
        if self.state and not _contains(prop.location.state, self.state):
            return False
        if self.city and not _contains(prop.location.city, self.city):
            return False
        return (
            _in_range(prop.price, self.min_price, self.max_price)
            and _in_range(prop.details.bedrooms, self.min_bedrooms, self.max_bedrooms)
            and _in_range(prop.details.area, self.min_area, self.max_area)
        )


def matches_text(prop: Property, text: str) -> bool:
    """Free-text match against title, city or state."""
    return (
        _contains(prop.title, text)
        or _contains(prop.location.city, text)
        or _contains(prop.location.state, text)
    )
