"""Property and apartment catalogs."""

from estate_market.catalog.apartments import ApartmentCatalog
from estate_market.catalog.filters import PropertyFilters, matches_text
from estate_market.catalog.properties import PropertyCatalog

__all__ = ["ApartmentCatalog", "PropertyCatalog", "PropertyFilters", "matches_text"]
