"""Seed data generators."""

from estate_market.generators.catalog import (
    ApartmentSeedGenerator,
    ApartmentTemplate,
    PropertySeedGenerator,
    SeedTemplate,
    curated_properties,
    seed_apartments,
    seed_properties,
)
from estate_market.generators.customer import CustomerDetailsGenerator

__all__ = [
    "ApartmentSeedGenerator",
    "ApartmentTemplate",
    "CustomerDetailsGenerator",
    "PropertySeedGenerator",
    "SeedTemplate",
    "curated_properties",
    "seed_apartments",
    "seed_properties",
]
