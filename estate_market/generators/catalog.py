"""Deterministic seed data for the property and apartment catalogs.

Every synthetic listing is derived from its index within a batch by cycling
through small pools (cities, categories, images). A batch is described by a
template, so the storefront's different seed sets share one generator.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterator

from estate_market.config import CatalogConfig
from estate_market.generators.base import BaseGenerator, cycle, image_pair
from estate_market.models import (
    Apartment,
    ContactDetails,
    Coordinates,
    ListingType,
    Location,
    PlotSize,
    Property,
    PropertyCategory,
    PropertyDetails,
    PropertyStatus,
)


@dataclass(frozen=True)
class CityPoint:
    city: str
    state: str
    lat: float
    lng: float


MUMBAI = CityPoint("Mumbai", "Maharashtra", 19.0760, 72.8777)
NEW_DELHI = CityPoint("New Delhi", "Delhi", 28.6139, 77.2090)
BENGALURU = CityPoint("Bengaluru", "Karnataka", 12.9716, 77.5946)
CHENNAI = CityPoint("Chennai", "Tamil Nadu", 13.0827, 80.2707)
HYDERABAD = CityPoint("Hyderabad", "Telangana", 17.3850, 78.4867)
KOLKATA = CityPoint("Kolkata", "West Bengal", 22.5726, 88.3639)
AHMEDABAD = CityPoint("Ahmedabad", "Gujarat", 23.0225, 72.5714)
JAIPUR = CityPoint("Jaipur", "Rajasthan", 26.9124, 75.7873)
CHANDIGARH = CityPoint("Chandigarh", "Punjab", 30.7333, 76.7794)
INDORE = CityPoint("Indore", "Madhya Pradesh", 22.7196, 75.8577)

CATEGORIES = tuple(PropertyCategory)

_UNSPLASH = "https://images.unsplash.com/photo-{}?w={}&h={}&fit=crop"


def _images(ids: tuple[str, ...], width: int = 800, height: int = 600) -> tuple[str, ...]:
    return tuple(_UNSPLASH.format(photo, width, height) for photo in ids)


@dataclass(frozen=True)
class SeedTemplate:
    """Recipe for one batch of generated property listings."""

    id_format: str
    id_start: int
    cities: tuple[CityPoint, ...]
    images: tuple[str, ...]
    price_base: int
    price_step: int
    price_cycle: int
    area_base: int
    area_step: int
    area_cycle: int
    title_format: str
    address_format: str
    description_format: str
    plot_format: str
    features: tuple[str, ...]
    seller_id: str
    seller_contact: ContactDetails
    coordinate_radius: float = 0.05


SAMPLE_TEMPLATE = SeedTemplate(
    id_format="{}",
    id_start=3,
    cities=(MUMBAI, NEW_DELHI, BENGALURU, CHENNAI, HYDERABAD, KOLKATA, AHMEDABAD, JAIPUR, CHANDIGARH, INDORE),
    images=_images((
        "1560185127-6ed189bf02f4",
        "1501183638710-841dd1904471",
        "1502005229762-cf1b2da7c55f",
        "1560448204-e02f11c3d0e2",
        "1600585154161-8c14b9a9a2f2",
    )),
    price_base=4_500_000,
    price_step=250_000,
    price_cycle=12,
    area_base=600,
    area_step=150,
    area_cycle=10,
    title_format="{city} {Category} {n}",
    address_format="{street} Main Road, {city}, {state}",
    description_format="Spacious {category} in {city}, ideal for buyers seeking comfort and convenience.",
    plot_format="P-{}",
    features=("Balcony", "Security", "Parking", "Lift", "Power Backup"),
    seller_id="seller-seed",
    seller_contact=ContactDetails(name="Agent Desk", email="agent@example.com", phone="+91-90000-00000"),
)

EXTRA_TEMPLATE = SeedTemplate(
    id_format="EX-{}",
    id_start=1000,
    cities=(MUMBAI, NEW_DELHI, BENGALURU, CHENNAI, HYDERABAD, AHMEDABAD, KOLKATA, JAIPUR),
    images=_images((
        "1560185127-6ed189bf02f4",
        "1502005229762-cf1b2da7c55f",
        "1600585154161-8c14b9a9a2f2",
        "1501183638710-841dd1904471",
    ), 1000, 750),
    price_base=4_500_000,
    price_step=200_000,
    price_cycle=20,
    area_base=700,
    area_step=110,
    area_cycle=12,
    title_format="{city} {category} {n}",
    address_format="{street} {city} Main Road, {state}",
    description_format="Spacious {category} in {city} with modern amenities and excellent connectivity.",
    plot_format="EX-{}",
    features=("Security", "Parking", "Lift", "Power Backup"),
    seller_id="seed-seller",
    seller_contact=ContactDetails(name="Seed Agent", email="agent@seed.com", phone="+91-90000-11111"),
)


def curated_properties() -> list[Property]:
    """The two hand-written listings every catalog starts with."""
    return [
        Property(
            id="1",
            title="Modern Downtown Apartment",
            price=850_000,
            listing_type=ListingType.BUY,
            category=PropertyCategory.APARTMENT,
            location=Location(
                state="California",
                city="San Francisco",
                address="123 Market Street, San Francisco, CA",
                coordinates=Coordinates(lat=37.7749, lng=-122.4194),
            ),
            details=PropertyDetails(bedrooms=2, bathrooms=2, area=1200, plot_number="A-101"),
            images=list(_images((
                "1545324418-cc1a3fa10c00",
                "1484154218962-a197022b5858",
                "1502672260266-1c1ef2d93688",
            ))),
            description="Beautiful modern apartment in the heart of downtown San Francisco with stunning city views.",
            features=["City View", "Modern Kitchen", "Hardwood Floors", "In-unit Laundry", "Gym Access"],
            seller_id="seller1",
            seller_contact=ContactDetails(name="John Smith", email="john.smith@email.com", phone="+1-555-0123"),
            status=PropertyStatus.AVAILABLE,
            created_at=datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc),
            updated_at=datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc),
        ),
        Property(
            id="2",
            title="Spacious Family House",
            price=6_500_000,
            listing_type=ListingType.BUY,
            category=PropertyCategory.HOUSE,
            location=Location(
                state="Texas",
                city="Austin",
                address="456 Oak Avenue, Austin, TX",
                coordinates=Coordinates(lat=30.2672, lng=-97.7431),
            ),
            details=PropertyDetails(
                bedrooms=4,
                bathrooms=3,
                area=2500,
                plot_size=PlotSize(length=100, breadth=80),
                distance_from_highway=5,
            ),
            images=list(_images((
                "1568605114967-8130f3a36994",
                "1570129477492-45c003edd2be",
                "1449844908441-8829872d2607",
            ))),
            description="Perfect family home with large backyard and great neighborhood amenities.",
            features=["Large Backyard", "Two-Car Garage", "Updated Kitchen", "Master Suite", "Near Schools"],
            seller_id="seller2",
            seller_contact=ContactDetails(name="Sarah Johnson", email="sarah.johnson@email.com", phone="+1-555-0456"),
            status=PropertyStatus.AVAILABLE,
            created_at=datetime(2024, 1, 16, 14, 30, tzinfo=timezone.utc),
            updated_at=datetime(2024, 1, 16, 14, 30, tzinfo=timezone.utc),
        ),
    ]


class PropertySeedGenerator(BaseGenerator):
    """Generate synthetic property listings from a :class:`SeedTemplate`."""

    def generate(self, template: SeedTemplate, index: int, created_at: datetime) -> Property:
        """Generate the listing at ``index`` of a batch.

        Parameters
        ----------
        template : SeedTemplate
            Batch recipe.
        index : int
            Zero-based position within the batch.
        created_at : datetime
            Creation (and update) timestamp of the listing.

        Returns
        -------
        Property
            Generated listing.
        """
        place = cycle(template.cities, index)
        category = cycle(CATEGORIES, index)
        names = {
            "city": place.city,
            "state": place.state,
            "category": category.value,
            "Category": category.value.capitalize(),
            "n": index + 1,
            "street": 100 + index,
        }

        return Property(
            id=template.id_format.format(template.id_start + index),
            title=template.title_format.format(**names),
            price=template.price_base + (index % template.price_cycle) * template.price_step,
            listing_type=ListingType.BUY,
            category=category,
            location=Location(
                state=place.state,
                city=place.city,
                address=template.address_format.format(**names),
                coordinates=self._coordinates(place, template.coordinate_radius),
            ),
            details=PropertyDetails(
                bedrooms=(index % 4) + 1,
                bathrooms=max(1, index % 3),
                area=template.area_base + (index % template.area_cycle) * template.area_step,
                plot_number=template.plot_format.format(index + 100),
            ),
            images=image_pair(template.images, index),
            description=template.description_format.format(**names),
            features=list(template.features),
            seller_id=template.seller_id,
            seller_contact=ContactDetails(
                name=template.seller_contact.name,
                email=template.seller_contact.email,
                phone=template.seller_contact.phone,
            ),
            status=PropertyStatus.AVAILABLE,
            created_at=created_at,
            updated_at=created_at,
        )

    def generate_batch(self, count: int, template: SeedTemplate, start: datetime) -> Iterator[Property]:
        """Generate ``count`` listings stamped one minute apart from ``start``."""
        for index in range(count):
            yield self.generate(template, index, start + timedelta(minutes=index))

    def _coordinates(self, place: CityPoint, radius: float) -> Coordinates:
        return Coordinates(
            lat=round(float(self.fake.coordinate(center=place.lat, radius=radius)), 6),
            lng=round(float(self.fake.coordinate(center=place.lng, radius=radius)), 6),
        )


@dataclass(frozen=True)
class ApartmentTemplate:
    """Recipe for one batch of short-stay apartments."""

    id_start: int
    index_offset: int
    name_format: str
    description: str
    price_base: int
    price_cycle: int
    size_base: int
    size_cycle: int
    locations: tuple[str, ...]
    images: tuple[str, ...] = _images((
        "1582719478250-c89cae4dc85b",
        "1502672260266-1c1ef2d93688",
        "1598928506311-c55ded91a20c",
        "1562438668-bcf0ca6578f0",
        "1611892440504-42a792e24d32",
        "1600585152220-90363fe7e115",
    ), 1000, 750)
    features: tuple[str, ...] = ("Wi-Fi", "Air Conditioning", "TV", "Kitchen", "Bathroom")
    price_step: int = 10
    size_step: int = 10


BASE_APARTMENTS = ApartmentTemplate(
    id_start=1,
    index_offset=1,
    name_format="Apartment {}",
    description="Comfortable, well-appointed apartment ideal for short stays with modern amenities.",
    price_base=120,
    price_cycle=10,
    size_base=25,
    size_cycle=8,
    locations=("Beachfront", "City Center"),
)

EXTRA_APARTMENTS = ApartmentTemplate(
    id_start=100,
    index_offset=0,
    name_format="Premium Stay {}",
    description="Modern rental apartment with essential amenities and easy access to attractions.",
    price_base=140,
    price_cycle=12,
    size_base=30,
    size_cycle=6,
    locations=("City Center", "Beachfront"),
)


class ApartmentSeedGenerator(BaseGenerator):
    """Generate short-stay apartments from an :class:`ApartmentTemplate`."""

    def generate(self, template: ApartmentTemplate, index: int) -> Apartment:
        n = index + template.index_offset
        apartment_id = str(template.id_start + index)
        return Apartment(
            id=apartment_id,
            name=template.name_format.format(apartment_id),
            description=template.description,
            price_per_night=template.price_base + (n % template.price_cycle) * template.price_step,
            capacity=(n % 4) + 1,
            size=template.size_base + (n % template.size_cycle) * template.size_step,
            images=image_pair(template.images, n),
            location=cycle(template.locations, n),
            features=list(template.features),
        )

    def generate_batch(self, count: int, template: ApartmentTemplate) -> Iterator[Apartment]:
        for index in range(count):
            yield self.generate(template, index)


def seed_properties(config: CatalogConfig | None = None) -> list[Property]:
    """Build the initial property catalog.

    Curated listings first, then the sample batch, then the extra batch.
    The result depends only on ``config``.
    """
    config = config or CatalogConfig()
    generator = PropertySeedGenerator(seed=config.seed)
    extra_start = config.seed_epoch + timedelta(minutes=config.sample_count)
    return [
        *curated_properties(),
        *generator.generate_batch(config.sample_count, SAMPLE_TEMPLATE, config.seed_epoch),
        *generator.generate_batch(config.extra_count, EXTRA_TEMPLATE, extra_start),
    ]


def seed_apartments(config: CatalogConfig | None = None) -> list[Apartment]:
    """Build the initial short-stay apartment catalog."""
    config = config or CatalogConfig()
    generator = ApartmentSeedGenerator(seed=config.seed)
    return [
        *generator.generate_batch(config.apartment_count, BASE_APARTMENTS),
        *generator.generate_batch(config.extra_apartment_count, EXTRA_APARTMENTS),
    ]
