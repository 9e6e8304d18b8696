"""Tests for the property and apartment catalogs."""

import json
from pathlib import Path

import pytest

from estate_market.accounts import SubscriptionGate
from estate_market.catalog import ApartmentCatalog, PropertyCatalog, PropertyFilters
from estate_market.config import CatalogConfig
from estate_market.exceptions import ValidationError
from estate_market.models import (
    ContactDetails,
    Coordinates,
    ListingType,
    Location,
    PlotSize,
    PropertyCategory,
    PropertyDetails,
    PropertyStatus,
)
from estate_market.storage import InMemoryPort, JsonFilePort

from conftest import ManualClock, make_listing


class TestLoad:
    """Tests for seeding and reloading the property catalog."""

    def test_seeds_on_first_load(self, catalog: PropertyCatalog, port: InMemoryPort) -> None:
        assert len(catalog.properties) == 72
        assert len(json.loads(port.read("properties"))) == 72

    def test_persisted_shape(self, catalog: PropertyCatalog, port: InMemoryPort) -> None:
        first = json.loads(port.read("properties"))[0]

        assert first["id"] == "1"
        assert first["type"] == "buy"
        assert first["sellerContact"]["email"] == "john.smith@email.com"
        assert first["createdAt"] == "2024-01-15T10:00:00+00:00"

    def test_reopen_keeps_changes(self, catalog: PropertyCatalog, port: InMemoryPort, clock: ManualClock) -> None:
        catalog.delete_property("1")

        reopened = PropertyCatalog(port, CatalogConfig(), clock=clock)
        reopened.load()

        assert reopened.get("1") is None
        assert len(reopened.properties) == 71

    def test_load_twice_is_stable(self, catalog: PropertyCatalog) -> None:
        first = catalog.properties

        assert catalog.load() == first

    def test_corrupt_payload_reseeded(self, port: InMemoryPort, clock: ManualClock) -> None:
        port.write("properties", '[{"id": "1"}]')

        catalog = PropertyCatalog(port, CatalogConfig(), clock=clock)

        assert len(catalog.load()) == 72


class TestMutations:
    """Tests for adding, updating and deleting listings."""

    def test_add_property(self, catalog: PropertyCatalog, clock: ManualClock) -> None:
        prop = catalog.add_property(make_listing())

        assert prop.id == str(int(clock.now.timestamp() * 1000))
        assert prop.listing_type == ListingType.RENT
        assert prop.status == PropertyStatus.AVAILABLE
        assert prop.created_at == clock.now
        assert catalog.properties[-1] == prop

    def test_add_property_string_enums(self, catalog: PropertyCatalog) -> None:
        prop = catalog.add_property(make_listing(category="villa", status="pending"))

        assert prop.category == PropertyCategory.VILLA
        assert prop.status == PropertyStatus.PENDING

    def test_add_property_plain_dict_fields(self, catalog: PropertyCatalog, port: InMemoryPort) -> None:
        prop = catalog.add_property(
            make_listing(
                location={
                    "state": "Goa",
                    "city": "Panaji",
                    "address": "5 Beach Road, Panaji",
                    "coordinates": {"lat": 15.49, "lng": 73.82},
                },
                details={"bedrooms": 3, "bathrooms": 2, "area": 1800, "plot_size": {"length": 60, "breadth": 30}},
                seller_contact={"name": "Asha Rao", "email": "asha@example.com", "phone": "+91-90000-22222"},
            )
        )

        assert isinstance(prop.location, Location)
        assert prop.location.coordinates == Coordinates(lat=15.49, lng=73.82)
        assert prop.details.plot_size == PlotSize(length=60, breadth=30)
        assert isinstance(prop.seller_contact, ContactDetails)
        assert catalog.search(PropertyFilters(city="Panaji")) == [prop]
        assert catalog.search(text="goa") == [prop]

        reopened = PropertyCatalog(port, CatalogConfig())
        reopened.load()
        assert reopened.get(prop.id) == prop

    def test_add_property_malformed_nested_field(self, catalog: PropertyCatalog) -> None:
        with pytest.raises(ValidationError, match="bedrooms"):
            catalog.add_property(make_listing(details={"bedrooms": "three", "bathrooms": 1, "area": 900}))
        assert len(catalog.properties) == 72

    def test_update_property_plain_dict_field(self, catalog: PropertyCatalog) -> None:
        updated = catalog.update_property("3", {"details": {"bedrooms": 5, "bathrooms": 4, "area": 3000}})

        assert isinstance(updated.details, PropertyDetails)
        assert catalog.search(PropertyFilters(min_bedrooms=5)) == [updated]

    def test_add_property_invalid_category(self, catalog: PropertyCatalog) -> None:
        with pytest.raises(ValidationError):
            catalog.add_property(make_listing(category="castle"))

    @pytest.mark.parametrize("price", [0, -5, "cheap", True])
    def test_add_property_invalid_price(self, catalog: PropertyCatalog, price) -> None:
        with pytest.raises(ValidationError):
            catalog.add_property(make_listing(price=price))

    def test_add_property_missing_title(self, catalog: PropertyCatalog) -> None:
        values = make_listing()
        del values["title"]

        with pytest.raises(ValidationError, match="title"):
            catalog.add_property(values)
        assert len(catalog.properties) == 72

    def test_update_property(self, catalog: PropertyCatalog, clock: ManualClock) -> None:
        clock.advance(30)

        updated = catalog.update_property("3", {"price": 5_000_000, "status": "sold"})

        assert updated.price == 5_000_000
        assert updated.status == PropertyStatus.SOLD
        assert updated.updated_at == clock.now
        assert catalog.get("3") == updated

    def test_update_unknown(self, catalog: PropertyCatalog) -> None:
        assert catalog.update_property("nope", {"price": 1}) is None

    def test_delete_property(self, catalog: PropertyCatalog) -> None:
        assert catalog.delete_property("EX-1000") is True
        assert catalog.delete_property("EX-1000") is False

    def test_user_properties(self, catalog: PropertyCatalog, rental) -> None:
        assert catalog.user_properties("seller-9") == [rental]
        assert len(catalog.user_properties("seller-seed")) == 20


class TestSearch:
    """Tests for PropertyCatalog.search and list_recent."""

    def test_no_filters_returns_all_in_order(self, catalog: PropertyCatalog) -> None:
        assert catalog.search() == catalog.properties

    def test_price_range_inclusive(self, catalog: PropertyCatalog) -> None:
        results = catalog.search(PropertyFilters(min_price=5_000_000, max_price=6_000_000))

        assert len(results) == 25
        assert all(5_000_000 <= p.price <= 6_000_000 for p in results)

    def test_zero_bound_is_honoured(self, catalog: PropertyCatalog) -> None:
        assert catalog.search(PropertyFilters(max_price=0)) == []

    def test_listing_type(self, catalog: PropertyCatalog, rental) -> None:
        assert catalog.search(PropertyFilters(listing_type="rent")) == [rental]

    def test_invalid_filter_value(self) -> None:
        with pytest.raises(ValidationError):
            PropertyFilters(listing_type="lease")

    def test_category_and_bedrooms(self, catalog: PropertyCatalog) -> None:
        results = catalog.search(PropertyFilters(category=PropertyCategory.VILLA, min_bedrooms=3))

        assert results
        assert all(p.category == PropertyCategory.VILLA and p.details.bedrooms >= 3 for p in results)

    def test_city_substring_case_insensitive(self, catalog: PropertyCatalog) -> None:
        results = catalog.search(PropertyFilters(city="BENGAL"))

        assert results
        assert {p.location.city for p in results} == {"Bengaluru"}

    def test_empty_string_is_unset(self, catalog: PropertyCatalog) -> None:
        assert len(catalog.search(PropertyFilters(state="", city=""))) == 72

    def test_text_search(self, catalog: PropertyCatalog) -> None:
        results = catalog.search(text="mumbai")

        assert len(results) == 9

    def test_text_matches_state(self, catalog: PropertyCatalog) -> None:
        results = catalog.search(text="texas")

        assert [p.id for p in results] == ["2"]

    def test_area_range(self, catalog: PropertyCatalog) -> None:
        results = catalog.search(PropertyFilters(min_area=2000))

        assert [p.id for p in results] == ["2"]

    def test_most_recent(self, catalog: PropertyCatalog, rental) -> None:
        results = catalog.search(most_recent=True)

        assert results[0] == rental
        assert results[1].id == "EX-1049"
        assert results[-1].id == "1"

    def test_list_recent_limit(self, catalog: PropertyCatalog) -> None:
        recent = catalog.list_recent(limit=3)

        assert [p.id for p in recent] == ["EX-1049", "EX-1048", "EX-1047"]

    def test_list_recent_capped_by_config(self, port: InMemoryPort, clock: ManualClock) -> None:
        catalog = PropertyCatalog(port, CatalogConfig(list_limit=5), clock=clock)
        catalog.load()

        assert len(catalog.list_recent()) == 5
        assert len(catalog.list_recent(limit=50)) == 5


class TestApartmentCatalog:
    """Tests for ApartmentCatalog."""

    @pytest.fixture
    def apartments(self, port: InMemoryPort) -> ApartmentCatalog:
        catalog = ApartmentCatalog(port, CatalogConfig())
        catalog.load()
        return catalog

    def test_seeded(self, apartments: ApartmentCatalog) -> None:
        assert len(apartments.apartments) == 50
        assert apartments.get("100").name == "Premium Stay 100"

    def test_locations(self, apartments: ApartmentCatalog) -> None:
        assert apartments.locations() == ["City Center", "Beachfront"]

    def test_search(self, apartments: ApartmentCatalog) -> None:
        results = apartments.search(min_capacity=4, location="Beachfront", max_price=200)

        assert results
        for apt in results:
            assert apt.capacity >= 4
            assert apt.location == "Beachfront"
            assert apt.price_per_night <= 200

    def test_search_price_floor(self, apartments: ApartmentCatalog) -> None:
        results = apartments.search(min_price=250)

        assert [a.id for a in results] == ["111", "123"]


class TestJsonStorage:
    """Tests for the catalog over JSON files."""

    def test_undecodable_file_reseeded(self, tmp_path: Path) -> None:
        (tmp_path / "properties.json").write_bytes(b"\xff\xfe\x00garbage")

        catalog = PropertyCatalog(JsonFilePort(tmp_path), CatalogConfig())

        assert len(catalog.load()) == 72
        assert len(json.loads((tmp_path / "properties.json").read_text(encoding="utf-8"))) == 72

    def test_undecodable_subscriptions_read_as_empty(self, tmp_path: Path) -> None:
        port = JsonFilePort(tmp_path)
        gate = SubscriptionGate(port)
        gate.load()
        (tmp_path / "subscriptions.json").write_bytes(b"\x80\x81")

        assert gate.has_sell_subscription("u1") is False
        assert gate.activate_subscription("u1", "sell").sell_active is True
