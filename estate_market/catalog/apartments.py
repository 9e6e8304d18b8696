"""Short-stay apartment catalog."""

from __future__ import annotations

from estate_market.config import CatalogConfig
from estate_market.generators.catalog import seed_apartments
from estate_market.models import Apartment
from estate_market.storage.ports import PersistencePort
from estate_market.store import DataclassCodec, PersistentStore


class ApartmentCatalog:
    """Nightly rentals, seeded on first use and read-only afterwards."""

    def __init__(
        self,
        port: PersistencePort,
        config: CatalogConfig | None = None,
        key: str = "apartments",
        pretty: bool = False,
    ) -> None:
        self.config = config or CatalogConfig()
        self.store: PersistentStore[Apartment] = PersistentStore(
            port, key, DataclassCodec(Apartment), pretty=pretty
        )

    def load(self) -> list[Apartment]:
        return self.store.load_or_seed(lambda: seed_apartments(self.config))

    @property
    def apartments(self) -> list[Apartment]:
        return self.store.all()

    def get(self, apartment_id: str) -> Apartment | None:
        return self.store.get(apartment_id)

    def locations(self) -> list[str]:
        """Distinct locations in first-seen order."""
        return list(dict.fromkeys(a.location for a in self.store))

    def search(
        self,
        min_capacity: int | None = None,
        location: str | None = None,
        min_price: int | None = None,
        max_price: int | None = None,
    ) -> list[Apartment]:
        """Apartments sleeping at least ``min_capacity`` at ``location`` within a nightly price range."""
        results = []
        for apt in self.store:
            if min_capacity is not None and apt.capacity < min_capacity:
                continue
            if location and apt.location != location:
                continue
            if min_price is not None and apt.price_per_night < min_price:
                continue
            if max_price is not None and apt.price_per_night > max_price:
                continue
            results.append(apt)
        return results
