"""Favorite listings."""

from __future__ import annotations

from estate_market.storage.ports import PersistencePort
from estate_market.store import PersistentStore, StringCodec


class WishlistSet:
    """A persisted set of property ids.

    There is a single wishlist per storage location, shared by whoever uses
    it; it is not scoped by user.
    """

    def __init__(self, port: PersistencePort, key: str = "wishlist", pretty: bool = False) -> None:
        self.store: PersistentStore[str] = PersistentStore(port, key, StringCodec(), pretty=pretty)

    def __contains__(self, property_id: object) -> bool:
        return property_id in self.store

    def __len__(self) -> int:
        return len(self.store)

    def load(self) -> list[str]:
        return self.store.load_or_seed()

    @property
    def ids(self) -> list[str]:
        return self.store.all()

    def add(self, property_id: str) -> bool:
        """Insert ``property_id``. Returns ``False`` if it was already present."""
        if property_id in self.store:
            return False
        self.store.append(property_id)
        return True

    def remove(self, property_id: str) -> bool:
        return self.store.delete(property_id)

    def contains(self, property_id: str) -> bool:
        return property_id in self.store

    def toggle(self, property_id: str) -> bool:
        """Flip membership. Returns whether the id is now in the wishlist."""
        if self.remove(property_id):
            return False
        self.store.append(property_id)
        return True

    def clear(self) -> None:
        self.store.clear()
