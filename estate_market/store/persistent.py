"""Generic persisted collection of entities keyed by a stable identifier."""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from estate_market.exceptions import ParseError, ValidationError
from estate_market.storage.ports import PersistencePort
from estate_market.store.codecs import DataclassCodec, EntityCodec
from estate_market.store.ids import Clock, IdFactory, utc_now

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Layout(str, Enum):
    """How a collection is laid out in its persisted payload."""

    LIST = "list"  # JSON array of entities
    MAPPING = "mapping"  # JSON object of key -> entity (key omitted from the value)


class PersistentStore(Generic[T]):
    """One collection of entities persisted under a single key.

    Every mutation rewrites the whole collection through the port before
    returning. There is no locking: two stores sharing a port and key each
    hold their own snapshot, and the last one to write wins.

    Parameters
    ----------
    port : PersistencePort
        Where the serialized collection lives.
    key : str
        Storage key for this collection.
    codec : EntityCodec
        Keys, encodes and decodes entities.
    layout : Layout
        Persisted shape of the collection.
    clock : Clock | None
        Source of timestamps (UTC ``datetime``).
    id_factory : Callable[[], str] | None
        Source of fresh ids for :meth:`create`.
    pretty : bool
        Indent the persisted JSON.
    """

    def __init__(
        self,
        port: PersistencePort,
        key: str,
        codec: EntityCodec[T],
        layout: Layout = Layout.LIST,
        clock: Clock | None = None,
        id_factory: Callable[[], str] | None = None,
        pretty: bool = False,
    ) -> None:
        self.port = port
        self.key = key
        self.codec = codec
        self.layout = layout
        self.clock = clock or utc_now
        self.id_factory = id_factory or IdFactory(self.clock)
        self.pretty = pretty
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __contains__(self, entity_id: object) -> bool:
        return self._index_of(entity_id) is not None

    def load_or_seed(self, seed_fn: Callable[[], Iterable[T]] | None = None) -> list[T]:
        """Load the persisted collection, seeding it when absent or corrupt.

        Parameters
        ----------
        seed_fn : Callable[[], Iterable[T]] | None
            Produces the initial collection. Called at most once, and only
            when nothing usable is persisted. ``None`` seeds an empty
            collection.

        Returns
        -------
        list[T]
            Snapshot of the loaded collection.
        """
        try:
            raw = self.port.read(self.key)
            if raw is not None:
                self._items = self._decode(raw)
                logger.debug("Loaded %d records from %s", len(self._items), self.key)
                return self.all()
        except ParseError as e:
            logger.warning("Discarding unreadable %s payload and reseeding: %s", self.key, e)

        self._items = list(seed_fn()) if seed_fn is not None else []
        self._persist()
        logger.info("Seeded %s with %d records", self.key, len(self._items))
        return self.all()

    def reload(self) -> list[T]:
        """Replace the in-memory snapshot with the latest persisted state.

        Unreadable or missing payloads read as an empty collection.
        """
        try:
            raw = self.port.read(self.key)
            self._items = self._decode(raw) if raw is not None else []
        except ParseError as e:
            logger.warning("Unreadable %s payload treated as empty: %s", self.key, e)
            self._items = []
        return self.all()

    def all(self) -> list[T]:
        """Return the current in-memory snapshot."""
        return list(self._items)

    def get(self, entity_id: str) -> T | None:
        idx = self._index_of(entity_id)
        return self._items[idx] if idx is not None else None

    def create(self, values: dict[str, Any]) -> T:
        """Build, append and persist a new entity.

        The store assigns the id and the ``created_at``/``updated_at``
        timestamps the entity declares.

        Raises
        ------
        ValidationError
            If ``values`` carries an id, an unknown field, or lacks a
            required one. Nothing is persisted in that case.
        """
        codec = self._dataclass_codec()
        if codec.key_field in values:
            raise ValidationError(f"{codec.key_field!r} is assigned by the store")

        entity_id = self.id_factory()
        while entity_id in self:
            entity_id = self.id_factory()

        now = self.clock()
        values = {codec.key_field: entity_id, **values}
        for stamp in ("created_at", "updated_at"):
            if codec.has_field(stamp) and values.get(stamp) is None:
                values[stamp] = now

        entity = codec.build(values)
        self._items.append(entity)
        self._persist()
        return entity

    def update(self, entity_id: str, changes: dict[str, Any]) -> T | None:
        """Merge ``changes`` into the matching entity and persist.

        Refreshes ``updated_at`` when the entity has one. Returns ``None``
        without persisting when no entity has ``entity_id``.
        """
        idx = self._index_of(entity_id)
        if idx is None:
            logger.debug("Update of unknown %s id %s ignored", self.key, entity_id)
            return None

        codec = self._dataclass_codec()
        if codec.key_field in changes and changes[codec.key_field] != entity_id:
            raise ValidationError(f"{codec.key_field!r} cannot be changed")

        current = self._items[idx]
        updated = codec.patch(current, changes)
        if codec.has_field("updated_at"):
            created_at = getattr(updated, "created_at", None)
            now = self.clock()
            if created_at is not None and now < created_at:
                now = created_at
            updated = codec.patch(updated, {"updated_at": now})

        self._items[idx] = updated
        self._persist()
        return updated

    def delete(self, entity_id: str) -> bool:
        """Remove the matching entity. Returns ``False`` when absent."""
        idx = self._index_of(entity_id)
        if idx is None:
            return False
        del self._items[idx]
        self._persist()
        return True

    def put(self, entity: T) -> T:
        """Insert or replace an entity by key and persist."""
        idx = self._index_of(self.codec.key(entity))
        if idx is None:
            self._items.append(entity)
        else:
            self._items[idx] = entity
        self._persist()
        return entity

    def append(self, entity: T) -> T:
        """Append an entity as-is and persist."""
        self._items.append(entity)
        self._persist()
        return entity

    def clear(self) -> None:
        self._items = []
        self._persist()

    def _index_of(self, entity_id: object) -> int | None:
        for idx, item in enumerate(self._items):
            if self.codec.key(item) == entity_id:
                return idx
        return None

    def _dataclass_codec(self) -> DataclassCodec[T]:
        if not isinstance(self.codec, DataclassCodec):
            raise TypeError(f"{self.key} store does not hold dataclass entities")
        return self.codec

    def _encode(self) -> Any:
        if self.layout == Layout.MAPPING:
            return {self.codec.key(item): self.codec.encode(item, keyed=True) for item in self._items}
        return [self.codec.encode(item) for item in self._items]

    def _decode(self, raw: str) -> list[T]:
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ParseError(f"{self.key}: invalid JSON: {e}") from e

        if self.layout == Layout.MAPPING:
            if not isinstance(payload, dict):
                raise ParseError(f"{self.key}: expected object, got {type(payload).__name__}")
            return [self.codec.decode(value, key=key) for key, value in payload.items()]

        if not isinstance(payload, list):
            raise ParseError(f"{self.key}: expected array, got {type(payload).__name__}")
        return [self.codec.decode(item) for item in payload]

    def _persist(self) -> None:
        text = json.dumps(
            self._encode(),
            ensure_ascii=False,
            indent=2 if self.pretty else None,
        )
        self.port.write(self.key, text)
