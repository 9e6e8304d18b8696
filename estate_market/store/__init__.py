"""Persisted entity stores."""

from estate_market.store.codecs import DataclassCodec, EntityCodec, StringCodec
from estate_market.store.ids import IdFactory, utc_now
from estate_market.store.persistent import Layout, PersistentStore

__all__ = [
    "DataclassCodec",
    "EntityCodec",
    "IdFactory",
    "Layout",
    "PersistentStore",
    "StringCodec",
    "utc_now",
]
