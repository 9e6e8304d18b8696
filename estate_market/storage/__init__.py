"""Persistence ports and JSON serialization."""

from estate_market.storage.ports import InMemoryPort, JsonFilePort, PersistencePort
from estate_market.storage.serialization import from_dict, serialize_value, to_dict

__all__ = [
    "InMemoryPort",
    "JsonFilePort",
    "PersistencePort",
    "from_dict",
    "serialize_value",
    "to_dict",
]
