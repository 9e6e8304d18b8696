"""Entity codecs: how a store keys, encodes, decodes and builds its entities."""

from dataclasses import MISSING, fields
from typing import Any, Generic, Protocol, TypeVar

from estate_market.exceptions import ParseError, ValidationError
from estate_market.storage.serialization import from_dict, json_key, serialize_value, to_dict

T = TypeVar("T")


class EntityCodec(Protocol[T]):
    def key(self, entity: T) -> str:
        ...

    def encode(self, entity: T, keyed: bool = False) -> Any:
        ...

    def decode(self, raw: Any, key: str | None = None) -> T:
        ...


class DataclassCodec(Generic[T]):
    """Codec for dataclass entities keyed by one of their fields.

    Parameters
    ----------
    cls : type
        Entity dataclass.
    key_field : str
        Attribute holding the stable identifier.
    """

    def __init__(self, cls: type[T], key_field: str = "id") -> None:
        self.cls = cls
        self.key_field = key_field
        self._fields = {f.name: f for f in fields(cls)}
        if key_field not in self._fields:
            raise ValueError(f"{cls.__name__} has no field {key_field!r}")
        self._key_json = json_key(self._fields[key_field])

    def key(self, entity: T) -> str:
        return getattr(entity, self.key_field)

    def has_field(self, name: str) -> bool:
        return name in self._fields

    def required_fields(self) -> list[str]:
        return [
            f.name
            for f in self._fields.values()
            if f.default is MISSING and f.default_factory is MISSING
        ]

    def encode(self, entity: T, keyed: bool = False) -> dict:
        data = to_dict(entity)
        if keyed:
            data.pop(self._key_json, None)
        return data

    def decode(self, raw: Any, key: str | None = None) -> T:
        if key is not None:
            if not isinstance(raw, dict):
                raise ParseError(f"{self.cls.__name__} {key}: expected object")
            raw = {**raw, self._key_json: key}
        return from_dict(self.cls, raw)

    def build(self, values: dict[str, Any]) -> T:
        """Construct a new entity, rejecting unknown or missing fields.

        Nested values may be dataclass instances or plain dicts keyed by
        field name or JSON key; enums may be given by value.
        """
        self._check_known(values)
        missing = [
            name
            for name in self.required_fields()
            if values.get(name) is None
        ]
        if missing:
            raise ValidationError(
                f"{self.cls.__name__} missing required fields: {', '.join(missing)}"
            )
        return self._typed(self._payload(values))

    def patch(self, entity: T, changes: dict[str, Any]) -> T:
        """Return a copy of ``entity`` with ``changes`` applied."""
        self._check_known(changes)
        cleared = [
            name
            for name, value in changes.items()
            if value is None and name in self.required_fields()
        ]
        if cleared:
            raise ValidationError(
                f"{self.cls.__name__} required fields cannot be cleared: {', '.join(cleared)}"
            )
        return self._typed({**to_dict(entity), **self._payload(changes)})

    def _payload(self, values: dict[str, Any]) -> dict[str, Any]:
        return {json_key(self._fields[name]): serialize_value(value) for name, value in values.items()}

    def _typed(self, payload: dict[str, Any]) -> T:
        # Decoded exactly like a persisted payload
        try:
            return from_dict(self.cls, payload)
        except ParseError as e:
            raise ValidationError(f"Invalid {self.cls.__name__}: {e}") from e

    def _check_known(self, values: dict[str, Any]) -> None:
        unknown = sorted(set(values) - set(self._fields))
        if unknown:
            raise ValidationError(
                f"{self.cls.__name__} has no fields: {', '.join(unknown)}"
            )


class StringCodec:
    """Codec for collections of bare string ids (the wishlist)."""

    def key(self, entity: str) -> str:
        return entity

    def encode(self, entity: str, keyed: bool = False) -> str:
        return entity

    def decode(self, raw: Any, key: str | None = None) -> str:
        if not isinstance(raw, str):
            raise ParseError(f"Expected string id, got {type(raw).__name__}")
        return raw
