"""JSON serialization for persisted entities.

Dataclass fields are written under camelCase keys (``seller_id`` becomes
``sellerId``); a field can override its key with ``metadata={"json": ...}``.
``None`` values are omitted so optional fields simply disappear from the
payload, the same way the storefront writes them.
"""

import types
from dataclasses import MISSING, Field, fields, is_dataclass
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Union, get_args, get_origin, get_type_hints

from estate_market.exceptions import ParseError


def json_key(f: Field) -> str:
    """Return the JSON key a dataclass field is stored under."""
    alias = f.metadata.get("json")
    if alias:
        return alias
    head, *rest = f.name.split("_")
    return head + "".join(part.title() for part in rest)


def to_dict(obj: Any) -> dict:
    """Convert a dataclass instance to its JSON dictionary."""
    if not is_dataclass(obj) or isinstance(obj, type):
        raise TypeError(f"Expected a dataclass instance, got {type(obj).__name__}")
    return dataclass_to_dict(obj)


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization."""
    result = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        result[json_key(f)] = serialize_value(value)
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if is_dataclass(value):
        return dataclass_to_dict(value)
    elif isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value


def parse_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def from_dict(cls: type, data: Any, path: str = "") -> Any:
    """Rebuild a dataclass instance from its JSON dictionary.

    Parameters
    ----------
    cls : type
        Target dataclass.
    data : Any
        Decoded JSON value. Keys are JSON keys; a plain field name is
        accepted where the JSON key is absent.
    path : str
        Location inside the payload, used in error messages.

    Returns
    -------
    Any
        Instance of ``cls``.

    Raises
    ------
    ParseError
        If the payload does not match the dataclass schema.
    """
    where = path or cls.__name__
    if not isinstance(data, dict):
        raise ParseError(f"{where}: expected object, got {type(data).__name__}")

    hints = get_type_hints(cls)
    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        key = json_key(f)
        if key not in data and f.name in data:
            key = f.name
        if key in data and data[key] is not None:
            kwargs[f.name] = _decode(hints[f.name], data[key], f"{where}.{key}")
        elif f.default is MISSING and f.default_factory is MISSING:
            if _is_optional(hints[f.name]):
                kwargs[f.name] = None
            else:
                raise ParseError(f"{where}: missing field {key!r}")
    return cls(**kwargs)


def _is_optional(tp: Any) -> bool:
    return get_origin(tp) in (Union, types.UnionType) and type(None) in get_args(tp)


def _decode(tp: Any, value: Any, path: str) -> Any:
    origin = get_origin(tp)

    if origin in (Union, types.UnionType):
        if value is None:
            return None
        inner = [arg for arg in get_args(tp) if arg is not type(None)]
        return _decode(inner[0], value, path)

    if origin is list:
        if not isinstance(value, list):
            raise ParseError(f"{path}: expected list")
        (item_type,) = get_args(tp) or (Any,)
        return [_decode(item_type, item, f"{path}[{i}]") for i, item in enumerate(value)]

    if origin is dict:
        if not isinstance(value, dict):
            raise ParseError(f"{path}: expected object")
        _, value_type = get_args(tp) or (str, Any)
        return {k: _decode(value_type, v, f"{path}.{k}") for k, v in value.items()}

    if tp is Any:
        return value

    if is_dataclass(tp):
        return from_dict(tp, value, path)

    if isinstance(tp, type) and issubclass(tp, Enum):
        try:
            return tp(value)
        except ValueError as e:
            raise ParseError(f"{path}: {e}") from e

    if tp is datetime:
        if not isinstance(value, str):
            raise ParseError(f"{path}: expected ISO timestamp")
        try:
            return parse_datetime(value)
        except ValueError as e:
            raise ParseError(f"{path}: {e}") from e

    if tp is bool:
        if not isinstance(value, bool):
            raise ParseError(f"{path}: expected boolean")
        return value

    if tp is int:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ParseError(f"{path}: expected integer")
        if isinstance(value, float) and not value.is_integer():
            raise ParseError(f"{path}: expected integer, got {value}")
        return int(value)

    if tp is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ParseError(f"{path}: expected number")
        return float(value)

    if tp is Decimal:
        try:
            return Decimal(str(value))
        except InvalidOperation as e:
            raise ParseError(f"{path}: invalid decimal {value!r}") from e

    if tp is str:
        if not isinstance(value, str):
            raise ParseError(f"{path}: expected string")
        return value

    return value
