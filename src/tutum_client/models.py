"""Typed records for Tutum API responses.

Every JSON body is decoded into a dataclass with a fixed shape:
- unknown fields are ignored
- missing fields and JSON ``null`` take the field's zero value
- a value of the wrong type raises DecodeError naming the field

List endpoints wrap their records in an envelope::

    {"objects": [...], "meta": {"next": "/api/v1/stack/?offset=25", ...}}

which is modelled by PaginatedResponse.
"""

import json
from collections.abc import Callable
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Generic, Self, TypeVar, get_args, get_origin, get_type_hints

from tutum_client.errors.exceptions import DecodeError

T = TypeVar("T")


def decode_json(payload: bytes | str) -> Any:
    """Parse a response body, raising DecodeError on invalid JSON."""
    try:
        return json.loads(payload)
    except ValueError as e:
        raise DecodeError(f"Invalid JSON in response body: {e}") from e


def _type_name(value: Any) -> str:
    return type(value).__name__


def _coerce(expected: Any, value: Any, path: str) -> Any:
    origin = get_origin(expected)

    if origin is list:
        if not isinstance(value, list):
            raise DecodeError(f"Field '{path}' must be a list, got {_type_name(value)}", field=path)
        args = get_args(expected)
        item_type = args[0] if args else Any
        return [_coerce(item_type, item, f"{path}[{index}]") for index, item in enumerate(value)]

    if origin is dict:
        if not isinstance(value, dict):
            raise DecodeError(f"Field '{path}' must be an object, got {_type_name(value)}", field=path)
        return value

    if expected is Any:
        return value

    if isinstance(expected, type) and issubclass(expected, Model):
        return expected.from_dict(value, _path=path)

    # bool is a subclass of int, so it is checked explicitly both ways
    if expected is bool:
        valid = isinstance(value, bool)
    elif expected is int:
        valid = isinstance(value, int) and not isinstance(value, bool)
    elif expected is float:
        valid = isinstance(value, (int, float)) and not isinstance(value, bool)
        value = float(value) if valid else value
    elif expected is str:
        valid = isinstance(value, str)
    else:
        valid = True

    if not valid:
        raise DecodeError(
            f"Field '{path}' must be {expected.__name__}, got {_type_name(value)}",
            field=path,
        )
    return value


@dataclass
class Model:
    """Base class for decoded API records.

    Subclasses are plain dataclasses whose fields all have zero-value
    defaults.
    """

    @classmethod
    def from_dict(cls, data: Any, _path: str = "") -> Self:
        """Build a record from a decoded JSON object.

        Raises:
            DecodeError: If ``data`` is not an object or a field has the
                wrong type.
        """
        if not isinstance(data, dict):
            where = f"'{_path}'" if _path else cls.__name__
            raise DecodeError(f"Expected a JSON object for {where}, got {_type_name(data)}", field=_path or None)

        hints = get_type_hints(cls)
        kwargs = {}
        for f in fields(cls):
            value = data.get(f.name)
            if value is None:
                continue
            path = f"{_path}.{f.name}" if _path else f.name
            kwargs[f.name] = _coerce(hints[f.name], value, path)
        return cls(**kwargs)

    @classmethod
    def from_json(cls, payload: bytes | str) -> Self:
        return cls.from_dict(decode_json(payload))

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ListMeta(Model):
    """Pagination metadata of a list response."""

    limit: int = 0
    next: str = ""
    offset: int = 0
    previous: str = ""
    total_count: int = 0


@dataclass
class PaginatedResponse(Generic[T]):
    """One page of a list endpoint.

    Attributes:
        objects: The records on this page, in server order.
        meta: Pagination metadata; ``meta.next`` is empty on the last page.
    """

    objects: list[T] = field(default_factory=list)
    meta: ListMeta = field(default_factory=ListMeta)

    @property
    def next(self) -> str:
        """Reference to the following page, or "" on the last page."""
        return self.meta.next

    @classmethod
    def from_dict(cls, data: Any, item: Callable[[Any], T] | None = None) -> "PaginatedResponse[T]":
        """Parse a list envelope.

        Args:
            data: Decoded JSON body.
            item: Converts each raw object, e.g. ``Stack.from_dict``. Raw
                JSON values are kept when omitted.

        Raises:
            DecodeError: If the envelope or any object is malformed.
        """
        if not isinstance(data, dict):
            raise DecodeError(f"Expected a list envelope object, got {_type_name(data)}")

        raw_objects = data.get("objects")
        if raw_objects is None:
            raw_objects = []
        if not isinstance(raw_objects, list):
            raise DecodeError(f"Field 'objects' must be a list, got {_type_name(raw_objects)}", field="objects")

        objects = [item(obj) for obj in raw_objects] if item is not None else list(raw_objects)
        meta = ListMeta.from_dict(data.get("meta") or {}, _path="meta")
        return cls(objects=objects, meta=meta)

    @classmethod
    def from_json(cls, payload: bytes | str, item: Callable[[Any], T] | None = None) -> "PaginatedResponse[T]":
        return cls.from_dict(decode_json(payload), item=item)

    def to_dict(self) -> dict[str, Any]:
        """Render the page back into its wire envelope."""
        objects = [obj.to_dict() if isinstance(obj, Model) else obj for obj in self.objects]
        return {"objects": objects, "meta": self.meta.to_dict()}
