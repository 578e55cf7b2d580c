# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Capability surface over native Python values used by the schema parser.

Schema declarations arrive as plain Python data: mappings act as objects,
non-string sequences act as arrays and classes (or any other callable that
is not a mapping) act as constructors. Missing fields are reported as the
:data:`UNDEFINED` sentinel so that an explicit ``None`` can still be told
apart from absence.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from objschema.errors import CoercionError, SchemaError

# ###############
# Public Interface
# ###############

T = TypeVar("T")


class _Undefined:
    """Marker type for a field that is not present at all."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


@dataclass(frozen=True)
class Protected(Generic[T]):
    """An owned handle that keeps a host value alive for as long as it exists.

    The parser stores default values and constructors in these handles
    without ever looking at the wrapped value.

    Attributes:
        value: The wrapped host value.
    """

    value: T


def is_object(value: object) -> bool:
    """Return True if *value* is an object (a mapping)."""
    return isinstance(value, Mapping)


def is_array(value: object) -> bool:
    """Return True if *value* is an array (a sequence that is not text or bytes)."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def is_constructor(value: object) -> bool:
    """Return True if *value* can act as a constructor."""
    return callable(value) and not is_object(value)


def is_undefined(value: object) -> bool:
    """Return True if *value* is the :data:`UNDEFINED` sentinel."""
    return value is UNDEFINED


def get_property(obj: object, name: str) -> Any:
    """Return the field *name* of *obj*, or :data:`UNDEFINED` if it is absent.

    Mappings are read by key; constructors are read by attribute.
    """
    if is_object(obj):
        return obj.get(name, UNDEFINED)  # type: ignore[attr-defined]
    return getattr(obj, name, UNDEFINED)


def get_property_names(obj: Mapping[str, Any]) -> list[str]:
    """Return the field names of *obj* in iteration order."""
    return list(obj.keys())


def get_element(array: Sequence[Any], index: int) -> Any:
    """Return the element at *index* of *array*."""
    return array[index]


def set_property(obj: dict[str, Any], name: str, value: Any) -> None:
    """Set the field *name* of *obj* to *value*."""
    obj[name] = value


def create_empty_object() -> dict[str, Any]:
    """Return a new, empty object."""
    return {}


def validated_to_string(value: object, name: str | None = None) -> str:
    """Return *value* if it is a string.

    Raises:
        CoercionError: If *value* is not a string.
    """
    if not isinstance(value, str):
        raise CoercionError(f"{_label(name)} must be of type 'string', got {_describe(value)}")
    return value


def validated_to_boolean(value: object, name: str | None = None) -> bool:
    """Return *value* if it is a boolean.

    Raises:
        CoercionError: If *value* is not a boolean.
    """
    if not isinstance(value, bool):
        raise CoercionError(f"{_label(name)} must be of type 'boolean', got {_describe(value)}")
    return value


def validated_get_length(array: object, name: str | None = None) -> int:
    """Return the length of *array*.

    Raises:
        CoercionError: If *array* is not an array.
    """
    if not is_array(array):
        raise CoercionError(f"{_label(name)} must be of type 'array', got {_describe(array)}")
    return len(array)  # type: ignore[arg-type]


def validated_get_string(obj: object, name: str) -> str:
    """Return the string field *name* of *obj*.

    Raises:
        CoercionError: If the field is missing or not a string.
    """
    return validated_to_string(get_property(obj, name), f"'{name}'")


def validated_get_object(obj: object, name: str, message: str | None = None) -> Mapping[str, Any]:
    """Return the object field *name* of *obj*.

    Args:
        obj: The object to read from.
        name: The field name.
        message: Error message used when the field is not an object.

    Raises:
        SchemaError: If the field is missing or not an object.
    """
    value = get_property(obj, name)
    if not is_object(value):
        raise SchemaError(message or f"'{name}' must be of type 'object', got {_describe(value)}")
    return value


# ################
# Implementation
# ################


def _label(name: str | None) -> str:
    return name if name else "Value"


def _describe(value: object) -> str:
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    return f"'{type(value).__name__}'"
