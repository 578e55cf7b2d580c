# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Normalized forms of raw property declarations and property collections.

Raw declarations are introspected exactly once, here. The parsers work on
the resulting variants only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from objschema.errors import SchemaError
from objschema.host.values import (
    UNDEFINED,
    get_element,
    get_property,
    get_property_names,
    is_array,
    is_object,
    is_undefined,
    validated_get_length,
    validated_get_string,
    validated_to_boolean,
    validated_to_string,
)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class BareDeclaration:
    """A property declared by its type name alone, e.g. ``"string"``."""

    type_name: str


@dataclass(frozen=True)
class DescriptorDeclaration:
    """A property declared with a descriptor object.

    Optional flags that were not supplied are None. ``object_type`` and
    ``default`` are kept raw and use :data:`UNDEFINED` when absent, since
    only list and object properties read ``objectType`` and None is a valid
    default value.
    """

    type_name: str
    optional: bool | None = None
    indexed: bool | None = None
    object_type: Any = UNDEFINED
    default: Any = UNDEFINED


PropertyDeclaration = BareDeclaration | DescriptorDeclaration


@dataclass(frozen=True)
class OrderedProperties:
    """Properties supplied as an array of descriptors, each carrying its own name."""

    entries: list[tuple[str, Any]]


@dataclass(frozen=True)
class KeyedProperties:
    """Properties supplied as a mapping of property name to declaration."""

    entries: list[tuple[str, Any]]


PropertyCollection = OrderedProperties | KeyedProperties


def normalize_property_declaration(raw: object, property_name: str) -> PropertyDeclaration:
    """Turn a raw property declaration into a :data:`PropertyDeclaration`.

    Raises:
        CoercionError: If the type name or an optional field has the wrong type.
    """
    if not is_object(raw):
        return BareDeclaration(
            type_name=validated_to_string(raw, f"Type of property '{property_name}'"),
        )

    optional = get_property(raw, "optional")
    indexed = get_property(raw, "indexed")
    return DescriptorDeclaration(
        type_name=validated_get_string(raw, "type"),
        optional=None if is_undefined(optional) else validated_to_boolean(optional, "'optional'"),
        indexed=None if is_undefined(indexed) else validated_to_boolean(indexed, "'indexed'"),
        object_type=get_property(raw, "objectType"),
        default=get_property(raw, "default"),
    )


def normalize_property_collection(raw: object, object_name: str) -> PropertyCollection:
    """Turn the raw ``properties`` field of an object declaration into a :data:`PropertyCollection`.

    Raises:
        SchemaError: If *raw* is neither an array nor an object, or an array
            entry is not a named descriptor object.
    """
    if is_array(raw):
        entries: list[tuple[str, Any]] = []
        for index in range(validated_get_length(raw, "'properties'")):
            entry = get_element(raw, index)  # type: ignore[arg-type]
            if not is_object(entry):
                raise SchemaError(f"ObjectSchema '{object_name}': properties[{index}] must be an object")
            name = get_property(entry, "name")
            if not isinstance(name, str) or not name:
                raise SchemaError(f"ObjectSchema '{object_name}': properties[{index}] must have a 'name' string")
            entries.append((name, entry))
        return OrderedProperties(entries=entries)

    if is_object(raw):
        names = get_property_names(raw)  # type: ignore[arg-type]
        for name in names:
            if not isinstance(name, str) or not name:
                raise SchemaError(f"ObjectSchema '{object_name}': property name {name!r} must be a non-empty string")
        return KeyedProperties(entries=[(name, get_property(raw, name)) for name in names])

    raise SchemaError("ObjectSchema must have a 'properties' object.")
