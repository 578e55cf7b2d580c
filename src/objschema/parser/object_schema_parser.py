# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parsing of a single object type declaration into an :class:`ObjectSchema`."""

from __future__ import annotations

import logging
from typing import Any

from objschema.errors import SchemaError
from objschema.host.values import (
    Protected,
    get_property,
    is_constructor,
    is_object,
    is_undefined,
    validated_get_object,
    validated_to_string,
)
from objschema.model.entities import ObjectSchema
from objschema.parser.declarations import normalize_property_collection
from objschema.parser.property_parser import ObjectDefaults, parse_property

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

ObjectDefaultsMap = dict[str, ObjectDefaults]
ConstructorMap = dict[str, Protected[Any]]


def parse_object_schema(
    declaration: object,
    defaults_map_out: ObjectDefaultsMap,
    constructors_out: ConstructorMap,
) -> ObjectSchema:
    """Parse one object type declaration.

    The declaration is either a descriptor object with ``name``,
    ``properties`` and an optional ``primaryKey``, or a constructor (such as
    a class) whose ``schema`` attribute holds that descriptor. ``properties``
    may be an array of named property descriptors or a mapping of property
    name to declaration; both keep their iteration order.

    Args:
        declaration: The raw declaration.
        defaults_map_out: Receives the defaults of this type keyed by type
            name. An entry is added even when no property declares a default.
        constructors_out: Receives the constructor keyed by type name, when
            the declaration is a constructor.

    Returns:
        The parsed :class:`ObjectSchema`.

    Raises:
        SchemaError: If the declaration is malformed or the primary key does
            not name a declared property.
        CoercionError: If a field has the wrong primitive type.
    """
    constructor: object | None = None
    if is_constructor(declaration):
        constructor = declaration
        descriptor = validated_get_object(
            declaration,
            "schema",
            "Object constructor must have a 'schema' property.",
        )
    elif is_object(declaration):
        descriptor = declaration  # type: ignore[assignment]
    else:
        raise SchemaError("ObjectSchema must be an object or a constructor with a 'schema' property.")

    name = get_property(descriptor, "name")
    if not isinstance(name, str) or not name:
        raise SchemaError("ObjectSchema must have a non-empty 'name' string.")

    object_defaults: ObjectDefaults = {}
    object_schema = ObjectSchema(name=name)

    collection = normalize_property_collection(get_property(descriptor, "properties"), name)
    for property_name, property_declaration in collection.entries:
        object_schema.properties.append(parse_property(property_declaration, property_name, object_defaults))

    primary_value = get_property(descriptor, "primaryKey")
    if not is_undefined(primary_value):
        primary_key = validated_to_string(primary_value, "'primaryKey'")
        object_schema.primary_key = primary_key
        prop = object_schema.primary_key_property()
        if prop is None:
            raise SchemaError(f"Missing primary key property '{primary_key}'")
        prop.is_primary = True

    if constructor is not None:
        constructors_out.setdefault(name, Protected(constructor))

    defaults_map_out.setdefault(name, object_defaults)

    logger.debug(
        "Parsed object schema '%s' with %d properties (primary key: %s)",
        name,
        len(object_schema.properties),
        object_schema.primary_key,
    )
    return object_schema
