# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parsing of a single property declaration into a :class:`Property`."""

from __future__ import annotations

import logging
from typing import Any

from objschema.errors import SchemaError
from objschema.host.values import Protected, is_undefined, validated_to_string
from objschema.model.types import Property, PropertyType
from objschema.parser.declarations import (
    BareDeclaration,
    DescriptorDeclaration,
    PropertyDeclaration,
    normalize_property_declaration,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

ObjectDefaults = dict[str, Protected[Any]]


def parse_property(declaration: object, property_name: str, defaults_out: ObjectDefaults) -> Property:
    """Parse one property declaration.

    The declaration is either a bare type name (``"int"``, ``"Person"``) or a
    descriptor object with a ``type`` and optional ``optional``, ``indexed``,
    ``default`` and ``objectType`` fields. Type names outside the built-in
    set are forward references to another object type; such properties are
    always nullable.

    Args:
        declaration: The raw declaration.
        property_name: Name given to the resulting property.
        defaults_out: Receives the declared default value, if any, keyed by
            *property_name*. The default is never stored on the property.

    Returns:
        The parsed :class:`Property`.

    Raises:
        SchemaError: If a list or object property does not name its ``objectType``.
        CoercionError: If a field has the wrong primitive type.
    """
    decl = normalize_property_declaration(declaration, property_name)
    prop = _resolve_type(decl, property_name)

    if isinstance(decl, DescriptorDeclaration):
        if decl.indexed is not None:
            prop.is_indexed = decl.indexed
        if not is_undefined(decl.default):
            defaults_out.setdefault(property_name, Protected(decl.default))

    logger.debug(
        "Parsed property '%s' (type=%s, object_type=%r, nullable=%s)",
        prop.name,
        prop.type.value,
        prop.object_type,
        prop.is_nullable,
    )
    return prop


# ################
# Implementation
# ################

_SCALAR_TYPES: dict[str, PropertyType] = {
    "bool": PropertyType.BOOL,
    "int": PropertyType.INT,
    "float": PropertyType.FLOAT,
    "double": PropertyType.DOUBLE,
    "string": PropertyType.STRING,
    "date": PropertyType.DATE,
    "data": PropertyType.DATA,
}


def _resolve_type(decl: PropertyDeclaration, property_name: str) -> Property:
    """Build the property for *decl*, applying ``optional`` where the kind allows it."""
    type_name = decl.type_name
    optional = decl.optional if isinstance(decl, DescriptorDeclaration) else None

    if not type_name:
        raise SchemaError(f"Property '{property_name}' must specify a type")

    if type_name in _SCALAR_TYPES:
        return Property(
            name=property_name,
            type=_SCALAR_TYPES[type_name],
            is_nullable=bool(optional),
        )

    if type_name == "list":
        return Property(
            name=property_name,
            type=PropertyType.LIST,
            object_type=_require_object_type(decl, "List property must specify 'objectType'"),
            is_nullable=bool(optional),
        )

    # Either the 'object' keyword or the name of another object type.
    if type_name == "object":
        object_type = _require_object_type(decl, "Object property must specify 'objectType'")
    else:
        object_type = type_name
    return Property(
        name=property_name,
        type=PropertyType.OBJECT,
        object_type=object_type,
        is_nullable=True,
    )


def _require_object_type(decl: PropertyDeclaration, message: str) -> str:
    if isinstance(decl, BareDeclaration) or is_undefined(decl.object_type):
        raise SchemaError(message)
    object_type = validated_to_string(decl.object_type, "'objectType'")
    if not object_type:
        raise SchemaError(message)
    return object_type
