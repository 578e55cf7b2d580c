# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Conversion of positional property values into a name-keyed mapping."""

from __future__ import annotations

from typing import Any

from objschema.errors import InvalidArgumentError
from objschema.host.values import create_empty_object, get_element, set_property, validated_get_length
from objschema.model.entities import ObjectSchema

# ###############
# Public Interface
# ###############


def dict_for_property_array(object_schema: ObjectSchema, value_array: object) -> dict[str, Any]:
    """Pair each property of *object_schema* with the value at the same position.

    Values are not checked against the property types.

    Raises:
        CoercionError: If *value_array* is not an array.
        InvalidArgumentError: If the array length differs from the property count.
    """
    count = len(object_schema.properties)
    if count != validated_get_length(value_array, "Property values"):
        raise InvalidArgumentError("Array must contain values for all object properties")

    result = create_empty_object()
    for index, prop in enumerate(object_schema.properties):
        set_property(result, prop.name, get_element(value_array, index))  # type: ignore[arg-type]
    return result
