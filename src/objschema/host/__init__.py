# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Host-value capabilities (object/array introspection, kept-alive handles)."""

from objschema.host.values import (
    UNDEFINED,
    Protected,
    create_empty_object,
    get_element,
    get_property,
    get_property_names,
    is_array,
    is_constructor,
    is_object,
    is_undefined,
    set_property,
    validated_get_length,
    validated_get_object,
    validated_get_string,
    validated_to_boolean,
    validated_to_string,
)

__all__ = [
    "UNDEFINED",
    "Protected",
    "create_empty_object",
    "get_element",
    "get_property",
    "get_property_names",
    "is_array",
    "is_constructor",
    "is_object",
    "is_undefined",
    "set_property",
    "validated_get_length",
    "validated_get_object",
    "validated_get_string",
    "validated_to_boolean",
    "validated_to_string",
]
