# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parsers turning untyped schema declarations into the typed schema model."""

from objschema.errors import CoercionError, InvalidArgumentError, SchemaError
from objschema.parser.adapter import dict_for_property_array
from objschema.parser.object_schema_parser import ConstructorMap, ObjectDefaultsMap, parse_object_schema
from objschema.parser.property_parser import ObjectDefaults, parse_property
from objschema.parser.schema_parser import ParseResult, parse_schema, parse_schema_with_defaults

__all__ = [
    "CoercionError",
    "ConstructorMap",
    "InvalidArgumentError",
    "ObjectDefaults",
    "ObjectDefaultsMap",
    "ParseResult",
    "SchemaError",
    "dict_for_property_array",
    "parse_object_schema",
    "parse_property",
    "parse_schema",
    "parse_schema_with_defaults",
]
