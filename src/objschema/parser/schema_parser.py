# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parsing of a full schema declaration into a :class:`Schema`."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from objschema.errors import SchemaError
from objschema.host.values import get_element, is_array
from objschema.model.entities import ObjectSchema, Schema
from objschema.parser.object_schema_parser import ConstructorMap, ObjectDefaultsMap, parse_object_schema

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass
class ParseResult:
    """A parsed schema together with the auxiliary data pulled out of it.

    Attributes:
        schema: The parsed schema.
        defaults: Default property values keyed by type name, then property name.
        constructors: Constructors keyed by type name.
    """

    schema: Schema
    defaults: ObjectDefaultsMap = field(default_factory=dict)
    constructors: ConstructorMap = field(default_factory=dict)


def parse_schema(
    declarations: object,
    defaults_map_out: ObjectDefaultsMap,
    constructors_out: ConstructorMap,
    *,
    atomic: bool = False,
) -> Schema:
    """Parse an array of object type declarations, keeping their order.

    Cross-type references are not resolved here; see
    :func:`objschema.validation.validate`.

    The first failing declaration aborts the parse and its error propagates
    unchanged. By default, entries already written to *defaults_map_out* and
    *constructors_out* for earlier declarations are left in place. With
    ``atomic=True`` both maps are restored to their state before the call.

    Args:
        declarations: Array of object type declarations.
        defaults_map_out: Receives default values per type.
        constructors_out: Receives constructors per type.
        atomic: Restore both output maps when parsing fails.

    Returns:
        The parsed :class:`Schema`.

    Raises:
        SchemaError: If *declarations* is not an array or a declaration is malformed.
        CoercionError: If a declared field has the wrong primitive type.
    """
    if not is_array(declarations):
        raise SchemaError("Schema must be an array of object schemas.")

    if not atomic:
        return _parse_all(declarations, defaults_map_out, constructors_out)  # type: ignore[arg-type]

    defaults_snapshot = dict(defaults_map_out)
    constructors_snapshot = dict(constructors_out)
    try:
        return _parse_all(declarations, defaults_map_out, constructors_out)  # type: ignore[arg-type]
    except Exception:
        logger.debug("Schema parse failed; restoring output maps")
        defaults_map_out.clear()
        defaults_map_out.update(defaults_snapshot)
        constructors_out.clear()
        constructors_out.update(constructors_snapshot)
        raise


def parse_schema_with_defaults(declarations: object, *, atomic: bool = False) -> ParseResult:
    """Parse *declarations* into fresh output maps and return everything as a :class:`ParseResult`."""
    result = ParseResult(schema=Schema())
    result.schema = parse_schema(declarations, result.defaults, result.constructors, atomic=atomic)
    return result


# ################
# Implementation
# ################


def _parse_all(
    declarations: list[object],
    defaults_map_out: ObjectDefaultsMap,
    constructors_out: ConstructorMap,
) -> Schema:
    object_schemas: list[ObjectSchema] = []
    for index in range(len(declarations)):
        object_schemas.append(parse_object_schema(get_element(declarations, index), defaults_map_out, constructors_out))
    logger.debug("Parsed schema with %d object types", len(object_schemas))
    return Schema(object_schemas=object_schemas)
