# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Typed schema model (properties, object types, schemas)."""

from objschema.model.entities import ObjectSchema, Schema
from objschema.model.types import LINK_TYPES, Property, PropertyType

__all__ = [
    "PropertyType",
    "LINK_TYPES",
    "Property",
    "ObjectSchema",
    "Schema",
]
