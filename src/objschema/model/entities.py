# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Object type and schema models."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import Field as _Field

from objschema.model.types import Property

# ###############
# Public Interface
# ###############


class ObjectSchema(BaseModel):
    """An object type: a name, its properties in declaration order and an optional primary key."""

    name: str
    properties: list[Property] = _Field(default_factory=list)
    primary_key: str | None = None

    def property_for_name(self, name: str) -> Property | None:
        """Return the first property called *name*, or None."""
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    def primary_key_property(self) -> Property | None:
        """Return the property named by ``primary_key``, or None if there is none."""
        if self.primary_key is None:
            return None
        return self.property_for_name(self.primary_key)


class Schema(BaseModel):
    """An ordered collection of object types."""

    object_schemas: list[ObjectSchema] = _Field(default_factory=list)

    def find(self, name: str) -> ObjectSchema | None:
        """Return the first object type called *name*, or None."""
        for object_schema in self.object_schemas:
            if object_schema.name == name:
                return object_schema
        return None
