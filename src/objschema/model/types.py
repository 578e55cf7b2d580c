# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Property kinds and the property model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

# ###############
# Public Interface
# ###############


class PropertyType(Enum):
    """The closed set of value kinds a property can hold."""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"
    DATE = "date"
    DATA = "data"
    LIST = "list"
    OBJECT = "object"


# Kinds whose properties name a target type in ``object_type``.
LINK_TYPES = frozenset({PropertyType.LIST, PropertyType.OBJECT})


class Property(BaseModel):
    """A named, typed property of an object type.

    ``object_type`` is only meaningful for list and object properties, where
    it names the target object type.
    """

    name: str
    type: PropertyType
    object_type: str = ""
    is_nullable: bool = False
    is_indexed: bool = False
    is_primary: bool = False

    @property
    def is_link(self) -> bool:
        """Return True if this property refers to another object type."""
        return self.type in LINK_TYPES
