# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of parsed schemas.

Schemas are stored as compact JSON. The format is versioned so future
changes can be detected.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from objschema.model.entities import ObjectSchema, Schema
from objschema.model.types import Property, PropertyType

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"
ARTIFACT_SUFFIX = ".schema.json"


def serialize(schema: Schema) -> str:
    """Serialize a Schema to a compact JSON string."""
    return json.dumps(_schema_to_dict(schema), separators=(",", ":"))


def deserialize(data: str) -> Schema:
    """Deserialize a Schema from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`Schema`.

    Raises:
        ValueError: If the artifact format version is not recognised.
    """
    obj = json.loads(data)
    version = obj.get("v")
    if version != ARTIFACT_FORMAT_VERSION:
        raise ValueError(f"Unsupported artifact format version: {version!r}")
    return Schema(object_schemas=[_object_schema_from_dict(o) for o in obj.get("objects", [])])


def write_artifact(schema: Schema, path: Path) -> None:
    """Write a schema artifact to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(schema), encoding="utf-8")


def read_artifact(path: Path) -> Schema:
    """Read and deserialize a schema artifact from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))


# ################
# Implementation
# ################


def _schema_to_dict(schema: Schema) -> dict[str, Any]:
    return {
        "v": ARTIFACT_FORMAT_VERSION,
        "objects": [_object_schema_to_dict(o) for o in schema.object_schemas],
    }


def _object_schema_to_dict(object_schema: ObjectSchema) -> dict[str, Any]:
    d: dict[str, Any] = {
        "name": object_schema.name,
        "properties": [_property_to_dict(p) for p in object_schema.properties],
    }
    if object_schema.primary_key is not None:
        d["primaryKey"] = object_schema.primary_key
    return d


def _object_schema_from_dict(obj: dict[str, Any]) -> ObjectSchema:
    return ObjectSchema(
        name=obj["name"],
        properties=[_property_from_dict(p) for p in obj.get("properties", [])],
        primary_key=obj.get("primaryKey"),
    )


def _property_to_dict(prop: Property) -> dict[str, Any]:
    # Flags are only written when set.
    d: dict[str, Any] = {"name": prop.name, "type": prop.type.value}
    if prop.object_type:
        d["objectType"] = prop.object_type
    if prop.is_nullable:
        d["nullable"] = True
    if prop.is_indexed:
        d["indexed"] = True
    if prop.is_primary:
        d["primary"] = True
    return d


def _property_from_dict(obj: dict[str, Any]) -> Property:
    return Property(
        name=obj["name"],
        type=PropertyType(obj["type"]),
        object_type=obj.get("objectType", ""),
        is_nullable=obj.get("nullable", False),
        is_indexed=obj.get("indexed", False),
        is_primary=obj.get("primary", False),
    )
