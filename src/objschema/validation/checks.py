# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for parsed schemas.

The parser validates each declaration on its own. These checks look at the
schema as a whole: they resolve references between object types and apply
the rules a storage engine enforces before accepting a schema.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from objschema.model.entities import ObjectSchema, Schema
from objschema.model.types import PropertyType

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationWarning:
    """A non-fatal issue found in a schema.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


@dataclass(frozen=True)
class ValidationError:
    """A schema rule violation that makes the schema unusable.

    Attributes:
        message: Human-readable description of the error.
    """

    message: str


@dataclass
class ValidationResult:
    """Result of running the schema consistency checks.

    Attributes:
        warnings: Non-fatal issues.
        errors: Violations that make the schema invalid.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any errors were found."""
        return len(self.errors) > 0


def validate(schema: Schema) -> ValidationResult:
    """Run all consistency checks on a parsed schema.

    Checks performed:

    1. **Duplicate object types** (error): two object types share a name.
    2. **Duplicate properties** (error): two properties of one object type
       share a name.
    3. **Unresolved references** (error): a list or object property names an
       ``object_type`` that is not declared in the schema.
    4. **Primary key kind** (error): the primary key property is neither
       ``int`` nor ``string``, or it is nullable.
    5. **Unindexable properties** (warning): ``indexed`` is set on a kind
       that cannot be indexed.

    Args:
        schema: The parsed schema.

    Returns:
        A :class:`ValidationResult`. An empty result means the schema is consistent.
    """
    warnings: list[ValidationWarning] = []
    errors: list[ValidationError] = []

    errors.extend(_check_duplicate_object_types(schema))
    declared = {object_schema.name for object_schema in schema.object_schemas}
    for object_schema in schema.object_schemas:
        errors.extend(_check_duplicate_properties(object_schema))
        errors.extend(_check_references(object_schema, declared))
        errors.extend(_check_primary_key(object_schema))
        warnings.extend(_check_indexed(object_schema))

    return ValidationResult(warnings=warnings, errors=errors)


# ################
# Implementation
# ################

_PRIMARY_KEY_TYPES = frozenset({PropertyType.INT, PropertyType.STRING})
_INDEXABLE_TYPES = frozenset(
    {PropertyType.BOOL, PropertyType.INT, PropertyType.STRING, PropertyType.DATE},
)


def _duplicates(names: list[str]) -> list[str]:
    """Return the names occurring more than once, in order of first occurrence."""
    counts = Counter(names)
    return [name for name in counts if counts[name] > 1]


def _check_duplicate_object_types(schema: Schema) -> list[ValidationError]:
    return [
        ValidationError(f"Duplicate object type '{name}'")
        for name in _duplicates([o.name for o in schema.object_schemas])
    ]


def _check_duplicate_properties(object_schema: ObjectSchema) -> list[ValidationError]:
    return [
        ValidationError(f"'{object_schema.name}': duplicate property '{name}'")
        for name in _duplicates([p.name for p in object_schema.properties])
    ]


def _check_references(object_schema: ObjectSchema, declared: set[str]) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for prop in object_schema.properties:
        if prop.is_link and prop.object_type not in declared:
            errors.append(
                ValidationError(
                    f"'{object_schema.name}.{prop.name}': target object type '{prop.object_type}' does not exist"
                )
            )
    return errors


def _check_primary_key(object_schema: ObjectSchema) -> list[ValidationError]:
    prop = object_schema.primary_key_property()
    if prop is None:
        return []

    errors: list[ValidationError] = []
    label = f"'{object_schema.name}.{prop.name}'"
    if prop.type not in _PRIMARY_KEY_TYPES:
        errors.append(
            ValidationError(f"{label}: primary key must be of type 'int' or 'string', not '{prop.type.value}'")
        )
    if prop.is_nullable:
        errors.append(ValidationError(f"{label}: primary key cannot be optional"))
    return errors


def _check_indexed(object_schema: ObjectSchema) -> list[ValidationWarning]:
    return [
        ValidationWarning(
            f"'{object_schema.name}.{prop.name}': properties of type '{prop.type.value}' cannot be indexed"
        )
        for prop in object_schema.properties
        if prop.is_indexed and prop.type not in _INDEXABLE_TYPES
    ]
