# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for parsing single property declarations."""

import logging

import pytest

from objschema.errors import CoercionError, SchemaError
from objschema.host.values import UNDEFINED, Protected
from objschema.model.types import Property, PropertyType
from objschema.parser.property_parser import ObjectDefaults, parse_property

# ###############
# Helpers
# ###############


def _parse(declaration: object, name: str = "prop") -> tuple[Property, ObjectDefaults]:
    """Parse a declaration into a fresh defaults map and return both."""
    defaults: ObjectDefaults = {}
    return parse_property(declaration, name, defaults), defaults


# ###############
# Scalar Types
# ###############


@pytest.mark.parametrize(
    ("type_name", "expected"),
    [
        ("bool", PropertyType.BOOL),
        ("int", PropertyType.INT),
        ("float", PropertyType.FLOAT),
        ("double", PropertyType.DOUBLE),
        ("string", PropertyType.STRING),
        ("date", PropertyType.DATE),
        ("data", PropertyType.DATA),
    ],
)
def test_bare_scalar_type(type_name: str, expected: PropertyType) -> None:
    """A bare scalar type name yields that kind with every flag cleared."""
    prop, defaults = _parse(type_name, "value")
    assert prop == Property(name="value", type=expected)
    assert prop.object_type == ""
    assert not prop.is_nullable
    assert not prop.is_indexed
    assert not prop.is_primary
    assert defaults == {}


@pytest.mark.parametrize("type_name", ["bool", "int", "float", "double", "string", "date", "data"])
def test_descriptor_scalar_type_without_options(type_name: str) -> None:
    """A descriptor carrying only a scalar type matches the bare form."""
    prop, _ = _parse({"type": type_name}, "value")
    bare, _ = _parse(type_name, "value")
    assert prop == bare


def test_optional_makes_scalar_nullable() -> None:
    """optional: true sets is_nullable on a scalar property."""
    prop, _ = _parse({"type": "string", "optional": True})
    assert prop.type == PropertyType.STRING
    assert prop.is_nullable


def test_optional_false_keeps_scalar_required() -> None:
    """optional: false leaves a scalar property non-nullable."""
    prop, _ = _parse({"type": "int", "optional": False})
    assert not prop.is_nullable


def test_indexed_flag() -> None:
    """indexed: true sets is_indexed."""
    prop, _ = _parse({"type": "string", "indexed": True})
    assert prop.is_indexed
    assert not prop.is_nullable


def test_type_keywords_are_case_sensitive() -> None:
    """Type keywords match exactly; other spellings are object references."""
    prop, _ = _parse("String")
    assert prop.type == PropertyType.OBJECT
    assert prop.object_type == "String"


# ###############
# List Properties
# ###############


def test_list_with_object_type() -> None:
    """A list property copies its objectType verbatim."""
    prop, _ = _parse({"type": "list", "objectType": "Dog"}, "dogs")
    assert prop.type == PropertyType.LIST
    assert prop.object_type == "Dog"
    assert not prop.is_nullable


def test_bare_list_is_rejected() -> None:
    """A bare 'list' cannot name its element type."""
    with pytest.raises(SchemaError, match="List property must specify 'objectType'"):
        _parse("list")


def test_list_descriptor_without_object_type_is_rejected() -> None:
    """A list descriptor must carry objectType."""
    with pytest.raises(SchemaError, match="List property must specify 'objectType'"):
        _parse({"type": "list"})


def test_list_with_empty_object_type_is_rejected() -> None:
    """An empty objectType counts as missing."""
    with pytest.raises(SchemaError, match="List property must specify 'objectType'"):
        _parse({"type": "list", "objectType": ""})


def test_list_with_non_string_object_type() -> None:
    """objectType must be a string."""
    with pytest.raises(CoercionError, match="'objectType'"):
        _parse({"type": "list", "objectType": 3})


def test_object_with_non_string_object_type() -> None:
    """objectType of an 'object' property must be a string."""
    with pytest.raises(CoercionError, match="'objectType' must be of type 'string'"):
        _parse({"type": "object", "objectType": None})


@pytest.mark.parametrize("object_type", [5, None, ["Dog"], "Dog"])
def test_scalar_ignores_object_type(object_type: object) -> None:
    """Scalar kinds never read objectType, whatever its value."""
    prop, _ = _parse({"type": "int", "objectType": object_type}, "count")
    assert prop == Property(name="count", type=PropertyType.INT)
    assert prop.object_type == ""


def test_forward_reference_ignores_object_type() -> None:
    """A type-name reference takes its target from the type, not objectType."""
    prop, _ = _parse({"type": "Person", "objectType": 5}, "owner")
    assert prop.object_type == "Person"


# ###############
# Object References
# ###############


def test_object_keyword_with_object_type() -> None:
    """'object' with objectType yields a nullable reference."""
    prop, _ = _parse({"type": "object", "objectType": "Person"}, "owner")
    assert prop.type == PropertyType.OBJECT
    assert prop.object_type == "Person"
    assert prop.is_nullable


def test_bare_object_keyword_is_rejected() -> None:
    """A bare 'object' cannot name its target type."""
    with pytest.raises(SchemaError, match="Object property must specify 'objectType'"):
        _parse("object")


def test_object_descriptor_without_object_type_is_rejected() -> None:
    """An 'object' descriptor must carry objectType."""
    with pytest.raises(SchemaError, match="Object property must specify 'objectType'"):
        _parse({"type": "object", "optional": True})


def test_bare_type_name_is_forward_reference() -> None:
    """An unknown type name refers to another object type and is nullable."""
    prop, _ = _parse("Person", "owner")
    assert prop.type == PropertyType.OBJECT
    assert prop.object_type == "Person"
    assert prop.is_nullable


@pytest.mark.parametrize(
    "declaration",
    [
        {"type": "Person"},
        {"type": "Person", "optional": False},
        {"type": "object", "objectType": "Person", "optional": False},
    ],
)
def test_reference_nullability_cannot_be_overridden(declaration: dict[str, object]) -> None:
    """Object references stay nullable even with optional: false."""
    prop, _ = _parse(declaration, "owner")
    assert prop.type == PropertyType.OBJECT
    assert prop.object_type == "Person"
    assert prop.is_nullable


# ###############
# Defaults
# ###############


def test_default_is_extracted() -> None:
    """A declared default is stored in the defaults map, not on the property."""
    prop, defaults = _parse({"type": "int", "default": 42}, "age")
    assert defaults == {"age": Protected(42)}
    assert "default" not in prop.model_dump()


def test_none_default_is_kept() -> None:
    """An explicit None default is a real (null) default."""
    _, defaults = _parse({"type": "string", "optional": True, "default": None}, "nickname")
    assert "nickname" in defaults
    assert defaults["nickname"].value is None


def test_undefined_default_is_ignored() -> None:
    """The UNDEFINED sentinel means no default."""
    _, defaults = _parse({"type": "string", "default": UNDEFINED})
    assert defaults == {}


def test_default_keeps_identity() -> None:
    """The default value is held by reference."""
    tags: list[str] = ["a", "b"]
    _, defaults = _parse({"type": "list", "objectType": "Tag", "default": tags}, "tags")
    assert defaults["tags"].value is tags


def test_existing_default_is_not_replaced() -> None:
    """The parser inserts only when no entry exists for the property."""
    defaults: ObjectDefaults = {"age": Protected(1)}
    parse_property({"type": "int", "default": 2}, "age", defaults)
    assert defaults["age"].value == 1


def test_bare_declaration_never_adds_default() -> None:
    """Bare declarations have no default."""
    _, defaults = _parse("int")
    assert defaults == {}


# ###############
# Coercion Errors
# ###############


def test_non_boolean_optional_is_rejected() -> None:
    """optional must be a boolean."""
    with pytest.raises(CoercionError, match="'optional' must be of type 'boolean'"):
        _parse({"type": "string", "optional": "yes"})


def test_non_boolean_indexed_is_rejected() -> None:
    """indexed must be a boolean."""
    with pytest.raises(CoercionError, match="'indexed' must be of type 'boolean'"):
        _parse({"type": "string", "indexed": 1})


def test_coercion_error_is_a_type_error() -> None:
    """CoercionError can be caught as TypeError."""
    with pytest.raises(TypeError):
        _parse({"type": "string", "optional": None})


def test_descriptor_without_type_is_rejected() -> None:
    """A descriptor must carry a 'type' string."""
    with pytest.raises(CoercionError, match="'type' must be of type 'string', got undefined"):
        _parse({"optional": True})


def test_non_string_bare_declaration_is_rejected() -> None:
    """A bare declaration must be a type name."""
    with pytest.raises(CoercionError, match="Type of property 'count'"):
        _parse(7, "count")


def test_empty_type_name_is_rejected() -> None:
    """An empty type name is not a forward reference."""
    with pytest.raises(SchemaError, match="Property 'prop' must specify a type"):
        _parse("")


# ###############
# Logging
# ###############


def test_parsed_property_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Each parsed property is logged at debug level."""
    with caplog.at_level(logging.DEBUG, logger="objschema.parser.property_parser"):
        _parse("int", "age")
    assert "Parsed property 'age'" in caplog.text
