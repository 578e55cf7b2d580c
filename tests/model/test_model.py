# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""High-level tests demonstrating how to construct the schema model."""

from objschema.model import LINK_TYPES, ObjectSchema, Property, PropertyType, Schema


def test_property_defaults() -> None:
    """A property only needs a name and a type."""
    prop = Property(name="age", type=PropertyType.INT)
    assert prop.object_type == ""
    assert not prop.is_nullable
    assert not prop.is_indexed
    assert not prop.is_primary
    assert not prop.is_link


def test_link_properties() -> None:
    """List and object properties are links to other object types."""
    assert LINK_TYPES == {PropertyType.LIST, PropertyType.OBJECT}
    assert Property(name="dogs", type=PropertyType.LIST, object_type="Dog").is_link
    assert Property(name="owner", type=PropertyType.OBJECT, object_type="Person", is_nullable=True).is_link


def test_property_type_values() -> None:
    """Property kinds are identified by their declaration keywords."""
    assert [t.value for t in PropertyType] == [
        "bool",
        "int",
        "float",
        "double",
        "string",
        "date",
        "data",
        "list",
        "object",
    ]


def test_object_schema_lookup() -> None:
    """ObjectSchema looks up properties and its primary key property by name."""
    person = ObjectSchema(
        name="Person",
        properties=[
            Property(name="id", type=PropertyType.INT, is_primary=True),
            Property(name="name", type=PropertyType.STRING),
        ],
        primary_key="id",
    )
    assert person.property_for_name("name") is person.properties[1]
    assert person.property_for_name("missing") is None
    assert person.primary_key_property() is person.properties[0]


def test_object_schema_without_primary_key() -> None:
    """Without a primary key there is no primary key property."""
    dog = ObjectSchema(name="Dog", properties=[Property(name="name", type=PropertyType.STRING)])
    assert dog.primary_key is None
    assert dog.primary_key_property() is None


def test_schema_find() -> None:
    """Schema finds object types by name and keeps their order."""
    schema = Schema(object_schemas=[ObjectSchema(name="Dog"), ObjectSchema(name="Person")])
    assert [o.name for o in schema.object_schemas] == ["Dog", "Person"]
    assert schema.find("Person") is schema.object_schemas[1]
    assert schema.find("Cat") is None
