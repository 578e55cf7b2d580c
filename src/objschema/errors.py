# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised while parsing schema declarations."""

# ###############
# Public Interface
# ###############


class SchemaError(Exception):
    """Raised when a schema declaration is structurally invalid.

    Covers missing required fields, unresolved primary keys, list or object
    properties without an ``objectType`` and malformed constructor bindings.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class CoercionError(TypeError):
    """Raised when a declared field exists but has the wrong primitive type."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidArgumentError(ValueError):
    """Raised when an argument passed to a schema helper is out of range."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
