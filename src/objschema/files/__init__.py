# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declaration files and schema artifacts."""

from objschema.files.artifact import (
    ARTIFACT_FORMAT_VERSION,
    ARTIFACT_SUFFIX,
    deserialize,
    read_artifact,
    serialize,
    write_artifact,
)
from objschema.files.loader import DECLARATION_SUFFIXES, DeclarationFileError, load_declarations

__all__ = [
    "ARTIFACT_FORMAT_VERSION",
    "ARTIFACT_SUFFIX",
    "DECLARATION_SUFFIXES",
    "DeclarationFileError",
    "deserialize",
    "load_declarations",
    "read_artifact",
    "serialize",
    "write_artifact",
]
