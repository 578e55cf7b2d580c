# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading of schema declarations from YAML or JSON files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

# ###############
# Public Interface
# ###############

DECLARATION_SUFFIXES = (".yaml", ".yml", ".json")


class DeclarationFileError(Exception):
    """Raised when a declaration file cannot be read or has the wrong shape."""


def load_declarations(path: Path) -> list[Any]:
    """Load the object type declarations stored in *path*.

    The document is either a list of declarations or a mapping whose
    ``schema`` key holds that list. JSON files are read with the YAML loader.

    Args:
        path: Path to a ``.yaml``, ``.yml`` or ``.json`` file.

    Returns:
        The raw declarations, ready for :func:`objschema.parser.parse_schema`.

    Raises:
        DeclarationFileError: If the file cannot be read, is not valid YAML or
            JSON, or does not contain a list of declarations.
    """
    if path.suffix not in DECLARATION_SUFFIXES:
        raise DeclarationFileError(
            f"Unsupported declaration file '{path}': expected one of {', '.join(DECLARATION_SUFFIXES)}"
        )

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DeclarationFileError(f"Declaration file not found: {path}") from None
    except OSError as exc:
        raise DeclarationFileError(f"Cannot read declaration file: {exc}") from exc

    return _parse_declarations(text, source_label=str(path))


# ################
# Implementation
# ################


def _parse_declarations(text: str, source_label: str = "<string>") -> list[Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DeclarationFileError(f"Invalid YAML in {source_label}: {exc}") from exc

    if isinstance(data, dict):
        if "schema" not in data:
            raise DeclarationFileError(f"{source_label}: missing required field 'schema'")
        data = data["schema"]

    if not isinstance(data, list):
        raise DeclarationFileError(f"{source_label}: declarations must be a list of object schemas")
    return data
