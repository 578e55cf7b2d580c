# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser configuration model and its YAML loader."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".objschema.yaml"


class ParserConfigError(Exception):
    """Raised when the parser configuration cannot be read or is invalid."""


class ParserConfig(BaseModel):
    """Settings applied when parsing declaration files.

    Attributes:
        atomic: Restore the default and constructor maps when a parse fails.
        check_references: Run the consistency checks after parsing.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, strict=True)

    atomic: bool = False
    check_references: bool = Field(alias="check-references", default=True)


def load_parser_config(path: Path) -> ParserConfig:
    """Load and validate a parser configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the ``.objschema.yaml`` file.

    Returns:
        A validated ParserConfig instance.

    Raises:
        ParserConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ParserConfigError(f"Cannot read parser config '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ParserConfigError(f"Invalid YAML in parser config '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ParserConfigError(f"{path}: parser config must be a YAML mapping")

    try:
        return ParserConfig.model_validate(data)
    except ValidationError as exc:
        raise ParserConfigError(f"Invalid parser config '{path}': {exc}") from exc
