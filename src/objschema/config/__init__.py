# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser configuration."""

from objschema.config.parser_config import (
    CONFIG_FILE_NAME,
    ParserConfig,
    ParserConfigError,
    load_parser_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ParserConfig",
    "ParserConfigError",
    "load_parser_config",
]
