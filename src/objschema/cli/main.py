# Copyright 2026 ObjSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the objschema command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from objschema.config.parser_config import CONFIG_FILE_NAME, ParserConfig, ParserConfigError, load_parser_config
from objschema.errors import CoercionError, SchemaError
from objschema.files.artifact import serialize, write_artifact
from objschema.files.loader import DeclarationFileError, load_declarations
from objschema.model.entities import Schema
from objschema.parser.schema_parser import parse_schema_with_defaults
from objschema.validation.checks import validate

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the objschema CLI."""
    parser = argparse.ArgumentParser(
        prog="objschema",
        description="objschema - object schema declaration parser",
    )
    # Options shared by every subcommand.
    common_parser = argparse.ArgumentParser(add_help=False)
    common_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parser progress to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check a schema declaration file",
        description="Parse a schema declaration file and report consistency errors.",
        parents=[common_parser],
    )
    check_parser.add_argument("file", help="YAML or JSON file holding the declarations")
    check_parser.add_argument(
        "--config",
        default=None,
        help=f"Parser configuration file (default: {CONFIG_FILE_NAME} next to FILE, if present)",
    )

    # dump subcommand
    dump_parser = subparsers.add_parser(
        "dump",
        help="Write the parsed schema as a JSON artifact",
        description="Parse a schema declaration file and write the resulting schema as JSON.",
        parents=[common_parser],
    )
    dump_parser.add_argument("file", help="YAML or JSON file holding the declarations")
    dump_parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Artifact path (default: write to stdout)",
    )
    dump_parser.add_argument(
        "--config",
        default=None,
        help=f"Parser configuration file (default: {CONFIG_FILE_NAME} next to FILE, if present)",
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "dump":
        return _cmd_dump(args)
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    loaded = _load(args)
    if loaded is None:
        return 1
    schema, config = loaded

    if not config.check_references:
        print(f"Parsed {len(schema.object_schemas)} object type(s).")
        return 0

    result = validate(schema)
    for warning in result.warnings:
        print(f"Warning: {warning.message}")
    for error in result.errors:
        print(f"Error: {error.message}", file=sys.stderr)
    if result.has_errors:
        return 1

    print(f"No issues found in {len(schema.object_schemas)} object type(s).")
    return 0


def _cmd_dump(args: argparse.Namespace) -> int:
    """Handle the dump subcommand."""
    loaded = _load(args)
    if loaded is None:
        return 1
    schema, _ = loaded

    if args.output is None:
        print(serialize(schema))
        return 0

    output = Path(args.output)
    try:
        write_artifact(schema, output)
    except OSError as exc:
        print(f"Error: cannot write '{output}': {exc}", file=sys.stderr)
        return 1
    print(f"Wrote schema artifact to '{output}'.")
    return 0


def _load(args: argparse.Namespace) -> tuple[Schema, ParserConfig] | None:
    """Load the configuration and declarations and parse them, printing any error."""
    source = Path(args.file).resolve()

    config_path = Path(args.config) if args.config else source.parent / CONFIG_FILE_NAME
    config = ParserConfig()
    if args.config or config_path.exists():
        try:
            config = load_parser_config(config_path)
        except ParserConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return None

    try:
        declarations = load_declarations(source)
        result = parse_schema_with_defaults(declarations, atomic=config.atomic)
    except (DeclarationFileError, SchemaError, CoercionError) as exc:
        print(f"Error: {source}: {exc}", file=sys.stderr)
        return None

    return result.schema, config
