#!/usr/bin/env python
# Copyright 2017-present Kensho Technologies, LLC.
"""Utility computing the schema additions required by the @replaces directives in schema files.

Used as: python -m graphql_replaces.tool schema/*.graphql --output schema/deprecated.graphql
"""
import argparse
import logging
import os
import sys
from typing import List, Optional, Sequence

from .exceptions import GraphQLParsingError, GraphQLValidationError, ReplacesDirectiveError
from .replacer import compute_replaces_directive_updates, validate_replaces_directives
from .schema import DIRECTIVES_DEFINITION
from .schema_loading import load_schema_ast


logger = logging.getLogger(__name__)


def _make_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m graphql_replaces.tool",
        description=(
            "Compute the deprecated types, fields and enum values required by the @replaces "
            "directives in GraphQL schema files."
        ),
    )
    parser.add_argument(
        "schema_files", nargs="+", metavar="SCHEMA_FILE", help="GraphQL SDL files to read"
    )
    parser.add_argument(
        "--output",
        metavar="PATH",
        help=(
            "file to write the schema additions to, instead of standard output. The file is "
            "removed if there are no additions"
        ),
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="only check that the @replaces directives are used correctly; write nothing",
    )
    parser.add_argument(
        "--add-directive-definitions",
        action="store_true",
        help="declare @replaces, @key and @goField, for schema files that don't declare them",
    )
    parser.add_argument("--verbose", action="store_true", help="log progress to standard error")
    return parser


def read_schema_text(schema_paths: Sequence[str]) -> str:
    """Return the concatenated contents of the schema files, in the given order."""
    schema_texts = []
    for schema_path in schema_paths:
        with open(schema_path, "r", encoding="utf-8") as f:
            schema_texts.append(f.read())
    return "\n".join(schema_texts)


def _report_errors(errors: Sequence[ReplacesDirectiveError]) -> None:
    for error in errors:
        sys.stderr.write("{}\n".format(error))


def write_schema_additions(schema_additions: str, output_path: str) -> None:
    """Write the schema additions to the output path, or remove the file if there are none."""
    if schema_additions:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(schema_additions)
        logger.info("Wrote schema additions to %s.", output_path)
    elif os.path.exists(output_path):
        os.remove(output_path)
        logger.info("No schema additions required, removed stale %s.", output_path)
    else:
        logger.info("No schema additions required.")


def main(argv: Optional[List[str]] = None) -> int:
    """Read schema files, and output the schema additions their @replaces directives require.

    Returns:
        exit status: 0 on success, 1 if the schema could not be loaded or any @replaces directive
        is used incorrectly. Every problem is reported on standard error, and nothing is written
    """
    args = _make_argument_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        schema_text = read_schema_text(args.schema_files)
    except OSError as e:
        sys.stderr.write("Could not read schema: {}\n".format(e))
        return 1
    if args.add_directive_definitions:
        schema_text = DIRECTIVES_DEFINITION + "\n" + schema_text

    try:
        schema_ast = load_schema_ast(schema_text)
    except (GraphQLParsingError, GraphQLValidationError) as e:
        sys.stderr.write("{}\n".format(e))
        return 1
    logger.debug("Loaded %d schema file(s).", len(args.schema_files))

    if args.check:
        errors = validate_replaces_directives(schema_ast)
        _report_errors(errors)
        return 1 if errors else 0

    updates = compute_replaces_directive_updates(schema_ast)
    if updates.errors:
        _report_errors(updates.errors)
        return 1

    if args.output is None:
        sys.stdout.write(updates.schema_additions)
    else:
        write_schema_additions(updates.schema_additions, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
