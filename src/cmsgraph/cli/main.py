# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the cmsgraph command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from cmsgraph.model.loader import ContentModelError, load_content_model
from cmsgraph.schema.artifact import ARTIFACT_SUFFIX, write_artifact
from cmsgraph.schema.builder import ContentTypeTranslationError, generate_schema
from cmsgraph.schema.collector import DuplicateTypeError, SchemaCollector
from cmsgraph.schema.sdl import render_sdl
from cmsgraph.workspace.config import (
    CONFIG_FILE_NAME,
    WorkspaceConfig,
    WorkspaceConfigError,
    load_workspace_config,
    render_workspace_config,
)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the cmsgraph CLI."""
    parser = argparse.ArgumentParser(
        prog="cmsgraph",
        description="cmsgraph: generate graph type declarations from a CMS content model",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Initialize a new cmsgraph workspace",
        description=f"Create a {CONFIG_FILE_NAME} configuration file.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to initialize the workspace in (default: current directory)",
    )
    init_parser.add_argument(
        "--content-model",
        default="content-types.json",
        help="Path of the content model export (default: content-types.json)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check that the content model translates",
        description="Translate the content model and report errors without writing output.",
    )
    check_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the cmsgraph workspace (default: current directory)",
    )

    # build subcommand
    build_parser = subparsers.add_parser(
        "build",
        help="Generate the schema",
        description="Translate the content model and write the generated schema.",
    )
    build_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the cmsgraph workspace (default: current directory)",
    )
    build_parser.add_argument(
        "--format",
        choices=["sdl", "json"],
        default="sdl",
        help="Output format (default: sdl)",
    )
    build_parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Output path, overriding the configured one",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "build":
        return _cmd_build(args)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME
    if config_file.exists():
        print(f"Error: workspace already exists at '{config_file}'.", file=sys.stderr)
        return 1

    config = WorkspaceConfig(content_model=args.content_model)
    config_file.write_text(render_workspace_config(config), encoding="utf-8")
    print(f"Initialized cmsgraph workspace at '{config_file}'.")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    directory = Path(args.directory).resolve()
    result = _generate(directory)
    if result is None:
        return 1
    _, collector = result

    print(
        f"Translated {len(collector.objects())} object type(s), "
        f"{len(collector.interfaces())} interface(s) and {len(collector.unions())} union(s)."
    )
    print("No issues found.")
    return 0


def _cmd_build(args: argparse.Namespace) -> int:
    """Handle the build subcommand."""
    directory = Path(args.directory).resolve()
    result = _generate(directory)
    if result is None:
        return 1
    config, collector = result

    if args.output:
        output = Path(args.output)
    elif args.format == "json":
        output = (directory / config.output).with_suffix(ARTIFACT_SUFFIX)
    else:
        output = directory / config.output
    try:
        if args.format == "json":
            write_artifact(collector.declarations, output)
        else:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(render_sdl(collector.declarations), encoding="utf-8")
    except OSError as exc:
        print(f"Error: cannot write '{output}': {exc}", file=sys.stderr)
        return 1

    print(f"Wrote {len(collector)} type declaration(s) to '{output}'.")
    return 0


def _generate(directory: Path) -> tuple[WorkspaceConfig, SchemaCollector] | None:
    """Load the workspace and run the schema build. Prints errors and returns None on failure."""
    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return None

    config_file = directory / CONFIG_FILE_NAME
    if not config_file.exists():
        print(
            f"Error: no cmsgraph workspace found at '{directory}'. Run 'cmsgraph init' to initialize a workspace.",
            file=sys.stderr,
        )
        return None

    try:
        config = load_workspace_config(config_file)
        items = load_content_model(directory / config.content_model)
    except (WorkspaceConfigError, ContentModelError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None

    print(f"Translating {len(items)} content type(s)...")
    collector = SchemaCollector()
    try:
        generate_schema(items, collector.create_types, use_name_for_id=config.use_name_for_id)
    except (ContentTypeTranslationError, DuplicateTypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None

    return config, collector
