# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the dbustree command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from dbustree.bus.provider import ProviderError
from dbustree.config import ConfigError, ToolConfig, load_config
from dbustree.introspection.xml import parse_introspection
from dbustree.render.args import DirectionError
from dbustree.render.names import list_names
from dbustree.render.node import RenderOptions, render_node
from dbustree.render.style import PlainStyle, get_style
from dbustree.render.walker import iter_tree

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the dbustree CLI."""
    parser = argparse.ArgumentParser(
        prog="dbustree",
        description=(
            "Show the objects, interfaces, methods, properties and signals exposed on a D-Bus. "
            "Without --dest and FILE arguments, the names registered on the bus are listed."
        ),
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Introspection XML file to render instead of querying the bus ('-' reads stdin)",
    )
    parser.add_argument("-q", dest="quiet", action="store_true", help="Print destination names or paths only")
    parser.add_argument(
        "--system",
        action="store_true",
        help="Connect to the system bus instead of the session bus",
    )
    parser.add_argument("--dest", help="Destination name to inspect")
    parser.add_argument("--path", help="Inspect only this object path; with -q, list its subtree (used with --dest)")
    parser.add_argument("--indent", help="Indentation string (default: two spaces)")
    parser.add_argument("--no-color", action="store_true", help="Disable colors in output text")
    parser.add_argument(
        "--signatures",
        action="store_true",
        help="Show argument signatures instead of human-readable types",
    )
    parser.add_argument("--methods", action="store_true", help="Show only methods")
    parser.add_argument("--properties", action="store_true", help="Show only properties")
    parser.add_argument("--signals", action="store_true", help="Show only signals")
    parser.add_argument("--no-values", action="store_true", help="Do not fetch live property values")
    parser.add_argument(
        "--max-depth",
        type=_non_negative_int,
        help="Do not descend more than this many levels below the start path",
    )
    parser.add_argument("--config", type=Path, help="YAML file with default settings")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log remote calls to stderr")

    args = parser.parse_args()
    sys.exit(_run(args))


# ################
# Implementation
# ################


def _non_negative_int(text: str) -> int:
    """argparse type for a non-negative integer."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{text}'") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return value


def _run(args: argparse.Namespace) -> int:
    """Execute the requested mode and return the process exit status."""
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = ToolConfig()
    if args.config is not None:
        try:
            config = load_config(args.config)
        except ConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    options = RenderOptions(
        indent=args.indent if args.indent is not None else config.indent,
        methods=args.methods,
        properties=args.properties,
        signals=args.signals,
        raw_signatures=args.signatures or config.signatures,
        show_values=config.show_values and not args.no_values,
    )
    style = get_style(config.color and not args.no_color)

    try:
        if args.files:
            if args.dest:
                print("Error: cannot use --dest with file arguments", file=sys.stderr)
                return 1
            return _cmd_files(args.files, options, style)
        return _cmd_bus(args, options, style, system=args.system or config.system_bus)
    except (ProviderError, DirectionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def _cmd_files(files: list[str], options: RenderOptions, style: PlainStyle) -> int:
    """Render introspection documents read from files or stdin."""
    for name in files:
        try:
            document = sys.stdin.buffer.read() if name == "-" else Path(name).read_bytes()
        except OSError as exc:
            print(f"Error: cannot read '{name}': {exc}", file=sys.stderr)
            return 1
        node = parse_introspection(document)
        for line in render_node(node, options=options, style=style, depth=0):
            print(line)
    return 0


def _cmd_bus(args: argparse.Namespace, options: RenderOptions, style: PlainStyle, *, system: bool) -> int:
    """Walk a destination's object tree, or list bus names without --dest."""
    from dbustree.bus.connection import connect

    with connect(system=system) as connection:
        if not args.dest:
            for line in list_names(connection, quiet=args.quiet, style=style):
                print(line)
            return 0

        lines = iter_tree(
            connection,
            args.dest,
            args.path or "/",
            recursive=args.path is None,
            quiet=args.quiet,
            options=options,
            style=style,
            max_depth=args.max_depth,
        )
        for line in lines:
            print(line)
    return 0
