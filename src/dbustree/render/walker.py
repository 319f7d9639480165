# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive discovery and rendering of an object path subtree."""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterator

from dbustree.bus.provider import IntrospectionProvider, join_path
from dbustree.render.node import RenderOptions, render_node
from dbustree.render.style import PlainStyle

_LOG = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def iter_tree(
    provider: IntrospectionProvider,
    destination: str,
    path: str = "/",
    *,
    recursive: bool = True,
    quiet: bool = False,
    options: RenderOptions | None = None,
    style: PlainStyle | None = None,
    max_depth: int | None = None,
) -> Iterator[str]:
    """Introspect *path* on *destination* and yield its rendered lines.

    Children are visited depth-first in the order the provider reports
    them, one remote call at a time. The provider is trusted not to report
    cycles; *max_depth* optionally bounds how many levels below *path* are
    visited.

    Args:
        provider: Source of introspection data.
        destination: Bus name that owns the objects.
        path: Object path to start from.
        recursive: Descend into child paths. When False only *path* is rendered;
            quiet listings still cover the whole subtree.
        quiet: Print object paths only, without their interfaces.
        options: Presentation settings; defaults to ``RenderOptions()``.
        style: Text decoration strategy; defaults to ``PlainStyle()``.
        max_depth: Maximum number of levels below *path* to visit.

    Yields:
        Rendered lines without trailing newlines.

    Raises:
        ProviderError: If any introspection call fails.
        DirectionError: If a method argument has an unknown direction.
    """
    options = options or RenderOptions()
    style = style or PlainStyle()
    yield from _visit(provider, destination, path, recursive, quiet, options, style, max_depth, 0)


def walk(
    provider: IntrospectionProvider,
    destination: str,
    path: str = "/",
    *,
    recursive: bool = True,
    quiet: bool = False,
    options: RenderOptions | None = None,
    style: PlainStyle | None = None,
    max_depth: int | None = None,
) -> list[str]:
    """Collect the output of :func:`iter_tree` into a list."""
    return list(
        iter_tree(
            provider,
            destination,
            path,
            recursive=recursive,
            quiet=quiet,
            options=options,
            style=style,
            max_depth=max_depth,
        )
    )


# ################
# Implementation
# ################


def _visit(
    provider: IntrospectionProvider,
    destination: str,
    path: str,
    recursive: bool,
    quiet: bool,
    options: RenderOptions,
    style: PlainStyle,
    max_depth: int | None,
    depth: int,
) -> Iterator[str]:
    _LOG.debug("Introspecting %s %s", destination, path)
    node = provider.introspect(destination, path)

    if quiet:
        yield path
    else:
        yield style.path(path)
        getter = functools.partial(provider.get_property, destination, path)
        yield from render_node(node, options=options, style=style, depth=1, get_property=getter)

    if not recursive and not quiet:
        return
    if max_depth is not None and depth >= max_depth:
        _LOG.debug("Not descending below %s: depth limit %d reached", path, max_depth)
        return

    for child in node.children:
        yield from _visit(
            provider,
            destination,
            join_path(path, child),
            recursive,
            quiet,
            options,
            style,
            max_depth,
            depth + 1,
        )
