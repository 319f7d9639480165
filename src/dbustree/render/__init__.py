# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Text rendering of introspection data and bus names."""

from dbustree.render.args import DirectionError, format_args, split_method_args
from dbustree.render.names import collate_names, list_names
from dbustree.render.node import RenderOptions, render_node
from dbustree.render.style import ChalkStyle, PlainStyle, get_style
from dbustree.render.walker import iter_tree, walk

__all__ = [
    "ChalkStyle",
    "DirectionError",
    "PlainStyle",
    "RenderOptions",
    "collate_names",
    "format_args",
    "get_style",
    "iter_tree",
    "list_names",
    "render_node",
    "split_method_args",
    "walk",
]
