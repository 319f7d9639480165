# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of one introspected object into indented text lines.

Each interface is listed with up to three sections:

- ``Methods``: ``name(in-args) → (out-args)``
- ``Properties``: ``name type [access]``, optionally followed by ``= value``
- ``Signals``: ``name(args)``

Member annotations are printed on their own lines just above the member.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from dbustree.bus.provider import ProviderError
from dbustree.model.entities import Interface, Node
from dbustree.render.args import format_annotation, format_args, format_type_text, split_method_args
from dbustree.render.style import PlainStyle

# ###############
# Public Interface
# ###############

# Fetches the live value of ``(interface, property)`` on the rendered object.
PropertyGetter = Callable[[str, str], object]


@dataclass
class RenderOptions:
    """Presentation settings shared by all renderers.

    Attributes:
        indent: The string repeated once per depth level.
        methods: Show the methods section.
        properties: Show the properties section.
        signals: Show the signals section.
        raw_signatures: Print signatures verbatim instead of decoded type names.
        show_values: Append live property values when a getter is available.
    """

    indent: str = "  "
    methods: bool = False
    properties: bool = False
    signals: bool = False
    raw_signatures: bool = False
    show_values: bool = True

    def section_enabled(self, selected: bool) -> bool:
        """Return True if a section is shown given its own filter flag.

        With no filter set at all, every section is shown.
        """
        return not (self.methods or self.properties or self.signals) or selected


def render_node(
    node: Node,
    *,
    options: RenderOptions,
    style: PlainStyle,
    depth: int = 0,
    get_property: PropertyGetter | None = None,
) -> list[str]:
    """Render every interface of *node* as text lines.

    Args:
        node: The introspection data to render.
        options: Presentation settings.
        style: Text decoration strategy.
        depth: Indentation level of the interface names.
        get_property: Optional getter for live property values. Failures it
            raises are rendered inline rather than propagated.

    Returns:
        The rendered lines without trailing newlines.

    Raises:
        DirectionError: If a method argument has an unknown direction.
    """
    lines: list[str] = []
    for interface in node.interfaces:
        lines.extend(_render_interface(interface, options, style, depth, get_property))
    return lines


def format_value(value: object) -> str:
    """Return a compact display form of a property value."""
    inner = getattr(value, "value", None)
    if inner is not None and hasattr(value, "signature"):
        return format_value(inner)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return "[" + ", ".join(str(b) for b in value) + "]"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_value(item) for item in value) + "]"
    if isinstance(value, dict):
        return "{" + ", ".join(f"{format_value(k)}: {format_value(v)}" for k, v in value.items()) + "}"
    return str(value)


# ################
# Implementation
# ################


def _render_interface(
    interface: Interface,
    options: RenderOptions,
    style: PlainStyle,
    depth: int,
    get_property: PropertyGetter | None,
) -> list[str]:
    """Render one interface and its enabled sections."""
    header = options.indent * (depth + 1)
    member = options.indent * (depth + 2)
    lines = [options.indent * depth + style.interface(interface.name)]

    if interface.methods and options.section_enabled(options.methods):
        lines.append(header + style.section("Methods"))
        for method in interface.methods:
            lines.extend(member + format_annotation(a, style=style) for a in method.annotations)
            inputs, outputs = split_method_args(method.args)
            in_text = format_args(inputs, style=style, raw_signatures=options.raw_signatures)
            out_text = format_args(outputs, style=style, raw_signatures=options.raw_signatures)
            lines.append(f"{member}{method.name}({in_text}) → ({out_text})")

    if interface.properties and options.section_enabled(options.properties):
        lines.append(header + style.section("Properties"))
        for prop in interface.properties:
            lines.extend(member + format_annotation(a, style=style) for a in prop.annotations)
            type_text = format_type_text(prop.type, style=style, raw_signatures=options.raw_signatures)
            line = f"{member}{prop.name} {type_text} {style.access(f'[{prop.access}]')}"
            if get_property is not None and options.show_values:
                line += " = " + _fetch_value(get_property, interface.name, prop.name, style)
            lines.append(line)

    if interface.signals and options.section_enabled(options.signals):
        lines.append(header + style.section("Signals"))
        for signal in interface.signals:
            lines.extend(member + format_annotation(a, style=style) for a in signal.annotations)
            args_text = format_args(signal.args, style=style, raw_signatures=options.raw_signatures)
            lines.append(f"{member}{signal.name}({args_text})")

    return lines


def _fetch_value(get_property: PropertyGetter, interface: str, name: str, style: PlainStyle) -> str:
    """Return the formatted property value, or an inline error marker."""
    try:
        return format_value(get_property(interface, name))
    except ProviderError as exc:
        return style.error(f"(error: {exc})")
