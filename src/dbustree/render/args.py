# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Formatting of argument lists, property types and annotations."""

from dbustree.model.entities import Annotation, Arg
from dbustree.render.style import PlainStyle
from dbustree.signature.display import format_signature

# ###############
# Public Interface
# ###############


class DirectionError(Exception):
    """Raised when a method argument has a direction other than ``in`` or ``out``.

    Attributes:
        direction: The offending raw direction value.
    """

    def __init__(self, direction: str) -> None:
        super().__init__(f"unknown arg direction: {direction!r}")
        self.direction = direction


def split_method_args(args: list[Arg]) -> tuple[list[Arg], list[Arg]]:
    """Split a method's arguments into input and output groups.

    An argument without a direction is an input.

    Raises:
        DirectionError: If any argument has an unrecognized direction.
    """
    inputs: list[Arg] = []
    outputs: list[Arg] = []
    for arg in args:
        direction = "in" if arg.direction is None else arg.direction
        if direction == "in":
            inputs.append(arg)
        elif direction == "out":
            outputs.append(arg)
        else:
            raise DirectionError(direction)
    return inputs, outputs


def format_type_text(signature: str, *, style: PlainStyle, raw_signatures: bool = False) -> str:
    """Return *signature* as raw text or as decoded type names."""
    if raw_signatures:
        return style.type(signature)
    return style.type(format_signature(signature))


def format_args(args: list[Arg], *, style: PlainStyle, raw_signatures: bool = False) -> str:
    """Render ``name type`` pairs joined by ``", "``.

    Unnamed arguments are shown as ``arg_<index>`` where the index is the
    position within *args*.
    """
    return ", ".join(
        f"{style.arg_name(arg.name or f'arg_{index}')} "
        f"{format_type_text(arg.type, style=style, raw_signatures=raw_signatures)}"
        for index, arg in enumerate(args)
    )


def format_annotation(annotation: Annotation, *, style: PlainStyle) -> str:
    """Return ``@name = value`` for an annotation."""
    return style.annotation(f"@{annotation.name} = {annotation.value}")
