# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Human-readable names for decoded signatures."""

from dbustree.model.types import (
    ArrayTypeNode,
    DictTypeNode,
    MalformedSignature,
    PrimitiveTypeNode,
    StructTypeNode,
    TypeNode,
    UnknownTypeNode,
)
from dbustree.signature.decoder import decode

# ###############
# Public Interface
# ###############


def format_type(node: TypeNode) -> str:
    """Return the display name of a single type node, e.g. ``Dict{String, Variant}``."""
    if isinstance(node, PrimitiveTypeNode):
        return node.primitive.value
    if isinstance(node, ArrayTypeNode):
        return f"Array[{format_type(node.element)}]"
    if isinstance(node, DictTypeNode):
        return f"Dict{{{format_type(node.key)}, {format_type(node.value)}}}"
    if isinstance(node, StructTypeNode):
        return f"Struct({_join(node.fields)})"
    if isinstance(node, UnknownTypeNode):
        return f"Unknown({node.code})"
    raise TypeError(f"Unsupported type node: {node!r}")


def format_signature(signature: str) -> str:
    """Decode *signature* and return its display text.

    Multiple top-level types are separated by ``", "``. A malformed
    signature is shown as ``Malformed(<signature>)`` instead of raising.
    """
    result = decode(signature)
    if isinstance(result, MalformedSignature):
        return f"Malformed({result.signature})"
    return _join(result)


# ################
# Implementation
# ################


def _join(nodes: list[TypeNode] | tuple[TypeNode, ...]) -> str:
    return ", ".join(format_type(node) for node in nodes)
