# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for dbustree (decoded types and introspection records)."""

from dbustree.model.entities import (
    Annotation,
    Arg,
    Interface,
    Method,
    Node,
    Property,
    Signal,
)
from dbustree.model.types import (
    PRIMITIVE_CODES,
    ArrayTypeNode,
    DictTypeNode,
    MalformedSignature,
    PrimitiveKind,
    PrimitiveTypeNode,
    StructTypeNode,
    TypeNode,
    UnknownTypeNode,
)

__all__ = [
    # Type system
    "PRIMITIVE_CODES",
    "PrimitiveKind",
    "PrimitiveTypeNode",
    "ArrayTypeNode",
    "DictTypeNode",
    "StructTypeNode",
    "UnknownTypeNode",
    "TypeNode",
    "MalformedSignature",
    # Introspection records
    "Annotation",
    "Arg",
    "Method",
    "Signal",
    "Property",
    "Interface",
    "Node",
]
