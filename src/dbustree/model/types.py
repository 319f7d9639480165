# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structured representation of decoded D-Bus type signatures."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class PrimitiveKind(Enum):
    """Basic (single-character) D-Bus types."""

    BYTE = "Byte"
    BOOL = "Bool"
    INT16 = "Int16"
    UINT16 = "Uint16"
    INT32 = "Int32"
    UINT32 = "Uint32"
    INT64 = "Int64"
    UINT64 = "Uint64"
    DOUBLE = "Double"
    UNIX_FD = "UnixFD"
    STRING = "String"
    OBJECT = "Object"
    VARIANT = "Variant"
    SIGNATURE = "Signature"


# Type code of every primitive in the wire grammar.
PRIMITIVE_CODES: dict[str, PrimitiveKind] = {
    "y": PrimitiveKind.BYTE,
    "b": PrimitiveKind.BOOL,
    "n": PrimitiveKind.INT16,
    "q": PrimitiveKind.UINT16,
    "i": PrimitiveKind.INT32,
    "u": PrimitiveKind.UINT32,
    "x": PrimitiveKind.INT64,
    "t": PrimitiveKind.UINT64,
    "d": PrimitiveKind.DOUBLE,
    "h": PrimitiveKind.UNIX_FD,
    "s": PrimitiveKind.STRING,
    "o": PrimitiveKind.OBJECT,
    "v": PrimitiveKind.VARIANT,
    "g": PrimitiveKind.SIGNATURE,
}


class PrimitiveTypeNode(BaseModel):
    """A single-character basic type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["primitive"] = "primitive"
    primitive: PrimitiveKind


class ArrayTypeNode(BaseModel):
    """An ``a`` array of exactly one element type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"
    element: TypeNode


class DictTypeNode(BaseModel):
    """An ``a{KV}`` dictionary; the key is always a primitive."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["dict"] = "dict"
    key: PrimitiveTypeNode
    value: TypeNode


class StructTypeNode(BaseModel):
    """A parenthesised struct with ordered fields."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["struct"] = "struct"
    fields: tuple[TypeNode, ...] = ()


class UnknownTypeNode(BaseModel):
    """A character outside the known grammar; it occupies one position."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unknown"] = "unknown"
    code: str


# A decoded type: a primitive, a container or an unrecognized code.
# The `kind` discriminator field enables fast, unambiguous deserialization.
TypeNode = Annotated[
    PrimitiveTypeNode | ArrayTypeNode | DictTypeNode | StructTypeNode | UnknownTypeNode,
    _Field(discriminator="kind"),
]


class MalformedSignature(BaseModel):
    """Outcome of decoding a signature that violates the grammar as a whole."""

    model_config = ConfigDict(frozen=True)

    signature: str


# Resolve forward references for models that use TypeNode.
ArrayTypeNode.model_rebuild()
DictTypeNode.model_rebuild()
StructTypeNode.model_rebuild()
