# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent decoder for D-Bus type signatures.

Turns a compact signature such as ``a{sv}`` or ``(iay)`` into a sequence of
structured type nodes.
"""

from dbustree.model.types import (
    PRIMITIVE_CODES,
    ArrayTypeNode,
    DictTypeNode,
    MalformedSignature,
    PrimitiveTypeNode,
    StructTypeNode,
    TypeNode,
    UnknownTypeNode,
)

# ###############
# Public Interface
# ###############


def decode(signature: str) -> list[TypeNode] | MalformedSignature:
    """Decode a type signature into its top-level type nodes.

    Unrecognized characters become ``UnknownTypeNode`` entries and decoding
    carries on. Structural violations (a dictionary key that is not a single
    primitive, a missing dictionary value, an unclosed struct or dictionary,
    an array without an element type) make the whole signature malformed,
    as does nesting too deep to decode.

    Args:
        signature: The signature text, possibly empty.

    Returns:
        The decoded nodes in order, or a MalformedSignature carrying the
        original text.
    """
    try:
        return _Decoder(signature).decode_all()
    except (_DecodeFailure, RecursionError):
        return MalformedSignature(signature=signature)


# ################
# Implementation
# ################


class _DecodeFailure(Exception):
    """Raised internally when the grammar cannot be satisfied."""


class _Decoder:
    """Cursor-based decoder over an immutable signature string."""

    def __init__(self, source: str) -> None:
        self._source = source

    def decode_all(self) -> list[TypeNode]:
        """Decode nodes until the whole source is consumed."""
        nodes: list[TypeNode] = []
        pos = 0
        while pos < len(self._source):
            node, length = self._next(pos)
            nodes.append(node)
            pos += length
        return nodes

    def _next(self, pos: int) -> tuple[TypeNode, int]:
        """Decode one node starting at *pos* and return it with its length."""
        if pos >= len(self._source):
            raise _DecodeFailure(f"missing type at offset {pos}")

        code = self._source[pos]
        if code in PRIMITIVE_CODES:
            return PrimitiveTypeNode(primitive=PRIMITIVE_CODES[code]), 1
        if code == "a":
            if self._peek(pos + 1) == "{":
                return self._dict_entry(pos)
            element, length = self._next(pos + 1)
            return ArrayTypeNode(element=element), length + 1
        if code == "(":
            return self._struct(pos)
        return UnknownTypeNode(code=code), 1

    def _peek(self, pos: int) -> str:
        """Return the character at *pos*, or '' past the end."""
        if pos < len(self._source):
            return self._source[pos]
        return ""

    def _dict_entry(self, pos: int) -> tuple[TypeNode, int]:
        """Decode ``a{KV}`` starting at the ``a``."""
        key_code = self._peek(pos + 2)
        if key_code not in PRIMITIVE_CODES:
            raise _DecodeFailure(f"dictionary key at offset {pos + 2} is not a primitive")
        key = PrimitiveTypeNode(primitive=PRIMITIVE_CODES[key_code])

        value, value_length = self._next(pos + 3)
        close = pos + 3 + value_length
        if self._peek(close) != "}":
            raise _DecodeFailure(f"expected '}}' at offset {close}")
        return DictTypeNode(key=key, value=value), value_length + 4

    def _struct(self, pos: int) -> tuple[TypeNode, int]:
        """Decode a parenthesised struct starting at the ``(``."""
        i = pos + 1
        depth = 1
        while i < len(self._source) and depth != 0:
            if self._source[i] == "(":
                depth += 1
            elif self._source[i] == ")":
                depth -= 1
            i += 1
        if depth != 0:
            raise _DecodeFailure(f"unterminated struct at offset {pos}")

        fields = _Decoder(self._source[pos + 1 : i - 1]).decode_all()
        return StructTypeNode(fields=tuple(fields)), i - pos
