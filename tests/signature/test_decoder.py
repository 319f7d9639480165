# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the D-Bus signature decoder."""

import pytest

from dbustree.model.types import (
    ArrayTypeNode,
    DictTypeNode,
    MalformedSignature,
    PrimitiveKind,
    PrimitiveTypeNode,
    StructTypeNode,
    UnknownTypeNode,
)
from dbustree.signature.decoder import decode

# ###############
# Test Helpers
# ###############


def _p(kind: PrimitiveKind) -> PrimitiveTypeNode:
    return PrimitiveTypeNode(primitive=kind)


BYTE = _p(PrimitiveKind.BYTE)
INT16 = _p(PrimitiveKind.INT16)
INT32 = _p(PrimitiveKind.INT32)
UINT32 = _p(PrimitiveKind.UINT32)
STRING = _p(PrimitiveKind.STRING)
OBJECT = _p(PrimitiveKind.OBJECT)
VARIANT = _p(PrimitiveKind.VARIANT)


# ###############
# Primitives
# ###############


class TestPrimitives:
    @pytest.mark.parametrize(
        ("code", "kind"),
        [
            ("y", PrimitiveKind.BYTE),
            ("b", PrimitiveKind.BOOL),
            ("n", PrimitiveKind.INT16),
            ("q", PrimitiveKind.UINT16),
            ("i", PrimitiveKind.INT32),
            ("u", PrimitiveKind.UINT32),
            ("x", PrimitiveKind.INT64),
            ("t", PrimitiveKind.UINT64),
            ("d", PrimitiveKind.DOUBLE),
            ("h", PrimitiveKind.UNIX_FD),
            ("s", PrimitiveKind.STRING),
            ("o", PrimitiveKind.OBJECT),
            ("v", PrimitiveKind.VARIANT),
            ("g", PrimitiveKind.SIGNATURE),
        ],
    )
    def test_single_code(self, code: str, kind: PrimitiveKind) -> None:
        """Each primitive code decodes to exactly its own primitive node."""
        assert decode(code) == [_p(kind)]

    def test_empty_signature_is_empty_sequence(self) -> None:
        """The empty signature is valid and has no types."""
        assert decode("") == []

    def test_integer_sequence(self) -> None:
        """Consecutive primitives decode in order."""
        assert decode("nqiuxt") == [
            _p(PrimitiveKind.INT16),
            _p(PrimitiveKind.UINT16),
            _p(PrimitiveKind.INT32),
            _p(PrimitiveKind.UINT32),
            _p(PrimitiveKind.INT64),
            _p(PrimitiveKind.UINT64),
        ]


# ###############
# Containers
# ###############


class TestArrays:
    def test_array_of_string(self) -> None:
        assert decode("as") == [ArrayTypeNode(element=STRING)]

    def test_nested_arrays(self) -> None:
        """An array element may itself be an array."""
        assert decode("aai") == [ArrayTypeNode(element=ArrayTypeNode(element=INT32))]

    def test_array_of_dict(self) -> None:
        assert decode("aa{yy}") == [ArrayTypeNode(element=DictTypeNode(key=BYTE, value=BYTE))]

    def test_array_followed_by_primitive(self) -> None:
        """An array takes exactly one element type."""
        assert decode("ass") == [ArrayTypeNode(element=STRING), STRING]

    def test_array_without_element_is_malformed(self) -> None:
        assert decode("a") == MalformedSignature(signature="a")

    def test_trailing_array_without_element_is_malformed(self) -> None:
        assert decode("ia") == MalformedSignature(signature="ia")


class TestDicts:
    def test_string_to_variant(self) -> None:
        assert decode("a{sv}") == [DictTypeNode(key=STRING, value=VARIANT)]

    def test_nested_struct_value(self) -> None:
        """Dictionary values may be arbitrarily nested."""
        assert decode("a{o(i(uu))}") == [
            DictTypeNode(
                key=OBJECT,
                value=StructTypeNode(fields=(INT32, StructTypeNode(fields=(UINT32, UINT32)))),
            )
        ]

    def test_dict_of_dicts(self) -> None:
        assert decode("a{sa{sv}}") == [
            DictTypeNode(key=STRING, value=DictTypeNode(key=STRING, value=VARIANT)),
        ]

    def test_struct_key_is_malformed(self) -> None:
        """A key that is not a single primitive fails the whole signature."""
        assert decode("a{(uu)s}") == MalformedSignature(signature="a{(uu)s}")

    def test_array_key_is_malformed(self) -> None:
        assert decode("a{ass}") == MalformedSignature(signature="a{ass}")

    def test_unknown_key_is_malformed(self) -> None:
        assert decode("a{?s}") == MalformedSignature(signature="a{?s}")

    def test_missing_value_is_malformed(self) -> None:
        assert decode("a{s") == MalformedSignature(signature="a{s")

    def test_missing_close_brace_is_malformed(self) -> None:
        assert decode("a{ss") == MalformedSignature(signature="a{ss")

    def test_extra_field_before_close_is_malformed(self) -> None:
        assert decode("a{sss}") == MalformedSignature(signature="a{sss}")

    def test_nested_failure_marks_whole_signature(self) -> None:
        """A bad dictionary deep inside a struct still fails the outer signature."""
        assert decode("i(sa{(y)s})") == MalformedSignature(signature="i(sa{(y)s})")


class TestStructs:
    def test_struct_after_primitive(self) -> None:
        assert decode("i(iy)") == [INT32, StructTypeNode(fields=(INT32, BYTE))]

    def test_nested_structs(self) -> None:
        assert decode("((i)(s))") == [
            StructTypeNode(fields=(StructTypeNode(fields=(INT32,)), StructTypeNode(fields=(STRING,)))),
        ]

    def test_struct_with_array_field(self) -> None:
        assert decode("(sas)") == [StructTypeNode(fields=(STRING, ArrayTypeNode(element=STRING)))]

    def test_empty_struct(self) -> None:
        assert decode("()") == [StructTypeNode(fields=())]

    def test_unterminated_struct_is_malformed(self) -> None:
        assert decode("(ii") == MalformedSignature(signature="(ii")

    def test_unterminated_nested_struct_is_malformed(self) -> None:
        assert decode("((ii)") == MalformedSignature(signature="((ii)")


# ###############
# Unknown Codes
# ###############


class TestUnknown:
    def test_unknown_between_primitives(self) -> None:
        """An unrecognized code is kept in place and decoding continues."""
        assert decode("n?n") == [INT16, UnknownTypeNode(code="?"), INT16]

    def test_unknown_inside_struct(self) -> None:
        assert decode("(iz)") == [StructTypeNode(fields=(INT32, UnknownTypeNode(code="z")))]

    def test_unknown_array_element(self) -> None:
        assert decode("am") == [ArrayTypeNode(element=UnknownTypeNode(code="m"))]

    def test_stray_close_paren_is_unknown(self) -> None:
        assert decode("i)") == [INT32, UnknownTypeNode(code=")")]


# ###############
# Consumption
# ###############


@pytest.mark.parametrize(
    ("signature", "expected"),
    [
        ("a{sv}", [DictTypeNode(key=STRING, value=VARIANT)]),
        ("aa{yy}", [ArrayTypeNode(element=DictTypeNode(key=BYTE, value=BYTE))]),
        (
            "(ia{s(ub)})",
            [
                StructTypeNode(
                    fields=(
                        INT32,
                        DictTypeNode(key=STRING, value=StructTypeNode(fields=(UINT32, _p(PrimitiveKind.BOOL)))),
                    )
                )
            ],
        ),
        (
            "a(oa{sa{sv}})",
            [
                ArrayTypeNode(
                    element=StructTypeNode(
                        fields=(
                            OBJECT,
                            DictTypeNode(key=STRING, value=DictTypeNode(key=STRING, value=VARIANT)),
                        )
                    )
                )
            ],
        ),
        (
            "ya(ii)g",
            [BYTE, ArrayTypeNode(element=StructTypeNode(fields=(INT32, INT32))), _p(PrimitiveKind.SIGNATURE)],
        ),
    ],
)
def test_well_formed_signature_is_fully_consumed(signature: str, expected: list[object]) -> None:
    """Nested well-formed signatures decode to the exact tree without leftovers."""
    assert decode(signature) == expected


def test_excessive_nesting_is_malformed() -> None:
    """Nesting far beyond what the call stack allows yields a malformed result."""
    signature = "(" * 5000 + ")" * 5000
    assert decode(signature) == MalformedSignature(signature=signature)


def test_excessive_array_nesting_is_malformed() -> None:
    signature = "a" * 5000 + "i"
    assert decode(signature) == MalformedSignature(signature=signature)


def test_malformed_keeps_original_text() -> None:
    """The malformed outcome carries the whole input, not the failing fragment."""
    result = decode("sa{(uu)s}i")
    assert isinstance(result, MalformedSignature)
    assert result.signature == "sa{(uu)s}i"
