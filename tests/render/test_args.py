# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for argument list formatting."""

import pytest

from dbustree.model.entities import Annotation, Arg
from dbustree.render.args import (
    DirectionError,
    format_annotation,
    format_args,
    format_type_text,
    split_method_args,
)
from dbustree.render.style import PlainStyle

_STYLE = PlainStyle()


class TestFormatArgs:
    def test_unnamed_argument_gets_positional_name(self) -> None:
        """Unnamed arguments are shown as arg_<index>, order preserved."""
        args = [Arg(type="s"), Arg(name="flags", type="u")]
        assert format_args(args, style=_STYLE) == "arg_0 String, flags Uint32"

    def test_placeholder_uses_position_in_list(self) -> None:
        args = [Arg(name="a", type="i"), Arg(type="i")]
        assert format_args(args, style=_STYLE) == "a Int32, arg_1 Int32"

    def test_empty_list(self) -> None:
        assert format_args([], style=_STYLE) == ""

    def test_raw_signatures_bypass_decoding(self) -> None:
        args = [Arg(name="props", type="a{sv}")]
        assert format_args(args, style=_STYLE, raw_signatures=True) == "props a{sv}"

    def test_malformed_type_is_inline(self) -> None:
        args = [Arg(name="bad", type="a{(uu)s}")]
        assert format_args(args, style=_STYLE) == "bad Malformed(a{(uu)s})"


class TestSplitMethodArgs:
    def test_splits_by_direction(self) -> None:
        first = Arg(name="a", type="s", direction="in")
        second = Arg(name="b", type="i", direction="out")
        third = Arg(name="c", type="u", direction="in")
        assert split_method_args([first, second, third]) == ([first, third], [second])

    def test_missing_direction_is_input(self) -> None:
        arg = Arg(name="a", type="s")
        assert split_method_args([arg]) == ([arg], [])

    def test_unknown_direction_raises(self) -> None:
        with pytest.raises(DirectionError, match="sideways") as exc_info:
            split_method_args([Arg(type="s", direction="in"), Arg(type="s", direction="sideways")])
        assert exc_info.value.direction == "sideways"

    def test_empty_direction_raises(self) -> None:
        with pytest.raises(DirectionError):
            split_method_args([Arg(type="s", direction="")])


def test_format_type_text_decoded() -> None:
    assert format_type_text("as", style=_STYLE) == "Array[String]"


def test_format_type_text_raw() -> None:
    assert format_type_text("as", style=_STYLE, raw_signatures=True) == "as"


def test_format_annotation() -> None:
    annotation = Annotation(name="org.freedesktop.DBus.Deprecated", value="true")
    assert format_annotation(annotation, style=_STYLE) == "@org.freedesktop.DBus.Deprecated = true"
