# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Introspection records describing the objects exposed on a bus."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Annotation(BaseModel):
    """A name/value annotation attached to an interface member."""

    name: str
    value: str = ""


class Arg(BaseModel):
    """An argument of a method or signal.

    The direction is kept exactly as found in the document; it is only
    interpreted when a method's arguments are split into inputs and outputs.
    """

    name: str = ""
    type: str
    direction: str | None = None


class Method(BaseModel):
    """A callable member of an interface."""

    name: str
    args: list[Arg] = _Field(default_factory=list)
    annotations: list[Annotation] = _Field(default_factory=list)


class Signal(BaseModel):
    """A signal emitted by an interface."""

    name: str
    args: list[Arg] = _Field(default_factory=list)
    annotations: list[Annotation] = _Field(default_factory=list)


class Property(BaseModel):
    """A typed property with an access mode such as ``read`` or ``readwrite``."""

    name: str
    type: str
    access: str = ""
    annotations: list[Annotation] = _Field(default_factory=list)


class Interface(BaseModel):
    """A named group of methods, properties and signals."""

    name: str
    methods: list[Method] = _Field(default_factory=list)
    properties: list[Property] = _Field(default_factory=list)
    signals: list[Signal] = _Field(default_factory=list)
    annotations: list[Annotation] = _Field(default_factory=list)


class Node(BaseModel):
    """The introspection data of one object path.

    ``children`` holds bare child segments (``"Foo"``), not full paths.
    """

    name: str = ""
    interfaces: list[Interface] = _Field(default_factory=list)
    children: list[str] = _Field(default_factory=list)
