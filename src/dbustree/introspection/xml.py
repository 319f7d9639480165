# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser for D-Bus introspection XML documents.

Attribute values are taken over verbatim. In particular, argument
directions and type signatures are not checked here, so that the renderers
can report them in context.
"""

from lxml import etree

from dbustree.bus.provider import ProviderError
from dbustree.model.entities import Annotation, Arg, Interface, Method, Node, Property, Signal

# ###############
# Public Interface
# ###############


class IntrospectionError(ProviderError):
    """Raised when an introspection document cannot be parsed."""


def parse_introspection(document: str | bytes) -> Node:
    """Parse an introspection document into a Node.

    Args:
        document: The XML text as returned by ``Introspect``.

    Returns:
        The root node with its interfaces and the names of its children.

    Raises:
        IntrospectionError: If the document is not well-formed XML or its
            root element is not ``<node>``.
    """
    if isinstance(document, str):
        document = document.encode("utf-8")
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(document, parser=parser)
    except etree.XMLSyntaxError as exc:
        raise IntrospectionError(f"Invalid introspection XML: {exc}") from exc

    if root.tag != "node":
        raise IntrospectionError(f"Expected <node> root element, found <{root.tag}>")

    return Node(
        name=root.get("name", ""),
        interfaces=[_parse_interface(el) for el in root.iterchildren("interface")],
        children=[el.get("name", "") for el in root.iterchildren("node")],
    )


# ################
# Implementation
# ################


def _parse_annotations(element: etree._Element) -> list[Annotation]:
    return [
        Annotation(name=el.get("name", ""), value=el.get("value", ""))
        for el in element.iterchildren("annotation")
    ]


def _parse_args(element: etree._Element) -> list[Arg]:
    return [
        Arg(name=el.get("name", ""), type=el.get("type", ""), direction=el.get("direction"))
        for el in element.iterchildren("arg")
    ]


def _parse_interface(element: etree._Element) -> Interface:
    """Build an Interface from an ``<interface>`` element."""
    return Interface(
        name=element.get("name", ""),
        methods=[
            Method(name=el.get("name", ""), args=_parse_args(el), annotations=_parse_annotations(el))
            for el in element.iterchildren("method")
        ],
        properties=[
            Property(
                name=el.get("name", ""),
                type=el.get("type", ""),
                access=el.get("access", ""),
                annotations=_parse_annotations(el),
            )
            for el in element.iterchildren("property")
        ],
        signals=[
            Signal(name=el.get("name", ""), args=_parse_args(el), annotations=_parse_annotations(el))
            for el in element.iterchildren("signal")
        ],
        annotations=_parse_annotations(element),
    )
