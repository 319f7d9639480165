# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parsing of D-Bus introspection documents."""

from dbustree.introspection.xml import IntrospectionError, parse_introspection

__all__ = [
    "IntrospectionError",
    "parse_introspection",
]
