# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""The remote operations the renderers rely on, independent of any transport."""

from typing import Protocol

from dbustree.model.entities import Node

# ###############
# Public Interface
# ###############


class ProviderError(Exception):
    """Raised when a remote call, the transport, or a returned document fails."""


class IntrospectionProvider(Protocol):
    """Source of introspection data and bus metadata."""

    def introspect(self, destination: str, path: str) -> Node:
        """Return the parsed introspection data of *path* on *destination*."""
        ...

    def get_property(self, destination: str, path: str, interface: str, name: str) -> object:
        """Return the current value of a property."""
        ...

    def list_names(self) -> list[str]:
        """Return every name currently registered on the bus."""
        ...

    def get_connection_pid(self, name: str) -> int:
        """Return the process ID of the connection owning *name*."""
        ...


def join_path(parent: str, segment: str) -> str:
    """Return the object path of child *segment* below *parent*.

    >>> join_path("/", "org")
    '/org'
    >>> join_path("/org", "freedesktop")
    '/org/freedesktop'
    """
    if parent == "/":
        return "/" + segment
    return f"{parent}/{segment}"
