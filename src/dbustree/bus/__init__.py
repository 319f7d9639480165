# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Access to introspection data on a message bus."""

from dbustree.bus.provider import IntrospectionProvider, ProviderError, join_path

__all__ = [
    "IntrospectionProvider",
    "ProviderError",
    "join_path",
]
