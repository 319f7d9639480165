# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Decoding and display of D-Bus type signatures."""

from dbustree.signature.decoder import decode
from dbustree.signature.display import format_signature, format_type

__all__ = [
    "decode",
    "format_signature",
    "format_type",
]
