# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Readable trees of the objects and interfaces exposed on a D-Bus."""
