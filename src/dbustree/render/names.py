# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Ordering and listing of the names registered on a bus."""

from __future__ import annotations

import functools
from collections.abc import Iterable, Iterator
from pathlib import Path

from dbustree.bus.provider import IntrospectionProvider
from dbustree.render.style import PlainStyle

# ###############
# Public Interface
# ###############

# Leading character of connection-unique names such as ``:1.42``.
UNIQUE_NAME_SIGIL = ":"


def collate_names(names: Iterable[str]) -> list[str]:
    """Return *names* with well-known names first and unique names last.

    Each group is sorted lexically.
    """
    return sorted(names, key=functools.cmp_to_key(_compare_names))


def list_names(
    provider: IntrospectionProvider,
    *,
    quiet: bool = False,
    style: PlainStyle | None = None,
    proc_root: Path = Path("/proc"),
) -> Iterator[str]:
    """Yield one line per bus name, annotated with its owner process.

    In *quiet* mode only the names are yielded. Otherwise each line reads
    ``name pid cmdline``.

    Raises:
        ProviderError: If listing names or resolving an owner PID fails.
    """
    style = style or PlainStyle()
    for name in collate_names(provider.list_names()):
        if quiet:
            yield name
            continue
        pid = provider.get_connection_pid(name)
        yield " ".join(
            [
                style.bus_name(name),
                style.pid(str(pid)),
                style.cmdline(read_cmdline(pid, proc_root=proc_root)),
            ]
        )


def read_cmdline(pid: int, *, proc_root: Path = Path("/proc")) -> str:
    """Return the command line of process *pid*, or '' if it cannot be read."""
    try:
        raw = (proc_root / str(pid) / "cmdline").read_bytes()
    except OSError:
        return ""
    return raw.decode("utf-8", errors="replace").rstrip("\x00").replace("\x00", " ")


# ################
# Implementation
# ################


def _compare_names(left: str, right: str) -> int:
    """Order unique names after well-known ones, otherwise lexically."""
    left_unique = left.startswith(UNIQUE_NAME_SIGIL)
    right_unique = right.startswith(UNIQUE_NAME_SIGIL)
    if left_unique and not right_unique:
        return 1
    if right_unique and not left_unique:
        return -1
    return (left > right) - (left < right)
