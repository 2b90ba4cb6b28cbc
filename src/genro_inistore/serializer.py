# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Serializer writing an IniStore back to INI text.

Output layout:
    - root values first, without a header
    - each named group as ``[name]`` followed by its ``key=text`` lines
    - one blank line between blocks, none before the first or after the last

An empty root group produces no block, so a store whose root is empty
starts directly with its first header.
"""

from __future__ import annotations

import io
from typing import Iterator, TextIO

from .node import IniGroup
from .store import IniStore


def _group_lines(group: IniGroup) -> Iterator[str]:
    if not group.is_root:
        yield f"[{group.name}]\n"
    for value in group:
        yield f"{value.key}={value.text}\n"


def iter_lines(store: IniStore) -> Iterator[str]:
    """Yield the newline-terminated lines of ``store`` in file order."""
    first = True
    for group in store:
        if group.is_root and not len(group):
            continue
        if not first:
            yield "\n"
        first = False
        yield from _group_lines(group)


def serialize(store: IniStore, stream: TextIO) -> None:
    """Write ``store`` to a writable text stream."""
    stream.writelines(iter_lines(store))


def dumps(store: IniStore) -> str:
    """Return ``store`` as INI text."""
    buffer = io.StringIO()
    serialize(store, buffer)
    return buffer.getvalue()
