# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Line-based parser for INI text.

Format:
    key=value           # before any header: belongs to the root group
    [group-name]        # starts (or resumes) a group
    key=a=b             # split at the first '=', text kept verbatim

The parser is lenient: malformed lines are dropped and logged at DEBUG
level, never raised. Dropped lines are:
    - headers without a closing ``]`` or with an empty name
    - value lines without ``=`` or with an empty key
    - a key repeated within a group (the first occurrence wins)
    - value lines following a malformed header, up to the next valid one

Lines longer than ``chunk_size - 1`` characters are truncated to that
length, with a WARNING. Pass ``chunk_size=None`` to read lines whole.
"""

from __future__ import annotations

import io
import logging
from typing import Iterable

from ..exceptions import DuplicateIdError
from ..node import DEFAULT_CHUNK_SIZE
from ..store import IniStore

logger = logging.getLogger(__name__)


def _strip_terminator(line: str) -> str:
    if line.endswith('\n'):
        line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
    return line


def parse_header(line: str) -> str | None:
    """Return the group name of a ``[name]`` line, or None if malformed."""
    if not line.startswith('[') or not line.endswith(']'):
        return None
    name = line[1:-1]
    return name or None


def parse_value(line: str) -> tuple[str, str] | None:
    """Split ``key=text`` at the first ``=``, or return None if malformed."""
    key, sep, text = line.partition('=')
    if not sep or not key:
        return None
    return key, text


def parse(
    stream: Iterable[str],
    store: IniStore | None = None,
    chunk_size: int | None = DEFAULT_CHUNK_SIZE,
) -> IniStore:
    """Populate an IniStore from a stream of text lines.

    Args:
        stream: Any iterable of lines: an open text file, a StringIO or a
            list of strings. Line terminators are optional.
        store: Store to fill. A new one is created if None. Existing groups
            are resumed and existing keys keep their text.
        chunk_size: Maximum line buffer size; lines are cut to
            ``chunk_size - 1`` characters. None disables the limit.

    Returns:
        The populated IniStore.

    Example:
        >>> store = parse(io.StringIO('a=1\\n[g]\\nb=2\\n'))
        >>> store.get(None, 'a'), store.get('g', 'b')
        ('1', '2')
    """
    if store is None:
        store = IniStore()
    limit = None if chunk_size is None else max(chunk_size - 1, 1)
    current = store.root

    for lineno, raw in enumerate(stream, 1):
        line = _strip_terminator(raw)
        if limit is not None and len(line) > limit:
            logger.warning(
                "line %d truncated from %d to %d characters", lineno, len(line), limit
            )
            line = line[:limit]

        if not line:
            continue

        if line.startswith('['):
            name = parse_header(line)
            if name is None:
                logger.debug("line %d: malformed group header dropped: %r", lineno, line)
                current = None
                continue
            current = store.ensure_group(name)
            continue

        if current is None:
            logger.debug("line %d: value outside any valid group dropped", lineno)
            continue

        pair = parse_value(line)
        if pair is None:
            logger.debug("line %d: malformed value line dropped: %r", lineno, line)
            continue
        try:
            current.add_value(*pair)
        except DuplicateIdError:
            logger.debug("line %d: duplicate key %r ignored", lineno, pair[0])

    return store


def loads(
    text: str,
    store: IniStore | None = None,
    chunk_size: int | None = DEFAULT_CHUNK_SIZE,
) -> IniStore:
    """Parse INI text held in a string."""
    return parse(io.StringIO(text), store=store, chunk_size=chunk_size)
