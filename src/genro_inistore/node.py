# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""IniStore node classes: values and groups."""

from __future__ import annotations

from typing import Iterator

from .exceptions import DuplicateIdError, ErrorKind

GROUP_PATH_SEPARATOR = '::'

# Size of the line buffer used when reading; a stored line longer than
# MAX_LINE_LENGTH would be truncated on load.
DEFAULT_CHUNK_SIZE = 1024
MAX_LINE_LENGTH = DEFAULT_CHUNK_SIZE - 1

_LINE_BREAKS = ('\n', '\r')


def join_group_path(*parts: str) -> str:
    """Build a ``parent::child`` group name from its segments.

    The result is a single, flat group name: groups are never nested, the
    separator is only a naming convention.

    Example:
        >>> join_group_path('parent', 'child', 'baby')
        'parent::child::baby'
    """
    return GROUP_PATH_SEPARATOR.join(parts)


def check_key(key: object) -> ErrorKind:
    """Return OK if ``key`` can be written as the left side of a value line."""
    if not isinstance(key, str):
        return ErrorKind.INVALID_ARGUMENT
    if not key or '=' in key or key.startswith('['):
        return ErrorKind.INVALID_ID
    if any(c in key for c in _LINE_BREAKS):
        return ErrorKind.INVALID_ID
    return ErrorKind.OK


def check_group_name(name: object) -> ErrorKind:
    """Return OK if ``name`` can be written inside a ``[...]`` header.

    None (the root group) is always valid.
    """
    if name is None:
        return ErrorKind.OK
    if not isinstance(name, str):
        return ErrorKind.INVALID_ARGUMENT
    if not name or ']' in name or any(c in name for c in _LINE_BREAKS):
        return ErrorKind.INVALID_ID
    if len(name) + 2 > MAX_LINE_LENGTH:
        return ErrorKind.INVALID_ID
    return ErrorKind.OK


def check_text(text: object) -> ErrorKind:
    """Return OK if ``text`` fits on the right side of a value line."""
    if not isinstance(text, str):
        return ErrorKind.INVALID_ARGUMENT
    if any(c in text for c in _LINE_BREAKS):
        return ErrorKind.INVALID_ARGUMENT
    return ErrorKind.OK


def check_line(key: str, text: str) -> ErrorKind:
    """Return OK if ``key=text`` fits in one line buffer."""
    if len(key) + 1 + len(text) > MAX_LINE_LENGTH:
        return ErrorKind.INVALID_ARGUMENT
    return ErrorKind.OK


class IniValue:
    """A single key/text pair inside an IniGroup.

    Example:
        >>> value = IniValue('host', 'localhost')
        >>> value.key
        'host'
        >>> value.text
        'localhost'
    """

    __slots__ = ('key', 'text', 'parent')

    def __init__(
        self,
        key: str,
        text: str = '',
        parent: IniGroup | None = None,
    ) -> None:
        self.key = key
        self.text = text
        self.parent = parent

    def __repr__(self) -> str:
        return f"IniValue({self.key!r}, {self.text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniValue):
            return NotImplemented
        return self.key == other.key and self.text == other.text

    __hash__ = None  # type: ignore[assignment]


class IniGroup:
    """An ordered collection of IniValue with unique keys.

    The root group of a store has ``name`` None. Values keep the order in
    which they were first written; overwriting a key keeps its position.

    Example:
        >>> group = IniGroup('server')
        >>> group.add_value('host', 'localhost')
        IniValue('host', 'localhost')
        >>> group.keys()
        ['host']
    """

    __slots__ = ('name', '_values')

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self._values: dict[str, IniValue] = {}

    def __repr__(self) -> str:
        return f"IniGroup({self.name!r}, {list(self._values.keys())})"

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[IniValue]:
        """Iterate over values in stored order."""
        return iter(list(self._values.values()))

    def __contains__(self, key: str) -> bool:
        return key in self._values

    @property
    def is_root(self) -> bool:
        """True for the anonymous group holding top-level values."""
        return self.name is None

    def get_value(self, key: str) -> IniValue | None:
        """Return the IniValue for ``key``, or None."""
        return self._values.get(key)

    def add_value(self, key: str, text: str) -> IniValue:
        """Append a new value.

        Raises:
            DuplicateIdError: If ``key`` is already present in this group.
        """
        if key in self._values:
            raise DuplicateIdError(
                f"Key '{key}' already exists in group {self.name!r}"
            )
        value = IniValue(key, text, parent=self)
        self._values[key] = value
        return value

    def set_value(self, key: str, text: str) -> IniValue:
        """Overwrite ``key`` in place, or append it if missing."""
        value = self._values.get(key)
        if value is None:
            return self.add_value(key, text)
        value.text = text
        return value

    def remove_value(self, key: str) -> IniValue:
        """Remove and return the value for ``key``.

        Raises:
            KeyError: If ``key`` is not present.
        """
        value = self._values.pop(key)
        value.parent = None
        return value

    def keys(self) -> list[str]:
        """Return keys in stored order."""
        return list(self._values.keys())

    def items(self) -> list[tuple[str, str]]:
        """Return (key, text) pairs in stored order."""
        return [(v.key, v.text) for v in self._values.values()]

    def as_dict(self) -> dict[str, str]:
        """Return a plain ``{key: text}`` dict in stored order."""
        return dict(self.items())
