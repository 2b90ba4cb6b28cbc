# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""IniStore - ordered groups of key/value strings.

This module provides the IniStore class, the in-memory document behind an
INI-style configuration file. A store is a flat, ordered sequence of
IniGroup instances. The first group is always the anonymous root, which
holds the values written before any ``[group]`` header.

Key Features:
    - **Ordered**: groups and values keep the order in which they were
      first written, so load and save are order-consistent
    - **Default fallback**: lookups return a caller-supplied fallback on a
      miss, and the ``_ex`` forms report why the lookup missed
    - **Typed accessors**: int, double and bool stored as text and parsed
      on demand
    - **Persistence**: bound to an optional backing path for ``save()``

Addressing:
    - ``None`` addresses the root group, which always exists
    - Any other string is one flat group name; ``'parent::child'`` is a
      single group, not a child of ``parent``

Example:
    Basic usage::

        store = IniStore()
        store.set(None, 'name', 'MyApp')
        store.set('database', 'host', 'localhost')
        store.set_int('database', 'port', 5432)

        store.get('database', 'host')           # 'localhost'
        store.get_int('database', 'port', 0)    # 5432
        store.get('missing', 'key', 'default')  # 'default'
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from ..exceptions import (
    ErrorKind,
    IniStoreError,
    InvalidArgumentError,
    InvalidIdError,
)
from ..node import (
    IniGroup,
    IniValue,
    check_group_name,
    check_key,
    check_line,
    check_text,
    MAX_LINE_LENGTH,
)

logger = logging.getLogger(__name__)

_ERRORS: dict[ErrorKind, type[IniStoreError]] = {
    ErrorKind.INVALID_ARGUMENT: InvalidArgumentError,
    ErrorKind.INVALID_ID: InvalidIdError,
}


class IniStore:
    """An ordered INI document with default-value lookups.

    IniStore provides:
    - get(group, key, fallback) / get_ex(...): read text values
    - set(group, key, text): create or overwrite, creating the group
    - delete_value(group, key) / delete_group(group)
    - typed get/set for int, double and bool
    - save(): write back to the backing path

    Attributes:
        path: The backing file path used by save(), or None.

    Example:
        >>> store = IniStore()
        >>> store.set('g', 'b', '2')
        <ErrorKind.OK: 'ok'>
        >>> store.get('g', 'b')
        '2'
    """

    __slots__ = ('path', '_groups', '_raise_on_error')

    def __init__(
        self,
        path: str | None = None,
        raise_on_error: bool = True,
    ) -> None:
        """Initialize an empty IniStore holding only the root group.

        Args:
            path: Optional backing file path for save().
            raise_on_error: If True (default), invalid arguments to set()
                and delete_group() raise InvalidArgumentError or
                InvalidIdError. If False, the matching ErrorKind is returned
                and the store is left unchanged. Lookups and deletions of
                missing entries never raise.
        """
        self.path = path
        self._groups: dict[str | None, IniGroup] = {None: IniGroup(None)}
        self._raise_on_error = raise_on_error

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        """Return string representation showing group names."""
        return f"IniStore({self.group_names()})"

    def __len__(self) -> int:
        """Return the number of groups, root included."""
        return len(self._groups)

    def __iter__(self) -> Iterator[IniGroup]:
        """Iterate over groups in store order, root first."""
        return iter(list(self._groups.values()))

    def __contains__(self, name: str | None) -> bool:
        """Check if a group exists. ``None in store`` is always True."""
        return name in self._groups

    # ==================== Groups ====================

    @property
    def root(self) -> IniGroup:
        """The anonymous root group."""
        return self._groups[None]

    @property
    def raise_on_error(self) -> bool:
        return self._raise_on_error

    def groups(self) -> list[IniGroup]:
        """Return all groups in store order, root first."""
        return list(self._groups.values())

    def group_names(self) -> list[str]:
        """Return the names of the named groups in store order."""
        return [name for name in self._groups if name is not None]

    def get_group(self, name: str | None) -> IniGroup | None:
        """Return the group called ``name`` (None for root), or None."""
        return self._groups.get(name)

    def ensure_group(self, name: str | None) -> IniGroup:
        """Return the group called ``name``, appending it if missing.

        No validation is done on ``name``; callers check it first.
        """
        group = self._groups.get(name)
        if group is None:
            group = IniGroup(name)
            self._groups[name] = group
            logger.debug("created group %r", name)
        return group

    # ==================== Core API ====================

    def get(self, group: str | None, key: str, fallback: Any = None) -> Any:
        """Return the text stored for ``key`` in ``group``.

        Args:
            group: Group name, or None for the root group.
            key: The key to look up.
            fallback: Returned unchanged if the group or key is missing.

        Returns:
            The stored text, or ``fallback``.
        """
        return self.get_ex(group, key, fallback)[0]

    def get_ex(
        self, group: str | None, key: str, fallback: Any = None
    ) -> tuple[Any, ErrorKind]:
        """Like get(), also reporting why a lookup missed.

        Returns:
            Tuple of (text_or_fallback, kind) where kind is OK,
            GROUP_NOT_FOUND or VALUE_NOT_FOUND.

        Example:
            >>> store.get_ex('missing', 'y', 'x')
            ('x', <ErrorKind.GROUP_NOT_FOUND: 'group_not_found'>)
        """
        value, kind = self._find(group, key)
        if value is None:
            return fallback, kind
        return value.text, kind

    def exists(self, group: str | None, key: str) -> bool:
        """True if ``group`` exists and holds ``key``."""
        return self._find(group, key)[0] is not None

    def set(self, group: str | None, key: str, text: str) -> ErrorKind:
        """Store ``text`` under ``key`` in ``group``.

        The group is appended to the store if missing. An existing key is
        overwritten in place; a new key is appended after the group's
        existing values.

        Args:
            group: Group name, or None for the root group.
            key: Non-empty key without ``=`` or line breaks, not starting
                with ``[``.
            text: The text to store, without line breaks.

        Returns:
            ErrorKind.OK, or the error kind when raise_on_error is False.

        Raises:
            InvalidIdError: If the key or group name cannot be written to
                the text format, including a ``[name]`` header longer than
                MAX_LINE_LENGTH (only when raise_on_error is True).
            InvalidArgumentError: If key, group or text is not a string,
                text contains a line break, or the ``key=text`` line would
                exceed MAX_LINE_LENGTH (only when raise_on_error is True).
        """
        for kind in (check_group_name(group), check_key(key), check_text(text)):
            if kind is not ErrorKind.OK:
                return self._fail(kind, f"cannot set {group!r}/{key!r}: {kind.value}")
        if check_line(key, text) is not ErrorKind.OK:
            return self._fail(
                ErrorKind.INVALID_ARGUMENT,
                f"cannot set {group!r}/{key!r}: line longer than {MAX_LINE_LENGTH}",
            )

        self.ensure_group(group).set_value(key, text)
        return ErrorKind.OK

    def delete_value(self, group: str | None, key: str) -> ErrorKind:
        """Remove ``key`` from ``group``.

        The group is kept even if it becomes empty.

        Returns:
            OK, GROUP_NOT_FOUND or VALUE_NOT_FOUND.
        """
        value, kind = self._find(group, key)
        if value is not None:
            self._groups[group].remove_value(key)
        return kind

    def delete_group(self, group: str | None) -> ErrorKind:
        """Remove ``group`` and all of its values.

        Returns:
            OK or GROUP_NOT_FOUND.

        Raises:
            InvalidArgumentError: If ``group`` is None; the root group cannot
                be deleted (only when raise_on_error is True).
        """
        if group is None:
            return self._fail(
                ErrorKind.INVALID_ARGUMENT, "the root group cannot be deleted"
            )
        if group not in self._groups:
            return ErrorKind.GROUP_NOT_FOUND
        del self._groups[group]
        logger.debug("deleted group %r", group)
        return ErrorKind.OK

    # ==================== Typed Accessors ====================

    def set_int(self, group: str | None, key: str, value: int) -> ErrorKind:
        """Store an integer as its decimal text.

        A value int() cannot convert is an INVALID_ARGUMENT.
        """
        try:
            text = str(int(value))
        except (TypeError, ValueError, OverflowError):
            return self._fail(
                ErrorKind.INVALID_ARGUMENT, f"not an integer: {value!r}"
            )
        return self.set(group, key, text)

    def set_double(self, group: str | None, key: str, value: float) -> ErrorKind:
        """Store a float as the shortest text that parses back to it.

        A value float() cannot convert is an INVALID_ARGUMENT.
        """
        try:
            text = repr(float(value))
        except (TypeError, ValueError, OverflowError):
            return self._fail(
                ErrorKind.INVALID_ARGUMENT, f"not a number: {value!r}"
            )
        return self.set(group, key, text)

    def set_bool(self, group: str | None, key: str, value: bool) -> ErrorKind:
        """Store a boolean as ``1`` or ``0``."""
        return self.set_int(group, key, 1 if value else 0)

    def get_int_ex(
        self, group: str | None, key: str, fallback: int = 0
    ) -> tuple[int, ErrorKind]:
        """Return (int, kind); CONVERSION_ERROR if the text is not an int.

        The text is read with int(): surrounding whitespace and ``_`` digit
        separators are accepted (``' 5'``, ``'1_000'``), float text is not.
        """
        return self._get_converted(group, key, fallback, int)

    def get_double_ex(
        self, group: str | None, key: str, fallback: float = 0.0
    ) -> tuple[float, ErrorKind]:
        """Return (float, kind); CONVERSION_ERROR if the text is not a float.

        The text is read with float(), so ``'nan'``, ``'inf'`` and
        ``'-inf'`` are numbers, as is anything set_double() writes.
        """
        return self._get_converted(group, key, fallback, float)

    def get_bool_ex(
        self, group: str | None, key: str, fallback: bool = False
    ) -> tuple[bool, ErrorKind]:
        """Return (bool, kind); any non-zero integer text is True."""
        number, kind = self._get_converted(group, key, None, int)
        if number is None:
            return fallback, kind
        return number != 0, kind

    def get_int(self, group: str | None, key: str, fallback: int = 0) -> int:
        return self.get_int_ex(group, key, fallback)[0]

    def get_double(
        self, group: str | None, key: str, fallback: float = 0.0
    ) -> float:
        return self.get_double_ex(group, key, fallback)[0]

    def get_bool(self, group: str | None, key: str, fallback: bool = False) -> bool:
        return self.get_bool_ex(group, key, fallback)[0]

    # ==================== Persistence ====================

    def save(self, encoding: str = 'utf-8') -> None:
        """Write the store to its backing path.

        Raises:
            InvalidPathError: If no backing path is set.
            AccessDeniedError: If the path cannot be opened for writing.
        """
        from ..persistence import save
        save(self, encoding=encoding)

    # ==================== Conversion ====================

    def as_dict(self) -> dict[str | None, dict[str, str]]:
        """Return ``{group_name: {key: text}}``, root under the None key."""
        return {name: group.as_dict() for name, group in self._groups.items()}

    def clear(self) -> None:
        """Remove all named groups and all root values. Keeps the path."""
        self._groups = {None: IniGroup(None)}

    # ==================== Internals ====================

    def _find(
        self, group: str | None, key: str
    ) -> tuple[IniValue | None, ErrorKind]:
        grp = self._groups.get(group)
        if grp is None:
            return None, ErrorKind.GROUP_NOT_FOUND
        value = grp.get_value(key)
        if value is None:
            return None, ErrorKind.VALUE_NOT_FOUND
        return value, ErrorKind.OK

    def _get_converted(
        self, group: str | None, key: str, fallback: Any, convert: Any
    ) -> tuple[Any, ErrorKind]:
        text, kind = self.get_ex(group, key)
        if kind is not ErrorKind.OK:
            return fallback, kind
        try:
            return convert(text), ErrorKind.OK
        except ValueError:
            logger.debug("cannot convert %r/%r=%r with %s", group, key, text,
                         convert.__name__)
            return fallback, ErrorKind.CONVERSION_ERROR

    def _fail(self, kind: ErrorKind, message: str) -> ErrorKind:
        if self._raise_on_error:
            raise _ERRORS[kind](message)
        return kind
