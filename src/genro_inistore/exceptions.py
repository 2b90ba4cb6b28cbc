# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""IniStore error kinds and exceptions.

Every operation reports its outcome as an ErrorKind. Lookups and deletions
return the kind directly; operations that cannot complete (bad arguments,
file access) raise the matching IniStoreError subclass, whose ``kind``
attribute carries the same ErrorKind.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Outcome of an IniStore operation."""

    OK = 'ok'
    INVALID_ARGUMENT = 'invalid_argument'
    INVALID_PATH = 'invalid_path'
    FILE_NOT_FOUND = 'file_not_found'
    ACCESS_DENIED = 'access_denied'
    GROUP_NOT_FOUND = 'group_not_found'
    VALUE_NOT_FOUND = 'value_not_found'
    DUPLICATE_ID = 'duplicate_id'
    INVALID_ID = 'invalid_id'
    CONVERSION_ERROR = 'conversion_error'
    READ_ERROR = 'read_error'

    def __bool__(self) -> bool:
        """Only OK is truthy, so ``if store.delete_value(...)`` reads naturally."""
        return self is ErrorKind.OK


class IniStoreError(Exception):
    """Base exception for IniStore errors."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT


class InvalidArgumentError(IniStoreError):
    """Raised when a required argument is missing or of the wrong type."""

    kind = ErrorKind.INVALID_ARGUMENT


class InvalidIdError(IniStoreError):
    """Raised when a key or group name cannot be stored."""

    kind = ErrorKind.INVALID_ID


class DuplicateIdError(IniStoreError):
    """Raised when a raw insertion would duplicate a key within a group."""

    kind = ErrorKind.DUPLICATE_ID


class InvalidPathError(IniStoreError):
    """Raised when a store has no usable backing path."""

    kind = ErrorKind.INVALID_PATH


class IniFileNotFoundError(IniStoreError):
    """Raised when the file to load does not exist."""

    kind = ErrorKind.FILE_NOT_FOUND


class AccessDeniedError(IniStoreError):
    """Raised when a file exists but cannot be opened for reading or writing."""

    kind = ErrorKind.ACCESS_DENIED


class ReadError(IniStoreError):
    """Raised when a file was opened but its content could not be decoded."""

    kind = ErrorKind.READ_ERROR
