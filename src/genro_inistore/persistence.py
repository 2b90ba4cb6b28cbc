# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Loading and saving IniStore files.

Functions:
    - load(path): parse a file into a store bound to ``path``
    - load_ex(path): like load(), returning (store_or_None, ErrorKind)
    - try_load(path): never fails, returns an empty bound store on error
    - save(store): write a store to its backing path
"""

from __future__ import annotations

import contextlib
import logging
import os
import shutil
import tempfile
from pathlib import Path

from .exceptions import (
    AccessDeniedError,
    ErrorKind,
    IniFileNotFoundError,
    IniStoreError,
    InvalidArgumentError,
    InvalidPathError,
    ReadError,
)
from .parsers.ini import DEFAULT_CHUNK_SIZE, parse
from .serializer import dumps
from .store import IniStore

logger = logging.getLogger(__name__)


def _check_path(path: str | os.PathLike | None) -> Path:
    if path is None or not os.fspath(path):
        raise InvalidPathError("No backing path set")
    return Path(path)


def load(
    path: str | os.PathLike,
    encoding: str = 'utf-8',
    chunk_size: int | None = DEFAULT_CHUNK_SIZE,
) -> IniStore:
    """Load an INI file into a new IniStore bound to ``path``.

    Raises:
        InvalidPathError: If ``path`` is empty or None.
        IniFileNotFoundError: If ``path`` does not exist.
        AccessDeniedError: If ``path`` exists but cannot be opened.
        ReadError: If the content cannot be decoded with ``encoding``.
    """
    file_path = _check_path(path)
    if not file_path.exists():
        raise IniFileNotFoundError(f"File not found: {file_path}")

    store = IniStore(path=os.fspath(path))
    try:
        with open(file_path, encoding=encoding) as f:
            parse(f, store=store, chunk_size=chunk_size)
    except UnicodeDecodeError as e:
        raise ReadError(f"Cannot decode {file_path}: {e}") from e
    except OSError as e:
        raise AccessDeniedError(f"Cannot read {file_path}: {e}") from e

    logger.debug("loaded %s (%d groups)", file_path, len(store))
    return store


def load_ex(
    path: str | os.PathLike,
    encoding: str = 'utf-8',
    chunk_size: int | None = DEFAULT_CHUNK_SIZE,
) -> tuple[IniStore | None, ErrorKind]:
    """Like load(), returning (store, OK) or (None, error_kind)."""
    try:
        return load(path, encoding=encoding, chunk_size=chunk_size), ErrorKind.OK
    except IniStoreError as e:
        return None, e.kind


def try_load(
    path: str | os.PathLike,
    encoding: str = 'utf-8',
    chunk_size: int | None = DEFAULT_CHUNK_SIZE,
) -> IniStore:
    """Load ``path``, or return an empty store bound to it on any error.

    The returned store can always be saved later to create the file.
    """
    store, kind = load_ex(path, encoding=encoding, chunk_size=chunk_size)
    if store is None:
        logger.debug("cannot load %s (%s), starting empty", path, kind.value)
        store = IniStore(path=os.fspath(path) if path is not None else None)
    return store


def save(store: IniStore, encoding: str = 'utf-8') -> None:
    """Write ``store`` to its backing path, creating the file if missing.

    The whole file is encoded first and written to a temporary file in the
    same directory, which then replaces the target. On any failure the
    previous file is left untouched.

    Raises:
        InvalidPathError: If the store has no backing path.
        InvalidArgumentError: If the store content cannot be encoded with
            ``encoding``, or the encoding is unknown.
        AccessDeniedError: If the path cannot be written.
    """
    file_path = _check_path(store.path)
    try:
        data = dumps(store).encode(encoding)
    except (UnicodeEncodeError, LookupError) as e:
        raise InvalidArgumentError(
            f"Cannot encode {file_path} as {encoding}: {e}"
        ) from e

    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
        )
    except OSError as e:
        raise AccessDeniedError(f"Cannot write {file_path}: {e}") from e
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        with contextlib.suppress(OSError):
            shutil.copymode(file_path, tmp_name)
        os.replace(tmp_name, file_path)
    except OSError as e:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise AccessDeniedError(f"Cannot write {file_path}: {e}") from e
    logger.debug("saved %s (%d groups)", file_path, len(store))
