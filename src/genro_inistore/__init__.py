# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-IniStore - Ordered INI-style configuration documents.

A lightweight, zero-dependency library to load, query, edit and save
INI-style files made of ordered groups of key/value strings.
"""

__version__ = "0.1.0"

from .exceptions import (
    AccessDeniedError,
    DuplicateIdError,
    ErrorKind,
    IniFileNotFoundError,
    IniStoreError,
    InvalidArgumentError,
    InvalidIdError,
    InvalidPathError,
    ReadError,
)
from .node import (
    GROUP_PATH_SEPARATOR,
    MAX_LINE_LENGTH,
    IniGroup,
    IniValue,
    join_group_path,
)
from .parsers import DEFAULT_CHUNK_SIZE, loads, parse
from .persistence import load, load_ex, save, try_load
from .serializer import dumps, serialize
from .store import IniStore

__all__ = [
    # Core classes
    "IniStore",
    "IniGroup",
    "IniValue",
    # Group names
    "GROUP_PATH_SEPARATOR",
    "join_group_path",
    # Text format
    "DEFAULT_CHUNK_SIZE",
    "MAX_LINE_LENGTH",
    "parse",
    "loads",
    "serialize",
    "dumps",
    # Files
    "load",
    "load_ex",
    "try_load",
    "save",
    # Errors
    "ErrorKind",
    "IniStoreError",
    "InvalidArgumentError",
    "InvalidIdError",
    "DuplicateIdError",
    "InvalidPathError",
    "IniFileNotFoundError",
    "AccessDeniedError",
    "ReadError",
]
