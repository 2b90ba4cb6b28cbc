# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Parsers for populating IniStore from text.

Available parsers:
- ini: line-oriented ``key=value`` / ``[group]`` text

Example:
    >>> from genro_inistore.parsers import loads
    >>> store = loads('a=1\\n[g]\\nb=2\\n')
    >>> store.get('g', 'b')
    '2'
"""

from .ini import DEFAULT_CHUNK_SIZE, loads, parse, parse_header, parse_value

__all__ = [
    'DEFAULT_CHUNK_SIZE',
    'loads',
    'parse',
    'parse_header',
    'parse_value',
]
