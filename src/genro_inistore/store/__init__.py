# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""IniStore package - ordered INI document container.

The package is organized into:
- core: Main IniStore class with group handling, lookups, mutations and
  typed accessors

Example:
    >>> from genro_inistore import IniStore
    >>> store = IniStore()
    >>> store.set('config', 'name', 'MyApp')
    >>> store.get('config', 'name')
    'MyApp'
"""

from .core import IniStore

__all__ = ["IniStore"]
