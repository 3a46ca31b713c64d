# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""FieldTree exceptions."""

from __future__ import annotations


class FieldTreeError(Exception):
    """Base exception for FieldTree errors."""

    pass


class FieldIOError(FieldTreeError):
    """Raised when the underlying document cannot be read or a wrapper cannot be built."""

    pass


class ParentCycleError(FieldTreeError):
    """Raised when a parent chain loops back on itself."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Parent cycle detected while resolving '{key}'")
