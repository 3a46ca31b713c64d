# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""KidList - live list of resolved kids over a Kids array."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, Iterable, Union, TYPE_CHECKING

from .document import NodeArray
from .widget import Widget

if TYPE_CHECKING:
    from .field import Field

Kid = Union[Widget, 'Field']


class KidList(MutableSequence):
    """Resolved kids of a field, kept in step with the backing Kids array.

    Each resolved kid remembers its position in the backing array, which
    may also hold dangling entries that were skipped during resolution.
    Edits through this list are written to the backing array; dangling
    entries are left where they are.

    Example:
        >>> kids = field.kids()
        >>> del kids[0]           # also removed from the Kids array
        >>> kids.append(Widget())  # also appended to the Kids array
    """

    __slots__ = ('_kids', '_positions', '_backing')

    def __init__(
        self,
        kids: Iterable[Kid],
        positions: Iterable[int],
        backing: NodeArray,
    ) -> None:
        """Initialize a KidList.

        Args:
            kids: Resolved kids, in document order.
            positions: Index in backing of each resolved kid.
            backing: The Kids array the kids were resolved from.
        """
        self._kids: list[Kid] = list(kids)
        self._positions: list[int] = list(positions)
        self._backing = backing
        if len(self._kids) != len(self._positions):
            raise ValueError("kids and positions must have the same length")

    def __repr__(self) -> str:
        return f"KidList({self._kids!r})"

    def __len__(self) -> int:
        return len(self._kids)

    def __getitem__(self, index: Any) -> Any:
        return self._kids[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, KidList):
            return self._kids == other._kids
        if isinstance(other, list):
            return self._kids == other
        return NotImplemented

    def __setitem__(self, index: Any, value: Kid) -> None:
        if isinstance(index, slice):
            raise TypeError("KidList does not support slice assignment")
        pos = self._positions[index]
        self._backing[pos] = value.node
        self._kids[index] = value

    def __delitem__(self, index: Any) -> None:
        if isinstance(index, slice):
            raise TypeError("KidList does not support slice deletion")
        pos = self._positions.pop(index)
        self._kids.pop(index)
        del self._backing[pos]
        self._positions = [p - 1 if p > pos else p for p in self._positions]

    def insert(self, index: int, value: Kid) -> None:
        """Insert value before index, in both this list and the backing array."""
        size = len(self._kids)
        if index < 0:
            index = max(0, size + index)
        if index >= size:
            index = size
            pos = len(self._backing)
        else:
            pos = self._positions[index]
        self._backing.insert(pos, value.node)
        self._positions = [p + 1 if p >= pos else p for p in self._positions]
        self._positions.insert(index, pos)
        self._kids.insert(index, value)

    @property
    def backing(self) -> NodeArray:
        """The Kids array this list writes through to."""
        return self._backing

    def position(self, index: int) -> int:
        """Return the backing array index of the kid at index."""
        return self._positions[index]
