# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Document - object table backing indirect references.

Example:
    >>> doc = Document()
    >>> ref = doc.add(DocumentNode(T='name'))
    >>> ref.resolve().get_string('T')
    'name'
    >>> doc.remove(ref.number)
    >>> ref.resolve() is None
    True
"""

from __future__ import annotations

from typing import Any, Iterator

from ..exceptions import FieldIOError
from .node import DocumentNode, Reference


class Document:
    """Holds numbered nodes and resolves references to them.

    Once closed, resolving any reference raises FieldIOError.
    """

    __slots__ = ('_objects', '_numbers', '_next_number', '_closed')

    def __init__(self) -> None:
        self._objects: dict[int, DocumentNode] = {}
        self._numbers: dict[int, int] = {}  # id(node) -> number
        self._next_number = 1
        self._closed = False

    def __repr__(self) -> str:
        return f"Document({len(self._objects)} objects)"

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[Reference]:
        for number in self._objects:
            yield Reference(self, number)

    @property
    def closed(self) -> bool:
        """True once close() has been called."""
        return self._closed

    def new_node(self, _attr: dict[str, Any] | None = None, **kwargs: Any) -> DocumentNode:
        """Create a node and register it, returning the node itself."""
        node = DocumentNode(_attr, **kwargs)
        self.add(node)
        return node

    def add(self, node: DocumentNode) -> Reference:
        """Register node in the object table.

        Adding an already registered node returns its existing reference.
        """
        self._check_open()
        number = self._numbers.get(id(node))
        if number is not None:
            return Reference(self, number)
        number = self._next_number
        self._next_number += 1
        self._objects[number] = node
        self._numbers[id(node)] = number
        return Reference(self, number)

    def ref(self, node: DocumentNode) -> Reference:
        """Return the reference to a registered node.

        Raises:
            KeyError: If node is not registered.
        """
        number = self._numbers.get(id(node))
        if number is None:
            raise KeyError(f"{node!r} is not registered in this document")
        return Reference(self, number)

    def remove(self, number: int) -> DocumentNode | None:
        """Drop an object; references to it become dangling."""
        self._check_open()
        node = self._objects.pop(number, None)
        if node is not None:
            del self._numbers[id(node)]
        return node

    def resolve(self, number: int) -> DocumentNode | None:
        """Return the node for number, or None if no such object exists.

        Raises:
            FieldIOError: If the document is closed.
        """
        self._check_open()
        return self._objects.get(number)

    def close(self) -> None:
        """Release the object table."""
        self._objects.clear()
        self._numbers.clear()
        self._closed = True

    def _check_open(self) -> None:
        if self._closed:
            raise FieldIOError("Document is closed")
