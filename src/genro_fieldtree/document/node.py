# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Document node classes.

A DocumentNode is a plain attribute dictionary. Values are either scalars
(str, Name, int), nested nodes, NodeArray lists, or Reference objects that
point into a Document's object table.
"""

from __future__ import annotations

from typing import Any, Iterator, TYPE_CHECKING

if TYPE_CHECKING:
    from .core import Document


class Name(str):
    """A name-typed value, kept apart from plain strings.

    Example:
        >>> Name('Widget') == 'Widget'
        True
        >>> node = DocumentNode(Subtype=Name('Widget'), T='Widget')
        >>> node.get_name('T') is None
        True
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Name({str.__repr__(self)})"


class Reference:
    """An indirect reference to a node held in a Document's object table."""

    __slots__ = ('document', 'number')

    def __init__(self, document: Document, number: int) -> None:
        self.document = document
        self.number = number

    def __repr__(self) -> str:
        return f"Reference({self.number})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reference):
            return NotImplemented
        return self.document is other.document and self.number == other.number

    def __hash__(self) -> int:
        return hash((id(self.document), self.number))

    def resolve(self) -> DocumentNode | None:
        """Return the referenced node, or None if the reference is dangling.

        Raises:
            FieldIOError: If the owning document can no longer be read.
        """
        return self.document.resolve(self.number)


def _deref(value: Any) -> Any:
    if isinstance(value, Reference):
        return value.resolve()
    return value


class NodeArray(list):
    """Ordered list of raw entries (nodes or references).

    Entries are kept exactly as stored; use get_node() to dereference.
    """

    __slots__ = ()

    def get_object(self, index: int) -> Any:
        """Return the dereferenced entry at index."""
        return _deref(self[index])

    def get_node(self, index: int) -> DocumentNode | None:
        """Return the node at index, or None if the entry is dangling or not a node."""
        value = self.get_object(index)
        if isinstance(value, DocumentNode):
            return value
        return None

    def iter_nodes(self) -> Iterator[DocumentNode | None]:
        """Yield the dereferenced node (or None) for every entry, in order."""
        for i in range(len(self)):
            yield self.get_node(i)


class DocumentNode:
    """A node in a document: an ordered mapping of attribute keys to values.

    Example:
        >>> node = DocumentNode(T='name', FT=Name('Tx'))
        >>> node.get_string('T')
        'name'
        >>> node.get_name('FT')
        'Tx'
    """

    __slots__ = ('attr',)

    def __init__(self, _attr: dict[str, Any] | None = None, **kwargs: Any) -> None:
        """Initialize a DocumentNode.

        Args:
            _attr: Optional dictionary of attributes.
            **kwargs: Additional attributes as keyword arguments.
        """
        self.attr: dict[str, Any] = {}
        if _attr:
            self.attr.update(_attr)
        self.attr.update(kwargs)

    def __repr__(self) -> str:
        return f"DocumentNode({list(self.attr.keys())})"

    def __contains__(self, key: str) -> bool:
        return key in self.attr

    def __len__(self) -> int:
        return len(self.attr)

    def keys(self) -> list[str]:
        """Return attribute keys in insertion order."""
        return list(self.attr.keys())

    # ==================== Raw access ====================

    def get_item(self, key: str, default: Any = None) -> Any:
        """Get the raw value for key, references left unresolved."""
        return self.attr.get(key, default)

    def set_item(self, key: str, value: Any) -> None:
        """Set the raw value for key. A None value removes the key."""
        if value is None:
            self.attr.pop(key, None)
        else:
            self.attr[key] = value

    def remove_item(self, key: str) -> Any:
        """Remove key and return its raw value (None if absent)."""
        return self.attr.pop(key, None)

    def get_object(self, key: str, fallback: str | None = None) -> Any:
        """Get the dereferenced value for key.

        Args:
            key: Primary attribute key.
            fallback: Key tried when the primary value is missing or dangling.

        Returns:
            The dereferenced value, or None.
        """
        value = _deref(self.attr.get(key))
        if value is None and fallback is not None:
            value = _deref(self.attr.get(fallback))
        return value

    # ==================== Typed access ====================

    def get_string(self, key: str) -> str | None:
        """Get a plain string value. Name values are not returned."""
        value = self.get_object(key)
        if isinstance(value, str) and not isinstance(value, Name):
            return str(value)
        return None

    def set_string(self, key: str, value: str | None) -> None:
        """Set a plain string value."""
        self.set_item(key, None if value is None else str(value))

    def get_name(self, key: str) -> str | None:
        """Get a Name value as a str."""
        value = self.get_object(key)
        if isinstance(value, Name):
            return str(value)
        return None

    def set_name(self, key: str, value: str | None) -> None:
        """Set a Name value."""
        self.set_item(key, None if value is None else Name(value))

    def get_integer(self, key: str) -> int | None:
        """Get an integer value (booleans are not integers here)."""
        value = self.get_object(key)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return None

    def set_integer(self, key: str, value: int | None) -> None:
        """Set an integer value."""
        self.set_item(key, None if value is None else int(value))

    def get_node(self, key: str, fallback: str | None = None) -> DocumentNode | None:
        """Get a nested node, trying fallback when key does not hold one.

        Example:
            >>> parent = DocumentNode(FT=Name('Tx'))
            >>> DocumentNode(P=parent).get_node('Parent', 'P') is parent
            True
        """
        value = self.get_object(key)
        if isinstance(value, DocumentNode):
            return value
        if fallback is not None:
            value = self.get_object(fallback)
            if isinstance(value, DocumentNode):
                return value
        return None

    def get_array(self, key: str) -> NodeArray | None:
        """Get an array value, or None if the key is absent or not an array."""
        value = self.get_object(key)
        if isinstance(value, NodeArray):
            return value
        return None
