# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""AcroForm - the form that owns a field tree."""

from __future__ import annotations

from typing import Iterator

from . import keys
from .document import Document, DocumentNode, NodeArray
from .factory import FieldFactory
from .field import Field
from .resolver import TreeResolver


class AcroForm:
    """The form context every Field is bound to.

    The form node holds the root fields in its Fields array. The form
    also carries the factory that builds Field objects and the resolver
    that answers structural queries, both shared by every field.

    Example:
        >>> doc = Document()
        >>> form = AcroForm(doc)
        >>> address = Field(form)
        >>> address.set_partial_name('address')
        >>> form.add_field(address)
        >>> form.get_field('address') == address
        True
    """

    __slots__ = ('_document', '_node', '_factory', '_resolver')

    def __init__(
        self,
        document: Document | None = None,
        node: DocumentNode | None = None,
        factory: FieldFactory | None = None,
        strict: bool = True,
    ) -> None:
        """Initialize an AcroForm.

        Args:
            document: Document the form's nodes live in. A new one is
                created if None.
            node: Existing form node. A new empty node is created if None.
            factory: Builds Field objects by field type. Defaults to a
                FieldFactory with no registered types.
            strict: If True, parent cycles raise ParentCycleError; if False
                they are logged and treated as not found.
        """
        self._document = document if document is not None else Document()
        self._node = node if node is not None else DocumentNode()
        self._factory = factory if factory is not None else FieldFactory()
        self._resolver = TreeResolver(self._factory, strict=strict)

    def __repr__(self) -> str:
        array = self._node.get_array(keys.FIELDS)
        return f"AcroForm({len(array) if array is not None else 0} fields)"

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields())

    @property
    def document(self) -> Document:
        return self._document

    @property
    def node(self) -> DocumentNode:
        return self._node

    @property
    def factory(self) -> FieldFactory:
        return self._factory

    @property
    def resolver(self) -> TreeResolver:
        return self._resolver

    def fields(self) -> list[Field]:
        """Return the root fields, skipping dangling entries."""
        array = self._node.get_array(keys.FIELDS)
        if array is None:
            return []
        return [
            self._factory.create_field(self, node)
            for node in array.iter_nodes()
            if node is not None
        ]

    def get_field(self, name: str) -> Field | None:
        """Find a field by its fully qualified name.

        Args:
            name: Dotted path of partial names, e.g. 'address.city'.

        Returns:
            The matching Field, or None if any segment is missing.
        """
        array = self._node.get_array(keys.FIELDS)
        if array is None or not name:
            return None

        names = name.split('.')
        for node in array.iter_nodes():
            if node is None or node.get_string(keys.T) != names[0]:
                continue
            field = self._factory.create_field(self, node)
            if len(names) > 1:
                return field.find_kid(names, 1)
            return field
        return None

    def add_field(self, field: Field) -> None:
        """Append field to the root fields."""
        array = self._node.get_array(keys.FIELDS)
        if array is None:
            array = NodeArray()
            self._node.set_item(keys.FIELDS, array)
        array.append(self._document.add(field.node))
