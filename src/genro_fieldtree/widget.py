# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Widget - terminal kid of a form field."""

from __future__ import annotations

from . import keys
from .document import DocumentNode, Name


class Widget:
    """A widget annotation: the renderable instance of a field.

    Widgets are terminal, the tree does not descend below them. When a field
    has a single widget, the widget attributes often live on the field node
    itself; Widget(field.node) then wraps the same node.

    Example:
        >>> widget = Widget()
        >>> widget.node.get_name('Subtype')
        'Widget'
    """

    __slots__ = ('_node',)

    def __init__(self, node: DocumentNode | None = None) -> None:
        """Initialize a Widget.

        Args:
            node: Existing node to wrap. If None, a new widget annotation
                node is created.
        """
        if node is None:
            node = DocumentNode({
                keys.TYPE: Name(keys.ANNOT),
                keys.SUBTYPE: Name(keys.WIDGET),
            })
        self._node = node

    def __repr__(self) -> str:
        return f"Widget({self._node!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Widget):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    @property
    def node(self) -> DocumentNode:
        """The wrapped document node."""
        return self._node
