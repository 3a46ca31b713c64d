# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeResolver - structural queries over a field tree.

The resolver answers every question that needs more than one node:

- inherited attributes, walking Parent (or legacy P) links to the root
- kid enumeration, classifying each raw kid as Field or Widget
- the single-widget shortcut
- path descent by partial-name segments

Nothing is cached. Every call re-reads the document, and Field wrappers
are rebuilt through the factory each time a traversal needs one.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Sequence, TYPE_CHECKING

from . import keys
from .classifier import KidKind, classify_node
from .document import DocumentNode
from .exceptions import ParentCycleError
from .kids import KidList
from .widget import Widget

if TYPE_CHECKING:
    from .factory import FieldFactory
    from .field import Field
    from .form import AcroForm

logger = logging.getLogger(__name__)

Getter = Callable[[DocumentNode, str], Any]


def _get_object(node: DocumentNode, key: str) -> Any:
    return node.get_object(key)


class TreeResolver:
    """Resolves inherited attributes, kids and paths for form fields.

    Args:
        factory: Builds Field objects for non-terminal nodes.
        strict: If True (default), a parent chain that loops raises
            ParentCycleError. If False, the loop is logged and the lookup
            ends as not found.

    Example:
        >>> resolver = TreeResolver(FieldFactory())
        >>> resolver.inherited_attribute(kid_node, 'FT')
        Name('Tx')
    """

    __slots__ = ('_factory', '_strict')

    def __init__(self, factory: FieldFactory, strict: bool = True) -> None:
        self._factory = factory
        self._strict = strict

    def __repr__(self) -> str:
        return f"TreeResolver(strict={self._strict})"

    @property
    def factory(self) -> FieldFactory:
        """The factory used to build Field objects."""
        return self._factory

    @property
    def strict(self) -> bool:
        """True if parent cycles raise instead of ending the walk."""
        return self._strict

    # ==================== Upward walk ====================

    def parent_of(self, node: DocumentNode) -> DocumentNode | None:
        """Return the parent node, reading Parent then the legacy P key."""
        return node.get_node(keys.PARENT, keys.P)

    def ancestors(self, node: DocumentNode, key: str = '') -> Iterator[DocumentNode]:
        """Yield node and then each of its ancestors up to the root.

        Args:
            node: Starting node (yielded first).
            key: Attribute being resolved, used in cycle reports only.

        Raises:
            ParentCycleError: If the chain revisits a node and strict is set.
        """
        seen: set[int] = set()
        current: DocumentNode | None = node
        while current is not None:
            if id(current) in seen:
                if self._strict:
                    raise ParentCycleError(key)
                logger.warning("Parent cycle while resolving %r, giving up", key)
                return
            seen.add(id(current))
            yield current
            current = self.parent_of(current)

    def inherited_attribute(
        self,
        node: DocumentNode,
        key: str,
        getter: Getter | None = None,
    ) -> Any:
        """Resolve an attribute that may be declared on node or any ancestor.

        Args:
            node: Node to start from.
            key: Attribute key.
            getter: Reads key from a node. Defaults to the dereferenced raw
                value; pass DocumentNode.get_name and friends for a typed read.

        Returns:
            The nearest declared value, or None if no node in the chain
            declares it.
        """
        get = getter or _get_object
        for depth, current in enumerate(self.ancestors(node, key)):
            value = get(current, key)
            if value is not None:
                logger.debug("Resolved %r at depth %d", key, depth)
                return value
        return None

    def field_type(self, node: DocumentNode) -> str | None:
        """Return the field type declared on node or its nearest ancestor."""
        return self.inherited_attribute(node, keys.FT, DocumentNode.get_name)

    def fully_qualified_name(self, node: DocumentNode) -> str | None:
        """Join partial names from the root down to node with '.'.

        Ancestors without a partial name are skipped. Returns None when no
        node in the chain has one.
        """
        names = [
            name for name in
            (n.get_string(keys.T) for n in self.ancestors(node, keys.T))
            if name is not None
        ]
        if not names:
            return None
        return '.'.join(reversed(names))

    # ==================== Downward queries ====================

    def kids(self, form: AcroForm, node: DocumentNode) -> KidList | None:
        """Resolve the kids of node, in document order.

        Returns:
            None if node has no Kids array, otherwise a KidList (possibly
            empty) of Widget and Field entries. Dangling entries are left out.
        """
        array = node.get_array(keys.KIDS)
        if array is None:
            return None

        resolved: list[Widget | Field] = []
        positions: list[int] = []
        for i, kid in enumerate(array.iter_nodes()):
            if kid is None:
                logger.debug("Skipping dangling kid at position %d", i)
                continue
            kind = classify_node(kid, self.parent_of(kid))
            if kind is KidKind.WIDGET:
                resolved.append(Widget(kid))
            else:
                resolved.append(self._factory.create_field(form, kid))
            positions.append(i)
        return KidList(resolved, positions, array)

    def widget(self, form: AcroForm, node: DocumentNode) -> Widget | None:
        """Return the single representative widget of node.

        A node without Kids is its own widget. Otherwise the first kid is
        used, descending through Field kids until a Widget is found. An
        empty Kids array has no widget.
        """
        kids = self.kids(form, node)
        if kids is None:
            return Widget(node)
        if not kids:
            return None
        first = kids[0]
        if isinstance(first, Widget):
            return first
        return self.widget(form, first.node)

    def find_kid(
        self,
        form: AcroForm,
        node: DocumentNode,
        names: Sequence[str],
        index: int = 0,
    ) -> Field | None:
        """Descend from node following names[index:], one level per segment.

        At each level the raw Kids array is scanned for the first kid whose
        partial name equals the segment. The match is always built as a
        Field, and the search does not try later siblings if the rest of
        the path fails below the first match.

        Args:
            form: Form the built fields belong to.
            node: Node to search under.
            names: Partial-name segments.
            index: Position in names of the segment for this level.

        Returns:
            The field at the end of the path, or None if any segment is
            missing.
        """
        if index < 0 or index >= len(names):
            return None
        array = node.get_array(keys.KIDS)
        if array is None:
            return None

        segment = names[index]
        for kid in array.iter_nodes():
            if kid is None or kid.get_string(keys.T) != segment:
                continue
            logger.debug("Matched segment %r at level %d", segment, index)
            field = self._factory.create_field(form, kid)
            if index + 1 < len(names):
                return self.find_kid(form, field.node, names, index + 1)
            return field
        return None
