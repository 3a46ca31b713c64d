# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Field - a node in a form's field hierarchy."""

from __future__ import annotations

from typing import Sequence, TYPE_CHECKING

from . import keys
from .document import DocumentNode

if TYPE_CHECKING:
    from .form import AcroForm
    from .kids import KidList
    from .widget import Widget


class Field:
    """A form field wrapping a document node.

    A Field holds no state besides its form and node: names, flags and
    structure are read from the node on every access. Parents and kids
    are built on demand, so two traversals to the same node give two
    distinct but equal Field objects.

    Subclasses set FIELD_TYPE and are registered on a FieldFactory to be
    built for nodes of that type.

    Example:
        >>> form = AcroForm()
        >>> field = Field(form)
        >>> field.set_partial_name('street')
        >>> field.partial_name
        'street'
        >>> field.flags
        0
    """

    FLAG_READ_ONLY = 1
    FLAG_REQUIRED = 1 << 1
    FLAG_NO_EXPORT = 1 << 2

    FIELD_TYPE: str | None = None

    __slots__ = ('_form', '_node')

    def __init__(self, form: AcroForm, node: DocumentNode | None = None) -> None:
        """Initialize a Field.

        Args:
            form: The form this field is part of.
            node: Existing node to wrap. If None, an empty node is created.
        """
        self._form = form
        self._node = node if node is not None else DocumentNode()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.partial_name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    @property
    def form(self) -> AcroForm:
        """The form this field is part of."""
        return self._form

    @property
    def node(self) -> DocumentNode:
        """The wrapped document node."""
        return self._node

    # ==================== Attributes ====================

    @property
    def partial_name(self) -> str | None:
        """The field's own name (T), not inherited."""
        return self._node.get_string(keys.T)

    def set_partial_name(self, name: str | None) -> None:
        """Set the field's own name. No validation is performed."""
        self._node.set_string(keys.T, name)

    def field_type(self) -> str | None:
        """Return the field type, looking up the parent chain if needed."""
        return self._form.resolver.field_type(self._node)

    def fully_qualified_name(self) -> str | None:
        """Return the dotted name from the root field down to this one."""
        return self._form.resolver.fully_qualified_name(self._node)

    @property
    def flags(self) -> int:
        """Field flags (Ff) of this node only; 0 when unset."""
        value = self._node.get_integer(keys.FF)
        return 0 if value is None else value

    def set_flags(self, flags: int) -> None:
        """Replace the field flags."""
        self._node.set_integer(keys.FF, flags)

    def _get_flag(self, bit: int) -> bool:
        return bool(self.flags & bit)

    def _set_flag(self, bit: int, on: bool) -> None:
        flags = self.flags
        self.set_flags(flags | bit if on else flags & ~bit)

    @property
    def is_read_only(self) -> bool:
        return self._get_flag(self.FLAG_READ_ONLY)

    @is_read_only.setter
    def is_read_only(self, value: bool) -> None:
        self._set_flag(self.FLAG_READ_ONLY, value)

    @property
    def is_required(self) -> bool:
        return self._get_flag(self.FLAG_REQUIRED)

    @is_required.setter
    def is_required(self, value: bool) -> None:
        self._set_flag(self.FLAG_REQUIRED, value)

    @property
    def is_no_export(self) -> bool:
        return self._get_flag(self.FLAG_NO_EXPORT)

    @is_no_export.setter
    def is_no_export(self, value: bool) -> None:
        self._set_flag(self.FLAG_NO_EXPORT, value)

    # ==================== Structure ====================

    def parent(self) -> Field | None:
        """Return the parent field, built fresh from the Parent (or P) link."""
        node = self._form.resolver.parent_of(self._node)
        if node is None:
            return None
        return self._form.factory.create_field(self._form, node)

    def kids(self) -> KidList | None:
        """Return the resolved kids, or None if the node has no Kids array.

        Entries are Widget or Field objects. The returned list writes
        edits through to the Kids array.
        """
        return self._form.resolver.kids(self._form, self._node)

    def widget(self) -> Widget | None:
        """Return the single widget of this field.

        Raises:
            FieldIOError: If a kid cannot be read or built.
        """
        return self._form.resolver.widget(self._form, self._node)

    def find_kid(self, names: Sequence[str], index: int = 0) -> Field | None:
        """Find the descendant at the path names[index:].

        Raises:
            FieldIOError: If a matched kid cannot be built.
        """
        return self._form.resolver.find_kid(self._form, self._node, names, index)
