# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""FieldFactory - builds the right Field class for a node's field type."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .document import DocumentNode
from .exceptions import FieldIOError, FieldTreeError
from .field import Field

if TYPE_CHECKING:
    from .form import AcroForm


class FieldFactory:
    """Maps field types (FT values such as 'Tx', 'Btn', 'Ch') to Field classes.

    The field type is resolved with inheritance, so a kid without FT gets
    the class registered for its nearest typed ancestor. Unregistered or
    missing types build a plain Field.

    Example:
        >>> class TextField(Field):
        ...     FIELD_TYPE = 'Tx'
        ...
        >>> factory = FieldFactory()
        >>> factory.register_class(TextField)
        >>> factory.get_class('Tx')
        <class 'TextField'>
    """

    __slots__ = ('_registry', '_default')

    def __init__(self, default: type[Field] = Field) -> None:
        """Initialize a FieldFactory.

        Args:
            default: Class used when a node's field type is not registered.
        """
        self._registry: dict[str, type[Field]] = {}
        self._default = default

    def __repr__(self) -> str:
        return f"FieldFactory({sorted(self._registry)})"

    def __contains__(self, field_type: str) -> bool:
        return field_type in self._registry

    def register(self, field_type: str, cls: type[Field]) -> None:
        """Register cls for field_type, replacing any previous class."""
        if not (isinstance(cls, type) and issubclass(cls, Field)):
            raise TypeError(f"{cls!r} is not a Field subclass")
        self._registry[field_type] = cls

    def register_class(self, cls: type[Field]) -> None:
        """Register cls under its own FIELD_TYPE."""
        field_type = getattr(cls, 'FIELD_TYPE', None)
        if not field_type:
            raise ValueError(f"{cls.__name__} does not declare FIELD_TYPE")
        self.register(field_type, cls)

    def unregister(self, field_type: str) -> type[Field] | None:
        """Remove and return the class registered for field_type."""
        return self._registry.pop(field_type, None)

    def get_class(self, field_type: str | None) -> type[Field]:
        """Return the class for field_type, or the default class."""
        if field_type is None:
            return self._default
        return self._registry.get(field_type, self._default)

    def create_field(self, form: AcroForm, node: DocumentNode) -> Field:
        """Build the Field wrapper for node.

        Raises:
            FieldIOError: If the node cannot be read or the class cannot
                be instantiated for it.
        """
        cls = self.get_class(form.resolver.field_type(node))
        try:
            return cls(form, node)
        except FieldTreeError:
            raise
        except (TypeError, ValueError, KeyError, AttributeError) as e:
            raise FieldIOError(
                f"Cannot create {cls.__name__} for {node!r}: {e}"
            ) from e
