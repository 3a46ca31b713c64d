# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Kid classification: is a raw kid node a Field or a Widget?"""

from __future__ import annotations

from enum import Enum

from . import keys
from .document import DocumentNode


class KidKind(Enum):
    """The two kinds of entry a field's Kids array may hold."""

    FIELD = 'field'
    WIDGET = 'widget'


def classify_node(node: DocumentNode, parent: DocumentNode | None = None) -> KidKind:
    """Decide whether a raw kid node is a Field or a Widget.

    Rules, first match wins:
        1. node declares FT -> FIELD
        2. parent declares FT -> FIELD (type inherited)
        3. node Subtype is the Widget name -> WIDGET
        4. otherwise -> FIELD

    Args:
        node: The raw kid node.
        parent: The kid's resolved parent node, if any.

    Returns:
        The KidKind of node.

    Example:
        >>> classify_node(DocumentNode(Subtype=Name('Widget')))
        <KidKind.WIDGET: 'widget'>
        >>> classify_node(DocumentNode(T='group'))
        <KidKind.FIELD: 'field'>
    """
    if node.get_object(keys.FT) is not None:
        return KidKind.FIELD
    if parent is not None and parent.get_object(keys.FT) is not None:
        return KidKind.FIELD
    if node.get_name(keys.SUBTYPE) == keys.WIDGET:
        return KidKind.WIDGET
    return KidKind.FIELD
