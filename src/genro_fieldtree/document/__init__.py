# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Document package - the attribute store underneath form fields.

The field tree only needs a handful of typed reads and writes from a
node (get_string, get_name, get_integer, get_node, get_array). This
package provides an in-memory implementation:

- node: Name, Reference, NodeArray and DocumentNode
- core: Document, the object table that references resolve through

Example:
    >>> from genro_fieldtree.document import Document, NodeArray
    >>> doc = Document()
    >>> kid = doc.new_node(T='city')
    >>> root = doc.new_node(T='address', Kids=NodeArray([doc.ref(kid)]))
    >>> root.get_array('Kids').get_node(0) is kid
    True
"""

from .core import Document
from .node import DocumentNode, Name, NodeArray, Reference

__all__ = ["Document", "DocumentNode", "Name", "NodeArray", "Reference"]
