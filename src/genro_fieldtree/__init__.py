# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-FieldTree - The field hierarchy of interactive forms.

A lightweight, zero-dependency library modelling form fields as a tree of
document nodes: inherited field types, kid classification into fields and
widgets, and lookup by dotted partial names.
"""

__version__ = "0.1.0"

from .classifier import KidKind, classify_node
from .document import Document, DocumentNode, Name, NodeArray, Reference
from .exceptions import FieldIOError, FieldTreeError, ParentCycleError
from .factory import FieldFactory
from .field import Field
from .form import AcroForm
from .kids import KidList
from .resolver import TreeResolver
from .widget import Widget

__all__ = [
    # Form tree
    "AcroForm",
    "Field",
    "FieldFactory",
    "KidList",
    "TreeResolver",
    "Widget",
    # Classification
    "KidKind",
    "classify_node",
    # Document
    "Document",
    "DocumentNode",
    "Name",
    "NodeArray",
    "Reference",
    # Exceptions
    "FieldTreeError",
    "FieldIOError",
    "ParentCycleError",
]
