# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for kid classification."""

from genro_fieldtree import DocumentNode, KidKind, Name, classify_node


class TestClassifyNode:
    """Tests for classify_node rule order."""

    def test_own_field_type_is_field(self):
        """Test a node declaring FT is a field, even with a widget subtype."""
        node = DocumentNode(FT=Name('Tx'), Subtype=Name('Widget'))
        assert classify_node(node) is KidKind.FIELD

    def test_parent_field_type_is_field(self):
        """Test a widget-shaped node under a typed parent is a field."""
        parent = DocumentNode(FT=Name('Btn'))
        node = DocumentNode(Subtype=Name('Widget'))
        assert classify_node(node, parent) is KidKind.FIELD

    def test_widget_subtype_is_widget(self):
        """Test a widget subtype with no field type anywhere is a widget."""
        parent = DocumentNode(T='group')
        node = DocumentNode(Subtype=Name('Widget'))
        assert classify_node(node, parent) is KidKind.WIDGET
        assert classify_node(node) is KidKind.WIDGET

    def test_widget_subtype_must_be_a_name(self):
        """Test a plain string subtype does not mark a widget."""
        node = DocumentNode(Subtype='Widget')
        assert classify_node(node) is KidKind.FIELD

    def test_other_subtype_falls_back_to_field(self):
        """Test an unrelated subtype falls back to field."""
        node = DocumentNode(Subtype=Name('Link'))
        assert classify_node(node) is KidKind.FIELD

    def test_empty_node_is_field(self):
        """Test a node with no information is a field."""
        assert classify_node(DocumentNode()) is KidKind.FIELD

    def test_deterministic(self):
        """Test classifying twice gives the same answer."""
        node = DocumentNode(Subtype=Name('Widget'))
        parent = DocumentNode()
        assert classify_node(node, parent) is classify_node(node, parent)
