# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for Field attribute accessors."""

import pytest

from genro_fieldtree import (
    AcroForm,
    DocumentNode,
    Field,
    FieldFactory,
    Name,
    ParentCycleError,
)


class TestFieldCreation:
    """Tests for Field construction."""

    def test_fresh_node(self, form):
        """Test a Field without a node gets a new empty one."""
        field = Field(form)
        assert isinstance(field.node, DocumentNode)
        assert len(field.node) == 0
        assert field.form is form

    def test_wraps_existing_node(self, form):
        """Test a Field wraps the given node."""
        node = DocumentNode(T='a')
        assert Field(form, node).node is node

    def test_equality_by_node(self, form):
        """Test wrappers over the same node are equal."""
        node = DocumentNode()
        assert Field(form, node) == Field(form, node)
        assert Field(form, node) != Field(form)
        assert len({Field(form, node), Field(form, node)}) == 1

    def test_repr(self, form):
        """Test the repr shows the partial name."""
        assert repr(Field(form, DocumentNode(T='zip'))) == "Field('zip')"


class TestPartialName:
    """Tests for partial name access."""

    @pytest.mark.parametrize('name', ['X', '', 'with.dot', 'ünïcode'])
    def test_round_trip(self, form, name):
        """Test set then get returns the same string."""
        field = Field(form)
        field.set_partial_name(name)
        assert field.partial_name == name

    def test_not_inherited(self, form, link):
        """Test the partial name is not read from the parent."""
        parent = DocumentNode(T='parent')
        kid = DocumentNode()
        link(parent, kid)
        assert Field(form, kid).partial_name is None


class TestFieldType:
    """Tests for inherited field type."""

    def test_absent_everywhere(self, form):
        """Test no FT and no parent gives None."""
        assert Field(form).field_type() is None

    def test_own_type(self, form, link):
        """Test an own FT wins over ancestors."""
        parent = DocumentNode(FT=Name('Btn'))
        kid = DocumentNode(FT=Name('Tx'))
        link(parent, kid)
        assert Field(form, kid).field_type() == 'Tx'

    def test_inherited_from_grandparent(self, form, link):
        """Test FT is found on the nearest typed ancestor."""
        root = DocumentNode(FT=Name('Ch'))
        middle = DocumentNode()
        leaf = DocumentNode()
        link(root, middle)
        link(middle, leaf)
        assert Field(form, leaf).field_type() == 'Ch'

    def test_inherited_through_legacy_parent_key(self, form, link):
        """Test the legacy P key is followed when Parent is absent."""
        parent = DocumentNode(FT=Name('Sig'))
        kid = DocumentNode()
        link(parent, kid, parent_key='P')
        assert Field(form, kid).field_type() == 'Sig'

    def test_inherited_through_legacy_key_when_parent_dangles(self, doc, form):
        """Test a dangling Parent does not hide a valid legacy P."""
        gone = doc.add(DocumentNode())
        doc.remove(gone.number)
        parent = DocumentNode(FT=Name('Tx'))
        kid = DocumentNode(Parent=gone, P=doc.add(parent))
        assert Field(form, kid).field_type() == 'Tx'
        assert Field(form, kid).parent().node is parent

    def test_parent_cycle_strict(self, form, link):
        """Test a parent cycle raises in strict mode."""
        a, b = DocumentNode(), DocumentNode()
        link(a, b)
        link(b, a)
        with pytest.raises(ParentCycleError):
            Field(form, a).field_type()

    def test_parent_cycle_lenient(self, doc, link, caplog):
        """Test a parent cycle is logged and reads as not found."""
        form = AcroForm(doc, strict=False)
        a, b = DocumentNode(), DocumentNode()
        link(a, b)
        link(b, a)
        with caplog.at_level('WARNING', logger='genro_fieldtree.resolver'):
            assert Field(form, a).field_type() is None
        assert 'cycle' in caplog.text


class TestFlags:
    """Tests for field flags."""

    def test_default_zero(self, form):
        """Test flags are 0 when unset."""
        assert Field(form).flags == 0

    def test_not_inherited(self, form, link):
        """Test parent flags are not seen by the kid."""
        parent = DocumentNode(Ff=7)
        kid = DocumentNode()
        link(parent, kid)
        assert Field(form, parent).flags == 7
        assert Field(form, kid).flags == 0

    def test_flag_properties(self, form):
        """Test the boolean flag accessors set and clear single bits."""
        field = Field(form)
        field.is_required = True
        field.is_no_export = True
        assert field.flags == Field.FLAG_REQUIRED | Field.FLAG_NO_EXPORT
        assert not field.is_read_only
        field.is_required = False
        assert field.flags == Field.FLAG_NO_EXPORT
        field.is_read_only = True
        assert field.is_read_only
        assert field.node.get_integer('Ff') == 5


class TestNavigation:
    """Tests for parent and fully qualified name."""

    def test_parent_is_rebuilt(self, form, link):
        """Test parent() builds a new equal wrapper each time."""
        parent = DocumentNode(T='address')
        kid = DocumentNode(T='city')
        link(parent, kid)
        field = Field(form, kid)
        first, second = field.parent(), field.parent()
        assert first is not second
        assert first == second == Field(form, parent)

    def test_root_has_no_parent(self, form):
        """Test a root field has no parent."""
        assert Field(form).parent() is None

    def test_parent_follows_edits(self, form, link):
        """Test parent() reads the current link, not a cached one."""
        old, new = DocumentNode(T='old'), DocumentNode(T='new')
        kid = DocumentNode()
        link(old, kid)
        field = Field(form, kid)
        assert field.parent().partial_name == 'old'
        kid.set_item('Parent', new)
        assert field.parent().partial_name == 'new'

    def test_parent_uses_factory(self, doc, link):
        """Test the parent is built by the form's factory."""
        class ButtonField(Field):
            FIELD_TYPE = 'Btn'

        factory = FieldFactory()
        factory.register_class(ButtonField)
        form = AcroForm(doc, factory=factory)
        parent = DocumentNode(FT=Name('Btn'))
        kid = DocumentNode()
        link(parent, kid)
        assert isinstance(Field(form, kid).parent(), ButtonField)

    def test_fully_qualified_name(self, form, link):
        """Test names are joined from the root, skipping unnamed levels."""
        root = DocumentNode(T='person')
        unnamed = DocumentNode()
        leaf = DocumentNode(T='zip')
        link(root, unnamed)
        link(unnamed, leaf)
        assert Field(form, leaf).fully_qualified_name() == 'person.zip'
        assert Field(form).fully_qualified_name() is None
