# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for the genro_fieldtree test suite."""

import pytest

from genro_fieldtree import AcroForm, Document, NodeArray


@pytest.fixture
def doc():
    """An empty Document."""
    return Document()


@pytest.fixture
def form(doc):
    """A strict AcroForm over doc."""
    return AcroForm(doc)


@pytest.fixture
def link(doc):
    """Attach kids to a parent node: Kids array on the parent, Parent on each kid.

    Usage:
        def test_something(link):
            link(parent, kid_a, kid_b)
    """
    def _link(parent, *kids, parent_key='Parent'):
        array = parent.get_array('Kids')
        if array is None:
            array = NodeArray()
            parent.set_item('Kids', array)
        for kid in kids:
            array.append(doc.add(kid))
            kid.set_item(parent_key, doc.add(parent))
        return array

    return _link
