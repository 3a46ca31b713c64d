# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Attribute keys used by form field nodes."""

from __future__ import annotations

T = 'T'
FT = 'FT'
FF = 'Ff'
PARENT = 'Parent'
P = 'P'  # legacy parent key
KIDS = 'Kids'
TYPE = 'Type'
SUBTYPE = 'Subtype'
FIELDS = 'Fields'

ANNOT = 'Annot'
WIDGET = 'Widget'
