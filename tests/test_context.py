# -*- coding: utf-8 -*-
#
# This file is part of the facedit Python package.
#
# Copyright © 2019-2020 by Wilbert Berendsen <info@wilbertberendsen.nl>
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Test the EditingContext and the context registry.
"""

import gc
import sys

sys.path.insert(0, ".")

from facedit.attributes import AttributeMap, face
from facedit.context import EditingContext, context
from facedit.document import Document
from facedit.util import Symbol


WEIGHT = Symbol(":weight")


def test_context():
    events = []
    c = EditingContext()
    c.connect("attributes_changed", events.append)
    assert c.attributes() == AttributeMap()

    m = c.set(WEIGHT, "bold")
    assert m is c.attributes()
    assert c.get(WEIGHT) == "bold"
    c.remove(WEIGHT)
    assert c.get(WEIGHT) is None
    c.load(face('(:slant italic)'))
    c.clear()
    assert len(events) == 4
    assert events[0].to_pairs() == ((WEIGHT, "bold"),)
    assert events[-1] == AttributeMap()


def test_registry():
    d1 = Document("one")
    d2 = Document("two")
    assert context(d1) is context(d1)
    assert context(d1) is not context(d2)
    context(d1).set(WEIGHT, "bold")
    assert context(d2).attributes() == AttributeMap()
    assert context(d1).get(WEIGHT) == "bold"


def test_registry_forgets():
    from facedit.context import _contexts
    d = Document("text")
    context(d)
    assert d in _contexts
    n = len(_contexts)
    del d
    gc.collect()
    assert len(_contexts) == n - 1
