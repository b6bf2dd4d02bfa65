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
Test the AttributeMap.
"""

import sys

import pytest

sys.path.insert(0, ".")

from facedit.attributes import AttributeMap, face
from facedit.reader import ReadError
from facedit.util import Symbol


WEIGHT = Symbol(":weight")
HEIGHT = Symbol(":height")
SLANT = Symbol(":slant")


def test_empty():
    m = AttributeMap()
    assert len(m) == 0
    assert not m
    assert m.to_pairs() == ()
    assert m.get(WEIGHT) is None
    assert m.get(WEIGHT, "x") == "x"
    assert WEIGHT not in m


def test_set_is_immutable():
    m = AttributeMap()
    m2 = m.set(WEIGHT, "bold")
    assert m.to_pairs() == ()
    assert m2.to_pairs() == ((WEIGHT, "bold"),)


def test_overwrite_keeps_position():
    m = AttributeMap().set(WEIGHT, "bold").set(HEIGHT, 120)
    m = m.set(WEIGHT, "normal")
    assert m.to_pairs() == ((WEIGHT, "normal"), (HEIGHT, 120))
    assert m.get(WEIGHT) == "normal"
    assert list(m) == [WEIGHT, HEIGHT]


def test_no_duplicate_keys():
    m = AttributeMap()
    for key, value in ((WEIGHT, 1), (HEIGHT, 2), (WEIGHT, 3), (SLANT, 4),
                       (HEIGHT, 5), (WEIGHT, 6)):
        m = m.set(key, value)
        keys = m.keys()
        assert len(keys) == len(set(keys))
    m = m.remove(HEIGHT).set(HEIGHT, 7).remove(WEIGHT)
    assert m.keys() == (SLANT, HEIGHT)


def test_remove():
    m = AttributeMap().set(WEIGHT, "bold").set(HEIGHT, 120)
    assert m.remove(WEIGHT).to_pairs() == ((HEIGHT, 120),)
    # absent key: equal map
    assert m.remove(SLANT) == m
    assert AttributeMap().remove(WEIGHT) == AttributeMap()


def test_weight_scenario():
    m = AttributeMap()
    m = m.set(WEIGHT, "bold")
    assert m.to_pairs() == ((WEIGHT, "bold"),)
    m = m.set(WEIGHT, "normal")
    assert m.to_pairs() == ((WEIGHT, "normal"),)
    m = m.remove(WEIGHT)
    assert m.to_pairs() == ()


def test_none_is_a_value():
    m = AttributeMap().set(WEIGHT, None)
    assert WEIGHT in m
    assert len(m) == 1
    assert m.get(WEIGHT, "x") is None


def test_init_with_pairs():
    m = AttributeMap([(WEIGHT, "bold"), (HEIGHT, 120), (WEIGHT, "light")])
    assert m.to_pairs() == ((WEIGHT, "light"), (HEIGHT, 120))


def test_plist():
    m = AttributeMap.from_plist((WEIGHT, "bold", HEIGHT, 120))
    assert m.plist() == (WEIGHT, "bold", HEIGHT, 120)
    with pytest.raises(ValueError):
        AttributeMap.from_plist((WEIGHT, "bold", HEIGHT))


def test_add_and_update():
    a = AttributeMap().set(WEIGHT, "bold").set(HEIGHT, 120)
    b = AttributeMap().set(SLANT, "italic").set(WEIGHT, "light")
    assert (a + b).to_pairs() == ((WEIGHT, "light"), (HEIGHT, 120), (SLANT, "italic"))
    assert a.update([(HEIGHT, 100)]).get(HEIGHT) == 100


def test_equality():
    a = AttributeMap().set(WEIGHT, "bold")
    assert a == AttributeMap([(WEIGHT, "bold")])
    assert a != AttributeMap([(WEIGHT, "light")])
    assert a != ((WEIGHT, "bold"),)


def test_repr():
    m = AttributeMap().set(WEIGHT, "normal").set(HEIGHT, 120)
    assert repr(m) == '<AttributeMap (:weight "normal" :height 120)>'


def test_face():
    m = face('(:weight bold :family "Serif")')
    assert m.to_pairs() == ((WEIGHT, Symbol("bold")), (Symbol(":family"), "Serif"))
    with pytest.raises(ValueError):
        face(':weight')
    with pytest.raises(ValueError):
        face('(:weight)')
    with pytest.raises(ReadError):
        face('(:weight bold')


def test_keys_compare_with_type():
    m = AttributeMap().set(1, "a").set(True, "b").set(1.0, "c")
    assert len(m) == 3
    assert m.get(1) == "a"
    assert m.get(True) == "b"
    assert m.get(1.0) == "c"
    assert m.remove(True).keys() == (1, 1.0)
    assert AttributeMap().set(1, "a").get(True) is None


def test_values_compare_with_type():
    assert face('(:height 1)') != face('(:height t)')
    assert face('(:height 1)') != face('(:height 1.0)')
    assert face('(:box (:line-width 1))') != face('(:box (:line-width t))')
    assert face('(:height 1)') == face('(:height 1)')
