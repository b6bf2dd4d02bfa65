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
The AttributeMap holds the attributes of a face.

An AttributeMap is an ordered sequence of (key, value) pairs, in which every
key occurs at most once. Keys normally are keyword symbols like ``:weight``,
but any value that can be compared is accepted as key.

Keys and values are compared together with their type, so ``1``, ``1.0``
and ``t`` (True) are three different keys, and ``(:height 1)`` and
``(:height t)`` are different maps.

An AttributeMap is never modified in place; :meth:`~AttributeMap.set` and
:meth:`~AttributeMap.remove` return a new map. The mutable current map of an
editing context is kept by :class:`~facedit.context.EditingContext`.

Example::

    >>> from facedit.attributes import AttributeMap
    >>> from facedit.util import Symbol
    >>> weight = Symbol(":weight")
    >>> m = AttributeMap()
    >>> m = m.set(weight, "bold")
    >>> m = m.set(Symbol(":height"), 120)
    >>> m = m.set(weight, "normal")
    >>> m
    <AttributeMap (:weight "normal" :height 120)>
    >>> m.remove(weight).to_pairs()
    ((:height, 120),)

"""


import itertools

from . import reader


class AttributeMap:
    """An ordered, immutable mapping of face attribute keys to values.

    Instantiate with an iterable of (key, value) pairs; when a key occurs more
    than once, the later value replaces the earlier one, in place.

    """
    __slots__ = ('_pairs',)

    def __init__(self, pairs=()):
        new = _empty()
        for key, value in pairs:
            new = new.set(key, value)
        self._pairs = new._pairs

    @classmethod
    def from_plist(cls, items):
        """Create an AttributeMap from a flat sequence (k1, v1, k2, v2, ...).

        Raises ValueError if the number of items is odd.

        """
        items = tuple(items)
        if len(items) % 2:
            raise ValueError("property list must have an even number of items")
        return cls(zip(items[::2], items[1::2]))

    @classmethod
    def _from_pairs(cls, pairs):
        """(Internal.) Create a map from a tuple of pairs with unique keys."""
        new = object.__new__(cls)
        new._pairs = pairs
        return new

    def __repr__(self):
        return "<{} {}>".format(type(self).__name__, reader.write(self.plist()))

    def __len__(self):
        return len(self._pairs)

    def __bool__(self):
        return bool(self._pairs)

    def __iter__(self):
        """Yield the keys in order."""
        return (key for key, value in self._pairs)

    def __contains__(self, key):
        return self._index(key) != -1

    def __eq__(self, other):
        if isinstance(other, AttributeMap):
            return _typed(self._pairs) == _typed(other._pairs)
        return NotImplemented

    def __ne__(self, other):
        if isinstance(other, AttributeMap):
            return _typed(self._pairs) != _typed(other._pairs)
        return NotImplemented

    __hash__ = None

    def __add__(self, other):
        """Return a new map with the pairs of other set on top of ours."""
        return self.update(other.to_pairs())

    def _index(self, key):
        """(Internal.) Return the index of the pair for key, -1 if absent."""
        key = _typed(key)
        for i, (k, v) in enumerate(self._pairs):
            if _typed(k) == key:
                return i
        return -1

    def get(self, key, default=None):
        """Return the value for key, or default if the key is absent."""
        i = self._index(key)
        return default if i == -1 else self._pairs[i][1]

    def set(self, key, value):
        """Return a new map with key set to value.

        If the key is already present, its value is replaced and the pair keeps
        its position; otherwise the pair is appended.

        """
        pairs = self._pairs
        i = self._index(key)
        if i == -1:
            pairs = pairs + ((key, value),)
        else:
            pairs = pairs[:i] + ((key, value),) + pairs[i+1:]
        return self._from_pairs(pairs)

    def remove(self, key):
        """Return a new map without the pair for key.

        If the key is absent, an equal map is returned.

        """
        i = self._index(key)
        if i == -1:
            return self
        return self._from_pairs(self._pairs[:i] + self._pairs[i+1:])

    def update(self, pairs):
        """Return a new map with all the (key, value) pairs set in order."""
        new = self
        for key, value in pairs:
            new = new.set(key, value)
        return new

    def to_pairs(self):
        """Return the tuple of (key, value) pairs, in order."""
        return self._pairs

    def keys(self):
        """Return the tuple of keys, in order."""
        return tuple(self)

    def plist(self):
        """Return the flat tuple (k1, v1, k2, v2, ...)."""
        return tuple(itertools.chain.from_iterable(self._pairs))


def _typed(value):
    """(Internal.) Return a comparable form of value that includes its type.

    Tuples are converted recursively, so that 1, 1.0 and True never compare
    equal, also when nested in a list value.

    """
    if isinstance(value, tuple):
        return tuple, tuple(map(_typed, value))
    return type(value), value


def _empty():
    return AttributeMap._from_pairs(())


def face(text):
    """Read a property list like ``(:weight bold :slant italic)`` into an AttributeMap.

    Raises :class:`~facedit.reader.ReadError` if the text can't be read, and
    ValueError if it is not a list with an even number of items.

    """
    value = reader.read(text)
    if not isinstance(value, tuple):
        raise ValueError("a face must be a list of keys and values")
    return AttributeMap.from_plist(value)
