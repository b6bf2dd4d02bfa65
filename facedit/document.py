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
Document and Cursor form the host side of applying faces to text.

A Document contains a text string that is mutable via item and slice methods,
and text properties: every character can have a set of properties, which is
an :class:`~facedit.attributes.AttributeMap`. The most important property is
``face``, which determines how the text is displayed. Its value is an
AttributeMap (an anonymous face), a style name, or a tuple of those.

Properties are set on a span with :meth:`~Document.put_property`, which
replaces the value of one property (this is what :meth:`~Document.tag_span`
does with the ``face`` property), or :meth:`~Document.add_properties`, which
merges a number of properties into the existing ones. When the text changes,
the properties move along with it; inserted text has no properties.

You can use a Cursor to keep track of a position or a selection in a
document; it is the selection provider for the commands in
:mod:`~facedit.commands`. The position (and selection) of a Cursor is
adjusted when the text in the document is changed::

    >>> from facedit.document import Document, Cursor
    >>> d = Document('hi there, folks!')
    >>> c = Cursor(d, 3, 8)
    >>> c.text()
    'there'
    >>> d.insert(0, 'well, ')
    >>> c.pos, c.end
    (9, 14)

"""


import collections
import reprlib
import weakref

from . import util
from .attributes import AttributeMap


#: the property that determines the display of text
FACE = util.Symbol("face")


Interval = collections.namedtuple("Interval", "pos end properties")
Interval.properties.__doc__ = "The AttributeMap of text properties."


class Document(util.Observable):
    """A text with text properties.

    It inherits from :class:`~facedit.util.Observable` and emits the
    following events:

    ``"text_changed" (position, removed, added)``:
        emitted whenever the text changes

    ``"properties_changed" (start, end)``:
        emitted when text properties in the range start..end were changed.

    """
    def __init__(self, text=""):
        super().__init__()
        self._text = text
        self._intervals = []
        self._cursors = weakref.WeakSet()

    def __repr__(self):
        text = reprlib.repr(self._text)
        return "<{} {}>".format(type(self).__name__, text)

    def __str__(self):
        """Return the text contents."""
        return self._text

    def __len__(self):
        """Return the length of the text."""
        return len(self._text)

    def text(self):
        """Return the text contents."""
        return self._text

    def set_text(self, text):
        """Replace all text; this also removes all properties."""
        self[:] = text

    def __getitem__(self, key):
        """Get a character or a slice of text."""
        start, end = self._parse_key(key)
        return self._text[start:end]

    def __setitem__(self, key, text):
        """Replace the position or slice with text."""
        start, end = self._parse_key(key)
        if text or start != end:
            self._update_text(start, end, text)

    def __delitem__(self, key):
        """Delete the character or slice of text."""
        self[key] = ""

    def _parse_key(self, key):
        """Get start and end values from key. Called by __[gs]etitem__."""
        total = len(self)
        if isinstance(key, Cursor):
            key = slice(*key.selection())
        if isinstance(key, slice):
            start, end, _ = key.indices(total)
        else:
            # single integer
            if key < 0:
                key += total
            if 0 <= key < total:
                return key, key + 1
            raise IndexError("index out of range")
        if end < start:
            end = start
        return start, end

    def append(self, text):
        """Append text at the end of the document."""
        self.insert(len(self), text)

    def insert(self, pos, text):
        """Insert text at pos."""
        self[pos:pos] = text

    def _update_text(self, start, end, text):
        """(Internal.) Replace start..end with text, updating cursors and properties."""
        self._text = self._text[:start] + text + self._text[end:]
        delta = len(text) - (end - start)
        self._update_cursors(start, end, len(text))
        if self._intervals:
            intervals = []
            for iv in self._split(start, end):
                if iv.end <= start:
                    intervals.append(iv)
                elif iv.pos >= end:
                    intervals.append(Interval(iv.pos + delta, iv.end + delta, iv.properties))
            self._intervals = list(util.merge_adjacent(intervals, Interval))
        self.emit("text_changed", start, end - start, len(text))

    def _update_cursors(self, start, end, added):
        """(Internal.) Update the positions of the cursors."""
        for c in self._cursors:
            if c.pos > start:
                c.pos = start if c.pos <= end else c.pos + start + added - end
            if c.end is not None and c.end >= start:
                c.end = start + added if c.end <= end else c.end + start + added - end

    def _split(self, *positions):
        """(Internal.) Return the intervals, split at the given positions."""
        result = []
        for iv in self._intervals:
            pos = iv.pos
            for p in sorted(positions):
                if pos < p < iv.end:
                    result.append(Interval(pos, p, iv.properties))
                    pos = p
            result.append(Interval(pos, iv.end, iv.properties))
        return result

    def check_span(self, start, end):
        """Raise an exception if start..end is not a valid span in the document.

        Raises ValueError if start > end, and IndexError if the span is outside
        the document.

        """
        if start > end:
            raise ValueError("invalid span: {}..{}".format(start, end))
        if start < 0 or end > len(self):
            raise IndexError("span {}..{} out of range 0..{}".format(start, end, len(self)))

    def modify_properties(self, start, end, func):
        """Call ``func(properties)`` for every piece of text in start..end.

        The function gets the AttributeMap of the properties and should return
        the new AttributeMap. Text without properties is given an empty map.

        """
        self.check_span(start, end)
        if start == end:
            return
        intervals = []
        pos = start
        for iv in self._split(start, end):
            if iv.end <= start or iv.pos >= end:
                intervals.append(iv)
                continue
            if iv.pos > pos:
                intervals.append(Interval(pos, iv.pos, func(AttributeMap())))
            intervals.append(Interval(iv.pos, iv.end, func(iv.properties)))
            pos = iv.end
        if pos < end:
            intervals.append(Interval(pos, end, func(AttributeMap())))
        intervals.sort(key=lambda iv: iv.pos)
        self._intervals = list(util.merge_adjacent(
            (iv for iv in intervals if iv.properties), Interval))
        self.emit("properties_changed", start, end)

    def put_property(self, start, end, name, value):
        """Set the property ``name`` to value on all text in start..end.

        Other properties are left as they are.

        """
        self.modify_properties(start, end, lambda props: props.set(name, value))

    def add_properties(self, start, end, pairs):
        """Merge the (name, value) pairs into the properties of start..end."""
        pairs = tuple(pairs)
        self.modify_properties(start, end, lambda props: props.update(pairs))

    def remove_property(self, start, end, name):
        """Remove the property ``name`` from all text in start..end."""
        self.modify_properties(start, end, lambda props: props.remove(name))

    def tag_span(self, start, end, attributes):
        """Set the ``face`` property of start..end to the AttributeMap.

        The previous face of the text is replaced.

        """
        self.put_property(start, end, FACE, attributes)

    def properties_at(self, pos):
        """Return the AttributeMap of the properties of the character at pos."""
        for iv in self._intervals:
            if iv.pos <= pos < iv.end:
                return iv.properties
        return AttributeMap()

    def get_property(self, pos, name, default=None):
        """Return the value of the property at pos."""
        return self.properties_at(pos).get(name, default)

    def intervals(self):
        """Return the list of Intervals with properties, sorted on position."""
        return list(self._intervals)

    def property_ranges(self, name=FACE, start=0, end=None):
        """Yield (pos, end, value) tuples for the property in start..end.

        Adjacent ranges with the same value are merged, ranges without the
        property are skipped.

        """
        if end is None:
            end = len(self)
        def ranges():
            for iv in self._intervals:
                if iv.end > start and iv.pos < end and name in iv.properties:
                    yield max(iv.pos, start), min(iv.end, end), iv.properties.get(name)
        return util.merge_adjacent(ranges())


class Cursor:
    """Describes a certain range (selection) in a :class:`Document`.

    You may change the ``pos`` and ``end`` attributes yourself. Both must be an
    integer, end may also be None, denoting the end of the document.

    As long as you keep a reference to the Cursor, its positions are updated
    when the document changes. When text is inserted at ``pos``, the position
    remains the same. But when text is inserted at the end of a cursor, the
    ``end`` position (if not None) moves along with the new text.

    All select methods return the cursor again, so they can be chained::

        >>> c = Cursor(d).select_all()
        >>> c.pos, c.end
        (0, None)

    """
    __slots__ = ("_document", "pos", "end", "__weakref__")

    def __init__(self, document, pos=0, end=-1):
        """Init with document. ``pos`` defaults to 0 and ``end`` defaults to pos."""
        self._document = document
        self.pos = pos                          #: the (start) position
        self.end = end if end != -1 else pos    #: the end position, may be None
        document._cursors.add(self)

    def __repr__(self):
        key = [self.pos]
        if self.pos != self.end:
            key.append(self.end or "")
        key = ":".join(map(format, key))
        text = reprlib.repr(self.text())
        return "<{} [{}] {}>".format(type(self).__name__, key, text)

    def document(self):
        """Return our document."""
        return self._document

    def text(self):
        """Return the selected text."""
        return self._document[self]

    def select(self, pos, end=-1):
        """Change pos and end in one go. End defaults to pos. Returns self."""
        self.pos = pos
        self.end = pos if end == -1 else end
        return self

    def select_all(self):
        """Set pos to 0 and end to None; selecting all text. Returns self."""
        self.pos = 0
        self.end = None
        return self

    def select_none(self):
        """Set end to pos. Returns self."""
        self.end = self.pos
        return self

    def selection(self):
        """Return the two-tuple (pos, end) denoting the selected range.

        The ``end`` value is never None, it is set to the length of the
        document if the :attr:`end` attribute is None.

        """
        end = len(self._document) if self.end is None else self.end
        return self.pos, end

    def has_selection(self):
        """Return True if text is selected."""
        pos, end = self.selection()
        return pos < end
