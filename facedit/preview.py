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
The preview shows what a face looks like while it is being edited.

:func:`render` returns a :class:`SampleText`: the literal text ``"[sample] "``
with two style ranges. The whole text is tagged with a baseline style (by
default ``prompt``), and the word ``sample`` (offsets 1 to 7) is tagged with
the attribute set that is being edited::

    >>> from facedit.attributes import AttributeMap
    >>> from facedit.preview import render
    >>> from facedit.util import Symbol
    >>> s = render(AttributeMap().set(Symbol(":weight"), Symbol("bold")))
    >>> s.text
    '[sample] '
    >>> s.ranges
    (StyleRange(pos=0, end=9, style='prompt'),
     StyleRange(pos=1, end=7, style=<AttributeMap (:weight bold)>))

Every prompt during an edit session is decorated with a fresh sample, see
:meth:`SampleText.decorate`. To display it, the style ranges are composed
into non-overlapping :class:`FormatRange` tuples with a
:class:`~facedit.textformat.TextFormat`, using a style catalog.

"""


import collections

from . import util


#: the carrier text of the preview
SAMPLE = "[sample] "

#: the range of the word that shows the attribute set
SAMPLE_POS = 1
SAMPLE_END = 7


StyleRange = collections.namedtuple("StyleRange", "pos end style")
StyleRange.style.__doc__ = "A style name or an AttributeMap."

FormatRange = collections.namedtuple("FormatRange", "pos end textformat")
"""A named tuple denoting a text range from ``pos`` to ``end`` that should be
formatted with ``textformat``, a TextFormat or None.

"""


def render(attributes, baseline="prompt"):
    """Return a SampleText showing the attributes on top of the baseline style.

    The SampleText is created anew on every call.

    """
    return SampleText(SAMPLE, (
        StyleRange(0, len(SAMPLE), baseline),
        StyleRange(SAMPLE_POS, SAMPLE_END, attributes),
    ))


def compose(length, ranges, textformat):
    """Yield non-overlapping FormatRange tuples covering ``0..length``.

    The ``ranges`` are (pos, end, style) tuples that may overlap;
    ``textformat(style)`` is called to get the TextFormat for a style. Where
    ranges overlap, the formats are added in the order of the ranges, so later
    ranges override earlier ones. Parts that no range covers get None.

    """
    bounds = {0, length}
    for r in ranges:
        bounds.update((r[0], r[1]))
    bounds = sorted(b for b in bounds if 0 <= b <= length)
    def stream():
        for pos, end in zip(bounds, bounds[1:]):
            f = None
            for r in ranges:
                if r[0] <= pos and end <= r[1]:
                    tf = textformat(r[2])
                    f = tf if f is None else f + tf
            yield pos, end, f
    return util.merge_adjacent(stream(), FormatRange)


@util.cached_func
def default_catalog():
    """Return the bundled default StyleCatalog."""
    from .catalog import StyleCatalog
    return StyleCatalog.byname()


class SampleText:
    """A text with style ranges, returned by :func:`render`."""
    __slots__ = ('text', 'ranges')

    def __init__(self, text, ranges):
        self.text = text        #: the text
        self.ranges = ranges    #: the tuple of StyleRange tuples

    def __repr__(self):
        return "<{} {!r}>".format(type(self).__name__, self.text)

    def __str__(self):
        return self.text

    def __len__(self):
        return len(self.text)

    def styles_at(self, pos):
        """Return the list of styles that apply at position ``pos``."""
        return [r.style for r in self.ranges if r.pos <= pos < r.end]

    def format_ranges(self, catalog=None):
        """Yield FormatRange tuples for the text, using the StyleCatalog.

        If no catalog is given, the bundled default catalog is used.

        """
        if catalog is None:
            catalog = default_catalog()
        return compose(len(self.text), self.ranges, catalog.textformat)

    def format_text(self, catalog=None):
        """Yield (text, TextFormat) tuples."""
        for r in self.format_ranges(catalog):
            yield self.text[r.pos:r.end], r.textformat

    def decorate(self, label):
        """Return a DecoratedLabel with this sample in front of the label text."""
        return DecoratedLabel(self, label)


class DecoratedLabel:
    """A prompt label decorated with a preview sample.

    Converting to a string gives the plain text of sample and label.
    :meth:`format_text` yields the formatted pieces, the label text itself is
    not formatted.

    """
    __slots__ = ('sample', 'label')

    def __init__(self, sample, label):
        self.sample = sample    #: the SampleText
        self.label = label      #: the label text

    def __repr__(self):
        return "<{} {!r}>".format(type(self).__name__, str(self))

    def __str__(self):
        return self.sample.text + self.label

    def format_text(self, catalog=None):
        """Yield (text, TextFormat) tuples for the sample and the label."""
        yield from self.sample.format_text(catalog)
        if self.label:
            yield self.label, None
