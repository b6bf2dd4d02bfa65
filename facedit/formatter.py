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
The Formatter uses a :mod:`StyleCatalog <facedit.catalog>` to display text
according to the ``face`` text property of a :class:`~facedit.document.Document`.

The value of the ``face`` property is mapped to a
:class:`~facedit.textformat.TextFormat`. It can be:

* an :class:`~facedit.attributes.AttributeMap` (an anonymous face),
* a style name (a Symbol or string) that is looked up in the catalog,
* a property list like ``(:weight bold)``, read as an anonymous face,
* a tuple of the above, where earlier faces take precedence.

If you need to convert the TextFormats to something else, you can provide a
factory to the Formatter to do that, as the output formatters in
:mod:`facedit.out` do.

"""


from . import util
from .attributes import AttributeMap
from .preview import FormatRange, default_catalog
from .textformat import TextFormat


class Formatter:
    """Formats text of a Document according to its ``face`` property.

    Supply the catalog (by default the bundled default catalog), and an
    optional factory that converts a TextFormat to something else. When the
    factory returns None, a range is skipped. The default factory just yields
    the TextFormat, unless the format is empty, evaluating to None.

    """
    def __init__(self, catalog=None, factory=None):
        if catalog is None:
            catalog = default_catalog()
        if factory is None:
            factory = lambda f: f or None
        self.catalog = catalog
        self._factory = factory

    def __repr__(self):
        return '<{} [{!r}]>'.format(type(self).__name__, self.catalog)

    def textformat(self, face):
        """Return the TextFormat for a value of the ``face`` property."""
        if isinstance(face, tuple):
            if face and isinstance(face[0], util.Symbol) and face[0].is_keyword():
                try:
                    return self.catalog.textformat(AttributeMap.from_plist(face))
                except ValueError:
                    return TextFormat()
            f = TextFormat()
            for item in reversed(face):
                f += self.textformat(item)
            return f
        return self.catalog.textformat(face)

    def baseformat(self, role="default"):
        """Return the converted format of a style in the catalog, e.g. for a window."""
        return self._factory(self.catalog.textformat(role))

    def format_ranges(self, document, start=0, end=None):
        """Yield FormatRange(pos, end, format) three-tuples.

        The ``format`` is the TextFormat for the ``face`` property, converted
        by our factory. Ranges for which the factory returns None are skipped.

        """
        for pos, end_, face in document.property_ranges(start=start, end=end):
            f = self._factory(self.textformat(face))
            if f is not None:
                yield FormatRange(pos, end_, f)

    def format_text(self, text, ranges, start=0, end=None):
        """Yield all text in tuples(text, format).

        The ``ranges`` are the FormatRanges from :meth:`format_ranges`. For
        pieces of text that have no format, the format is None.

        """
        prev_end = start
        for r in ranges:
            if r.pos > prev_end:
                yield text[prev_end:r.pos], None
            yield text[r.pos:r.end], r.textformat
            prev_end = r.end
        if end is None:
            end = len(text)
        if end > prev_end:
            yield text[prev_end:end], None

    def format_document(self, cursor):
        """Yield all text in the cursor's selection in tuples(text, format)."""
        if cursor.has_selection():
            doc = cursor.document()
            pos, end = cursor.selection()
            ranges = self.format_ranges(doc, pos, end)
            yield from self.format_text(doc.text(), ranges, pos, end)

    def format_label(self, label):
        """Yield the pieces of a DecoratedLabel or SampleText in tuples(text, format)."""
        for text, f in label.format_text(self.catalog):
            yield text, self._factory(f) if f is not None else None
