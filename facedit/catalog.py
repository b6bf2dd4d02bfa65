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
This module provides the StyleCatalog, which knows the named styles that
can be applied to text, and the attribute keys they use.

The catalog is consulted to offer completion when prompting for an attribute
key or a style name, to decorate prompts with the baseline style, and to
resolve the ``:inherit`` attribute of a face.

Bundled catalogs live in the ``catalogs/`` directory. Instantiate one with::

    >>> from facedit.catalog import StyleCatalog
    >>> cat = StyleCatalog.byname("default")
    >>> cat.style("bold-italic")
    <AttributeMap (:weight bold :slant italic)>

To use a custom catalog file, load it using::

    >>> cat = StyleCatalog.from_file('/path/to/my/styles.faces')

"""


import logging

from . import catalogs
from . import reader
from . import util
from .attributes import AttributeMap
from .textformat import TextFormat, name_of


logger = logging.getLogger(__name__)

INHERIT = util.Symbol(":inherit")


class CatalogError(ValueError):
    """Raised when a catalog file can't be understood."""


class StyleCatalog:
    """A StyleCatalog maps style names to AttributeMaps.

    Instantiate with an iterable of (name, AttributeMap) tuples. Names are
    strings; when a name occurs twice, the later definition is used.

    """
    def __init__(self, styles=(), filename=""):
        self._filename = filename
        self._styles = {}
        for name, attributes in styles:
            self._styles[name_of(name)] = attributes

    def __repr__(self):
        return "<{} {}>".format(type(self).__name__,
            self._filename or "[{} styles]".format(len(self._styles)))

    def __contains__(self, name):
        return name_of(name) in self._styles

    @classmethod
    def byname(cls, name="default"):
        """Load a bundled catalog by name.

        The name is a file in the catalogs/ directory, without the ".faces"
        extension.

        """
        return cls.from_file(catalogs.filename(name))

    @classmethod
    def from_file(cls, filename):
        """Load a catalog from a file."""
        logger.debug("loading style catalog %s", filename)
        with open(filename, encoding="utf-8") as f:
            return cls.from_text(f.read(), filename)

    @classmethod
    def from_text(cls, text, filename=""):
        """Load a catalog from text in the literal syntax.

        Raises :class:`CatalogError` if the text can't be read or a style
        definition is malformed.

        """
        try:
            values = reader.read_all(text)
        except reader.ReadError as e:
            raise CatalogError("{}: {}".format(filename or "<text>", e)) from e
        return cls(map(cls._definition, values), filename)

    @staticmethod
    def _definition(value):
        """(Internal.) Return the (name, AttributeMap) tuple for a style definition."""
        if not isinstance(value, tuple) or not value or not name_of(value[0]):
            raise CatalogError("invalid style definition: {}".format(reader.write(value)))
        try:
            return value[0], AttributeMap.from_plist(value[1:])
        except ValueError as e:
            raise CatalogError("style {}: {}".format(value[0], e)) from e

    def filename(self):
        """Return the filename the catalog was loaded from, if any."""
        return self._filename

    def names(self):
        """Return the list of style names, in the order they were defined."""
        return list(self._styles)

    def get(self, name):
        """Return the AttributeMap of the style as defined, None if unknown.

        The ``:inherit`` attribute is not resolved.

        """
        return self._styles.get(name_of(name))

    @util.cached_method
    def style(self, name):
        """Return the AttributeMap of the named style, with inheritance resolved.

        Raises KeyError if the style is unknown.

        """
        name = name_of(name)
        try:
            attributes = self._styles[name]
        except KeyError:
            raise KeyError("unknown style: {}".format(name)) from None
        return self.resolve(attributes, {name})

    def resolve(self, attributes, _seen=frozenset()):
        """Return a new AttributeMap with the ``:inherit`` attribute resolved.

        The ``:inherit`` value may be a style name or a list of style names;
        the attributes of the first named style take precedence. Attributes
        that are set in ``attributes`` itself override inherited ones. Unknown
        style names and inheritance cycles are skipped.

        """
        inherit = attributes.get(INHERIT)
        if inherit is None:
            return attributes.remove(INHERIT)
        parents = inherit if isinstance(inherit, tuple) else (inherit,)
        result = AttributeMap()
        for parent in parents:
            name = name_of(parent)
            if name in self._styles and name not in _seen:
                inherited = self.resolve(self._styles[name], _seen | {name})
                result = result.update((key, value)
                    for key, value in inherited.to_pairs() if key not in result)
        return result + attributes.remove(INHERIT)

    def attributes(self, name):
        """Return the tuple of attribute keys the named style sets.

        Inherited keys are included. Raises KeyError if the style is unknown.

        """
        return self.style(name).keys()

    def keys(self):
        """Return all attribute keys known to the catalog.

        These are the keys used by any style and the keys a
        :class:`~facedit.textformat.TextFormat` understands. They are sorted
        on their name, and usable to offer completion.

        """
        keys = set(TextFormat.known_keys())
        keys.add(INHERIT)
        for attributes in self._styles.values():
            keys.update(k for k in attributes if isinstance(k, util.Symbol))
        return sorted(keys, key=repr)

    def textformat(self, style):
        """Return a TextFormat for a style name or an AttributeMap.

        An unknown style name yields an empty TextFormat.

        """
        if isinstance(style, AttributeMap):
            return TextFormat(self.resolve(style))
        elif style in self:
            return TextFormat(self.style(style))
        return TextFormat()
