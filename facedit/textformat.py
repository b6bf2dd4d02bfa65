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
TextFormat interprets the attributes of a face for display.

A face is just an :class:`~facedit.attributes.AttributeMap`; the values are
not validated. To show text in a face, the well-known attributes are read
into a TextFormat, which has simple attributes that output formatters use:
:meth:`TextFormat.css_properties` for HTML and the ANSI codes in
:mod:`facedit.out.ansi`. Keys that are not recognized, and values that do
not make sense for a key, are ignored.

The recognized keys are:

``:family``
    font family name, a string
``:height``
    an integer (in 1/10 pt) or a float (scaling factor)
``:weight``
    ``ultra-light`` ... ``normal`` ... ``bold`` ... ``ultra-heavy``
``:slant``
    ``normal``, ``italic``, ``oblique``, ``reverse-italic``,
    ``reverse-oblique``
``:width``
    ``ultra-condensed`` ... ``normal`` ... ``ultra-expanded``
``:foreground``, ``:background``
    a color name or hexadecimal color
``:underline``
    ``t``, a color, or a list like ``(:color "red" :style wave)``
``:overline``, ``:strike-through``
    ``t`` or a color
``:box``
    ``t``, a line width, a color, or a list like ``(:line-width 2 :color
    "red")``
``:inverse-video``
    ``t`` swaps foreground and background

The ``:inherit`` key is resolved by the style catalog (see
:meth:`~facedit.catalog.StyleCatalog.resolve`), before a TextFormat is
created.

"""


import itertools

from . import util
from .attributes import AttributeMap
from .color import color2hex, parse_color


_ = util.Symbol

WEIGHTS = {
    "ultra-light": 100, "thin": 100,
    "extra-light": 200,
    "light": 300, "semi-light": 300, "demilight": 300,
    "normal": 400, "regular": 400, "book": 400,
    "medium": 500,
    "semi-bold": 600, "demibold": 600,
    "bold": 700,
    "extra-bold": 800, "ultra-bold": 800,
    "heavy": 900, "black": 900, "ultra-heavy": 900,
}

SLANTS = {
    "normal": "normal",
    "roman": "normal",
    "italic": "italic",
    "reverse-italic": "italic",
    "oblique": "oblique",
    "reverse-oblique": "oblique",
}

WIDTHS = (
    "ultra-condensed", "extra-condensed", "condensed", "semi-condensed",
    "normal", "semi-expanded", "expanded", "extra-expanded", "ultra-expanded",
)


def name_of(value):
    """Return the name of a Symbol, or the string itself; None otherwise."""
    if isinstance(value, util.Symbol):
        return value.name
    elif isinstance(value, str):
        return value


def plist_get(value, key, default=None):
    """Get a key from a property list value like ``(:color "red" :style wave)``."""
    if isinstance(value, tuple):
        try:
            return AttributeMap.from_plist(value).get(key, default)
        except ValueError:
            pass
    return default


class TextFormat:
    """The display properties of a face.

    Instantiate with an :class:`~facedit.attributes.AttributeMap` (or an
    iterable of pairs). A TextFormat has a False boolean value if no single
    property is set.

    You can add TextFormats: the properties of the other format are set on top
    of ours::

        >>> from facedit.reader import read
        >>> f = TextFormat(AttributeMap.from_plist(read('(:weight bold)')))
        >>> f + TextFormat(AttributeMap.from_plist(read('(:slant italic)')))
        <TextFormat font_style='italic', font_weight='bold'>

    """
    color = None                    #: the foreground color as Color(r, g, b) tuple
    background_color = None         #: the background color
    text_decoration_color = None    #: the color for text decoration
    text_decoration_line = ()       #: underline, overline and/or line-through
    text_decoration_style = None    #: solid, double, dotted, dashed or wavy
    border_width = None             #: width of the box line in pixels
    border_color = None             #: the color of the box
    font_family = None              #: family name
    font_size = None                #: font size
    font_size_unit = None           #: "pt" or "em"
    font_stretch = None             #: condensed ... expanded
    font_style = None               #: normal, italic or oblique
    font_weight = None              #: a keyword like ``bold``
    inverse = None                  #: True if foreground and background are swapped

    dispatch = util.Dispatcher()

    def __init__(self, attributes=()):
        if not isinstance(attributes, AttributeMap):
            attributes = AttributeMap(attributes)
        for key, value in attributes.to_pairs():
            self.dispatch(key, value)

    def __repr__(self):
        return "<{} {}>".format(self.__class__.__name__,
            ", ".join("{}={}".format(key, repr(value))
                                for key, value in sorted(self.__dict__.items())))

    def __bool__(self):
        """Return True if at least one property is set."""
        return bool(self.__dict__)

    def __add__(self, other):
        """Return a new TextFormat adding the other's properties."""
        new = type(self)()
        new.__dict__.update(self.__dict__)
        new.__dict__.update(other.__dict__)
        return new

    def __eq__(self, other):
        """Return True if other has the same properties."""
        if isinstance(other, TextFormat):
            return self.__dict__ == other.__dict__
        return NotImplemented

    def __ne__(self, other):
        """Return True if other has different properties."""
        if isinstance(other, TextFormat):
            return self.__dict__ != other.__dict__
        return NotImplemented

    __hash__ = None

    @classmethod
    def known_keys(cls):
        """Return the tuple of attribute keys a TextFormat understands."""
        return tuple(sorted(cls.dispatch.keys(), key=repr))

    def foreground(self):
        """Return the foreground color to display, taking inverse into account."""
        return self.background_color if self.inverse else self.color

    def background(self):
        """Return the background color to display, taking inverse into account."""
        return self.color if self.inverse else self.background_color

    def css_properties(self):
        """Return a dict usable to write out a CSS rule with our properties."""
        return dict(itertools.chain(
            self.write_color(),
            self.write_text_decoration(),
            self.write_border(),
            self.write_font(),
        ))

    def write_color(self):
        """Yield color and background color as CSS properties, if set."""
        color = self.foreground()
        background = self.background()
        if color:
            yield "color", color2hex(color)
        if background:
            yield "background-color", color2hex(background)

    def write_text_decoration(self):
        """Yield a text-decoration property, if set."""
        props = list(self.text_decoration_line)
        if props:
            if self.text_decoration_style:
                props.append(self.text_decoration_style)
            if self.text_decoration_color:
                props.append(color2hex(self.text_decoration_color))
            yield "text-decoration", " ".join(props)

    def write_border(self):
        """Yield a border property, if set."""
        if self.border_width:
            border = "{}px solid".format(self.border_width)
            if self.border_color:
                border += " " + color2hex(self.border_color)
            yield "border", border

    def write_font(self):
        """Yield all font-xxxx properties, if set."""
        if self.font_family:
            yield "font-family", self.font_family
        if self.font_size:
            yield "font-size", "{:g}{}".format(self.font_size, self.font_size_unit)
        if self.font_style:
            yield "font-style", self.font_style
        if self.font_stretch:
            yield "font-stretch", self.font_stretch
        if self.font_weight:
            yield "font-weight", format(WEIGHTS.get(self.font_weight, 400))

    def _add_decoration(self, line, value, style=None):
        """(Internal.) Add or remove a decoration line, reading the value."""
        lines = [l for l in self.text_decoration_line if l != line]
        if value is not None and value is not False:
            lines.append(line)
            color = parse_color(value)
            if color:
                self.text_decoration_color = color
            if style:
                self.text_decoration_style = style
        self.text_decoration_line = tuple(lines)

    @dispatch(_(":family"))
    def read_family(self, value):
        family = name_of(value)
        if family:
            self.font_family = family

    @dispatch(_(":height"))
    def read_height(self, value):
        if isinstance(value, bool):
            return
        if isinstance(value, int) and value > 0:
            self.font_size = value / 10
            self.font_size_unit = "pt"
        elif isinstance(value, float) and value > 0:
            self.font_size = value
            self.font_size_unit = "em"

    @dispatch(_(":weight"))
    def read_weight(self, value):
        weight = name_of(value)
        if weight in WEIGHTS:
            self.font_weight = weight

    @dispatch(_(":slant"))
    def read_slant(self, value):
        slant = name_of(value)
        if slant in SLANTS:
            self.font_style = SLANTS[slant]

    @dispatch(_(":width"))
    def read_width(self, value):
        width = name_of(value)
        if width in WIDTHS:
            self.font_stretch = width

    @dispatch(_(":foreground"))
    def read_foreground(self, value):
        color = parse_color(value)
        if color:
            self.color = color

    @dispatch(_(":background"))
    def read_background(self, value):
        color = parse_color(value)
        if color:
            self.background_color = color

    @dispatch(_(":underline"))
    def read_underline(self, value):
        if isinstance(value, tuple):
            style = name_of(plist_get(value, _(":style")))
            color = plist_get(value, _(":color"))
            self._add_decoration("underline", True if color is None else color,
                                 "wavy" if style == "wave" else "solid")
        else:
            self._add_decoration("underline", value)

    @dispatch(_(":overline"))
    def read_overline(self, value):
        self._add_decoration("overline", value)

    @dispatch(_(":strike-through"))
    def read_strike_through(self, value):
        self._add_decoration("line-through", value)

    @dispatch(_(":box"))
    def read_box(self, value):
        if value is None or value is False:
            self.border_width = None
            return
        width, color = 1, None
        if isinstance(value, tuple):
            w = plist_get(value, _(":line-width"), 1)
            if isinstance(w, tuple) and w:
                w = w[0]
            if isinstance(w, int) and not isinstance(w, bool):
                width = abs(w)
            color = parse_color(plist_get(value, _(":color")))
        elif isinstance(value, int) and not isinstance(value, bool):
            width = abs(value)
        else:
            color = parse_color(value)
        self.border_width = width or 1
        if color:
            self.border_color = color

    @dispatch(_(":inverse-video"))
    def read_inverse_video(self, value):
        self.inverse = value is not None and value is not False
