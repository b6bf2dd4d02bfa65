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
Colors.

Face attributes like ``:foreground`` and ``:background`` specify a color by
name (``"medium blue"``, ``"MediumBlue"`` and ``"medium-blue"`` are all the
same color) or in hexadecimal notation (``"#00C"``, ``"#0000CD"``).
:func:`parse_color` converts such a specification to a :class:`Color` tuple.

"""


import collections
import re

from . import util


#: A named tuple holding the (r, g, b) value of a color.
Color = collections.namedtuple("Color", "r g b")
Color.r.__doc__ = "The red value, integer in the range 0..255."
Color.g.__doc__ = "The green value, integer in the range 0..255."
Color.b.__doc__ = "The blue value, integer in the range 0..255."


NAMED_COLORS = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "green": (0, 255, 0),
    "blue": (0, 0, 255),
    "yellow": (255, 255, 0),
    "cyan": (0, 255, 255),
    "magenta": (255, 0, 255),
    "gray": (190, 190, 190),
    "grey": (190, 190, 190),
    "darkgray": (169, 169, 169),
    "darkgrey": (169, 169, 169),
    "dimgray": (105, 105, 105),
    "dimgrey": (105, 105, 105),
    "lightgray": (211, 211, 211),
    "lightgrey": (211, 211, 211),
    "orange": (255, 165, 0),
    "darkorange": (255, 140, 0),
    "orangered": (255, 69, 0),
    "purple": (160, 32, 240),
    "violet": (238, 130, 238),
    "pink": (255, 192, 203),
    "brown": (165, 42, 42),
    "firebrick": (178, 34, 34),
    "darkred": (139, 0, 0),
    "indianred": (205, 92, 92),
    "navy": (0, 0, 128),
    "navyblue": (0, 0, 128),
    "mediumblue": (0, 0, 205),
    "darkblue": (0, 0, 139),
    "royalblue": (65, 105, 225),
    "steelblue": (70, 130, 180),
    "dodgerblue": (30, 144, 255),
    "skyblue": (135, 206, 235),
    "lightskyblue": (135, 206, 250),
    "lightblue": (173, 216, 230),
    "darkgreen": (0, 100, 0),
    "forestgreen": (34, 139, 34),
    "seagreen": (46, 139, 87),
    "limegreen": (50, 205, 50),
    "darkolivegreen": (85, 107, 47),
    "darkcyan": (0, 139, 139),
    "darkmagenta": (139, 0, 139),
    "darkviolet": (148, 0, 211),
    "goldenrod": (218, 165, 32),
    "darkgoldenrod": (184, 134, 11),
    "gold": (255, 215, 0),
    "ivory": (255, 255, 240),
    "beige": (245, 245, 220),
    "wheat": (245, 222, 179),
    "khaki": (240, 230, 140),
    "tomato": (255, 99, 71),
    "salmon": (250, 128, 114),
    "chocolate": (210, 105, 30),
    "sienna": (160, 82, 45),
}


def parse_color(spec):
    """Return a Color for the textual color specification, or None.

    None is also returned when the specification is not a string or symbol,
    or is not recognized.

    """
    if isinstance(spec, util.Symbol):
        spec = spec.name
    if isinstance(spec, str):
        return _parse_color(spec)


@util.cached_func
def _parse_color(spec):
    """(Internal.) Parse a color string; the results are cached."""
    if spec.startswith('#'):
        return hex2color(spec[1:])
    name = re.sub(r'[\s_-]+', '', spec).lower()
    try:
        return Color(*NAMED_COLORS[name])
    except KeyError:
        return None


def hex2color(text):
    """Return a Color for a hexadecimal text (without the hash), or None.

    Three, six and twelve digit notations are supported, like ``"17F"``,
    ``"1177FF"`` and ``"11117777FFFF"``.

    """
    if not re.fullmatch(r'[0-9a-fA-F]+', text):
        return None
    l = len(text)
    c = int(text, 16)
    if l == 3:
        # 17F -> 1177FF
        return Color((c // 256 & 15) * 17, (c // 16 & 15) * 17, (c & 15) * 17)
    elif l == 6:
        return Color(c // 65536 & 255, c // 256 & 255, c & 255)
    elif l == 12:
        # four digits per component, keep the most significant two
        return Color(c >> 40 & 255, c >> 24 & 255, c >> 8 & 255)


def color2hex(color):
    """Return a hexadecimal string with '#' prepended for the Color instance."""
    r, g, b = color
    return "#{:06x}".format(r*65536 + g*256 + b)
