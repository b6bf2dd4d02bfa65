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
Test interpreting faces as TextFormat, and colors.
"""

import sys

sys.path.insert(0, ".")

from facedit.attributes import face
from facedit.color import Color, color2hex, hex2color, parse_color
from facedit.textformat import TextFormat
from facedit.util import Symbol


def test_colors():
    assert parse_color("red") == Color(255, 0, 0)
    assert parse_color("medium blue") == parse_color("MediumBlue") == \
        parse_color("medium-blue") == Color(0, 0, 205)
    assert parse_color(Symbol("navy")) == Color(0, 0, 128)
    assert parse_color("#00C") == Color(0, 0, 204)
    assert parse_color("#0000CD") == Color(0, 0, 205)
    assert parse_color("#ffff00000000") == Color(255, 0, 0)
    assert parse_color("#12345") is None
    assert parse_color("#xyz") is None
    assert parse_color("no such color") is None
    assert parse_color(None) is None
    assert parse_color(True) is None
    assert hex2color("1177FF") == Color(0x11, 0x77, 0xff)
    assert color2hex(Color(0, 0, 205)) == "#0000cd"


def test_font():
    f = TextFormat(face('(:family "Serif" :height 120 :weight bold :slant italic :width condensed)'))
    assert f.font_family == "Serif"
    assert f.font_size == 12
    assert f.font_size_unit == "pt"
    assert f.font_weight == "bold"
    assert f.font_style == "italic"
    assert f.font_stretch == "condensed"
    f = TextFormat(face('(:height 1.5)'))
    assert (f.font_size, f.font_size_unit) == (1.5, "em")


def test_ignored():
    # unknown keys and nonsense values
    f = TextFormat(face('(:my-key 1 :weight 12 :height "big" :foreground "no color")'))
    assert not f
    assert f == TextFormat()
    assert not TextFormat(face('(:height t)'))


def test_decoration():
    f = TextFormat(face('(:underline (:color "red" :style wave) :strike-through t)'))
    assert f.text_decoration_line == ("underline", "line-through")
    assert f.text_decoration_style == "wavy"
    assert f.text_decoration_color == Color(255, 0, 0)
    f = TextFormat(face('(:underline t :underline nil)'))
    assert f.text_decoration_line == ()
    f = TextFormat(face('(:overline "blue")'))
    assert f.text_decoration_line == ("overline",)
    assert f.text_decoration_color == Color(0, 0, 255)


def test_box():
    assert TextFormat(face('(:box t)')).border_width == 1
    assert TextFormat(face('(:box 3)')).border_width == 3
    f = TextFormat(face('(:box (:line-width 2 :color "red"))'))
    assert (f.border_width, f.border_color) == (2, Color(255, 0, 0))
    f = TextFormat(face('(:box "blue")'))
    assert (f.border_width, f.border_color) == (1, Color(0, 0, 255))
    assert TextFormat(face('(:box nil)')).border_width is None


def test_inverse():
    f = TextFormat(face('(:foreground "red" :background "blue" :inverse-video t)'))
    assert f.foreground() == Color(0, 0, 255)
    assert f.background() == Color(255, 0, 0)


def test_add():
    a = TextFormat(face('(:weight bold :foreground "red")'))
    b = TextFormat(face('(:foreground "blue")'))
    c = a + b
    assert c.font_weight == "bold"
    assert c.color == Color(0, 0, 255)
    assert a.color == Color(255, 0, 0)


def test_css_properties():
    f = TextFormat(face('''(:family "Serif" :height 1.2 :weight bold :slant italic
                            :foreground "#F00" :background "white"
                            :underline t :box (:line-width 1 :color "black"))'''))
    assert f.css_properties() == {
        "color": "#ff0000",
        "background-color": "#ffffff",
        "text-decoration": "underline",
        "border": "1px solid #000000",
        "font-family": "Serif",
        "font-size": "1.2em",
        "font-style": "italic",
        "font-weight": "700",
    }
    assert TextFormat().css_properties() == {}


def test_known_keys():
    keys = TextFormat.known_keys()
    for name in (":family", ":height", ":weight", ":slant", ":foreground",
                 ":background", ":underline", ":box", ":inverse-video"):
        assert Symbol(name) in keys
