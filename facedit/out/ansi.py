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


r"""
Formatter for terminal output using ANSI escape sequences.

Colors are written as 24-bit color sequences, which most terminal emulators
support. Usage example::

    >>> from facedit.document import Document, Cursor
    >>> from facedit.out.ansi import AnsiFormatter
    >>> from facedit.reader import read
    >>> from facedit.attributes import AttributeMap
    >>> d = Document("some bold text")
    >>> d.tag_span(5, 9, AttributeMap.from_plist(read("(:weight bold)")))
    >>> AnsiFormatter().ansi(Cursor(d, 0, None))
    'some \x1b[1mbold\x1b[0m text'

"""

from facedit.formatter import Formatter
from facedit.textformat import WEIGHTS


RESET = "\x1b[0m"


class AnsiFormatter(Formatter):
    """A Formatter to output text with ANSI escape sequences."""
    def __init__(self, catalog=None, factory=None):
        if factory is None:
            factory = lambda tf: sgr(tf) or None
        super().__init__(catalog, factory)

    def ansi(self, cursor):
        """Return the selected text of the cursor with escape sequences."""
        return "".join(wrap(text, fmt) for text, fmt in self.format_document(cursor))

    def ansi_label(self, label):
        """Return a DecoratedLabel or SampleText with escape sequences."""
        return "".join(wrap(text, fmt) for text, fmt in self.format_label(label))


def wrap(text, parameters):
    """Wrap text in a select graphic rendition sequence, if parameters are given."""
    if parameters:
        return "\x1b[{}m{}{}".format(parameters, text, RESET)
    return text


def sgr(textformat):
    """Convert a TextFormat to the parameter string of a SGR escape sequence.

    Returns an empty string if no property can be displayed on a terminal.

    """
    params = []
    weight = WEIGHTS.get(textformat.font_weight)
    if weight:
        if weight >= 600:
            params.append("1")
        elif weight <= 300:
            params.append("2")
    if textformat.font_style in ("italic", "oblique"):
        params.append("3")
    if "underline" in textformat.text_decoration_line:
        params.append("4")
    if textformat.inverse:
        params.append("7")
    if "line-through" in textformat.text_decoration_line:
        params.append("9")
    if textformat.border_width:
        params.append("51")
    if "overline" in textformat.text_decoration_line:
        params.append("53")
    if textformat.color:
        params.append("38;2;{};{};{}".format(*textformat.color))
    if textformat.background_color:
        params.append("48;2;{};{};{}".format(*textformat.background_color))
    return ";".join(params)
