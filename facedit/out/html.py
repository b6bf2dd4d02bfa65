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
Formatter for HTML output.

The :class:`HtmlFormatter` converts the faces of a document to inline CSS
style attributes.

Usage example::

    >>> from facedit.document import Document, Cursor
    >>> from facedit.out.html import HtmlFormatter
    >>> from facedit.reader import read
    >>> from facedit.attributes import AttributeMap
    >>> d = Document("some <bold> text")
    >>> d.tag_span(5, 11, AttributeMap.from_plist(read("(:weight bold)")))
    >>> HtmlFormatter().html(Cursor(d, 0, None))
    'some <span style="font-weight: 700;">&lt;bold&gt;</span> text'

"""

from facedit.formatter import Formatter

FULL_HTML_TEMPLATE = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="{charset}"/>
  </head>
  <body>
    <div class="facedit">
<pre style="white-space: pre; {baseformat}">{html}</pre>
    </div>
  </body>
</html>
"""


class HtmlFormatter(Formatter):
    """A Formatter to output HTML."""
    def __init__(self, catalog=None, factory=None):
        if factory is None:
            factory = lambda tf: inline_css(tf) or None
        super().__init__(catalog, factory)

    def html(self, cursor):
        """Return HTML output for the selected range of the cursor.

        The text pieces that have a face are wrapped in ``<span
        style="">...</span>`` tags with inline CSS attributes. The returned
        HTML expects to be wrapped in a <pre> tag.

        """
        return "".join(span(text, fmt) for text, fmt in self.format_document(cursor))

    def html_label(self, label):
        """Return HTML for a DecoratedLabel or SampleText."""
        return "".join(span(text, fmt) for text, fmt in self.format_label(label))

    def full_html(self, cursor, charset="utf-8"):
        """Returns the selected text as a complete HTML document.

        The ``default`` style of the catalog sets the style of the <pre>
        block. The charset is included in the HTML header, but the returned
        string is still a Python string; you should take care of the encoding
        yourself when writing the HTML to an output device.

        """
        return FULL_HTML_TEMPLATE.format(
            charset = charset,
            baseformat = attrescape(self.baseformat() or ""),
            html = self.html(cursor))


def span(text, style):
    """Return escaped text, wrapped in a span with the style, if given."""
    if style:
        return '<span style="{}">{}</span>'.format(attrescape(style), escape(text))
    return escape(text)


def escape(text):
    r"""Escape &, < and > to use text in HTML."""
    return text.replace('&', "&amp;").replace('<', "&lt;").replace('>', "&gt;")


def attrescape(text):
    r"""Escape &, <, > and ", to use text in HTML."""
    return escape(text).replace('"', "&quot;")


def inline_css(textformat):
    """Convert a textformat to an inline CSS string.

    The resulting string can be used in a Html ``style`` attribute.

    """
    props = textformat.css_properties()
    return " ".join("{}: {};".format(prop, value)
        for prop, value in sorted(props.items()))
