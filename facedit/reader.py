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
Reading and writing literal values.

The values that make up a face are typed by the user as text, and read into
Python values by :func:`read`. The syntax is a small Lisp-like literal
syntax:

* ``:weight``, ``bold``, ``medium-blue``: symbols (atoms), read as
  :class:`~facedit.util.Symbol` objects
* ``"DejaVu Sans"``: strings, backslash escapes ``\\n``, ``\\t``, ``\\"`` and
  ``\\\\`` are recognized
* ``120``, ``-3``, ``#x1F``, ``1.2``, ``1e3``: integers and floats
* ``nil`` and ``null``: None; ``t`` and ``true``: True; ``false``: False
* ``(:color "red" :style wave)``: lists, read as tuples; square brackets can
  be used as well; lists can be nested up to :data:`MAX_DEPTH` levels
* ``'bold``: a quote is allowed and ignored

Exactly one value is read; anything other than whitespace or a ``;``
comment after it raises a :class:`ReadError`::

    >>> from facedit.reader import read
    >>> read(':weight')
    :weight
    >>> read('(:color "red" :style wave)')
    (:color, 'red', :style, wave)
    >>> read('nil') is None
    True

:func:`write` does the reverse, and is used to describe attribute sets to
the user::

    >>> from facedit.reader import write
    >>> write((Symbol(':height'), 1.2, Symbol(':family'), "Serif"))
    '(:height 1.2 :family "Serif")'

"""


import re

from .util import Symbol


RE_TOKEN = re.compile(r"""
    (?P<space>\s+|;[^\n]*)
  | (?P<open>[(\[])
  | (?P<close>[)\]])
  | (?P<quote>')
  | (?P<string>")
  | (?P<atom>[^\s()\[\]";']+)
""", re.VERBOSE)

RE_STRING = re.compile(r'"((?:[^"\\]|\\.)*)"', re.DOTALL)
RE_STRING_ESCAPE = re.compile(r'\\(.)', re.DOTALL)

RE_INTEGER = re.compile(r'[-+]?\d+')
RE_HEX_INTEGER = re.compile(r'#[xX]([-+]?[0-9a-fA-F]+)')
RE_FLOAT = re.compile(r'[-+]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][-+]?\d+)?')

#: atoms that read as a Python constant instead of a Symbol
CONSTANTS = {
    'nil': None,
    'null': None,
    't': True,
    'true': True,
    'false': False,
}

ESCAPES = {'n': '\n', 't': '\t', 'r': '\r', 'e': '\x1b'}

CLOSING = {'(': ')', '[': ']'}

#: the maximum nesting depth of lists
MAX_DEPTH = 100


class ReadError(ValueError):
    """Raised when text can't be read as a literal value.

    The ``text`` attribute holds the text that was read, and ``pos`` the
    position where the error was detected.

    """
    def __init__(self, message, text="", pos=0):
        super().__init__(message)
        self.message = message
        self.text = text
        self.pos = pos

    def __str__(self):
        if self.text:
            return "{} at position {}: {!r}".format(self.message, self.pos, self.text)
        return self.message


def tokens(text):
    """Yield (kind, pos, value) tuples for the text.

    Whitespace and comments are skipped. The kind is one of ``"open"``,
    ``"close"``, ``"quote"``, ``"string"`` or ``"atom"``. For strings, the
    value is the unescaped contents, for the other kinds the matched text.

    """
    pos = 0
    length = len(text)
    while pos < length:
        m = RE_TOKEN.match(text, pos)
        kind = m.lastgroup
        if kind == 'string':
            s = RE_STRING.match(text, pos)
            if not s:
                raise ReadError("unterminated string", text, pos)
            yield kind, pos, unescape(s.group(1))
            pos = s.end()
            continue
        elif kind != 'space':
            yield kind, pos, m.group()
        pos = m.end()


def unescape(text):
    """Resolve backslash escapes in a string body."""
    return RE_STRING_ESCAPE.sub(lambda m: ESCAPES.get(m.group(1), m.group(1)), text)


def atom(text):
    """Return the value of an atom: a number, a constant or a Symbol."""
    try:
        return CONSTANTS[text]
    except KeyError:
        pass
    if RE_INTEGER.fullmatch(text):
        return int(text)
    m = RE_HEX_INTEGER.fullmatch(text)
    if m:
        return int(m.group(1), 16)
    if RE_FLOAT.fullmatch(text):
        return float(text)
    return Symbol(text)


def _read(text):
    """(Internal.) Yield (pos, value) tuples for every toplevel value in text."""
    stack = []
    for kind, pos, value in tokens(text):
        if kind == 'open':
            if len(stack) >= MAX_DEPTH:
                raise ReadError("too deeply nested", text, pos)
            stack.append((value, pos, []))
            continue
        elif kind == 'close':
            if not stack:
                raise ReadError("unbalanced parenthesis", text, pos)
            opener, pos, items = stack.pop()
            if CLOSING[opener] != value:
                raise ReadError("mismatched parenthesis", text, pos)
            value = tuple(items)
        elif kind == 'quote':
            # 'x reads as x
            continue
        elif kind == 'atom':
            value = atom(value)
        if stack:
            stack[-1][2].append(value)
        else:
            yield pos, value
    if stack:
        raise ReadError("missing closing parenthesis", text, stack[-1][1])


def read(text):
    """Read exactly one literal value from text.

    Raises :class:`ReadError` if the text is empty, malformed, or contains
    more than one value.

    """
    values = _read(text)
    for pos, result in values:
        for pos, value in values:
            raise ReadError("trailing garbage", text, pos)
        return result
    raise ReadError("end of input", text, len(text))


def read_all(text):
    """Return a list of all literal values in text.

    Raises :class:`ReadError` if the text is malformed.

    """
    return [value for pos, value in _read(text)]


def write(value):
    """Return the literal text for the value.

    Tuples and lists are written as lists; objects with a ``plist()`` method
    (like :class:`~facedit.attributes.AttributeMap`) are written as the list
    that method returns. Other objects are written using their repr.

    """
    if value is None:
        return "nil"
    elif value is True:
        return "t"
    elif value is False:
        return "false"
    elif isinstance(value, str):
        return quote(value)
    elif isinstance(value, (tuple, list)):
        return "(" + " ".join(map(write, value)) + ")"
    elif hasattr(value, 'plist'):
        return write(value.plist())
    return repr(value)


def quote(text):
    """Double-quote the text, escaping backslashes, quotes and control characters."""
    escaped = text.replace('\\', '\\\\').replace('"', '\\"')
    escaped = escaped.replace('\n', '\\n').replace('\t', '\\t').replace('\r', '\\r')
    return '"' + escaped + '"'
