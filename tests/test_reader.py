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
Test reading and writing literal values.
"""

import sys

import pytest

sys.path.insert(0, ".")

from facedit.reader import MAX_DEPTH, ReadError, read, read_all, write
from facedit.util import Symbol


def test_atoms():
    assert read(":weight") is Symbol(":weight")
    assert read("  bold  ") is Symbol("bold")
    assert read("'bold") is Symbol("bold")
    assert read("medium-blue") is Symbol("medium-blue")
    assert read("-") is Symbol("-")


def test_constants():
    assert read("nil") is None
    assert read("null") is None
    assert read("t") is True
    assert read("true") is True
    assert read("false") is False


def test_numbers():
    assert read("120") == 120
    assert read("-3") == -3
    assert read("#x1F") == 31
    assert read("1.2") == 1.2
    assert read("1e3") == 1000.0
    assert isinstance(read("1e3"), float)
    assert read(".5") == 0.5


def test_strings():
    assert read('"DejaVu Sans"') == "DejaVu Sans"
    assert read(r'"a\"b"') == 'a"b'
    assert read(r'"a\nb"') == "a\nb"
    assert read(r'"a\\b"') == "a\\b"
    assert read('"(not a list)"') == "(not a list)"


def test_lists():
    assert read("()") == ()
    assert read('(:color "red" :style wave)') == \
        (Symbol(":color"), "red", Symbol(":style"), Symbol("wave"))
    assert read("[1 (2 3)]") == (1, (2, 3))
    assert read("(a ; comment\n b)") == (Symbol("a"), Symbol("b"))


def test_errors():
    for text, message in (
        ("", "end of input"),
        ("   ", "end of input"),
        ("; only a comment", "end of input"),
        ("bold italic", "trailing garbage"),
        ('"unterminated', "unterminated string"),
        ("(a b", "missing closing parenthesis"),
        ("a)", "unbalanced parenthesis"),
        ("(a]", "mismatched parenthesis"),
    ):
        with pytest.raises(ReadError) as excinfo:
            read(text)
        assert excinfo.value.message == message
        assert excinfo.value.text == text


def test_error_position():
    with pytest.raises(ReadError) as excinfo:
        read("bold italic")
    assert excinfo.value.pos == 5
    assert str(excinfo.value) == "trailing garbage at position 5: 'bold italic'"
    # a ReadError is a ValueError
    with pytest.raises(ValueError):
        read("")


def test_read_all():
    assert read_all("a (b c) 1") == [Symbol("a"), (Symbol("b"), Symbol("c")), 1]
    assert read_all("") == []


def test_write():
    assert write(None) == "nil"
    assert write(True) == "t"
    assert write(False) == "false"
    assert write(120) == "120"
    assert write(1.5) == "1.5"
    assert write(Symbol(":weight")) == ":weight"
    assert write('say "hi"\n') == r'"say \"hi\"\n"'
    assert write((Symbol(":height"), 1.2, Symbol(":family"), "Serif")) == \
        '(:height 1.2 :family "Serif")'
    assert write([]) == "()"


def test_write_reads_back():
    for text in ('(:weight bold :height 120)', '"a\\\\b"', '(:box (:line-width 2))', 'nil'):
        assert write(read(text)) == text


def test_nesting_depth():
    assert read("(" * MAX_DEPTH + ")" * MAX_DEPTH) is not None
    text = "(" * (MAX_DEPTH + 1) + ")" * (MAX_DEPTH + 1)
    with pytest.raises(ReadError) as excinfo:
        read(text)
    assert excinfo.value.message == "too deeply nested"
    assert excinfo.value.pos == MAX_DEPTH
    with pytest.raises(ReadError):
        read("(" * 3000 + ")" * 3000)
