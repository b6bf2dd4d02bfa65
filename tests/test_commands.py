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
Test the commands, the console surface and the command line entry.
"""

import io
import sys

import pytest

sys.path.insert(0, ".")

from facedit import commands
from facedit.attributes import AttributeMap, face
from facedit.catalog import StyleCatalog
from facedit.context import context
from facedit.document import FACE, Cursor, Document
from facedit.preview import render
from facedit.surface import ConsoleSurface
from facedit.util import Symbol


CATALOG = StyleCatalog.from_text('''
    (prompt :foreground "blue")
    (bold :weight bold)
    (italic :slant italic)
''')


def console(*answers):
    """Return a ConsoleSurface answering from the list, and its output."""
    answers = list(answers)
    output = io.StringIO()
    def input(label):
        if not answers:
            raise EOFError
        return answers.pop(0)
    return ConsoleSurface(CATALOG, color=False, input=input, output=output), output


def test_read_region():
    d = Document("Hello world!")
    assert commands.read_region(Cursor(d, 0, 5)) == (0, 5)
    assert commands.read_region(Cursor(d).select_all()) == (0, 12)
    with pytest.raises(ValueError) as excinfo:
        commands.read_region(Cursor(d, 3))
    assert str(excinfo.value) == "The mark is not set now, so there is no region"


def test_edit_and_apply_face():
    d = Document("Hello world!")
    surface, output = console(":weight", "bold", ":foreground", '"red"', "")
    result = commands.edit_face(context(d), surface, CATALOG)
    assert result == face('(:weight bold :foreground "red")')
    assert commands.apply_face(d, Cursor(d, 0, 5), surface)
    assert list(d.property_ranges()) == [(0, 5, result)]
    assert 'Face attributes: (:weight bold :foreground "red")' in output.getvalue()


def test_apply_face_without_region():
    d = Document("Hello world!")
    context(d).set(Symbol(":weight"), Symbol("bold"))
    surface, output = console()
    assert commands.apply_face(d, Cursor(d, 2), surface) is False
    assert "The mark is not set now, so there is no region" in output.getvalue()
    assert d.intervals() == []


def test_apply_face_properties():
    d = Document("Hello world!")
    context(d).load(face('(:weight bold)'))
    surface, output = console()
    assert commands.apply_face(d, Cursor(d, 6, 11), surface, "properties")
    assert d.get_property(6, Symbol(":weight")) is Symbol("bold")


def test_apply_named_face():
    d = Document("Hello world!")
    surface, output = console("it")
    assert commands.apply_named_face(d, Cursor(d, 0, 5), surface, CATALOG)
    assert d.get_property(0, FACE) is Symbol("italic")
    surface, output = console("")
    assert not commands.apply_named_face(d, Cursor(d, 6, 11), surface, CATALOG)
    assert d.get_property(6, FACE) is None


def test_load_clear_show():
    d = Document("text")
    ctx = context(d)
    surface, output = console("bold")
    commands.load_face(ctx, surface, CATALOG)
    assert ctx.attributes() == face('(:weight bold)')
    commands.show_face(ctx, surface)
    commands.clear_face(ctx, surface)
    assert ctx.attributes() == AttributeMap()
    lines = output.getvalue().splitlines()
    assert lines == [
        "Face attributes: (:weight bold)",
        "Face attributes: (:weight bold)",
        "Face attributes: ()",
    ]


def test_select():
    d = Document("Hello world!")
    c = Cursor(d)
    surface, output = console("6 11")
    commands.select(d, c, surface)
    assert c.selection() == (6, 11)
    surface, output = console("a b")
    commands.select(d, c, surface)
    assert c.selection() == (6, 11)
    assert "Please enter two numbers." in output.getvalue()


def test_interact():
    d = Document("Hello world!")
    c = Cursor(d, 0, 5)
    surface, output = console(
        "edit", ":slant", "italic", "",
        "apply",
        "sel", "6 11",
        "apply-named", "bold",
        "quit")
    commands.interact(d, c, surface, CATALOG)
    assert list(d.property_ranges()) == [
        (0, 5, face('(:slant italic)')),
        (6, 11, Symbol("bold")),
    ]


def test_console_surface():
    surface, output = console("x", "y", "yes", "", "no", ":we ?", ":weight")
    assert surface.confirm("Sure? ")
    assert "Please answer y or n." in output.getvalue()
    assert surface.confirm("Sure? ")
    assert not surface.confirm("Sure? ")
    assert not surface.confirm("Sure? ")
    assert surface.prompt_text("Key: ", (":weight", ":width", ":slant")) == ":weight"
    assert ":weight" in output.getvalue().splitlines()[-1]
    surface, output = console("?", "")
    assert surface.prompt_text("Key: ", ()) == ""
    assert "[No match]" in output.getvalue()
    # end of input is an empty answer
    surface, output = console()
    assert surface.prompt_text("Key: ") == ""
    assert surface.prompt_choice("Style: ", ("bold", "italic")) == ""


def test_console_question_mark_in_text():
    surface, output = console("what?", "  ?", "", "(:x \"why?\")")
    assert surface.prompt_text("Value: ", ("why",)) == "what?"
    assert output.getvalue() == ""
    assert surface.prompt_text("Value: ", ("why",)) == ""
    assert output.getvalue() == "why\n"
    assert surface.prompt_text("Value: ") == '(:x "why?")'


def test_console_label():
    label = render(face('(:weight bold)')).decorate("Key: ")
    assert ConsoleSurface(CATALOG, color=False).label(label) == "[sample] Key: "
    assert "\x1b[" in ConsoleSurface(CATALOG).label(label)


def test_main(tmp_path, monkeypatch, capsys):
    text = tmp_path / "text.txt"
    text.write_text("Hello world!", encoding="utf-8")
    html = tmp_path / "out.html"
    answers = iter(["apply", "quit"])
    monkeypatch.setattr("builtins.input", lambda label: next(answers))
    result = commands.main([str(text), "--start", "0", "--end", "5",
                            "--face", "(:weight bold)", "--html", str(html),
                            "--no-color"])
    assert result == 0
    output = html.read_text(encoding="utf-8")
    assert '<span style="font-weight: 700;">Hello</span> world!' in output


def test_main_invalid_face(tmp_path):
    text = tmp_path / "text.txt"
    text.write_text("Hello", encoding="utf-8")
    with pytest.raises(SystemExit):
        commands.main([str(text), "--face", "(:weight"])


def test_main_bad_catalog(tmp_path, capsys):
    text = tmp_path / "text.txt"
    text.write_text("Hello", encoding="utf-8")
    with pytest.raises(SystemExit):
        commands.main([str(text), "--catalog", "no-such-catalog"])
    assert "can't load catalog no-such-catalog" in capsys.readouterr().err
    broken = tmp_path / "broken.faces"
    broken.write_text("(bold :weight", encoding="utf-8")
    with pytest.raises(SystemExit):
        commands.main([str(text), "--catalog", str(broken)])
    assert "can't load catalog" in capsys.readouterr().err
    with pytest.raises(SystemExit):
        commands.main([str(tmp_path / "missing.txt")])
    assert "can't read" in capsys.readouterr().err
