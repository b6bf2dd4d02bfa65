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
The prompt/notify surface is how the core talks to the user.

A :class:`PromptSurface` asks questions and shows messages. The labels it
gets are :class:`~facedit.preview.DecoratedLabel` objects, already decorated
with the live preview by the core; a surface only has to display them.

:class:`ConsoleSurface` implements the surface for a terminal, using
:func:`input` and ANSI escape sequences to show the preview.

"""


import re
import sys

from .out.ansi import AnsiFormatter


#: a request for completions: a lone "?" or "?" after whitespace
RE_COMPLETION_REQUEST = re.compile(r"(?:(.*)\s)?\?\s*", re.DOTALL)


class PromptSurface:
    """Abstract base class of a prompt/notify surface."""
    def prompt_text(self, label, completions=()):
        """Ask for a line of text and return it.

        The ``completions`` are strings that may be offered to the user.

        """
        raise NotImplementedError

    def prompt_choice(self, label, choices):
        """Ask the user to pick one of the choices and return it."""
        raise NotImplementedError

    def confirm(self, label):
        """Ask a yes/no question, return True for yes."""
        raise NotImplementedError

    def notify(self, message):
        """Show a message."""
        raise NotImplementedError


class ConsoleSurface(PromptSurface):
    """A PromptSurface for a terminal.

    Typing a lone ``?``, or ``?`` after some text and a space, lists the
    completions that start with that text. A ``?`` that is part of a word,
    like ``what?``, is just text. If ``color`` is False, no escape sequences are written. The
    ``input`` callable and the ``output`` file can be replaced, e.g. to
    drive the surface from a script.

    """
    def __init__(self, catalog=None, color=True, input=None, output=None):
        self._formatter = AnsiFormatter(catalog)
        self._color = color
        self._input = input
        self._output = output

    def write(self, text):
        """Write a line of text to the output."""
        print(text, file=self._output or sys.stdout)

    def label(self, label):
        """Return the label as a string to display."""
        if self._color:
            return self._formatter.ansi_label(label)
        return str(label)

    def ask(self, label):
        """Display the label and return the text typed; an end of file returns ""."""
        try:
            return (self._input or input)(self.label(label))
        except EOFError:
            return ""

    def prompt_text(self, label, completions=()):
        """Ask for a line of text, offering completions after ``?``."""
        while True:
            text = self.ask(label)
            m = RE_COMPLETION_REQUEST.fullmatch(text)
            if not m:
                return text
            prefix = (m.group(1) or "").strip()
            matches = [c for c in completions if c.startswith(prefix)]
            self.write("  ".join(matches) if matches else "[No match]")

    def prompt_choice(self, label, choices):
        """Ask until one of the choices is typed; ``?`` lists them.

        An empty answer returns an empty string.

        """
        while True:
            text = self.ask(label).strip()
            if not text or text in choices:
                return text
            matches = [c for c in choices if c.startswith(text)]
            if len(matches) == 1 and text:
                return matches[0]
            self.write("  ".join(matches or choices))

    def confirm(self, label):
        """Ask until the user answers yes or no."""
        while True:
            text = self.ask(label).strip().lower()
            if text in ("y", "yes"):
                return True
            elif text in ("n", "no", ""):
                return False
            self.write("Please answer y or n.")

    def notify(self, message):
        """Print the message."""
        self.write(message)
