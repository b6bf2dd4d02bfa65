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
The EditSession drives the interactive editing of a face.

A session repeatedly asks the user for an attribute key and a value, and
changes the current AttributeMap of an
:class:`~facedit.context.EditingContext` accordingly. Every question is
decorated with a fresh preview of the face (see :mod:`~facedit.preview`), so
the user sees the effect of each change before the next one.

The session is a small state machine. It starts in ``AWAITING_KEY``:

* an empty key ends the session (``TERMINATED``);
* otherwise the key is read as a literal and the session asks for a value
  (``AWAITING_VALUE``);
* an empty value asks whether the key should be removed
  (``AWAITING_REMOVAL_CONFIRMATION``); any other value is read as a literal
  and set. Note that ``nil`` is a value, it sets the key to None;
* after setting or (not) removing, the session asks for a key again.

Text that can't be read as a literal is reported and the same question is
asked again.

The state is kept in the session between steps, so a session can be driven
by anything that can answer a question, e.g. a script::

    >>> from facedit.context import EditingContext
    >>> from facedit.session import EditSession
    >>> s = EditSession(EditingContext(), print)
    >>> s.feed(":weight")
    AWAITING_VALUE
    >>> s.feed("bold")
    Face attributes: (:weight bold)
    AWAITING_KEY
    >>> s.feed("")
    TERMINATED

:func:`run` drives a session with a blocking
:class:`~facedit.surface.PromptSurface`.

"""


import logging

from . import preview
from . import reader
from . import util


logger = logging.getLogger(__name__)


class State:
    """The states of an EditSession."""
    AWAITING_KEY = util.Symbol("AWAITING_KEY")
    AWAITING_VALUE = util.Symbol("AWAITING_VALUE")
    AWAITING_REMOVAL_CONFIRMATION = util.Symbol("AWAITING_REMOVAL_CONFIRMATION")
    TERMINATED = util.Symbol("TERMINATED")


class StateError(RuntimeError):
    """Raised when a session gets an answer it did not ask for."""


def describe(attributes):
    """Return the status message describing the full AttributeMap."""
    return "Face attributes: {}".format(reader.write(attributes))


class EditSession:
    """Edits the AttributeMap of an EditingContext, one answer at a time.

    The ``notify`` argument is a callable that is called with a message
    string after every change, and when text could not be read. The
    ``baseline`` is the style name used to decorate the questions.

    """
    def __init__(self, context, notify=None, baseline="prompt"):
        self.context = context
        self.baseline = baseline
        self.state = State.AWAITING_KEY     #: the current state
        self.key = None                     #: the key waiting for a value
        self._notify = notify

    def __repr__(self):
        return "<{} {} {}>".format(type(self).__name__, self.state,
                                   reader.write(self.context.attributes()))

    def notify(self, message):
        """Report a message to the user."""
        if self._notify:
            self._notify(message)

    def done(self):
        """Return True if the session has terminated."""
        return self.state is State.TERMINATED

    def preview(self):
        """Return a new SampleText showing the current attributes."""
        return preview.render(self.context.attributes(), self.baseline)

    def label(self):
        """Return the question text for the current state."""
        if self.state is State.AWAITING_KEY:
            return "Face attribute (empty to finish): "
        elif self.state is State.AWAITING_VALUE:
            return "Value for {} (empty to remove): ".format(reader.write(self.key))
        elif self.state is State.AWAITING_REMOVAL_CONFIRMATION:
            return "Remove property {}? ".format(reader.write(self.key))
        return ""

    def prompt(self):
        """Return the question for the current state, decorated with the preview."""
        return self.preview().decorate(self.label())

    def _goto(self, state):
        """(Internal.) Switch to another state."""
        logger.debug("%s -> %s", self.state, state)
        self.state = state
        return state

    def _read(self, text):
        """(Internal.) Read a literal; reports and returns False on error."""
        try:
            return True, reader.read(text)
        except reader.ReadError as e:
            logger.debug("could not read %r: %s", text, e)
            self.notify("Invalid input: {}".format(e))
            return False, None

    def feed(self, text):
        """Answer the key or value question with text, returns the new state.

        Raises StateError if the session does not wait for a key or value.

        """
        if self.state is State.AWAITING_KEY:
            if not text.strip():
                return self._goto(State.TERMINATED)
            ok, key = self._read(text)
            if ok:
                self.key = key
                self._goto(State.AWAITING_VALUE)
        elif self.state is State.AWAITING_VALUE:
            if not text.strip():
                return self._goto(State.AWAITING_REMOVAL_CONFIRMATION)
            ok, value = self._read(text)
            if ok:
                attributes = self.context.set(self.key, value)
                self.notify(describe(attributes))
                self.key = None
                self._goto(State.AWAITING_KEY)
        else:
            raise StateError("session is not waiting for text in state {}".format(self.state))
        return self.state

    def confirm(self, answer):
        """Answer the removal question, returns the new state.

        If the answer is True, the pending key is removed. Raises StateError if
        the session is not waiting for a confirmation.

        """
        if self.state is not State.AWAITING_REMOVAL_CONFIRMATION:
            raise StateError("session is not waiting for a confirmation in state {}".format(self.state))
        if answer:
            attributes = self.context.remove(self.key)
            self.notify(describe(attributes))
        self.key = None
        return self._goto(State.AWAITING_KEY)


def run(context, surface, catalog=None, baseline="prompt"):
    """Run an EditSession on the context until the user enters an empty key.

    The ``surface`` is a :class:`~facedit.surface.PromptSurface`. If a
    ``catalog`` is given, its attribute keys are offered as completions for
    the key question. Returns the resulting AttributeMap.

    """
    session = EditSession(context, surface.notify, baseline)
    keys = tuple(map(reader.write, catalog.keys())) if catalog else ()
    while not session.done():
        label = session.prompt()
        if session.state is State.AWAITING_KEY:
            session.feed(surface.prompt_text(label, keys))
        elif session.state is State.AWAITING_VALUE:
            current = context.attributes()
            completions = (reader.write(current.get(session.key)),) \
                if session.key in current else ()
            session.feed(surface.prompt_text(label, completions))
        else:
            session.confirm(surface.confirm(label))
    return context.attributes()
