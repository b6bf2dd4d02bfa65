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
The EditingContext holds the current AttributeMap of an editing context.

There is exactly one current attribute set per editing context, typically
per open :class:`~facedit.document.Document`. It starts empty (or with an
initial map) and persists until it is cleared. It is only changed through
:meth:`~EditingContext.set`, :meth:`~EditingContext.remove`,
:meth:`~EditingContext.load` and :meth:`~EditingContext.clear`, and every
change is announced with the ``"attributes_changed"`` event.

Use :func:`context` to get the EditingContext that belongs to an object; it
is created on first use and forgotten when the object is garbage collected::

    >>> from facedit.document import Document
    >>> from facedit.context import context
    >>> d = Document("some text")
    >>> context(d) is context(d)
    True

"""


import weakref

from . import util
from .attributes import AttributeMap


class EditingContext(util.Observable):
    """Holds the current AttributeMap for one editing context.

    Emits the following event:

    ``"attributes_changed" (attributes)``:
        emitted with the new AttributeMap after every change.

    """
    def __init__(self, attributes=None):
        super().__init__()
        self._attributes = attributes if attributes is not None else AttributeMap()

    def __repr__(self):
        return "<{} {!r}>".format(type(self).__name__, self._attributes)

    def attributes(self):
        """Return the current AttributeMap."""
        return self._attributes

    def _change(self, attributes):
        """(Internal.) Replace the current map and announce it."""
        self._attributes = attributes
        self.emit("attributes_changed", attributes)
        return attributes

    def get(self, key, default=None):
        """Return the value of the key in the current map."""
        return self._attributes.get(key, default)

    def set(self, key, value):
        """Set the key to value in the current map and return the new map."""
        return self._change(self._attributes.set(key, value))

    def remove(self, key):
        """Remove the key from the current map and return the new map."""
        return self._change(self._attributes.remove(key))

    def load(self, attributes):
        """Replace the current map with another AttributeMap, e.g. of a named style."""
        return self._change(attributes)

    def clear(self):
        """Make the current map empty."""
        return self._change(AttributeMap())


_contexts = weakref.WeakKeyDictionary()


def context(owner):
    """Return the EditingContext for the owner, creating it if needed.

    The owner must be hashable and support weak references, like a Document.

    """
    try:
        return _contexts[owner]
    except KeyError:
        c = _contexts[owner] = EditingContext()
        return c
