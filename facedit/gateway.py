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
The ApplyGateway applies a finished face to a span of a document.

The gateway is the only place where an attribute set leaves the editing
core: it hands the pairs of the AttributeMap to the document, which tags the
text. Two policies are supported:

``"face"``
    the ``face`` property of the span is replaced by the attribute set
    (:meth:`~facedit.document.Document.tag_span`)
``"properties"``
    every pair is merged into the text properties of the span as a generic
    property (:meth:`~facedit.document.Document.add_properties`)

Failures of the document are reported through the ``notify`` callable and do
not propagate; the attribute set itself is never changed by the gateway.

"""


import logging

from . import document
from . import util


logger = logging.getLogger(__name__)

MODES = ("face", "properties")


class ApplyGateway:
    """Applies AttributeMaps or named styles to spans of a Document.

    The ``notify`` argument is a callable that gets a message string, by
    default the messages are only logged. The ``catalog`` is used to check
    style names given to :meth:`apply_named`; if it is None, any name is
    accepted.

    """
    def __init__(self, document, notify=None, catalog=None):
        self.document = document
        self.catalog = catalog
        self._notify = notify

    def notify(self, message):
        """Report a message to the user."""
        if self._notify:
            self._notify(message)
        else:
            logger.info(message)

    def span(self, span):
        """Return the (start, end) tuple for a span or a Cursor."""
        if isinstance(span, document.Cursor):
            return span.selection()
        start, end = span
        return start, end

    def apply(self, span, attributes, mode="face"):
        """Apply the attributes to the span, returns True on success.

        The span is a (start, end) tuple or a Cursor; the mode is one of
        ``"face"`` or ``"properties"``.

        """
        if mode not in MODES:
            raise ValueError("unknown mode: {}".format(mode))
        start, end = self.span(span)
        pairs = attributes.to_pairs()
        try:
            if mode == "face":
                self.document.tag_span(start, end, attributes)
            else:
                self.document.add_properties(start, end, pairs)
        except (ValueError, IndexError) as e:
            logger.warning("could not apply attributes to %d..%d: %s", start, end, e)
            self.notify("Could not apply face: {}".format(e))
            return False
        logger.debug("applied %d attributes to %d..%d (%s)", len(pairs), start, end, mode)
        return True

    def apply_named(self, span, name):
        """Set the ``face`` property of the span to the named style.

        Raises KeyError if a catalog is set and the name is not in it.
        Returns True on success.

        """
        if self.catalog is not None and name not in self.catalog:
            raise KeyError("unknown style: {}".format(name))
        start, end = self.span(span)
        if not isinstance(name, util.Symbol):
            name = util.Symbol(name)
        try:
            self.document.put_property(start, end, document.FACE, name)
        except (ValueError, IndexError) as e:
            logger.warning("could not apply style %s to %d..%d: %s", name, start, end, e)
            self.notify("Could not apply style {}: {}".format(name, e))
            return False
        return True
