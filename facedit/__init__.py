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
The facedit Python module.

The main module provides the listed classes and functions, enough to build a
face and apply it to a document::

    >>> import facedit
    >>> d = facedit.Document("Hello world!")
    >>> c = facedit.context(d)
    >>> c.load(facedit.face('(:foreground "red" :weight bold)'))
    <AttributeMap (:foreground "red" :weight bold)>
    >>> facedit.ApplyGateway(d).apply((0, 5), c.attributes())
    True

To build the face interactively, run an edit session against a prompt
surface, for example in a terminal::

    >>> facedit.run(c, facedit.ConsoleSurface())

.. py:data:: version

   The version as a three-tuple(major, minor, patch). See :mod:`~facedit.pkginfo`.

.. py:data:: version_string

   The version as a string.

"""

# imported when using from facedit import *
__all__ = (
    # important classes
    'ApplyGateway',
    'AttributeMap',
    'ConsoleSurface',
    'Cursor',
    'Document',
    'EditSession',
    'EditingContext',
    'StyleCatalog',
    'Symbol',

    # toplevel functions
    'catalog_by_name',
    'context',
    'face',
    'read',
    'render',
    'run',
    'write',
)

from .attributes import AttributeMap, face
from .catalog import StyleCatalog
from .context import EditingContext, context
from .document import Cursor, Document
from .gateway import ApplyGateway
from .preview import render
from .reader import read, write
from .session import EditSession, run
from .surface import ConsoleSurface
from .util import Symbol
from .pkginfo import version, version_string


def catalog_by_name(name="default"):
    """Return a StyleCatalog from the bundled catalogs.

    See for the names :func:`facedit.catalogs.get_all_catalogs`.

    """
    return StyleCatalog.byname(name)
