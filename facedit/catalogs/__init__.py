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
This directory contains the bundled style catalogs.

A catalog file lists named styles in the literal syntax of the
:mod:`~facedit.reader` module, one list per style, starting with the name of
the style followed by its attributes::

    (prompt :foreground "medium blue")

See the :doc:`catalog <catalog>` module for the supporting code.

"""


import glob
import os


def filename(name):
    """Convert a catalog name to the file in this directory.

    E.g. "default" translates to "/usr/lib/python/3.x/facedit/catalogs/default.faces",
    depending on where facedit was installed.

    """
    return os.path.join(__path__[0], name + '.faces')


def get_all_catalogs():
    """Return the sorted list of catalog names in ``facedit.catalogs``.

    Only the names are returned, without the '.faces' extension.
    Files that start with an underscore are skipped.

    """
    names = []
    for filename in glob.glob(os.path.join(__path__[0], "*.faces")):
        name = os.path.splitext(os.path.basename(filename))[0]
        if not name.startswith('_'):
            names.append(name)
    names.sort()
    return names
