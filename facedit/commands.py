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
Commands that wire the core to a document and a prompt surface.

These are the top-level entry points: each command gets the document (and
its selection) and a :class:`~facedit.surface.PromptSurface`, and uses the
:class:`~facedit.context.EditingContext` of the document to keep the face
that is being built between commands.

:func:`main` runs the commands interactively in a terminal on a text file::

    $ python3 -m facedit --start 10 --end 20 somefile.txt

"""


import argparse
import logging

from .context import context as get_context
from . import pkginfo
from . import session
from .attributes import face
from .catalog import CatalogError, StyleCatalog
from .document import Cursor, Document
from .gateway import ApplyGateway
from .preview import render
from .out.ansi import AnsiFormatter
from .out.html import HtmlFormatter
from .surface import ConsoleSurface


logger = logging.getLogger(__name__)


def read_region(cursor):
    """Return the (start, end) span of the cursor's selection.

    Raises ValueError if there is no selection.

    """
    if not cursor.has_selection():
        raise ValueError("The mark is not set now, so there is no region")
    return cursor.selection()


def read_style_name(context, surface, catalog, label="Style: "):
    """Ask for the name of a style in the catalog; returns None if none was given."""
    label = render(context.attributes()).decorate(label)
    name = surface.prompt_choice(label, catalog.names())
    return name or None


def edit_face(context, surface, catalog=None, baseline="prompt"):
    """Edit the face of the context interactively, returns the new AttributeMap."""
    return session.run(context, surface, catalog, baseline)


def load_face(context, surface, catalog):
    """Replace the face of the context with the attributes of a named style."""
    name = read_style_name(context, surface, catalog, "Load style: ")
    if name:
        attributes = context.load(catalog.style(name))
        surface.notify(session.describe(attributes))


def clear_face(context, surface):
    """Make the face of the context empty."""
    surface.notify(session.describe(context.clear()))


def show_face(context, surface):
    """Show the face of the context."""
    surface.notify(session.describe(context.attributes()))


def apply_face(document, cursor, surface, mode="face"):
    """Apply the face of the document's context to the selected text.

    Returns True if the face was applied.

    """
    try:
        span = read_region(cursor)
    except ValueError as e:
        surface.notify(str(e))
        return False
    attributes = get_context(document).attributes()
    return ApplyGateway(document, surface.notify).apply(span, attributes, mode)


def apply_named_face(document, cursor, surface, catalog):
    """Ask for a style name and apply it to the selected text.

    Returns True if the style was applied.

    """
    try:
        span = read_region(cursor)
    except ValueError as e:
        surface.notify(str(e))
        return False
    name = read_style_name(get_context(document), surface, catalog)
    if not name:
        return False
    return ApplyGateway(document, surface.notify, catalog).apply_named(span, name)


COMMANDS = ("edit", "load", "clear", "show", "apply", "apply-named", "select", "quit")


def select(document, cursor, surface):
    """Ask for a new selection, as two positions separated by a space."""
    label = render(get_context(document).attributes()).decorate(
        "Region (start end) [{} {}]: ".format(*cursor.selection()))
    text = surface.prompt_text(label)
    if text.strip():
        try:
            start, end = map(int, text.split())
        except ValueError:
            surface.notify("Please enter two numbers.")
            return
        cursor.select(start, end)


def interact(document, cursor, surface, catalog, mode="face"):
    """Run commands chosen by the user until ``quit`` is chosen."""
    ctx = get_context(document)
    while True:
        label = render(ctx.attributes()).decorate("Command ({}): ".format(", ".join(COMMANDS)))
        command = surface.prompt_choice(label, COMMANDS)
        logger.debug("command: %s", command)
        if command == "edit":
            edit_face(ctx, surface, catalog)
        elif command == "load":
            load_face(ctx, surface, catalog)
        elif command == "clear":
            clear_face(ctx, surface)
        elif command == "show":
            show_face(ctx, surface)
        elif command == "apply":
            apply_face(document, cursor, surface, mode)
        elif command == "apply-named":
            apply_named_face(document, cursor, surface, catalog)
        elif command == "select":
            select(document, cursor, surface)
        elif command in ("quit", ""):
            return


def main(argv=None):
    """Run the interactive face editor on a text file."""
    parser = argparse.ArgumentParser(prog=pkginfo.name, description=pkginfo.description)
    parser.add_argument("filename", help="the text file to apply faces to")
    parser.add_argument("--start", type=int, default=0, help="start of the region")
    parser.add_argument("--end", type=int, default=None, help="end of the region")
    parser.add_argument("--catalog", default="default",
                        help="bundled catalog name or a catalog file")
    parser.add_argument("--mode", choices=("face", "properties"), default="face",
                        help="replace the face property or merge generic properties")
    parser.add_argument("--face", default=None,
                        help="initial face, e.g. '(:weight bold)'")
    parser.add_argument("--html", metavar="FILE", default=None,
                        help="write the result as HTML to FILE")
    parser.add_argument("--no-color", action="store_true", help="do not use escape sequences")
    parser.add_argument("--debug", action="store_true", help="log debugging information")
    parser.add_argument("--version", action="version", version=pkginfo.version_string)
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    try:
        if args.catalog.endswith(".faces"):
            catalog = StyleCatalog.from_file(args.catalog)
        else:
            catalog = StyleCatalog.byname(args.catalog)
    except (OSError, CatalogError) as e:
        parser.error("can't load catalog {}: {}".format(args.catalog, e))

    try:
        with open(args.filename, encoding="utf-8") as f:
            document = Document(f.read())
    except OSError as e:
        parser.error("can't read {}: {}".format(args.filename, e))
    cursor = Cursor(document, args.start, args.end)

    if args.face:
        try:
            get_context(document).load(face(args.face))
        except ValueError as e:
            parser.error("invalid face: {}".format(e))

    surface = ConsoleSurface(catalog, color=not args.no_color)
    interact(document, cursor, surface, catalog, args.mode)

    if args.html:
        with open(args.html, "w", encoding="utf-8") as f:
            f.write(HtmlFormatter(catalog).full_html(Cursor(document).select_all()))
    elif args.no_color:
        surface.write(document.text())
    else:
        surface.write(AnsiFormatter(catalog).ansi(Cursor(document).select_all()))
    return 0
