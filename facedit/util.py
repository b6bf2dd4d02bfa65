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
Various utility classes and functions.

This module only depends on the Python standard library.

"""

import bisect
import contextlib
import functools
import threading
import types
import weakref


class Dispatcher:
    """Dispatches calls via an instance to methods based on the first argument.

    A Dispatcher is used as a decorator when defining a class, and then called
    via or in an instance to select a method based on the first argument (which
    must be hashable). The :class:`~facedit.textformat.TextFormat` uses it to
    pick a reader method for each face attribute key::

        class MyFormat:
            dispatch = Dispatcher()

            @dispatch(Symbol(":weight"))
            def read_weight(self, value):
                self.weight = value

            def read(self, key, value):
                self.dispatch(key, value)

    Keys that are not handled are silently ignored, unless a default function
    is given, which is then called with the key and the other arguments::

        class MyFormat:
            @Dispatcher
            def dispatch(self, key, value):
                print("unknown attribute:", key)

    If you override dispatched methods in a subclass, the dispatcher
    automatically dispatches to the new method. To add keys in a subclass,
    create a new Dispatcher with the same name; it inherits the references
    stored in the dispatcher of the base class.

    To get the bound method for a key without calling it, use
    ``self.dispatch.get(key)``.

    """

    def __init__(self, default_func=None):
        self._lock = threading.Lock()
        self._table = {}
        self._tables = weakref.WeakKeyDictionary()
        self._default_func = default_func

    def __set_name__(self, owner, name):
        self._name = name

    def __call__(self, *args):
        def decorator(func):
            for a in args:
                self._table[a] = func.__name__
            return func
        return decorator

    def __get__(self, instance, owner):
        try:
            table = self._tables[owner]
        except KeyError:
            with self._lock:
                try:
                    table = self._tables[owner]
                except KeyError:
                    # inherit the references of dispatchers with the same
                    # name in base classes
                    dispatchers = []
                    for c in owner.mro():
                        d = c.__dict__.get(self._name)
                        if type(d) is type(self):
                            dispatchers.append(d)
                    _table = {}
                    for d in reversed(dispatchers):
                        _table.update(d._table)
                    table = self._tables[owner] = {a: getattr(owner, name)
                                for a, name in _table.items()}
        return _Dispatcher(self, table, instance, owner)


class _Dispatcher:
    """Helper class for Dispatcher."""
    __slots__ = ("_dispatcher", "_table", "_instance", "_owner")
    def __init__(self, dispatcher, table, instance, owner):
        self._dispatcher = dispatcher
        self._table = table
        self._instance = instance
        self._owner = owner

    def __call__(self, key, *args, **kwargs):
        """Call the stored method for the key with the other arguments."""
        f = self._table.get(key)
        if f:
            return f(self._instance, *args, **kwargs)
        f = self.default
        if f:
            return f(key, *args, **kwargs)

    @property
    def default(self):
        """The bound method specified as default, if any."""
        f = self._dispatcher._default_func
        if f:
            return f.__get__(self._instance, self._owner)

    def get(self, key):
        """Return the bound method for the key, without calling it."""
        f = self._table.get(key)
        if f:
            return f.__get__(self._instance, self._owner)

    def keys(self):
        """Return the keys that have a method."""
        return self._table.keys()


class _Observer:
    """Helper for Observable class.

    The lt/gt methods sort on priority, the eq/ne methods find out whether a
    function already is connected.

    """
    __slots__ = ('func', 'once', 'priority', 'call')
    def __init__(self, func, once=None, prepend_self=False, priority=0):
        if isinstance(func, types.MethodType):
            func = weakref.WeakMethod(func)
            self.call = self.call_weakmethod_with_self if prepend_self else self.call_weakmethod
        else:
            self.call = func if prepend_self else self.call_func
        self.func = func
        self.once = once
        self.priority = priority

    def __repr__(self):
        return "<Observer for {}>".format(self.func)

    def __eq__(self, other):
        if type(other) is _Observer:
            return self.func == other.func
        return NotImplemented

    def __ne__(self, other):
        if type(other) is _Observer:
            return self.func != other.func
        return NotImplemented

    def __lt__(self, other):
        if type(other) is _Observer:
            return self.priority < other.priority
        return NotImplemented

    def __gt__(self, other):
        if type(other) is _Observer:
            return self.priority > other.priority
        return NotImplemented

    def call_func(self, observable, *args, **kwargs):
        return self.func(*args, **kwargs)

    def call_weakmethod(self, observable, *args, **kwargs):
        func = self.func()
        if func:
            return func(*args, **kwargs)
        self.once = True

    def call_weakmethod_with_self(self, observable, *args, **kwargs):
        func = self.func()
        if func:
            return func(observable, *args, **kwargs)
        self.once = True


class Observable:
    """Simple base class for objects that need to announce events.

    Use :meth:`connect` to add a callable to be called when a certain event
    occurs, and :meth:`emit` from inside methods to announce the event.
    Documents announce text and property changes this way, and an editing
    context announces every change of its attribute map::

        >>> from facedit.context import EditingContext
        >>> c = EditingContext()
        >>> c.connect("attributes_changed", print)
        >>> m = c.set(Symbol(":weight"), Symbol("bold"))
        <AttributeMap (:weight bold)>

    No checking of event names or arguments is performed whatsoever.

    """
    def __init__(self):
        self._callbacks = {}

    def connect(self, event, func, once=False, prepend_self=False, priority=0):
        """Register a function to be called when a certain event occurs.

        The ``priority`` determines the order the functions are called; lower
        numbers are called first. If ``once`` is True, the function is removed
        after having been called once. If ``prepend_self`` is True, the
        callback gets the observable itself as first argument.

        If the ``func`` is a method, it is stored using a weak reference.

        """
        observer = _Observer(func, once, prepend_self, priority)
        slots = self._callbacks.setdefault(event, [])
        if observer not in slots:
            bisect.insort_right(slots, observer)

    def disconnect(self, event, func):
        """Remove a previously registered callback function."""
        try:
            slots = self._callbacks[event]
        except KeyError:
            return
        try:
            slots.remove(_Observer(func))
        except ValueError:
            return
        if not slots:
            del self._callbacks[event]

    def disconnect_all(self, event=None):
        """Disconnect all functions (from the event, if given)."""
        if event is None:
            self._callbacks.clear()
        else:
            self._callbacks.pop(event, None)

    def has_connections(self, event):
        """Return True when at least one callback is registered for the event."""
        return event in self._callbacks

    def emit(self, event, *args, **kwargs):
        """Call all callbacks for the event.

        Returns a :class:`contextlib.ExitStack` instance. When any of the
        connected callbacks returns a context manager, that context is entered
        and added to the exit stack.

        """
        s = contextlib.ExitStack()
        try:
            slots = self._callbacks[event]
        except KeyError:
            return s
        disconnect = []
        for i, observer in enumerate(slots):
            result = observer.call(self, *args, **kwargs)
            if hasattr(result, '__enter__') and hasattr(result, '__exit__'):
                s.enter_context(result)
            if observer.once:
                disconnect.append(i)
        if disconnect:
            for i in reversed(disconnect):
                del slots[i]
            if not slots:
                del self._callbacks[event]
        return s


def object_locker():
    """Return a callable that can hold a lock on an object.

    The Lock is created when requested for the first time, and deleted when
    released for the last time::

        >>> lock = object_locker()
        >>> with lock(obj):
        ...     do_something()

    """
    locker = {}
    locker_lock = threading.Lock()

    def lock_object(obj):
        with locker_lock:
            try:
                return locker[obj]
            except KeyError:
                lock = locker[obj] = threading.Lock()
                @contextlib.contextmanager
                def cleanup():
                    try:
                        with lock:
                            yield
                    finally:
                        del locker[obj]
                return cleanup()
    return lock_object


def cached_method(func):
    """Wrap a method and cache its return value.

    The method argument tuple should be hashable. Keyword arguments are not
    supported. Does not keep a reference to the instance.

    """
    lock = object_locker()
    cache = weakref.WeakKeyDictionary()

    @functools.wraps(func)
    def wrapper(self, *args):
        with lock(self):
            try:
                return cache[self][args]
            except KeyError:
                v = cache.setdefault(self, {})[args] = func(self, *args)
                return v
    return wrapper


def cached_func(func):
    """Wrap a normal function and cache the return value.

    The function's argument tuple should be hashable; keyword arguments are not
    supported.

    """
    cache = caching_dict(func, True)
    @functools.wraps(func)
    def wrapper(*args):
        return cache[args]
    return wrapper


def caching_dict(func, unpack=False):
    """Create a dict with a thread-safe factory function for missing keys.

    When a key is not present, the factory function is called with the key as
    argument, or, if ``unpack`` is set to True, with the key arguments
    unpacked.

    """
    lock = threading.Lock()

    class cache(dict):
        if unpack:
            def __getitem__(self, key):
                with lock:
                    try:
                        return super().__getitem__(key)
                    except KeyError:
                        value = self[key] = func(*key)
                        return value
        else:
            def __getitem__(self, key):
                with lock:
                    try:
                        return super().__getitem__(key)
                    except KeyError:
                        value = self[key] = func(key)
                        return value
    return cache()


class Symbol:
    """An unique object that has a name; the same name returns the same object.

    Symbols are the atoms of the literal syntax: attribute keys like
    ``:weight`` and symbolic values like ``bold`` are read as Symbols::

        >>> Symbol(":weight") is Symbol(":weight")
        True
        >>> Symbol(":weight")
        :weight

    """
    __slots__ = ('_name', '__weakref__')

    def __repr__(self):
        return self._name

    @cached_func
    def __new__(cls, name):
        obj = object.__new__(cls)
        obj._name = name
        return obj

    @property
    def name(self):
        """The name of the symbol."""
        return self._name

    def is_keyword(self):
        """Return True if the name starts with a colon, like ``:weight``."""
        return self._name.startswith(':')


def merge_adjacent(stream, factory=tuple):
    """Yield items from a stream of tuples.

    The first two items of each tuple are regarded as pos and end.
    If they are adjacent, and the rest of the tuples compares the same,
    the items are merged.

    Instead of the default factory `tuple`, you can give a named tuple
    or any other type to wrap the streams items in.

    """
    stream = iter(stream)
    for pos, end, *rest in stream:
        for npos, nend, *nrest in stream:
            if nrest != rest or npos > end:
                yield factory(pos, end, *rest)
                pos, rest = npos, nrest
            end = nend
        yield factory(pos, end, *rest)
