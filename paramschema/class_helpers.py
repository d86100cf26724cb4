# Copyright (c) 2013-2025 NASK. All rights reserved.

import collections.abc as collections_abc


def is_seq(obj):
    """
    Check if the given object is a *sequence* but *not* a string-like one.

    >>> is_seq(['a', 'b'])
    True
    >>> is_seq(('a', 'b'))
    True
    >>> is_seq('ab')
    False
    >>> is_seq(b'ab')
    False
    >>> is_seq({'a', 'b'})
    False
    """
    return (isinstance(obj, collections_abc.Sequence) and
            not isinstance(obj, (str, bytes, bytearray)))


def attr_repr(*attr_names):
    """
    Make a __repr__() implementation based on given attribute names.

    Any number of positional args:
        Names of instance attributes and/or class attributes.

    Returns:
        A function being the requested __repr__() implementation.

    >>> class A(object):
    ...    __repr__ = attr_repr('x', 'y')
    ...    x = 1
    ...    def __init__(self):
    ...        self.y = 'qwerty'
    >>> A()
    <A x=1, y='qwerty'>
    """
    format_repr = ('<{0.__class__.__qualname__} ' +
                   ', '.join('%s={0.%s!r}' % (name, name)
                             for name in attr_names) +
                   '>').format
    format_repr_fallback = object.__repr__

    def __repr__(self):
        # noinspection PyBroadException
        try:
            return format_repr(self)
        except Exception:
            return format_repr_fallback(self)

    return __repr__
