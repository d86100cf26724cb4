# Copyright (c) 2013-2025 NASK. All rights reserved.

import collections
import collections.abc as collections_abc
import unittest.mock as mock

from paramschema.exceptions import DataError


class TestCaseMixin(object):

    def assertEqualIncludingTypes(self, first, second, msg=None):
        self.assertEqual(first, second, msg=msg)
        if first is not mock.ANY and second is not mock.ANY:
            self.assertIs(type(first), type(second),
                          'type of {!a} ({}) is not type of {!a} ({})'
                          .format(first, type(first), second, type(second)))
        if (isinstance(first, collections_abc.Sequence)
              and not isinstance(first, (bytes, bytearray, str))):
            for val1, val2 in zip(first, second):
                self.assertEqualIncludingTypes(val1, val2)
        elif isinstance(first, collections_abc.Mapping):
            for key1, key2 in zip(sorted(first.keys(), key=self._safe_sort_key),
                                  sorted(second.keys(), key=self._safe_sort_key)):
                self.assertEqualIncludingTypes(key1, key2)
            for key in first:
                self.assertEqualIncludingTypes(first[key], second[key])

    def assertRaisesDataError(self, exc_class, expected_errors, callable_obj, *args, **kwargs):
        assert issubclass(exc_class, DataError)
        with self.assertRaises(exc_class) as cm:
            callable_obj(*args, **kwargs)
        self.assertIs(type(cm.exception), exc_class)
        self.assertEqualIncludingTypes(cm.exception.errors, expected_errors)
        return cm.exception

    @staticmethod
    def _safe_sort_key(obj):
        # when sorting, using this function as the `key` argument
        # prevents -- practically always -- from ordering values of
        # types that are incompatible in terms of ordering
        t = type(obj)
        return t.__name__, id(t), obj


class case(collections.namedtuple('case', 'init_kwargs, given, expected')):

    def __new__(cls, **kwargs):
        if 'init_kwargs' not in kwargs:
            kwargs['init_kwargs'] = {}
        return super(case, cls).__new__(cls, **kwargs)
