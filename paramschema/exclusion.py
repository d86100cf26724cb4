# Copyright (c) 2013-2025 NASK. All rights reserved.

"""
Resolution of *exclusion lists*.

An exclusion list is a sequence whose items are:

* bare field names -- the field is excluded entirely;
* ``(field name, sub-list)`` pairs -- the field itself is *not*
  excluded, but the sub-list becomes the exclusion list used when
  processing the field's nested schema.

>>> exclude = ['password', ('address', ['street'])]
>>> resolve_exclusion('name', exclude)
INCLUDE
>>> resolve_exclusion('password', exclude)
EXCLUDE
>>> resolve_exclusion('address', exclude)
ExcludeWith(sub_list=['street'])

A bare entry wins over pair entries (total exclusion takes priority
over a partial one):

>>> resolve_exclusion('address', [('address', ['street']), 'address'])
EXCLUDE
"""


from typing import NamedTuple

from paramschema.class_helpers import is_seq


class _Decision(object):

    def __init__(self, label):
        self._label = label

    def __repr__(self):
        return self._label


INCLUDE = _Decision('INCLUDE')
EXCLUDE = _Decision('EXCLUDE')


class ExcludeWith(NamedTuple):
    sub_list: list


def resolve_exclusion(name, exclude):
    """
    Decide whether the field of the given name is to be included,
    excluded, or processed with the given exclusion sub-list.

    Returns:
        :obj:`INCLUDE`, :obj:`EXCLUDE` or an :class:`ExcludeWith`
        instance.  Several pair entries for the same name have their
        sub-lists concatenated.  Malformed entries are ignored.
    """
    sub_list = None
    for entry in exclude:
        if is_seq(entry):
            if len(entry) == 2 and entry[0] == name and is_seq(entry[1]):
                sub_list = (sub_list or []) + list(entry[1])
        elif entry == name:
            return EXCLUDE
    if sub_list is None:
        return INCLUDE
    return ExcludeWith(sub_list)
