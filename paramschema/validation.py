# Copyright (c) 2013-2025 NASK. All rights reserved.

import collections.abc as collections_abc
from typing import Optional

from paramschema.class_helpers import is_seq
from paramschema.exceptions import FieldValueError
from paramschema.interfaces import (
    Validator,
    Value,
)


# the first item of a `(ERROR, reason)` pair returned by a rejecting validator
ERROR = 'error'


def invoke_validator(validator: Optional[Validator], value: Value) -> None:
    """
    Apply a field validator to the (already loaded) value.

    Args:
        `validator`:
            One of:

            * :obj:`None` (no validation -- automatic pass);
            * a callable -- to be called with `value` as the sole
              argument;
            * a ``(callable, args)`` pair -- if `args` is a mapping the
              callable is called as ``callable(value, **args)``,
              otherwise as ``callable(value, args)``.
        `value`:
            The value to be validated.

    Returns:
        :obj:`None` (the value itself is never replaced with anything
        returned by the validator).

    Raises:
        :exc:`~paramschema.exceptions.FieldValueError` -- if the
        validator rejected the value: either by raising that exception
        itself, or by returning an ``(ERROR, reason)`` pair (then the
        public message is `reason`), or by returning :obj:`False` (then
        the public message is the default ``"is invalid"``).  Any other
        returned value means approval.

    Any other exception raised by the validator is propagated.

    >>> def is_positive(value):
    ...     return value > 0
    ...
    >>> def in_range(value, min, max):
    ...     if not min <= value <= max:
    ...         raise FieldValueError(public_message='is out of range')
    ...
    >>> invoke_validator(is_positive, 3)
    >>> invoke_validator(is_positive, -3)
    Traceback (most recent call last):
      ...
    paramschema.exceptions.FieldValueError: is invalid
    >>> invoke_validator((in_range, {'min': 1, 'max': 5}), 3)
    >>> invoke_validator((in_range, {'min': 1, 'max': 5}), 7)
    Traceback (most recent call last):
      ...
    paramschema.exceptions.FieldValueError: is out of range
    >>> invoke_validator(lambda value: (ERROR, 'is odd') if value % 2 else True, 3)
    Traceback (most recent call last):
      ...
    paramschema.exceptions.FieldValueError: is odd
    >>> invoke_validator(None, 'whatever')
    """
    if validator is None:
        return
    if is_seq(validator):
        func, args = validator
        if isinstance(args, collections_abc.Mapping):
            result = func(value, **args)
        else:
            result = func(value, args)
    else:
        result = validator(value)
    if result is False:
        raise FieldValueError()
    if _is_error_pair(result):
        raise FieldValueError(public_message=result[1])


def _is_error_pair(result):
    return (isinstance(result, tuple)
            and len(result) == 2
            and isinstance(result[0], str)
            and result[0] == ERROR
            and isinstance(result[1], str))
