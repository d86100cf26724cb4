# Copyright (c) 2013-2025 NASK. All rights reserved.

"""
Type implementations (compliant with the
:class:`paramschema.interfaces.Coercible` interface) and the *type
registry* that maps type tags (such as ``'integer'``) to them.

>>> default_registry.get('integer').load('32')
32
>>> default_registry.get('integer').load('thirty two')
Traceback (most recent call last):
  ...
paramschema.exceptions.FieldValueError: invalid integer type
>>> default_registry.get('no-such-type')
Traceback (most recent call last):
  ...
paramschema.exceptions.UnknownTypeError: no-such-type is not a valid type
"""


import collections.abc as collections_abc
import datetime
import decimal
import enum
import re
from typing import Union

from paramschema.datetime_helpers import (
    datetime_utc_normalize,
    is_aware,
    parse_iso_date,
    parse_iso_datetime,
    parse_iso_time,
)
from paramschema.encoding_helpers import ascii_str
from paramschema.exceptions import (
    FieldValueError,
    UnknownTypeError,
)
from paramschema.interfaces import Coercible
from paramschema.log_helpers import get_logger


LOGGER = get_logger(__name__)


INTEGER_STR_REGEX = re.compile(r'\A[+-]?\d+\Z', re.ASCII)
FLOAT_STR_REGEX = re.compile(r'''
    \A
    [+-]?
    (?:
        \d+ (?: \. \d* )?
    |
        \. \d+
    )
    (?: [eE] [+-]? \d+ )?
    \Z
''', re.ASCII | re.VERBOSE)



#
# The base type class

class BaseType(object):

    """
    The base class for type implementations.

    Subclasses should set :attr:`tag` and implement (some of) the
    following methods:

    * :meth:`is_internal` -- the strict membership check (used by
      :meth:`validate`, and by :meth:`load` to let already-loaded
      values through unchanged);

    * :meth:`coerce_loaded` -- the actual external-to-internal
      coercion (called only for values for which :meth:`is_internal`
      returned false);

    * :meth:`coerce_dumped` -- the internal-to-external conversion
      (the default implementation returns the value unchanged).

    The coercion methods may raise :exc:`~exceptions.TypeError` or
    :exc:`~exceptions.ValueError` (including
    :exc:`~paramschema.exceptions.FieldValueError`) -- the public
    methods translate them into a :exc:`FieldValueError` whose
    `public_message` is :attr:`error_msg` (by default:
    ``"invalid <tag> type"``).

    Like fields, types can be customized by
    subclassing or by passing keyword arguments whose names are
    names of class-level attributes to the constructor.
    """

    #: (to be set in subclasses)
    tag = None

    #: (if `None` it will be determined automatically, based on `tag`)
    error_msg = None

    def __init__(self, **kwargs):
        self._init_kwargs = kwargs
        self._set_per_instance_attrs(kwargs)
        if self.error_msg is None:
            self.error_msg = 'invalid {} type'.format(self.tag)

    def __repr__(self):
        return '{}({})'.format(
            self.__class__.__qualname__,
            ', '.join(
                '{}={!r}'.format(key, value)
                for key, value in sorted(self._init_kwargs.items())))

    def _set_per_instance_attrs(self, per_instance_attrs):
        # per-instance customizations of class-level attributes
        cls = self.__class__
        for attr_name, obj in per_instance_attrs.items():
            if not hasattr(cls, attr_name):
                raise TypeError(
                    '{}.__init__() got an unexpected keyword argument {!a}'
                    .format(cls.__qualname__, attr_name))
            setattr(self, attr_name, obj)


    #
    # `Coercible`-compliant public interface

    def load(self, value):
        if self.is_internal(value):
            return value
        try:
            return self.coerce_loaded(value)
        except (TypeError, ValueError) as exc:
            raise FieldValueError(public_message=self.error_msg) from exc

    def dump(self, value):
        try:
            return self.coerce_dumped(value)
        except (TypeError, ValueError) as exc:
            raise FieldValueError(public_message=self.error_msg) from exc

    def validate(self, value):
        if not self.is_internal(value):
            raise FieldValueError(public_message=self.error_msg)


    #
    # overridable methods

    def is_internal(self, value):
        return False

    def coerce_loaded(self, value):
        raise TypeError('{!a} cannot be loaded as {}'.format(value, self.tag))

    def coerce_dumped(self, value):
        return value



#
# Concrete built-in types

class AnyType(BaseType):

    """
    Passes anything through (no coercion, no validation).
    """

    tag = 'any'

    def is_internal(self, value):
        return True


class StringType(BaseType):

    """
    For text.  Numbers (but not booleans) are loaded as their decimal
    representations.

    >>> StringType().load(42)
    '42'
    >>> StringType().load(True)
    Traceback (most recent call last):
      ...
    paramschema.exceptions.FieldValueError: invalid string type
    """

    tag = 'string'

    #: types whose instances are converted with `str()`
    stringifiable_types = (int, float, decimal.Decimal)

    def is_internal(self, value):
        return isinstance(value, str)

    def coerce_loaded(self, value):
        if isinstance(value, self.stringifiable_types) and not isinstance(value, bool):
            return str(value)
        return super(StringType, self).coerce_loaded(value)

    def coerce_dumped(self, value):
        if self.is_internal(value):
            return value
        return self.coerce_loaded(value)


class AtomType(BaseType):

    """
    For symbolic names.

    Loaded values are *plain strings* (never interned): any string is
    accepted, and :class:`enum.Enum` members are loaded as their names.
    To restrict the set of accepted names use :class:`EnumType`.

    >>> import enum
    >>> class Color(enum.Enum):
    ...     RED = 1
    ...
    >>> AtomType().load(Color.RED)
    'RED'
    >>> AtomType().load('anything')
    'anything'
    """

    tag = 'atom'

    def is_internal(self, value):
        return isinstance(value, str)

    def coerce_loaded(self, value):
        if isinstance(value, enum.Enum):
            return value.name
        return super(AtomType, self).coerce_loaded(value)

    def coerce_dumped(self, value):
        if self.is_internal(value):
            return value
        return self.coerce_loaded(value)


class IntegerType(BaseType):

    """
    For integer numbers.  Strings are accepted only if they consist
    of decimal digits (optionally preceded by a sign); floats are
    *not* accepted (even if they represent integer numbers).

    >>> IntegerType().load('-17')
    -17
    >>> IntegerType().load(17.0)
    Traceback (most recent call last):
      ...
    paramschema.exceptions.FieldValueError: invalid integer type
    """

    tag = 'integer'

    def is_internal(self, value):
        return isinstance(value, int) and not isinstance(value, bool)

    def coerce_loaded(self, value):
        if isinstance(value, str) and INTEGER_STR_REGEX.search(value):
            return int(value)
        return super(IntegerType, self).coerce_loaded(value)


class FloatType(BaseType):

    """
    For floating-point numbers.  Integers are widened, strings are
    parsed (only the usual decimal notation is accepted, so ``'nan'``
    or ``'inf'`` are not).

    >>> FloatType().load(3)
    3.0
    >>> FloatType().load('1.5e3')
    1500.0
    """

    tag = 'float'

    def is_internal(self, value):
        return isinstance(value, float)

    def coerce_loaded(self, value):
        if isinstance(value, (int, decimal.Decimal)) and not isinstance(value, bool):
            return float(value)
        if isinstance(value, str) and FLOAT_STR_REGEX.search(value):
            return float(value)
        return super(FloatType, self).coerce_loaded(value)


class BooleanType(BaseType):

    """
    For boolean flags.

    Accepted: :obj:`True`/:obj:`False`, the integers ``1``/``0`` and
    the strings ``"true"``/``"false"`` (case-insensitive) as well as
    ``"1"``/``"0"``.

    >>> BooleanType().load('TRUE')
    True
    >>> BooleanType().load(0)
    False
    >>> BooleanType().load('yes')
    Traceback (most recent call last):
      ...
    paramschema.exceptions.FieldValueError: invalid boolean type
    """

    tag = 'boolean'

    lowercase_to_bool = {
        'true': True,
        '1': True,
        'false': False,
        '0': False,
    }

    def is_internal(self, value):
        return isinstance(value, bool)

    def coerce_loaded(self, value):
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        if isinstance(value, str):
            try:
                return self.lowercase_to_bool[value.lower()]
            except KeyError:
                raise ValueError('{!a} is not a boolean flag'.format(value)) from None
        return super(BooleanType, self).coerce_loaded(value)


class MapType(BaseType):

    """
    For mappings (loaded as :class:`dict` copies; the contents are not
    processed).
    """

    tag = 'map'

    def is_internal(self, value):
        return type(value) is dict

    def coerce_loaded(self, value):
        if isinstance(value, collections_abc.Mapping):
            return dict(value)
        return super(MapType, self).coerce_loaded(value)

    def validate(self, value):
        if not isinstance(value, collections_abc.Mapping):
            raise FieldValueError(public_message=self.error_msg)


class ArrayType(BaseType):

    """
    For lists (tuples are loaded as :class:`list` copies; the items
    are not processed).
    """

    tag = 'array'

    def is_internal(self, value):
        return isinstance(value, list)

    def coerce_loaded(self, value):
        if isinstance(value, tuple):
            return list(value)
        return super(ArrayType, self).coerce_loaded(value)

    def validate(self, value):
        if not isinstance(value, (list, tuple)):
            raise FieldValueError(public_message=self.error_msg)


class ListType(ArrayType):

    tag = 'list'


class _IsoFormattedTypeMixin(object):

    # (dumped as ISO-8601 strings)

    def coerce_dumped(self, value):
        if isinstance(value, str):
            return value
        if isinstance(value, (datetime.date, datetime.time)):
            return value.isoformat()
        raise TypeError('{!a} cannot be dumped as {}'.format(value, self.tag))


class DateType(_IsoFormattedTypeMixin, BaseType):

    """
    For dates: :class:`datetime.date` instances (but not
    :class:`datetime.datetime` ones), ``(year, month, day)`` tuples
    or *ISO-8601* ``YYYY-MM-DD`` strings.

    >>> DateType().load('2020-02-29')
    datetime.date(2020, 2, 29)
    >>> DateType().load((2020, 2, 29))
    datetime.date(2020, 2, 29)
    >>> DateType().dump(datetime.date(2020, 2, 29))
    '2020-02-29'
    """

    tag = 'date'

    def is_internal(self, value):
        return (isinstance(value, datetime.date)
                and not isinstance(value, datetime.datetime))

    def coerce_loaded(self, value):
        if isinstance(value, str):
            return parse_iso_date(value)
        if isinstance(value, tuple) and len(value) == 3 and _all_int(value):
            return datetime.date(*value)
        return super(DateType, self).coerce_loaded(value)


class TimeType(_IsoFormattedTypeMixin, BaseType):

    """
    For times of day: :class:`datetime.time` instances,
    ``(hour, minute, second)`` tuples or *ISO-8601* strings.

    >>> TimeType().load('23:50:07')
    datetime.time(23, 50, 7)
    >>> TimeType().load((23, 50, 7))
    datetime.time(23, 50, 7)
    """

    tag = 'time'

    def is_internal(self, value):
        return isinstance(value, datetime.time)

    def coerce_loaded(self, value):
        if isinstance(value, str):
            return parse_iso_time(value)
        if isinstance(value, tuple) and len(value) == 3 and _all_int(value):
            return datetime.time(*value)
        return super(TimeType, self).coerce_loaded(value)


class DateTimeType(_IsoFormattedTypeMixin, BaseType):

    """
    For *TZ-aware* date+time values: :class:`datetime.datetime`
    instances with time zone information, or *ISO-8601* strings that
    include a time zone designator (they are normalized to UTC).

    >>> DateTimeType().load('2015-01-23T23:50:07+01:00')
    datetime.datetime(2015, 1, 23, 22, 50, 7, tzinfo=datetime.timezone.utc)
    >>> DateTimeType().load('2015-01-23T23:50:07')
    Traceback (most recent call last):
      ...
    paramschema.exceptions.FieldValueError: invalid datetime type
    """

    tag = 'datetime'

    def is_internal(self, value):
        return isinstance(value, datetime.datetime) and is_aware(value)

    def coerce_loaded(self, value):
        if isinstance(value, str):
            dt = parse_iso_datetime(value)
            if not is_aware(dt):
                raise ValueError('{!a} does not include time zone information'
                                 .format(value))
            return datetime_utc_normalize(dt)
        return super(DateTimeType, self).coerce_loaded(value)


class NaiveDateTimeType(_IsoFormattedTypeMixin, BaseType):

    """
    For *naive* date+time values: :class:`datetime.datetime` instances
    without time zone information, ``((year, month, day), (hour,
    minute, second))`` tuples or *ISO-8601* strings without a time
    zone designator.

    >>> NaiveDateTimeType().load(((2015, 1, 23), (23, 50, 7)))
    datetime.datetime(2015, 1, 23, 23, 50, 7)
    >>> NaiveDateTimeType().load('2015-01-23 23:50:07')
    datetime.datetime(2015, 1, 23, 23, 50, 7)
    """

    tag = 'naive_datetime'

    def is_internal(self, value):
        return isinstance(value, datetime.datetime) and not is_aware(value)

    def coerce_loaded(self, value):
        if isinstance(value, str):
            dt = parse_iso_datetime(value)
            if is_aware(dt):
                raise ValueError('{!a} includes time zone information'
                                 .format(value))
            return dt
        if (isinstance(value, tuple) and len(value) == 2
              and all(isinstance(part, tuple) and len(part) == 3 and _all_int(part)
                      for part in value)):
            date_part, time_part = value
            return datetime.datetime(*(date_part + time_part))
        return super(NaiveDateTimeType, self).coerce_loaded(value)


class DecimalType(BaseType):

    """
    For exact decimal numbers (:class:`decimal.Decimal`); integers,
    strings and floats are accepted (floats through their shortest
    :func:`repr`, so ``0.1`` becomes ``Decimal('0.1')``).  Dumped as
    strings.

    >>> DecimalType().load(0.1)
    Decimal('0.1')
    >>> DecimalType().dump(decimal.Decimal('1.50'))
    '1.50'
    """

    tag = 'decimal'

    def is_internal(self, value):
        return isinstance(value, decimal.Decimal) and value.is_finite()

    def coerce_loaded(self, value):
        if isinstance(value, (int, float, str)) and not isinstance(value, bool):
            try:
                result = decimal.Decimal(str(value).strip())
            except decimal.InvalidOperation:
                raise ValueError('{!a} is not a decimal number'.format(value)) from None
            if result.is_finite():
                return result
            raise ValueError('{!a} is not a finite number'.format(value))
        return super(DecimalType, self).coerce_loaded(value)

    def coerce_dumped(self, value):
        return str(value)


class EnumType(BaseType):

    """
    For values from a fixed set -- each of them having its *external*
    representation (the *key*) and the *internal* one (the *value*).

    The constructor-argument-or-subclass-attribute :attr:`values` (a
    mapping of keys to values) is obligatory; it can also be made from
    an :class:`enum.Enum` subclass with :meth:`from_enum`.

    >>> status = EnumType(values={'userOnline': 'online', 'userOffline': 'offline'})
    >>> status.load('userOnline')
    'online'
    >>> status.load('online')       # (already internal)
    'online'
    >>> status.dump('offline')
    'userOffline'
    >>> status.load('away')
    Traceback (most recent call last):
      ...
    paramschema.exceptions.FieldValueError: invalid enum type
    """

    tag = 'enum'

    values = None

    def __init__(self, **kwargs):
        super(EnumType, self).__init__(**kwargs)
        if self.values is None:
            raise TypeError("'values' not specified for {} "
                            "(neither as a class attribute nor "
                            "as a constructor argument)"
                            .format(self.__class__.__qualname__))
        self.values = dict(self.values)
        self._value_to_key = {value: key for key, value in self.values.items()}

    @classmethod
    def from_enum(cls, enum_class, **kwargs):
        """
        Make an instance whose keys are values of members of the given
        :class:`enum.Enum` subclass, and values are those members.
        """
        return cls(values={member.value: member for member in enum_class}, **kwargs)

    def is_internal(self, value):
        try:
            return value in self._value_to_key
        except TypeError:  # (unhashable)
            return False

    def load(self, value):
        # (a key takes precedence over an equal internal value)
        try:
            return self.values[value]
        except (KeyError, TypeError):
            pass
        return super(EnumType, self).load(value)

    def coerce_loaded(self, value):
        try:
            return self.values[value]
        except (KeyError, TypeError):
            raise ValueError('{} is not a valid key'.format(ascii_str(value))) from None

    def coerce_dumped(self, value):
        try:
            return self._value_to_key[value]
        except (KeyError, TypeError):
            raise ValueError('{} is not a valid value'.format(ascii_str(value))) from None


def _all_int(values):
    return all(isinstance(v, int) and not isinstance(v, bool) for v in values)



#
# The type registry

class TypeRegistry(object):

    """
    A mapping of type tags to type implementations (objects compliant
    with :class:`paramschema.interfaces.Coercible`).

    >>> registry = TypeRegistry()
    >>> 'integer' in registry
    False
    >>> registry.register('integer', IntegerType())
    >>> registry.get('integer')
    IntegerType()
    >>> registry.resolve(registry.get('integer')) is registry.get('integer')
    True
    """

    def __init__(self, tag_to_type=None):
        self._tag_to_type = {}
        if tag_to_type is not None:
            for tag, type_impl in dict(tag_to_type).items():
                self.register(tag, type_impl)

    def __contains__(self, tag):
        return tag in self._tag_to_type

    def __iter__(self):
        return iter(self._tag_to_type)

    def __repr__(self):
        return '<{} tags={!r}>'.format(self.__class__.__qualname__,
                                       sorted(self._tag_to_type))

    def register(self,
                 tag: str,
                 type_impl: Union[Coercible, type],
                 replace: bool = False) -> None:
        """
        Register a type implementation for the given tag.

        Args:
            `tag` (a :class:`str`):
                The type tag.
            `type_impl`:
                An object compliant with :class:`Coercible`; if it is a
                class it will be instantiated (without arguments).

        Kwargs:
            `replace` (default: :obj:`False`):
                If false, trying to register a tag that is already
                registered causes :exc:`~exceptions.ValueError`.
        """
        if not isinstance(tag, str) or not tag:
            raise TypeError('type tag must be a non-empty str (got: {!a})'.format(tag))
        if isinstance(type_impl, type):
            type_impl = type_impl()
        if not is_coercible(type_impl):
            raise TypeError('{!a} does not provide the load(), dump() '
                            'and validate() methods'.format(type_impl))
        if tag in self._tag_to_type:
            if not replace:
                raise ValueError('type tag {!a} is already registered'.format(tag))
            LOGGER.warning('Replacing the type registered as %a (%a) with %a',
                           tag, self._tag_to_type[tag], type_impl)
        else:
            LOGGER.debug('Registering type %a as %a', type_impl, tag)
        self._tag_to_type[tag] = type_impl

    def get(self, tag):
        try:
            return self._tag_to_type[tag]
        except (KeyError, TypeError):
            raise UnknownTypeError(tag) from None

    def resolve(self, type_spec):
        """
        Get the type implementation for the given tag, or -- if the
        given object is already a type implementation -- return it.
        """
        if isinstance(type_spec, str):
            return self.get(type_spec)
        if is_coercible(type_spec):
            return type_spec
        raise UnknownTypeError(type_spec)

    def copy(self):
        return self.__class__(self._tag_to_type)


def is_coercible(obj):
    """
    >>> is_coercible(IntegerType())
    True
    >>> is_coercible('integer')
    False
    """
    return isinstance(obj, Coercible)


BUILTIN_TYPES = (
    AnyType,
    StringType,
    AtomType,
    IntegerType,
    FloatType,
    BooleanType,
    MapType,
    ArrayType,
    ListType,
    DateType,
    TimeType,
    DateTimeType,
    NaiveDateTimeType,
    DecimalType,
)

default_registry = TypeRegistry({type_class.tag: type_class
                                 for type_class in BUILTIN_TYPES})


def register_type(tag, type_impl, replace=False):
    """Register a custom type in the default registry."""
    default_registry.register(tag, type_impl, replace=replace)


def get_type(tag):
    return default_registry.get(tag)
