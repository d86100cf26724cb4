# Copyright (c) 2013-2025 NASK. All rights reserved.

from paramschema.encoding_helpers import ascii_str



#
# Generic mix-ins
#

class _ErrorWithPublicMessageMixin(object):

    r"""
    A mix-in class that provides the :attr:`public_message` property.

    The value of this property is a :class:`str`.  It is taken either
    from the `public_message` constructor keyword argument or -- if the
    argument was not specified -- from the value of the
    :attr:`default_public_message` attribute.

    The :class:`str` conversion that is provided by the class uses the
    value of :attr:`public_message`:

    >>> class SomeError(_ErrorWithPublicMessageMixin, Exception):
    ...     pass
    ...
    >>> str(SomeError('a', 'b'))  # using attribute default_public_message
    'Internal error.'
    >>> str(SomeError('a', 'b', public_message='Spąm.'))
    'Spąm.'

    The :func:`repr` conversion results in a programmer-readable
    representation (containing the class name, :func:`repr`-formatted
    constructor arguments and the :attr:`public_message` property):

    >>> SomeError('a', 'b')   # using class's default_public_message
    <SomeError: args=('a', 'b'); public_message='Internal error.'>
    >>> SomeError('a', 'b', public_message='Spam.')
    <SomeError: args=('a', 'b'); public_message='Spam.'>
    """

    #: (overridable in subclasses)
    default_public_message = 'Internal error.'

    def __init__(self, *args, **kwargs):
        try:
            public_message = kwargs.pop('public_message')
        except KeyError:
            pass
        else:
            self._public_message = str(public_message)
        try:
            super(_ErrorWithPublicMessageMixin, self).__init__(*args, **kwargs)
        except TypeError:
            if kwargs:
                raise TypeError(
                    'illegal keyword arguments for {} constructor: {}'.format(
                        self.__class__.__name__,
                        ', '.join(sorted(map(repr, kwargs)))))
            else:
                raise

    @property
    def public_message(self):
        """The aforementioned property."""
        try:
            return self._public_message
        except AttributeError:
            # (in subclasses `default_public_message` can also be a @property)
            self._public_message = str(self.default_public_message)
            return self._public_message

    def __str__(self):
        return self.public_message

    def __repr__(self):
        return ('<{0.__class__.__name__}: args={0.args!r}; '
                'public_message={0.public_message!r}>'.format(self))


class _ErrorTreeMixin(object):

    """
    Mix-in for exception classes that carry an *error tree*.

    Each instance of such a class:

    * should be initialized with one argument being the error tree --
      a :class:`dict` that maps field names (or, for unknown fields,
      offending input keys) to: reason strings, nested error trees
      (nested single-object fields) or lists of ``{index: error tree}``
      dicts (nested collection fields);  the error tree of a
      top-level ``many=True`` call is such a list itself;

    * exposes that argument as the :attr:`errors` attribute (for
      possible later inspection).
    """

    def __init__(self, errors, **kwargs):
        self.errors = errors
        super(_ErrorTreeMixin, self).__init__(errors, **kwargs)



#
# Actual exception classes
#

class FieldValueError(_ErrorWithPublicMessageMixin, ValueError):

    """
    Intended to be raised by type implementations (their `load()`,
    `dump()` and `validate()` methods), field validators and
    `on_load`/`on_dump` callables.

    It is recommended to instantiate the exception specifying the
    `public_message` keyword argument -- its value becomes the *reason*
    string stored in the error tree for the concerned field.

    >>> exc = FieldValueError(public_message='invalid integer type')
    >>> exc.public_message
    'invalid integer type'
    >>> FieldValueError().public_message
    'is invalid'
    """

    default_public_message = 'is invalid'


class ParamSchemaError(_ErrorWithPublicMessageMixin, Exception):

    """
    The base class for all other exceptions raised by *paramschema*.

    >>> exc = ParamSchemaError('a', 'b')
    >>> exc.args
    ('a', 'b')
    >>> str(exc)
    'Internal error.'
    >>> str(ParamSchemaError('a', 'b', public_message='Spam.'))
    'Spam.'
    """


class DataError(_ErrorTreeMixin, ParamSchemaError):

    r"""
    The base class for exceptions raised when the processed data turned
    out to be invalid.

    The :attr:`errors` attribute contains the error tree (see:
    :class:`_ErrorTreeMixin`).  All *data* problems found in the input
    are reported together, in one error tree.

    This exception class provides :attr:`default_public_message` as a
    property whose value is a user-readable summary of the error tree.

    >>> exc = DataError({'age': 'invalid integer type',
    ...                  'address': {'city': 'is required'},
    ...                  'phones': [{1: {'number': 'is invalid'}}]})
    >>> print(exc.public_message)
    Invalid data (address.city: is required; age: invalid integer type; phones.1.number: is invalid).
    >>> DataError([{0: {'x': 'unknown field'}}]).public_message
    'Invalid data (0.x: unknown field).'
    """

    summary_msg_template = 'Invalid data ({}).'

    @property
    def default_public_message(self):
        """The aforementioned property."""
        return self.summary_msg_template.format(
            '; '.join('{}: {}'.format(path, ascii_str(reason))
                      for path, reason in sorted(self.iter_flattened())))

    def iter_flattened(self):
        """
        Yield (*<dotted path>*, *<reason>*) pairs -- one for each leaf of
        the error tree.
        """
        return self._iter_flattened(self.errors, ())

    @classmethod
    def _iter_flattened(cls, node, path):
        if isinstance(node, dict):
            for key, sub_node in node.items():
                yield from cls._iter_flattened(sub_node, path + (key,))
        elif isinstance(node, list):
            for sub_node in node:
                yield from cls._iter_flattened(sub_node, path)
        else:
            yield '.'.join(map(ascii_str, path)), node


class LoadError(DataError):
    """Raised by the `load` operation when the input data are invalid."""


class DumpError(DataError):
    """Raised by the `dump` operation when the input data are invalid."""


class ValidationError(DataError):
    """Raised by the `validate` operation when the input data are invalid."""


class SchemaDefinitionError(ParamSchemaError, ValueError):

    """
    Raised when a field or a schema cannot be built because of an
    invalid definition (that is, a programming error, not a data
    problem).

    >>> str(SchemaDefinitionError(public_message='validator must be a callable'))
    'validator must be a callable'
    """


class UnknownTypeError(SchemaDefinitionError):

    """
    Raised when a type tag cannot be resolved to a type implementation.

    >>> exc = UnknownTypeError('foo')
    >>> exc.type_tag
    'foo'
    >>> str(exc)
    'foo is not a valid type'
    """

    def __init__(self, type_tag, *args, **kwargs):
        self.type_tag = type_tag
        super(UnknownTypeError, self).__init__(type_tag, *args, **kwargs)

    @property
    def default_public_message(self):
        return '{} is not a valid type'.format(ascii_str(self.type_tag))


class UsageError(ParamSchemaError, TypeError):

    """
    The base class for exceptions raised when a top-level operation is
    called improperly (that is, the error is caused by the caller, not
    by the content of the data).
    """


class ManyRequiredError(UsageError):

    """
    Raised when a list is given as the top-level input but the `many`
    option is not set.
    """

    default_public_message = (
        'received a list with `many: false`, if a list '
        'is expected pass `many: true` on options')


class InvalidInputError(UsageError):

    """
    Raised when the top-level input is neither a mapping (or, for
    `dump`/`validate`, a record-like object) nor a list.
    """

    default_public_message = 'the top-level input must be a mapping or a list'


class NestingTooDeepError(ParamSchemaError, RecursionError):

    """
    Raised when the nesting depth of the processed data exceeds the
    `max_depth` option.
    """

    default_public_message = 'data nesting is too deep'
