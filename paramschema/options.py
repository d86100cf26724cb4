# Copyright (c) 2013-2025 NASK. All rights reserved.

from paramschema.class_helpers import (
    attr_repr,
    is_seq,
)
from paramschema.encoding_helpers import (
    ascii_str,
    str_to_bool,
)


class ConversionOptions(object):

    """
    The options of a `load`/`dump`/`validate` call.

    Constructor keyword arguments (each of them overriding the
    same-named class-level attribute, so that defaults can also be
    changed by subclassing):

    * `struct` (default: :obj:`False`):
          Whether the result of `load` should be materialized as a
          record (see: :attr:`paramschema.schema.Schema.record_factory`).
    * `unknown_field` (default: ``'exclude'``):
          ``'exclude'`` -- unknown top-level input keys are silently
          dropped by `load`; ``'error'`` -- each of them is reported as
          ``"unknown field"``.
    * `exclude` (default: empty):
          The exclusion list (see: :mod:`paramschema.exclusion`).
    * `ignore_nil` (default: :obj:`False`):
          Whether a value being :obj:`None` is to be treated as absent.
    * `ignore_empty` (default: :obj:`False`):
          Whether a value being an empty string is to be treated as
          absent.
    * `many` (default: :obj:`False`):
          Whether the top-level input is a list (of items conforming to
          the schema).
    * `max_depth` (default: 100):
          The maximum nesting depth of processed data.

    >>> opts = ConversionOptions(many=True)
    >>> opts.many, opts.struct, opts.unknown_field
    (True, False, 'exclude')
    >>> ConversionOptions(unknown_field='raise')   # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: ...
    >>> ConversionOptions(bogus=True)              # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    TypeError: ...
    """

    struct = False
    unknown_field = 'exclude'
    exclude = ()
    ignore_nil = False
    ignore_empty = False
    many = False
    max_depth = 100

    UNKNOWN_FIELD_POLICIES = ('exclude', 'error')
    OPTION_NAMES = (
        'struct',
        'unknown_field',
        'exclude',
        'ignore_nil',
        'ignore_empty',
        'many',
        'max_depth',
    )

    __repr__ = attr_repr(*OPTION_NAMES)

    def __init__(self, **kwargs):
        cls = self.__class__
        for opt_name, value in kwargs.items():
            if opt_name not in self.OPTION_NAMES:
                raise TypeError(
                    '{}.__init__() got an unexpected keyword argument {!a}'
                    .format(cls.__qualname__, opt_name))
            setattr(self, opt_name, value)
        self._check_values()

    def _check_values(self):
        if self.unknown_field not in self.UNKNOWN_FIELD_POLICIES:
            raise ValueError(
                'unknown_field should be one of: {} (got: {!a})'.format(
                    ', '.join(map(repr, self.UNKNOWN_FIELD_POLICIES)),
                    self.unknown_field))
        if not is_seq(self.exclude):
            raise ValueError(
                'exclude should be a list or tuple (got: {!a})'.format(self.exclude))
        if not isinstance(self.max_depth, int) or self.max_depth < 1:
            raise ValueError(
                'max_depth should be a positive integer (got: {!a})'.format(self.max_depth))

    @classmethod
    def from_config_section(cls, config_section, **kwargs):
        """
        Make an instance from a mapping of option names to strings (for
        example, a section of an INI-like configuration file, as read
        with :mod:`configparser`).

        Flags are converted with
        :func:`paramschema.encoding_helpers.str_to_bool`, `exclude` is
        a comma-separated list of bare names, `max_depth` is converted
        with :func:`int`.  Unrecognized option names cause
        :exc:`~exceptions.TypeError`, unconvertible values cause
        :exc:`~exceptions.ValueError`.  Any keyword arguments override
        the values from `config_section`.

        >>> opts = ConversionOptions.from_config_section({
        ...     'unknown_field': 'error',
        ...     'ignore_nil': 'yes',
        ...     'exclude': 'password, token',
        ...     'max_depth': '20',
        ... })
        >>> opts.unknown_field, opts.ignore_nil, opts.exclude, opts.max_depth
        ('error', True, ['password', 'token'], 20)
        """
        converted = {}
        for opt_name, raw_value in config_section.items():
            converter = cls._get_config_value_converter(opt_name)
            try:
                converted[opt_name] = converter(raw_value)
            except ValueError as exc:
                raise ValueError('config option {!a}: {}'.format(
                    opt_name, ascii_str(exc))) from exc
        converted.update(kwargs)
        return cls(**converted)

    @classmethod
    def _get_config_value_converter(cls, opt_name):
        if opt_name == 'exclude':
            return _parse_name_list
        if opt_name == 'max_depth':
            return int
        if opt_name == 'unknown_field':
            return str.strip
        if opt_name in cls.OPTION_NAMES:
            return str_to_bool
        raise TypeError('unknown config option: {!a}'.format(opt_name))

    def as_dict(self):
        return {opt_name: getattr(self, opt_name)
                for opt_name in self.OPTION_NAMES}

    def replace(self, **kwargs):
        """Get a copy of the options, with the given options changed."""
        return self.__class__(**dict(self.as_dict(), **kwargs))


def _parse_name_list(s):
    return [name.strip() for name in s.split(',') if name.strip()]
