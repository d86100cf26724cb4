# Copyright (c) 2013-2025 NASK. All rights reserved.

"""
.. note::

   Fields are the building blocks of schemas (see
   :mod:`paramschema.schema`).  A field describes one entry of the
   processed data: its internal name, its external key, its type and
   the rules of defaulting and validation.
"""


from typing import Optional

from pyramid.decorator import reify

from paramschema.class_helpers import is_seq
from paramschema.encoding_helpers import ascii_str
from paramschema.exceptions import SchemaDefinitionError
from paramschema.interfaces import (
    FieldHook,
    Validator,
)



class _NotSet(object):

    def __repr__(self):
        return 'NOTSET'

    def __bool__(self):
        return False

    def __reduce__(self):
        return 'NOTSET'


#: The marker of a default value that has not been set (so that
#: :obj:`None`, :obj:`False` etc. can be legal default values).
NOTSET = _NotSet()



#
# Composite types

class _Composite(object):

    """
    The base class for composite field types.

    The constructor takes the *inner* type specification:

    * a :class:`~paramschema.schema.Schema` instance,
    * a :class:`~paramschema.schema.Schema` subclass (instantiated
      lazily, without arguments),
    * a callable taking no arguments and returning one of the above
      (called lazily -- this makes it possible to define recursive
      schemas),
    * (only for :class:`Many`) a scalar type specification: a type
      tag, an object compliant with
      :class:`~paramschema.interfaces.Coercible` or another composite.

    The `inline` keyword argument should be true when the inner schema
    has been defined *inline* (as a part of the field definition; see
    :func:`paramschema.schema.compile_schema`).
    """

    accepts_scalar_inner = False

    def __init__(self, inner, inline=False):
        self.inner_spec = inner
        self.inline = inline

    def __repr__(self):
        return '{}({!r})'.format(self.__class__.__qualname__, self.inner_spec)

    @reify
    def inner(self):
        """
        The inner schema (or, for :class:`Many` with a scalar inner
        type, the inner type specification) -- resolved lazily.
        """
        from paramschema.schema import Schema
        inner = self.inner_spec
        if isinstance(inner, type) and issubclass(inner, Schema):
            return inner()
        if isinstance(inner, Schema) or self._is_scalar_spec(inner):
            return inner
        if callable(inner):
            resolved = inner()
            if isinstance(resolved, type) and issubclass(resolved, Schema):
                resolved = resolved()
            if isinstance(resolved, Schema):
                return resolved
        raise SchemaDefinitionError(public_message=(
            'not a valid inner type of {}: {}'.format(
                self.__class__.__qualname__,
                ascii_str(repr(inner)))))

    @property
    def inner_is_schema(self):
        from paramschema.schema import Schema
        return isinstance(self.inner, Schema)

    def _is_scalar_spec(self, inner):
        from paramschema.types import is_coercible
        return self.accepts_scalar_inner and (
            isinstance(inner, (str, _Composite)) or is_coercible(inner))


class Single(_Composite):

    """
    Composite type: a nested object (a mapping) described by the inner
    schema.
    """


class Many(_Composite):

    """
    Composite type: a list of nested objects described by the inner
    schema, or a list of values of the inner scalar type.
    """

    accepts_scalar_inner = True


#: The tags of composite types in the tuple notation
#: (e.g.: ``('has_many', AddressSchema)``, ``('array', 'integer')``).
COMPOSITE_TAGS = {
    'has_one': Single,
    'map': Single,
    'has_many': Many,
    'array': Many,
}


def composite_from_seq(type_spec, inline=False):
    """
    Make a composite type from its tuple notation.

    >>> composite_from_seq(('array', 'integer'))
    Many('integer')
    >>> composite_from_seq(('array', ('array', 'float')))
    Many(Many('float'))
    >>> composite_from_seq(('tree', 'integer'))     # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    paramschema.exceptions.SchemaDefinitionError: ...
    """
    if not (is_seq(type_spec) and len(type_spec) == 2
            and type_spec[0] in COMPOSITE_TAGS):
        raise SchemaDefinitionError(public_message=(
            'not a valid inner type, please use `(map, inner_type)` '
            'or `(array, inner_type)` for nested associations'))
    tag, inner = type_spec
    if is_seq(inner):
        inner = composite_from_seq(inner)
    return COMPOSITE_TAGS[tag](inner, inline=inline)



#
# The field class

class Field(object):

    """
    The field descriptor class.

    The constructor accepts the type specification as the (optional)
    sole positional argument, and the following keyword-only
    arguments -- each of them overriding the same-named class-level
    attribute (so fields can also be customized by subclassing):

    * `name` (default: :obj:`None`):
          The internal name.  Typically it does not need to be
          specified explicitly: it is set when the field is *bound* to a
          schema (see: :meth:`bound_to`).
    * `key` (default: :obj:`None`):
          The external key; if not specified, ``str(name)`` is used.
    * `type` (default: ``'string'``):
          A type tag (resolved with the schema's type registry), an
          object compliant with :class:`~paramschema.interfaces.Coercible`,
          a composite type (:class:`Single`/:class:`Many`), or a
          composite type in the tuple notation (see:
          :func:`composite_from_seq`).
    * `required` (default: :obj:`False`):
          Whether `load` and `validate` require the value to be present
          (never enforced by `dump`).
    * `default`, `load_default`, `dump_default` (default: :obj:`NOTSET`):
          The value substituted when the field is absent (or null); the
          `default` sets both the others and must not be combined with
          any of them.
    * `validator` (default: :obj:`None`):
          A callable taking the loaded value, or a ``(callable, args)``
          pair; it rejects the value by raising
          :exc:`~paramschema.exceptions.FieldValueError`, by returning
          an ``('error', reason)`` pair or by returning :obj:`False`;
          any other returned value is ignored (see:
          :func:`paramschema.validation.invoke_validator`).
    * `on_load`, `on_dump` (default: :obj:`None`):
          Callables taking the value and the whole input node; they
          replace the type-based processing of the field.
    * `virtual` (default: :obj:`False`):
          Whether the field should be skipped by `load` and `dump`.

    Unknown keyword arguments cause :exc:`~exceptions.TypeError`;
    invalid combinations of arguments cause
    :exc:`~paramschema.exceptions.SchemaDefinitionError`.

    >>> f = Field('integer', required=True)
    >>> f.type, f.required, f.name, f.key
    ('integer', True, None, None)
    >>> g = f.bound_to('age')
    >>> g.name, g.key, g.required
    ('age', 'age', True)
    >>> Field(default=1, load_default=2)    # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    paramschema.exceptions.SchemaDefinitionError: ...
    """

    name = None
    key = None
    type = 'string'
    required = False
    default = NOTSET
    load_default = NOTSET
    dump_default = NOTSET
    validator: Optional[Validator] = None
    on_load: Optional[FieldHook] = None
    on_dump: Optional[FieldHook] = None
    virtual = False

    def __init__(self, type=NOTSET, **kwargs):
        if type is not NOTSET:
            kwargs['type'] = type
        self._init_kwargs = kwargs
        self._set_per_instance_attrs(kwargs)
        self._check_and_adjust_attrs()

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
            if not hasattr(cls, attr_name) or attr_name.startswith('_'):
                raise TypeError(
                    '{}.__init__() got an unexpected keyword argument {!a}'
                    .format(cls.__qualname__, attr_name))
            setattr(self, attr_name, obj)

    def _check_and_adjust_attrs(self):
        if self.default is not NOTSET:
            if self.load_default is not NOTSET or self.dump_default is not NOTSET:
                raise SchemaDefinitionError(public_message=(
                    '`default` opts should not be used with '
                    '`load_default` or `dump_default`'))
            self.load_default = self.dump_default = self.default
        if is_seq(self.type):
            self.type = composite_from_seq(self.type)
        if self.name is not None:
            if self.name == '':
                raise SchemaDefinitionError(public_message=(
                    'a field name must not be empty'))
            if self.key is None:
                self.key = str(self.name)
        self._check_callables()
        if self.is_composite and self.type.inline:
            for attr_name in ('validator', 'on_load', 'on_dump'):
                if getattr(self, attr_name) is not None:
                    raise SchemaDefinitionError(public_message=(
                        '{} cannot be used on nested fields'.format(attr_name)))

    def _check_callables(self):
        validator = self.validator
        if validator is not None:
            if is_seq(validator):
                if len(validator) != 2 or not callable(validator[0]):
                    raise SchemaDefinitionError(public_message=(
                        'validator must be a callable or a (callable, args) pair'))
            elif not callable(validator):
                raise SchemaDefinitionError(public_message=(
                    'validator must be a callable or a (callable, args) pair'))
        for attr_name in ('on_load', 'on_dump'):
            hook = getattr(self, attr_name)
            if hook is not None and not callable(hook):
                raise SchemaDefinitionError(public_message=(
                    '{} must be a callable taking 2 arguments'.format(attr_name)))


    #
    # public interface

    @property
    def is_composite(self):
        return isinstance(self.type, _Composite)

    @property
    def has_load_default(self):
        return self.load_default is not NOTSET

    @property
    def has_dump_default(self):
        return self.dump_default is not NOTSET

    def bound_to(self, name):
        """
        Get a copy of the field, with the given internal name.

        An explicitly specified external key is kept; otherwise it
        is derived from `name`.
        """
        if self.name is not None and self.name != name:
            raise SchemaDefinitionError(public_message=(
                'field {} cannot be bound to the name {}'.format(
                    ascii_str(self.name),
                    ascii_str(name))))
        return self.__class__(**dict(self._init_kwargs, name=name))
