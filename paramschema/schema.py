# Copyright (c) 2013-2025 NASK. All rights reserved.

"""
.. note::

   A schema can be defined in one of the following ways:

   * declaratively -- by subclassing :class:`Schema` and declaring
     :class:`~paramschema.fields.Field` instances as class attributes;

   * programmatically -- by passing a sequence of (named) fields to
     the :class:`Schema` constructor;

   * from a data-driven description -- with :func:`compile_schema`.

   In each case the result is an immutable :class:`Schema` instance
   that can be used (also concurrently) by any number of `load`,
   `dump` and `validate` calls.

>>> class AddressSchema(Schema):
...     city = Field('string', required=True)
...     number = Field('integer')
...
>>> class UserSchema(Schema):
...     first_name = Field('string', key='firstName', required=True)
...     age = Field('integer')
...     addresses = Field(Many(AddressSchema))
...
>>> user_schema = UserSchema()
>>> user_schema.field_names
('first_name', 'age', 'addresses')
>>> user_schema.field_keys
('firstName', 'age', 'addresses')
>>> user_schema.load({'firstName': 'Ann', 'age': '32',
...                   'addresses': [{'city': 'Lublin', 'number': '7'}]})
{'first_name': 'Ann', 'age': 32, 'addresses': [{'city': 'Lublin', 'number': 7}]}
"""


import collections
import collections.abc as collections_abc

from pyramid.decorator import reify

from paramschema import engine
from paramschema.class_helpers import is_seq
from paramschema.encoding_helpers import ascii_str
from paramschema.exceptions import (
    FieldValueError,
    SchemaDefinitionError,
)
from paramschema.fields import (
    COMPOSITE_TAGS,
    Field,
    Many,
    Single,
    _Composite,
)
from paramschema.log_helpers import get_logger
from paramschema.types import default_registry


LOGGER = get_logger(__name__)


class Schema(object):

    """
    An ordered collection of fields; the unit of recursion of `load`,
    `dump` and `validate`.

    Constructor keyword arguments (all optional):

    * `fields`:
          A sequence of :class:`~paramschema.fields.Field` instances
          with names specified, or a mapping of names to
          :class:`~paramschema.fields.Field` instances.  They are added
          after the fields declared as class attributes.
    * `schema_name`:
          A label of the schema (used in messages and as the name of
          the default record type); by default: the class name.
    * `record_factory`:
          A callable taking the loaded data as keyword arguments and
          returning a record (used by `load` when the `struct` option
          is set); by default: a :func:`collections.namedtuple` type
          whose fields are all non-virtual fields of the schema (each
          of them defaulting to :obj:`None`).
    * `type_registry`:
          A :class:`~paramschema.types.TypeRegistry` instance used to
          resolve type tags; by default:
          :obj:`paramschema.types.default_registry`.

    Each of the last three can also be specified as a class attribute
    of a subclass.

    Field declarations are collected along the class's MRO (base
    classes first, declaration order preserved); a field redeclared in
    a subclass keeps its original position, and a field can be removed
    in a subclass by setting the attribute to :obj:`None`.

    All definition problems (duplicate names, unknown type tags,
    default values of a wrong type...) are detected when the instance
    is created, and reported by raising
    :exc:`~paramschema.exceptions.SchemaDefinitionError`.
    """

    schema_name = None
    record_factory = None
    type_registry = None

    def __init__(self, fields=None, schema_name=None, record_factory=None,
                 type_registry=None):
        if schema_name is not None:
            self.schema_name = schema_name
        if self.schema_name is None:
            self.schema_name = self.__class__.__name__
        if record_factory is not None:
            self.record_factory = record_factory
        if type_registry is not None:
            self.type_registry = type_registry
        if self.type_registry is None:
            self.type_registry = default_registry
        self._fields = tuple(self._iter_bound_fields(fields))
        self._name_to_field = {}
        self._key_to_field = {}
        self._name_to_type_impl = {}
        for field in self._fields:
            self._register_field(field)

    def __repr__(self):
        return '<{} {} fields={!r}>'.format(
            self.__class__.__qualname__,
            self.schema_name,
            self.field_names)


    #
    # the public lookup interface (used by the traversal engine)

    @property
    def fields(self):
        """The tuple of fields (in the order of declaration)."""
        return self._fields

    @reify
    def field_names(self):
        return tuple(field.name for field in self._fields)

    @reify
    def field_keys(self):
        return tuple(field.key for field in self._fields)

    @reify
    def known_input_keys(self):
        """
        A :class:`frozenset` of input keys that are not *unknown*
        (external keys, as well as internal names that are probed by
        `load` -- see :func:`paramschema.engine.load`).
        """
        return frozenset(self.field_keys).union(
            field.name for field in self._fields
            if field.key == str(field.name))

    def field_by_name(self, name):
        return self._name_to_field.get(name)

    def field_by_key(self, key):
        """Get the first field with the given external key (or `None`)."""
        return self._key_to_field.get(key)

    def resolve_type(self, type_spec):
        """
        Get the type implementation (a
        :class:`~paramschema.interfaces.Coercible`) for the given
        scalar type specification (a type tag or a type implementation).
        """
        return self.type_registry.resolve(type_spec)

    def get_field_type_impl(self, field):
        """Get the (cached) type implementation for a scalar field."""
        return self._name_to_type_impl[field.name]

    def make_record(self, data):
        """
        Materialize the loaded data (a :class:`dict` of field names to
        values) as a record.
        """
        factory = self.record_factory
        if factory is None:
            factory = self._default_record_class
        return factory(**data)


    #
    # the public processing interface (shortcuts)

    def load(self, data, options=None, **kwargs):
        """Shortcut for :func:`paramschema.engine.load`."""
        return engine.load(self, data, options, **kwargs)

    def dump(self, data, options=None, **kwargs):
        """Shortcut for :func:`paramschema.engine.dump`."""
        return engine.dump(self, data, options, **kwargs)

    def validate(self, data, options=None, **kwargs):
        """Shortcut for :func:`paramschema.engine.validate`."""
        return engine.validate(self, data, options, **kwargs)


    #
    # non-public helpers

    @reify
    def _default_record_class(self):
        field_names = [field.name for field in self._fields if not field.virtual]
        try:
            return collections.namedtuple(
                self.schema_name,
                field_names,
                defaults=[None] * len(field_names))
        except (TypeError, ValueError) as exc:
            raise SchemaDefinitionError(public_message=(
                'cannot make the default record type for the schema {} '
                '(consider specifying `record_factory`): {}'.format(
                    ascii_str(self.schema_name),
                    ascii_str(exc)))) from exc

    def _iter_bound_fields(self, fields):
        name_to_field = collections.OrderedDict()
        for klass in reversed(self.__class__.__mro__):
            for attr_name, obj in vars(klass).items():
                if isinstance(obj, Field):
                    name_to_field[attr_name] = obj
                elif obj is None and attr_name in name_to_field:
                    del name_to_field[attr_name]
        for name, field in name_to_field.items():
            yield field.bound_to(name)
        if fields is None:
            return
        if isinstance(fields, collections_abc.Mapping):
            for name, field in fields.items():
                yield field.bound_to(name)
        else:
            for field in fields:
                if field.name is None:
                    raise SchemaDefinitionError(public_message=(
                        'a field passed to the schema constructor '
                        'must have its name specified'))
                yield field

    def _register_field(self, field):
        if field.name in self._name_to_field:
            raise SchemaDefinitionError(public_message=(
                'duplicate field name {} in the schema {}'.format(
                    ascii_str(field.name),
                    ascii_str(self.schema_name))))
        self._name_to_field[field.name] = field
        self._key_to_field.setdefault(field.key, field)
        if field.is_composite:
            self._check_composite(field.type)
        else:
            type_impl = self.resolve_type(field.type)
            self._name_to_type_impl[field.name] = type_impl
            self._check_defaults(field, type_impl)

    def _check_composite(self, composite):
        if callable(composite.inner_spec) and not isinstance(composite.inner_spec, type):
            # (lazily resolved inner schema, e.g. a recursive one)
            return
        inner = composite.inner
        if isinstance(inner, _Composite):
            self._check_composite(inner)
        elif not composite.inner_is_schema:
            self.resolve_type(inner)

    def _check_defaults(self, field, type_impl):
        for attr_name in ('load_default', 'dump_default'):
            default = getattr(field, attr_name)
            if default is None or not getattr(field, 'has_' + attr_name):
                continue
            try:
                type_impl.validate(default)
            except FieldValueError as exc:
                raise SchemaDefinitionError(public_message=(
                    'the {} of the field {} is not valid: {}'.format(
                        attr_name,
                        ascii_str(field.name),
                        exc.public_message))) from exc



#
# Data-driven schema definitions

def compile_schema(description, schema_name=None, record_factory=None,
                   type_registry=None):
    """
    Make a :class:`Schema` from a data-driven description.

    Args:
        `description`:
            A mapping of field names to mappings of field options (the
            same as keyword arguments accepted by the
            :class:`~paramschema.fields.Field` constructor; `type`
            defaults to ``'string'``).

    Kwargs:
        The same as the :class:`Schema` constructor's ones.

    Composite types are specified as pairs: ``(<tag>, <inner>)``
    where the tag is one of: ``'has_one'``/``'map'`` (a nested object)
    or ``'has_many'``/``'array'`` (a list); `<inner>` is a nested
    description (compiled recursively -- then the inner schema is
    considered to be defined *inline*), a :class:`Schema` instance or
    subclass, or (only for lists) a type tag or another pair.

    >>> schema = compile_schema({
    ...     'name': {'type': 'string', 'required': True},
    ...     'numbers': {'type': ('array', 'integer')},
    ...     'address': {'type': ('map', {'city': {'required': True}})},
    ... })
    >>> schema.load({'name': 'X', 'numbers': ['1', 2], 'address': {'city': 'Y'}})
    {'name': 'X', 'numbers': [1, 2], 'address': {'city': 'Y'}}
    >>> compile_schema({'x': {'type': ('tree', 'integer')}})  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    paramschema.exceptions.SchemaDefinitionError: ...
    """
    if not isinstance(description, collections_abc.Mapping):
        raise SchemaDefinitionError(public_message=(
            'a schema description must be a mapping (got: {})'.format(
                ascii_str(repr(description)))))
    registry = type_registry if type_registry is not None else default_registry
    fields = []
    for name, field_opts in description.items():
        if not isinstance(field_opts, collections_abc.Mapping):
            raise SchemaDefinitionError(public_message=(
                'options of the field {} must be a mapping'.format(ascii_str(name))))
        field_opts = dict(field_opts)
        type_spec = field_opts.pop('type', 'string')
        if is_seq(type_spec):
            type_spec = _compile_composite(type_spec, registry)
        fields.append(Field(type_spec, name=name, **field_opts))
    schema = Schema(fields=fields,
                    schema_name=schema_name,
                    record_factory=record_factory,
                    type_registry=registry)
    LOGGER.debug('Compiled %a', schema)
    return schema


def _compile_composite(type_spec, registry):
    if not (is_seq(type_spec) and len(type_spec) == 2
            and type_spec[0] in COMPOSITE_TAGS):
        raise SchemaDefinitionError(public_message=(
            'not a valid inner type, please use `(map, inner_type)` '
            'or `(array, inner_type)` for nested associations'))
    tag, inner = type_spec
    composite_class = COMPOSITE_TAGS[tag]
    if isinstance(inner, collections_abc.Mapping):
        return composite_class(
            compile_schema(inner, type_registry=registry),
            inline=True)
    if is_seq(inner):
        inner = _compile_composite(inner, registry)
    return composite_class(inner)


__all__ = (
    'Field',
    'Many',
    'Schema',
    'Single',
    'compile_schema',
)
