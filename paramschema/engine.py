# Copyright (c) 2013-2025 NASK. All rights reserved.

"""
The traversal engine: the `load`, `dump` and `validate` operations.

Each of these operations walks the schema's fields against the input
tree.  Any *data* problems (invalid values, missing required fields,
unknown fields...) are collected -- never interrupting the processing
of other fields or list items -- into an *error tree* whose shape
mirrors the shape of the data:

* a :class:`dict` that maps field names (or, for unknown fields, the
  offending input keys) to reason strings or to nested error trees;

* for lists: a :class:`list` of ``{<index>: <reason or error tree>}``
  dicts -- only for failing items, in the ascending order of the
  (integer) indices.

If the error tree is not empty, the operation raises the respective
:exc:`~paramschema.exceptions.DataError` subclass, with the error tree
as its :attr:`errors` attribute.

*Usage* errors (a list given without the `many` option, an input
being neither a mapping nor a list, too deep nesting) are raised
immediately, as :exc:`~paramschema.exceptions.UsageError` or
:exc:`~paramschema.exceptions.NestingTooDeepError`.

The engine is stateless: all the state of a particular call is kept
in an ephemeral *traversal* object, so the same schema can be used by
concurrent calls.
"""


import collections.abc as collections_abc
import dataclasses
import types

from paramschema.exceptions import (
    DumpError,
    FieldValueError,
    InvalidInputError,
    LoadError,
    ManyRequiredError,
    NestingTooDeepError,
    ValidationError,
)
from paramschema.exclusion import (
    EXCLUDE,
    ExcludeWith,
    resolve_exclusion,
)
from paramschema.fields import (
    Many,
    Single,
)
from paramschema.log_helpers import get_logger
from paramschema.options import ConversionOptions
from paramschema.validation import invoke_validator


LOGGER = get_logger(__name__)


IS_REQUIRED_MSG = 'is required'
UNKNOWN_FIELD_MSG = 'unknown field'
KEY_COLLISION_MSG = 'field is present as atom and string keys'
INVALID_INNER_DATA_MSG = 'invalid inner data type'
INVALID_LIST_MSG = 'invalid list type'



#
# Public functions

def load(schema, data, options=None, **kwargs):
    """
    Convert external data into the internal representation.

    Args:
        `schema`:
            A :class:`~paramschema.schema.Schema` instance.
        `data`:
            A mapping (or, if the `many` option is set, a list of
            mappings) -- with keys being the external keys of fields.
        `options` (optional):
            A :class:`~paramschema.options.ConversionOptions` instance.

    Kwargs:
        Options (see: :class:`~paramschema.options.ConversionOptions`)
        -- overriding those from `options`.

    Returns:
        A :class:`dict` of field *names* to loaded values (or a record,
        if the `struct` option is set), or -- if the `many` option is
        set and a list is given -- a list of such objects.

    Raises:
        :exc:`~paramschema.exceptions.LoadError` (with the error tree as
        the :attr:`errors` attribute) if the data are not valid.

    For each field (in the order of declaration), its value is taken
    from the input mapping by the field's external key; if the key is
    equal to ``str(<field name>)`` but the name itself is not that
    string (e.g., is an integer), the input is also probed by the
    name, and the presence of both is an error.  Then:

    * an absent value (as well as :obj:`None` if the `ignore_nil`
      option is set, or ``""`` if the `ignore_empty` option is set)
      is replaced with the field's `load_default` if set; otherwise,
      if the field is required, ``"is required"`` is reported;
      otherwise the field is omitted;

    * :obj:`None` is replaced with the field's `load_default` if set;
      otherwise, if the field is required, ``"is required"`` is
      reported; otherwise :obj:`None` is kept;

    * any other value is processed by the field's `on_load` (if set),
      or by the field's type (recursively, for composite types) and
      then checked with the field's `validator` (if set).

    Virtual fields and fields excluded with the `exclude` option are
    skipped entirely.

    If the `unknown_field` option is ``'error'``, each top-level input
    key that is not a key of any field is reported, in the same error
    tree, as ``"unknown field"`` under that key; if the key is equal to
    the name of a field which has already failed, only the field's own
    error is kept.
    """
    return _Loader(_get_options(options, kwargs)).run(schema, data)


def dump(schema, data, options=None, **kwargs):
    """
    Convert internal data into the external representation.

    Like :func:`load` but: values are taken by field *names* (from a
    mapping or from attributes of a record-like object); the resulting
    mapping(s) are keyed by external keys; `dump_default` is used
    instead of `load_default`; required fields are not enforced,
    validators are not called, unknown keys are ignored.

    Raises:
        :exc:`~paramschema.exceptions.DumpError` (with the error tree as
        the :attr:`errors` attribute) if the data cannot be dumped.
    """
    return _Dumper(_get_options(options, kwargs)).run(schema, data)


def validate(schema, data, options=None, **kwargs):
    """
    Check that the given data are valid internal data.

    Like :func:`load` but: values are taken by field *names* (from a
    mapping or from attributes of a record-like object) and are never
    coerced -- only strictly checked with the types' `validate()`
    (then validators are called); an absent or :obj:`None` value of a
    required field is reported only if the field has no
    `dump_default`; `on_load`/`on_dump` are not called; unknown keys
    are ignored.

    Returns:
        :obj:`None`.

    Raises:
        :exc:`~paramschema.exceptions.ValidationError` (with the error
        tree as the :attr:`errors` attribute) if the data are not valid.
    """
    _Validator(_get_options(options, kwargs)).run(schema, data)


def _get_options(options, kwargs):
    if options is None:
        return ConversionOptions(**kwargs)
    if kwargs:
        return options.replace(**kwargs)
    return options



#
# Non-public helpers

class _MissingType(object):

    def __repr__(self):
        return '<MISSING>'


# (the value is absent)
_MISSING = _MissingType()

# (the field is to be omitted in the output)
_SKIP = _MissingType()


class _SubtreeErrors(Exception):

    # (internal: carries the error tree of a nested node or list)

    def __init__(self, errors):
        super(_SubtreeErrors, self).__init__(errors)
        self.errors = errors


def _is_record(obj):
    return (isinstance(obj, types.SimpleNamespace)
            or (isinstance(obj, tuple) and hasattr(type(obj), '_fields'))
            or (dataclasses.is_dataclass(obj) and not isinstance(obj, type)))


def _is_list(obj):
    return isinstance(obj, (list, tuple)) and not _is_record(obj)



#
# Traversals

class _BaseTraversal(object):

    """
    The base class of the (ephemeral) objects that perform the
    respective operations.  An instance is used only for one call.
    """

    error_class = None

    def __init__(self, options):
        self._options = options

    def run(self, schema, data):
        try:
            if _is_list(data):
                if not self._options.many:
                    LOGGER.debug('A list given for %a with `many` option unset', schema)
                    raise ManyRequiredError()
                result = self._process_top_list(schema, data)
            elif self._is_node(data):
                result = self._process_node(schema, data, self._options.exclude,
                                            depth=1, top_level=True)
            else:
                LOGGER.debug('Invalid top-level input for %a: %a', schema, type(data))
                raise InvalidInputError()
        except _SubtreeErrors as exc:
            raise self.error_class(exc.errors) from None
        return result


    #
    # tree walking

    def _process_top_list(self, schema, items):
        results = []
        errors = []
        for index, item in enumerate(items):
            try:
                if not self._is_node(item):
                    raise FieldValueError(public_message=INVALID_INNER_DATA_MSG)
                results.append(self._process_node(schema, item, self._options.exclude,
                                                  depth=1, top_level=True))
            except FieldValueError as exc:
                errors.append({index: exc.public_message})
            except _SubtreeErrors as exc:
                errors.append({index: exc.errors})
        if errors:
            raise _SubtreeErrors(errors)
        return results

    def _process_node(self, schema, node, exclude, depth, top_level=False):
        self._check_depth(depth)
        result = {}
        errors = {}
        for field in schema.fields:
            if field.virtual:
                continue
            decision = resolve_exclusion(field.name, exclude)
            if decision is EXCLUDE:
                continue
            sub_exclude = decision.sub_list if isinstance(decision, ExcludeWith) else []
            try:
                value = self._process_field(schema, field, node, sub_exclude, depth)
            except FieldValueError as exc:
                errors[field.name] = exc.public_message
            except _SubtreeErrors as exc:
                errors[field.name] = exc.errors
            else:
                if value is not _SKIP:
                    result[self._get_output_key(field)] = value
        if top_level:
            self._check_unknown_fields(schema, node, errors)
        if errors:
            raise _SubtreeErrors(errors)
        return self._make_node_result(schema, result)

    def _process_field(self, schema, field, node, sub_exclude, depth):
        value = self._fetch(field, node)
        if value is _MISSING or self._is_ignorable(value):
            return self._handle_missing(field)
        if value is None:
            return self._handle_null(field)
        return self._handle_value(schema, field, value, node, sub_exclude, depth)

    def _convert(self, schema, type_spec, value, sub_exclude, depth):
        if isinstance(type_spec, Single):
            if not self._is_node(value):
                raise FieldValueError(public_message=INVALID_INNER_DATA_MSG)
            return self._process_node(type_spec.inner, value, sub_exclude, depth + 1)
        if isinstance(type_spec, Many):
            if not _is_list(value):
                raise FieldValueError(public_message=INVALID_LIST_MSG)
            return self._process_list(schema, type_spec, value, sub_exclude, depth + 1)
        return self._apply_type(schema.resolve_type(type_spec), value)

    def _process_list(self, schema, many, items, sub_exclude, depth):
        self._check_depth(depth)
        inner_is_schema = many.inner_is_schema
        results = []
        errors = []
        for index, item in enumerate(items):
            try:
                if inner_is_schema:
                    if not self._is_node(item):
                        raise FieldValueError(public_message=INVALID_INNER_DATA_MSG)
                    value = self._process_node(many.inner, item, sub_exclude, depth + 1)
                else:
                    value = self._convert(schema, many.inner, item, sub_exclude, depth)
            except FieldValueError as exc:
                errors.append({index: exc.public_message})
            except _SubtreeErrors as exc:
                errors.append({index: exc.errors})
            else:
                results.append(value)
        if errors:
            raise _SubtreeErrors(errors)
        return results

    def _check_depth(self, depth):
        if depth > self._options.max_depth:
            LOGGER.debug('Nesting depth exceeded %a', self._options.max_depth)
            raise NestingTooDeepError()

    def _is_ignorable(self, value):
        if value is None:
            return self._options.ignore_nil
        if isinstance(value, str) and value == '':
            return self._options.ignore_empty
        return False


    #
    # operation-specific stuff (to be overridden in subclasses)

    def _is_node(self, value):
        return (isinstance(value, collections_abc.Mapping)
                or _is_record(value))

    def _fetch(self, field, node):
        # (by the internal name -- from a mapping or a record-like object)
        if isinstance(node, collections_abc.Mapping):
            return node.get(field.name, _MISSING)
        if isinstance(field.name, str):
            return getattr(node, field.name, _MISSING)
        return _MISSING

    def _handle_missing(self, field):
        raise NotImplementedError

    def _handle_null(self, field):
        raise NotImplementedError

    def _handle_value(self, schema, field, value, node, sub_exclude, depth):
        raise NotImplementedError

    def _apply_type(self, type_impl, value):
        raise NotImplementedError

    def _get_output_key(self, field):
        return field.name

    def _check_unknown_fields(self, schema, node, errors):
        pass

    def _make_node_result(self, schema, result):
        return result


class _Loader(_BaseTraversal):

    error_class = LoadError

    def _is_node(self, value):
        return isinstance(value, collections_abc.Mapping)

    def _fetch(self, field, node):
        value = node.get(field.key, _MISSING)
        if field.key == str(field.name) and field.name != field.key:
            value_by_name = node.get(field.name, _MISSING)
            if value is _MISSING:
                value = value_by_name
            elif value_by_name is not _MISSING:
                raise FieldValueError(public_message=KEY_COLLISION_MSG)
        return value

    def _handle_missing(self, field):
        if field.has_load_default:
            return field.load_default
        if field.required:
            raise FieldValueError(public_message=IS_REQUIRED_MSG)
        return _SKIP

    def _handle_null(self, field):
        if field.has_load_default:
            return field.load_default
        if field.required:
            raise FieldValueError(public_message=IS_REQUIRED_MSG)
        return None

    def _handle_value(self, schema, field, value, node, sub_exclude, depth):
        if field.on_load is not None:
            return field.on_load(value, node)
        if field.is_composite:
            loaded = self._convert(schema, field.type, value, sub_exclude, depth)
        else:
            loaded = self._apply_type(schema.get_field_type_impl(field), value)
        invoke_validator(field.validator, loaded)
        return loaded

    def _apply_type(self, type_impl, value):
        return type_impl.load(value)

    def _check_unknown_fields(self, schema, node, errors):
        if self._options.unknown_field != 'error':
            return
        known_keys = schema.known_input_keys
        for key in node:
            if key not in known_keys:
                errors.setdefault(key, UNKNOWN_FIELD_MSG)

    def _make_node_result(self, schema, result):
        if self._options.struct:
            return schema.make_record(result)
        return result


class _Dumper(_BaseTraversal):

    error_class = DumpError

    def _handle_missing(self, field):
        if field.has_dump_default:
            return field.dump_default
        return _SKIP

    def _handle_null(self, field):
        if field.has_dump_default:
            return field.dump_default
        return None

    def _handle_value(self, schema, field, value, node, sub_exclude, depth):
        if field.on_dump is not None:
            return field.on_dump(value, node)
        if field.is_composite:
            return self._convert(schema, field.type, value, sub_exclude, depth)
        return self._apply_type(schema.get_field_type_impl(field), value)

    def _apply_type(self, type_impl, value):
        return type_impl.dump(value)

    def _get_output_key(self, field):
        return field.key


class _Validator(_BaseTraversal):

    error_class = ValidationError

    def _handle_missing(self, field):
        if field.required and not field.has_dump_default:
            raise FieldValueError(public_message=IS_REQUIRED_MSG)
        return _SKIP

    _handle_null = _handle_missing

    def _handle_value(self, schema, field, value, node, sub_exclude, depth):
        if field.is_composite:
            self._convert(schema, field.type, value, sub_exclude, depth)
        else:
            self._apply_type(schema.get_field_type_impl(field), value)
        invoke_validator(field.validator, value)
        return _SKIP

    def _apply_type(self, type_impl, value):
        type_impl.validate(value)
        return value
