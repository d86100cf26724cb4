# Copyright (c) 2013-2025 NASK. All rights reserved.

"""
This submodule contains static typing stuff (defining several abstract
interfaces) used throughout the `paramschema` package (and, possibly,
also in any modules that make use of the stuff provided by the
package).

Note: generally, the static typing stuff does *not* affect the runtime
semantics, in particular, does *not* provide runtime type checks.

TL;DR: read the docs of `Coercible` and take a look at the definitions
of `Validator`, `FieldHook` and `ErrorTree`.

***

For some object 'x' and some abstract interface `Z`, the statements
"`x` is an (implicit) instance of `Z`", "`x` supports `Z`" and "`x` is
`Z`-compliant" are equivalent to each other.  Note that the class of
`x` does *not* have to be an *explicit* subclass of `Z`.
"""

from typing import (
    Any,
    Callable,
    Dict,
    Hashable,
    List,
    Mapping,
    Protocol,
    Tuple,
    Union,
    runtime_checkable,
)


#
# Interfaces/static types related to converted data
#

Value = Any

Name = Hashable
Key = Hashable

InputNode = Union[Mapping[Key, Value], Any]

Reason = str
ErrorTree = Dict[Key, Union[Reason, 'ErrorTree', List[Dict[int, Any]]]]


#
# Type implementations
#

@runtime_checkable
class Coercible(Protocol):

    """
    TL;DR: defines an abstract interface of a *type implementation*
    -- an object that provides the `load()`, `dump()` and `validate()`
    methods (see below).

    Built-in types (see `paramschema.types`) and custom user-defined
    types share this interface; the traversal engine makes no
    distinction between them.

    An important expectation is that a `Coercible` object is stateless
    and concurrency-safe (in particular, thread-safe): each call of any
    of its methods is independent of other calls.

    ***

    The methods:

    * `load(value)` -- coerce an *external-shaped* value into the
      *internal-shaped* one and return the latter; a value that is
      already internal-shaped should be returned unchanged (i.e.,
      loading is idempotent);

    * `dump(value)` -- the inverse direction; the given value is
      assumed to be already valid, so only lightweight conversion
      (e.g., stringification) is expected;

    * `validate(value)` -- strict membership check (no coercion);
      return `None` if the value is an internal-shaped value of the
      type.

    Each method signals a failure by raising
    `paramschema.exceptions.FieldValueError` whose `public_message`
    is the *reason* string (e.g., `"invalid integer type"`).  Any other
    exception is treated as a programming error and is propagated.
    """

    def load(self, __value: Value) -> Value:
        raise NotImplementedError

    def dump(self, __value: Value) -> Value:
        raise NotImplementedError

    def validate(self, __value: Value) -> None:
        raise NotImplementedError


#
# Field-level callables
#

# A validator is either a callable taking the value, or a pair:
# (a callable taking the value and the static arguments, the static
# arguments); it signals rejection by raising `FieldValueError`, by
# returning an `('error', reason)` pair or by returning `False`.
ValidatorCallable = Callable[..., Any]
Validator = Union[ValidatorCallable, Tuple[ValidatorCallable, Any]]

# `on_load`/`on_dump` callables take the field's value and the whole
# input node the value has been taken from.
FieldHook = Callable[[Value, InputNode], Value]
