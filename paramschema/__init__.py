# Copyright (c) 2013-2025 NASK. All rights reserved.

"""
*paramschema* -- a schema-driven library that converts loosely-typed
external data (typically decoded from JSON) into typed internal data
(`load`), internal data back into the external representation
(`dump`), and strictly checks internal data (`validate`) -- reporting
all problems at once, as an error tree that mirrors the data's shape.
"""

from paramschema.engine import (
    dump,
    load,
    validate,
)
from paramschema.exceptions import (
    DataError,
    DumpError,
    FieldValueError,
    LoadError,
    ParamSchemaError,
    SchemaDefinitionError,
    UnknownTypeError,
    UsageError,
    ValidationError,
)
from paramschema.fields import (
    NOTSET,
    Field,
    Many,
    Single,
)
from paramschema.options import ConversionOptions
from paramschema.schema import (
    Schema,
    compile_schema,
)
from paramschema.types import (
    BaseType,
    EnumType,
    TypeRegistry,
    default_registry,
    register_type,
)
