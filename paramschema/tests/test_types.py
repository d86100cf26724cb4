# Copyright (c) 2013-2025 NASK. All rights reserved.

import collections
import datetime
import decimal
import enum
import unittest
from unittest.mock import (
    patch,
    sentinel as sen,
)

from unittest_expander import (
    expand,
    foreach,
    param,
)

from paramschema.exceptions import (
    FieldValueError,
    UnknownTypeError,
)
from paramschema.interfaces import Coercible
from paramschema.tests._generic_helpers import (
    TestCaseMixin,
    case,
)
from paramschema.types import (
    BUILTIN_TYPES,
    AnyType,
    ArrayType,
    AtomType,
    BaseType,
    BooleanType,
    DateTimeType,
    DateType,
    DecimalType,
    EnumType,
    FloatType,
    IntegerType,
    ListType,
    MapType,
    NaiveDateTimeType,
    StringType,
    TimeType,
    TypeRegistry,
    default_registry,
    is_coercible,
    register_type,
)


UTC = datetime.timezone.utc


class Color(enum.Enum):
    RED = 'red'
    GREEN = 'green'


class PointType(object):

    # (a custom type not derived from BaseType)

    def load(self, value):
        try:
            x, y = value.split(',')
            return (int(x), int(y))
        except (AttributeError, ValueError):
            raise FieldValueError(public_message='invalid point type') from None

    def dump(self, value):
        return '{},{}'.format(*value)

    def validate(self, value):
        if not (isinstance(value, tuple) and len(value) == 2):
            raise FieldValueError(public_message='invalid point type')



#
# Some mix-ins and helpers
#

class TypeTestMixin(TestCaseMixin):

    CLASS = None              # must be set in concrete test case classes
    INIT_KWARGS_BASE = None   # can be set in concrete test case classes

    def cases__load(self):
        return ()

    def cases__dump(self):
        return ()

    def cases__validate(self):
        return ()

    def test__load(self):
        for init_kwargs, given, expected in self.cases__load():
            type_impl = self._make_type_impl(init_kwargs)
            if expected is FieldValueError:
                with self.assertRaises(FieldValueError) as cm:
                    type_impl.load(given)
                self.assertEqual(cm.exception.public_message, type_impl.error_msg)
            else:
                loaded = type_impl.load(given)
                self.assertEqualIncludingTypes(loaded, expected)

    def test__load_is_idempotent(self):
        for init_kwargs, given, expected in self.cases__load():
            if expected is FieldValueError:
                continue
            type_impl = self._make_type_impl(init_kwargs)
            loaded = type_impl.load(given)
            self.assertEqualIncludingTypes(type_impl.load(loaded), loaded)

    def test__dump(self):
        for init_kwargs, given, expected in self.cases__dump():
            type_impl = self._make_type_impl(init_kwargs)
            if expected is FieldValueError:
                with self.assertRaises(FieldValueError):
                    type_impl.dump(given)
            else:
                dumped = type_impl.dump(given)
                self.assertEqualIncludingTypes(dumped, expected)

    def test__validate(self):
        for init_kwargs, given, expected in self.cases__validate():
            type_impl = self._make_type_impl(init_kwargs)
            if expected is FieldValueError:
                with self.assertRaises(FieldValueError) as cm:
                    type_impl.validate(given)
                self.assertEqual(cm.exception.public_message, type_impl.error_msg)
            else:
                assert expected is None
                self.assertIsNone(type_impl.validate(given))

    def test__is_coercible(self):
        type_impl = self._make_type_impl({})
        self.assertTrue(is_coercible(type_impl))
        self.assertIsInstance(type_impl, Coercible)

    def _make_type_impl(self, init_kwargs):
        init_kwargs = dict(self.INIT_KWARGS_BASE or {}, **init_kwargs)
        return self.CLASS(**init_kwargs)



#
# Tests of generic type features
#

class TestBaseTypeInitKwargs(unittest.TestCase):

    class MyType(BaseType):
        tag = 'my'
        foo = sen.foo

    def test_default_error_msg(self):
        t = self.MyType()
        self.assertEqual(t.error_msg, 'invalid my type')
        self.assertIs(t.foo, sen.foo)

    def test_custom_attrs(self):
        t = self.MyType(error_msg='bad value', foo=sen.custom_foo)
        self.assertEqual(t.error_msg, 'bad value')
        self.assertIs(t.foo, sen.custom_foo)
        self.assertEqual(t._init_kwargs, dict(error_msg='bad value', foo=sen.custom_foo))

    def test_illegal_init_kwargs(self):
        with self.assertRaises(TypeError):
            self.MyType(bar=sen.bar)
        with self.assertRaises(TypeError):
            IntegerType(foo=sen.foo)

    def test_nothing_loadable_by_default(self):
        with self.assertRaises(FieldValueError) as cm:
            self.MyType().load('x')
        self.assertEqual(cm.exception.public_message, 'invalid my type')
        self.assertIsInstance(cm.exception.__cause__, TypeError)

    def test_repr(self):
        self.assertEqual(repr(IntegerType()), 'IntegerType()')
        self.assertEqual(repr(IntegerType(error_msg='x')), "IntegerType(error_msg='x')")



#
# Tests of particular types
#

class TestAnyType(TypeTestMixin, unittest.TestCase):

    CLASS = AnyType

    def cases__load(self):
        yield case(given=sen.whatever, expected=sen.whatever)
        yield case(given=[1, 'a'], expected=[1, 'a'])

    def cases__dump(self):
        yield case(given=sen.whatever, expected=sen.whatever)

    def cases__validate(self):
        yield case(given=None, expected=None)
        yield case(given=sen.whatever, expected=None)


class TestStringType(TypeTestMixin, unittest.TestCase):

    CLASS = StringType

    def cases__load(self):
        yield case(given='abc', expected='abc')
        yield case(given='', expected='')
        yield case(given='zażółć', expected='zażółć')
        yield case(given=42, expected='42')
        yield case(given=-1.5, expected='-1.5')
        yield case(given=decimal.Decimal('1.50'), expected='1.50')
        yield case(given=True, expected=FieldValueError)
        yield case(given=b'abc', expected=FieldValueError)
        yield case(given=['abc'], expected=FieldValueError)
        yield case(given={'a': 'b'}, expected=FieldValueError)

    def cases__dump(self):
        yield case(given='abc', expected='abc')
        yield case(given=7, expected='7')
        yield case(given=sen.something, expected=FieldValueError)

    def cases__validate(self):
        yield case(given='abc', expected=None)
        yield case(given='', expected=None)
        yield case(given=42, expected=FieldValueError)
        yield case(given=None, expected=FieldValueError)


class TestAtomType(TypeTestMixin, unittest.TestCase):

    CLASS = AtomType

    def cases__load(self):
        yield case(given='online', expected='online')
        yield case(given=Color.RED, expected='RED')
        yield case(given=1, expected=FieldValueError)
        yield case(given=None, expected=FieldValueError)

    def cases__dump(self):
        yield case(given='online', expected='online')
        yield case(given=Color.GREEN, expected='GREEN')
        yield case(given=1, expected=FieldValueError)

    def cases__validate(self):
        yield case(given='online', expected=None)
        yield case(given=Color.RED, expected=FieldValueError)


class TestIntegerType(TypeTestMixin, unittest.TestCase):

    CLASS = IntegerType

    def cases__load(self):
        yield case(given=17, expected=17)
        yield case(given=0, expected=0)
        yield case(given='17', expected=17)
        yield case(given='-17', expected=-17)
        yield case(given='+17', expected=17)
        yield case(given='0017', expected=17)
        yield case(given=10 ** 30, expected=10 ** 30)
        yield case(given='thirty two', expected=FieldValueError)
        yield case(given='1.0', expected=FieldValueError)
        yield case(given=' 17', expected=FieldValueError)
        yield case(given='0x11', expected=FieldValueError)
        yield case(given='', expected=FieldValueError)
        yield case(given=17.0, expected=FieldValueError)
        yield case(given=True, expected=FieldValueError)
        yield case(given=False, expected=FieldValueError)
        yield case(given=None, expected=FieldValueError)
        yield case(given=decimal.Decimal('17'), expected=FieldValueError)

    def cases__dump(self):
        yield case(given=17, expected=17)

    def cases__validate(self):
        yield case(given=17, expected=None)
        yield case(given=-17, expected=None)
        yield case(given='17', expected=FieldValueError)
        yield case(given=True, expected=FieldValueError)
        yield case(given=17.0, expected=FieldValueError)

    def test_custom_error_msg(self):
        with self.assertRaises(FieldValueError) as cm:
            IntegerType(error_msg='must be a whole number').load('x')
        self.assertEqual(cm.exception.public_message, 'must be a whole number')


class TestFloatType(TypeTestMixin, unittest.TestCase):

    CLASS = FloatType

    def cases__load(self):
        yield case(given=1.5, expected=1.5)
        yield case(given=3, expected=3.0)
        yield case(given=decimal.Decimal('2.5'), expected=2.5)
        yield case(given='1.5', expected=1.5)
        yield case(given='-.5', expected=-0.5)
        yield case(given='1.', expected=1.0)
        yield case(given='1.5e3', expected=1500.0)
        yield case(given='7', expected=7.0)
        yield case(given='nan', expected=FieldValueError)
        yield case(given='inf', expected=FieldValueError)
        yield case(given='1,5', expected=FieldValueError)
        yield case(given='', expected=FieldValueError)
        yield case(given=True, expected=FieldValueError)
        yield case(given=None, expected=FieldValueError)

    def cases__dump(self):
        yield case(given=1.5, expected=1.5)

    def cases__validate(self):
        yield case(given=1.5, expected=None)
        yield case(given=1, expected=FieldValueError)
        yield case(given='1.5', expected=FieldValueError)


class TestBooleanType(TypeTestMixin, unittest.TestCase):

    CLASS = BooleanType

    def cases__load(self):
        yield case(given=True, expected=True)
        yield case(given=False, expected=False)
        yield case(given=1, expected=True)
        yield case(given=0, expected=False)
        yield case(given='true', expected=True)
        yield case(given='TRUE', expected=True)
        yield case(given='False', expected=False)
        yield case(given='1', expected=True)
        yield case(given='0', expected=False)
        yield case(given=2, expected=FieldValueError)
        yield case(given='yes', expected=FieldValueError)
        yield case(given='', expected=FieldValueError)
        yield case(given=1.0, expected=FieldValueError)
        yield case(given=None, expected=FieldValueError)

    def cases__dump(self):
        yield case(given=True, expected=True)

    def cases__validate(self):
        yield case(given=False, expected=None)
        yield case(given=0, expected=FieldValueError)
        yield case(given='true', expected=FieldValueError)


class TestMapType(TypeTestMixin, unittest.TestCase):

    CLASS = MapType

    def cases__load(self):
        yield case(given={'a': 1}, expected={'a': 1})
        yield case(given={}, expected={})
        yield case(given=collections.OrderedDict([('a', 1)]), expected={'a': 1})
        yield case(given=collections.defaultdict(list, a=[1]), expected={'a': [1]})
        yield case(given=[('a', 1)], expected=FieldValueError)
        yield case(given='a', expected=FieldValueError)

    def cases__dump(self):
        yield case(given={'a': 1}, expected={'a': 1})

    def cases__validate(self):
        yield case(given={'a': 1}, expected=None)
        yield case(given=collections.OrderedDict(), expected=None)
        yield case(given=[], expected=FieldValueError)

    def test_loaded_dict_is_not_the_given_mapping(self):
        given = collections.OrderedDict([('a', 1)])
        loaded = MapType().load(given)
        self.assertIs(type(loaded), dict)
        self.assertIsNot(loaded, given)


class TestArrayType(TypeTestMixin, unittest.TestCase):

    CLASS = ArrayType

    def cases__load(self):
        yield case(given=[1, 'a'], expected=[1, 'a'])
        yield case(given=[], expected=[])
        yield case(given=(1, 'a'), expected=[1, 'a'])
        yield case(given='abc', expected=FieldValueError)
        yield case(given={'a': 1}, expected=FieldValueError)
        yield case(given={1, 2}, expected=FieldValueError)

    def cases__dump(self):
        yield case(given=[1, 'a'], expected=[1, 'a'])

    def cases__validate(self):
        yield case(given=[1], expected=None)
        yield case(given=(1,), expected=None)
        yield case(given='abc', expected=FieldValueError)


class TestListType(TestArrayType):

    CLASS = ListType

    def test_tag(self):
        self.assertEqual(ListType().error_msg, 'invalid list type')


class TestDateType(TypeTestMixin, unittest.TestCase):

    CLASS = DateType

    def cases__load(self):
        yield case(given=datetime.date(2020, 2, 29), expected=datetime.date(2020, 2, 29))
        yield case(given='2020-02-29', expected=datetime.date(2020, 2, 29))
        yield case(given=(2020, 2, 29), expected=datetime.date(2020, 2, 29))
        yield case(given='2019-02-29', expected=FieldValueError)
        yield case(given='2020-2-29', expected=FieldValueError)
        yield case(given='2020-02-29T10:00', expected=FieldValueError)
        yield case(given=(2020, 2), expected=FieldValueError)
        yield case(given=(2020, 13, 1), expected=FieldValueError)
        yield case(given=('2020', 2, 29), expected=FieldValueError)
        yield case(given=datetime.datetime(2020, 2, 29, 10), expected=FieldValueError)
        yield case(given=20200229, expected=FieldValueError)

    def cases__dump(self):
        yield case(given=datetime.date(2020, 2, 29), expected='2020-02-29')
        yield case(given='2020-02-29', expected='2020-02-29')
        yield case(given=20200229, expected=FieldValueError)

    def cases__validate(self):
        yield case(given=datetime.date(2020, 2, 29), expected=None)
        yield case(given=datetime.datetime(2020, 2, 29), expected=FieldValueError)
        yield case(given='2020-02-29', expected=FieldValueError)


class TestTimeType(TypeTestMixin, unittest.TestCase):

    CLASS = TimeType

    def cases__load(self):
        yield case(given=datetime.time(23, 50, 7), expected=datetime.time(23, 50, 7))
        yield case(given='23:50:07', expected=datetime.time(23, 50, 7))
        yield case(given='23:50', expected=datetime.time(23, 50))
        yield case(given='23:50:07.5', expected=datetime.time(23, 50, 7, 500000))
        yield case(given='23:50:07Z', expected=datetime.time(23, 50, 7, tzinfo=UTC))
        yield case(given=(23, 50, 7), expected=datetime.time(23, 50, 7))
        yield case(given='24:00', expected=FieldValueError)
        yield case(given='23', expected=FieldValueError)
        yield case(given=(23, 50), expected=FieldValueError)
        yield case(given=2350, expected=FieldValueError)

    def cases__dump(self):
        yield case(given=datetime.time(23, 50, 7), expected='23:50:07')
        yield case(given=datetime.time(23, 50, 7, 1000), expected='23:50:07.001000')

    def cases__validate(self):
        yield case(given=datetime.time(23, 50, 7), expected=None)
        yield case(given='23:50:07', expected=FieldValueError)


class TestDateTimeType(TypeTestMixin, unittest.TestCase):

    CLASS = DateTimeType

    def cases__load(self):
        yield case(
            given='2015-01-23T23:50:07+01:00',
            expected=datetime.datetime(2015, 1, 23, 22, 50, 7, tzinfo=UTC),
        )
        yield case(
            given='2015-01-23 23:50:07Z',
            expected=datetime.datetime(2015, 1, 23, 23, 50, 7, tzinfo=UTC),
        )
        yield case(
            given='2015-01-23T00:30-0130',
            expected=datetime.datetime(2015, 1, 23, 2, 0, tzinfo=UTC),
        )
        yield case(
            given=datetime.datetime(2015, 1, 23, 23, 50, 7, tzinfo=UTC),
            expected=datetime.datetime(2015, 1, 23, 23, 50, 7, tzinfo=UTC),
        )
        yield case(given='2015-01-23T23:50:07', expected=FieldValueError)
        yield case(given='2015-01-23', expected=FieldValueError)
        yield case(given='2015-01-23T23:50:07+01:60', expected=FieldValueError)
        yield case(given=datetime.datetime(2015, 1, 23, 23, 50, 7), expected=FieldValueError)
        yield case(given=1422053407, expected=FieldValueError)

    def cases__dump(self):
        yield case(
            given=datetime.datetime(2015, 1, 23, 22, 50, 7, tzinfo=UTC),
            expected='2015-01-23T22:50:07+00:00',
        )

    def cases__validate(self):
        yield case(given=datetime.datetime(2015, 1, 23, tzinfo=UTC), expected=None)
        yield case(given=datetime.datetime(2015, 1, 23), expected=FieldValueError)
        yield case(given=datetime.date(2015, 1, 23), expected=FieldValueError)

    def test_loaded_string_is_normalized_to_utc(self):
        loaded = DateTimeType().load('2015-01-23T23:50:07+01:00')
        self.assertIs(loaded.tzinfo, UTC)


class TestNaiveDateTimeType(TypeTestMixin, unittest.TestCase):

    CLASS = NaiveDateTimeType

    def cases__load(self):
        yield case(
            given=((2015, 1, 23), (23, 50, 7)),
            expected=datetime.datetime(2015, 1, 23, 23, 50, 7),
        )
        yield case(
            given='2015-01-23 23:50:07',
            expected=datetime.datetime(2015, 1, 23, 23, 50, 7),
        )
        yield case(
            given=datetime.datetime(2015, 1, 23, 23, 50, 7),
            expected=datetime.datetime(2015, 1, 23, 23, 50, 7),
        )
        yield case(given='2015-01-23T23:50:07Z', expected=FieldValueError)
        yield case(given=((2015, 1, 23), (23, 50)), expected=FieldValueError)
        yield case(given=(2015, 1, 23, 23, 50, 7), expected=FieldValueError)
        yield case(
            given=datetime.datetime(2015, 1, 23, 23, 50, 7, tzinfo=UTC),
            expected=FieldValueError,
        )

    def cases__dump(self):
        yield case(
            given=datetime.datetime(2015, 1, 23, 23, 50, 7),
            expected='2015-01-23T23:50:07',
        )

    def cases__validate(self):
        yield case(given=datetime.datetime(2015, 1, 23), expected=None)
        yield case(given=datetime.datetime(2015, 1, 23, tzinfo=UTC), expected=FieldValueError)


class TestDecimalType(TypeTestMixin, unittest.TestCase):

    CLASS = DecimalType

    def cases__load(self):
        yield case(given=decimal.Decimal('1.50'), expected=decimal.Decimal('1.50'))
        yield case(given='1.50', expected=decimal.Decimal('1.50'))
        yield case(given=' 1.50 ', expected=decimal.Decimal('1.50'))
        yield case(given=3, expected=decimal.Decimal('3'))
        yield case(given=0.1, expected=decimal.Decimal('0.1'))
        yield case(given='abc', expected=FieldValueError)
        yield case(given='NaN', expected=FieldValueError)
        yield case(given='Infinity', expected=FieldValueError)
        yield case(given=decimal.Decimal('NaN'), expected=FieldValueError)
        yield case(given=True, expected=FieldValueError)
        yield case(given=None, expected=FieldValueError)

    def cases__dump(self):
        yield case(given=decimal.Decimal('1.50'), expected='1.50')
        yield case(given=decimal.Decimal('-7'), expected='-7')

    def cases__validate(self):
        yield case(given=decimal.Decimal('1.50'), expected=None)
        yield case(given=decimal.Decimal('Infinity'), expected=FieldValueError)
        yield case(given=1.5, expected=FieldValueError)
        yield case(given='1.50', expected=FieldValueError)


class TestEnumType(TypeTestMixin, unittest.TestCase):

    CLASS = EnumType
    INIT_KWARGS_BASE = {'values': {'userOnline': 'online', 'userOffline': 'offline'}}

    def cases__load(self):
        yield case(given='userOnline', expected='online')
        yield case(given='userOffline', expected='offline')
        yield case(given='online', expected='online')
        yield case(given='away', expected=FieldValueError)
        yield case(given=['userOnline'], expected=FieldValueError)
        yield case(given=None, expected=FieldValueError)

    def cases__dump(self):
        yield case(given='online', expected='userOnline')
        yield case(given='offline', expected='userOffline')
        yield case(given='userOffline', expected=FieldValueError)
        yield case(given=[], expected=FieldValueError)

    def cases__validate(self):
        yield case(given='online', expected=None)
        yield case(given='userOnline', expected=FieldValueError)
        yield case(given={}, expected=FieldValueError)

    def test_error_msg(self):
        self.assertEqual(self._make_type_impl({}).error_msg, 'invalid enum type')

    def test_values_required(self):
        with self.assertRaises(TypeError):
            EnumType()

    def test_values_as_subclass_attr(self):
        class StatusType(EnumType):
            values = {'y': True, 'n': False}
        self.assertIs(StatusType().load('n'), False)
        self.assertEqual(StatusType().dump(True), 'y')

    def test_from_enum(self):
        color_type = EnumType.from_enum(Color)
        self.assertIs(color_type.load('red'), Color.RED)
        self.assertIs(color_type.load(Color.GREEN), Color.GREEN)
        self.assertEqual(color_type.dump(Color.RED), 'red')
        self.assertIsNone(color_type.validate(Color.RED))
        with self.assertRaises(FieldValueError):
            color_type.load('blue')
        with self.assertRaises(FieldValueError):
            color_type.validate('red')

    def test_from_enum_with_custom_error_msg(self):
        color_type = EnumType.from_enum(Color, error_msg='unknown color')
        with self.assertRaises(FieldValueError) as cm:
            color_type.load('blue')
        self.assertEqual(cm.exception.public_message, 'unknown color')



#
# Tests of the type registry
#

@expand
class TestTypeRegistry(unittest.TestCase):

    def setUp(self):
        self.registry = TypeRegistry()

    def test_empty(self):
        self.assertNotIn('integer', self.registry)
        self.assertEqual(list(self.registry), [])

    def test_register_and_get(self):
        integer_type = IntegerType()
        self.registry.register('integer', integer_type)
        self.assertIn('integer', self.registry)
        self.assertIs(self.registry.get('integer'), integer_type)

    def test_register_class_instantiates_it(self):
        self.registry.register('point', PointType)
        point_type = self.registry.get('point')
        self.assertIsInstance(point_type, PointType)
        self.assertEqual(point_type.load('1,2'), (1, 2))

    def test_register_duplicate(self):
        self.registry.register('integer', IntegerType())
        with self.assertRaises(ValueError):
            self.registry.register('integer', FloatType())
        self.assertIsInstance(self.registry.get('integer'), IntegerType)

    def test_register_replace(self):
        self.registry.register('integer', IntegerType())
        float_type = FloatType()
        with self.assertLogs('paramschema.types', 'WARNING'):
            self.registry.register('integer', float_type, replace=True)
        self.assertIs(self.registry.get('integer'), float_type)

    @foreach(
        param(tag='', type_impl=IntegerType()),
        param(tag=42, type_impl=IntegerType()),
        param(tag='x', type_impl=sen.not_coercible),
        param(tag='x', type_impl=int),
    )
    def test_register_illegal(self, tag, type_impl):
        with self.assertRaises(TypeError):
            self.registry.register(tag, type_impl)
        self.assertEqual(list(self.registry), [])

    @foreach([
        'no-such-type',
        'Integer',
        '',
    ])
    def test_get_unknown(self, tag):
        with self.assertRaises(UnknownTypeError) as cm:
            default_registry.get(tag)
        self.assertEqual(str(cm.exception), '{} is not a valid type'.format(tag))
        self.assertEqual(cm.exception.type_tag, tag)

    def test_get_unhashable(self):
        with self.assertRaises(UnknownTypeError):
            default_registry.get(['integer'])

    def test_resolve(self):
        point_type = PointType()
        self.assertIsInstance(default_registry.resolve('integer'), IntegerType)
        self.assertIs(default_registry.resolve(point_type), point_type)
        with self.assertRaises(UnknownTypeError) as cm:
            default_registry.resolve(42)
        self.assertEqual(str(cm.exception), '42 is not a valid type')

    @foreach(
        param(obj=PointType(), expected=True),
        param(obj=IntegerType(), expected=True),
        param(obj='integer', expected=False),
        param(obj=sen.not_coercible, expected=False),
        param(obj=collections.namedtuple('LoadOnly', 'load')(load=str), expected=False),
    )
    def test_is_coercible(self, obj, expected):
        self.assertIs(is_coercible(obj), expected)
        self.assertIs(isinstance(obj, Coercible), expected)

    def test_init_with_mapping(self):
        registry = TypeRegistry({'int': IntegerType, 'point': PointType()})
        self.assertEqual(sorted(registry), ['int', 'point'])
        self.assertIsInstance(registry.get('int'), IntegerType)

    def test_copy_is_independent(self):
        self.registry.register('integer', IntegerType())
        registry_copy = self.registry.copy()
        registry_copy.register('point', PointType())
        self.assertIn('point', registry_copy)
        self.assertNotIn('point', self.registry)
        self.assertIs(registry_copy.get('integer'), self.registry.get('integer'))

    @foreach(BUILTIN_TYPES)
    def test_default_registry_contains_builtin_types(self, type_class):
        self.assertIsInstance(default_registry.get(type_class.tag), type_class)

    def test_register_type_uses_default_registry(self):
        registry = default_registry.copy()
        with patch('paramschema.types.default_registry', registry):
            register_type('point', PointType)
        self.assertIsInstance(registry.get('point'), PointType)
        self.assertNotIn('point', default_registry)


if __name__ == '__main__':
    unittest.main()
