import itertools
import math
import unittest

from weconvert.models.units import (
    ConversionCategory,
    InvalidUnitSelection,
    LengthUnit,
    TemperatureUnit,
    TimeUnit,
    VolumeUnit,
)
from weconvert.services.category_registry import CategoryRegistry, registry
from weconvert.utils.conversions import conversion_table, convert, convert_by_name

ALL_UNIT_ENUMS = (TemperatureUnit, LengthUnit, TimeUnit, VolumeUnit)
SAMPLE_VALUES = (-40.0, 0.0, 1.0, 37.5, 1234.5678)


class TestConvert(unittest.TestCase):
    """Known conversions."""

    def test_celsius_to_fahrenheit(self):
        self.assertAlmostEqual(convert(0, TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT), 32)
        self.assertAlmostEqual(convert(100, TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT), 212)

    def test_fahrenheit_to_kelvin(self):
        self.assertAlmostEqual(convert(32, TemperatureUnit.FAHRENHEIT, TemperatureUnit.KELVIN), 273.15)

    def test_kilometer_to_meter(self):
        self.assertEqual(convert(1, LengthUnit.KILOMETER, LengthUnit.METER), 1000)

    def test_mile_to_feet(self):
        self.assertAlmostEqual(convert(1, LengthUnit.MILE, LengthUnit.FEET), 1609.34 / 0.3048)
        self.assertAlmostEqual(convert(1, LengthUnit.MILE, LengthUnit.FEET), 5279.9869, places=3)

    def test_minute_to_second(self):
        self.assertEqual(convert(60, TimeUnit.MINUTE, TimeUnit.SECOND), 3600)

    def test_gallon_to_milliliter(self):
        self.assertEqual(convert(1, VolumeUnit.GALLON, VolumeUnit.MILLILITER), 3785.41)

    def test_mixed_categories_rejected(self):
        with self.assertRaises(InvalidUnitSelection):
            convert(1, LengthUnit.METER, TimeUnit.SECOND)


class TestConvertProperties(unittest.TestCase):
    """Identity and round-trip for every unit of every category."""

    def test_identity(self):
        for unit_enum in ALL_UNIT_ENUMS:
            for unit, value in itertools.product(unit_enum, SAMPLE_VALUES):
                with self.subTest(unit=unit.value, value=value):
                    self.assertTrue(math.isclose(convert(value, unit, unit), value, rel_tol=1e-9, abs_tol=1e-9))

    def test_round_trip(self):
        for unit_enum in ALL_UNIT_ENUMS:
            for a, b in itertools.permutations(unit_enum, 2):
                for value in SAMPLE_VALUES:
                    with self.subTest(a=a.value, b=b.value, value=value):
                        back = convert(convert(value, a, b), b, a)
                        self.assertTrue(math.isclose(back, value, rel_tol=1e-9, abs_tol=1e-9))


class TestConvertByName(unittest.TestCase):

    def test_resolves_names(self):
        self.assertAlmostEqual(convert_by_name(100, "Temperature", "Celsius", "Fahrenheit"), 212)
        self.assertEqual(convert_by_name(2, ConversionCategory.TIME, "Hour", "Minute"), 120)

    def test_unit_outside_category(self):
        with self.assertRaises(InvalidUnitSelection) as ctx:
            convert_by_name(1, "Length", "Celsius", "Meter")
        self.assertEqual(ctx.exception.unit_name, "Celsius")
        self.assertIs(ctx.exception.category, ConversionCategory.LENGTH)

    def test_unknown_category(self):
        with self.assertRaises(KeyError):
            convert_by_name(1, "Mass", "Gram", "Kilogram")


class TestConversionTable(unittest.TestCase):

    def test_every_unit_in_order(self):
        df = conversion_table(1, "Volume", "Liter")
        self.assertEqual(list(df.columns), ["unit", "value"])
        self.assertEqual(list(df["unit"]), ["Milliliter", "Liter", "Cup", "Pint", "Gallon"])
        self.assertEqual(df["value"][0], 1000)
        self.assertAlmostEqual(df["value"][1], 1)
        self.assertAlmostEqual(df["value"][4], 1000 / 3785.41)

    def test_invalid_unit(self):
        with self.assertRaises(InvalidUnitSelection):
            conversion_table(1, "Time", "Meter")


class TestCategoryRegistry(unittest.TestCase):

    def test_all_categories_registered(self):
        self.assertEqual(registry.list_categories(), list(ConversionCategory))

    def test_base_units(self):
        self.assertIs(registry.base_unit("Temperature"), TemperatureUnit.CELSIUS)
        self.assertIs(registry.base_unit("Length"), LengthUnit.METER)
        self.assertIs(registry.base_unit("Time"), TimeUnit.SECOND)
        self.assertIs(registry.base_unit("Volume"), VolumeUnit.MILLILITER)

    def test_get_unknown_category(self):
        self.assertIsNone(registry.get("Mass"))
        self.assertIsNone(CategoryRegistry().get("Length"))

    def test_lookup(self):
        self.assertIs(registry.lookup("Length", "Yard"), LengthUnit.YARD)
        with self.assertRaises(InvalidUnitSelection):
            registry.lookup("Length", "yard")


if __name__ == '__main__':
    unittest.main()
