"""
Unit enumerations for every conversion category.

Each category is a closed ``Enum`` whose members are the units the user can
pick.  Every member converts a value to the category's base unit
(``to_base``) and back again (``from_base``); ``from_base`` is the exact
algebraic inverse of ``to_base``.  No rounding is applied here.

The formulas work element-wise, so a member can be applied to a scalar, a
``numpy`` array or a ``pandas.Series`` alike.

Base units
----------
- Temperature: Celsius
- Length     : Meter
- Time       : Second
- Volume     : Milliliter
"""

from enum import Enum

from weconvert.config.constants import (
    FAHRENHEIT_OFFSET,
    KELVIN_OFFSET,
    LENGTH_TO_METER,
    TIME_TO_SECOND,
    VOLUME_TO_MILLILITER,
)


class InvalidUnitSelection(ValueError):
    """A unit name or unit pair is inconsistent with the selected category."""

    def __init__(self, message: str, category=None, unit_name=None):
        super().__init__(message)
        self.category = category
        self.unit_name = unit_name


class ConversionCategory(str, Enum):
    TEMPERATURE = "Temperature"
    LENGTH = "Length"
    TIME = "Time"
    VOLUME = "Volume"


# ── Temperature ────────────────────────────────────────────────────────────────

class TemperatureUnit(str, Enum):
    CELSIUS = "Celsius"
    FAHRENHEIT = "Fahrenheit"
    KELVIN = "Kelvin"

    @property
    def category(self) -> ConversionCategory:
        return ConversionCategory.TEMPERATURE

    def to_base(self, value):
        """Convert *value* expressed in this unit to degrees Celsius."""
        if self is TemperatureUnit.FAHRENHEIT:
            return (value - FAHRENHEIT_OFFSET) * (5.0 / 9.0)
        if self is TemperatureUnit.KELVIN:
            return value - KELVIN_OFFSET
        return value

    def from_base(self, value):
        """Convert *value* in degrees Celsius to this unit."""
        if self is TemperatureUnit.FAHRENHEIT:
            return (value * (9.0 / 5.0)) + FAHRENHEIT_OFFSET
        if self is TemperatureUnit.KELVIN:
            return value + KELVIN_OFFSET
        return value


# ── Scaled categories ──────────────────────────────────────────────────────────
# Length, time and volume differ from their base unit only by a factor, which
# is looked up by unit name in the constants tables.

class LengthUnit(str, Enum):
    METER = "Meter"
    KILOMETER = "KiloMeter"
    FEET = "Feet"
    YARD = "Yard"
    MILE = "Mile"

    @property
    def category(self) -> ConversionCategory:
        return ConversionCategory.LENGTH

    def to_base(self, value):
        return value * LENGTH_TO_METER[self.value]

    def from_base(self, value):
        return value / LENGTH_TO_METER[self.value]


class TimeUnit(str, Enum):
    SECOND = "Second"
    MINUTE = "Minute"
    HOUR = "Hour"
    DAY = "Day"

    @property
    def category(self) -> ConversionCategory:
        return ConversionCategory.TIME

    def to_base(self, value):
        return value * TIME_TO_SECOND[self.value]

    def from_base(self, value):
        return value / TIME_TO_SECOND[self.value]


class VolumeUnit(str, Enum):
    MILLILITER = "Milliliter"
    LITER = "Liter"
    CUP = "Cup"
    PINT = "Pint"
    GALLON = "Gallon"

    @property
    def category(self) -> ConversionCategory:
        return ConversionCategory.VOLUME

    def to_base(self, value):
        return value * VOLUME_TO_MILLILITER[self.value]

    def from_base(self, value):
        return value / VOLUME_TO_MILLILITER[self.value]


def unit_names(unit_enum) -> list[str]:
    """Display names of *unit_enum*'s members in declaration order."""
    return [member.value for member in unit_enum]
