import logging
from typing import Dict, Type

from weconvert.models.units import (
    ConversionCategory,
    InvalidUnitSelection,
    LengthUnit,
    TemperatureUnit,
    TimeUnit,
    VolumeUnit,
    unit_names,
)

logger = logging.getLogger(__name__)


class CategoryRegistry:
    def __init__(self):
        self._units: Dict[ConversionCategory, Type] = {}

    def register(self, category: ConversionCategory, unit_enum: Type):
        self._units[ConversionCategory(category)] = unit_enum

    def list_categories(self):
        return list(self._units.keys())

    def get(self, category):
        """Return the unit enumeration of *category*, or None if unknown."""
        try:
            return self._units.get(ConversionCategory(category))
        except ValueError:
            return None

    def unit_enum(self, category):
        """Like ``get`` but raises ``KeyError`` for an unknown category."""
        unit_enum = self.get(category)
        if unit_enum is None:
            raise KeyError(f"Unknown conversion category: {category!r}")
        return unit_enum

    def unit_names(self, category) -> list[str]:
        return unit_names(self.unit_enum(category))

    def base_unit(self, category):
        """The first declared unit of each category is its base unit."""
        return next(iter(self.unit_enum(category)))

    def lookup(self, category, name: str):
        """
        Resolve *name* to a unit member of *category*.

        Raises:
            KeyError: *category* is not registered.
            InvalidUnitSelection: *name* is not a unit of *category*.
        """
        unit_enum = self.unit_enum(category)
        try:
            return unit_enum(name)
        except ValueError:
            logger.warning("Unit %r is not a member of %s", name, ConversionCategory(category).value)
            raise InvalidUnitSelection(
                f"{name!r} is not a {ConversionCategory(category).value} unit",
                category=ConversionCategory(category),
                unit_name=name,
            ) from None


registry = CategoryRegistry()
registry.register(ConversionCategory.TEMPERATURE, TemperatureUnit)
registry.register(ConversionCategory.LENGTH, LengthUnit)
registry.register(ConversionCategory.TIME, TimeUnit)
registry.register(ConversionCategory.VOLUME, VolumeUnit)
