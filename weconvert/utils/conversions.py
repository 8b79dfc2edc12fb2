"""
Unit-conversion utilities.

All functions are pure (no side-effects) and operate on scalars or
pandas Series/arrays so they can be used in both single-value lookups
and vectorised column operations.
"""

import logging

import pandas as pd

from weconvert.models.units import InvalidUnitSelection
from weconvert.services.category_registry import registry

logger = logging.getLogger(__name__)


def convert(value, from_unit, to_unit):
    """
    Convert *value* from *from_unit* to *to_unit* through the base unit.

    Both units must be members of the same category enumeration; mixing
    categories raises ``InvalidUnitSelection``.
    """
    if type(from_unit) is not type(to_unit):
        raise InvalidUnitSelection(
            f"Cannot convert {from_unit.value} ({from_unit.category.value}) "
            f"to {to_unit.value} ({to_unit.category.value})",
            category=from_unit.category,
            unit_name=to_unit.value,
        )
    result = to_unit.from_base(from_unit.to_base(value))
    logger.debug("convert %s %s -> %s = %s", value, from_unit.value, to_unit.value, result)
    return result


def convert_by_name(value, category, from_name: str, to_name: str):
    """Resolve unit names within *category* and convert *value*."""
    return convert(
        value,
        registry.lookup(category, from_name),
        registry.lookup(category, to_name),
    )


def conversion_table(value: float, category, from_name: str) -> pd.DataFrame:
    """
    Express *value* (given in *from_name*) in every unit of *category*.

    Returns:
        DataFrame with columns ``unit`` and ``value``, one row per unit in
        declaration order.
    """
    from_unit = registry.lookup(category, from_name)
    units = list(registry.unit_enum(category))
    base = from_unit.to_base(value)
    return pd.DataFrame({
        "unit": [u.value for u in units],
        "value": [u.from_base(base) for u in units],
    })
