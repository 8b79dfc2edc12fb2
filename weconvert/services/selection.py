"""
Selection state behind the single-screen converter.

A ``SelectionState`` holds what the user picked: the active category, the
input and output unit names and the number to convert.  States are
immutable; every ``select_*`` helper returns a new state that keeps both
unit names inside the active category and the output unit distinct from
the input unit.

``recompute`` is the explicit recomputation step the front end calls after
each mutation.  It derives the unit-choice lists and the converted value
in one ``SelectionView``.
"""

import logging
import math
from dataclasses import dataclass, replace

from weconvert.config.constants import DEFAULT_CATEGORY, DEFAULT_INPUT_VALUE, STRICT_UNIT_LOOKUP
from weconvert.models.units import ConversionCategory, InvalidUnitSelection
from weconvert.services.category_registry import registry
from weconvert.utils.conversions import convert

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionState:
    category: ConversionCategory
    input_unit: str
    output_unit: str
    input_value: float = DEFAULT_INPUT_VALUE


@dataclass(frozen=True)
class SelectionView:
    state: SelectionState
    input_units: list[str]
    output_units: list[str]
    result: float


def input_units(state: SelectionState) -> list[str]:
    return registry.unit_names(state.category)


def output_units(state: SelectionState) -> list[str]:
    """The category's units minus the current input unit, order preserved."""
    return [name for name in input_units(state) if name != state.input_unit]


def default_selection(category=DEFAULT_CATEGORY, input_value: float = DEFAULT_INPUT_VALUE) -> SelectionState:
    """
    Start state for *category*: its first unit converted to its second.

    For Temperature that is Celsius → Fahrenheit.
    """
    category = ConversionCategory(category)
    names = registry.unit_names(category)
    return SelectionState(
        category=category,
        input_unit=names[0],
        output_unit=names[1],
        input_value=input_value,
    )


def _is_consistent(state: SelectionState) -> bool:
    names = registry.unit_names(state.category)
    return (
        state.input_unit in names
        and state.output_unit in names
        and state.input_unit != state.output_unit
    )


def select_category(state: SelectionState, category) -> SelectionState:
    """
    Switch to *category*, resetting both units when they do not belong to it.

    Raises:
        ValueError: *category* is not a known conversion category.
    """
    category = ConversionCategory(category)
    candidate = replace(state, category=category)
    if _is_consistent(candidate):
        return candidate
    logger.info("Category changed to %s, resetting unit selection", category.value)
    return default_selection(category, input_value=state.input_value)


def select_input_unit(state: SelectionState, name: str) -> SelectionState:
    """
    Pick a new input unit.

    When it collides with the current output unit, the output moves to the
    first unit still available.
    """
    unit = registry.lookup(state.category, name)
    new_state = replace(state, input_unit=unit.value)
    if new_state.output_unit == new_state.input_unit:
        new_state = replace(new_state, output_unit=output_units(new_state)[0])
    return new_state


def select_output_unit(state: SelectionState, name: str) -> SelectionState:
    """
    Pick a new output unit from the current output choices.

    Raises:
        InvalidUnitSelection: *name* is the input unit or not in the category.
    """
    if name not in output_units(state):
        logger.warning("Rejected output unit %r for %s", name, state.category.value)
        raise InvalidUnitSelection(
            f"{name!r} is not an available output unit for {state.category.value}",
            category=state.category,
            unit_name=name,
        )
    return replace(state, output_unit=name)


def set_input_value(state: SelectionState, value) -> SelectionState:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Input value must be finite, got {value}")
    return replace(state, input_value=value)


def parse_input_value(text: str) -> float:
    """
    Validate free-text numeric input.

    Raises:
        ValueError: *text* is empty, not a number, or not finite.
    """
    if text is None or not str(text).strip():
        raise ValueError("Enter a number to convert")
    try:
        value = float(str(text).strip())
    except ValueError:
        raise ValueError(f"{text!r} is not a number") from None
    if not math.isfinite(value):
        raise ValueError(f"{text!r} is not a finite number")
    return value


def converted_value(state: SelectionState, strict: bool = None) -> float:
    """
    Convert ``state.input_value`` from the input unit to the output unit.

    Args:
        state:  Current selection.
        strict: When True (default from ``STRICT_UNIT_LOOKUP``) a unit name
                outside the active category raises ``InvalidUnitSelection``.
                When False the unconverted input value is returned instead.
    """
    if strict is None:
        strict = STRICT_UNIT_LOOKUP
    try:
        from_unit = registry.lookup(state.category, state.input_unit)
        to_unit = registry.lookup(state.category, state.output_unit)
    except InvalidUnitSelection:
        if strict:
            raise
        logger.warning(
            "Unit lookup failed for %s/%s in %s; returning input unconverted",
            state.input_unit, state.output_unit, state.category.value,
        )
        return state.input_value
    return convert(state.input_value, from_unit, to_unit)


def recompute(state: SelectionState, strict: bool = None) -> SelectionView:
    return SelectionView(
        state=state,
        input_units=input_units(state),
        output_units=output_units(state),
        result=converted_value(state, strict=strict),
    )
