"""
Central configuration and constants.

All conversion factors, defaults, and environment-driven values live here
so every other module imports from a single source of truth.
"""

import os

# ── Application ───────────────────────────────────────────────────────────────
APP_TITLE: str = "WeConvert"
APP_VERSION: str = "1.0.0"

# ── Environment ───────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("WECONVERT_LOG_LEVEL", "INFO").upper()

# When False, a unit name that does not belong to the active category yields
# the unconverted input value instead of raising InvalidUnitSelection.
STRICT_UNIT_LOOKUP: bool = os.getenv("WECONVERT_STRICT_UNIT_LOOKUP", "true").strip().lower() not in (
    "0", "false", "no", "off",
)

# ── Selection defaults ────────────────────────────────────────────────────────
DEFAULT_CATEGORY: str = "Temperature"
DEFAULT_INPUT_VALUE: float = 0.0

# ── Presentation ──────────────────────────────────────────────────────────────
RESULT_DISPLAY_DIGITS: int = 6

# ── Conversion factors (unit → base unit, multiplicative) ─────────────────────
# Temperature is affine and is handled directly in weconvert.models.units.
LENGTH_TO_METER: dict[str, float] = {
    "Meter":     1.0,
    "KiloMeter": 1000.0,
    "Feet":      0.3048,
    "Yard":      0.9144,
    "Mile":      1609.34,
}

TIME_TO_SECOND: dict[str, float] = {
    "Second": 1.0,
    "Minute": 60.0,
    "Hour":   3600.0,
    "Day":    86400.0,
}

VOLUME_TO_MILLILITER: dict[str, float] = {
    "Milliliter": 1.0,
    "Liter":      1000.0,
    "Cup":        236.588,
    "Pint":       473.176,
    "Gallon":     3785.41,
}

# ── Temperature offsets ───────────────────────────────────────────────────────
FAHRENHEIT_OFFSET: float = 32.0
KELVIN_OFFSET: float = 273.15
