"""Input predicates applied to raw records before they reach the domain.

Every function here is a gate: it answers ``True``/``False`` (or returns a
neutral value such as ``0`` or ``""``) and never raises for malformed input.
"""

import math
import re
from collections.abc import Mapping
from datetime import datetime

MACRO_FIELDS = ("calories", "protein", "carbs", "fats")

_DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_WHITESPACE_RUN = re.compile(r"\s+")


def is_valid_string(value: object) -> bool:
    """Return True for text that is not blank after trimming."""
    return isinstance(value, str) and len(value.strip()) > 0


def is_valid_number(value: object, min_value: float = 0) -> bool:
    """Return True for a real number (not NaN, not bool) >= ``min_value``."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    return value >= min_value


def is_valid_integer(value: object) -> bool:
    """Return True for a non-negative integral value."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value >= 0
    if isinstance(value, float):
        return value.is_integer() and value >= 0
    return False


def is_valid_date(value: object) -> bool:
    """Return True for a ``YYYY-MM-DD`` string naming a real calendar day."""
    if not is_valid_string(value) or not _DATE_PATTERN.fullmatch(value):
        return False
    try:
        datetime.fromisoformat(f"{value}T00:00:00")
    except ValueError:
        return False
    return True


def is_valid_email(value: object) -> bool:
    """Return True for a ``local@domain.tld`` shaped address.

    This is a UI-level check only; it does not attempt RFC 5322 compliance.
    """
    return is_valid_string(value) and _EMAIL_PATTERN.fullmatch(value) is not None


def is_empty_object(value: object) -> bool:
    """Return True for a mapping without keys."""
    return isinstance(value, Mapping) and len(value) == 0


def is_empty_array(value: object) -> bool:
    """Return True for a list or tuple without items."""
    return isinstance(value, list | tuple) and len(value) == 0


def value_exists(value: object) -> bool:
    """Return True when a value is present."""
    return value is not None


def is_valid_meal(meal: object) -> bool:
    """Return True when a meal has a name and all four macros.

    Missing macros fail here; only aggregation treats them as zero.
    """
    if not isinstance(meal, Mapping):
        return False
    return is_valid_string(meal.get("name")) and all(
        is_valid_number(meal.get(field)) for field in MACRO_FIELDS
    )


def is_valid_workout(workout: object) -> bool:
    """Return True when a workout has a name and a non-negative duration."""
    if not isinstance(workout, Mapping):
        return False
    duration = workout.get("duration")
    return is_valid_string(workout.get("name")) and (
        is_valid_number(duration) or is_valid_integer(duration)
    )


def is_valid_macro_goals(goals: object) -> bool:
    """Return True when every macro target is a number >= 0."""
    if not isinstance(goals, Mapping):
        return False
    return all(is_valid_number(goals.get(field), 0) for field in MACRO_FIELDS)


def sanitize_input(value: object) -> str:
    """Trim text and collapse inner whitespace runs to a single space."""
    if not is_valid_string(value):
        return ""
    return _WHITESPACE_RUN.sub(" ", value.strip())


def as_float(value: float) -> float:
    """Convert to float, saturating integers too large for a double to +/-inf."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def round_half_away_from_zero(value: float, decimals: int = 0) -> float:
    """Round with ties going away from zero instead of to even.

    Integers are already exact and come back unchanged, as do NaN and the
    infinities.
    """
    if isinstance(value, int) and decimals >= 0:
        return value
    if not math.isfinite(value):
        return value
    scale = 10**decimals
    scaled = abs(value) * scale + 0.5
    if not math.isfinite(scaled):
        return value
    rounded = math.floor(scaled) / scale
    return -rounded if value < 0 and rounded else rounded


def round_to_whole(value: float) -> int | float:
    """Round to an ``int`` for display; NaN and infinities pass through."""
    rounded = round_half_away_from_zero(value)
    if isinstance(rounded, float) and math.isfinite(rounded):
        return int(rounded)
    return rounded


def round_number(value: object, decimals: int = 2) -> float:
    """Round a valid number to ``decimals`` places, or return 0."""
    if not is_valid_number(value):
        return 0
    return round_half_away_from_zero(value, decimals)
