"""Meal categories derived from the time of day."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from fitness_tracker.domain.meals import MacroTotals
from fitness_tracker.domain.validation import MACRO_FIELDS, round_to_whole


class MealCategory(StrEnum):
    """Meal categories in their cyclic day order."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    SNACKS = "Snacks"
    DINNER = "Dinner"


@dataclass(frozen=True)
class MealTypeInfo:
    """Static presentation metadata and hour window for a category."""

    label: str
    icon: str
    emoji: str
    suggested_time: str
    start_hour: int
    end_hour: int

    def contains_hour(self, hour: int) -> bool:
        """Return True when ``hour`` is inside the half-open window."""
        return self.start_hour <= hour < self.end_hour


MEAL_TYPE_ORDER: tuple[MealCategory, ...] = tuple(MealCategory)

MEAL_TYPE_INFO: dict[MealCategory, MealTypeInfo] = {
    MealCategory.BREAKFAST: MealTypeInfo(
        label="Breakfast",
        icon="coffee",
        emoji="🍳",
        suggested_time="08:00",
        start_hour=5,
        end_hour=10,
    ),
    MealCategory.LUNCH: MealTypeInfo(
        label="Lunch",
        icon="food",
        emoji="🍽️",
        suggested_time="12:30",
        start_hour=11,
        end_hour=14,
    ),
    MealCategory.SNACKS: MealTypeInfo(
        label="Snacks",
        icon="cookie",
        emoji="🍪",
        suggested_time="15:00",
        start_hour=14,
        end_hour=17,
    ),
    MealCategory.DINNER: MealTypeInfo(
        label="Dinner",
        icon="silverware-fork-knife",
        emoji="🍴",
        suggested_time="19:00",
        start_hour=17,
        end_hour=23,
    ),
}

# Lookups for unknown categories fall back to a generic lunch plate.
_FALLBACK_INFO = MealTypeInfo(
    label=MealCategory.LUNCH.value,
    icon="food",
    emoji="🍽️",
    suggested_time="12:00",
    start_hour=0,
    end_hour=0,
)


def _as_category(value: object) -> MealCategory | None:
    try:
        return MealCategory(value)
    except ValueError:
        return None


def get_meal_type_info(meal_type: object) -> MealTypeInfo:
    """Return metadata for a category, or the generic fallback."""
    category = _as_category(meal_type)
    if category is None:
        return _FALLBACK_INFO
    return MEAL_TYPE_INFO[category]


def get_meal_type_by_time(when: datetime | None = None) -> MealCategory:
    """Return the category whose window contains the hour of ``when``.

    Hours outside every window (10:00 and 23:00 through 04:59) are treated
    as breakfast. Timezone-aware values are converted to local time first;
    naive values are taken as already local.
    """
    when = when or datetime.now()
    if when.tzinfo is not None:
        when = when.astimezone()
    hour = when.hour
    for category in MEAL_TYPE_ORDER:
        if MEAL_TYPE_INFO[category].contains_hour(hour):
            return category
    return MealCategory.BREAKFAST


def get_meal_type_icon(meal_type: object) -> str:
    """Return the icon key for a category."""
    return get_meal_type_info(meal_type).icon


def get_meal_type_emoji(meal_type: object) -> str:
    """Return the emoji for a category."""
    return get_meal_type_info(meal_type).emoji


def get_meal_type_suggested_time(meal_type: object) -> str:
    """Return the suggested ``HH:MM`` time for a category."""
    return get_meal_type_info(meal_type).suggested_time


def get_meal_type_label(meal_type: object) -> str:
    """Return the display label for a category."""
    return get_meal_type_info(meal_type).label


def is_valid_meal_type(value: object) -> bool:
    """Return True for one of the four canonical category names."""
    return _as_category(value) is not None


def get_next_meal_type(meal_type: object) -> MealCategory:
    """Return the following category, wrapping Dinner back to Breakfast."""
    category = _as_category(meal_type)
    if category is None:
        return MealCategory.BREAKFAST
    index = MEAL_TYPE_ORDER.index(category)
    return MEAL_TYPE_ORDER[(index + 1) % len(MEAL_TYPE_ORDER)]


def get_previous_meal_type(meal_type: object) -> MealCategory:
    """Return the preceding category, wrapping Breakfast back to Dinner."""
    category = _as_category(meal_type)
    if category is None:
        return MealCategory.DINNER
    index = MEAL_TYPE_ORDER.index(category)
    return MEAL_TYPE_ORDER[index - 1]


def calculate_meal_macro_totals(
    meals: Iterable[Mapping[str, object]] = (),
) -> MacroTotals:
    """Sum macros across meals, counting missing fields as zero."""
    sums = dict.fromkeys(MACRO_FIELDS, 0)
    for meal in meals:
        for field in MACRO_FIELDS:
            sums[field] += meal.get(field) or 0
    return MacroTotals(**sums)


def format_macro_values(macros: Mapping[str, object]) -> MacroTotals:
    """Round each macro to the nearest whole number for display."""
    return MacroTotals(
        **{field: round_to_whole(macros.get(field) or 0) for field in MACRO_FIELDS}
    )
