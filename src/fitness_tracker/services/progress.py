"""Daily macro progress against goals."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from fitness_tracker.domain.meal_types import calculate_meal_macro_totals
from fitness_tracker.domain.meals import MacroGoals, MacroTotals
from fitness_tracker.domain.progress import (
    ProgressResult,
    calculate_macro_progress,
    format_progress_text,
    is_goal_met,
)
from fitness_tracker.domain.validation import MACRO_FIELDS

_UNITS = {"calories": "cal", "protein": "g", "carbs": "g", "fats": "g"}


@dataclass(frozen=True)
class MacroProgressReport:
    """Progress for each macro of a day's meals."""

    totals: MacroTotals
    goals: MacroGoals
    progress: dict[str, ProgressResult]
    text: dict[str, str]
    goals_met: list[str]


@dataclass
class MacroProgressService:
    """Service that compares meal totals with macro goals."""

    tolerance_percent: float = 10

    def build_macro_report(
        self,
        meals: Iterable[Mapping[str, object]],
        goals: MacroGoals | Mapping[str, object],
    ) -> MacroProgressReport:
        """Aggregate meals and return per-macro progress."""
        resolved_goals = (
            goals if isinstance(goals, MacroGoals) else MacroGoals.from_mapping(goals)
        )
        totals = calculate_meal_macro_totals(meals)
        actual = totals.as_dict()
        target = resolved_goals.as_dict()

        progress = {
            name: calculate_macro_progress(actual[name], target[name])
            for name in MACRO_FIELDS
        }
        text = {
            name: format_progress_text(actual[name], target[name], _UNITS[name])
            for name in MACRO_FIELDS
        }
        goals_met = [
            name
            for name in MACRO_FIELDS
            if is_goal_met(actual[name], target[name], self.tolerance_percent)
        ]
        return MacroProgressReport(
            totals=totals,
            goals=resolved_goals,
            progress=progress,
            text=text,
            goals_met=goals_met,
        )
