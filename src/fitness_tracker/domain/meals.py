"""Domain models for meal macros."""

from collections.abc import Mapping
from dataclasses import asdict, dataclass

from fitness_tracker.domain.validation import MACRO_FIELDS, is_valid_macro_goals


@dataclass(frozen=True)
class MacroTotals:
    """Summed or rounded macros for one or more meals."""

    calories: float
    protein: float
    carbs: float
    fats: float

    @classmethod
    def zero(cls) -> "MacroTotals":
        """Return totals with every macro set to zero."""
        return cls(calories=0, protein=0, carbs=0, fats=0)

    def as_dict(self) -> dict[str, float]:
        """Return the totals keyed by macro name."""
        return asdict(self)


@dataclass(frozen=True)
class MacroGoals:
    """Daily macro targets. Zero is a valid target."""

    calories: float
    protein: float
    carbs: float
    fats: float

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> "MacroGoals":
        """Build goals from a raw record, refusing malformed input."""
        if not is_valid_macro_goals(raw):
            raise ValueError("Macro goals must be non-negative numbers")
        return cls(**{name: raw[name] for name in MACRO_FIELDS})

    def as_dict(self) -> dict[str, float]:
        """Return the goals keyed by macro name."""
        return asdict(self)
