"""Progress percentages, tiers and goal checks."""

from dataclasses import dataclass
from enum import StrEnum

from fitness_tracker.domain.validation import as_float, round_to_whole


class ProgressTier(StrEnum):
    """Progress tiers ordered from best to worst."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


@dataclass(frozen=True)
class TierStyle:
    """Minimum percentage, color and label for a tier."""

    threshold: float
    color: str
    status: str


SUCCESS_COLOR = "#00C853"
WARNING_COLOR = "#FFC107"
DANGER_COLOR = "#FF3B30"

# Checked top to bottom; fair deliberately shares the warning color with good.
TIER_STYLES: dict[ProgressTier, TierStyle] = {
    ProgressTier.EXCELLENT: TierStyle(90, SUCCESS_COLOR, "Excellent"),
    ProgressTier.GOOD: TierStyle(70, WARNING_COLOR, "Good"),
    ProgressTier.FAIR: TierStyle(50, WARNING_COLOR, "Fair"),
    ProgressTier.POOR: TierStyle(float("-inf"), DANGER_COLOR, "Poor"),
}


@dataclass(frozen=True)
class ProgressResult:
    """Display-ready progress for one actual/goal pair."""

    percentage: int | float
    tier: ProgressTier
    color: str
    status: str


def calculate_percentage(actual: float, goal: float | None) -> float:
    """Return ``actual`` as a percentage of ``goal``, uncapped.

    A zero or missing goal yields 0 rather than dividing by zero.
    """
    if goal is None or goal == 0:
        return 0
    return as_float(actual) / as_float(goal) * 100


def calculate_percentage_capped(actual: float, goal: float | None) -> float:
    """Return the percentage clamped to at most 100."""
    return min(calculate_percentage(actual, goal), 100)


def calculate_completion_percentage(completed: float, assigned: float) -> float:
    """Return completed sessions as a share of scheduled ones, capped at 100.

    Nothing scheduled counts as 0 rather than as complete.
    """
    if assigned == 0:
        return 0
    return min(as_float(completed) / as_float(assigned) * 100, 100)


def calculate_percentage_change(current: float, previous: float) -> float:
    """Return the change from ``previous`` to ``current`` in percent.

    Growth from zero is reported as 100 and no growth from zero as 0.
    """
    if previous == 0:
        return 100 if current > 0 else 0
    return (as_float(current) - as_float(previous)) / as_float(previous) * 100


def get_progress_tier(percentage: float) -> ProgressTier:
    """Return the first tier whose threshold ``percentage`` reaches."""
    for tier, style in TIER_STYLES.items():
        if percentage >= style.threshold:
            return tier
    return ProgressTier.POOR


def get_progress_color(percentage: float) -> str:
    """Return the hex color for a percentage."""
    return TIER_STYLES[get_progress_tier(percentage)].color


def get_progress_status(percentage: float) -> str:
    """Return the status label for a percentage."""
    return TIER_STYLES[get_progress_tier(percentage)].status


def calculate_macro_progress(actual: float, goal: float | None) -> ProgressResult:
    """Return the capped, rounded progress with its tier styling."""
    percentage = calculate_percentage_capped(actual, goal)
    tier = get_progress_tier(percentage)
    style = TIER_STYLES[tier]
    return ProgressResult(
        percentage=round_to_whole(percentage),
        tier=tier,
        color=style.color,
        status=style.status,
    )


def get_progress_bar_width(
    actual: float, goal: float | None, max_width: float = 100
) -> float:
    """Scale the capped percentage into ``[0, max_width]``."""
    return max_width * (calculate_percentage_capped(actual, goal) / 100)


def format_progress_text(actual: float, goal: float, unit: str = "") -> str:
    """Render ``"actual/goal"`` with an optional trailing unit."""
    text = f"{round_to_whole(actual)}/{round_to_whole(goal)}"
    return f"{text} {unit}" if unit else text


def is_goal_exceeded(actual: float, goal: float) -> bool:
    """Return True when ``actual`` reaches or passes ``goal``."""
    return actual >= goal


def is_goal_met(actual: float, goal: float, tolerance_percent: float = 10) -> bool:
    """Return True when ``actual`` is inside the symmetric tolerance band.

    Overshooting past the band is not "met", even though it is "exceeded".
    """
    goal = as_float(goal)
    low = goal * (1 - tolerance_percent / 100)
    high = goal * (1 + tolerance_percent / 100)
    return low <= as_float(actual) <= high
