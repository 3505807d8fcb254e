"""Domain models for goal stat preferences."""

from dataclasses import dataclass
from enum import StrEnum


class StatName(StrEnum):
    """Closed catalog of goal stats a user can show or hide."""

    WORKOUT_TARGET = "workoutTarget"
    EXERCISES_COMPLETED = "exercisesCompleted"
    CONSISTENCY = "consistency"
    STRENGTH_STATS = "strengthStats"
    VOLUME_STATS = "volumeStats"
    REST_TIME_STATS = "restTimeStats"
    RECOVERY_STATS = "recoveryStats"


class StreakMetric(StrEnum):
    """Basis for day-to-day streak coloring."""

    WORKOUTS = "workouts"
    EXERCISES = "exercises"


STREAK_METRIC_SETTING_KEY = "workoutStreakTrackingMetric"
DEFAULT_STREAK_METRIC = StreakMetric.WORKOUTS


@dataclass(frozen=True)
class StatOption:
    """Settings-screen metadata for a stat."""

    label: str
    description: str
    icon: str


STAT_OPTIONS: dict[StatName, StatOption] = {
    StatName.WORKOUT_TARGET: StatOption(
        "Workout Target", "Show completed vs scheduled workouts", "target"
    ),
    StatName.EXERCISES_COMPLETED: StatOption(
        "Exercises", "Show completed vs scheduled exercises", "check-circle"
    ),
    StatName.CONSISTENCY: StatOption(
        "Consistency", "Show days you logged workouts", "calendar-check"
    ),
    StatName.STRENGTH_STATS: StatOption(
        "Strength", "Show strength progress and max lifts", "dumbbell"
    ),
    StatName.VOLUME_STATS: StatOption(
        "Volume", "Show total training volume and reps completed", "chart-box"
    ),
    StatName.REST_TIME_STATS: StatOption(
        "Rest Time", "Show average rest time between sets", "timer"
    ),
    StatName.RECOVERY_STATS: StatOption(
        "Recovery", "Show recovery and rest day metrics", "heart-pulse"
    ),
}


def parse_stat_name(value: object) -> StatName | None:
    """Return the catalog entry for ``value`` or None when unknown."""
    try:
        return StatName(value)
    except ValueError:
        return None


def parse_streak_metric(value: object) -> StreakMetric | None:
    """Return the streak metric for ``value`` or None when invalid."""
    try:
        return StreakMetric(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class GoalPreference:
    """Whether a single stat is shown."""

    stat_name: StatName
    is_enabled: bool


@dataclass(frozen=True)
class StatSetting:
    """A catalog stat with its metadata and current flag."""

    stat_name: StatName
    option: StatOption
    is_enabled: bool


@dataclass(frozen=True)
class GoalSettingsSnapshot:
    """Composite goal settings passed to observers."""

    streak_metric: StreakMetric
    enabled_stats: frozenset[StatName]
