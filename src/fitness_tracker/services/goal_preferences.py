"""Goal stat preferences backed by an external settings store."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from fitness_tracker.domain.goals import (
    DEFAULT_STREAK_METRIC,
    STAT_OPTIONS,
    STREAK_METRIC_SETTING_KEY,
    GoalPreference,
    GoalSettingsSnapshot,
    StatName,
    StatSetting,
    StreakMetric,
    parse_stat_name,
    parse_streak_metric,
)

_logger = logging.getLogger(__name__)

SettingsObserver = Callable[[GoalSettingsSnapshot], None]


class GoalPreferenceError(Exception):
    """Raised when goal preferences cannot be read or written."""


class UnknownStatError(GoalPreferenceError, ValueError):
    """Raised for a stat name outside the catalog."""


class InvalidStreakMetricError(GoalPreferenceError, ValueError):
    """Raised for a streak metric other than workouts or exercises."""


class GoalPreferenceRepository(Protocol):
    """Persistence interface for goal preferences and user settings."""

    async def get_goal_preferences(self) -> list[GoalPreference]:
        """Return every stored goal preference."""

    async def update_goal_preference(self, stat_name: str, is_enabled: bool) -> None:
        """Store the enabled flag for a stat."""

    async def get_user_setting(self, key: str) -> str | None:
        """Return a scalar user setting if set."""

    async def update_user_setting(self, key: str, value: str) -> None:
        """Store a scalar user setting."""


@dataclass
class GoalPreferenceStore:
    """In-memory view of goal preferences for one settings session.

    The repository stays the source of truth: ``load`` replaces the view and
    every mutation is written through before the view changes.
    """

    repository: GoalPreferenceRepository
    _preferences: list[GoalPreference] = field(default_factory=list, init=False)
    _streak_metric: StreakMetric = field(default=DEFAULT_STREAK_METRIC, init=False)
    _observers: list[SettingsObserver] = field(default_factory=list, init=False)
    _loaded: bool = field(default=False, init=False)

    @property
    def preferences(self) -> list[GoalPreference]:
        """Return a copy of the loaded preferences."""
        return list(self._preferences)

    @property
    def streak_metric(self) -> StreakMetric:
        """Return the selected streak metric."""
        return self._streak_metric

    @property
    def is_loaded(self) -> bool:
        """Return True after the first successful load."""
        return self._loaded

    async def load(self) -> list[GoalPreference]:
        """Replace the in-memory view with the stored preferences.

        On failure the previous view is kept and ``GoalPreferenceError`` is
        raised.
        """
        try:
            stored = await self.repository.get_goal_preferences()
            stored_metric = await self.repository.get_user_setting(
                STREAK_METRIC_SETTING_KEY
            )
        except Exception as exc:
            _logger.exception("Failed to load goal preferences")
            raise GoalPreferenceError("Failed to load goal preferences") from exc

        preferences = []
        for preference in stored:
            stat_name = parse_stat_name(preference.stat_name)
            if stat_name is None:
                _logger.warning("Ignoring unknown goal stat: %s", preference.stat_name)
                continue
            preferences.append(GoalPreference(stat_name, bool(preference.is_enabled)))

        self._preferences = preferences
        self._streak_metric = (
            parse_streak_metric(stored_metric) or DEFAULT_STREAK_METRIC
        )
        self._loaded = True
        return self.preferences

    def is_enabled(self, stat_key: str) -> bool:
        """Return True when the stat is loaded and enabled."""
        return any(
            preference.stat_name == stat_key and preference.is_enabled
            for preference in self._preferences
        )

    async def toggle(self, stat_key: str, current_value: bool) -> bool:
        """Persist the negation of ``current_value`` and return it.

        The write is issued even when the stat is missing from the loaded
        view; only matching entries are updated in memory.
        """
        stat_name = parse_stat_name(stat_key)
        if stat_name is None:
            raise UnknownStatError(f"Unknown goal stat: {stat_key}")

        new_value = not current_value
        try:
            await self.repository.update_goal_preference(stat_name.value, new_value)
        except Exception as exc:
            _logger.exception("Failed to update goal preference %s", stat_name)
            raise GoalPreferenceError("Failed to update goal preference") from exc

        self._preferences = [
            GoalPreference(stat_name, new_value)
            if preference.stat_name == stat_name
            else preference
            for preference in self._preferences
        ]
        self._notify()
        return new_value

    async def set_streak_metric(self, metric: str) -> StreakMetric:
        """Persist and select the streak tracking metric."""
        selected = parse_streak_metric(metric)
        if selected is None:
            raise InvalidStreakMetricError(f"Invalid streak metric: {metric}")

        try:
            await self.repository.update_user_setting(
                STREAK_METRIC_SETTING_KEY, selected.value
            )
        except Exception as exc:
            _logger.exception("Failed to update streak metric")
            raise GoalPreferenceError("Failed to update streak metric") from exc

        self._streak_metric = selected
        self._notify()
        return selected

    def subscribe(self, observer: SettingsObserver) -> Callable[[], None]:
        """Register an observer and return a callable that removes it.

        Observers run after the change is persisted. An observer that raises
        is logged and skipped, so the others still run and the caller still
        sees the change succeed.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def stat_settings(self) -> list[StatSetting]:
        """Return every catalog stat in display order with its flag."""
        return [
            StatSetting(stat_name, option, self.is_enabled(stat_name))
            for stat_name, option in STAT_OPTIONS.items()
        ]

    def snapshot(self) -> GoalSettingsSnapshot:
        """Return the current composite settings."""
        enabled: frozenset[StatName] = frozenset(
            preference.stat_name
            for preference in self._preferences
            if preference.is_enabled
        )
        return GoalSettingsSnapshot(
            streak_metric=self._streak_metric, enabled_stats=enabled
        )

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for observer in list(self._observers):
            try:
                observer(snapshot)
            except Exception:
                _logger.exception("Goal settings observer %r failed", observer)
