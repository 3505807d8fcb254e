"""Tests for Supabase adapter implementations."""

import asyncio
from dataclasses import dataclass, field
from uuid import uuid4

from fitness_tracker.adapters.supabase_goal_preference_repository import (
    SupabaseGoalPreferenceRepository,
)
from fitness_tracker.domain.goals import GoalPreference, StatName


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "upsert": []}
    )
    last_payload: object | None = None
    last_on_conflict: str | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def upsert(self, payload: object, on_conflict: str = "") -> "FakeTable":
        self._action = "upsert"
        self.last_payload = payload
        self.last_on_conflict = on_conflict
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    async def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_get_goal_preferences_parses_rows_and_skips_unknown() -> None:
    client = FakeSupabaseClient()
    user_id = uuid4()
    client.table("goal_preferences").queue(
        "select",
        [
            {"stat_name": "workoutTarget", "is_enabled": 1},
            {"stat_name": "restTimeStats", "is_enabled": False},
            {"stat_name": "stepsWalked", "is_enabled": True},
        ],
    )

    repository = SupabaseGoalPreferenceRepository(client, user_id)
    preferences = asyncio.run(repository.get_goal_preferences())

    assert preferences == [
        GoalPreference(StatName.WORKOUT_TARGET, True),
        GoalPreference(StatName.REST_TIME_STATS, False),
    ]
    assert ("user_id", str(user_id)) in client.table("goal_preferences").last_filters


def test_update_goal_preference_upserts_row() -> None:
    client = FakeSupabaseClient()
    user_id = uuid4()

    repository = SupabaseGoalPreferenceRepository(client, user_id)
    asyncio.run(repository.update_goal_preference("consistency", True))

    table = client.table("goal_preferences")
    assert table.last_on_conflict == "user_id,stat_name"
    assert table.last_payload["user_id"] == str(user_id)
    assert table.last_payload["stat_name"] == "consistency"
    assert table.last_payload["is_enabled"] is True
    assert "updated_at" in table.last_payload


def test_user_settings_roundtrip() -> None:
    client = FakeSupabaseClient()
    settings_table = client.table("user_settings")
    settings_table.queue(
        "select", [{"key": "workoutStreakTrackingMetric", "value": "exercises"}]
    )

    repository = SupabaseGoalPreferenceRepository(client, uuid4())
    value = asyncio.run(repository.get_user_setting("workoutStreakTrackingMetric"))
    missing = asyncio.run(repository.get_user_setting("workoutStreakTrackingMetric"))
    asyncio.run(
        repository.update_user_setting("workoutStreakTrackingMetric", "workouts")
    )

    assert value == "exercises"
    assert missing is None
    assert settings_table.last_on_conflict == "user_id,key"
    assert settings_table.last_payload["value"] == "workouts"
