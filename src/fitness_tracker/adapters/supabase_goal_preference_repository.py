"""Supabase repository for goal preferences and user settings."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from pydantic import BaseModel
from supabase import AsyncClient

from fitness_tracker.domain.goals import GoalPreference, parse_stat_name
from fitness_tracker.services.goal_preferences import GoalPreferenceRepository

_logger = logging.getLogger(__name__)


class GoalPreferenceRow(BaseModel):
    """Stored goal preference row. Legacy rows keep the flag as 0/1."""

    stat_name: str
    is_enabled: bool


class UserSettingRow(BaseModel):
    """Stored scalar user setting row."""

    key: str
    value: str | None = None


@dataclass
class SupabaseGoalPreferenceRepository(GoalPreferenceRepository):
    """Supabase implementation for goal preferences of a single user."""

    client: AsyncClient
    user_id: UUID

    async def get_goal_preferences(self) -> list[GoalPreference]:
        """Return the user's goal preferences."""
        response = (
            await self.client.table("goal_preferences")
            .select("stat_name, is_enabled")
            .eq("user_id", str(self.user_id))
            .execute()
        )
        preferences = []
        for raw in response.data or []:
            row = GoalPreferenceRow.model_validate(raw)
            stat_name = parse_stat_name(row.stat_name)
            if stat_name is None:
                _logger.warning("Skipping stored goal stat %s", row.stat_name)
                continue
            preferences.append(GoalPreference(stat_name, row.is_enabled))
        return preferences

    async def update_goal_preference(self, stat_name: str, is_enabled: bool) -> None:
        """Upsert the enabled flag for a stat."""
        await (
            self.client.table("goal_preferences")
            .upsert(
                {
                    "user_id": str(self.user_id),
                    "stat_name": stat_name,
                    "is_enabled": is_enabled,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="user_id,stat_name",
            )
            .execute()
        )

    async def get_user_setting(self, key: str) -> str | None:
        """Return a stored user setting value."""
        response = (
            await self.client.table("user_settings")
            .select("key, value")
            .eq("user_id", str(self.user_id))
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return UserSettingRow.model_validate(response.data[0]).value

    async def update_user_setting(self, key: str, value: str) -> None:
        """Upsert a user setting value."""
        await (
            self.client.table("user_settings")
            .upsert(
                {
                    "user_id": str(self.user_id),
                    "key": key,
                    "value": value,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="user_id,key",
            )
            .execute()
        )
