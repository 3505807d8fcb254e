"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import acreate_client

from fitness_tracker.adapters.supabase_goal_preference_repository import (
    SupabaseGoalPreferenceRepository,
)
from fitness_tracker.app_logging import configure_logging
from fitness_tracker.config import Settings
from fitness_tracker.services.goal_preferences import GoalPreferenceStore
from fitness_tracker.services.progress import MacroProgressService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    goal_preference_store: GoalPreferenceStore
    macro_progress_service: MacroProgressService


async def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    supabase_client = await acreate_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    goal_preference_repository = SupabaseGoalPreferenceRepository(
        client=supabase_client, user_id=resolved_settings.user_id
    )
    return AppContainer(
        settings=resolved_settings,
        goal_preference_store=GoalPreferenceStore(goal_preference_repository),
        macro_progress_service=MacroProgressService(
            tolerance_percent=resolved_settings.goal_tolerance_percent
        ),
    )
