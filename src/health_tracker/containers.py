"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from health_tracker.adapters.supabase_auth_gateway import (
    AuthGateway,
    SupabaseAuthGateway,
)
from health_tracker.adapters.supabase_habit_repository import SupabaseHabitRepository
from health_tracker.adapters.supabase_macro_repository import SupabaseMacroRepository
from health_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from health_tracker.adapters.supabase_weight_repository import (
    SupabaseWeightRepository,
)
from health_tracker.config import Settings
from health_tracker.services.habits import HabitService
from health_tracker.services.macros import MacroService
from health_tracker.services.profiles import ProfileService
from health_tracker.services.weight import WeightService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_gateway: AuthGateway
    profile_service: ProfileService
    macro_service: MacroService
    habit_service: HabitService
    weight_service: WeightService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_key
    )
    profile_repository = SupabaseProfileRepository(supabase_client)
    return AppContainer(
        settings=resolved_settings,
        auth_gateway=SupabaseAuthGateway(supabase_client),
        profile_service=ProfileService(profile_repository),
        macro_service=MacroService(
            profile_repository=profile_repository,
            repository=SupabaseMacroRepository(supabase_client),
        ),
        habit_service=HabitService(SupabaseHabitRepository(supabase_client)),
        weight_service=WeightService(
            repository=SupabaseWeightRepository(supabase_client),
            profile_repository=profile_repository,
        ),
    )
