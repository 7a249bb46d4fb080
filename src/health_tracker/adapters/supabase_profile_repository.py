"""Supabase-backed profile repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from health_tracker.domain.profile import ActivityLevel, Goal, Sex, UserProfile
from health_tracker.services.profiles import ProfileRepository

_PROFILE_COLUMNS = (
    "user_id, name, age, height_cm, weight_kg, sex, goal, activity_level, "
    "goal_weight_kg"
)


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for user_profiles."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the profile for a user, if present."""
        response = (
            self.client.table("user_profiles")
            .select(_PROFILE_COLUMNS)
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def create_profile(self, user_id: UUID, payload: dict[str, object]) -> UserProfile:
        """Insert a profile row and return it."""
        response = (
            self.client.table("user_profiles")
            .insert({"user_id": str(user_id), **payload})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create profile in Supabase")
        return _parse_profile(response.data[0])

    def update_profile(
        self, user_id: UUID, payload: dict[str, object]
    ) -> UserProfile | None:
        """Update a profile row and return it."""
        response = (
            self.client.table("user_profiles")
            .update(payload)
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> UserProfile:
    activity_raw = row.get("activity_level")
    goal_weight_raw = row.get("goal_weight_kg")
    return UserProfile(
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name") or ""),
        age=int(row["age"]),
        height_cm=float(row["height_cm"]),
        weight_kg=float(row["weight_kg"]),
        sex=Sex(row["sex"]),
        goal=Goal(row["goal"]),
        activity_level=ActivityLevel(activity_raw) if activity_raw else None,
        goal_weight_kg=float(goal_weight_raw) if goal_weight_raw is not None else None,
    )
