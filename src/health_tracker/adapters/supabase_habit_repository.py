"""Supabase repository for habits and habit logs."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from health_tracker.domain.habits import Habit, HabitLog
from health_tracker.services.habits import HabitRepository, normalize_log_date


@dataclass
class SupabaseHabitRepository(HabitRepository):
    """Supabase implementation for habits and habit_logs."""

    client: Client

    def list_habits(self, user_id: UUID) -> list[Habit]:
        """Return habits ordered by creation time."""
        response = (
            self.client.table("habits")
            .select("id, user_id, title, created_at")
            .eq("user_id", str(user_id))
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_habit(row) for row in response.data or []]

    def get_habit(self, user_id: UUID, habit_id: UUID) -> Habit | None:
        """Return a habit owned by the user, if present."""
        response = (
            self.client.table("habits")
            .select("id, user_id, title, created_at")
            .eq("id", str(habit_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_habit(response.data[0])

    def create_habit(self, user_id: UUID, title: str) -> Habit:
        """Insert a habit and return it."""
        response = (
            self.client.table("habits")
            .insert({"user_id": str(user_id), "title": title})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create habit")
        return _parse_habit(response.data[0])

    def delete_habit(self, user_id: UUID, habit_id: UUID) -> None:
        """Delete a habit owned by the user."""
        (
            self.client.table("habits")
            .delete()
            .eq("id", str(habit_id))
            .eq("user_id", str(user_id))
            .execute()
        )

    def list_completed_logs(self, habit_ids: list[UUID]) -> list[HabitLog]:
        """Return completed logs for the given habits."""
        if not habit_ids:
            return []
        response = (
            self.client.table("habit_logs")
            .select("habit_id, date")
            .in_("habit_id", [str(habit_id) for habit_id in habit_ids])
            .eq("completed", True)
            .execute()
        )
        return [
            HabitLog(
                habit_id=UUID(str(row["habit_id"])),
                day=normalize_log_date(str(row["date"])),
            )
            for row in response.data or []
        ]

    def create_completed_log(self, user_id: UUID, habit_id: UUID, day: date) -> None:
        """Insert a completed log row."""
        self.client.table("habit_logs").insert(
            {
                "habit_id": str(habit_id),
                "user_id": str(user_id),
                "date": day.isoformat(),
                "completed": True,
            }
        ).execute()


def _parse_habit(row: dict[str, object]) -> Habit:
    created_raw = row.get("created_at")
    return Habit(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        title=str(row.get("title") or ""),
        created_at=datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None,
    )
