"""Supabase repository for weight logs."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from health_tracker.domain.errors import WeightAlreadyLoggedError
from health_tracker.domain.weight import WeightLog
from health_tracker.services.weight import WeightRepository

# Postgres unique_violation; weight_logs is unique on (user_id, date)
_UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for weight_logs."""

    client: Client

    def list_logs(self, user_id: UUID) -> list[WeightLog]:
        """Return weight logs, newest first."""
        response = (
            self.client.table("weight_logs")
            .select("id, user_id, date, weight_kg")
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .execute()
        )
        return [_parse_log(row) for row in response.data or []]

    def get_log_for_day(self, user_id: UUID, day: date) -> WeightLog | None:
        """Return the log for a day, if present."""
        response = (
            self.client.table("weight_logs")
            .select("id, user_id, date, weight_kg")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_log(response.data[0])

    def create_log(self, user_id: UUID, day: date, weight_kg: float) -> WeightLog:
        """Insert a weight log and return it."""
        payload = {
            "user_id": str(user_id),
            "date": day.isoformat(),
            "weight_kg": weight_kg,
        }
        try:
            response = self.client.table("weight_logs").insert(payload).execute()
        except APIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                raise WeightAlreadyLoggedError(
                    f"Weight already logged for {day}"
                ) from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create weight log")
        return _parse_log(response.data[0])

    def update_log(self, user_id: UUID, log_id: UUID, weight_kg: float) -> None:
        """Update the weight on a log."""
        self.client.table("weight_logs").update({"weight_kg": weight_kg}).eq(
            "id", str(log_id)
        ).eq("user_id", str(user_id)).execute()

    def delete_log(self, user_id: UUID, log_id: UUID) -> None:
        """Delete a log."""
        self.client.table("weight_logs").delete().eq("id", str(log_id)).eq(
            "user_id", str(user_id)
        ).execute()


def _parse_log(row: dict[str, object]) -> WeightLog:
    return WeightLog(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        day=date.fromisoformat(str(row["date"])[:10]),
        weight_kg=float(row["weight_kg"]),
    )
