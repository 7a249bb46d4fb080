"""Supabase repository for macro snapshots."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from health_tracker.domain.macros import MacroOutput, MacroRecord
from health_tracker.services.macros import MacroRepository


@dataclass
class SupabaseMacroRepository(MacroRepository):
    """Supabase implementation for user_macros."""

    client: Client

    def create_snapshot(self, user_id: UUID, macros: MacroOutput) -> MacroRecord:
        """Insert a macro snapshot and return it."""
        response = (
            self.client.table("user_macros")
            .insert(
                {
                    "user_id": str(user_id),
                    "bmr": macros.bmr,
                    "maintenance_calories": macros.maintenance_calories,
                    "target_calories": macros.target_calories,
                    "protein_grams": macros.protein_grams,
                    "fat_grams": macros.fat_grams,
                    "carb_grams": macros.carb_grams,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to store macro snapshot")
        return _parse_record(response.data[0])

    def list_snapshots(self, user_id: UUID) -> list[MacroRecord]:
        """Return snapshots for a user, newest first."""
        response = (
            self.client.table("user_macros")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_record(row) for row in response.data or []]


def _parse_record(row: dict[str, object]) -> MacroRecord:
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else datetime.min
    )
    return MacroRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        created_at=created_at,
        macros=MacroOutput(
            bmr=int(row.get("bmr") or 0),
            maintenance_calories=int(row.get("maintenance_calories") or 0),
            target_calories=int(row.get("target_calories") or 0),
            protein_grams=int(row.get("protein_grams") or 0),
            fat_grams=int(row.get("fat_grams") or 0),
            carb_grams=int(row.get("carb_grams") or 0),
        ),
    )
