"""Domain models for weight logs."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class WeightLog:
    """Represents a row in weight_logs."""

    id: UUID
    user_id: UUID
    day: date
    weight_kg: float
