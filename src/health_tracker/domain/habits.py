"""Domain models for habit tracking."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class Habit:
    """Represents a row in habits."""

    id: UUID
    user_id: UUID
    title: str
    created_at: datetime | None


@dataclass(frozen=True)
class HabitLog:
    """Completion entry for a habit."""

    habit_id: UUID
    day: date


@dataclass(frozen=True)
class HabitWithStreak:
    """Habit with its current streak."""

    id: UUID
    title: str
    streak: int
    completed_today: bool
