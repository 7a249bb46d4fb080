"""Habit tracking service and streak calculation."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Protocol
from uuid import UUID

from health_tracker.domain.errors import HabitNotFoundError
from health_tracker.domain.habits import Habit, HabitLog, HabitWithStreak

_logger = logging.getLogger(__name__)


def normalize_log_date(value: str | date) -> date:
    """Reduce an ISO date, datetime string or date object to a calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # "T" or a space may separate the time part
    return date.fromisoformat(value.strip()[:10])


def calculate_streak(log_dates: Iterable[str | date], today: date) -> int:
    """Count consecutive completed days ending at today.

    Dates are de-duplicated and walked newest first. The walk stops at the
    first date that is not the expected day, so a missing today yields 0.
    """
    days = sorted({normalize_log_date(value) for value in log_dates}, reverse=True)
    streak = 0
    cursor = today
    for day in days:
        if day != cursor:
            break
        streak += 1
        cursor -= timedelta(days=1)
    return streak


class HabitRepository(Protocol):
    """Persistence interface for habits and their logs."""

    def list_habits(self, user_id: UUID) -> list[Habit]:
        """Return habits ordered by creation time."""

    def get_habit(self, user_id: UUID, habit_id: UUID) -> Habit | None:
        """Return a habit owned by the user, if present."""

    def create_habit(self, user_id: UUID, title: str) -> Habit:
        """Insert and return a habit."""

    def delete_habit(self, user_id: UUID, habit_id: UUID) -> None:
        """Delete a habit."""

    def list_completed_logs(self, habit_ids: list[UUID]) -> list[HabitLog]:
        """Return completed logs for the given habits."""

    def create_completed_log(self, user_id: UUID, habit_id: UUID, day: date) -> None:
        """Insert a completed log for a day."""


@dataclass
class HabitService:
    """Service for the habit list and daily completion."""

    repository: HabitRepository

    def list_habits(self, user_id: UUID, today: date) -> list[HabitWithStreak]:
        """Return habits with streaks and today's completion state."""
        habits = self.repository.list_habits(user_id)
        logs = self.repository.list_completed_logs([habit.id for habit in habits])
        grouped: dict[UUID, list[date]] = {}
        for log in logs:
            grouped.setdefault(log.habit_id, []).append(log.day)

        results = []
        for habit in habits:
            days = grouped.get(habit.id, [])
            results.append(
                HabitWithStreak(
                    id=habit.id,
                    title=habit.title,
                    streak=calculate_streak(days, today),
                    completed_today=today in days,
                )
            )
        return results

    def add_habit(self, user_id: UUID, title: str) -> Habit | None:
        """Create a habit; blank titles are ignored."""
        cleaned = title.strip()
        if not cleaned:
            return None
        habit = self.repository.create_habit(user_id, cleaned)
        _logger.info("Habit added: user_id=%s habit_id=%s", user_id, habit.id)
        return habit

    def complete_habit(self, user_id: UUID, habit_id: UUID, today: date) -> bool:
        """Mark a habit complete for today. Returns False if already done.

        Raises HabitNotFoundError when the habit is not the user's.
        """
        if self.repository.get_habit(user_id, habit_id) is None:
            raise HabitNotFoundError(habit_id)
        logs = self.repository.list_completed_logs([habit_id])
        if any(log.day == today for log in logs):
            return False
        self.repository.create_completed_log(user_id, habit_id, today)
        _logger.info("Habit completed: habit_id=%s day=%s", habit_id, today)
        return True

    def delete_habit(self, user_id: UUID, habit_id: UUID) -> None:
        """Delete a habit."""
        self.repository.delete_habit(user_id, habit_id)
        _logger.info("Habit deleted: user_id=%s habit_id=%s", user_id, habit_id)
