"""Weight log service."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from health_tracker.domain.errors import WeightAlreadyLoggedError
from health_tracker.domain.weight import WeightLog
from health_tracker.services.profiles import ProfileRepository

_logger = logging.getLogger(__name__)


class WeightRepository(Protocol):
    """Persistence interface for weight logs."""

    def list_logs(self, user_id: UUID) -> list[WeightLog]:
        """Return logs, newest first."""

    def get_log_for_day(self, user_id: UUID, day: date) -> WeightLog | None:
        """Return the log for a day, if present."""

    def create_log(self, user_id: UUID, day: date, weight_kg: float) -> WeightLog:
        """Insert and return a log.

        Raises WeightAlreadyLoggedError when the day already has an entry.
        """

    def update_log(self, user_id: UUID, log_id: UUID, weight_kg: float) -> None:
        """Update a log's weight."""

    def delete_log(self, user_id: UUID, log_id: UUID) -> None:
        """Delete a log."""


@dataclass
class WeightService:
    """Service for daily weigh-ins."""

    repository: WeightRepository
    profile_repository: ProfileRepository

    def list_logs(self, user_id: UUID) -> list[WeightLog]:
        """Return the user's weight history."""
        return self.repository.list_logs(user_id)

    def add_log(self, user_id: UUID, weight_kg: float, today: date) -> WeightLog:
        """Record today's weight. Only one entry per day is allowed."""
        if self.repository.get_log_for_day(user_id, today) is not None:
            raise WeightAlreadyLoggedError(f"Weight already logged for {today}")
        log = self.repository.create_log(user_id, today, weight_kg)
        _logger.info("Weight logged: user_id=%s day=%s", user_id, today)
        return log

    def update_log(self, user_id: UUID, log_id: UUID, weight_kg: float) -> None:
        """Change the weight on an existing entry."""
        self.repository.update_log(user_id, log_id, weight_kg)

    def delete_log(self, user_id: UUID, log_id: UUID) -> None:
        """Remove an entry."""
        self.repository.delete_log(user_id, log_id)

    def get_goal_weight(self, user_id: UUID) -> float | None:
        """Return the goal weight from the profile, if set."""
        profile = self.profile_repository.get_profile(user_id)
        if profile is None:
            return None
        return profile.goal_weight_kg
