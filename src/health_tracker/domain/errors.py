"""Domain errors."""

from uuid import UUID


class HealthTrackerError(Exception):
    """Base class for application errors."""


class ProfileNotFoundError(HealthTrackerError):
    """Raised when an operation needs a profile the user has not created."""

    def __init__(self, user_id: UUID) -> None:
        super().__init__(f"No profile for user {user_id}")
        self.user_id = user_id


class WeightAlreadyLoggedError(HealthTrackerError):
    """Raised when a weight entry already exists for the day."""


class HabitNotFoundError(HealthTrackerError):
    """Raised when a habit does not exist or belongs to another user."""

    def __init__(self, habit_id: UUID) -> None:
        super().__init__(f"Habit {habit_id} not found")
        self.habit_id = habit_id
