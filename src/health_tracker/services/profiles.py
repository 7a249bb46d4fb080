"""Profile business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from health_tracker.domain.errors import ProfileNotFoundError
from health_tracker.domain.profile import ProfileForm, UserProfile

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the profile for a user, if present."""

    def create_profile(self, user_id: UUID, payload: dict[str, object]) -> UserProfile:
        """Insert and return a profile."""

    def update_profile(
        self, user_id: UUID, payload: dict[str, object]
    ) -> UserProfile | None:
        """Update a profile and return it, or None when no row matched."""


@dataclass
class ProfileService:
    """Application service for profile setup and edits."""

    repository: ProfileRepository

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's profile."""
        return self.repository.get_profile(user_id)

    def create_profile(self, user_id: UUID, form: ProfileForm) -> UserProfile:
        """Create the initial profile for a user."""
        profile = self.repository.create_profile(user_id, _form_payload(form))
        _logger.info("Profile created: user_id=%s", user_id)
        return profile

    def update_profile(self, user_id: UUID, form: ProfileForm) -> UserProfile:
        """Update an existing profile."""
        profile = self.repository.update_profile(user_id, _form_payload(form))
        if profile is None:
            raise ProfileNotFoundError(user_id)
        _logger.info("Profile updated: user_id=%s", user_id)
        return profile


def _form_payload(form: ProfileForm) -> dict[str, object]:
    return form.model_dump(mode="json")
