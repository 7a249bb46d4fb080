"""Supabase Auth adapter for resolving access tokens."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from supabase import AuthError, Client

_logger = logging.getLogger(__name__)


class AuthGateway(Protocol):
    """Interface for resolving the user behind an access token."""

    def resolve_user_id(self, access_token: str) -> UUID | None:
        """Return the user id for a valid token, otherwise None."""


@dataclass
class SupabaseAuthGateway:
    """Resolve access tokens with Supabase Auth."""

    client: Client

    def resolve_user_id(self, access_token: str) -> UUID | None:
        """Validate the JWT with Supabase and return its user id."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError as exc:
            _logger.warning("Supabase rejected access token: %s", exc)
            return None
        if response is None or response.user is None:
            return None
        return UUID(response.user.id)
