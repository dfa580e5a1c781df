"""Supabase-backed user repository."""

import logging
from dataclasses import dataclass

from postgrest.exceptions import APIError
from supabase import Client

from user_lookup.domain.models import UserFound, UserLookupFailed, UserLookupResult
from user_lookup.services.users import UserStore

logger = logging.getLogger(__name__)


@dataclass
class SupabaseUserRepository(UserStore):
    """Supabase implementation for user lookups."""

    client: Client

    def find_by_id(self, user_id: str) -> UserLookupResult:
        """Return the single `users` row matching the id."""
        try:
            response = (
                self.client.table("users")
                .select("*")
                .eq("id", user_id)
                .single()
                .execute()
            )
        except APIError as exc:
            logger.exception("Supabase rejected lookup for user %s", user_id)
            return UserLookupFailed(message=exc.message or _describe(exc))
        except Exception as exc:
            logger.exception("Supabase lookup failed for user %s", user_id)
            return UserLookupFailed(message=_describe(exc))
        if not isinstance(response.data, dict):
            return UserLookupFailed(message=f"User {user_id} not found")
        return UserFound(record=response.data)


def _describe(exc: Exception) -> str:
    return str(exc) or type(exc).__name__
