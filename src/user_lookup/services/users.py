"""User lookup business logic."""

from dataclasses import dataclass
from typing import Protocol

from user_lookup.config import normalize_user_id
from user_lookup.domain.models import LookupResponse, UserFound, UserLookupResult

USER_ID_REQUIRED = "userId required"


class UserStore(Protocol):
    """Read interface for user rows."""

    def find_by_id(self, user_id: str) -> UserLookupResult:
        """Return the single user row for an id, or a failure."""


@dataclass
class UserLookupHandler:
    """Map a requested user id to a lookup response."""

    store: UserStore
    default_user_id: str | None = None

    def resolve_user_id(self, requested: str | None) -> str | None:
        """Return the requested id, falling back to the configured default."""
        return normalize_user_id(requested) or normalize_user_id(self.default_user_id)

    def handle(self, requested: str | None) -> LookupResponse:
        """Look up a user and build the response status and body."""
        user_id = self.resolve_user_id(requested)
        if user_id is None:
            return LookupResponse(status_code=400, body={"error": USER_ID_REQUIRED})

        result = self.store.find_by_id(user_id)
        if isinstance(result, UserFound):
            return LookupResponse(
                status_code=200, body={"success": True, "data": result.record}
            )
        return LookupResponse(
            status_code=500, body={"success": False, "error": result.message}
        )
