"""Domain models for user lookups."""

from dataclasses import dataclass

UserRecord = dict[str, object]


@dataclass(frozen=True)
class UserFound:
    """A lookup that matched exactly one row."""

    record: UserRecord


@dataclass(frozen=True)
class UserLookupFailed:
    """A lookup the store could not satisfy."""

    message: str


UserLookupResult = UserFound | UserLookupFailed


@dataclass(frozen=True)
class LookupResponse:
    """Status code and JSON body produced for a lookup request."""

    status_code: int
    body: dict[str, object]
