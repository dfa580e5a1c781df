"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from user_lookup.adapters.supabase_user_repository import SupabaseUserRepository
from user_lookup.config import Settings
from user_lookup.services.users import UserLookupHandler


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_lookup_handler: UserLookupHandler


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    user_lookup_handler = UserLookupHandler(
        store=user_repository,
        default_user_id=resolved_settings.test_user_id,
    )
    return AppContainer(
        settings=resolved_settings,
        user_lookup_handler=user_lookup_handler,
    )
