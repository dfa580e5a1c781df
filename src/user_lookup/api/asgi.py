"""ASGI entrypoint for the user lookup API."""

from user_lookup.api.app import create_app
from user_lookup.containers import build_container

app = create_app(build_container())
