"""Request dependencies shared by the API routers."""

from fastapi import Request

from unicorn_api.app.core.config import Settings
from unicorn_api.app.services.unicorn_store import UnicornStore


def get_store(request: Request) -> UnicornStore:
    """Return the store owned by the running application."""
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
