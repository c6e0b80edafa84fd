"""
Information endpoint for API v1.

Returns a short liveness message together with the API version and the
number of unicorns currently stored.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from unicorn_api.app.api.deps import get_settings, get_store
from unicorn_api.app.core.config import Settings
from unicorn_api.app.services.unicorn_store import UnicornStore

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def get_info(
    store: UnicornStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Report that the API is running."""
    return {
        "message": "Unicorn API is running!",
        "version": settings.api_version,
        "count": len(store),
    }
