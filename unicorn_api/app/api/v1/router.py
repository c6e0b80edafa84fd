"""
Top‑level router for version 1 of the API.

The info router answers on ``/`` and the unicorn CRUD routes live
under ``/unicorns``.
"""

from fastapi import APIRouter

from .endpoints import info, unicorns

router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(unicorns.router, prefix="/unicorns", tags=["unicorns"])
