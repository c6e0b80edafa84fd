"""
Unicorn endpoints for API v1.

These routes expose CRUD operations and a multi-criterion search over
the application's ``UnicornStore``.  Service errors are translated
here: ``ValidationError`` -> 400, ``NotFoundError`` -> 404 and
``ConflictError`` -> 409.  Records are returned with ``vampires``
omitted when the count is unknown.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from unicorn_api.app.api.deps import get_store
from unicorn_api.app.core.errors import ConflictError, NotFoundError, ValidationError
from unicorn_api.app.schemas.unicorn import Unicorn, UnicornDeleted
from unicorn_api.app.services.query_engine import UnicornCriteria, filter_unicorns
from unicorn_api.app.services.unicorn_store import UnicornStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[Unicorn], response_model_exclude_none=True)
async def list_unicorns(
    name: Optional[str] = Query(None, description="Case-insensitive substring of the name"),
    loves: Optional[str] = Query(None, description="Comma-separated loves; all must match"),
    gender: Optional[str] = Query(None, description="m, f, male or female"),
    weight_greater_than: Optional[str] = Query(None, alias="weightGreaterThan"),
    weight_less_than: Optional[str] = Query(None, alias="weightLessThan"),
    vampires_exists: Optional[str] = Query(None, alias="vampiresExists"),
    vampires_greater_than: Optional[str] = Query(None, alias="vampiresGreaterThan"),
    vaccinated: Optional[str] = Query(None, description="true or false"),
    store: UnicornStore = Depends(get_store),
) -> List[Unicorn]:
    """Search unicorns.

    All supplied criteria must hold.  A criterion whose value cannot be
    parsed matches nothing, so the response is an empty list rather
    than an error.
    """
    criteria = UnicornCriteria.from_query(
        {
            "name": name,
            "loves": loves,
            "gender": gender,
            "weightGreaterThan": weight_greater_than,
            "weightLessThan": weight_less_than,
            "vampiresExists": vampires_exists,
            "vampiresGreaterThan": vampires_greater_than,
            "vaccinated": vaccinated,
        }
    )
    records = store.all()
    if criteria.is_empty:
        return records
    result = filter_unicorns(records, criteria)
    logger.debug("Search %s matched %d of %d unicorns", criteria, len(result), len(records))
    return result


@router.get("/{name}", response_model=Unicorn, response_model_exclude_none=True)
async def get_unicorn(name: str, store: UnicornStore = Depends(get_store)) -> Unicorn:
    """Retrieve a single unicorn by name (case-insensitive)."""
    try:
        return store.get(name)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unicorn not found") from e


@router.post(
    "",
    response_model=Unicorn,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_unicorn(
    payload: Dict[str, Any] = Body(...),
    store: UnicornStore = Depends(get_store),
) -> Unicorn:
    """Create a unicorn.

    ``name``, ``dob``, ``loves``, ``weight`` and ``gender`` are
    required; ``vaccinated`` defaults to true.
    """
    try:
        return store.create(payload)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e


@router.put("/{name}", response_model=Unicorn, response_model_exclude_none=True)
async def update_unicorn(
    name: str,
    payload: Dict[str, Any] = Body(...),
    store: UnicornStore = Depends(get_store),
) -> Unicorn:
    """Update an existing unicorn.

    Only the supplied fields change; the name cannot be changed.  Send
    ``"vampires": ""`` to clear the vampire count.
    """
    try:
        return store.update(name, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unicorn not found") from e
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.delete("/{name}", response_model=UnicornDeleted, response_model_exclude_none=True)
async def delete_unicorn(name: str, store: UnicornStore = Depends(get_store)) -> UnicornDeleted:
    """Delete a unicorn and return the removed record."""
    try:
        unicorn = store.delete(name)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unicorn not found") from e
    return UnicornDeleted(unicorn=unicorn)
