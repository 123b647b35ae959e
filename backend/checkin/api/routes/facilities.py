"""Facility Routes — HTTP surface over FacilityRepository.

Invariants:
    - Routes hold no business logic; uniqueness and existence rules live in the repository
    - Taxonomy errors propagate to the global handlers (error_handlers.py)
    - Relations not requested are omitted from the JSON (response_model_exclude_unset)
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from checkin.core.errors import NotFound
from checkin.core.repository_protocols import FacilityRepositoryLike
from checkin.infrastructure.database import DatabaseSessionManager, get_db_manager
from checkin.repositories.facility_repository import FacilityRepository
from checkin.schemas.facility import (
    FacilityCreate, FacilityListOptions, FacilityResponse, FacilityUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/facilities", tags=["facilities"])


def get_facility_repository(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> FacilityRepositoryLike:
    return FacilityRepository(db)


@router.get(
    "", response_model=list[FacilityResponse],
    response_model_exclude_unset=True,
)
async def list_facilities(
    active: bool | None = Query(None),
    name: str | None = Query(None, max_length=255),
    skip: int | None = Query(None, ge=0),
    take: int | None = Query(None, ge=1, le=1000),
    with_bans: bool = Query(False, alias="withBans"),
    with_templates: bool = Query(False, alias="withTemplates"),
    with_guests: bool = Query(False, alias="withGuests"),
    with_checkins: bool = Query(False, alias="withCheckins"),
    repo: FacilityRepositoryLike = Depends(get_facility_repository),
):
    """List facilities ordered by name."""
    options = FacilityListOptions(
        active=active, name=name, skip=skip, take=take,
        with_bans=with_bans, with_templates=with_templates,
        with_guests=with_guests, with_checkins=with_checkins,
    )
    facilities = await repo.list(options)
    return [FacilityResponse.from_model(f) for f in facilities]


@router.get(
    "/exact/{name}", response_model=FacilityResponse,
    response_model_exclude_unset=True,
)
async def get_facility_by_name(
    name: str, repo: FacilityRepositoryLike = Depends(get_facility_repository),
):
    """Get a facility by exact (case-sensitive) name."""
    facility = await repo.get_by_name(name)
    if facility is None:
        raise NotFound(f"Missing Facility '{name}'", "routes.get_facility_by_name")
    return FacilityResponse.from_model(facility)


@router.get(
    "/{facility_id}", response_model=FacilityResponse,
    response_model_exclude_unset=True,
)
async def get_facility(
    facility_id: int,
    repo: FacilityRepositoryLike = Depends(get_facility_repository),
):
    """Get a facility by id."""
    facility = await repo.get_by_id(facility_id)
    if facility is None:
        raise NotFound(f"Missing Facility '{facility_id}'", "routes.get_facility")
    return FacilityResponse.from_model(facility)


@router.post(
    "", response_model=FacilityResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_facility(
    body: FacilityCreate,
    repo: FacilityRepositoryLike = Depends(get_facility_repository),
):
    """Create a facility; 400 when the name is taken."""
    facility = await repo.create(body)
    logger.info(f"Created facility {facility.id}", extra={"facility_id": facility.id})
    return FacilityResponse.from_model(facility)


@router.put(
    "/{facility_id}", response_model=FacilityResponse,
    response_model_exclude_unset=True,
)
async def update_facility(
    facility_id: int,
    body: FacilityUpdate,
    repo: FacilityRepositoryLike = Depends(get_facility_repository),
):
    """Update the fields sent in the body; any id in the body is ignored."""
    facility = await repo.update(facility_id, body)
    return FacilityResponse.from_model(facility)


@router.delete(
    "/{facility_id}", response_model=FacilityResponse,
    response_model_exclude_unset=True,
)
async def delete_facility(
    facility_id: int,
    repo: FacilityRepositoryLike = Depends(get_facility_repository),
):
    """Delete a facility and (via storage cascade) all of its children."""
    facility = await repo.delete(facility_id)
    logger.info(f"Deleted facility {facility_id}", extra={"facility_id": facility_id})
    return FacilityResponse.from_model(facility)
