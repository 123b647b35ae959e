"""Facility Repository — validated, uniqueness-aware persistence for Facility rows.

Invariants:
    - Every public operation raises only BadRequest, NotFound, NotUnique or ServerError
    - name uniqueness is checked before create/update (advisory) AND enforced by
      the storage unique constraint; both paths surface as NotUnique
    - update() never writes an id other than the target id
    - update()/delete() on a missing id raise NotFound and write nothing
    - Child rows are removed by the storage cascade, never by this module

Design Decisions:
    - Storage client injected at construction: no global lookup, tests pass a
      SQLite-backed DatabaseSessionManager
    - One session per operation: check and write are separate round-trips
      (no multi-statement transaction), so the unique constraint is the final word
    - Queries built from a fresh select() per call: options never mutate a shared template
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError
from sqlalchemy import Select, delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import selectinload

from checkin.core.domain_types import FacilityId
from checkin.core.errors import BadRequest, NotFound, NotUnique, ServerError
from checkin.infrastructure.database import DatabaseSessionManager
from checkin.models.facility import Facility
from checkin.schemas.facility import (
    FacilityCreate, FacilityListOptions, FacilityUpdate,
)

logger = logging.getLogger(__name__)

_UNIQUE_VIOLATION_SQLSTATE = "23505"


def _is_unique_violation(error: IntegrityError) -> bool:
    """Recognise a unique-constraint failure across drivers."""
    orig = error.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate == _UNIQUE_VIOLATION_SQLSTATE:
        return True
    return "unique" in str(orig).lower()


def _coerce(model: type[BaseModel], data: Any, operation: str) -> Any:
    """Validate a mapping into `model`; pass instances through untouched."""
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(loc) for loc in first["loc"]) or None
        raise BadRequest(
            f"Invalid {model.__name__}: {first['msg']}", operation, field,
        ) from e


def build_list_query(options: FacilityListOptions) -> Select:
    """Compose the list() query — only supplied filters become predicates."""
    query = select(Facility)
    if options.active is not None:
        query = query.where(Facility.active == options.active)
    if options.name is not None:
        query = query.where(
            Facility.name.icontains(options.name, autoescape=True),
        )
    query = query.order_by(Facility.name.asc())
    if options.skip is not None:
        query = query.offset(options.skip)
    if options.take is not None:
        query = query.limit(options.take)
    for relation in options.included_relations():
        query = query.options(
            selectinload(getattr(Facility, relation.value)),
        )
    return query


class FacilityRepository:
    """Facility data-access operations over an injected storage client."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def list(
        self, options: FacilityListOptions | Mapping[str, Any] | None = None,
    ) -> list[Facility]:
        """Return Facilities ordered by name, filtered and paginated per options.

        Relations not requested stay unloaded (absent); requested ones are
        loaded in their natural order, empty collections included.
        """
        context = "FacilityRepository.list"
        options = _coerce(FacilityListOptions, options or {}, context)
        logger.info(context, extra={
            "context": context,
            "options": options.model_dump(exclude_defaults=True),
        })
        try:
            async with self._db.session() as session:
                result = await session.execute(build_list_query(options))
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise ServerError(e, context) from e

    async def get_by_name(self, name: str) -> Facility | None:
        """Exact, case-sensitive lookup. None on a miss."""
        context = "FacilityRepository.get_by_name"
        logger.info(context, extra={"context": context, "facility_name": name})
        try:
            async with self._db.session() as session:
                result = await session.execute(
                    select(Facility).where(Facility.name == name),
                )
                return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise ServerError(e, context) from e

    async def get_by_id(self, facility_id: FacilityId) -> Facility | None:
        """Lookup by surrogate id. None on a miss."""
        context = "FacilityRepository.get_by_id"
        logger.info(context, extra={"context": context, "facility_id": facility_id})
        try:
            async with self._db.session() as session:
                return await session.get(Facility, facility_id)
        except SQLAlchemyError as e:
            raise ServerError(e, context) from e

    async def create(
        self, data: FacilityCreate | Mapping[str, Any],
    ) -> Facility:
        """Insert a new Facility after an advisory name check."""
        context = "FacilityRepository.create"
        payload = _coerce(FacilityCreate, data, context)
        logger.info(context, extra={
            "context": context, "facility_name": payload.name,
        })

        if await self.get_by_name(payload.name) is not None:
            raise NotUnique(
                f"Facility name '{payload.name}' is already in use", context,
            )

        try:
            async with self._db.session() as session:
                facility = Facility(**payload.model_dump())
                session.add(facility)
                await session.commit()
                return facility
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise NotUnique(
                    f"Facility name '{payload.name}' is already in use", context,
                ) from e
            raise ServerError(e, context) from e
        except SQLAlchemyError as e:
            raise ServerError(e, context) from e

    async def update(
        self, facility_id: FacilityId, data: FacilityUpdate | Mapping[str, Any],
    ) -> Facility:
        """Write the supplied fields to an existing Facility."""
        context = "FacilityRepository.update"
        payload = _coerce(FacilityUpdate, data, context)
        values = payload.model_dump(exclude_unset=True)
        logger.info(context, extra={"context": context, "facility_id": facility_id})

        if await self.get_by_id(facility_id) is None:
            raise NotFound(f"Missing Facility '{facility_id}'", context)
        if values.get("name") is not None:
            existing = await self.get_by_name(values["name"])
            if existing is not None and existing.id != facility_id:
                raise NotUnique(
                    f"Facility name '{values['name']}' is already in use", context,
                )

        values["id"] = facility_id
        try:
            async with self._db.session() as session:
                result = await session.execute(
                    update(Facility)
                    .where(Facility.id == facility_id)
                    .values(**values)
                    .returning(Facility),
                )
                facility = result.scalar_one_or_none()
                await session.commit()
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise NotUnique(
                    f"Facility name '{values.get('name')}' is already in use",
                    context,
                ) from e
            raise ServerError(e, context) from e
        except SQLAlchemyError as e:
            raise ServerError(e, context) from e

        if facility is None:
            # removed between the existence check and the write
            raise NotFound(f"Missing Facility '{facility_id}'", context)
        return facility

    async def delete(self, facility_id: FacilityId) -> Facility:
        """Remove a Facility (children cascade in storage); return it as it was."""
        context = "FacilityRepository.delete"
        logger.info(context, extra={"context": context, "facility_id": facility_id})

        if await self.get_by_id(facility_id) is None:
            raise NotFound(f"Missing Facility '{facility_id}'", context)

        try:
            async with self._db.session() as session:
                result = await session.execute(
                    delete(Facility)
                    .where(Facility.id == facility_id)
                    .returning(Facility),
                )
                facility = result.scalar_one_or_none()
                await session.commit()
        except SQLAlchemyError as e:
            raise ServerError(e, context) from e

        if facility is None:
            raise NotFound(f"Missing Facility '{facility_id}'", context)
        return facility
