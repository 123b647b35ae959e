"""Boundary Protocols — the contract the presentation layer may depend on.

Invariants:
    - Every method returns a Facility / None, or raises a core/errors.py kind
    - Lookups (get_by_name, get_by_id) return None on a miss, never NotFound
    - Mutations (update, delete) raise NotFound when the target is missing
    - Payloads and list options accept the schema model or a plain mapping

Design Decisions:
    - Protocol over ABC: structural subtyping, routes and tests can swap in fakes
    - Async in Protocol: implementations do IO
    - Model and schema types imported only under TYPE_CHECKING so core/ keeps
      no runtime dependency on models/ or schemas/
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from checkin.core.domain_types import FacilityId

if TYPE_CHECKING:
    from checkin.models.facility import Facility
    from checkin.schemas.facility import (
        FacilityCreate, FacilityListOptions, FacilityUpdate,
    )


class FacilityRepositoryLike(Protocol):
    """Contract for Facility persistence — implemented by repositories/."""
    async def list(
        self, options: FacilityListOptions | Mapping[str, Any] | None = None,
    ) -> list[Facility]: ...
    async def get_by_name(self, name: str) -> Facility | None: ...
    async def get_by_id(self, facility_id: FacilityId) -> Facility | None: ...
    async def create(
        self, data: FacilityCreate | Mapping[str, Any],
    ) -> Facility: ...
    async def update(
        self, facility_id: FacilityId, data: FacilityUpdate | Mapping[str, Any],
    ) -> Facility: ...
    async def delete(self, facility_id: FacilityId) -> Facility: ...
