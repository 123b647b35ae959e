"""Facility Schemas — Pydantic models for payloads, list options and responses.

Invariants:
    - FacilityCreate.name: 1-255 chars, stripped, non-empty
    - FacilityUpdate accepts an id field but it never reaches storage
    - FacilityUpdate rejects an explicit null for non-nullable columns
    - Input models forbid unknown keys: a misspelled field is an error, not a no-op
    - FacilityResponse only carries child collections that were loaded

Design Decisions:
    - exclude_unset on FacilityUpdate: a field the caller did not send is not written
    - Absent relations are left unset (not []) so exclude_unset drops them from JSON
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from sqlalchemy import inspect as sa_inspect

from checkin.core.domain_types import FacilityRelation

_FACILITY_COLUMNS = (
    "id", "name", "active", "address1", "address2",
    "city", "state", "zip_code", "email", "phone",
)


class FacilityCreate(BaseModel):
    """Facility creation payload."""
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, max_length=255)
    active: bool = True
    address1: str | None = Field(None, max_length=255)
    address2: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=255)
    state: str | None = Field(None, max_length=50)
    zip_code: str | None = Field(None, max_length=20)
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=50)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class FacilityUpdate(BaseModel):
    """Partial Facility update — only fields explicitly sent are written."""
    model_config = ConfigDict(extra="forbid")

    id: int | None = None  # accepted for form round-trips, always overridden
    name: str | None = Field(None, min_length=1, max_length=255)
    active: bool | None = None
    address1: str | None = Field(None, max_length=255)
    address2: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=255)
    state: str | None = Field(None, max_length=50)
    zip_code: str | None = Field(None, max_length=20)
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=50)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        for name in ("name", "active"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class FacilityListOptions(BaseModel):
    """Filters, pagination and relation inclusion for FacilityRepository.list()."""
    model_config = ConfigDict(extra="forbid")

    active: bool | None = None
    name: str | None = Field(None, max_length=255)
    skip: int | None = Field(None, ge=0)
    take: int | None = Field(None, ge=1)
    with_bans: bool = False
    with_templates: bool = False
    with_guests: bool = False
    with_checkins: bool = False

    def included_relations(self) -> list[FacilityRelation]:
        return [
            relation for relation in FacilityRelation
            if getattr(self, f"with_{relation.value}")
        ]


# --- Responses ----------------------------------------------------------------

class BanResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    facility_id: int
    guest_id: int
    active: bool
    from_date: date
    to_date: date
    staff: str | None = None
    comments: str | None = None


class TemplateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    facility_id: int
    name: str
    active: bool
    comments: str | None = None
    all_mats: str
    handicap_mats: str | None = None
    socket_mats: str | None = None
    work_mats: str | None = None


class GuestResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    facility_id: int
    first_name: str
    last_name: str
    active: bool
    favorite: str | None = None
    comments: str | None = None


class CheckinResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    facility_id: int
    guest_id: int | None = None
    checkin_date: date
    mat_number: int
    features: str | None = None
    payment_amount: Decimal | None = None
    payment_type: str | None = None
    shower_time: str | None = None
    wakeup_time: str | None = None


class FacilityResponse(BaseModel):
    """Facility response — child collections present only when loaded."""
    id: int
    name: str
    active: bool
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    email: str | None = None
    phone: str | None = None

    bans: list[BanResponse] | None = None
    templates: list[TemplateResponse] | None = None
    guests: list[GuestResponse] | None = None
    checkins: list[CheckinResponse] | None = None

    @classmethod
    def from_model(cls, facility) -> "FacilityResponse":
        """Build from an ORM Facility without triggering any lazy load."""
        unloaded = sa_inspect(facility).unloaded
        data = {column: getattr(facility, column) for column in _FACILITY_COLUMNS}
        for relation in FacilityRelation:
            if relation.value not in unloaded:
                data[relation.value] = getattr(facility, relation.value)
        return cls.model_validate(data, from_attributes=True)
