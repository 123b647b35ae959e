"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - FacilityId wraps the integer surrogate key — immutable once assigned
    - Every includable child collection is named by FacilityRelation

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: values double as ORM relationship attribute names
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

FacilityId = NewType("FacilityId", int)


# ─── Enums ───────────────────────────────────────────────────────

class FacilityRelation(str, Enum):
    """Child collections of a Facility that can be eager-loaded."""
    BANS = "bans"
    TEMPLATES = "templates"
    GUESTS = "guests"
    CHECKINS = "checkins"
