"""ORM Models — SQLAlchemy declarative models for the check-in schema.

Invariants:
    - All models inherit from Base (db/base.py)
    - Facility is the aggregate root; every child is scoped by facility_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from checkin.models.facility import Facility  # noqa: F401
from checkin.models.guest import Guest  # noqa: F401
from checkin.models.ban import Ban  # noqa: F401
from checkin.models.template import Template  # noqa: F401
from checkin.models.checkin import Checkin  # noqa: F401
