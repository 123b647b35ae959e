"""Facility ORM — the parent entity representing a physical check-in site.

Invariants:
    - id is an integer surrogate key, never rewritten after insert
    - name is globally unique (case-sensitive at the storage layer)
    - Children (bans, templates, guests, checkins) are removed by the
      database ON DELETE CASCADE rule, not by ORM cascade

Design Decisions:
    - lazy="raise" on every child relationship: an unrequested relation stays
      absent instead of being loaded behind the caller's back
    - order_by on each relationship: eager-loaded children come back in
      their natural order without per-query ordering
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from checkin.db.base import Base


class Facility(Base):
    """Facility aggregate root — owns bans, templates, guests and checkins."""
    __tablename__ = "facilities"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    address1: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address2: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str | None] = mapped_column(String(255), nullable=True)
    state: Mapped[str | None] = mapped_column(String(50), nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)

    # Relationships
    bans: Mapped[list["Ban"]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        "Ban", back_populates="facility", order_by="Ban.from_date",
        cascade="all, delete-orphan", passive_deletes=True, lazy="raise",
    )
    templates: Mapped[list["Template"]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        "Template", back_populates="facility", order_by="Template.name",
        cascade="all, delete-orphan", passive_deletes=True, lazy="raise",
    )
    guests: Mapped[list["Guest"]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        "Guest", back_populates="facility",
        order_by="[Guest.last_name, Guest.first_name]",
        cascade="all, delete-orphan", passive_deletes=True, lazy="raise",
    )
    checkins: Mapped[list["Checkin"]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        "Checkin", back_populates="facility",
        order_by="[Checkin.checkin_date, Checkin.mat_number]",
        cascade="all, delete-orphan", passive_deletes=True, lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Facility {self.id} {self.name!r}>"
