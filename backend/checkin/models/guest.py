"""Guest ORM — a person who checks in at a Facility.

Invariants:
    - Always belongs to a Facility (facility_id FK, ON DELETE CASCADE)
    - Natural order is last_name, first_name
"""

from sqlalchemy import Boolean, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from checkin.db.base import Base


class Guest(Base):
    """Guest known to a single Facility."""
    __tablename__ = "guests"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    facility_id: Mapped[int] = mapped_column(
        ForeignKey("facilities.id", ondelete="CASCADE"), nullable=False,
    )
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    favorite: Mapped[str | None] = mapped_column(String(255), nullable=True)
    comments: Mapped[str | None] = mapped_column(Text, nullable=True)

    facility: Mapped["Facility"] = relationship(  # type: ignore[name-defined]  # noqa: F821
        "Facility", back_populates="guests", lazy="raise",
    )
