"""Checkin ORM — one mat assignment at a Facility on a given date.

Invariants:
    - Always belongs to a Facility (facility_id FK, ON DELETE CASCADE)
    - guest_id is nullable: an unassigned mat is still a Checkin row
    - Natural order is checkin_date, mat_number
"""

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from checkin.db.base import Base


class Checkin(Base):
    """Mat assignment for one night."""
    __tablename__ = "checkins"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    facility_id: Mapped[int] = mapped_column(
        ForeignKey("facilities.id", ondelete="CASCADE"), nullable=False,
    )
    guest_id: Mapped[int | None] = mapped_column(
        ForeignKey("guests.id", ondelete="SET NULL"), nullable=True,
    )
    checkin_date: Mapped[date] = mapped_column(Date, nullable=False)
    mat_number: Mapped[int] = mapped_column(Integer, nullable=False)
    features: Mapped[str | None] = mapped_column(String(50), nullable=True)
    payment_amount: Mapped[Decimal | None] = mapped_column(
        Numeric(5, 2), nullable=True,
    )
    payment_type: Mapped[str | None] = mapped_column(String(10), nullable=True)
    shower_time: Mapped[str | None] = mapped_column(String(10), nullable=True)
    wakeup_time: Mapped[str | None] = mapped_column(String(10), nullable=True)

    facility: Mapped["Facility"] = relationship(  # type: ignore[name-defined]  # noqa: F821
        "Facility", back_populates="checkins", lazy="raise",
    )
