"""Ban ORM — a date range during which a Guest may not check in.

Invariants:
    - Always belongs to a Facility and a Guest (both FKs ON DELETE CASCADE)
    - Natural order is from_date ascending
"""

from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from checkin.db.base import Base


class Ban(Base):
    """Ban of one Guest at one Facility."""
    __tablename__ = "bans"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    facility_id: Mapped[int] = mapped_column(
        ForeignKey("facilities.id", ondelete="CASCADE"), nullable=False,
    )
    guest_id: Mapped[int] = mapped_column(
        ForeignKey("guests.id", ondelete="CASCADE"), nullable=False,
    )
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    from_date: Mapped[date] = mapped_column(Date, nullable=False)
    to_date: Mapped[date] = mapped_column(Date, nullable=False)
    staff: Mapped[str | None] = mapped_column(String(255), nullable=True)
    comments: Mapped[str | None] = mapped_column(Text, nullable=True)

    facility: Mapped["Facility"] = relationship(  # type: ignore[name-defined]  # noqa: F821
        "Facility", back_populates="bans", lazy="raise",
    )
