"""Template ORM — a named layout of mats available at a Facility.

Invariants:
    - Always belongs to a Facility (facility_id FK, ON DELETE CASCADE)
    - name is unique within its Facility
    - Mat lists are stored as comma-separated ranges ("1-10,12")
"""

from sqlalchemy import Boolean, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from checkin.db.base import Base


class Template(Base):
    """Mat layout template for one Facility."""
    __tablename__ = "templates"
    __table_args__ = (
        UniqueConstraint("facility_id", "name", name="uq_templates_facility_name"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    facility_id: Mapped[int] = mapped_column(
        ForeignKey("facilities.id", ondelete="CASCADE"), nullable=False,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    comments: Mapped[str | None] = mapped_column(Text, nullable=True)
    all_mats: Mapped[str] = mapped_column(String(255), nullable=False)
    handicap_mats: Mapped[str | None] = mapped_column(String(255), nullable=True)
    socket_mats: Mapped[str | None] = mapped_column(String(255), nullable=True)
    work_mats: Mapped[str | None] = mapped_column(String(255), nullable=True)

    facility: Mapped["Facility"] = relationship(  # type: ignore[name-defined]  # noqa: F821
        "Facility", back_populates="templates", lazy="raise",
    )
