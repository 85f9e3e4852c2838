"""
Team model - a named group of members. Names are not unique.
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roster.db.base import Base

if TYPE_CHECKING:
    from roster.db.models.member import Member


class Team(Base):
    """Team entity. One team has many members."""

    __tablename__ = "team"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # Read side only: membership is owned by Member.team
    members: Mapped[list["Member"]] = relationship(
        "Member", viewonly=True, order_by="Member.id"
    )

    def __init__(self, name: str, **kwargs):
        super().__init__(name=name, **kwargs)

    def __repr__(self) -> str:
        return f"<Team(id={self.id}, name={self.name})>"
