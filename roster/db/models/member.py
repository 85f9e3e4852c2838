"""
Member model - belongs to at most one team.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import CheckConstraint, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roster.db.base import Base

if TYPE_CHECKING:
    from roster.db.models.team import Team


class Member(Base):
    """Member entity. team_id is nullable: a member may exist without a team."""

    __tablename__ = "member"
    __table_args__ = (CheckConstraint("age >= 0", name="ck_member_age_non_negative"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    username: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)
    age: Mapped[int] = mapped_column(nullable=False, default=0)
    team_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("team.id"), nullable=True, index=True
    )

    # Many-to-one; the search count query depends on this staying to-one
    team: Mapped[Optional["Team"]] = relationship("Team")

    def __init__(self, username: str | None, age: int = 0, team: "Team | None" = None, **kwargs):
        super().__init__(username=username, age=age, **kwargs)
        if team is not None:
            self.change_team(team)

    def change_team(self, team: "Team") -> None:
        """Move member to team. Team.members is read-only and picks this up when next loaded."""
        self.team = team

    def __repr__(self) -> str:
        return f"<Member(id={self.id}, username={self.username}, age={self.age})>"
