from roster.db.models.member import Member
from roster.db.models.team import Team

__all__ = ["Member", "Team"]
