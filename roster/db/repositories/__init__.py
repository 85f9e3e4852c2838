# Repository pattern: abstract data access (SOLID - Dependency Inversion)

from roster.db.repositories.member_repository import MemberRepository
from roster.db.repositories.team_repository import TeamRepository

__all__ = ["MemberRepository", "TeamRepository"]
