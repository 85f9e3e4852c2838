"""
Team repository - team lookups. Names are not unique, so name lookup returns a list.
"""

from sqlalchemy import select

from roster.db.models.team import Team
from roster.db.repositories.base_repository import BaseRepository


class TeamRepository(BaseRepository[Team]):
    def __init__(self, session):
        super().__init__(session, Team)

    async def find_by_name(self, name: str) -> list[Team]:
        result = await self.session.execute(select(Team).where(Team.name == name).order_by(Team.id))
        return list(result.scalars().all())
