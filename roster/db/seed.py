"""
Demo roster: two teams, four members, persisted in a fixed order.
Used by tests and by the app when SEED_DEMO_DATA is set.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from roster.db.models import Member, Team

logger = logging.getLogger(__name__)


async def seed_demo_roster(session: AsyncSession) -> tuple[list[Team], list[Member]]:
    """Persist team1/team2 and member1..member4 (ages 10..40). Caller commits."""
    team1 = Team("team1")
    team2 = Team("team2")
    session.add_all([team1, team2])
    await session.flush()

    members = [
        Member("member1", 10, team1),
        Member("member2", 20, team1),
        Member("member3", 30, team2),
        Member("member4", 40, team2),
    ]
    # One flush per member keeps ids in the listed order
    for m in members:
        session.add(m)
        await session.flush()
    logger.info("seeded %d teams and %d members", 2, len(members))
    return [team1, team2], members
