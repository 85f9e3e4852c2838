"""
Member service - use cases over member/team repositories (SOLID: Single Responsibility).
Challenge: Keep controllers thin; time every search mode.
Design: Service depends on repositories only; errors pass through after being counted.
"""

import logging
from contextlib import contextmanager

from roster.core.exceptions import InvalidInputError
from roster.db.models import Member, Team
from roster.db.repositories.member_repository import MemberRepository
from roster.db.repositories.team_repository import TeamRepository
from roster.metrics import SEARCH_ERRORS, SEARCH_LATENCY
from roster.schemas.member import (
    MemberCreate,
    MemberResponse,
    MemberSearchCondition,
    MemberTeamDto,
    TeamCreate,
    TeamResponse,
)
from roster.schemas.page import Page, PageRequest

logger = logging.getLogger(__name__)


@contextmanager
def _observed(mode: str):
    """Record latency for a search mode and count failures by exception type."""
    with SEARCH_LATENCY.labels(mode=mode).time():
        try:
            yield
        except Exception as exc:
            SEARCH_ERRORS.labels(mode=mode, error=type(exc).__name__).inc()
            raise


class MemberService:
    """Member/team creation and the three search modes."""

    def __init__(self, member_repo: MemberRepository, team_repo: TeamRepository):
        self.member_repo = member_repo
        self.team_repo = team_repo

    async def create_team(self, data: TeamCreate) -> TeamResponse:
        team = await self.team_repo.add(Team(data.name))
        return TeamResponse.model_validate(team)

    async def list_teams(self) -> list[TeamResponse]:
        return [TeamResponse.model_validate(t) for t in await self.team_repo.get_all()]

    async def create_member(self, data: MemberCreate) -> MemberResponse:
        """Create member, optionally in an existing team."""
        team = None
        if data.team_id is not None:
            team = await self.team_repo.get_by_id(data.team_id)
            if team is None:
                raise InvalidInputError(f"team {data.team_id} does not exist")
        member = await self.member_repo.add(Member(data.username, data.age, team))
        logger.info("created member id=%s team_id=%s", member.id, member.team_id)
        return MemberResponse.model_validate(member)

    async def get_member(self, id: int) -> MemberResponse | None:
        member = await self.member_repo.get_by_id(id)
        return MemberResponse.model_validate(member) if member else None

    async def search(self, condition: MemberSearchCondition) -> list[MemberTeamDto]:
        with _observed("list"):
            return await self.member_repo.search(condition)

    async def search_simple(
        self, condition: MemberSearchCondition, pageable: PageRequest
    ) -> Page[MemberTeamDto]:
        with _observed("simple"):
            return await self.member_repo.search_simple(condition, pageable)

    async def search_complex(
        self, condition: MemberSearchCondition, pageable: PageRequest
    ) -> Page[MemberTeamDto]:
        with _observed("split"):
            return await self.member_repo.search_complex(condition, pageable)
