"""Shared endpoint dependencies: service factory and search query parameters."""

from typing import Annotated

from fastapi import Depends, Query

from roster.config import get_settings
from roster.db.repositories.member_repository import MemberRepository
from roster.db.repositories.team_repository import TeamRepository
from roster.db.session import DbSession
from roster.schemas.member import MemberSearchCondition
from roster.schemas.page import PageRequest
from roster.services.member_service import MemberService

settings = get_settings()


def get_member_service(session: DbSession) -> MemberService:
    """Factory for service with repository injection (Dependency Inversion)."""
    return MemberService(MemberRepository(session), TeamRepository(session))


def search_condition(
    username: str | None = None,
    team_name: str | None = None,
    age_goe: int | None = None,
    age_loe: int | None = None,
) -> MemberSearchCondition:
    return MemberSearchCondition(
        username=username, team_name=team_name, age_goe=age_goe, age_loe=age_loe
    )


def page_request(
    page: int = Query(0, ge=0),
    size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    sort: list[str] | None = Query(None),
) -> PageRequest:
    """REST: ?page=0&size=20&sort=age,desc&sort=username."""
    return PageRequest.of(page, size, *(sort or ()))


MemberServiceDep = Annotated[MemberService, Depends(get_member_service)]
ConditionDep = Annotated[MemberSearchCondition, Depends(search_condition)]
PageRequestDep = Annotated[PageRequest, Depends(page_request)]
