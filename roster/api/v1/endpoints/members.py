"""
Member endpoints - creation, lookup, and the three search modes.
Design: Thin controller; repository holds the query logic.
"""

from fastapi import APIRouter, HTTPException, status

from roster.api.v1.endpoints.deps import ConditionDep, MemberServiceDep, PageRequestDep
from roster.schemas.member import MemberCreate, MemberResponse, MemberTeamDto
from roster.schemas.page import Page

router = APIRouter()


@router.get("/search", response_model=list[MemberTeamDto])
async def search_members(svc: MemberServiceDep, condition: ConditionDep):
    """Unpaged search. GET /members/search?team_name=team1&age_goe=10."""
    return await svc.search(condition)


@router.get("/search/simple", response_model=Page[MemberTeamDto])
async def search_members_simple(
    svc: MemberServiceDep, condition: ConditionDep, pageable: PageRequestDep
):
    """Paged search, total from the same query."""
    return await svc.search_simple(condition, pageable)


@router.get("/search/complex", response_model=Page[MemberTeamDto])
async def search_members_complex(
    svc: MemberServiceDep, condition: ConditionDep, pageable: PageRequestDep
):
    """Paged search, total from a separate count query."""
    return await svc.search_complex(condition, pageable)


@router.post("", response_model=MemberResponse, status_code=status.HTTP_201_CREATED)
async def create_member(svc: MemberServiceDep, data: MemberCreate):
    return await svc.create_member(data)


@router.get("/{member_id}", response_model=MemberResponse)
async def get_member(svc: MemberServiceDep, member_id: int):
    member = await svc.get_member(member_id)
    if not member:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Member not found")
    return member
