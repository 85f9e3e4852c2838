"""Team endpoints - create and list."""

from fastapi import APIRouter, status

from roster.api.v1.endpoints.deps import MemberServiceDep
from roster.schemas.member import TeamCreate, TeamResponse

router = APIRouter()


@router.get("", response_model=list[TeamResponse])
async def list_teams(svc: MemberServiceDep):
    return await svc.list_teams()


@router.post("", response_model=TeamResponse, status_code=status.HTTP_201_CREATED)
async def create_team(svc: MemberServiceDep, data: TeamCreate):
    return await svc.create_team(data)
