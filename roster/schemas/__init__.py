from roster.schemas.member import (
    MemberCreate,
    MemberResponse,
    MemberSearchCondition,
    MemberTeamDto,
    TeamCreate,
    TeamResponse,
)
from roster.schemas.page import Direction, Order, Page, PageRequest

__all__ = [
    "Direction",
    "MemberCreate",
    "MemberResponse",
    "MemberSearchCondition",
    "MemberTeamDto",
    "Order",
    "Page",
    "PageRequest",
    "TeamCreate",
    "TeamResponse",
]
