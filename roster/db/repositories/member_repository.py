"""
Member repository - keyed retrieval plus dynamic search (SOLID: Single Responsibility).
Challenge: One condition object drives three query shapes: list, single-query page, split page.
Design: Validation happens before the session is touched; persistence errors propagate unchanged.
"""

import logging

from sqlalchemy import select

from roster.core.exceptions import InvalidInputError
from roster.db.models.member import Member
from roster.db.repositories.base_repository import BaseRepository
from roster.db.search.pagination import fetch_page_simple, fetch_page_split, fetch_rows
from roster.db.search.query import order_by_clauses, search_statement
from roster.schemas.member import MemberSearchCondition, MemberTeamDto
from roster.schemas.page import Page, PageRequest

logger = logging.getLogger(__name__)


def _validate(condition: MemberSearchCondition, pageable: PageRequest | None = None) -> None:
    if condition is None:
        raise InvalidInputError("search condition is required")
    if not isinstance(condition, MemberSearchCondition):
        raise InvalidInputError(
            f"expected MemberSearchCondition, got {type(condition).__name__}"
        )
    if pageable is not None:
        if not isinstance(pageable, PageRequest):
            raise InvalidInputError(f"expected PageRequest, got {type(pageable).__name__}")
        order_by_clauses(pageable)  # rejects unknown sort properties


class MemberRepository(BaseRepository[Member]):
    """Member CRUD and search over member LEFT JOIN team."""

    def __init__(self, session):
        super().__init__(session, Member)

    async def find_by_username(self, username: str) -> list[Member]:
        result = await self.session.execute(
            select(Member).where(Member.username == username).order_by(Member.id)
        )
        return list(result.scalars().all())

    async def search(self, condition: MemberSearchCondition) -> list[MemberTeamDto]:
        """All matching rows, unpaged, in member id order."""
        _validate(condition)
        logger.debug("search condition=%s", condition)
        return await fetch_rows(self.session, search_statement(condition))

    async def search_simple(
        self, condition: MemberSearchCondition, pageable: PageRequest
    ) -> Page[MemberTeamDto]:
        """Page with total computed in the same query (window count)."""
        if pageable is None:
            raise InvalidInputError("pageable is required")
        _validate(condition, pageable)
        logger.debug("search_simple condition=%s pageable=%s", condition, pageable)
        return await fetch_page_simple(self.session, condition, pageable)

    async def search_complex(
        self, condition: MemberSearchCondition, pageable: PageRequest
    ) -> Page[MemberTeamDto]:
        """Page with total from a separate count query."""
        if pageable is None:
            raise InvalidInputError("pageable is required")
        _validate(condition, pageable)
        logger.debug("search_complex condition=%s pageable=%s", condition, pageable)
        return await fetch_page_split(self.session, condition, pageable)
