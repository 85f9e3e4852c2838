"""
Search execution - unpaged rows, single-query pages, split data+count pages.
Challenge: Exact totals without returning a page whose content and total disagree.
Design: Statements are built (and validated) before the first await; the session is only read.
"""

import logging

from sqlalchemy import Select
from sqlalchemy.ext.asyncio import AsyncSession

from roster.core.exceptions import ConsistencyViolationError
from roster.db.search.query import count_statement, search_statement, windowed_statement
from roster.schemas.member import MemberSearchCondition, MemberTeamDto
from roster.schemas.page import Page, PageRequest

logger = logging.getLogger(__name__)


async def fetch_rows(session: AsyncSession, stmt: Select) -> list[MemberTeamDto]:
    """Run a projection statement and map every row."""
    result = await session.execute(stmt)
    return [MemberTeamDto.from_row(row) for row in result.all()]


async def fetch_count(session: AsyncSession, stmt: Select) -> int:
    result = await session.execute(stmt)
    return result.scalar_one()


async def fetch_page_simple(
    session: AsyncSession, condition: MemberSearchCondition, pageable: PageRequest
) -> Page[MemberTeamDto]:
    """Page and total from one windowed query.

    Every returned row carries the pre-LIMIT total. A page past the end has no
    rows to carry it, so only then (offset > 0, nothing returned) a count query runs.
    """
    stmt = windowed_statement(condition, pageable)
    result = await session.execute(stmt)
    rows = result.all()
    content = [MemberTeamDto.from_row(row) for row in rows]
    if rows:
        total = rows[0].total
    elif pageable.offset == 0:
        total = 0
    else:
        logger.debug("page %d past the end, counting separately", pageable.page)
        total = await fetch_count(session, count_statement(condition))
    return Page[MemberTeamDto](content=content, pageable=pageable, total=total)


async def fetch_page_split(
    session: AsyncSession, condition: MemberSearchCondition, pageable: PageRequest
) -> Page[MemberTeamDto]:
    """Page from a data query, total from a separate count(m.id) query."""
    data_stmt = search_statement(condition, pageable)
    count_stmt = count_statement(condition)
    content = await fetch_rows(session, data_stmt)
    total = await fetch_count(session, count_stmt)
    if len(content) > max(total - pageable.offset, 0):
        logger.warning(
            "split search inconsistent: %d rows at offset %d, total %d",
            len(content),
            pageable.offset,
            total,
        )
        raise ConsistencyViolationError(len(content), total, pageable.offset)
    return Page[MemberTeamDto](content=content, pageable=pageable, total=total)
