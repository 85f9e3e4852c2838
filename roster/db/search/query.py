"""
Search statements - fixed member LEFT JOIN team shape, dynamic WHERE, optional window.
Challenge: Data and count queries must share predicates and join so totals match content.
"""

from sqlalchemy import Select, func, inspect, select

from roster.core.exceptions import InvalidInputError
from roster.db.models import Member
from roster.db.search.aliases import member, team
from roster.db.search.predicates import all_of, condition_predicates
from roster.schemas.member import MemberSearchCondition
from roster.schemas.page import Direction, PageRequest

# Properties a caller may sort by -> column expressions
SORTABLE_COLUMNS = {
    "member_id": member.id,
    "username": member.username,
    "age": member.age,
    "team_id": team.id,
    "team_name": team.name,
}


def projection_columns() -> tuple:
    """Columns in MemberTeamDto.from_row order."""
    return (
        member.id.label("member_id"),
        member.username,
        member.age,
        team.id.label("team_id"),
        team.name.label("team_name"),
    )


def _from_member_join_team(*columns) -> Select:
    return select(*columns).select_from(member).outerjoin(team, member.team_id == team.id)


def filtered(stmt: Select, condition: MemberSearchCondition) -> Select:
    """Apply the condition as one AND-ed WHERE; no WHERE at all when every field is absent."""
    predicates = condition_predicates(condition)
    return stmt.where(all_of(*predicates)) if predicates else stmt


def order_by_clauses(pageable: PageRequest | None) -> list:
    """Caller sort first, then m.id as tie-breaker (insertion order when unsorted)."""
    clauses = []
    sorted_by_id = False
    for order in pageable.sort if pageable is not None else ():
        column = SORTABLE_COLUMNS.get(order.property)
        if column is None:
            raise InvalidInputError(
                f"cannot sort by {order.property!r}; expected one of {sorted(SORTABLE_COLUMNS)}"
            )
        clauses.append(column.desc() if order.direction is Direction.DESC else column.asc())
        sorted_by_id = sorted_by_id or order.property == "member_id"
    if not sorted_by_id:
        clauses.append(member.id.asc())
    return clauses


def search_statement(
    condition: MemberSearchCondition, pageable: PageRequest | None = None
) -> Select:
    """SELECT projection FROM member m LEFT JOIN team t WHERE ... ORDER BY ... [LIMIT/OFFSET]."""
    stmt = (
        filtered(_from_member_join_team(*projection_columns()), condition)
        .order_by(*order_by_clauses(pageable))
    )
    if pageable is not None:
        stmt = stmt.offset(pageable.offset).limit(pageable.size)
    return stmt


def windowed_statement(condition: MemberSearchCondition, pageable: PageRequest) -> Select:
    """Paged search with count(*) OVER () appended: page rows and total in one round-trip."""
    return (
        filtered(
            _from_member_join_team(*projection_columns(), func.count().over().label("total")),
            condition,
        )
        .order_by(*order_by_clauses(pageable))
        .offset(pageable.offset)
        .limit(pageable.size)
    )


def _ensure_to_one_join() -> None:
    # count(m.id) over the join equals the number of members only while member -> team is to-one
    if inspect(Member).relationships["team"].uselist:
        raise RuntimeError("member -> team join is no longer to-one; count(m.id) would over-count")


def count_statement(condition: MemberSearchCondition) -> Select:
    """SELECT count(m.id) with the same join and predicates as search_statement."""
    _ensure_to_one_join()
    return filtered(_from_member_join_team(func.count(member.id)), condition)
