"""
Search predicates - one optional WHERE fragment per condition field.
Challenge: Filters that switch themselves off when the caller leaves a field empty.
Design: A factory returns None for "absent"; composition drops the Nones.
"""

from sqlalchemy import ColumnElement, and_, bindparam, true

from roster.db.search.aliases import member, team
from roster.schemas.member import MemberSearchCondition

Predicate = ColumnElement[bool]


def _has_text(value: str | None) -> bool:
    return value is not None and bool(value.strip())


def username_eq(username: str | None) -> Predicate | None:
    return member.username == bindparam("username", username) if _has_text(username) else None


def team_name_eq(team_name: str | None) -> Predicate | None:
    return team.name == bindparam("team_name", team_name) if _has_text(team_name) else None


def age_goe(age: int | None) -> Predicate | None:
    return member.age >= bindparam("age_goe", age) if age is not None else None


def age_loe(age: int | None) -> Predicate | None:
    return member.age <= bindparam("age_loe", age) if age is not None else None


def condition_predicates(condition: MemberSearchCondition) -> list[Predicate]:
    """Present predicates for condition, in field order (username, team, age >=, age <=)."""
    candidates = (
        username_eq(condition.username),
        team_name_eq(condition.team_name),
        age_goe(condition.age_goe),
        age_loe(condition.age_loe),
    )
    return [p for p in candidates if p is not None]


def all_of(*predicates: Predicate | None) -> Predicate:
    """AND the present predicates together. No predicates means TRUE."""
    present = [p for p in predicates if p is not None]
    if not present:
        return true()
    if len(present) == 1:
        return present[0]
    return and_(*present)
