"""Query aliases shared by predicates and statements: member AS m, team AS t."""

from sqlalchemy.orm import aliased

from roster.db.models import Member, Team

member = aliased(Member, name="m")
team = aliased(Team, name="t")
