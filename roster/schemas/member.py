"""Member/team request, response and search schemas."""

from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MemberSearchCondition(BaseModel):
    """Optional filters for member search. Every field may be omitted.

    Blank strings are treated the same as a missing value, so a form that
    submits ``username=""`` does not filter on username.
    """

    model_config = ConfigDict(frozen=True)

    username: str | None = None
    team_name: str | None = None
    age_goe: int | None = None
    age_loe: int | None = None

    @field_validator("username", "team_name")
    @classmethod
    def blank_as_none(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value


class MemberTeamDto(BaseModel):
    """Flat search result: one member joined with its (optional) team."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    member_id: int
    username: str | None = None
    age: int
    team_id: int | None = None
    team_name: str | None = None

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "MemberTeamDto":
        """Positional mapping from (m.id, m.username, m.age, t.id, t.name, ...)."""
        return cls(
            member_id=row[0],
            username=row[1],
            age=row[2],
            team_id=row[3],
            team_name=row[4],
        )


class TeamCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class TeamResponse(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class MemberCreate(BaseModel):
    username: str | None = Field(None, max_length=255)
    age: int = Field(0, ge=0)
    team_id: int | None = None


class MemberResponse(BaseModel):
    id: int
    username: str | None
    age: int
    team_id: int | None

    model_config = {"from_attributes": True}
