"""
PageRequest / Page tests - validation and derived page metadata.
"""

import pytest

from roster.core.exceptions import InvalidInputError
from roster.schemas.member import MemberTeamDto
from roster.schemas.page import Direction, Order, Page, PageRequest


def test_offset_is_page_times_size():
    assert PageRequest(0, 3).offset == 0
    assert PageRequest(2, 2).offset == 4


@pytest.mark.parametrize("page, size", [(-1, 10), (0, 0), (0, -5), (True, 10), (0, 2.5)])
def test_invalid_page_request(page, size):
    with pytest.raises(InvalidInputError):
        PageRequest(page, size)


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        PageRequest(0, 0)


def test_navigation():
    p = PageRequest.of(1, 10, "age,desc")
    assert p.next() == PageRequest(2, 10, (Order("age", Direction.DESC),))
    assert p.previous_or_first().page == 0
    assert p.first().previous_or_first().page == 0


@pytest.mark.parametrize(
    "text, expected",
    [
        ("age", Order("age", Direction.ASC)),
        ("age,desc", Order("age", Direction.DESC)),
        (" username , ASC ", Order("username", Direction.ASC)),
    ],
)
def test_order_parse(text, expected):
    assert Order.parse(text) == expected


@pytest.mark.parametrize("text", ["", ",desc", "age,sideways"])
def test_order_parse_rejects(text):
    with pytest.raises(InvalidInputError):
        Order.parse(text)


def _row(i: int) -> MemberTeamDto:
    return MemberTeamDto(member_id=i, username=f"member{i}", age=i * 10)


def test_page_metadata():
    page = Page[MemberTeamDto](content=[_row(1), _row(2), _row(3)], pageable=PageRequest(0, 3), total=4)
    assert page.size == 3
    assert page.number == 0
    assert page.number_of_elements == 3
    assert page.total_pages == 2
    assert page.has_next and page.is_first
    assert not page.has_previous and not page.is_last


def test_last_page_metadata():
    page = Page[MemberTeamDto](content=[_row(3), _row(4)], pageable=PageRequest(1, 3), total=4)
    assert page.is_last
    assert not page.has_next


def test_empty_page_metadata():
    page = Page[MemberTeamDto](content=[], pageable=PageRequest(0, 10), total=0)
    assert page.total_pages == 0
    assert page.is_first and page.is_last


def test_page_serialises_with_metadata():
    page = Page[MemberTeamDto](content=[_row(1)], pageable=PageRequest(0, 1), total=1)
    data = page.model_dump(mode="json")
    assert data["total"] == 1
    assert data["total_pages"] == 1
    assert data["content"][0]["team_name"] is None
    assert data["pageable"]["size"] == 1


def test_string_sort_entries_are_parsed():
    assert PageRequest(0, 10, ("age,desc",)).sort == (Order("age", Direction.DESC),)
    assert PageRequest(0, 10, "username").sort == (Order("username"),)
    assert PageRequest(0, 10, [Order("age"), "team_name,desc"]).sort == (
        Order("age"),
        Order("team_name", Direction.DESC),
    )


@pytest.mark.parametrize("sort", [(42,), (("age", "desc"),), 5, (None,), ("age,sideways",)])
def test_malformed_sort_rejected(sort):
    with pytest.raises(InvalidInputError):
        PageRequest(0, 10, sort)
