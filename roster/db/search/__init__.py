# Dynamic member search: predicates -> statements -> paged execution

from roster.db.search.pagination import fetch_page_simple, fetch_page_split, fetch_rows
from roster.db.search.predicates import all_of, condition_predicates
from roster.db.search.query import count_statement, search_statement, windowed_statement

__all__ = [
    "all_of",
    "condition_predicates",
    "count_statement",
    "fetch_page_simple",
    "fetch_page_split",
    "fetch_rows",
    "search_statement",
    "windowed_statement",
]
