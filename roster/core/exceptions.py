"""
Domain errors raised by the search core.
Persistence errors are not wrapped: SQLAlchemy/driver exceptions reach the caller as-is.
"""


class RosterError(Exception):
    """Base class for roster errors."""


class InvalidInputError(RosterError, ValueError):
    """Bad condition or pageable. Raised before any query is sent."""


class ConsistencyViolationError(RosterError):
    """Split-mode page whose content does not fit the separately counted total.

    Usually means rows were written between the data query and the count query.
    """

    def __init__(self, content_size: int, total: int, offset: int):
        self.content_size = content_size
        self.total = total
        self.offset = offset
        super().__init__(
            f"page of {content_size} rows at offset {offset} exceeds counted total {total}"
        )
