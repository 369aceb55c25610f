"""Domain exceptions for the board context."""

from shared_kernel.exceptions import NotFoundError


class BoardNotFoundError(NotFoundError):
    """Raised when a board cannot be found by ID."""

    pass


class ReplyNotFoundError(NotFoundError):
    """Raised when a reply cannot be found by ID."""

    pass
