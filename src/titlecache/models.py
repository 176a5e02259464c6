"""Shared data models for titlecache."""

from dataclasses import dataclass

REFRESH_ERROR_MESSAGE = "Unable to refresh title"


@dataclass(frozen=True)
class Title:
    """The single persisted title value."""

    title: str


class TitleRefreshError(Exception):
    """Raised when a new title could not be fetched.

    Attributes:
        message: User-ready error message.
        cause: The original failure, if any.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)
