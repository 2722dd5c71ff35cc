"""Domain error codes for the pickup module."""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Coarse error categories callers branch on."""

    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INVALID = "INVALID"
    UNAVAILABLE = "UNAVAILABLE"


class ErrorCode(Enum):
    """Domain error codes."""

    SPORT_NOT_FOUND = "SPORT_NOT_FOUND"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    MEMBERSHIP_NOT_FOUND = "MEMBERSHIP_NOT_FOUND"
    ALREADY_JOINED = "ALREADY_JOINED"
    SPORT_IN_USE = "SPORT_IN_USE"
    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    INVALID_SESSION_DATE = "INVALID_SESSION_DATE"
    INVALID_SPORT_NAME = "INVALID_SPORT_NAME"
    INVALID_VENUE = "INVALID_VENUE"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"


_KINDS = {
    ErrorCode.SPORT_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.SESSION_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.MEMBERSHIP_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.ALREADY_JOINED: ErrorKind.CONFLICT,
    ErrorCode.SPORT_IN_USE: ErrorKind.CONFLICT,
    ErrorCode.INVALID_IDENTIFIER: ErrorKind.INVALID,
    ErrorCode.INVALID_SESSION_DATE: ErrorKind.INVALID,
    ErrorCode.INVALID_SPORT_NAME: ErrorKind.INVALID,
    ErrorCode.INVALID_VENUE: ErrorKind.INVALID,
    ErrorCode.STORE_UNAVAILABLE: ErrorKind.UNAVAILABLE,
}


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    @property
    def kind(self) -> ErrorKind:
        return _KINDS[self.code]

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class SportNotFoundError(DomainError):
    """Raised when a sport does not exist."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.SPORT_NOT_FOUND, message="Sport not found")


class SessionNotFoundError(DomainError):
    """Raised when a session does not exist or is not owned by the requester.

    Both cases share this error so that non-owners cannot probe which
    session ids exist.
    """

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.SESSION_NOT_FOUND,
            message="Session not found",
        )


class MembershipNotFoundError(DomainError):
    """Raised when leaving a session the player has not joined."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MEMBERSHIP_NOT_FOUND,
            message="You have not joined this session",
        )


class AlreadyJoinedError(DomainError):
    """Raised when a player joins the same session twice."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_JOINED,
            message="You have already joined this session",
        )


class SportInUseError(DomainError):
    """Raised when deleting a sport that sessions still reference."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.SPORT_IN_USE,
            message="Cannot delete sport with active sessions",
        )


class InvalidIdentifierError(DomainError):
    """Raised when an ID is not a positive integer."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_IDENTIFIER,
            message=f"Invalid {field} format",
        )


class InvalidSessionDateError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SESSION_DATE,
            message="Session date must be an ISO date (YYYY-MM-DD)",
        )


class InvalidSportNameError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SPORT_NAME,
            message="Sport name must be between 1 and 255 characters",
        )


class InvalidVenueError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_VENUE,
            message="Venue must be text of at most 255 characters",
        )


class StoreUnavailableError(DomainError):
    """Raised when the underlying store fails unexpectedly."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.STORE_UNAVAILABLE,
            message="Service temporarily unavailable",
        )
