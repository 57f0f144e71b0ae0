"""Error kinds raised by the scheduling core.

Each kind maps to exactly one HTTP status in ``slotbook.main``; the core
itself never retries and never turns one kind into another.
"""


class SchedulingError(Exception):
    """Base class for errors the transport layer must report to the caller."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(SchedulingError):
    """Malformed range, too-short slot or blank required field."""

    status_code = 400


class NotFoundError(SchedulingError):
    """Entity is missing, or its existence is deliberately not disclosed."""

    status_code = 404


class ForbiddenError(SchedulingError):
    """Caller lacks rights over an entity known to exist."""

    status_code = 403


class ConflictError(SchedulingError):
    """Overlap, busy slot, already-booked slot or lost optimistic race."""

    status_code = 409


class EmailAlreadyExistsError(ConflictError):
    """Registration with an email that is already taken."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email already registered: {email}")
        self.email = email


class AuthenticationError(Exception):
    """Missing or invalid credentials (rendered as 401)."""
