# /app/core/errors.py

"""
Domain exception taxonomy.

Services raise these instead of `HTTPException` so that the business layer
stays independent of the web framework. `app.main` registers a handler that
renders every `OjtError` as `{"message": ...}` with the matching status code.
"""

from fastapi import status


class OjtError(Exception):
    """Base class for every error that maps onto a client-visible status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal Server Error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(OjtError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class Forbidden(OjtError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFound(OjtError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InvalidInput(OjtError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request data"


def parse_id(raw_id, label: str = "ID") -> int:
    """Parses a path or query identifier, raising `InvalidInput` when it is not numeric."""
    try:
        return int(str(raw_id).strip())
    except (TypeError, ValueError):
        raise InvalidInput(f"Invalid {label}")
