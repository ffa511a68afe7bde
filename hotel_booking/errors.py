"""Domain error taxonomy.

Services raise these; ``hotel_booking.main`` maps each one to a JSON
``{"error": message}`` response with the class's status code.
"""

from fastapi import status


class HotelBookingError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(HotelBookingError):
    """Missing or malformed fields, bad date ordering."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(HotelBookingError):
    """A referenced room, customer or booking does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(HotelBookingError):
    """Duplicate room number or customer email."""

    status_code = status.HTTP_400_BAD_REQUEST


class StorageError(HotelBookingError):
    """The underlying data store failed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class AuthenticationError(HotelBookingError):
    """Credentials or session token rejected."""

    status_code = status.HTTP_401_UNAUTHORIZED
