"""Service-level errors and the HTTP status each maps to."""

from fastapi import status


class ServiceError(Exception):
    """Base class for errors raised by the services.

    ``message`` is safe to send to clients.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"
    headers: dict[str, str] | None = None

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingFields(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Missing required fields"


class NoFieldsProvided(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "No fields to update were provided"


class InvalidFormat(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid date format, expected DD/MM/YYYY HH:mm"


class InvalidCredentials(ServiceError):
    """Unknown email or wrong password; both are reported the same way."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password"
    headers = {"WWW-Authenticate": "Bearer"}


class NotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class PersistenceFailure(ServiceError):
    default_message = "Error accessing the data store"
