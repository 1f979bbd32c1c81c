"""Organization management error hierarchy and the API-level error.

Domain errors are raised by the organization management client. Every domain
error carries an explicit Fault tag: CLIENT errors are caused by the caller's
request and map to 400, SERVER errors (the default) map to 500. app.util
translates them into APIError, which the global exception handler in main.py
converts to a structured JSON response.
"""

from enum import Enum

from app.constants import ErrorMessage
from app.schemas.error import ErrorResponse


class Fault(str, Enum):
    CLIENT = "client"
    SERVER = "server"


class OrganizationManagementError(Exception):
    fault: Fault = Fault.SERVER

    def __init__(self, message: str, description: str, error_code: str) -> None:
        super().__init__(message)
        self.message = message
        self.description = description
        self.error_code = error_code

    @classmethod
    def from_error_message(
        cls, error: ErrorMessage, *data: str
    ) -> "OrganizationManagementError":
        description = error.description % data if data else error.description
        return cls(error.message, description, error.code)


class OrganizationManagementClientError(OrganizationManagementError):
    fault = Fault.CLIENT


class OrganizationManagementServerError(OrganizationManagementError):
    fault = Fault.SERVER


class URLBuilderError(Exception):
    """Raised when a relative public URL cannot be built from its path."""


class APIError(Exception):
    """Terminal error returned to the HTTP layer: a status plus the response body."""

    def __init__(self, status: int, error_response: ErrorResponse) -> None:
        super().__init__(error_response.message)
        self.status = status
        self.error_response = error_response
