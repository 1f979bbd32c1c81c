"""Path components and the organization management error catalog.

Every ErrorMessage carries a unique code, a short message and a description
template. Templates use positional %s placeholders; see app.util.build_error.
"""

from enum import Enum

PATH_SEPARATOR = "/"
V1_API_PATH_COMPONENT = "v1"
ORGANIZATION_PATH = "organizations"

SERVER_API_PATH_COMPONENT = "/api/server/"
USER_API_PATH_COMPONENT = "/api/users/"
TENANT_CONTEXT_PATH_COMPONENT = "/t/%s"
ORGANIZATION_CONTEXT_PATH_COMPONENT = "/o"

UNEXPECTED_SERVER_ERROR_CODE = "SE-50000"
UNEXPECTED_SERVER_ERROR_MESSAGE = "Unexpected server error."


class ErrorMessage(Enum):
    # Client errors.
    ERROR_CODE_INVALID_REQUEST = (
        "ORG-60001",
        "Invalid request.",
        "Organization management service rejected the request with status %s: %s.",
    )
    ERROR_CODE_INVALID_PAGINATION_PARAMETER_NEGATIVE_LIMIT = (
        "ORG-60002",
        "Invalid pagination parameters.",
        "'limit' shouldn't be negative.",
    )
    ERROR_CODE_INVALID_FILTER_FORMAT = (
        "ORG-60003",
        "Unable to retrieve organizations.",
        "Invalid format used for filtering.",
    )
    ERROR_CODE_ROOT_ORGANIZATION_NOT_FOUND = (
        "ORG-60004",
        "Root organization not found.",
        "No root organization is associated with the tenant: %s.",
    )
    ERROR_CODE_USER_NOT_AUTHENTICATED = (
        "ORG-60005",
        "Authentication required.",
        "A valid bearer token is required to access this resource.",
    )

    # Server errors.
    ERROR_CODE_ERROR_RETRIEVING_ORGANIZATIONS = (
        "ORG-65001",
        "Unable to retrieve the organizations.",
        "Server encountered an error while retrieving organizations of user: %s.",
    )
    ERROR_CODE_ERROR_RETRIEVING_ROOT_ORGANIZATION = (
        "ORG-65002",
        "Unable to retrieve the root organization.",
        "Server encountered an error while retrieving the root organization of tenant: %s.",
    )
    ERROR_CODE_ORGANIZATION_SERVICE_UNAVAILABLE = (
        "ORG-65003",
        "Organization management service unavailable.",
        "Server encountered an error while connecting to the organization management service.",
    )

    def __init__(self, code: str, message: str, description: str) -> None:
        self.code = code
        self.message = message
        self.description = description
