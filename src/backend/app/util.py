"""Error translation and response URL helpers for the organization endpoints.

build_error and build_error_from_exception resolve a catalog entry or an
organization management error into an Error; every APIError response body is
assembled from that Error. organization_get_url builds the `ref` of an
organization relative to the caller's tenant routing context.
"""

import logging

import httpx
from fastapi import status

from app.constants import (
    ORGANIZATION_CONTEXT_PATH_COMPONENT,
    ORGANIZATION_PATH,
    PATH_SEPARATOR,
    SERVER_API_PATH_COMPONENT,
    TENANT_CONTEXT_PATH_COMPONENT,
    UNEXPECTED_SERVER_ERROR_CODE,
    UNEXPECTED_SERVER_ERROR_MESSAGE,
    USER_API_PATH_COMPONENT,
    V1_API_PATH_COMPONENT,
    ErrorMessage,
)
from app.context import TenantRoutingContext
from app.errors import APIError, Fault, OrganizationManagementError, URLBuilderError
from app.schemas.error import Error, ErrorResponseBuilder
from app.url_builder import ServiceURLBuilder

logger = logging.getLogger(__name__)


def _error_description(error: ErrorMessage, *data: str) -> str:
    if data:
        return error.description % data
    return error.description


def build_error(error: ErrorMessage, *data: str) -> Error:
    """Return an Error for a catalog entry, formatting its description with data."""
    return Error(
        code=error.code,
        message=error.message,
        description=_error_description(error, *data),
    )


def build_error_from_exception(exc: OrganizationManagementError) -> Error:
    """Return an Error carrying the exception's code, message and description.

    A missing code or message falls back to the unexpected server error so the
    result is always a complete Error.
    """
    return Error(
        code=exc.error_code or UNEXPECTED_SERVER_ERROR_CODE,
        message=exc.message or UNEXPECTED_SERVER_ERROR_MESSAGE,
        description=exc.description or "",
    )


def _error_builder_from(error: Error) -> ErrorResponseBuilder:
    return (
        ErrorResponseBuilder()
        .with_code(error.code)
        .with_message(error.message)
        .with_description(error.description)
    )


def handle_organization_management_exception(exc: OrganizationManagementError) -> APIError:
    """Translate an organization management error into an APIError.

    Client faults become 400 and are logged without the exception. Anything
    else is a server fault: 500, logged with the exception attached.
    """
    error = build_error_from_exception(exc)
    builder = _error_builder_from(error)
    if exc.fault is Fault.CLIENT:
        error_response = builder.build(logger, error.description)
        return APIError(status.HTTP_400_BAD_REQUEST, error_response)

    error_response = builder.build(logger, error.description, exc=exc)
    return APIError(status.HTTP_500_INTERNAL_SERVER_ERROR, error_response)


def handle_error(status_code: int, error: ErrorMessage) -> APIError:
    return APIError(status_code, _error_builder_from(build_error(error)).build())


def organization_get_url(organization_id: str, context: TenantRoutingContext) -> httpx.URL:
    """Return the relative URL to get an organization."""
    endpoint = V1_API_PATH_COMPONENT + PATH_SEPARATOR + ORGANIZATION_PATH + PATH_SEPARATOR
    return _build_uri_for_body(endpoint + organization_id, context)


def _build_uri_for_body(endpoint: str, context: TenantRoutingContext) -> httpx.URL:
    try:
        url = ServiceURLBuilder.create().add_path(_get_context(endpoint, context)).build()
    except URLBuilderError as exc:
        raise _build_internal_server_error(
            exc, "Server encountered an error while building URL for response body."
        ) from exc
    return httpx.URL(url.relative_public_url)


def _get_context(endpoint: str, context: TenantRoutingContext) -> str:
    # Organization scoping only applies in tenant-qualified URL mode.
    if context.tenant_qualified_urls_enabled:
        path = SERVER_API_PATH_COMPONENT + endpoint
        if context.in_organization:
            path = (
                _tenant_context_path(context.root_tenant_domain)
                + ORGANIZATION_CONTEXT_PATH_COMPONENT
                + path
            )
        return path

    return _tenant_context_path(context.tenant_domain) + USER_API_PATH_COMPONENT + endpoint


def _tenant_context_path(tenant_domain: str) -> str:
    # Only the tenant prefix is checked for an unresolved template.
    path = TENANT_CONTEXT_PATH_COMPONENT % tenant_domain
    if not tenant_domain or "%s" in path:
        raise URLBuilderError(f"Unresolved tenant context path {path!r}")
    return path


def _build_internal_server_error(exc: Exception, description: str) -> APIError:
    error_response = (
        ErrorResponseBuilder()
        .with_code(UNEXPECTED_SERVER_ERROR_CODE)
        .with_message("Error while building response.")
        .with_description(description)
        .build(logger, description, exc=exc)
    )
    return APIError(status.HTTP_500_INTERNAL_SERVER_ERROR, error_response)
