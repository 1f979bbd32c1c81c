"""FastAPI dependencies for enforcing authentication on protected routes.

Usage:
    @router.get("/protected")
    async def endpoint(claims: Claims = Depends(get_current_user)):
        ...

get_routing_context builds the TenantRoutingContext for the authenticated
caller, for endpoints that produce tenant-aware URLs.
"""

import logging

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.auth.jwt import Claims, InvalidTokenError, verify_token
from app.constants import ErrorMessage
from app.context import TenantRoutingContext, build_routing_context
from app.util import handle_error

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> Claims:
    if credentials is None:
        raise handle_error(
            status.HTTP_401_UNAUTHORIZED, ErrorMessage.ERROR_CODE_USER_NOT_AUTHENTICATED
        )
    try:
        return verify_token(credentials.credentials)
    except InvalidTokenError as exc:
        logger.debug("Rejected bearer token: %s", exc)
        raise handle_error(
            status.HTTP_401_UNAUTHORIZED, ErrorMessage.ERROR_CODE_USER_NOT_AUTHENTICATED
        ) from exc


async def get_routing_context(
    claims: Claims = Depends(get_current_user),
) -> TenantRoutingContext:
    return build_routing_context(claims)
