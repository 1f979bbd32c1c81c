"""User organization endpoints.

GET /api/users/v1/me/organizations       - organizations the caller belongs to
GET /api/users/v1/me/organizations/root  - root organization of the caller's tenant

Each organization carries a `ref` pointing at its organization resource,
built for the caller's tenant routing context.
"""

import re

from fastapi import APIRouter, Depends, Query, Request, status

from app.auth.dependencies import get_current_user, get_routing_context
from app.auth.jwt import Claims
from app.constants import ErrorMessage
from app.context import TenantRoutingContext
from app.errors import OrganizationManagementError
from app.schemas.organization import (
    OrganizationRecord,
    OrganizationResponse,
    UserOrganizationsResponse,
)
from app.services.organization_service import OrganizationManagementClient
from app.util import handle_error, handle_organization_management_exception, organization_get_url

router = APIRouter(prefix="/api/users/v1/me/organizations", tags=["organizations"])

_FILTER_CLAUSE = re.compile(r"^\w+ (eq|ne|co|sw|ew|gt|ge|lt|le) \S.*$")


def get_org_client(request: Request) -> OrganizationManagementClient:
    # In tests, override this dependency with a mock client
    return OrganizationManagementClient(request.app.state.http_client)


def _validate_filter(filter: str) -> None:
    if not filter:
        return
    for clause in re.split(r" and ", filter, flags=re.IGNORECASE):
        if not _FILTER_CLAUSE.match(clause.strip()):
            raise handle_error(
                status.HTTP_400_BAD_REQUEST, ErrorMessage.ERROR_CODE_INVALID_FILTER_FORMAT
            )


def _to_response(org: OrganizationRecord, context: TenantRoutingContext) -> OrganizationResponse:
    return OrganizationResponse(
        id=org.id, name=org.name, ref=str(organization_get_url(org.id, context))
    )


@router.get("", response_model=UserOrganizationsResponse)
async def list_user_organizations(
    limit: int | None = Query(default=None),
    filter: str = Query(default=""),
    claims: Claims = Depends(get_current_user),
    context: TenantRoutingContext = Depends(get_routing_context),
    client: OrganizationManagementClient = Depends(get_org_client),
) -> UserOrganizationsResponse:
    if limit is not None and limit < 0:
        raise handle_error(
            status.HTTP_400_BAD_REQUEST,
            ErrorMessage.ERROR_CODE_INVALID_PAGINATION_PARAMETER_NEGATIVE_LIMIT,
        )
    _validate_filter(filter)

    try:
        organizations = await client.list_user_organizations(
            claims.sub, context.tenant_domain, limit=limit, filter=filter
        )
    except OrganizationManagementError as exc:
        raise handle_organization_management_exception(exc) from exc

    return UserOrganizationsResponse(
        organizations=[_to_response(org, context) for org in organizations]
    )


@router.get("/root", response_model=OrganizationResponse)
async def get_root_organization(
    context: TenantRoutingContext = Depends(get_routing_context),
    client: OrganizationManagementClient = Depends(get_org_client),
) -> OrganizationResponse:
    try:
        organization = await client.get_root_organization(context.root_tenant_domain)
    except OrganizationManagementError as exc:
        raise handle_organization_management_exception(exc) from exc

    return _to_response(organization, context)
