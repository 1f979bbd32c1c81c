"""Client for the organization management service.

Every failure surfaces as an OrganizationManagementError:
  - 4xx responses -> OrganizationManagementClientError, using the upstream
    {code, message, description} body when it has one
  - 5xx responses, malformed bodies and transport errors ->
    OrganizationManagementServerError
"""

import logging

import httpx
from pydantic import ValidationError

from app.config import settings
from app.constants import ErrorMessage
from app.errors import (
    OrganizationManagementClientError,
    OrganizationManagementError,
    OrganizationManagementServerError,
)
from app.schemas.error import UpstreamErrorBody
from app.schemas.organization import OrganizationRecord

logger = logging.getLogger(__name__)

TENANT_DOMAIN_HEADER = "X-Tenant-Domain"


def _client_error(response: httpx.Response) -> OrganizationManagementClientError:
    try:
        body = UpstreamErrorBody.model_validate_json(response.content)
        return OrganizationManagementClientError(body.message, body.description or "", body.code)
    except ValidationError:
        return OrganizationManagementClientError.from_error_message(
            ErrorMessage.ERROR_CODE_INVALID_REQUEST,
            str(response.status_code),
            response.reason_phrase,
        )


class OrganizationManagementClient:
    def __init__(self, http_client: httpx.AsyncClient, base_url: str | None = None) -> None:
        self.http_client = http_client
        self.base_url = (base_url or settings.ORG_MGT_SERVICE_URL).rstrip("/")

    async def _get(
        self,
        path: str,
        tenant_domain: str,
        on_server_error: OrganizationManagementError,
        params: dict[str, str | int] | None = None,
    ):
        try:
            response = await self.http_client.get(
                f"{self.base_url}{path}",
                params=params,
                headers={TENANT_DOMAIN_HEADER: tenant_domain},
                timeout=settings.EXTERNAL_API_TIMEOUT_SECONDS,
            )
        except httpx.HTTPError as exc:
            logger.warning("Organization management service unreachable: %s", exc)
            raise OrganizationManagementServerError.from_error_message(
                ErrorMessage.ERROR_CODE_ORGANIZATION_SERVICE_UNAVAILABLE
            ) from exc

        if response.is_client_error:
            raise _client_error(response)
        if response.is_error:
            logger.warning(
                "Organization management service returned %s for %s", response.status_code, path
            )
            raise on_server_error

        try:
            return response.json()
        except ValueError as exc:
            raise on_server_error from exc

    async def list_user_organizations(
        self,
        user_id: str,
        tenant_domain: str,
        limit: int | None = None,
        filter: str = "",
    ) -> list[OrganizationRecord]:
        on_server_error = OrganizationManagementServerError.from_error_message(
            ErrorMessage.ERROR_CODE_ERROR_RETRIEVING_ORGANIZATIONS, user_id
        )
        params: dict[str, str | int] = {}
        if limit is not None:
            params["limit"] = limit
        if filter:
            params["filter"] = filter

        body = await self._get(
            f"/users/{user_id}/organizations", tenant_domain, on_server_error, params
        )
        try:
            return [OrganizationRecord.model_validate(o) for o in body["organizations"]]
        except (KeyError, TypeError, ValidationError) as exc:
            raise on_server_error from exc

    async def get_root_organization(self, tenant_domain: str) -> OrganizationRecord:
        on_server_error = OrganizationManagementServerError.from_error_message(
            ErrorMessage.ERROR_CODE_ERROR_RETRIEVING_ROOT_ORGANIZATION, tenant_domain
        )
        body = await self._get("/organizations/root", tenant_domain, on_server_error)
        if not body:
            raise OrganizationManagementClientError.from_error_message(
                ErrorMessage.ERROR_CODE_ROOT_ORGANIZATION_NOT_FOUND, tenant_domain
            )
        try:
            return OrganizationRecord.model_validate(body)
        except ValidationError as exc:
            raise on_server_error from exc
