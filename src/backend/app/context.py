"""Per-request tenant routing context.

The context is built once per request from the caller's token and the
application settings, then passed explicitly to anything that needs to know
where the request is routed.
"""

from dataclasses import dataclass

from app.auth.jwt import Claims
from app.config import settings


@dataclass(frozen=True)
class TenantRoutingContext:
    organization_id: str
    tenant_domain: str
    root_tenant_domain: str
    tenant_qualified_urls_enabled: bool

    @property
    def in_organization(self) -> bool:
        return bool(self.organization_id)


def build_routing_context(claims: Claims) -> TenantRoutingContext:
    return TenantRoutingContext(
        organization_id=claims.organization_id or "",
        tenant_domain=claims.tenant_domain,
        root_tenant_domain=claims.root_tenant_domain or claims.tenant_domain,
        tenant_qualified_urls_enabled=settings.TENANT_QUALIFIED_URLS_ENABLED,
    )
