"""JWT issuance and verification for the organization user API.

Uses python-jose with HS256. Tokens expire in 15 minutes (900 seconds).
Besides the subject, a token names the tenant the user resolved to and, when
the user is acting inside an organization, that organization and the root
tenant it belongs to.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from jose import ExpiredSignatureError, JWTError, jwt

from app.config import settings

_ALGORITHM = "HS256"
_EXPIRY_SECONDS = 900  # 15 minutes


class InvalidTokenError(Exception):
    pass


@dataclass
class Claims:
    sub: str
    tenant_domain: str
    organization_id: str | None
    root_tenant_domain: str | None
    exp: int


def create_token(claims: Claims) -> str:
    payload = {
        "sub": claims.sub,
        "tenant_domain": claims.tenant_domain,
        "organization_id": claims.organization_id,
        "root_tenant_domain": claims.root_tenant_domain,
        "exp": claims.exp,
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=_ALGORITHM)


def build_claims(
    sub: str,
    tenant_domain: str,
    organization_id: str | None = None,
    root_tenant_domain: str | None = None,
) -> Claims:
    exp = int(datetime.now(UTC).timestamp()) + _EXPIRY_SECONDS
    return Claims(
        sub=sub,
        tenant_domain=tenant_domain,
        organization_id=organization_id,
        root_tenant_domain=root_tenant_domain,
        exp=exp,
    )


def verify_token(token: str) -> Claims:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[_ALGORITHM])
    except ExpiredSignatureError as exc:
        raise InvalidTokenError("Token has expired") from exc
    except JWTError as exc:
        raise InvalidTokenError("Invalid token") from exc

    try:
        return Claims(
            sub=payload["sub"],
            tenant_domain=payload.get("tenant_domain") or settings.SUPER_TENANT_DOMAIN,
            organization_id=payload.get("organization_id"),
            root_tenant_domain=payload.get("root_tenant_domain"),
            exp=payload["exp"],
        )
    except KeyError as exc:
        raise InvalidTokenError(f"Token is missing claim {exc}") from exc
