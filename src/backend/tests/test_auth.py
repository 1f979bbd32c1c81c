"""Tests for JWT handling, get_current_user and the routing context dependency.

Covers: token round trip, expired/invalid tokens, missing claims,
        get_current_user, routing context construction.
"""

import time
from unittest.mock import patch

import pytest
from fastapi.security import HTTPAuthorizationCredentials
from jose import jwt

from app.auth.dependencies import get_current_user, get_routing_context
from app.auth.jwt import Claims, InvalidTokenError, build_claims, create_token, verify_token
from app.config import settings
from app.context import build_routing_context
from app.errors import APIError

# ---------------------------------------------------------------------------
# Token handling
# ---------------------------------------------------------------------------


class TestTokens:
    def test_round_trip_preserves_claims(self):
        claims = build_claims(
            "alice", "acme", organization_id="org-1", root_tenant_domain="root.com"
        )
        decoded = verify_token(create_token(claims))
        assert decoded == claims

    def test_expired_token_is_rejected(self):
        claims = Claims(
            sub="alice",
            tenant_domain="acme",
            organization_id=None,
            root_tenant_domain=None,
            exp=int(time.time()) - 10,
        )
        with pytest.raises(InvalidTokenError, match="expired"):
            verify_token(create_token(claims))

    def test_garbage_token_is_rejected(self):
        with pytest.raises(InvalidTokenError, match="Invalid token"):
            verify_token("not-a-token")

    def test_missing_subject_is_rejected(self):
        token = jwt.encode({"exp": int(time.time()) + 60}, settings.JWT_SECRET, algorithm="HS256")
        with pytest.raises(InvalidTokenError, match="missing claim"):
            verify_token(token)

    def test_missing_tenant_defaults_to_super_tenant(self):
        token = jwt.encode(
            {"sub": "alice", "exp": int(time.time()) + 60}, settings.JWT_SECRET, algorithm="HS256"
        )
        assert verify_token(token).tenant_domain == settings.SUPER_TENANT_DOMAIN


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------


def _credentials(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestGetCurrentUser:
    async def test_missing_credentials_raise_401(self):
        with pytest.raises(APIError) as exc_info:
            await get_current_user(None)
        assert exc_info.value.status == 401
        assert exc_info.value.error_response.code == "ORG-60005"

    async def test_invalid_token_raises_401(self):
        with pytest.raises(APIError) as exc_info:
            await get_current_user(_credentials("not-a-token"))
        assert exc_info.value.status == 401

    async def test_valid_token_returns_claims(self):
        claims = await get_current_user(_credentials(create_token(build_claims("alice", "acme"))))
        assert claims.sub == "alice"
        assert claims.tenant_domain == "acme"


class TestRoutingContext:
    def test_root_tenant_defaults_to_current_tenant(self):
        context = build_routing_context(build_claims("alice", "acme"))
        assert context.organization_id == ""
        assert context.root_tenant_domain == "acme"
        assert not context.in_organization

    def test_organization_claims_are_carried(self):
        context = build_routing_context(
            build_claims("alice", "sub-org", organization_id="org-1", root_tenant_domain="root.com")
        )
        assert context.organization_id == "org-1"
        assert context.root_tenant_domain == "root.com"
        assert context.in_organization

    def test_tenant_qualified_flag_comes_from_settings(self):
        with patch.object(settings, "TENANT_QUALIFIED_URLS_ENABLED", False):
            context = build_routing_context(build_claims("alice", "acme"))
        assert context.tenant_qualified_urls_enabled is False

    async def test_dependency_builds_context_from_claims(self):
        context = await get_routing_context(build_claims("alice", "acme"))
        assert context.tenant_domain == "acme"
