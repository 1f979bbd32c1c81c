"""Tests for ServiceURLBuilder."""

import httpx
import pytest

from app.errors import URLBuilderError
from app.url_builder import ServiceURLBuilder


class TestServiceURLBuilder:
    def test_joins_fragments_with_single_separators(self):
        builder = ServiceURLBuilder.create("").add_path("/t/acme/api/users/", "/v1/organizations")
        url = builder.build()
        assert url.relative_public_url == "/t/acme/api/users/v1/organizations"

    def test_proxy_context_path_is_prefixed(self):
        url = ServiceURLBuilder.create("/identity/").add_path("api/server/v1").build()
        assert url.relative_public_url == "/identity/api/server/v1"

    def test_no_paths_builds_root(self):
        assert ServiceURLBuilder.create("").build().relative_public_url == "/"

    def test_add_path_is_chainable(self):
        url = ServiceURLBuilder.create("").add_path("a").add_path("b", "c").build()
        assert url.relative_public_url == "/a/b/c"

    @pytest.mark.parametrize(
        "fragment",
        [
            "/t/bad domain/api",
            "/t/acme\x00/api",
            "/t//o/api",
        ],
    )
    def test_invalid_fragments_raise(self, fragment):
        with pytest.raises(URLBuilderError):
            ServiceURLBuilder.create("").add_path(fragment).build()

    def test_percent_in_fragment_is_accepted(self):
        url = ServiceURLBuilder.create("").add_path("v1/organizations/100%sales").build()
        assert httpx.URL(url.relative_public_url).path == "/v1/organizations/100%sales"
