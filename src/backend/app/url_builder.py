"""Relative public URL builder.

ServiceURLBuilder joins path fragments under the configured proxy context
path and validates the result:

    url = ServiceURLBuilder.create().add_path("/t/acme/api/users/", "v1/organizations").build()
    url.relative_public_url  # "/t/acme/api/users/v1/organizations"

A path that cannot be turned into a valid URL raises URLBuilderError. That is
a configuration problem (bad tenant domain, bad proxy context path), never a
transient one.
"""

from dataclasses import dataclass

import httpx

from app.config import settings
from app.errors import URLBuilderError

_SEPARATOR = "/"


@dataclass(frozen=True)
class ServiceURL:
    relative_public_url: str


def _check_fragment(fragment: str) -> str:
    if any(ch.isspace() or not ch.isprintable() for ch in fragment):
        raise URLBuilderError(f"Illegal character in path fragment {fragment!r}")

    stripped = fragment.strip(_SEPARATOR)
    if _SEPARATOR * 2 in stripped:
        raise URLBuilderError(f"Empty segment in path fragment {fragment!r}")
    return stripped


class ServiceURLBuilder:
    def __init__(self, proxy_context_path: str) -> None:
        self._proxy_context_path = proxy_context_path
        self._paths: list[str] = []

    @classmethod
    def create(cls, proxy_context_path: str | None = None) -> "ServiceURLBuilder":
        if proxy_context_path is None:
            proxy_context_path = settings.PROXY_CONTEXT_PATH
        return cls(proxy_context_path)

    def add_path(self, *paths: str) -> "ServiceURLBuilder":
        self._paths.extend(paths)
        return self

    def build(self) -> ServiceURL:
        segments = [
            stripped
            for stripped in map(_check_fragment, [self._proxy_context_path, *self._paths])
            if stripped
        ]
        path = _SEPARATOR + _SEPARATOR.join(segments)

        try:
            url = httpx.URL(path)
        except httpx.InvalidURL as exc:
            raise URLBuilderError(f"Invalid URL path {path!r}") from exc

        return ServiceURL(relative_public_url=str(url))
