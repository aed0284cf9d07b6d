"""Validation of redirect URIs against a client's registered domain."""

from __future__ import annotations

from urllib.parse import urlsplit

from oauthcore.errors import InvalidRedirectURIError


def _host(uri: str) -> str:
    return urlsplit(uri).netloc.rpartition("@")[2]


def validate_redirect_uri(base_uri: str, redirect_uri: str) -> None:
    """Raise InvalidRedirectURIError unless the redirect host ends with the base host.

    A ValueError is raised if either URI cannot be parsed.
    """
    base_host = _host(base_uri)
    redirect_host = _host(redirect_uri)
    if not redirect_host.endswith(base_host):
        raise InvalidRedirectURIError()