"""Protocol constants: response types, grant types and PKCE methods."""

from __future__ import annotations

import base64
import hashlib
from enum import Enum


class ResponseType(str, Enum):
    """The type of an authorization request."""

    CODE = "code"
    TOKEN = "token"

    def __str__(self) -> str:
        return self.value


class GrantType(str, Enum):
    """An authorization grant model."""

    AUTHORIZATION_CODE = "authorization_code"
    PASSWORD_CREDENTIALS = "password"
    CLIENT_CREDENTIALS = "client_credentials"
    REFRESHING = "refresh_token"
    IMPLICIT = "__implicit"

    def __str__(self) -> str:
        # The implicit grant is internal and has no wire representation.
        if self is GrantType.IMPLICIT:
            return ""
        return self.value


class CodeChallengeMethod(str, Enum):
    """A PKCE code challenge method."""

    PLAIN = "plain"
    S256 = "S256"

    def __str__(self) -> str:
        return self.value

    def validate(self, challenge: str, verifier: str) -> bool:
        """Return True if ``verifier`` matches ``challenge`` under this method."""
        if self is CodeChallengeMethod.PLAIN:
            return challenge == verifier
        digest = hashlib.sha256(verifier.encode("utf-8")).digest()
        expected = base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")
        return expected == challenge.rstrip("=")