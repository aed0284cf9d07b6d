"""Errors raised by the authorization core and their HTTP descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class OAuth2Error(Exception):
    """Base class of all errors raised by this package."""

    default_message = "oauth2 error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class InvalidRedirectURIError(OAuth2Error):
    default_message = "invalid redirect uri"


class InvalidAuthorizeCodeError(OAuth2Error):
    default_message = "invalid authorize code"


class InvalidAccessTokenError(OAuth2Error):
    default_message = "invalid access token"


class InvalidRefreshTokenError(OAuth2Error):
    default_message = "invalid refresh token"


class ExpiredAccessTokenError(OAuth2Error):
    default_message = "expired access token"


class ExpiredRefreshTokenError(OAuth2Error):
    default_message = "expired refresh token"


class MissingCodeVerifierError(OAuth2Error):
    default_message = "missing code verifier"


class MissingCodeChallengeError(OAuth2Error):
    default_message = "missing code challenge"


class InvalidCodeChallengeError(OAuth2Error):
    default_message = "invalid code challenge"


class ProtocolError(OAuth2Error):
    """An error defined by the OAuth 2.0 protocol (RFC 6749, section 5.2)."""

    def __init__(self, code: str, description: str, status_code: int) -> None:
        super().__init__(code)
        self.code = code
        self.description = description
        self.status_code = status_code


INVALID_REQUEST = ProtocolError(
    "invalid_request",
    "The request is missing a required parameter, includes an invalid parameter value, "
    "includes a parameter more than once, or is otherwise malformed",
    400,
)
UNAUTHORIZED_CLIENT = ProtocolError(
    "unauthorized_client",
    "The client is not authorized to request an authorization code using this method",
    401,
)
ACCESS_DENIED = ProtocolError(
    "access_denied",
    "The resource owner or authorization server denied the request",
    403,
)
UNSUPPORTED_RESPONSE_TYPE = ProtocolError(
    "unsupported_response_type",
    "The authorization server does not support obtaining an authorization code using this method",
    401,
)
INVALID_SCOPE = ProtocolError(
    "invalid_scope",
    "The requested scope is invalid, unknown, or malformed",
    400,
)
SERVER_ERROR = ProtocolError(
    "server_error",
    "The authorization server encountered an unexpected condition that prevented it "
    "from fulfilling the request",
    500,
)
TEMPORARILY_UNAVAILABLE = ProtocolError(
    "temporarily_unavailable",
    "The authorization server is currently unable to handle the request due to a "
    "temporary overloading or maintenance of the server",
    503,
)
INVALID_CLIENT = ProtocolError("invalid_client", "Client authentication failed", 401)
INVALID_GRANT = ProtocolError(
    "invalid_grant",
    "The provided authorization grant (e.g., authorization code, resource owner credentials) "
    "or refresh token is invalid, expired, revoked, does not match the redirection URI used "
    "in the authorization request, or was issued to another client",
    401,
)
UNSUPPORTED_GRANT_TYPE = ProtocolError(
    "unsupported_grant_type",
    "The authorization grant type is not supported by the authorization server",
    401,
)
CODE_CHALLENGE_REQUIRED = ProtocolError(
    "invalid_request",
    "PKCE is required. code_challenge is missing",
    400,
)
UNSUPPORTED_CODE_CHALLENGE_METHOD = ProtocolError(
    "invalid_request",
    "Selected code_challenge_method not supported",
    400,
)
INVALID_CODE_CHALLENGE_LEN = ProtocolError(
    "invalid_request",
    "Code challenge length must be between 43 and 128 charachters long",
    400,
)


def description_for(error: BaseException) -> Optional[str]:
    """Return the protocol description of ``error``, or None if it has none."""
    if isinstance(error, ProtocolError):
        return error.description
    return None


def status_code_for(error: BaseException) -> Optional[int]:
    """Return the HTTP status code of ``error``, or None if it has none."""
    if isinstance(error, ProtocolError):
        return error.status_code
    return None


def _canonical_header_key(key: str) -> str:
    return "-".join(part.capitalize() for part in key.split("-"))


@dataclass
class Response:
    """An error response to be written back to the client."""

    error: Optional[BaseException] = None
    status_code: int = 0
    error_code: int = 0
    description: str = ""
    uri: str = ""
    header: Optional[dict[str, str]] = None

    def set_header(self, key: str, value: str) -> None:
        """Set the header ``key`` to the single value ``value``."""
        if self.header is None:
            self.header = {}
        self.header[_canonical_header_key(key)] = value