"""Generators of authorization codes and access/refresh tokens."""

from __future__ import annotations

import base64
import math
import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Union

import jwt
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa
from cryptography.hazmat.primitives.serialization import load_pem_private_key

from oauthcore.errors import InvalidAccessTokenError, OAuth2Error
from oauthcore.models import ClientInfo, Token


@dataclass
class GenerateBasic:
    """The data a generated code or token is based on."""

    client: ClientInfo
    user_id: str = ""
    create_at: Optional[datetime] = None
    token_info: Optional[Token] = None
    request: Any = None


def _encode_uuid(value: uuid.UUID) -> str:
    encoded = base64.urlsafe_b64encode(str(value).encode("ascii")).decode("ascii")
    return encoded.rstrip("=").upper()


def _unix_nano(moment: Optional[datetime]) -> int:
    if moment is None:
        return 0
    return round(moment.timestamp() * 1_000_000) * 1000


class AuthorizeGenerate:
    """Generates authorization codes from random name-based UUIDs."""

    def token(self, data: GenerateBasic) -> str:
        """Return a new authorization code."""
        name = data.client.id + data.user_id
        return _encode_uuid(uuid.uuid3(uuid.uuid4(), name))


class AccessGenerate:
    """Generates opaque access and refresh tokens from random name-based UUIDs."""

    def token(self, data: GenerateBasic, generate_refresh: bool) -> tuple[str, str]:
        """Return ``(access, refresh)``; refresh is empty unless requested."""
        name = data.client.id + data.user_id + str(_unix_nano(data.create_at))
        access = _encode_uuid(uuid.uuid3(uuid.uuid4(), name))
        refresh = _encode_uuid(uuid.uuid5(uuid.uuid4(), name)) if generate_refresh else ""
        return access, refresh


def _numeric_date(moment: datetime) -> int:
    return math.floor(moment.timestamp())


@dataclass
class JWTAccessClaims:
    """The claims carried by a JWT access token."""

    audience: list[str] = field(default_factory=list)
    subject: str = ""
    expires_at: Optional[datetime] = None
    client_id: str = ""

    def validate(self) -> None:
        """Raise InvalidAccessTokenError if the claims have expired."""
        if self.expires_at is not None and _numeric_date(self.expires_at) < time.time():
            raise InvalidAccessTokenError()


def _claims_payload(claims: JWTAccessClaims) -> dict[str, Any]:
    payload: dict[str, Any] = {}
    if claims.subject:
        payload["sub"] = claims.subject
    if claims.audience:
        payload["aud"] = list(claims.audience)
    if claims.expires_at is not None:
        payload["exp"] = _numeric_date(claims.expires_at)
    if claims.client_id:
        payload["client_id"] = claims.client_id
    return payload


def _load_private_key(pem: bytes, expected: tuple[type, ...], kind: str) -> Any:
    key = load_pem_private_key(pem, password=None)
    if not isinstance(key, expected):
        raise ValueError(f"key is not a valid {kind} private key")
    return key


@dataclass
class JWTAccessGenerate:
    """Generates signed JWT access tokens and opaque refresh tokens."""

    signed_key_id: str
    signed_key: Union[bytes, str]
    signed_method: str

    def _signing_key(self) -> Any:
        raw = self.signed_key.encode("utf-8") if isinstance(self.signed_key, str) else self.signed_key
        alg = self.signed_method
        if alg.startswith("ES"):
            return _load_private_key(raw, (ec.EllipticCurvePrivateKey,), "ECDSA")
        if alg.startswith(("RS", "PS")):
            return _load_private_key(raw, (rsa.RSAPrivateKey,), "RSA")
        if alg.startswith("HS"):
            return raw
        if alg.startswith("Ed"):
            return _load_private_key(raw, (ed25519.Ed25519PrivateKey,), "Ed25519")
        raise OAuth2Error("unsupported sign method")

    def token(self, data: GenerateBasic, generate_refresh: bool) -> tuple[str, str]:
        """Return ``(access, refresh)``; refresh is empty unless requested."""
        info = data.token_info
        if info is None:
            raise ValueError("token info is required to generate a JWT access token")
        expires_at = None
        if info.access_create_at is not None:
            expires_at = info.access_create_at + info.access_expires_in
        claims = JWTAccessClaims(
            audience=[data.client.id],
            subject=data.user_id,
            expires_at=expires_at,
            client_id=data.client.id,
        )
        headers = {"kid": self.signed_key_id} if self.signed_key_id else None
        key = self._signing_key()
        access = jwt.encode(
            _claims_payload(claims), key, algorithm=self.signed_method, headers=headers
        )
        refresh = ""
        if generate_refresh:
            refresh = _encode_uuid(uuid.uuid5(uuid.uuid4(), access))
        return access, refresh