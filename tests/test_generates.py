import base64
import string
from datetime import datetime, timedelta, timezone

import jwt
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa

from oauthcore.errors import InvalidAccessTokenError, OAuth2Error
from oauthcore.generates import (
    AccessGenerate,
    AuthorizeGenerate,
    GenerateBasic,
    JWTAccessClaims,
    JWTAccessGenerate,
)
from oauthcore.models import Client, Token

ALLOWED = set(string.ascii_uppercase + string.digits + "-_")
SIGNING_KEY = b"secret"


def _basic(**overrides):
    values = dict(
        client=Client(id="123456", secret="secret"),
        user_id="000000",
        create_at=datetime.now(timezone.utc),
    )
    values.update(overrides)
    return GenerateBasic(**values)


def _jwt_basic(expires_in=timedelta(seconds=120), created=None):
    token = Token(
        access_create_at=created or datetime.now(timezone.utc),
        access_expires_in=expires_in,
    )
    return _basic(token_info=token)


def _pem(key):
    return key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    )


def test_access_generate_produces_both_tokens():
    access, refresh = AccessGenerate().token(_basic(), True)
    assert len(access) == 48
    assert len(refresh) == 48
    assert set(access) <= ALLOWED
    assert set(refresh) <= ALLOWED
    assert access != refresh


def test_access_generate_without_refresh():
    access, refresh = AccessGenerate().token(_basic(), False)
    assert len(access) == 48
    assert refresh == ""


def test_access_generate_is_random():
    data = _basic()
    tokens = [AccessGenerate().token(data, False)[0] for _ in range(5)]
    assert len(set(tokens)) == 5
    assert all(len(token) == 48 for token in tokens)


def test_authorize_generate_code():
    code = AuthorizeGenerate().token(_basic())
    assert len(code) == 48
    assert set(code) <= ALLOWED
    decoded = base64.urlsafe_b64decode(code.lower() + "=" * (-len(code) % 4))
    assert len(decoded) == 36


def test_authorize_generate_is_random():
    data = _basic()
    codes = [AuthorizeGenerate().token(data) for _ in range(5)]
    assert len(set(codes)) == 5
    assert all(len(code) == 48 and set(code) <= ALLOWED for code in codes)


def test_jwt_access_hs512_claims():
    gen = JWTAccessGenerate("", SIGNING_KEY, "HS512")
    access, refresh = gen.token(_jwt_basic(), True)
    assert refresh
    assert set(refresh) <= ALLOWED
    claims = jwt.decode(access, SIGNING_KEY, algorithms=["HS512"], audience="123456")
    assert claims["aud"] == ["123456"]
    assert claims["sub"] == "000000"
    assert claims["client_id"] == "123456"


def test_jwt_access_expiry_claim():
    created = datetime(2030, 1, 1, tzinfo=timezone.utc)
    gen = JWTAccessGenerate("", SIGNING_KEY, "HS256")
    access, refresh = gen.token(_jwt_basic(timedelta(seconds=120), created), False)
    assert refresh == ""
    claims = jwt.decode(access, SIGNING_KEY, algorithms=["HS256"], audience="123456")
    assert claims["exp"] == int(created.timestamp()) + 120


def test_jwt_access_kid_header():
    gen = JWTAccessGenerate("key-1", SIGNING_KEY, "HS256")
    access, _ = gen.token(_jwt_basic(), False)
    assert jwt.get_unverified_header(access)["kid"] == "key-1"


def test_jwt_access_rs256():
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    gen = JWTAccessGenerate("", _pem(key), "RS256")
    access, _ = gen.token(_jwt_basic(), False)
    claims = jwt.decode(access, key.public_key(), algorithms=["RS256"], audience="123456")
    assert claims["client_id"] == "123456"


def test_jwt_access_es256():
    key = ec.generate_private_key(ec.SECP256R1())
    gen = JWTAccessGenerate("", _pem(key), "ES256")
    access, _ = gen.token(_jwt_basic(), False)
    claims = jwt.decode(access, key.public_key(), algorithms=["ES256"], audience="123456")
    assert claims["sub"] == "000000"


def test_jwt_access_eddsa():
    key = ed25519.Ed25519PrivateKey.generate()
    gen = JWTAccessGenerate("", _pem(key), "EdDSA")
    access, _ = gen.token(_jwt_basic(), False)
    claims = jwt.decode(access, key.public_key(), algorithms=["EdDSA"], audience="123456")
    assert claims["aud"] == ["123456"]


def test_jwt_access_wrong_key_type():
    key = ed25519.Ed25519PrivateKey.generate()
    gen = JWTAccessGenerate("", _pem(key), "RS256")
    with pytest.raises(ValueError):
        gen.token(_jwt_basic(), False)


def test_jwt_access_unsupported_method():
    gen = JWTAccessGenerate("", SIGNING_KEY, "none")
    with pytest.raises(OAuth2Error, match="unsupported sign method"):
        gen.token(_jwt_basic(), False)


def test_jwt_claims_validate():
    past = JWTAccessClaims(expires_at=datetime.now(timezone.utc) - timedelta(minutes=5))
    with pytest.raises(InvalidAccessTokenError):
        past.validate()
    future = JWTAccessClaims(expires_at=datetime.now(timezone.utc) + timedelta(minutes=5))
    assert future.validate() is None
    assert JWTAccessClaims().validate() is None