# oauthcore

Building blocks for an OAuth 2.0 authorization server.

## What is in the package

- `oauthcore.constants`: the enums `ResponseType` (`code`, `token`),
  `GrantType` and `CodeChallengeMethod` (`plain`, `S256`).
  `CodeChallengeMethod.validate(challenge, verifier)` checks a PKCE verifier.
  For `S256`, trailing `=` padding on the challenge is ignored. `str()` of
  `GrantType.IMPLICIT` is the empty string, because the implicit grant has
  no wire name.
- `oauthcore.errors`: the exception hierarchy rooted at `OAuth2Error`.
  - Token and code errors such as `InvalidAccessTokenError`,
    `ExpiredRefreshTokenError`, `InvalidCodeChallengeError` and
    `InvalidRedirectURIError`.
  - `ProtocolError`, which carries an RFC 6749 §5.2 error code, a
    description and an HTTP status code. Ready-made instances include
    `INVALID_REQUEST`, `INVALID_CLIENT`, `INVALID_GRANT` and
    `SERVER_ERROR`.
  - `description_for(error)` and `status_code_for(error)`. Both return
    `None` for errors that are not protocol errors.
  - `Response`, a record for an error reply. `Response.set_header` stores
    header names in canonical form, for example `content-type` becomes
    `Content-Type`.
- `oauthcore.models`:
  - `Client` and the `ClientInfo` / `ClientPasswordVerifier` protocols.
  - `Token`, which holds code, access and refresh data. `Token.to_dict()`
    returns a JSON-ready mapping.
  - `TokenGenerateRequest`.
  - `Snowflake`, a thread-safe 64-bit ID generator. It uses 41 bits of
    milliseconds since 2020-01-01 UTC, 10 bits of node and 12 bits of
    sequence.
  - `snowflake_to_uuid4` and `uuid4_to_snowflake`, which convert reversibly
    between snowflake IDs and hyphenless UUIDv4-shaped strings.
    `uuid4_to_snowflake` raises `ValueError` on bad input.
  - `legit_id()`, which returns a new ID in that string form.
- `oauthcore.generates`:
  - `GenerateBasic`, the input to every generator.
  - `AuthorizeGenerate`, which makes opaque authorization codes.
  - `AccessGenerate`, which makes opaque access and refresh tokens.
  - `JWTAccessGenerate`, which signs JWT access tokens. It accepts
    algorithms starting with `HS`, `RS`, `PS`, `ES` or `Ed` and raises
    `OAuth2Error("unsupported sign method")` for anything else.
  - `JWTAccessClaims.validate()`, which raises `InvalidAccessTokenError`
    once the claims have expired.
- `oauthcore.redirect`: `validate_redirect_uri(base_uri, redirect_uri)`
  raises `InvalidRedirectURIError` unless the redirect host ends with the
  base host.
- `oauthcore.permission`:
  - `Action`, a bitmask enum running from `CREATE=1` to `ALL=15`.
  - `parse_action`, which is case-insensitive and raises `ValueError` on an
    unknown name.
  - `Permission`, with `parse`, `action_name`, `is_valid_format` and
    `str()` in the form `RESOURCE_ACTION`.
  - `has_valid_permissions`, which matches a resource exactly or through a
    trailing `*` wildcard.
  - The `admin_namespace*` resource helpers.
- `oauthcore.access`:
  - `Claims`, which holds permission strings plus `account_id` and
    `namespace` for placeholder filling.
  - `PermissionService`. Its `has_permission` and the `has_admin_*`
    helpers return `False` on malformed input instead of raising.

## Installation

```
pip install oauthcore
```

## PKCE

```python
from oauthcore.constants import CodeChallengeMethod

CodeChallengeMethod.S256.validate(
    "W6YWc_4yHwYN-cGDgGmOMHF3l7KDy7VcRjf7q2FVF-o", "s256test"
)  # True
CodeChallengeMethod.PLAIN.validate("plaintest", "plaintest")  # True
```

## Tokens

```python
from datetime import datetime, timedelta, timezone

from oauthcore.generates import (
    AccessGenerate,
    AuthorizeGenerate,
    GenerateBasic,
    JWTAccessGenerate,
)
from oauthcore.models import Client, Token

client = Client(id="123456", secret="secret")
token_info = Token(
    access_create_at=datetime.now(timezone.utc),
    access_expires_in=timedelta(minutes=2),
)
data = GenerateBasic(client=client, user_id="000000", token_info=token_info)

code = AuthorizeGenerate().token(data)
access, refresh = AccessGenerate().token(data, True)

jwt_gen = JWTAccessGenerate("", b"secret", "HS512")
signed_access, refresh = jwt_gen.token(data, True)
```

The JWT carries these claims:

- `aud`: a list holding the client ID.
- `sub`: the user ID.
- `exp`: the access creation time plus the access lifetime.
- `client_id`: the client ID.

When `signed_key_id` is set, the JWT header includes it as `kid`. If no
refresh token is requested, the refresh value is an empty string.

## Identifiers

```python
from oauthcore.models import legit_id, snowflake_to_uuid4, uuid4_to_snowflake

uuid4_to_snowflake(snowflake_to_uuid4(1234567890))  # 1234567890
legit_id()  # a 32-character hex string
```

## Redirect URIs

```python
from oauthcore.redirect import validate_redirect_uri

# Returns None when the host matches; raises InvalidRedirectURIError otherwise.
validate_redirect_uri("http://www.example.com", "http://www.example.com/cb?code=xxx")
```

## Permissions

```python
from oauthcore.access import Claims, PermissionService
from oauthcore.permission import Action, Permission, has_valid_permissions

perms = [
    Permission("ADMIN:NAMESPACE:LEGIT-GAMES:CLIENT", Action.CREATE_READ),
    Permission("ADMIN:NAMESPACE:LEGIT-GAMES:*", Action.READ),
]
has_valid_permissions(perms, "ADMIN:NAMESPACE:LEGIT-GAMES:DOCUMENT", Action.READ)  # True
has_valid_permissions(perms, "ADMIN:NAMESPACE:LEGIT-GAMES:CLIENT", Action.UPDATE)  # False

claims = Claims(
    permissions=["PUBLIC:ACCOUNT:{accountId}_READ"],
    account_id="user-123",
)
PermissionService().has_permission(claims, "PUBLIC:ACCOUNT:USER-123_READ")  # True
```

## What this package does not do

The package supplies the pieces an authorization server is built from. It
does not include:

- A manager that runs the grant flows end to end.
- Any storage for clients or tokens.
- An HTTP server or endpoints.
- User accounts or login.
- Database migrations.

Issuing, storing, looking up and revoking tokens is left to the code that
uses it.

## Running the tests

```
pip install -e ".[test]"
pytest
```