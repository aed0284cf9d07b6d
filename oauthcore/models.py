"""Client and token models, token requests and identifier generation."""

from __future__ import annotations

import string
import threading
import time
from dataclasses import dataclass, field, fields
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from oauthcore.constants import CodeChallengeMethod


@runtime_checkable
class ClientInfo(Protocol):
    """What the server needs to know about a client."""

    id: str
    secret: str
    domain: str
    public: bool
    user_id: str


@runtime_checkable
class ClientPasswordVerifier(Protocol):
    """A client that checks its own secret."""

    def verify_password(self, password: str) -> bool:
        ...


@dataclass
class Client:
    """A registered client."""

    id: str
    secret: str = ""
    domain: str = ""
    public: bool = False
    user_id: str = ""


def _jsonable(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: list(items) for key, items in value.items()}
    return value


@dataclass
class Token:
    """Authorization code, access and refresh token information."""

    client_id: str = ""
    user_id: str = ""
    redirect_uri: str = ""
    scope: str = ""
    code: str = ""
    code_challenge: str = ""
    code_challenge_method: Optional[CodeChallengeMethod] = None
    code_create_at: Optional[datetime] = None
    code_expires_in: timedelta = timedelta(0)
    access: str = ""
    access_create_at: Optional[datetime] = None
    access_expires_in: timedelta = timedelta(0)
    refresh: str = ""
    refresh_create_at: Optional[datetime] = None
    refresh_expires_in: timedelta = timedelta(0)
    extension: dict[str, list[str]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable mapping of the token's fields."""
        return {f.name: _jsonable(getattr(self, f.name)) for f in fields(self)}


@dataclass
class TokenGenerateRequest:
    """Parameters of a request to generate a token."""

    client_id: str = ""
    client_secret: str = ""
    user_id: str = ""
    redirect_uri: str = ""
    scope: str = ""
    code: str = ""
    code_challenge: str = ""
    code_challenge_method: Optional[CodeChallengeMethod] = None
    refresh: str = ""
    code_verifier: str = ""
    access_token_exp: timedelta = timedelta(0)
    request: Any = None


_EPOCH_MS = int(datetime(2020, 1, 1, tzinfo=timezone.utc).timestamp() * 1000)
_NODE_MASK = 0x3FF
_SEQUENCE_MASK = 0xFFF
_TIMESTAMP_MASK = (1 << 41) - 1
_MASK64 = (1 << 64) - 1
_MASK48 = (1 << 48) - 1


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class Snowflake:
    """Generates 64-bit ids: 41 bits of milliseconds, 10 of node, 12 of sequence."""

    def __init__(self, node_id: int, *, clock: Optional[Callable[[], int]] = None) -> None:
        self.node_id = node_id & _NODE_MASK
        self._clock = clock or _now_ms
        self._last_ms = 0
        self._sequence = 0
        self._lock = threading.Lock()

    def next(self) -> int:
        """Return the next id."""
        with self._lock:
            now = self._clock()
            if now == self._last_ms:
                self._sequence = (self._sequence + 1) & _SEQUENCE_MASK
                if self._sequence == 0:
                    while now <= self._last_ms:
                        now = self._clock()
            else:
                self._sequence = 0
            self._last_ms = now
            timestamp = (now - _EPOCH_MS) & _TIMESTAMP_MASK
            return (timestamp << 22) | (self.node_id << 12) | self._sequence


def snowflake_to_uuid4(snowflake_id: int) -> str:
    """Encode a 64-bit id as a hyphenless UUIDv4-shaped hex string."""
    value = snowflake_id & _MASK64
    raw = bytearray(16)
    raw[4:6] = (value >> 48).to_bytes(2, "big")
    raw[10:16] = (value & _MASK48).to_bytes(6, "big")
    raw[6] = (raw[6] & 0x0F) | 0x40
    raw[8] = (raw[8] & 0x3F) | 0x80
    return raw.hex()


def uuid4_to_snowflake(value: str) -> int:
    """Decode a string made by :func:`snowflake_to_uuid4` back to its id.

    Upper or lower case and hyphens are accepted; raises ValueError otherwise.
    """
    text = value.replace("-", "")
    if len(text) != 32:
        raise ValueError(f"invalid uuid length: {len(text)}")
    pairs = [text[start:start + 2] for start in range(0, 32, 2)]
    for index, pair in enumerate(pairs):
        if not all(char in string.hexdigits for char in pair):
            raise ValueError(f"invalid hex at byte {index}")
    raw = bytes(int(pair, 16) for pair in pairs)
    high = int.from_bytes(raw[4:6], "big")
    low = int.from_bytes(raw[10:16], "big")
    return (high << 48) | low


_default_snowflake = Snowflake(1)


def legit_id() -> str:
    """Return a new identifier: a node-1 snowflake encoded as a UUIDv4 string."""
    return snowflake_to_uuid4(_default_snowflake.next())