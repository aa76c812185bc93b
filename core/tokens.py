# core/tokens.py
"""
Stateless admin tokens.

Wire form: ``<b64url(json payload)>.<b64url(hmac-sha256(secret, payload segment))>``
with ``payload = {"exp": <epoch ms>}`` and unpadded base64url segments.

There is no server-side record of issued tokens, so expiry is the only way a
token stops working.
"""
import base64
import binascii
import hashlib
import hmac
import json
import time
from typing import Callable, Optional
from config.admin_config import AuthConfig
from util.constants import BEARER_PREFIX

SEPARATOR = "."

Clock = Callable[[], float]


def b64url_encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def b64url_decode(segment: str) -> bytes:
    padded = segment + "=" * (-len(segment) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii"))


def _sign(secret: str, encoded_payload: str) -> str:
    digest = hmac.new(
        secret.encode("utf-8"), encoded_payload.encode("ascii"), hashlib.sha256
    ).digest()
    return b64url_encode(digest)


def _now_ms(clock: Clock) -> int:
    return int(clock() * 1000)


class TokenIssuer:
    def __init__(self, config: AuthConfig, clock: Clock = time.time) -> None:
        self._secret = config.token_secret
        self._ttl_ms = config.token_ttl_seconds * 1000
        self._clock = clock

    def issue(self) -> str:
        payload = {"exp": _now_ms(self._clock) + self._ttl_ms}
        encoded = b64url_encode(
            json.dumps(payload, separators=(",", ":")).encode("utf-8")
        )
        return f"{encoded}{SEPARATOR}{_sign(self._secret, encoded)}"


class TokenValidator:
    def __init__(self, config: AuthConfig, clock: Clock = time.time) -> None:
        self._secret = config.token_secret
        self._clock = clock

    def validate(self, token: Optional[str]) -> bool:
        """
        True only for an untampered token whose exp is still in the future.
        Malformed input of any kind is False, never an exception.
        """
        if not token or not isinstance(token, str):
            return False

        parts = token.split(SEPARATOR)
        if len(parts) != 2:
            return False
        encoded, signature = parts
        if not encoded or not signature:
            return False

        try:
            expected = _sign(self._secret, encoded)
        except UnicodeEncodeError:
            return False

        received_b = signature.encode("utf-8")
        expected_b = expected.encode("ascii")
        if len(received_b) != len(expected_b) or not hmac.compare_digest(
            received_b, expected_b
        ):
            return False

        try:
            payload = json.loads(b64url_decode(encoded).decode("utf-8"))
        except (binascii.Error, ValueError):
            return False

        if not isinstance(payload, dict):
            return False
        exp = payload.get("exp")
        if isinstance(exp, bool) or not isinstance(exp, int):
            return False
        return exp > _now_ms(self._clock)

    def verify_request(self, authorization: Optional[str]) -> bool:
        return self.validate(extract_bearer_token(authorization))


def extract_bearer_token(authorization: Optional[str]) -> str:
    """Token from an ``Authorization: Bearer <token>`` header, else ""."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return ""
    return authorization[len(BEARER_PREFIX):].strip()
