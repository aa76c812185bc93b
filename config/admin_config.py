# config/admin_config.py
import logging
import tempfile
from pathlib import Path
from typing import Iterable, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field
from config.settings import DEFAULT_ADMIN_PASSWORD_HASH, Settings

logger = logging.getLogger(__name__)


class AuthConfig(BaseModel):
    """
    Immutable auth settings resolved once at startup.

    - password_hash: lowercase hex SHA-256 of the single admin password.
    - token_secret: HMAC key for admin tokens.
    - token_ttl_seconds: lifetime of an issued token (0 = already expired).
    """

    model_config = ConfigDict(frozen=True)

    password_hash: str
    token_secret: str = Field(min_length=1)
    token_ttl_seconds: int = Field(default=12 * 60 * 60, ge=0)

    @classmethod
    def from_settings(cls, s: Settings) -> "AuthConfig":
        # An empty override counts as unset.
        password_hash = (
            (s.ADMIN_PASSWORD_HASH or "").strip().lower() or DEFAULT_ADMIN_PASSWORD_HASH
        )
        secret = s.ADMIN_TOKEN_SECRET
        if not secret:
            # Documented default: the credential hash doubles as signing key.
            logger.warning(
                "auth.config.secret_fallback using credential hash as token secret"
            )
            secret = password_hash
        return cls(
            password_hash=password_hash,
            token_secret=secret,
            token_ttl_seconds=s.ADMIN_TOKEN_TTL_SECONDS,
        )


class StorageConfig(BaseModel):
    """
    Immutable storage layout: optional remote KV + ordered filesystem dirs.
    """

    model_config = ConfigDict(frozen=True)

    remote_url: Optional[str] = None
    remote_token: Optional[str] = None
    key_prefix: str = ""
    remote_timeout_seconds: float = 10.0
    data_dirs: Tuple[Path, ...] = ()

    @property
    def remote_enabled(self) -> bool:
        return bool(self.remote_url and self.remote_token)

    @classmethod
    def from_settings(cls, s: Settings, cwd: Optional[Path] = None) -> "StorageConfig":
        base = cwd or Path.cwd()
        candidates = [
            Path(s.ADMIN_DATA_DIR).expanduser() if s.ADMIN_DATA_DIR else None,
            base / "data",
            Path(tempfile.gettempdir()) / s.ADMIN_TMP_DIR_NAME,
        ]
        return cls(
            remote_url=(s.KV_REST_API_URL or "").rstrip("/") or None,
            remote_token=s.KV_REST_API_TOKEN or None,
            key_prefix=s.ADMIN_KV_PREFIX,
            remote_timeout_seconds=s.ADMIN_KV_TIMEOUT_SECONDS,
            data_dirs=dedupe_dirs(candidates),
        )


def dedupe_dirs(candidates: Iterable[Optional[Path]]) -> Tuple[Path, ...]:
    """Drop empty entries and repeats, keeping first-seen priority."""
    out: list[Path] = []
    seen: set[Path] = set()
    for d in candidates:
        if d is None:
            continue
        key = d.resolve()
        if key in seen:
            continue
        seen.add(key)
        out.append(d)
    return tuple(out)
