# repository/document_store.py
import copy
import logging
from pathlib import PurePath
from typing import Any, List, Optional, Sequence, TypeVar
import httpx
from config.admin_config import StorageConfig
from repository.backends import (
    DocumentMissing,
    FileSystemBackend,
    RemoteKVBackend,
    StorageBackend,
)
from util.errors import StorageError
from util.timing import timed

logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_backends(
    config: StorageConfig, transport: Optional[httpx.AsyncBaseTransport] = None
) -> List[StorageBackend]:
    """Priority order: remote KV (if fully configured), then each data dir."""
    backends: List[StorageBackend] = []
    if config.remote_enabled:
        backends.append(
            RemoteKVBackend(
                config.remote_url or "",
                config.remote_token or "",
                key_prefix=config.key_prefix,
                timeout=config.remote_timeout_seconds,
                transport=transport,
            )
        )
    backends.extend(FileSystemBackend(d) for d in config.data_dirs)
    return backends


def _check_name(name: str) -> None:
    if not name or not isinstance(name, str):
        raise ValueError("document name must be a non-empty string")
    if name in (".", "..") or PurePath(name).name != name or "\\" in name:
        raise ValueError(f"invalid document name: {name!r}")


class TieredDocumentStore:
    """
    Flow:
    - read: walk tiers in order, first tier that returns parseable JSON wins;
      errors and misses are logged and skipped; nothing found -> fallback.
    - write: walk tiers in order, first tier that accepts the write wins;
      later tiers are left untouched. All tiers failing -> StorageError.
    Tiers are tried one at a time, never in parallel.
    """

    def __init__(self, backends: Sequence[StorageBackend]) -> None:
        self._backends = tuple(backends)

    @classmethod
    def from_config(
        cls, config: StorageConfig, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "TieredDocumentStore":
        return cls(build_backends(config, transport))

    @property
    def tiers(self) -> List[str]:
        return [b.name for b in self._backends]

    async def read(self, name: str, fallback: T) -> Any:
        _check_name(name)
        with timed(logger, "storage.read", level=logging.DEBUG, doc=name):
            for backend in self._backends:
                try:
                    value = await backend.read(name)
                except DocumentMissing:
                    logger.debug("storage.read.miss tier=%s doc=%s", backend.name, name)
                    continue
                except Exception as e:
                    # Corrupt JSON, network or permission problems: try the next tier.
                    logger.warning(
                        "storage.read.tier_failed tier=%s doc=%s err=%s",
                        backend.name,
                        name,
                        type(e).__name__,
                    )
                    continue
                logger.debug("storage.read.hit tier=%s doc=%s", backend.name, name)
                return value

        logger.info("storage.read.fallback doc=%s", name)
        return copy.deepcopy(fallback)

    async def write(self, name: str, document: Any) -> str:
        """Persist `document`; returns the name of the tier that accepted it."""
        _check_name(name)
        last_error: Optional[BaseException] = None
        with timed(logger, "storage.write", doc=name):
            for backend in self._backends:
                try:
                    await backend.write(name, document)
                except Exception as e:
                    last_error = e
                    logger.warning(
                        "storage.write.tier_failed tier=%s doc=%s err=%s",
                        backend.name,
                        name,
                        type(e).__name__,
                    )
                    continue
                logger.info("storage.write.ok tier=%s doc=%s", backend.name, name)
                return backend.name

            if last_error is None:
                raise StorageError("No writable storage location available")
            raise StorageError(
                "No writable storage location available: "
                f"{type(last_error).__name__}: {last_error}"
            ) from last_error
