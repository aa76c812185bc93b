# repository/namespaces.py
from typing import Final

# Tier labels used in logs and /healthz.
REMOTE_TIER: Final[str] = "kv"
FS_TIER: Final[str] = "fs"


def namespaced_key(prefix: str, name: str) -> str:
    """Remote KV key for a document; the prefix isolates us in a shared store."""
    prefix = prefix.strip(":")
    return f"{prefix}:{name}" if prefix else name
