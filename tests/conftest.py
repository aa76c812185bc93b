import os

# Keep tests hermetic: no login throttling, no .env pickup.
os.environ.pop("REDIS_URL", None)
os.environ["APP_ENV"] = "test"

from pathlib import Path
from typing import Dict, List, Optional

import httpx
import pytest

from config.admin_config import AuthConfig, StorageConfig
from core.credentials import hash_password

ADMIN_PASSWORD = "correct horse battery staple"
KV_URL = "https://kv.example.test"
KV_TOKEN = "kv-token"


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeKV:
    """In-memory stand-in for the REST key-value service."""

    def __init__(self) -> None:
        self.data: Dict[str, str] = {}
        self.requests: List[httpx.Request] = []
        self.fail_writes_with: Optional[str] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.headers.get("authorization") != f"Bearer {KV_TOKEN}":
            return httpx.Response(401, json={"error": "Unauthorized"})

        _, op, key = request.url.path.split("/", 2)
        if op == "get":
            return httpx.Response(200, json={"result": self.data.get(key)})
        if op == "set":
            if self.fail_writes_with:
                return httpx.Response(200, json={"error": self.fail_writes_with})
            self.data[key] = request.content.decode("utf-8")
            return httpx.Response(200, json={"result": "OK"})
        return httpx.Response(404, json={"error": "unknown command"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def unreachable_transport() -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return httpx.MockTransport(handler)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def auth_config() -> AuthConfig:
    return AuthConfig(
        password_hash=hash_password(ADMIN_PASSWORD),
        token_secret="unit-test-signing-secret",
        token_ttl_seconds=3600,
    )


@pytest.fixture()
def fake_kv() -> FakeKV:
    return FakeKV()


@pytest.fixture()
def data_dirs(tmp_path: Path) -> List[Path]:
    return [tmp_path / "primary", tmp_path / "secondary"]


@pytest.fixture()
def fs_only_config(data_dirs) -> StorageConfig:
    return StorageConfig(data_dirs=tuple(data_dirs))


@pytest.fixture()
def remote_config(data_dirs) -> StorageConfig:
    return StorageConfig(
        remote_url=KV_URL,
        remote_token=KV_TOKEN,
        key_prefix="portfolio:admin",
        data_dirs=tuple(data_dirs),
    )
