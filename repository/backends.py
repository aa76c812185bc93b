# repository/backends.py
import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Optional, Protocol
from urllib.parse import quote
import httpx
from repository.namespaces import FS_TIER, REMOTE_TIER, namespaced_key


class DocumentMissing(Exception):
    """The tier answered, but holds nothing under that name."""


class BackendError(Exception):
    """The tier could not answer (transport, status or envelope problem)."""


class StorageBackend(Protocol):
    """
    One tier of the document store.

    read() returns the decoded document, raises DocumentMissing when absent and
    anything else when the tier is unusable. write() returns on success and
    raises on failure.
    """

    name: str

    async def read(self, doc_name: str) -> Any: ...

    async def write(self, doc_name: str, document: Any) -> None: ...


class RemoteKVBackend:
    """
    Upstash-style REST key-value service.

    GET  <url>/get/<key>  -> {"result": "<json string>" | null, "error"?: str}
    POST <url>/set/<key>  body = JSON document, same envelope.
    """

    def __init__(
        self,
        url: str,
        token: str,
        *,
        key_prefix: str = "",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._url = url.rstrip("/")
        self._token = token
        self._prefix = key_prefix
        self._timeout = httpx.Timeout(timeout, connect=min(timeout, 5.0))
        self._transport = transport
        self.name = REMOTE_TIER

    def _endpoint(self, op: str, doc_name: str) -> str:
        key = namespaced_key(self._prefix, doc_name)
        return f"{self._url}/{op}/{quote(key, safe='')}"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._timeout,
            transport=self._transport,
            headers={"Authorization": f"Bearer {self._token}"},
        )

    @staticmethod
    def _envelope(res: httpx.Response) -> dict:
        if res.status_code // 100 != 2:
            raise BackendError(f"status={res.status_code}")
        try:
            body = res.json()
        except ValueError as e:
            raise BackendError("non-JSON response") from e
        if not isinstance(body, dict):
            raise BackendError("unexpected response shape")
        if body.get("error"):
            raise BackendError(f"remote error: {body['error']}")
        return body

    async def read(self, doc_name: str) -> Any:
        async with self._client() as client:
            res = await client.get(self._endpoint("get", doc_name))
        result = self._envelope(res).get("result")
        if result is None:
            raise DocumentMissing(doc_name)
        if not isinstance(result, str):
            raise BackendError("result is not a string")
        return json.loads(result)

    async def write(self, doc_name: str, document: Any) -> None:
        payload = json.dumps(document)
        async with self._client() as client:
            res = await client.post(
                self._endpoint("set", doc_name),
                content=payload.encode("utf-8"),
                headers={"content-type": "application/json"},
            )
        self._envelope(res)


class FileSystemBackend:
    """A directory holding one <name> JSON file per document."""

    def __init__(self, directory: Path) -> None:
        self._dir = Path(directory)
        self.name = f"{FS_TIER}:{self._dir}"

    async def read(self, doc_name: str) -> Any:
        return await asyncio.to_thread(self._read_sync, self._dir / doc_name)

    async def write(self, doc_name: str, document: Any) -> None:
        text = json.dumps(document, indent=2)
        await asyncio.to_thread(self._write_sync, self._dir / doc_name, text)

    @staticmethod
    def _read_sync(path: Path) -> Any:
        try:
            data = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise DocumentMissing(path.name) from e
        return json.loads(data)

    @staticmethod
    def _write_sync(path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        # Write-then-rename so readers never see a half-written document.
        fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp, path)
        except BaseException:
            try:
                os.unlink(tmp)
            except OSError:
                pass
            raise
