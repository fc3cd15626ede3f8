"""Store gateways: whole-node reads and writes against the pal database.

Every gateway matches the protocol:

    async def read(self, collection: str) -> Any | None: ...
    async def write(self, collection: str, value: Any) -> None: ...

`collection` is one of the logical names in COLLECTIONS. A read of a node
that does not exist returns None. A write replaces the node entirely; no
field-level updates are ever issued. Failures raise StoreUnavailable and are
not retried.

Three implementations are provided:

    FirebaseGateway : Firebase Realtime Database REST API over httpx.
    JsonFileGateway : one JSON file per collection under a base directory.
    MemoryGateway   : in-process dict. Used by tests and demos.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Protocol

import httpx

from palbox.errors import StoreUnavailable

logger = logging.getLogger(__name__)

# Logical collection → database key used by the deployed database.
COLLECTIONS: dict[str, str] = {
    "species": "pals",
    "traits": "passive_skills",
    "trait_combos": "passive_skill_combos",
    "stored_records": "stored_pals",
}


def collection_key(collection: str) -> str:
    try:
        return COLLECTIONS[collection]
    except KeyError:
        raise ValueError(f"Unknown collection: {collection!r}") from None


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------

class StoreGateway(Protocol):
    async def read(self, collection: str) -> Any | None: ...

    async def write(self, collection: str, value: Any) -> None: ...


# ---------------------------------------------------------------------------
# FirebaseGateway
# ---------------------------------------------------------------------------

class FirebaseGateway:
    """Reads and writes whole nodes through the Realtime Database REST API.

      read   GET {database_url}/{key}.json     → JSON body, `null` when absent
      write  PUT {database_url}/{key}.json     ← JSON body

    Args:
        database_url: e.g. "https://my-app-default-rtdb.firebasedatabase.app".
        auth:         Database secret or ID token, sent as `?auth=`. Optional.
        timeout:      HTTP timeout in seconds. Defaults to 10.
    """

    def __init__(self, database_url: str, auth: str = "", timeout: float = 10.0) -> None:
        self._base_url = database_url.rstrip("/")
        self._auth = auth
        self._timeout = timeout

    def _url(self, collection: str) -> str:
        return f"{self._base_url}/{collection_key(collection)}.json"

    def _params(self) -> dict[str, str]:
        return {"auth": self._auth} if self._auth else {}

    async def _request(self, method: str, collection: str, body: Any = None) -> httpx.Response:
        url = self._url(collection)
        logger.debug("firebase %s %s", method, url)
        kwargs: dict[str, Any] = {"params": self._params()}
        if method == "PUT":
            kwargs["json"] = body
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.request(method, url, **kwargs)
                resp.raise_for_status()
        except httpx.ConnectError as e:
            raise StoreUnavailable(f"Cannot connect to database at {self._base_url}") from e
        except httpx.HTTPStatusError as e:
            raise StoreUnavailable(
                f"Database returned HTTP {e.response.status_code} for {collection}"
            ) from e
        except httpx.TimeoutException as e:
            raise StoreUnavailable(f"Database timed out after {self._timeout}s") from e
        except httpx.RequestError as e:
            raise StoreUnavailable(f"Database request failed: {e}") from e
        return resp

    async def read(self, collection: str) -> Any | None:
        resp = await self._request("GET", collection)
        try:
            return resp.json()
        except ValueError as e:
            raise StoreUnavailable(f"Database returned invalid JSON for {collection}") from e

    async def write(self, collection: str, value: Any) -> None:
        await self._request("PUT", collection, value)


# ---------------------------------------------------------------------------
# JsonFileGateway
# ---------------------------------------------------------------------------

class JsonFileGateway:
    """Local stand-in for the database: {base}/{key}.json per collection."""

    def __init__(self, base_path: Path) -> None:
        self._base = base_path
        self._base.mkdir(parents=True, exist_ok=True)

    def path_for(self, collection: str) -> Path:
        return self._base / f"{collection_key(collection)}.json"

    async def read(self, collection: str) -> Any | None:
        path = self.path_for(collection)
        if not path.is_file():
            return None
        try:
            return json.loads(path.read_text())
        except (OSError, ValueError) as e:
            raise StoreUnavailable(f"Cannot read {path}") from e

    async def write(self, collection: str, value: Any) -> None:
        path = self.path_for(collection)
        try:
            path.write_text(json.dumps(value, indent=2))
        except OSError as e:
            raise StoreUnavailable(f"Cannot write {path}") from e


# ---------------------------------------------------------------------------
# MemoryGateway
# ---------------------------------------------------------------------------

class MemoryGateway:
    """Holds collections in a dict keyed by database key.

    Values are deep-copied on the way in and out, like a JSON round trip, so
    callers can't alias stored state.
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self.data: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    async def read(self, collection: str) -> Any | None:
        return copy.deepcopy(self.data.get(collection_key(collection)))

    async def write(self, collection: str, value: Any) -> None:
        self.data[collection_key(collection)] = copy.deepcopy(value)
