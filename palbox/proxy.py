"""Client for the secondary pal backend.

The older standalone backend exposes the same operations over plain HTTP and
wraps every successful payload as {"message": ...}:

    POST   /add-pal                 {"name", "gender": "m"|"f", "passive_skills"}
    DELETE /remove-pal              {"name", "id"}
    GET    /store                   → {"message": [PalView, ...]}
    GET    /options/pal-species     → {"message": [name, ...]}
    GET    /options/passive-skills  → {"message": [name, ...]}

BackendClient forwards to it. Errors from any call raise BackendError with
the upstream status (502 when the backend could not be reached).
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from palbox.validation import normalize_gender

logger = logging.getLogger(__name__)


class BackendError(RuntimeError):
    """Raised when the secondary backend cannot be reached or rejects a call."""

    def __init__(self, message: str, status_code: int = 502) -> None:
        super().__init__(message)
        self.status_code = status_code


class BackendClient:
    """Async HTTP client for the secondary backend.

    Args:
        base_url: Backend root, e.g. "http://localhost:8080".
        timeout:  HTTP timeout in seconds. Defaults to 10.
    """

    def __init__(self, base_url: str, timeout: float = 10.0) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def _call(self, method: str, path: str, body: Any = None) -> Any:
        url = f"{self._base_url}{path}"
        logger.debug("backend %s %s", method, url)
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.request(
                    method, url, json=body, headers={"Content-Type": "application/json"}
                )
        except httpx.ConnectError as e:
            raise BackendError(f"Cannot connect to backend at {self._base_url}") from e
        except httpx.TimeoutException as e:
            raise BackendError(f"Backend timed out after {self._timeout}s") from e
        except httpx.RequestError as e:
            raise BackendError(f"Backend request failed: {e}") from e

        if resp.is_error:
            raise BackendError(self._error_message(resp), resp.status_code)
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise BackendError("Backend returned invalid JSON") from e

    @staticmethod
    def _error_message(resp: httpx.Response) -> str:
        try:
            data = resp.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        return f"Backend returned HTTP {resp.status_code}"

    @staticmethod
    def _unwrap(data: Any) -> list[Any]:
        if isinstance(data, dict):
            return data.get("message") or []
        return []

    async def add_pal(self, name: str, gender: str, passive_skills: list[str]) -> None:
        payload = {
            "name": name,
            "gender": normalize_gender(gender),
            "passive_skills": passive_skills,
        }
        await self._call("POST", "/add-pal", payload)

    async def remove_pal(self, name: str, record_id: int) -> None:
        await self._call("DELETE", "/remove-pal", {"name": name, "id": record_id})

    async def list_pals(self) -> list[Any]:
        return self._unwrap(await self._call("GET", "/store"))

    async def species_options(self) -> list[Any]:
        return self._unwrap(await self._call("GET", "/options/pal-species"))

    async def trait_options(self) -> list[Any]:
        return self._unwrap(await self._call("GET", "/options/passive-skills"))
