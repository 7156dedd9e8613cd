"""HTTP backend — pass-through to a real server via httpx.

``read`` becomes ``GET base_url + address``; ``write`` becomes ``POST`` with
a JSON body. The outcome of the network call is reported as-is: 2xx
resolves with the decoded body, anything else raises ``ServiceError``.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from warble.errors import ServiceError

logger = logging.getLogger("warble.proxy")


class HttpProxy:
    """Proxy that talks to a real backend.

    Owns one ``httpx.AsyncClient``. Use as an async context manager or
    call ``aclose()`` when done::

        async with HttpProxy("http://localhost:8000") as proxy:
            products = await proxy.read("/products/search/glove")

    ``transport`` is passed through to httpx (tests use
    ``httpx.MockTransport``).
    """

    __slots__ = ("_client", "base_url")

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Accept": "application/json", **(headers or {})},
            transport=transport,
        )

    async def __aenter__(self) -> HttpProxy:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def read(self, address: str) -> Any:
        """``GET`` *address*."""
        return await self._send("GET", address)

    async def write(self, address: str, body: Any) -> Any:
        """``POST`` *body* as JSON to *address*."""
        return await self._send("POST", address, json=body)

    async def _send(self, method: str, address: str, **kwargs: Any) -> Any:
        logger.debug("%s %s%s", method, self.base_url, address)
        try:
            response = await self._client.request(method, address, **kwargs)
        except httpx.HTTPError as exc:
            detail = str(exc) or type(exc).__name__
            raise ServiceError(detail) from exc

        if response.status_code >= 400:
            raise ServiceError(response.text or response.reason_phrase, status=response.status_code)

        if not response.content:
            return None
        if "json" in response.headers.get("content-type", ""):
            try:
                return response.json()
            except ValueError as exc:
                msg = f"Invalid JSON in response: {exc}"
                raise ServiceError(msg, status=response.status_code) from exc
        return response.text
