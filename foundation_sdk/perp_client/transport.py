"""
JSON-RPC transports for the Foundation engine.

Two transports share one JSON-RPC 2.0 envelope handling: request/response over
HTTP (httpx) and a persistent WebSocket (aiohttp) that multiplexes concurrent
requests by id. Transport failures are raised unchanged; nothing is retried.
"""

from typing import Any, Optional

import asyncio
import itertools
import json
import logging
from abc import ABC, abstractmethod

import aiohttp
import httpx

from foundation_sdk._version import SDK_VERSION
from foundation_sdk.perp_client.config import DEFAULT_REQUEST_TIMEOUT
from foundation_sdk.perp_client.exceptions import (
    FoundationError,
    InvalidResponseError,
    JsonRpcError,
    TransportClosedError,
)

SDK_HEADERS = {
    "X-SDK-Version": f"foundation-perp-sdk/{SDK_VERSION}",
    "User-Agent": f"foundation-perp-sdk/{SDK_VERSION}",
}


class JsonRpcTransport(ABC):
    """Base class for JSON-RPC transports."""

    def __init__(self, url: str, timeout: float = DEFAULT_REQUEST_TIMEOUT):
        self.url = url
        self.timeout = timeout
        self._ids = itertools.count(1)
        self.logger = logging.getLogger(f"foundation.perp_client.transport.{self.__class__.__name__}")

    def _build_request(self, method: str, params: list[Any]) -> dict[str, Any]:
        return {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params}

    def _parse_response(self, data: Any) -> Any:
        """
        Extract the result of a JSON-RPC response.

        Args:
            data: Decoded response body

        Returns:
            The ``result`` member, which may be None

        Raises:
            JsonRpcError: If the response carries an error object
            InvalidResponseError: If the body is not a JSON-RPC response
        """
        if not isinstance(data, dict):
            raise InvalidResponseError(f"Invalid JSON-RPC response: {data!r}")

        error = data.get("error")
        if error is not None:
            if not isinstance(error, dict):
                raise InvalidResponseError(f"Invalid JSON-RPC error object: {error!r}")
            raise JsonRpcError(int(error.get("code", 0)), str(error.get("message", "")), error.get("data"))

        if "result" not in data:
            raise InvalidResponseError(f"JSON-RPC response without result: {data!r}")

        return data["result"]

    @abstractmethod
    async def request(self, method: str, params: list[Any]) -> Any:
        """Send one request and return its result."""

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying connection."""


class HttpTransport(JsonRpcTransport):
    """JSON-RPC over HTTP POST."""

    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the transport.

        Args:
            url: HTTP(S) endpoint of the engine
            timeout: Request timeout in seconds
            client: Optional preconfigured httpx client, left open on close (will create one if not provided)
        """
        super().__init__(url, timeout)
        self._client = client or httpx.AsyncClient(headers=SDK_HEADERS, timeout=timeout)
        self._owns_client = client is None

    async def request(self, method: str, params: list[Any]) -> Any:
        payload = self._build_request(method, params)
        self.logger.debug(f"POST {self.url} {method} with params: {params}")

        response = await self._client.post(self.url, json=payload)
        if response.is_error:
            self.logger.error(f"{method} failed with HTTP {response.status_code}: {response.text}")
            response.raise_for_status()

        try:
            data = response.json()
        except ValueError:
            self.logger.error(f"Failed to parse JSON response: {response.text}")
            raise InvalidResponseError(f"{method} failed: Invalid JSON response")

        result = self._parse_response(data)
        self.logger.debug(f"{method} response: {result}")
        return result

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()


class WebSocketTransport(JsonRpcTransport):
    """JSON-RPC over a single WebSocket connection."""

    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initialize the transport. The connection is opened on the first request.

        Args:
            url: WS(S) endpoint of the engine
            timeout: Seconds to wait for each response
            session: Optional aiohttp session, left open on close (will create one if not provided)
        """
        super().__init__(url, timeout)
        self._session = session
        self._owns_session = session is None
        self._ws: Optional[aiohttp.ClientWebSocketResponse] = None
        self._reader: Optional[asyncio.Task] = None
        # requests awaiting a response on the current connection
        self._pending: dict[int, asyncio.Future] = {}
        self._connect_lock = asyncio.Lock()
        self._closed = False

    async def _ensure_connected(self) -> tuple[aiohttp.ClientWebSocketResponse, dict[int, asyncio.Future]]:
        if self._closed:
            raise TransportClosedError("Transport is closed")

        async with self._connect_lock:
            if self._ws is None or self._ws.closed:
                if self._session is None:
                    self._session = aiohttp.ClientSession(headers=SDK_HEADERS)
                self.logger.info(f"Connecting to {self.url}")
                self._ws = await self._session.ws_connect(self.url)
                self._pending = {}
                self._reader = asyncio.create_task(self._read_loop(self._ws, self._pending))

        return self._ws, self._pending

    async def _read_loop(self, ws: aiohttp.ClientWebSocketResponse, pending: dict[int, asyncio.Future]) -> None:
        try:
            async for msg in ws:
                if msg.type == aiohttp.WSMsgType.TEXT:
                    self._dispatch(msg.data, pending)
                elif msg.type == aiohttp.WSMsgType.ERROR:
                    self.logger.error(f"WebSocket error: {ws.exception()}")
                    break
        finally:
            self._fail_pending(pending, TransportClosedError("WebSocket connection closed"))

    def _dispatch(self, raw: str, pending: dict[int, asyncio.Future]) -> None:
        self.logger.debug(f"RAW WEBSOCKET MESSAGE: {raw!r}")
        try:
            data = json.loads(raw)
        except ValueError:
            self.logger.warning(f"Ignoring non-JSON message: {raw!r}")
            return

        request_id = data.get("id") if isinstance(data, dict) else None
        future = pending.pop(request_id, None) if request_id is not None else None
        if future is None or future.done():
            self.logger.debug(f"Ignoring message without pending request: {data}")
            return

        try:
            future.set_result(self._parse_response(data))
        except FoundationError as e:
            future.set_exception(e)

    @staticmethod
    def _fail_pending(pending: dict[int, asyncio.Future], error: Exception) -> None:
        futures = list(pending.values())
        pending.clear()
        for future in futures:
            if not future.done():
                future.set_exception(error)

    async def request(self, method: str, params: list[Any]) -> Any:
        ws, pending = await self._ensure_connected()
        payload = self._build_request(method, params)
        future: asyncio.Future = asyncio.get_running_loop().create_future()
        pending[payload["id"]] = future

        self.logger.debug(f"WS {self.url} {method} with params: {params}")
        try:
            await ws.send_json(payload)
            return await asyncio.wait_for(future, self.timeout)
        finally:
            pending.pop(payload["id"], None)

    async def close(self) -> None:
        self._closed = True
        if self._ws is not None:
            await self._ws.close()
        if self._reader is not None:
            await self._reader
        if self._session is not None and self._owns_session:
            await self._session.close()
        self._fail_pending(self._pending, TransportClosedError("Transport is closed"))


def create_transport(url: str, timeout: float = DEFAULT_REQUEST_TIMEOUT) -> JsonRpcTransport:
    """
    Create the transport matching the URL scheme.

    Args:
        url: Engine RPC URL; ``ws://`` and ``wss://`` select the WebSocket transport

    Returns:
        A WebSocket transport for WebSocket URLs, an HTTP transport otherwise
    """
    if url.startswith("ws"):
        return WebSocketTransport(url, timeout)
    return HttpTransport(url, timeout)
