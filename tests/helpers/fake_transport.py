"""In-memory JSON-RPC transport answering from canned results."""

from typing import Any, Callable, Optional, Union

import asyncio

from foundation_sdk.perp_client.transport import JsonRpcTransport

Handler = Union[Any, Callable[[list[Any]], Any]]


class FakeTransport(JsonRpcTransport):
    """
    Transport returning configured results per method.

    A handler is either a plain value, an exception instance to raise, or a
    callable receiving the params. Every request yields to the event loop once
    so concurrent callers interleave the way they would over a network.
    """

    def __init__(self, handlers: Optional[dict[str, Handler]] = None):
        super().__init__("fake://engine")
        self.handlers: dict[str, Handler] = dict(handlers or {})
        self.calls: list[tuple[str, list[Any]]] = []
        self.closed = False

    def calls_to(self, method: str) -> list[list[Any]]:
        return [params for called, params in self.calls if called == method]

    async def request(self, method: str, params: list[Any]) -> Any:
        self.calls.append((method, params))
        await asyncio.sleep(0)

        if method not in self.handlers:
            raise AssertionError(f"unexpected RPC method {method}")

        handler = self.handlers[method]
        if isinstance(handler, Exception):
            raise handler
        if callable(handler):
            return handler(params)
        return handler

    async def close(self) -> None:
        self.closed = True
