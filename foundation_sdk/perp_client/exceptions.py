"""Custom exceptions for the Foundation perpetual client."""

from typing import Any, Optional


class FoundationError(Exception):
    """Base exception for Foundation client operations."""


class JsonRpcError(FoundationError):
    """Raised when the engine answers a request with a JSON-RPC error object."""

    def __init__(self, code: int, message: str, data: Optional[Any] = None):
        super().__init__(f"JSON-RPC error {code}: {message}")
        self.code = code
        self.message = message
        self.data = data


class InvalidResponseError(FoundationError, ValueError):
    """Raised when a response is not a valid JSON-RPC envelope."""


class TransportClosedError(FoundationError):
    """Raised when the transport is closed before a response arrives."""
