"""
Foundation Perpetual Client - Client for the Foundation perpetual futures engine.

This package signs and submits orders, cancellations and trading-key links, and
queries markets, order books and accounts over JSON-RPC.
"""

from foundation_sdk.perp_client.auth.signatures import LocalKeySigner, TypedData, TypedDataSigner
from foundation_sdk.perp_client.client import FoundationPerpClient
from foundation_sdk.perp_client.config import TESTNET_RPC_URL, ClientConfig
from foundation_sdk.perp_client.engine import FoundationPerpEngine
from foundation_sdk.perp_client.exceptions import (
    FoundationError,
    InvalidResponseError,
    JsonRpcError,
    TransportClosedError,
)

__all__ = [
    "ClientConfig",
    "FoundationError",
    "FoundationPerpClient",
    "FoundationPerpEngine",
    "InvalidResponseError",
    "JsonRpcError",
    "LocalKeySigner",
    "TESTNET_RPC_URL",
    "TransportClosedError",
    "TypedData",
    "TypedDataSigner",
]
