"""
Foundation SDK - Python SDK for interacting with Foundation services.

This package provides modules for interacting with Foundation services:
- perp_client: For trading on the Foundation perpetual futures engine over JSON-RPC
"""

from foundation_sdk._version import SDK_VERSION
from foundation_sdk.perp_client import (
    ClientConfig,
    FoundationPerpClient,
    FoundationPerpEngine,
    LocalKeySigner,
    TypedDataSigner,
)

__all__ = [
    "SDK_VERSION",
    "ClientConfig",
    "FoundationPerpClient",
    "FoundationPerpEngine",
    "LocalKeySigner",
    "TypedDataSigner",
]
